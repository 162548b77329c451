#!/usr/bin/env python3
"""
Dev helper: post a test form submission to the local Contact Relay backend.

Builds the same multipart/form-data request the website form sends, optionally
with image attachments, and POSTs it to the /api/send endpoint.

Usage
-----
# Basic contact submission, targeting localhost:8000
python scripts/send_test_submission.py

# Quote request (adds carMake/carModel/carReg)
python scripts/send_test_submission.py --quote

# Attach one or more images
python scripts/send_test_submission.py --image front.jpg --image back.png

# Show what would be sent without sending
python scripts/send_test_submission.py --quote --dry-run

# Target a different backend URL
python scripts/send_test_submission.py --url http://staging.example.com
"""

import argparse
import json
import sys
import textwrap
from pathlib import Path

import httpx


# ---------------------------------------------------------------------------
# Form builders
# ---------------------------------------------------------------------------

def _build_fields(args: argparse.Namespace) -> dict:
    """Return the text fields for the submission."""
    fields = {
        "fullName": args.name,
        "email": args.email,
        "phone": args.phone,
        "message": args.message,
    }
    if args.quote:
        fields.update(
            {
                "carMake": args.car_make,
                "carModel": args.car_model,
                "carReg": args.car_reg,
            }
        )
    return fields


def _detect_content_type(filename: str) -> str:
    ext = Path(filename).suffix.lower()
    return {
        ".jpg": "image/jpeg",
        ".jpeg": "image/jpeg",
        ".png": "image/png",
        ".gif": "image/gif",
        ".webp": "image/webp",
        ".heic": "image/heic",
    }.get(ext, "application/octet-stream")


def _build_files(paths: list[str]) -> list[tuple]:
    """Return httpx multipart file tuples, all under the ``images`` field."""
    files = []
    for raw in paths:
        path = Path(raw)
        files.append(
            ("images", (path.name, path.read_bytes(), _detect_content_type(path.name)))
        )
    return files


# ---------------------------------------------------------------------------
# Pretty printer
# ---------------------------------------------------------------------------

def _print_response(response: httpx.Response) -> None:
    status = response.status_code
    symbol = "OK" if status == 200 else "FAIL"
    print(f"\n[{symbol}] HTTP {status}")
    try:
        print(json.dumps(response.json(), indent=2))
    except ValueError:
        print(response.text)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> int:
    parser = argparse.ArgumentParser(
        prog="send_test_submission.py",
        description="Post a test contact or quote form submission to the backend.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""\
            Examples:
              python scripts/send_test_submission.py
              python scripts/send_test_submission.py --quote --image front.jpg
              python scripts/send_test_submission.py --url http://localhost:8001
        """),
    )
    parser.add_argument(
        "--url",
        default="http://localhost:8000",
        help="Backend base URL (default: http://localhost:8000)",
    )
    parser.add_argument("--name", default="Jane Doe", help='Full name (default: "Jane Doe")')
    parser.add_argument("--email", default="jane@example.com", help="Submitter email")
    parser.add_argument("--phone", default="07700 900123", help="Submitter phone")
    parser.add_argument(
        "--message",
        default="Hi,\nPlease get in touch about a repair.",
        help="Message body (newlines become <br/> in the email)",
    )
    parser.add_argument(
        "--quote",
        action="store_true",
        help="Send a quote request (adds vehicle fields).",
    )
    parser.add_argument("--car-make", default="Ford")
    parser.add_argument("--car-model", default="Focus")
    parser.add_argument("--car-reg", default="AB12 CDE")
    parser.add_argument(
        "--image",
        action="append",
        default=[],
        metavar="PATH",
        help="Image to attach under the 'images' field. Repeatable.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the form fields without sending.",
    )

    args = parser.parse_args()

    missing = [p for p in args.image if not Path(p).exists()]
    if missing:
        print(f"ERROR: File not found: {', '.join(missing)}", file=sys.stderr)
        return 1

    fields = _build_fields(args)
    files = _build_files(args.image)
    endpoint = f"{args.url.rstrip('/')}/api/send"

    print(f"Endpoint  : {endpoint}")
    print(f"Type      : {'quote' if args.quote else 'contact'}")
    print(f"Images    : {len(files)}")

    if args.dry_run:
        print("\n[DRY RUN] Fields:")
        print(json.dumps(fields, indent=2))
        return 0

    try:
        response = httpx.post(endpoint, data=fields, files=files or None, timeout=30)
    except httpx.ConnectError:
        print(
            f"\nERROR: Could not connect to {endpoint}\n"
            "Is the backend running? Start it with:\n"
            "  cd backend && uvicorn contact_relay.main:app --reload",
            file=sys.stderr,
        )
        return 1

    _print_response(response)
    return 0 if response.status_code == 200 else 1


if __name__ == "__main__":
    sys.exit(main())
