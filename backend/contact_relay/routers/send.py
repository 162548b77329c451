"""
Form submission router.

Accepts the website's contact / quote form as multipart/form-data and relays
it as a notification email through Resend.

Endpoints:
  POST    /    — parse form, build notification, send it
  OPTIONS /    — CORS preflight (204, empty body)
  other        — 405 "Method Not Allowed"

Every response, errors included, carries the CORS headers below; 405s for
unregistered methods are produced by ``method_not_allowed``. The route
reads the raw body itself (no Form/File parameters) so repeated ``images``
parts all reach the parser.

Responses:
  200  {"success": true}
  500  {"error": "Form parsing failed"}
  500  {"success": false, "error": "Failed to send email"}
  500  {"success": false, "error": "Unexpected error occurred"}
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from contact_relay.config import Settings, get_settings
from contact_relay.mailer import EmailSender, get_email_sender
from contact_relay.services.attachments import collect_attachments
from contact_relay.services.email_template import build_email_payload
from contact_relay.services.form_fields import (
    describe_fields,
    fields_from_form,
    files_from_form,
)
from contact_relay.services.normalizer import normalize_submission

logger = logging.getLogger(__name__)

router = APIRouter()

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

SEND_PREFIX = "/api/send"
_ALLOWED_METHODS = ["POST", "OPTIONS"]

IMAGES_FIELD = "images"


def _json(status_code: int, content: dict) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=content, headers=CORS_HEADERS)


def method_not_allowed() -> PlainTextResponse:
    """
    Response for any method other than POST or OPTIONS.

    The router only registers POST and OPTIONS; the app-level HTTPException
    handler in main.py turns the framework's 405 into this response so the
    body is plain text and the CORS headers are present for every verb.
    """
    return PlainTextResponse("Method Not Allowed", status_code=405, headers=CORS_HEADERS)


@router.api_route("", methods=_ALLOWED_METHODS, include_in_schema=False)
@router.api_route("/", methods=_ALLOWED_METHODS)
async def send_submission(
    request: Request,
    sender: EmailSender = Depends(get_email_sender),
    settings: Settings = Depends(get_settings),
) -> Response:
    """Relay one contact or quote form submission as an email."""
    if request.method == "OPTIONS":
        return Response(status_code=204, headers=CORS_HEADERS)

    try:
        form = await request.form(
            max_files=settings.max_form_files,
            max_fields=settings.max_form_fields,
        )
    except Exception as exc:
        # Exceeding a part limit surfaces here too; log the limits in force.
        logger.error(
            f"Form parsing failed (max_files={settings.max_form_files}, "
            f"max_fields={settings.max_form_fields}): {exc}"
        )
        return _json(500, {"error": "Form parsing failed"})

    try:
        fields = fields_from_form(form)
        files = files_from_form(form)

        if settings.log_form_payloads:
            logger.info("Parsed form fields: %s", describe_fields(fields))
            logger.info(
                "Parsed form files: %s",
                {k: len(v) if isinstance(v, list) else 1 for k, v in files.items()},
            )

        submission = normalize_submission(fields)
        attachments = await collect_attachments(
            files.get(IMAGES_FIELD),
            default_content_type=settings.default_attachment_content_type,
            log_uploads=settings.log_form_payloads,
        )
        payload = build_email_payload(submission, attachments, settings)

        result = await run_in_threadpool(sender.send, payload)

        if settings.log_form_payloads:
            logger.info("Final email payload: %s", payload.summary())

        if not result.ok:
            logger.error(f"Resend error: {result.error}")
            return _json(500, {"success": False, "error": "Failed to send email"})

        logger.info(
            f"Sent {'quote' if submission.is_quote else 'contact'} notification "
            f"(id={result.id}, attachments={len(attachments)})"
        )
        return _json(200, {"success": True})

    except Exception:
        logger.exception("Unexpected error while relaying form submission")
        return _json(500, {"success": False, "error": "Unexpected error occurred"})

    finally:
        await form.close()
