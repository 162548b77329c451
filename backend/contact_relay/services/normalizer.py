"""
Submission normalizer.

Converts raw form fields into a NormalizedSubmission the templates can render
without further checks: every text field is a string, the message has its
line breaks turned into ``<br/>`` and the email has been trimmed and checked.

Field names accepted (first match wins):
  name     — fullName, name
  email    — email
  phone    — phone
  message  — queryDescription, message
  car_*    — carMake, carModel, carReg
"""

import re
from typing import Optional

from contact_relay.models.submission import NormalizedSubmission
from contact_relay.services.form_fields import RawFormFields, first_value

NO_NAME = "No name"
NO_EMAIL = "No email"
NO_PHONE = "No phone"

# Loose on purpose: something@something.something with no whitespace.
# Anything stricter could drop reply-to addresses that used to be accepted.
EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")


def _pick(fields: RawFormFields, *names: str) -> Optional[str]:
    """Return the first of ``names`` present in ``fields`` (empty strings count)."""
    for name in names:
        value = first_value(fields.get(name))
        if value is not None:
            return value
    return None


def is_valid_email(email: Optional[str]) -> bool:
    """True if ``email`` (after trimming) looks like an address."""
    if not email:
        return False
    email = email.strip()
    return bool(email) and EMAIL_PATTERN.search(email) is not None


def format_message(message: str) -> str:
    """Replace every newline with an HTML line break."""
    return message.replace("\n", "<br/>")


def normalize_submission(fields: RawFormFields) -> NormalizedSubmission:
    """
    Build a NormalizedSubmission from raw form fields.

    Never raises for missing or oddly shaped fields; absent values are
    replaced by "No name" / "No email" / "No phone" / "".
    """
    name = _pick(fields, "fullName", "name")
    phone = _pick(fields, "phone")
    message = _pick(fields, "queryDescription", "message")
    email = _pick(fields, "email")

    email = (email if email is not None else NO_EMAIL).strip()

    return NormalizedSubmission(
        name=name if name is not None else NO_NAME,
        email=email,
        phone=phone if phone is not None else NO_PHONE,
        message=format_message(message if message is not None else ""),
        car_make=_pick(fields, "carMake"),
        car_model=_pick(fields, "carModel"),
        car_reg=_pick(fields, "carReg"),
        has_valid_email=is_valid_email(email),
    )
