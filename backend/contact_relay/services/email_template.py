"""
Notification email templates.

Two variants, chosen only by ``NormalizedSubmission.is_quote``:
  - quote request    (vehicle fields supplied; car line shown)
  - contact request  (no vehicle fields)

Public API:
  render_subject(submission) -> str
  render_html(submission, site_name) -> str
  build_email_payload(submission, attachments, settings) -> EmailPayload
"""

from typing import Optional

from contact_relay.config import Settings
from contact_relay.models.submission import Attachment, EmailPayload, NormalizedSubmission

UNKNOWN = "Unknown"

QUOTE_SUBJECT = "New Quote Request from {name}"
CONTACT_SUBJECT = "New Contact Form Submission from {name}"

QUOTE_HTML = """
<h2>New Quote Request from {site_name}</h2>
<p><strong>Name:</strong> {name}</p>
<p><strong>Email:</strong> {email}</p>
<p><strong>Phone:</strong> {phone}</p>
<p><strong>Car:</strong> {car_make} {car_model} ({car_reg})</p>
<p><strong>Message:</strong><br/>{message}</p>
"""

CONTACT_HTML = """
<h2>New Contact Form Submission from {site_name}</h2>
<p><strong>Name:</strong> {name}</p>
<p><strong>Email:</strong> {email}</p>
<p><strong>Phone:</strong> {phone}</p>
<p><strong>Message:</strong><br/>{message}</p>
"""


def _or_unknown(value: Optional[str]) -> str:
    # Only a missing field is "Unknown"; an empty string is printed as-is.
    return UNKNOWN if value is None else value


def render_subject(submission: NormalizedSubmission) -> str:
    template = QUOTE_SUBJECT if submission.is_quote else CONTACT_SUBJECT
    return template.format(name=submission.name)


def render_html(submission: NormalizedSubmission, site_name: str) -> str:
    if submission.is_quote:
        return QUOTE_HTML.format(
            site_name=site_name,
            name=submission.name,
            email=submission.email,
            phone=submission.phone,
            car_make=_or_unknown(submission.car_make),
            car_model=_or_unknown(submission.car_model),
            car_reg=_or_unknown(submission.car_reg),
            message=submission.message,
        )
    return CONTACT_HTML.format(
        site_name=site_name,
        name=submission.name,
        email=submission.email,
        phone=submission.phone,
        message=submission.message,
    )


def build_email_payload(
    submission: NormalizedSubmission,
    attachments: list[Attachment],
    settings: Settings,
) -> EmailPayload:
    """
    Assemble the outbound notification.

    The sender depends on the submission type; the recipients are fixed by
    configuration. ``reply_to`` is only set for a syntactically valid email,
    never to the "No email" placeholder.
    """
    return EmailPayload(
        sender=settings.mail_from_quote if submission.is_quote else settings.mail_from_contact,
        to=list(settings.mail_to),
        subject=render_subject(submission),
        html=render_html(submission, settings.site_name),
        attachments=attachments,
        reply_to=submission.email if submission.has_valid_email else None,
    )
