"""
Pydantic models for a website form submission and the notification it becomes.

Models:
  NormalizedSubmission  — form fields after defaulting / first-value extraction
  Attachment            — one uploaded file, read fully into memory
  EmailPayload          — outbound notification handed to the email sender
  SendResult            — what the email sender reports back

All of these live for a single request only; nothing is persisted.
"""

from typing import Any, Optional

from pydantic import BaseModel, computed_field


class NormalizedSubmission(BaseModel):
    """
    Form fields as the templates see them.

    Text fields are always strings (missing values are replaced with
    placeholders by the normalizer). The car fields stay None when absent so
    the quote template can print "Unknown" for them.
    """

    name: str = "No name"
    email: str = "No email"
    phone: str = "No phone"
    message: str = ""
    car_make: Optional[str] = None
    car_model: Optional[str] = None
    car_reg: Optional[str] = None
    has_valid_email: bool = False

    @computed_field  # type: ignore[misc]
    @property
    def is_quote(self) -> bool:
        """True when any vehicle field was supplied with a non-empty value."""
        return bool(self.car_make or self.car_model or self.car_reg)


class Attachment(BaseModel):
    """A single uploaded file, already read to raw bytes."""

    filename: str
    content: bytes
    content_type: str


class EmailPayload(BaseModel):
    """Outbound notification email, provider-agnostic."""

    sender: str
    to: list[str]
    subject: str
    html: str
    attachments: list[Attachment] = []
    reply_to: Optional[str] = None

    def to_resend_params(self) -> dict[str, Any]:
        """
        Convert to the parameter dict accepted by ``resend.Emails.send``.

        Resend takes attachment content as a list of byte values. ``reply_to``
        is left out entirely when unset.
        """
        params: dict[str, Any] = {
            "from": self.sender,
            "to": list(self.to),
            "subject": self.subject,
            "html": self.html,
            "attachments": [
                {
                    "filename": a.filename,
                    "content": list(a.content),
                    "content_type": a.content_type,
                }
                for a in self.attachments
            ],
        }
        if self.reply_to:
            params["reply_to"] = self.reply_to
        return params

    def summary(self) -> dict[str, Any]:
        """Loggable view of the payload: attachment bytes replaced by sizes."""
        return {
            "to": self.to,
            "from": self.sender,
            "subject": self.subject,
            "html": self.html,
            "reply_to": self.reply_to,
            "attachments": [
                {
                    "filename": a.filename,
                    "content_type": a.content_type,
                    "size": len(a.content),
                }
                for a in self.attachments
            ],
        }


class SendResult(BaseModel):
    """Outcome of one send call: the provider's message id, or an error."""

    id: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
