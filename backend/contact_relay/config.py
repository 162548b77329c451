"""
Deployment configuration.

Everything that differed between the historical copies of the form handler
(sender and recipient literals, payload logging, site name) is read from the
environment here, so there is exactly one handler implementation.

Environment variables (case-insensitive, also read from ``.env``)
------------------------------------------------------------------
RESEND_API_KEY                   Resend credential (required to actually send).
MAIL_TO                          Comma-separated recipient list.
MAIL_FROM_QUOTE                  Sender used for quote requests.
MAIL_FROM_CONTACT                Sender used for contact submissions.
SITE_NAME                        Shown in the notification headings.
LOG_FORM_PAYLOADS                "true" to log parsed fields and payload summaries.
DEFAULT_ATTACHMENT_CONTENT_TYPE  MIME type used when an upload declares none.
MAX_FORM_FILES                   Multipart file part limit (default 100).
MAX_FORM_FIELDS                  Multipart text field limit (default 100).
"""

from functools import lru_cache
from typing import Annotated, Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_MAIL_TO = "website@axiomrepair.co.uk"
DEFAULT_MAIL_FROM_QUOTE = "New Quote Request <no-reply@axiomrepair.co.uk>"
DEFAULT_MAIL_FROM_CONTACT = "Contact Form Request <no-reply@axiomrepair.co.uk>"
DEFAULT_SITE_NAME = "Axiom Website"
DEFAULT_ATTACHMENT_CONTENT_TYPE = "application/octet-stream"


class Settings(BaseSettings):
    """Process-wide settings, read once from the environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
    )

    resend_api_key: Optional[str] = Field(
        default=None,
        description="Resend API key; sends fail with a SendError when unset",
    )
    mail_to: Annotated[list[str], NoDecode] = Field(
        default=[DEFAULT_MAIL_TO],
        description="Notification recipients",
    )
    mail_from_quote: str = DEFAULT_MAIL_FROM_QUOTE
    mail_from_contact: str = DEFAULT_MAIL_FROM_CONTACT
    site_name: str = DEFAULT_SITE_NAME
    log_form_payloads: bool = Field(
        default=False,
        description="Log parsed fields and a payload summary for every submission",
    )
    default_attachment_content_type: str = DEFAULT_ATTACHMENT_CONTENT_TYPE
    max_form_files: int = Field(default=100, ge=1)
    max_form_fields: int = Field(default=100, ge=1)

    @field_validator("mail_to", mode="before")
    @classmethod
    def split_recipients(cls, v: Any) -> Any:
        """Accept MAIL_TO as a comma-separated string."""
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()]
        return v


@lru_cache
def get_settings() -> Settings:
    """Return the cached process settings (also used as a FastAPI dependency)."""
    return Settings()
