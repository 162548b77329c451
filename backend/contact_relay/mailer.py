"""
Email sender configuration.
Uses Resend for outbound transactional email.

The sender is built once per process from RESEND_API_KEY and injected into
routes with the ``get_email_sender`` dependency.
"""

import logging
from typing import Optional

import resend
from resend.exceptions import ResendError

from contact_relay.config import get_settings
from contact_relay.models.submission import EmailPayload, SendResult

logger = logging.getLogger(__name__)


class EmailSender:
    """Thin wrapper over ``resend.Emails.send`` that reports errors as values."""

    def __init__(self, api_key: Optional[str]):
        self.api_key = api_key
        if api_key:
            resend.api_key = api_key

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def send(self, payload: EmailPayload) -> SendResult:
        """
        Send one email through Resend.

        Provider failures (rejected payload, bad key, rate limit) come back as
        ``SendResult(error=...)``. Anything else propagates to the caller.
        """
        if not self.api_key:
            return SendResult(error="RESEND_API_KEY is not configured")

        try:
            response = resend.Emails.send(payload.to_resend_params())
        except ResendError as exc:
            return SendResult(error=f"{type(exc).__name__}: {exc}")

        return SendResult(id=response.get("id") if response else None)


email_sender = EmailSender(get_settings().resend_api_key)

if not email_sender.configured:
    logger.warning("RESEND_API_KEY is not set; form submissions cannot be emailed")


def get_email_sender() -> EmailSender:
    """FastAPI dependency returning the process-wide sender."""
    return email_sender
