"""
Email sender tests.

resend.Emails.send is mocked; no real API calls.
"""

import os
from unittest.mock import patch

os.environ.setdefault("RESEND_API_KEY", "re_test_key")

from contact_relay.mailer import EmailSender, get_email_sender, email_sender
from contact_relay.models.submission import EmailPayload


class _FakeResendError(Exception):
    """Stands in for resend.exceptions.ResendError in these tests."""


def _payload(**overrides):
    base = {
        "sender": "Contact Form Request <no-reply@example.com>",
        "to": ["website@example.com"],
        "subject": "New Contact Form Submission from Jane Doe",
        "html": "<p>Hi</p>",
    }
    base.update(overrides)
    return EmailPayload(**base)


class TestEmailSenderSend:

    def test_success_returns_provider_id(self):
        sender = EmailSender("re_test_key")
        with patch("contact_relay.mailer.resend.Emails.send", return_value={"id": "email-123"}) as mock_send:
            result = sender.send(_payload())

        assert result.ok is True
        assert result.id == "email-123"
        mock_send.assert_called_once()

    def test_params_passed_in_resend_format(self):
        sender = EmailSender("re_test_key")
        with patch("contact_relay.mailer.resend.Emails.send", return_value={"id": "x"}) as mock_send:
            sender.send(_payload(reply_to="jane@x.com"))

        params = mock_send.call_args.args[0]
        assert params["from"] == "Contact Form Request <no-reply@example.com>"
        assert params["reply_to"] == "jane@x.com"

    def test_provider_error_returned_not_raised(self):
        sender = EmailSender("re_test_key")
        with patch("contact_relay.mailer.ResendError", _FakeResendError), \
             patch("contact_relay.mailer.resend.Emails.send", side_effect=_FakeResendError("rate limited")):
            result = sender.send(_payload())

        assert result.ok is False
        assert "rate limited" in result.error

    def test_missing_api_key_is_send_error_without_provider_call(self):
        sender = EmailSender(None)
        with patch("contact_relay.mailer.resend.Emails.send") as mock_send:
            result = sender.send(_payload())

        assert result.ok is False
        assert "RESEND_API_KEY" in result.error
        mock_send.assert_not_called()

    def test_configured_flag(self):
        assert EmailSender("re_test_key").configured is True
        assert EmailSender("").configured is False


class TestGetEmailSender:

    def test_returns_process_wide_instance(self):
        assert get_email_sender() is email_sender
        assert get_email_sender() is get_email_sender()
