"""
Notification template tests.

Covers subject/HTML selection by submission type, the "Unknown" car
placeholders and payload assembly (sender, recipients, reply-to).
"""

from contact_relay.config import Settings
from contact_relay.models.submission import Attachment, NormalizedSubmission
from contact_relay.services.email_template import (
    build_email_payload,
    render_html,
    render_subject,
)


def _contact(**overrides):
    base = {
        "name": "Jane Doe",
        "email": "jane@x.com",
        "phone": "12345",
        "message": "Hi<br/>There",
        "has_valid_email": True,
    }
    base.update(overrides)
    return NormalizedSubmission(**base)


def _settings(**overrides):
    base = {
        "mail_to": ["website@example.com"],
        "mail_from_quote": "New Quote Request <no-reply@example.com>",
        "mail_from_contact": "Contact Form Request <no-reply@example.com>",
        "site_name": "Example Website",
    }
    base.update(overrides)
    return Settings(**base)


# ---------------------------------------------------------------------------
# render_subject
# ---------------------------------------------------------------------------

class TestRenderSubject:

    def test_contact_subject(self):
        assert render_subject(_contact()) == "New Contact Form Submission from Jane Doe"

    def test_quote_subject(self):
        assert render_subject(_contact(car_make="Ford")) == "New Quote Request from Jane Doe"

    def test_default_name_in_subject(self):
        assert render_subject(NormalizedSubmission()) == "New Contact Form Submission from No name"


# ---------------------------------------------------------------------------
# render_html
# ---------------------------------------------------------------------------

class TestRenderHtmlContact:

    def test_contact_heading_uses_site_name(self):
        html = render_html(_contact(), "Example Website")
        assert "<h2>New Contact Form Submission from Example Website</h2>" in html

    def test_contact_includes_fields(self):
        html = render_html(_contact(), "Example Website")
        assert "<p><strong>Name:</strong> Jane Doe</p>" in html
        assert "<p><strong>Email:</strong> jane@x.com</p>" in html
        assert "<p><strong>Phone:</strong> 12345</p>" in html
        assert "<p><strong>Message:</strong><br/>Hi<br/>There</p>" in html

    def test_contact_has_no_car_line(self):
        assert "Car:" not in render_html(_contact(), "Example Website")


class TestRenderHtmlQuote:

    def test_quote_heading(self):
        html = render_html(_contact(car_make="Ford"), "Example Website")
        assert "<h2>New Quote Request from Example Website</h2>" in html

    def test_all_car_fields_rendered(self):
        html = render_html(
            _contact(car_make="Ford", car_model="Focus", car_reg="AB12 CDE"),
            "Example Website",
        )
        assert "<p><strong>Car:</strong> Ford Focus (AB12 CDE)</p>" in html

    def test_missing_car_fields_render_unknown(self):
        html = render_html(_contact(car_make="Ford"), "Example Website")
        assert "<p><strong>Car:</strong> Ford Unknown (Unknown)</p>" in html

    def test_braces_in_user_input_are_not_template_fields(self):
        html = render_html(_contact(name="{site_name}", car_make="Ford"), "Example Website")
        assert "<p><strong>Name:</strong> {site_name}</p>" in html


# ---------------------------------------------------------------------------
# build_email_payload
# ---------------------------------------------------------------------------

class TestBuildEmailPayload:

    def test_contact_sender_and_recipients(self):
        payload = build_email_payload(_contact(), [], _settings())
        assert payload.sender == "Contact Form Request <no-reply@example.com>"
        assert payload.to == ["website@example.com"]

    def test_quote_sender(self):
        payload = build_email_payload(_contact(car_reg="AB12"), [], _settings())
        assert payload.sender == "New Quote Request <no-reply@example.com>"
        assert payload.subject == "New Quote Request from Jane Doe"

    def test_reply_to_set_for_valid_email(self):
        payload = build_email_payload(_contact(), [], _settings())
        assert payload.reply_to == "jane@x.com"

    def test_reply_to_omitted_for_invalid_email(self):
        submission = _contact(email="not-an-email", has_valid_email=False)
        payload = build_email_payload(submission, [], _settings())
        assert payload.reply_to is None
        assert "reply_to" not in payload.to_resend_params()

    def test_reply_to_never_set_to_placeholder(self):
        payload = build_email_payload(NormalizedSubmission(), [], _settings())
        assert payload.reply_to is None

    def test_attachments_passed_through(self):
        attachment = Attachment(filename="a.png", content=b"png", content_type="image/png")
        payload = build_email_payload(_contact(), [attachment], _settings())
        assert payload.attachments == [attachment]


class TestEmailPayloadResendParams:

    def test_resend_params_shape(self):
        attachment = Attachment(filename="a.png", content=b"\x01\x02", content_type="image/png")
        payload = build_email_payload(_contact(), [attachment], _settings())
        params = payload.to_resend_params()

        assert params["from"] == "Contact Form Request <no-reply@example.com>"
        assert params["to"] == ["website@example.com"]
        assert params["subject"] == "New Contact Form Submission from Jane Doe"
        assert params["reply_to"] == "jane@x.com"
        assert params["attachments"] == [
            {"filename": "a.png", "content": [1, 2], "content_type": "image/png"}
        ]

    def test_summary_reports_sizes_not_bytes(self):
        attachment = Attachment(filename="a.png", content=b"12345", content_type="image/png")
        payload = build_email_payload(_contact(), [attachment], _settings())
        summary = payload.summary()
        assert summary["attachments"] == [
            {"filename": "a.png", "content_type": "image/png", "size": 5}
        ]
