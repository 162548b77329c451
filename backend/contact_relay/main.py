"""
Contact Relay API
FastAPI application that relays website contact and quote forms by email.
"""

import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException

from contact_relay.mailer import email_sender
from contact_relay.routers import send

# Configure logging to output to console
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Contact Relay API",
    description="Relays website contact and quote request forms as notification emails",
    version="0.1.0",
)

# CORS headers are set by the send router itself on every response
# (including the 204 preflight), so no CORSMiddleware is installed.
app.include_router(send.router, prefix=send.SEND_PREFIX, tags=["send"])


@app.exception_handler(StarletteHTTPException)
async def send_method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    """
    Answer unregistered methods on the send endpoint with the plain-text 405.

    Routing raises the 405 before the endpoint runs, for any verb (TRACE,
    PROPFIND, ...). Every other HTTP error keeps FastAPI's default handling.
    """
    if exc.status_code == 405 and request.url.path.rstrip("/") == send.SEND_PREFIX:
        return send.method_not_allowed()
    return await http_exception_handler(request, exc)


@app.get("/")
async def root():
    return {"message": "Contact Relay API", "version": "0.1.0"}


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/health/email")
async def health_email():
    """
    Report whether outbound email is configured.

    Does not call Resend; returns 503 when RESEND_API_KEY is missing so the
    deployment can be flagged before a real submission fails.
    """
    if not email_sender.configured:
        raise HTTPException(
            status_code=503,
            detail="Email sender unavailable: RESEND_API_KEY is not configured",
        )
    return {"status": "ok", "email": "configured"}
