"""
Mailer service — delivers login passcodes through the Brevo transactional
email API (POST /v3/smtp/email).

Any transport error or non-2xx response is logged with the upstream detail and
re-raised as EmailDeliveryError with a generic message; callers never see the
provider's error body. There is no retry.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from chathistory.config import Settings
from chathistory.exceptions import EmailDeliveryError

logger = logging.getLogger(__name__)

_OTP_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>OTP Verification</title>
    <style>
        body {{ font-family: Arial, sans-serif; }}
        .container {{ text-align: center; padding: 20px; }}
        .otp {{ font-size: 36px; color: #7b68ee; }}
    </style>
</head>
<body>
    <div class="container">
        <h1>OTP Verification</h1>
        <p>Hello {email} your (One-Time Password) for your account verification is.</p>
        <p class="otp">{otp}</p>
    </div>
</body>
</html>
"""


def render_otp_email(email: str, otp: int) -> str:
    """Return the HTML body for a passcode email. The code is not zero-padded."""
    return _OTP_TEMPLATE.format(email=email, otp=otp)


class BrevoMailer:
    """Thin async client for Brevo; one instance per process."""

    def __init__(self, settings: Settings, client: Optional[httpx.AsyncClient] = None) -> None:
        self._sender_email = settings.sender_email
        self._api_key = settings.brevo_api_key
        self._api_url = settings.brevo_api_url
        self._timeout = settings.email_timeout_seconds
        self._client = client

    async def _post(self, payload: dict) -> httpx.Response:
        headers = {"api-key": self._api_key, "Content-Type": "application/json"}
        if self._client is not None:
            return await self._client.post(self._api_url, json=payload, headers=headers)
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            return await client.post(self._api_url, json=payload, headers=headers)

    async def send_otp(self, email: str, subject: str, otp: int) -> None:
        """Send the passcode email. Raises EmailDeliveryError on any failure."""
        payload = {
            "sender": {"email": self._sender_email},
            "to": [{"email": email}],
            "subject": subject,
            "htmlContent": render_otp_email(email, otp),
        }

        try:
            response = await self._post(payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Brevo API Error: status=%s body=%s",
                exc.response.status_code,
                exc.response.text,
            )
            raise EmailDeliveryError() from exc
        except httpx.HTTPError as exc:
            logger.error("Brevo API Error: %s", exc)
            raise EmailDeliveryError() from exc

        logger.debug("OTP email accepted by Brevo for %s", email)
