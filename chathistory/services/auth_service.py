"""
Authentication service — the emailed one-time passcode login flow.

    login_user   : upsert user → draw OTP → sign verification token → email OTP
    verify_user  : check token → compare OTP → sign session token

Per login attempt: ANONYMOUS → OTP_ISSUED (≤5 min) → AUTHENTICATED | EXPIRED | REJECTED.
Verify may be retried any number of times until the verification token expires.
"""

from __future__ import annotations

import logging
import secrets
from typing import Any, Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from chathistory.exceptions import OtpMismatchError
from chathistory.schemas.user import LoginResponse, UserRead, VerifyResponse
from chathistory.services.tokens import TokenService
from chathistory.services.users import upsert_user_by_email

logger = logging.getLogger(__name__)

OTP_UPPER_BOUND = 1_000_000


class OtpSender(Protocol):
    async def send_otp(self, email: str, subject: str, otp: int) -> None: ...


def generate_otp() -> int:
    """Uniform integer in [0, 1_000_000). Not zero-padded, so may be under 6 digits."""
    return secrets.randbelow(OTP_UPPER_BOUND)


async def login_user(
    db: AsyncSession,
    email: str,
    tokens: TokenService,
    mailer: OtpSender,
    subject: str = "ChatBot",
) -> LoginResponse:
    """Start a login attempt for `email`. The passcode only leaves via the email."""
    user = await upsert_user_by_email(db, email)

    otp = generate_otp()
    user_record = UserRead.model_validate(user).model_dump(mode="json")
    verify_token = tokens.issue_verification_token(user_record, otp)

    await mailer.send_otp(email, subject, otp)
    logger.info("Issued login code for user %s", user.id)

    return LoginResponse(message="Otp send to your mail", verify_token=verify_token)


def verify_user(otp: int, verify_token: str, tokens: TokenService) -> VerifyResponse:
    """
    Complete a login attempt.
    Raises TokenExpiredOrInvalidError (restart login) or OtpMismatchError (retry code).
    """
    payload: dict[str, Any] = tokens.decode_verification_token(verify_token)

    if int(payload["otp"]) != otp:
        raise OtpMismatchError()

    user = UserRead.model_validate(payload["user"])
    token = tokens.issue_session_token(user.id)
    logger.info("User %s logged in", user.id)

    return VerifyResponse(message="Logged in successfully", user=user, token=token)
