"""
Token service — signs and validates the two JWTs used by the login flow.

Verification token : {"user": {...}, "otp": int}  signed with ACTIVATION_SECRET, 5 min
Session token      : {"id": user_id}               signed with JWT_SECRET,        5 days

Both are HS256 and carry iat/exp claims; expiry is enforced by PyJWT on decode.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt

from chathistory.config import Settings
from chathistory.exceptions import AuthenticationError, TokenExpiredOrInvalidError

logger = logging.getLogger(__name__)

_ALGORITHM = "HS256"


class TokenService:
    """Issues and checks signed tokens using the secrets from Settings."""

    def __init__(self, settings: Settings) -> None:
        self._activation_secret = settings.activation_secret
        self._session_secret = settings.jwt_secret
        self.verify_ttl = timedelta(minutes=settings.verify_token_minutes)
        self.session_ttl = timedelta(days=settings.session_token_days)

    @staticmethod
    def _sign(claims: dict[str, Any], secret: str, ttl: timedelta, now: Optional[datetime]) -> str:
        issued_at = now or datetime.now(timezone.utc)
        payload = {**claims, "iat": issued_at, "exp": issued_at + ttl}
        return jwt.encode(payload, secret, algorithm=_ALGORITHM)

    # ── Verification token ───────────────────────────────────────────────────

    def issue_verification_token(
        self, user: dict[str, Any], otp: int, now: Optional[datetime] = None
    ) -> str:
        """Sign the user record and the passcode that was emailed to them."""
        return self._sign({"user": user, "otp": otp}, self._activation_secret, self.verify_ttl, now)

    def decode_verification_token(self, token: str) -> dict[str, Any]:
        """
        Return the verified payload.
        Raises TokenExpiredOrInvalidError for bad signatures, malformed tokens,
        and tokens past their 5-minute window.
        """
        try:
            payload = jwt.decode(token, self._activation_secret, algorithms=[_ALGORITHM])
        except jwt.ExpiredSignatureError as exc:
            raise TokenExpiredOrInvalidError() from exc
        except jwt.InvalidTokenError as exc:
            logger.info("Rejected verification token: %s", exc)
            raise TokenExpiredOrInvalidError() from exc

        if "user" not in payload or "otp" not in payload:
            raise TokenExpiredOrInvalidError()
        return payload

    # ── Session token ────────────────────────────────────────────────────────

    def issue_session_token(self, user_id: str, now: Optional[datetime] = None) -> str:
        return self._sign({"id": user_id}, self._session_secret, self.session_ttl, now)

    def decode_session_token(self, token: str) -> str:
        """Return the user id embedded in a valid session token."""
        try:
            payload = jwt.decode(token, self._session_secret, algorithms=[_ALGORITHM])
        except jwt.InvalidTokenError as exc:
            raise AuthenticationError() from exc

        user_id = payload.get("id")
        if not user_id:
            raise AuthenticationError()
        return user_id
