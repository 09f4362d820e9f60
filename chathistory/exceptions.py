"""
Domain errors raised by the services.

Each error carries the HTTP status and machine-readable code it is rendered
with by the application-level exception handler in main.py.
"""

from __future__ import annotations

from typing import Optional


class ChatHistoryError(Exception):
    """Base class for every error that maps to a client-visible response."""

    status_code: int = 500
    code: str = "SERVER_ERROR"
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(ChatHistoryError):
    status_code = 404
    code = "NOT_FOUND"
    default_message = "No chat with this id"


class ChatOwnershipError(ChatHistoryError):
    """The caller is authenticated but does not own the chat."""

    status_code = 403
    code = "UNAUTHORIZED"
    default_message = "Unauthorized"


class AuthenticationError(ChatHistoryError):
    """Missing, invalid or expired session token."""

    status_code = 401
    code = "AUTH_REQUIRED"
    default_message = "Please login"


class TokenExpiredOrInvalidError(ChatHistoryError):
    """The verification token failed signature or expiry checks."""

    status_code = 400
    code = "OTP_EXPIRED"
    default_message = "Otp Expired"


class OtpMismatchError(ChatHistoryError):
    status_code = 400
    code = "WRONG_OTP"
    default_message = "Wrong otp"


class EmailDeliveryError(ChatHistoryError):
    """The email API rejected or never received the send request."""

    status_code = 502
    code = "EMAIL_DELIVERY_FAILED"
    default_message = "Failed to send email"
