"""Pydantic schemas package."""

from chathistory.schemas.user import (
    LoginRequest,
    LoginResponse,
    UserRead,
    VerifyRequest,
    VerifyResponse,
)
from chathistory.schemas.chat import (
    AddConversationResponse,
    ChatRead,
    ConversationCreate,
    ConversationRead,
    MessageResponse,
)

__all__ = [
    "LoginRequest", "LoginResponse", "UserRead", "VerifyRequest", "VerifyResponse",
    "AddConversationResponse", "ChatRead", "ConversationCreate",
    "ConversationRead", "MessageResponse",
]
