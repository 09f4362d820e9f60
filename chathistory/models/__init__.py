"""SQLAlchemy ORM models package."""

from chathistory.database import Base
from chathistory.models.user import User
from chathistory.models.chat import Chat
from chathistory.models.conversation import Conversation

__all__ = ["Base", "User", "Chat", "Conversation"]
