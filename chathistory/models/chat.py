"""Chat ORM model — a conversation thread owned by a single user."""

from sqlalchemy import Column, ForeignKey, String, Text, TIMESTAMP

from chathistory.database import Base
from chathistory.models.user import _new_id, _utcnow


class Chat(Base):
    """
    latest_message is denormalised from the most recent Conversation so the
    chat list can be rendered without touching the conversations table.
    """

    __tablename__ = "chats"

    id = Column(String(36), primary_key=True, default=_new_id)
    user_id = Column(
        String(36),
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )

    latest_message = Column(Text, nullable=True)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
    )
