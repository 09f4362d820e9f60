"""Conversation ORM model — one question/answer turn of a chat."""

from sqlalchemy import Column, String, Text, TIMESTAMP

from chathistory.database import Base
from chathistory.models.user import _new_id, _utcnow


class Conversation(Base):
    """
    chat_id is a plain reference, not a foreign key: deleting a Chat leaves
    its conversations in place.
    """

    __tablename__ = "conversations"

    id = Column(String(36), primary_key=True, default=_new_id)
    chat_id = Column(String(36), nullable=False, index=True)

    question = Column(Text, nullable=False)
    answer = Column(Text, nullable=False)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
    )
