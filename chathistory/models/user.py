"""User ORM model — one row per email address that has requested a login code."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, TIMESTAMP

from chathistory.database import Base


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    """
    Identity only. Created on the first login attempt for an unseen email and
    never deleted; email is the lookup key for the login flow.
    """

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=_new_id)
    email = Column(String(320), nullable=False, unique=True, index=True)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=_utcnow)
