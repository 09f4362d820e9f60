"""User persistence helpers: upsert-by-email and lookup by id."""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from chathistory.models import User

logger = logging.getLogger(__name__)


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def get_user(db: AsyncSession, user_id: str) -> Optional[User]:
    return await db.get(User, user_id)


async def upsert_user_by_email(db: AsyncSession, email: str) -> User:
    """
    Return the user for `email`, creating it on first sight (idempotent).
    A concurrent insert of the same email loses on the unique constraint and
    falls back to reading the winner's row.
    """
    user = await get_user_by_email(db, email)
    if user:
        return user

    user = User(email=email)
    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        logger.info("Concurrent signup for %s, reusing existing user.", email)
        existing = await get_user_by_email(db, email)
        if existing is None:
            raise
        return existing

    logger.info("Created user %s", user.id)
    return user
