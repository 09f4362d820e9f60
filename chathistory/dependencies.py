"""
FastAPI dependencies shared by the routers.

Services are built once from Settings and handed out through these providers so
tests can swap them with app.dependency_overrides.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from chathistory.config import get_settings
from chathistory.database import get_db
from chathistory.exceptions import AuthenticationError
from chathistory.models import User
from chathistory.services.mailer import BrevoMailer
from chathistory.services.tokens import TokenService
from chathistory.services.users import get_user

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_token_service() -> TokenService:
    return TokenService(get_settings())


@lru_cache(maxsize=1)
def get_mailer() -> BrevoMailer:
    return BrevoMailer(get_settings())


def _bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    return token.strip()


async def require_user(
    authorization: Optional[str] = Header(None),
    db: AsyncSession = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
) -> User:
    """Resolve `Authorization: Bearer <session token>` to a stored User."""
    token = _bearer_token(authorization)
    if not token:
        raise AuthenticationError()

    user_id = tokens.decode_session_token(token)
    user = await get_user(db, user_id)
    if user is None:
        logger.info("Session token for unknown user %s", user_id)
        raise AuthenticationError()
    return user
