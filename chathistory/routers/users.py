"""
User endpoints — passcode login and profile.

    POST /api/user/login   {email}             → {message, verifyToken}
    POST /api/user/verify  {otp, verifyToken}  → {message, user, token}
    GET  /api/user/me      Bearer token        → User
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from chathistory.config import Settings, get_settings
from chathistory.database import get_db
from chathistory.dependencies import get_mailer, get_token_service, require_user
from chathistory.models import User
from chathistory.schemas.user import (
    LoginRequest,
    LoginResponse,
    UserRead,
    VerifyRequest,
    VerifyResponse,
)
from chathistory.services import auth_service
from chathistory.services.mailer import BrevoMailer
from chathistory.services.tokens import TokenService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/user", tags=["users"])


@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginRequest,
    db: AsyncSession = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
    mailer: BrevoMailer = Depends(get_mailer),
    settings: Settings = Depends(get_settings),
) -> LoginResponse:
    """Create the user if needed and email a one-time passcode."""
    return await auth_service.login_user(
        db, body.email, tokens, mailer, subject=settings.otp_email_subject
    )


@router.post("/verify", response_model=VerifyResponse)
async def verify(
    body: VerifyRequest,
    tokens: TokenService = Depends(get_token_service),
) -> VerifyResponse:
    """Exchange the emailed passcode and verification token for a session token."""
    return auth_service.verify_user(body.otp, body.verify_token, tokens)


@router.get("/me", response_model=UserRead)
async def my_profile(user: User = Depends(require_user)) -> UserRead:
    """Return the authenticated user's stored record."""
    return UserRead.model_validate(user)
