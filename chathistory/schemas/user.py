"""Pydantic schemas for the login flow and user profile endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserRead(BaseModel):
    """User record as returned by /user/me and embedded in verification tokens."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    created_at: datetime


class LoginRequest(BaseModel):
    """Body for POST /user/login."""

    email: str = Field(..., min_length=3, max_length=320)


class LoginResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    verify_token: str = Field(..., alias="verifyToken")


class VerifyRequest(BaseModel):
    """Body for POST /user/verify — the emailed code plus the token from login."""

    model_config = ConfigDict(populate_by_name=True)

    otp: int
    verify_token: str = Field(..., alias="verifyToken")


class VerifyResponse(BaseModel):
    """
    `user` is the record captured at login time (carried inside the
    verification token), not a fresh read from the database.
    """

    message: str
    user: UserRead
    token: str
