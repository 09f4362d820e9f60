"""Pydantic schemas for chat and conversation endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ChatRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    latest_message: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class ConversationRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    chat_id: str
    question: str
    answer: str
    created_at: datetime
    updated_at: datetime


class ConversationCreate(BaseModel):
    """Body for POST /chat/{id} — one question/answer turn."""

    question: str = Field(..., min_length=1)
    answer: str


class AddConversationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    conversation: ConversationRead
    updated_chat: ChatRead = Field(..., alias="updatedChat")


class MessageResponse(BaseModel):
    message: str
