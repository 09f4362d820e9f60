"""
Chat endpoints — every route requires a session token.

    POST   /api/chat/new    → Chat
    GET    /api/chat/all    → [Chat] newest first
    POST   /api/chat/{id}   {question, answer} → {conversation, updatedChat}
    GET    /api/chat/{id}   → [Conversation]
    DELETE /api/chat/{id}   owner only → {message}
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from chathistory.database import get_db
from chathistory.dependencies import require_user
from chathistory.models import User
from chathistory.schemas.chat import (
    AddConversationResponse,
    ChatRead,
    ConversationCreate,
    ConversationRead,
    MessageResponse,
)
from chathistory.services import chat_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/chat", tags=["chat"])


@router.post("/new", response_model=ChatRead)
async def create_chat(
    user: User = Depends(require_user),
    db: AsyncSession = Depends(get_db),
) -> ChatRead:
    chat = await chat_service.create_chat(db, user.id)
    return ChatRead.model_validate(chat)


@router.get("/all", response_model=list[ChatRead])
async def get_all_chats(
    user: User = Depends(require_user),
    db: AsyncSession = Depends(get_db),
) -> list[ChatRead]:
    chats = await chat_service.list_chats(db, user.id)
    return [ChatRead.model_validate(c) for c in chats]


@router.post("/{chat_id}", response_model=AddConversationResponse)
async def add_conversation(
    chat_id: str,
    body: ConversationCreate,
    _: User = Depends(require_user),
    db: AsyncSession = Depends(get_db),
) -> AddConversationResponse:
    """Append a question/answer turn. Not restricted to the chat owner."""
    conversation, chat = await chat_service.add_conversation(
        db, chat_id, body.question, body.answer
    )
    return AddConversationResponse(
        conversation=ConversationRead.model_validate(conversation),
        updated_chat=ChatRead.model_validate(chat),
    )


@router.get("/{chat_id}", response_model=list[ConversationRead])
async def get_conversations(
    chat_id: str,
    _: User = Depends(require_user),
    db: AsyncSession = Depends(get_db),
) -> list[ConversationRead]:
    conversations = await chat_service.get_conversations(db, chat_id)
    return [ConversationRead.model_validate(c) for c in conversations]


@router.delete("/{chat_id}", response_model=MessageResponse)
async def delete_chat(
    chat_id: str,
    user: User = Depends(require_user),
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    await chat_service.delete_chat(db, chat_id, user.id)
    return MessageResponse(message="Chat Deleted")
