"""
Chat service — chat threads and their question/answer turns.

All reads go straight to the database. add_conversation commits the new turn
before updating the chat, so a failure between the two writes leaves the turn
stored with a stale latest_message.
"""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from chathistory.exceptions import ChatOwnershipError, NotFoundError
from chathistory.models import Chat, Conversation

logger = logging.getLogger(__name__)


async def create_chat(db: AsyncSession, owner_id: str) -> Chat:
    chat = Chat(user_id=owner_id)
    db.add(chat)
    await db.commit()
    await db.refresh(chat)
    return chat


async def list_chats(db: AsyncSession, owner_id: str) -> list[Chat]:
    """Chats owned by `owner_id`, newest first."""
    result = await db.execute(
        select(Chat)
        .where(Chat.user_id == owner_id)
        .order_by(Chat.created_at.desc())
    )
    return list(result.scalars().all())


async def add_conversation(
    db: AsyncSession, chat_id: str, question: str, answer: str
) -> tuple[Conversation, Chat]:
    """
    Append a turn to `chat_id` and make `question` the chat's latest_message.
    Any authenticated caller holding the chat id may append.
    """
    chat = await db.get(Chat, chat_id)
    if chat is None:
        raise NotFoundError()

    conversation = Conversation(chat_id=chat.id, question=question, answer=answer)
    db.add(conversation)
    await db.commit()

    chat.latest_message = question
    await db.commit()
    await db.refresh(chat)
    await db.refresh(conversation)

    return conversation, chat


async def get_conversations(db: AsyncSession, chat_id: str) -> list[Conversation]:
    """All turns for `chat_id` in the order they were added; empty if none."""
    result = await db.execute(
        select(Conversation)
        .where(Conversation.chat_id == chat_id)
        .order_by(Conversation.created_at.asc())
    )
    return list(result.scalars().all())


async def delete_chat(db: AsyncSession, chat_id: str, caller_id: str) -> None:
    """Delete the chat row only; its conversations are left in place."""
    chat = await db.get(Chat, chat_id)
    if chat is None:
        raise NotFoundError()

    if chat.user_id != caller_id:
        logger.warning("User %s tried to delete chat %s owned by %s", caller_id, chat_id, chat.user_id)
        raise ChatOwnershipError()

    await db.delete(chat)
    await db.commit()
    logger.info("Deleted chat %s", chat_id)
