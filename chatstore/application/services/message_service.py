"""
Message service orchestrator.

Appends messages to sessions after validating ownership, and serves the
paged conversation history.

Dependencies: chatstore.boundary.db.CRUD
System role: Message use case orchestration
"""

import logging
from typing import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from chatstore.application.exceptions import DatabaseError, NotFoundError
from chatstore.boundary.db.base import utc_now
from chatstore.boundary.db.CRUD.message_crud import message_crud
from chatstore.boundary.db.CRUD.session_crud import session_crud
from chatstore.models.common import Page
from chatstore.models.message import ChatMessage, ContextItem, SenderType
from chatstore.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    preview_text,
)

logger = logging.getLogger(__name__)


class MessageService:
    """Message service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize message service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def add_message(
        self,
        session_id: str,
        sender: SenderType,
        content: str,
        user_id: str | None = None,
        context: Sequence[ContextItem] | None = None,
    ) -> ChatMessage:
        """
        Append a message to a session.

        USER messages must carry the session owner's user_id. ASSISTANT and
        SYSTEM messages are stored without a user_id whatever the caller sent.

        Args:
            session_id: Owning session
            sender: Message author type
            content: Message text
            user_id: Author, required for USER messages
            context: Optional retrieval snippets, stored in order

        Returns:
            ChatMessage: Persisted message with a fresh id

        Raises:
            NotFoundError: If the session is missing or the USER does not own it
            DatabaseError: If the insert fails
        """
        session = await session_crud.get_by_id(self.db, session_id)
        if session is None:
            raise NotFoundError(f"Session not found: {session_id}", resource_id=session_id)

        if sender == SenderType.USER:
            if user_id != session.user_id:
                logger.warning(
                    "Message user does not own session",
                    extra={"session_id": session_id, "user_id": user_id},
                )
                raise NotFoundError("User ID does not match session owner", resource_id=session_id)
        else:
            user_id = None

        stored_context = None
        if context is not None:
            stored_context = [item.model_dump(mode="json") for item in context]

        try:
            model = await message_crud.create(
                self.db,
                session_id=session_id,
                sender=sender.value,
                content=content,
                user_id=user_id,
                context=stored_context,
                created_at=utc_now(),
            )
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            log_exception_with_context(logger, "Message insert failed", e, session_id=session_id)
            raise DatabaseError(
                "Failed to save message due to database error", resource_id=session_id
            ) from e

        message = ChatMessage.model_validate(model)
        log_with_context(
            logger,
            logging.INFO,
            "Message added",
            message_id=message.id,
            session_id=session_id,
            sender=sender,
            content_preview=preview_text(content),
            context_items=message.context or (),
        )
        return message

    async def get_messages(self, session_id: str, page: int, size: int) -> Page[ChatMessage]:
        """
        Get one page of a session's messages in insertion order.

        Args:
            session_id: Owning session
            page: Zero-indexed page number
            size: Page size (>= 1)

        Returns:
            Page[ChatMessage]: Requested page; empty with last=True past the end

        Raises:
            NotFoundError: If the session does not exist
        """
        if not await session_crud.exists(self.db, session_id):
            raise NotFoundError(f"Session not found: {session_id}", resource_id=session_id)

        total = await message_crud.count_by_session(self.db, session_id)
        offset = page * size
        if offset >= total:
            return Page[ChatMessage].of([], page=page, size=size, total_elements=total)

        models = await message_crud.page_by_session(self.db, session_id, offset=offset, limit=size)
        messages = [ChatMessage.model_validate(m) for m in models]
        return Page[ChatMessage].of(messages, page=page, size=size, total_elements=total)

    async def delete_messages_for_session(self, session_id: str) -> int:
        """
        Delete every message of a session. Safe to repeat.

        Args:
            session_id: Owning session (need not exist)

        Returns:
            int: Number of messages deleted

        Raises:
            DatabaseError: If the delete fails
        """
        try:
            deleted = await message_crud.delete_by_session(self.db, session_id)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            log_exception_with_context(logger, "Message delete failed", e, session_id=session_id)
            raise DatabaseError(
                "Failed to delete messages due to database error", resource_id=session_id
            ) from e

        logger.info("Messages deleted", extra={"session_id": session_id, "count": deleted})
        return deleted
