"""
Chat message CRUD operations.

Dependencies: sqlalchemy, chatstore.boundary.db.models
System role: Message persistence operations
"""

from typing import Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from chatstore.boundary.db.CRUD.base_crud import BaseCRUD
from chatstore.boundary.db.models.chat_message_model import ChatMessageModel


class MessageCRUD(BaseCRUD[ChatMessageModel]):
    """CRUD operations for ChatMessageModel scoped by owning session."""

    def __init__(self) -> None:
        """Initialize MessageCRUD with ChatMessageModel."""
        super().__init__(ChatMessageModel)

    async def page_by_session(
        self,
        session: AsyncSession,
        session_id: str,
        offset: int,
        limit: int,
    ) -> Sequence[ChatMessageModel]:
        """
        Retrieve a slice of a session's messages in conversation order.

        Args:
            session: Async database session
            session_id: Owning session id
            offset: Number of messages to skip
            limit: Maximum number of messages to return

        Returns:
            Sequence of ChatMessageModel ordered by created_at ascending
        """
        stmt = (
            select(ChatMessageModel)
            .where(ChatMessageModel.session_id == session_id)
            .order_by(ChatMessageModel.created_at.asc())
            .offset(offset)
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count_by_session(self, session: AsyncSession, session_id: str) -> int:
        """
        Count a session's messages.

        Args:
            session: Async database session
            session_id: Owning session id

        Returns:
            int: Number of stored messages for the session
        """
        stmt = (
            select(func.count())
            .select_from(ChatMessageModel)
            .where(ChatMessageModel.session_id == session_id)
        )
        result = await session.execute(stmt)
        return int(result.scalar_one())

    async def delete_by_session(self, session: AsyncSession, session_id: str) -> int:
        """
        Delete every message of a session in one statement.

        Args:
            session: Async database session
            session_id: Owning session id

        Returns:
            int: Number of rows deleted (0 when there were none)
        """
        stmt = delete(ChatMessageModel).where(ChatMessageModel.session_id == session_id)
        result = await session.execute(stmt)
        return result.rowcount or 0


message_crud = MessageCRUD()
