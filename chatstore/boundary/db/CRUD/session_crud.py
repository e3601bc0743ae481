"""
Chat session CRUD operations.

Dependencies: sqlalchemy, chatstore.boundary.db.models
System role: Session persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from chatstore.boundary.db.CRUD.base_crud import BaseCRUD
from chatstore.boundary.db.models.chat_session_model import ChatSessionModel


class SessionCRUD(BaseCRUD[ChatSessionModel]):
    """CRUD operations for ChatSessionModel, plus the per-user listing."""

    def __init__(self) -> None:
        """Initialize SessionCRUD with ChatSessionModel."""
        super().__init__(ChatSessionModel)

    async def list_by_user(
        self,
        session: AsyncSession,
        user_id: str,
        favorite: bool | None = None,
    ) -> Sequence[ChatSessionModel]:
        """
        List a user's sessions, most recently updated first.

        Args:
            session: Async database session
            user_id: Owning user
            favorite: Filter on the favorite flag, None for all sessions

        Returns:
            Sequence of ChatSessionModel ordered by updated_at descending
        """
        stmt = select(ChatSessionModel).where(ChatSessionModel.user_id == user_id)
        if favorite is not None:
            stmt = stmt.where(ChatSessionModel.favorite == favorite)
        stmt = stmt.order_by(ChatSessionModel.updated_at.desc())
        result = await session.execute(stmt)
        return result.scalars().all()


session_crud = SessionCRUD()
