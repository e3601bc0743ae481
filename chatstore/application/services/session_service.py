"""
Session service orchestrator.

Coordinates session lifecycle operations and keeps the session cache in
step with every write.

Dependencies: chatstore.boundary.db.CRUD, chatstore.boundary.cache
System role: Session use case orchestration
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from chatstore.application.exceptions import DatabaseError, NotFoundError
from chatstore.boundary.cache.session_cache import SessionCache
from chatstore.boundary.db.base import utc_now
from chatstore.boundary.db.CRUD.session_crud import session_crud
from chatstore.boundary.db.models.chat_session_model import ChatSessionModel
from chatstore.models.session import ChatSession
from chatstore.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


class SessionService:
    """Session service orchestrator."""

    def __init__(self, db: AsyncSession, cache: SessionCache) -> None:
        """
        Initialize session service.

        Args:
            db: Async SQLAlchemy session
            cache: Process-wide session cache
        """
        self.db = db
        self.cache = cache

    async def create_session(self, user_id: str, title: str | None = None) -> ChatSession:
        """
        Create a new, non-favorite session for a user.

        Args:
            user_id: Owning user
            title: Optional display title

        Returns:
            ChatSession: Persisted session with created_at == updated_at

        Raises:
            DatabaseError: If the insert fails
        """
        now = utc_now()
        try:
            model = await session_crud.create(
                self.db,
                user_id=user_id,
                title=title,
                favorite=False,
                created_at=now,
                updated_at=now,
            )
            await self.db.commit()
        except SQLAlchemyError as e:
            await self._rollback("create", None, e)

        session = ChatSession.model_validate(model)
        self.cache.invalidate_user_sessions()
        logger.info("Session created", extra={"session_id": session.id, "user_id": user_id})
        return session

    async def get_by_id(self, session_id: str) -> ChatSession:
        """
        Get session by ID, serving from the cache when possible.

        Args:
            session_id: Session identifier

        Returns:
            ChatSession: The session

        Raises:
            NotFoundError: If session not found
        """
        cached = self.cache.get_session(session_id)
        if cached is not None:
            return cached

        model = await self._load(session_id)
        session = ChatSession.model_validate(model)
        self.cache.put_session(session)
        return session

    async def get_sessions_for_user(
        self,
        user_id: str,
        favorite: bool | None = None,
    ) -> list[ChatSession]:
        """
        List a user's sessions, most recently updated first.

        Args:
            user_id: Owning user
            favorite: True or False to filter on the flag, None for all

        Returns:
            list[ChatSession]: Possibly empty list
        """
        cached = self.cache.get_user_sessions(user_id, favorite)
        if cached is not None:
            return list(cached)

        models = await session_crud.list_by_user(self.db, user_id, favorite)
        sessions = tuple(ChatSession.model_validate(m) for m in models)
        self.cache.put_user_sessions(user_id, favorite, sessions)
        return list(sessions)

    async def rename_session(self, session_id: str, new_title: str) -> ChatSession:
        """
        Change a session's title.

        Args:
            session_id: Session identifier
            new_title: New display title

        Returns:
            ChatSession: Updated session

        Raises:
            NotFoundError: If session not found
            DatabaseError: If the update fails
        """
        model = await self._load(session_id)
        model.title = new_title
        return await self._save_mutation(model, "rename")

    async def mark_favorite(self, session_id: str, favorite: bool) -> ChatSession:
        """
        Set or clear a session's favorite flag.

        Args:
            session_id: Session identifier
            favorite: New flag value

        Returns:
            ChatSession: Updated session

        Raises:
            NotFoundError: If session not found
            DatabaseError: If the update fails
        """
        model = await self._load(session_id)
        model.favorite = favorite
        return await self._save_mutation(model, "favorite")

    async def delete_session(self, session_id: str) -> None:
        """
        Delete a session. Its messages are left to the caller.

        Args:
            session_id: Session identifier

        Raises:
            NotFoundError: If session not found
            DatabaseError: If the delete fails
        """
        model = await self._load(session_id)
        try:
            await session_crud.delete(self.db, model)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self._rollback("delete", session_id, e)

        self.cache.evict_session(session_id)
        self.cache.invalidate_user_sessions()
        logger.info("Session deleted", extra={"session_id": session_id})

    async def _load(self, session_id: str) -> ChatSessionModel:
        model = await session_crud.get_by_id(self.db, session_id)
        if model is None:
            raise NotFoundError(f"Session not found: {session_id}", resource_id=session_id)
        return model

    async def _save_mutation(self, model: ChatSessionModel, operation: str) -> ChatSession:
        model.updated_at = utc_now()
        try:
            model = await session_crud.save(self.db, model)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self._rollback(operation, model.id, e)

        session = ChatSession.model_validate(model)
        self.cache.put_session(session)
        self.cache.invalidate_user_sessions()
        logger.info("Session updated", extra={"session_id": session.id, "operation": operation})
        return session

    async def _rollback(self, operation: str, session_id: str | None, exc: SQLAlchemyError) -> None:
        await self.db.rollback()
        log_exception_with_context(
            logger, "Session write failed", exc, session_id=session_id, operation=operation
        )
        raise DatabaseError(
            f"Failed to {operation} session due to database error",
            resource_id=session_id,
        ) from exc
