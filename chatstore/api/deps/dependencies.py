"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: chatstore.configs, chatstore.application, chatstore.boundary
System role: DI container for service injection
"""

import logging
import secrets
from functools import lru_cache

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from chatstore.application.exceptions import UnauthorizedError
from chatstore.application.services import MessageService, SessionService
from chatstore.boundary.cache import SessionCache
from chatstore.boundary.db import get_async_db
from chatstore.configs import Settings, get_settings

logger = logging.getLogger(__name__)


class ServiceCache:
    """Container for process-wide shared instances."""

    def __init__(self):
        self._session_cache = None

    @property
    def session_cache(self) -> SessionCache:
        """Get the shared session cache, built from settings on first use."""
        if self._session_cache is None:
            self._session_cache = SessionCache(get_settings().cache)
        return self._session_cache

    def clear(self) -> None:
        """Clear all cached instances."""
        self._session_cache = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_session_service(db: AsyncSession = Depends(get_async_db)) -> SessionService:
    """
    Get session service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        SessionService: Session service sharing the process-wide cache
    """
    return SessionService(db=db, cache=get_service_cache().session_cache)


def get_message_service(db: AsyncSession = Depends(get_async_db)) -> MessageService:
    """
    Get message service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        MessageService: Message service instance
    """
    return MessageService(db=db)


async def require_api_key(
    request: Request,
    settings: Settings = Depends(get_settings_dependency),
) -> None:
    """
    Reject requests without a configured API key.

    The header name comes from settings; each configured key is compared
    in constant time. With no keys configured every request is rejected.

    Raises:
        UnauthorizedError: If the header is missing or matches no key
    """
    provided = request.headers.get(settings.security.api_key_header)
    if provided:
        for key in settings.security.api_key_list:
            if secrets.compare_digest(provided.encode(), key.encode()):
                return

    logger.warning(
        "Rejected request with missing or invalid API key",
        extra={"path": request.url.path, "key_present": bool(provided)},
    )
    raise UnauthorizedError("Invalid or missing API key")
