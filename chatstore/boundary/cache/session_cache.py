"""
In-process session cache.

Two bounded LRU + TTL namespaces in front of the session store: point
lookups by id and per-user listings keyed by favorite filter. Services
call the cache explicitly; nothing here ever reads the database.

Dependencies: cachetools, chatstore.configs
System role: Read-through cache for session reads
"""

import logging
import threading
from typing import Any, Hashable

from cachetools import TTLCache

from chatstore.configs.cache import CacheSettings
from chatstore.models.session import ChatSession

logger = logging.getLogger(__name__)

UserSessionsKey = tuple[str, bool | None]


class CacheNamespace:
    """
    One named, bounded cache region.

    Entries expire after ``ttl_seconds`` and the least recently used entry
    is evicted once ``max_size`` is reached. Any failure inside the cache
    is logged and treated as a miss (get) or ignored (put/invalidate).
    """

    def __init__(self, name: str, max_size: int, ttl_seconds: float, enabled: bool = True):
        self.name = name
        self.enabled = enabled
        self._cache: TTLCache = TTLCache(maxsize=max_size, ttl=ttl_seconds)
        self._lock = threading.Lock()

    def get(self, key: Hashable) -> Any | None:
        """Return the cached value for key, or None on miss."""
        if not self.enabled:
            return None
        try:
            with self._lock:
                return self._cache.get(key)
        except Exception as e:
            logger.warning(
                "Cache get failed, treating as miss",
                extra={"namespace": self.name, "error": str(e)},
            )
            return None

    def put(self, key: Hashable, value: Any) -> None:
        """Insert or overwrite an entry."""
        if not self.enabled:
            return
        try:
            with self._lock:
                self._cache[key] = value
        except Exception as e:
            logger.warning(
                "Cache put failed, entry dropped",
                extra={"namespace": self.name, "error": str(e)},
            )

    def invalidate(self, key: Hashable) -> None:
        """Remove a single entry if present."""
        try:
            with self._lock:
                self._cache.pop(key, None)
        except Exception as e:
            logger.warning(
                "Cache invalidate failed",
                extra={"namespace": self.name, "error": str(e)},
            )

    def invalidate_all(self) -> None:
        """Remove every entry of the namespace."""
        try:
            with self._lock:
                self._cache.clear()
        except Exception as e:
            logger.warning(
                "Cache clear failed",
                extra={"namespace": self.name, "error": str(e)},
            )

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._cache


class SessionCache:
    """
    Cache regions used by the session service.

    Attributes:
        session_by_id: ChatSession keyed by session id
        sessions_by_user: tuple[ChatSession, ...] keyed by (user_id, favorite filter)
    """

    def __init__(self, settings: CacheSettings | None = None):
        settings = settings or CacheSettings()
        self.session_by_id = CacheNamespace(
            "session_by_id", settings.max_size, settings.ttl_seconds, settings.enabled
        )
        self.sessions_by_user = CacheNamespace(
            "sessions_by_user", settings.max_size, settings.ttl_seconds, settings.enabled
        )

    def get_session(self, session_id: str) -> ChatSession | None:
        return self.session_by_id.get(session_id)

    def put_session(self, session: ChatSession) -> None:
        self.session_by_id.put(session.id, session)

    def evict_session(self, session_id: str) -> None:
        self.session_by_id.invalidate(session_id)

    def get_user_sessions(self, user_id: str, favorite: bool | None) -> tuple[ChatSession, ...] | None:
        return self.sessions_by_user.get(self.user_key(user_id, favorite))

    def put_user_sessions(
        self,
        user_id: str,
        favorite: bool | None,
        sessions: tuple[ChatSession, ...],
    ) -> None:
        self.sessions_by_user.put(self.user_key(user_id, favorite), tuple(sessions))

    def invalidate_user_sessions(self) -> None:
        """Drop every cached listing for every user."""
        self.sessions_by_user.invalidate_all()

    @staticmethod
    def user_key(user_id: str, favorite: bool | None) -> UserSessionsKey:
        return (user_id, favorite)
