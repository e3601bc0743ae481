"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, CreatedAtMixin, TimestampMixin, utc_now: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Connection management
  - init_models(), ping_database(), dispose_engine(): Lifecycle helpers
  - ChatSessionModel, ChatMessageModel: Domain entities
  - session_crud, message_crud: CRUD operation singletons

Dependencies: sqlalchemy, chatstore.configs
System role: Entity store for chat sessions and messages
"""

from chatstore.boundary.db.base import Base, CreatedAtMixin, TimestampMixin, UUIDMixin, utc_now
from chatstore.boundary.db.connection import (
    dispose_engine,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
    init_models,
    ping_database,
)
from chatstore.boundary.db.models import ChatMessageModel, ChatSessionModel
from chatstore.boundary.db.CRUD import (
    BaseCRUD,
    MessageCRUD,
    SessionCRUD,
    message_crud,
    session_crud,
)

__all__ = [
    # Base classes
    "Base",
    "CreatedAtMixin",
    "TimestampMixin",
    "UUIDMixin",
    "utc_now",
    # Connection
    "dispose_engine",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    "init_models",
    "ping_database",
    # Models
    "ChatMessageModel",
    "ChatSessionModel",
    # CRUD
    "BaseCRUD",
    "MessageCRUD",
    "SessionCRUD",
    "message_crud",
    "session_crud",
]
