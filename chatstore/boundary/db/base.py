"""
SQLAlchemy declarative base and common mixins.

Provides base class for all ORM models, reusable mixins for common
fields (timestamps, UUIDs) and the monotonic UTC clock every timestamp
in the service is taken from.

Dependencies: sqlalchemy
System role: Foundation for all database models
"""

import threading
import uuid
from datetime import datetime, timedelta, timezone

from sqlalchemy import DateTime, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

_clock_lock = threading.Lock()
_last_timestamp: datetime | None = None


def utc_now() -> datetime:
    """
    Return the current UTC time, strictly increasing across calls.

    Two calls inside the same clock tick are separated by one microsecond,
    so created_at preserves insertion order and every mutation moves
    updated_at forward.

    Returns:
        datetime: Timezone-aware UTC timestamp
    """
    global _last_timestamp
    with _clock_lock:
        now = datetime.now(timezone.utc)
        if _last_timestamp is not None and now <= _last_timestamp:
            now = _last_timestamp + timedelta(microseconds=1)
        _last_timestamp = now
        return now


def new_id() -> str:
    """Generate an opaque entity identifier (UUID4 string)."""
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    """
    SQLAlchemy declarative base for ORM model registration.

    All database models inherit from this class to ensure they're
    registered with the metadata and included in table creation.
    """

    pass


class UUIDMixin:
    """
    Mixin providing an opaque string UUID primary key.

    Stored as a 36 character string so the same schema works on
    PostgreSQL and SQLite.

    Attributes:
        id: UUID v4 string primary key, auto-generated on insert
    """

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=new_id,
        nullable=False,
    )


class CreatedAtMixin:
    """
    Mixin providing an immutable creation timestamp.

    Attributes:
        created_at: Row creation timestamp (UTC, immutable)
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )


class TimestampMixin(CreatedAtMixin):
    """
    Mixin providing creation and modification timestamps.

    created_at is set once on row creation and never changes.
    updated_at is refreshed on every update via onupdate hook unless the
    caller sets it explicitly.

    Attributes:
        created_at: Row creation timestamp (UTC, immutable)
        updated_at: Last modification timestamp (UTC)
    """

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
        nullable=False,
    )
