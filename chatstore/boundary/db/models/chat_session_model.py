"""
Chat session ORM model.

Dependencies: sqlalchemy, chatstore.boundary.db.base
System role: Session persistence for chat history grouping
"""

from sqlalchemy import Boolean, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from chatstore.boundary.db.base import Base, TimestampMixin, UUIDMixin


class ChatSessionModel(Base, UUIDMixin, TimestampMixin):
    """
    Chat session owned by a single user.

    Messages reference sessions by id only; there is no foreign key or
    ORM relationship, so deleting a session never cascades on its own.

    Attributes:
        id: UUID string primary key (auto-generated)
        user_id: Owning user, immutable after creation
        title: Optional display title
        favorite: Favorite flag used to filter the session list
        created_at: Session creation timestamp (UTC)
        updated_at: Last rename or favorite toggle (UTC)
    """

    __tablename__ = "chat_sessions"
    __table_args__ = (
        Index("idx_user_id_updated_at", "user_id", "updated_at"),
        Index("idx_user_id_favorite_updated_at", "user_id", "favorite", "updated_at"),
    )

    user_id: Mapped[str] = mapped_column(String(255), nullable=False)
    title: Mapped[str | None] = mapped_column(String(500), nullable=True, default=None)
    favorite: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<ChatSessionModel(id={self.id}, user_id={self.user_id}, title={self.title!r})>"
