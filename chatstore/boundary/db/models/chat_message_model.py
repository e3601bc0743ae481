"""
Chat message ORM model.

Dependencies: sqlalchemy, chatstore.boundary.db.base
System role: Message persistence with embedded retrieval context
"""

from typing import Any

from sqlalchemy import JSON, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from chatstore.boundary.db.base import Base, CreatedAtMixin, UUIDMixin


class ChatMessageModel(Base, UUIDMixin, CreatedAtMixin):
    """
    One turn of a chat session.

    Context items are embedded as a JSON array of
    ``{"source_id", "snippet", "metadata"}`` objects; they have no table
    or lifecycle of their own.

    Attributes:
        id: UUID string primary key (auto-generated)
        session_id: Owning session id (no foreign key)
        sender: USER, ASSISTANT or SYSTEM
        content: Message text
        user_id: Author for USER messages, NULL otherwise
        context: Ordered retrieval snippets or NULL
        created_at: Insertion timestamp, ordering key inside a session
    """

    __tablename__ = "chat_messages"
    __table_args__ = (
        Index("idx_session_id_created_at", "session_id", "created_at"),
        Index("idx_message_user_id", "user_id"),
    )

    session_id: Mapped[str] = mapped_column(String(255), nullable=False)
    sender: Mapped[str] = mapped_column(String(50), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    user_id: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    context: Mapped[list[dict[str, Any]] | None] = mapped_column(JSON, nullable=True, default=None)

    def __repr__(self) -> str:
        return f"<ChatMessageModel(id={self.id}, session_id={self.session_id}, sender={self.sender})>"
