"""
Database models package.

Exports:
  - ChatSessionModel: Chat session ORM model
  - ChatMessageModel: Chat message ORM model

Dependencies: sqlalchemy, chatstore.boundary.db.base
System role: Database model definitions for domain entities
"""

from chatstore.boundary.db.models.chat_message_model import ChatMessageModel
from chatstore.boundary.db.models.chat_session_model import ChatSessionModel

__all__ = [
    "ChatMessageModel",
    "ChatSessionModel",
]
