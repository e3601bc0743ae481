"""
Domain models and API schemas.

Dependencies: pydantic
System role: Data contracts shared by services and routers
"""

from chatstore.models.common import Page
from chatstore.models.error import ErrorResponse
from chatstore.models.message import (
    ChatMessage,
    ContextItem,
    CreateMessageRequest,
    SenderType,
)
from chatstore.models.session import (
    ChatSession,
    CreateSessionRequest,
    FavoriteSessionRequest,
    RenameSessionRequest,
)

__all__ = [
    "ChatMessage",
    "ChatSession",
    "ContextItem",
    "CreateMessageRequest",
    "CreateSessionRequest",
    "ErrorResponse",
    "FavoriteSessionRequest",
    "Page",
    "RenameSessionRequest",
    "SenderType",
]
