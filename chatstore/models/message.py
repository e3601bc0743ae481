"""
Message domain models and schemas.

Request/response schemas for chat message operations, including the
retrieval context embedded in a message.

Dependencies: pydantic
System role: Message API contracts
"""

from enum import Enum
from typing import Annotated

from pydantic import AfterValidator, Field, JsonValue

from chatstore.models.common import CamelModel, DomainModel, UtcDateTime, not_blank


class SenderType(str, Enum):
    """Author of a message."""

    USER = "USER"
    ASSISTANT = "ASSISTANT"
    SYSTEM = "SYSTEM"


class ContextItem(DomainModel):
    """Retrieval snippet attached to a message."""

    source_id: str = Field(description="Identifier of the originating retrieval source")
    snippet: str = Field(description="Retrieved text fragment")
    metadata: dict[str, JsonValue] = Field(default_factory=dict)


class ChatMessage(DomainModel):
    """Persisted chat message as returned by the service and the API."""

    id: str
    session_id: str
    sender: SenderType
    content: str
    user_id: str | None = None
    context: tuple[ContextItem, ...] | None = None
    created_at: UtcDateTime


class CreateMessageRequest(CamelModel):
    """Request schema for appending a message to a session."""

    sender: SenderType
    content: Annotated[str, AfterValidator(not_blank)]
    user_id: str | None = Field(default=None, description="Required for USER messages")
    context: list[ContextItem] | None = None
