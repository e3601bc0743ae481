"""
Session domain models and schemas.

Request/response schemas for session operations.

Dependencies: pydantic
System role: Session API contracts
"""

from typing import Annotated

from pydantic import AfterValidator, Field

from chatstore.models.common import CamelModel, DomainModel, UtcDateTime, not_blank

TITLE_MAX_LENGTH = 500


class ChatSession(DomainModel):
    """Chat session as returned by the service and the API."""

    id: str
    user_id: str
    title: str | None = None
    favorite: bool = False
    created_at: UtcDateTime
    updated_at: UtcDateTime


class CreateSessionRequest(CamelModel):
    """Request schema for creating a new session."""

    user_id: Annotated[str, AfterValidator(not_blank)] = Field(description="Owning user identifier")
    title: str | None = Field(default=None, max_length=TITLE_MAX_LENGTH, description="Optional display title")


class RenameSessionRequest(CamelModel):
    """Request schema for renaming a session."""

    title: Annotated[str, AfterValidator(not_blank)] = Field(max_length=TITLE_MAX_LENGTH)


class FavoriteSessionRequest(CamelModel):
    """Request schema for toggling the favorite flag."""

    favorite: bool
