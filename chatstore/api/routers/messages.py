"""
Message API endpoints.

Routes:
- POST /sessions/{session_id}/messages - Append message
- GET /sessions/{session_id}/messages?page=&size= - Paged history

Dependencies: chatstore.application.services, chatstore.models
System role: Chat history HTTP API
"""

from fastapi import APIRouter, Depends, Query, status

from chatstore.api.deps import get_message_service, get_settings_dependency, require_api_key
from chatstore.application.services import MessageService
from chatstore.configs import Settings
from chatstore.models.common import Page
from chatstore.models.error import ErrorResponse
from chatstore.models.message import ChatMessage, CreateMessageRequest

router = APIRouter(
    prefix="/sessions/{session_id}/messages",
    tags=["messages"],
    dependencies=[Depends(require_api_key)],
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)


@router.post("", response_model=ChatMessage, status_code=status.HTTP_201_CREATED)
async def add_message(
    session_id: str,
    request: CreateMessageRequest,
    message_service: MessageService = Depends(get_message_service),
) -> ChatMessage:
    """
    Append a message to a session.

    Args:
        session_id: Owning session
        request: CreateMessageRequest with sender, content, userId and context
        message_service: Injected MessageService

    Returns:
        ChatMessage: Persisted message
    """
    return await message_service.add_message(
        session_id,
        sender=request.sender,
        content=request.content,
        user_id=request.user_id,
        context=request.context,
    )


@router.get("", response_model=Page[ChatMessage])
async def get_messages(
    session_id: str,
    page: int = Query(default=0, ge=0),
    size: int | None = Query(default=None, ge=1),
    message_service: MessageService = Depends(get_message_service),
    settings: Settings = Depends(get_settings_dependency),
) -> Page[ChatMessage]:
    """
    Get a page of a session's messages, oldest first.

    ``size`` defaults to the configured page size and is capped at the
    configured maximum.
    """
    pagination = settings.pagination
    page_size = min(size or pagination.default_page_size, pagination.max_page_size)
    return await message_service.get_messages(session_id, page, page_size)
