"""
Session API endpoints.

Routes:
- POST /sessions - Create new session
- GET /sessions?userId=&favorite= - List a user's sessions
- PATCH /sessions/{id}/rename - Rename session
- PATCH /sessions/{id}/favorite - Set or clear favorite flag
- DELETE /sessions/{id} - Delete session and its messages

Dependencies: chatstore.application.services, chatstore.models
System role: Session management HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Query, Response, status

from chatstore.api.deps import get_message_service, get_session_service, require_api_key
from chatstore.application.services import MessageService, SessionService
from chatstore.models.error import ErrorResponse
from chatstore.models.session import (
    ChatSession,
    CreateSessionRequest,
    FavoriteSessionRequest,
    RenameSessionRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/sessions",
    tags=["sessions"],
    dependencies=[Depends(require_api_key)],
    responses={401: {"model": ErrorResponse}, 400: {"model": ErrorResponse}},
)


@router.post("", response_model=ChatSession, status_code=status.HTTP_201_CREATED)
async def create_session(
    request: CreateSessionRequest,
    session_service: SessionService = Depends(get_session_service),
) -> ChatSession:
    """
    Create a new session for a user.

    Args:
        request: CreateSessionRequest with userId and optional title
        session_service: Injected SessionService

    Returns:
        ChatSession: Created session
    """
    return await session_service.create_session(request.user_id, request.title)


@router.get("", response_model=list[ChatSession])
async def list_sessions(
    user_id: str = Query(alias="userId", min_length=1),
    favorite: bool | None = Query(default=None),
    session_service: SessionService = Depends(get_session_service),
) -> list[ChatSession]:
    """
    List a user's sessions, most recently updated first.

    Args:
        user_id: Owning user (query parameter ``userId``)
        favorite: Optional favorite filter
        session_service: Injected SessionService

    Returns:
        list[ChatSession]: Possibly empty list
    """
    return await session_service.get_sessions_for_user(user_id, favorite)


@router.patch(
    "/{session_id}/rename",
    response_model=ChatSession,
    responses={404: {"model": ErrorResponse}},
)
async def rename_session(
    session_id: str,
    request: RenameSessionRequest,
    session_service: SessionService = Depends(get_session_service),
) -> ChatSession:
    return await session_service.rename_session(session_id, request.title)


@router.patch(
    "/{session_id}/favorite",
    response_model=ChatSession,
    responses={404: {"model": ErrorResponse}},
)
async def mark_favorite(
    session_id: str,
    request: FavoriteSessionRequest,
    session_service: SessionService = Depends(get_session_service),
) -> ChatSession:
    return await session_service.mark_favorite(session_id, request.favorite)


@router.delete(
    "/{session_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def delete_session(
    session_id: str,
    session_service: SessionService = Depends(get_session_service),
    message_service: MessageService = Depends(get_message_service),
) -> Response:
    """
    Delete a session together with its messages.

    Messages go first. Their delete is idempotent and does not need the
    session to exist, so a retry after a failed session delete is safe.

    Raises:
        NotFoundError: Session does not exist (404)
    """
    deleted = await message_service.delete_messages_for_session(session_id)
    await session_service.delete_session(session_id)
    logger.info("Session and messages deleted", extra={"session_id": session_id, "messages": deleted})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
