"""
Service error taxonomy.

Services raise these; the API layer maps each one to its HTTP status
through ``status_code`` (see chatstore.api.error_handlers).

Dependencies: fastapi (status codes only)
System role: Typed domain failures
"""

from fastapi import status


class ChatStoreError(Exception):
    """Base class for chat storage errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, resource_id: str | None = None):
        self.message = message
        self.resource_id = resource_id
        super().__init__(self.message)


class NotFoundError(ChatStoreError):
    """Raised when a session is missing or a message does not belong to its owner."""

    status_code = status.HTTP_404_NOT_FOUND


class BadRequestError(ChatStoreError):
    """Raised when request data is malformed."""

    status_code = status.HTTP_400_BAD_REQUEST


class UnauthorizedError(ChatStoreError):
    """Raised when the API key is missing or invalid."""

    status_code = status.HTTP_401_UNAUTHORIZED


class DuplicateResourceError(ChatStoreError):
    """Raised when a resource with the same identity already exists."""

    status_code = status.HTTP_409_CONFLICT


class BusinessRuleError(ChatStoreError):
    """Raised when a request is well formed but breaks a domain rule."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class RateLimitExceededError(ChatStoreError):
    """Raised when a caller exceeds its request allowance."""

    status_code = status.HTTP_429_TOO_MANY_REQUESTS


class DatabaseError(ChatStoreError):
    """Raised when the store fails for a reason other than a missing row."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
