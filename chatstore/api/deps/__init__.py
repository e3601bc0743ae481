"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    ServiceCache,
    get_message_service,
    get_service_cache,
    get_session_service,
    get_settings_dependency,
    require_api_key,
)

__all__ = [
    "ServiceCache",
    "get_message_service",
    "get_service_cache",
    "get_session_service",
    "get_settings_dependency",
    "require_api_key",
]
