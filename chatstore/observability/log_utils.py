"""
Structured logging helpers.

Message content and retrieval snippets are user data of arbitrary size,
so everything passed as log context goes through ``safe_log_value``:
text is collapsed to a short single-line preview, domain objects are
reduced to their type and id, and collections to their size.

Dependencies: logging (stdlib), pydantic
System role: Log-safe rendering of chat data
"""

import logging
from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel

PREVIEW_LENGTH = 80


def preview_text(text: str, max_length: int = PREVIEW_LENGTH) -> str:
    """
    Collapse whitespace and cut text to a single-line preview.

    Args:
        text: Message content, snippet or any other free text
        max_length: Characters kept before the truncation marker

    Returns:
        str: Preview ending in ``... (+N chars)`` when text was cut
    """
    flat = " ".join(text.split())
    if len(flat) <= max_length:
        return flat
    return f"{flat[:max_length]}... (+{len(flat) - max_length} chars)"


def safe_log_value(value: Any, max_length: int = 200) -> str:
    """
    Render a value for log context without dumping user data.

    Args:
        value: Value to render
        max_length: Preview length for text values

    Returns:
        str: Log-safe representation
    """
    if value is None:
        return "None"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, str):
        return preview_text(value, max_length)
    if isinstance(value, BaseModel):
        entity_id = getattr(value, "id", None)
        name = type(value).__name__
        return f"{name}(id={entity_id})" if entity_id is not None else name
    if isinstance(value, Mapping):
        return f"dict({len(value)} keys)"
    if isinstance(value, (list, tuple, set)):
        return f"{type(value).__name__}({len(value)} items)"
    return preview_text(str(value), max_length)


def _log_context(context: Mapping[str, Any]) -> dict[str, str]:
    return {key: safe_log_value(val) for key, val in context.items()}


def log_with_context(logger: logging.Logger, level: int, message: str, **context) -> None:
    """
    Log a message with log-safe structured context.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Fields attached to the record as ``extra``
    """
    logger.log(level, message, extra=_log_context(context))


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context,
) -> None:
    """
    Log a failure at ERROR with traceback and log-safe context.

    The exception type and message are added as ``error_type`` and
    ``error_msg``.
    """
    extra = _log_context(context)
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = preview_text(str(exc), 200)
    logger.error(message, exc_info=exc, extra=extra)
