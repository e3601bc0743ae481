"""
Pagination configuration settings.

Dependencies: pydantic_settings
System role: Default and maximum page sizes for message history
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PaginationSettings(BaseSettings):
    """Message history pagination configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PAGINATION_",
        case_sensitive=False,
        extra="ignore",
    )

    default_page_size: int = Field(default=20, ge=1, description="Page size when none is requested")
    max_page_size: int = Field(default=100, ge=1, description="Hard cap applied to requested page sizes")
