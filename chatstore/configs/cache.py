"""
Cache configuration settings.

Bounds for the in-process session cache namespaces.

Dependencies: pydantic, pydantic_settings
System role: Read-through cache sizing and expiry
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CacheSettings(BaseSettings):
    """In-process cache configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CACHE_",
        case_sensitive=False,
        extra="ignore",
    )

    enabled: bool = Field(default=True, description="Serve session reads from the cache")
    max_size: int = Field(
        default=1000,
        ge=1,
        description="Maximum entries per cache namespace (least recently used evicted first)",
    )
    ttl_seconds: float = Field(
        default=600,
        gt=0,
        description="Time-to-live of a cache entry in seconds",
    )
