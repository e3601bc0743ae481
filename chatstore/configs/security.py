"""
Security configuration settings.

Shared-secret API key authentication for all session endpoints.

Dependencies: pydantic_settings
System role: API key authentication configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from chatstore.configs.base import split_csv


class SecuritySettings(BaseSettings):
    """API key authentication configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SECURITY_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key_header: str = Field(
        default="X-API-KEY",
        description="Request header carrying the API key",
    )
    api_keys: str = Field(
        default="",
        description="Comma-separated list of accepted API keys",
    )

    @property
    def api_key_list(self) -> list[str]:
        """Accepted API keys as a list (empty list rejects every request)."""
        return split_csv(self.api_keys)
