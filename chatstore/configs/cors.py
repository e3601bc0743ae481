"""
CORS configuration settings.

Dependencies: pydantic_settings
System role: Cross-origin policy for browser clients
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from chatstore.configs.base import split_csv


class CorsSettings(BaseSettings):
    """Cross-origin resource sharing configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CORS_",
        case_sensitive=False,
        extra="ignore",
    )

    allowed_origins: str = Field(default="http://localhost:3000", description="Comma-separated origins")
    allowed_methods: str = Field(default="GET,POST,PATCH,DELETE,OPTIONS", description="Comma-separated methods")
    allowed_headers: str = Field(default="*", description="Comma-separated headers")
    max_age: int = Field(default=3600, description="Preflight cache lifetime in seconds")

    @property
    def allowed_origins_list(self) -> list[str]:
        return split_csv(self.allowed_origins)

    @property
    def allowed_methods_list(self) -> list[str]:
        return split_csv(self.allowed_methods)

    @property
    def allowed_headers_list(self) -> list[str]:
        return split_csv(self.allowed_headers)
