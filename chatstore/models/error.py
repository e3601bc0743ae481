"""
Error response schema.

Dependencies: pydantic
System role: Uniform error body for every failed request
"""

from datetime import datetime

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response schema."""

    timestamp: datetime
    status: int = Field(description="HTTP status code")
    error: str = Field(description="HTTP reason phrase")
    message: str = Field(description="Human readable error message")
    path: str = Field(description="Request path")
