"""
Health check API endpoints.

Routes: GET /health, GET /health/db

Dependencies: chatstore.boundary.db
System role: Health check HTTP API
"""

from fastapi import APIRouter, Response, status
from pydantic import BaseModel

from chatstore.boundary.db import connection


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/db", response_model=HealthResponse)
async def health_check_db(response: Response) -> HealthResponse:
    """Database health check."""
    if await connection.ping_database():
        return HealthResponse(status="healthy", message="Database connection OK")
    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return HealthResponse(status="unhealthy", message="Database unreachable")
