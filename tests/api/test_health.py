from unittest.mock import AsyncMock, patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from chatstore.api.routers.health import router as health_router


@pytest.fixture
def client():
    app = FastAPI()
    app.include_router(health_router, prefix="/api/v1")
    return TestClient(app)


def test_health_check(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Server Healthy"}


def test_health_check_db(client):
    with patch("chatstore.boundary.db.connection.ping_database", new_callable=AsyncMock, return_value=True):
        response = client.get("/api/v1/health/db")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Database connection OK"}


def test_health_check_db_unreachable(client):
    with patch("chatstore.boundary.db.connection.ping_database", new_callable=AsyncMock, return_value=False):
        response = client.get("/api/v1/health/db")
    assert response.status_code == 503
    assert response.json()["status"] == "unhealthy"


def test_health_needs_no_api_key(app_client):
    response = app_client.get("/api/v1/health")
    assert response.status_code == 200


def test_health_check_db_against_sqlite(app_client):
    response = app_client.get("/api/v1/health/db")
    assert response.status_code == 200
