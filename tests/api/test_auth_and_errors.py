"""
Test suite for API key enforcement and the uniform error body.

System role: Verification of authentication and exception handlers
"""

from fastapi import FastAPI
from fastapi.testclient import TestClient
import pytest
from sqlalchemy.exc import OperationalError

from chatstore.api.error_handlers import (
    DATABASE_ERROR_MESSAGE,
    GENERIC_ERROR_MESSAGE,
    register_exception_handlers,
)
from chatstore.application.exceptions import (
    BadRequestError,
    BusinessRuleError,
    DatabaseError,
    DuplicateResourceError,
    RateLimitExceededError,
)


class TestApiKey:
    """Requests to session routes must carry a configured key."""

    def test_missing_key_is_rejected(self, app_client):
        response = app_client.get("/api/v1/sessions", params={"userId": "u1"})

        assert response.status_code == 401
        body = response.json()
        assert body["message"] == "Invalid or missing API key"
        assert body["error"] == "Unauthorized"
        assert body["path"] == "/api/v1/sessions"

    def test_wrong_key_is_rejected(self, app_client):
        response = app_client.get(
            "/api/v1/sessions", params={"userId": "u1"}, headers={"X-API-KEY": "nope"}
        )

        assert response.status_code == 401

    @pytest.mark.parametrize("key", ["test-key", "second-key"])
    def test_any_configured_key_is_accepted(self, app_client, key):
        response = app_client.get(
            "/api/v1/sessions", params={"userId": "u1"}, headers={"X-API-KEY": key}
        )

        assert response.status_code == 200

    def test_message_routes_require_key(self, app_client):
        response = app_client.get("/api/v1/sessions/s-1/messages")

        assert response.status_code == 401

    def test_openapi_is_public(self, app_client):
        assert app_client.get("/openapi.json").status_code == 200


class TestErrorHandlers:
    """Exception to response mapping."""

    @pytest.fixture
    def client(self):
        app = FastAPI()
        register_exception_handlers(app)

        @app.get("/boom")
        async def boom():
            raise RuntimeError("internal detail")

        @app.get("/db")
        async def db_failure():
            raise OperationalError("SELECT 1", {}, Exception("connection refused"))

        @app.get("/database-error")
        async def database_error():
            raise DatabaseError("Failed to delete session due to database error", "s-1")

        @app.get("/bad")
        async def bad():
            raise BadRequestError("bad input")

        @app.get("/duplicate")
        async def duplicate():
            raise DuplicateResourceError("exists")

        @app.get("/rule")
        async def rule():
            raise BusinessRuleError("rule broken")

        @app.get("/limited")
        async def limited():
            raise RateLimitExceededError("slow down")

        return TestClient(app, raise_server_exceptions=False)

    def test_unexpected_error_hides_details(self, client):
        response = client.get("/boom")

        assert response.status_code == 500
        body = response.json()
        assert body["message"] == GENERIC_ERROR_MESSAGE
        assert body["error"] == "Internal Server Error"
        assert "internal detail" not in response.text

    def test_raw_database_error_is_generic(self, client):
        response = client.get("/db")

        assert response.status_code == 500
        assert response.json()["message"] == DATABASE_ERROR_MESSAGE
        assert "connection refused" not in response.text

    def test_typed_database_error_is_generic(self, client):
        response = client.get("/database-error")

        assert response.status_code == 500
        assert response.json()["message"] == DATABASE_ERROR_MESSAGE

    @pytest.mark.parametrize(
        "path,status,message",
        [
            ("/bad", 400, "bad input"),
            ("/duplicate", 409, "exists"),
            ("/rule", 422, "rule broken"),
            ("/limited", 429, "slow down"),
        ],
    )
    def test_client_errors_keep_message(self, client, path, status, message):
        response = client.get(path)

        assert response.status_code == status
        body = response.json()
        assert body["status"] == status
        assert body["message"] == message
        assert body["path"] == path
        assert "timestamp" in body

    def test_unknown_route_uses_error_body(self, client):
        response = client.get("/nowhere")

        assert response.status_code == 404
        assert response.json()["path"] == "/nowhere"


class TestErrorTaxonomy:
    """Each error class carries its HTTP status."""

    @pytest.mark.parametrize(
        "error_cls,status",
        [
            (BadRequestError, 400),
            (DuplicateResourceError, 409),
            (BusinessRuleError, 422),
            (RateLimitExceededError, 429),
            (DatabaseError, 500),
        ],
    )
    def test_status_code(self, error_cls, status):
        error = error_cls("msg", "id-1")

        assert error.status_code == status
        assert error.message == "msg"
        assert error.resource_id == "id-1"
        assert error_cls.__doc__
