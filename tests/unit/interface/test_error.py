"""Unit tests for the JSON error handlers."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel, Field

from commentkit.adapter.error import AdapterError, EmailDeliveryError
from commentkit.domain.error import (
    AuthenticationError,
    ConflictError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from commentkit.domain.value import Domain
from commentkit.interface.error import register_exception_handlers, validation_message


class Payload(BaseModel):
    name: str = Field(min_length=1)


def build_client() -> TestClient:
    app = FastAPI()
    register_exception_handlers(app)

    failures = {
        "validation": ValidationError("content is required"),
        "auth": AuthenticationError("Not authenticated"),
        "forbidden": NotAuthorizedError("site", "7", "3"),
        "missing": NotFoundError("Site", "7"),
        "conflict": ConflictError("Domain already registered"),
        "email": EmailDeliveryError("resend said no"),
        "upstream": AdapterError("timeout"),
        "boom": RuntimeError("secret detail"),
    }

    @app.get("/fail/{kind}")
    async def fail(kind: str):
        raise failures[kind]

    @app.get("/domain")
    async def bad_domain():
        Domain("https://not-bare")

    @app.post("/payload")
    async def payload(body: Payload):
        return {"ok": True}

    return TestClient(app, raise_server_exceptions=False)


class TestExceptionHandlers:
    @pytest.mark.parametrize(
        "kind,status_code,message",
        [
            ("validation", 400, "content is required"),
            ("auth", 401, "Not authenticated"),
            ("forbidden", 403, "Forbidden"),
            ("missing", 404, "Site not found"),
            ("conflict", 409, "Domain already registered"),
            ("email", 500, "Failed to send magic link email. Please try again."),
            ("upstream", 502, "Upstream service error"),
            ("boom", 500, "Internal server error"),
        ],
    )
    def test_status_and_body(self, kind, status_code, message):
        client = build_client()

        response = client.get(f"/fail/{kind}")

        assert response.status_code == status_code
        assert response.json() == {"error": message}

    def test_value_object_error_is_bad_request(self):
        client = build_client()

        response = client.get("/domain")

        assert response.status_code == 400
        assert "bare hostname" in response.json()["error"]

    def test_request_body_validation(self):
        client = build_client()

        response = client.post("/payload", json={"name": ""})

        assert response.status_code == 400
        assert response.json()["error"].startswith("name: ")

    def test_unknown_route_keeps_error_shape(self):
        client = build_client()

        response = client.get("/nowhere")

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}


class TestValidationMessage:
    def test_empty(self):
        assert validation_message([]) == "Invalid request"

    def test_strips_value_error_prefix(self):
        errors = [{"loc": ("body", "email"), "msg": "Value error, Invalid email address"}]

        assert validation_message(errors) == "email: Invalid email address"
