"""Tests for the domain error to HTTP translation layer."""

import json

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from notevault.core.results import (
    AuthReason,
    Ok,
    auth_error,
    conflict_error,
    forbidden_error,
    not_found_error,
    validation_error,
)
from notevault.errors import DomainHTTPError, error_response, register_error_handlers, status_for, unwrap


@pytest.mark.parametrize(
    "error,expected",
    [
        (validation_error("bad"), 400),
        (conflict_error("taken"), 400),
        (forbidden_error(), 403),
        (not_found_error("gone"), 404),
        (auth_error(AuthReason.MISSING, "Access denied"), 401),
        (auth_error(AuthReason.INVALID, "Invalid token"), 400),
        (auth_error(AuthReason.EXPIRED, "Token expired"), 400),
        (auth_error(AuthReason.CREDENTIALS, "Invalid credentials"), 400),
    ],
)
def test_status_for(error, expected):
    assert status_for(error) == expected


def test_error_response_body():
    response = error_response(forbidden_error())
    assert response.status_code == 403
    assert json.loads(response.body) == {"error": "forbidden", "message": "Not authorized"}
    assert "www-authenticate" not in response.headers


def test_unwrap():
    assert unwrap(Ok("value")) == "value"
    with pytest.raises(DomainHTTPError) as exc_info:
        unwrap(not_found_error("User not found"))
    assert exc_info.value.error.message == "User not found"


class Payload(BaseModel):
    count: int


def test_request_validation_is_400():
    app = FastAPI()
    register_error_handlers(app)

    @app.post("/items")
    async def create_item(payload: Payload):
        return payload

    response = TestClient(app).post("/items", json={"count": "many"})

    assert response.status_code == 400
    assert response.json() == {"error": "validation", "message": "Invalid request data"}
