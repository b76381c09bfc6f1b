"""Tests for the JSON error envelope."""

import json

import pytest
from fastapi.exceptions import RequestValidationError
from starlette.requests import Request

from record_shop import errors
from record_shop.exceptions import (
    AccessDeniedError,
    AlreadyExistsError,
    AuthenticationRequiredError,
    BadCredentialsError,
    ResourceNotFoundError,
)


def _request() -> Request:
    return Request({"type": "http", "method": "GET", "path": "/", "headers": []})


def _body(response) -> dict:
    return json.loads(response.body)


@pytest.mark.parametrize(
    ("exc", "status_code", "message"),
    [
        (AlreadyExistsError("taken"), 400, "BAD_REQUEST"),
        (BadCredentialsError(), 401, "UNAUTHORIZED"),
        (AuthenticationRequiredError(), 401, "UNAUTHORIZED"),
        (AccessDeniedError(), 403, "FORBIDDEN"),
        (ResourceNotFoundError("gone"), 404, "NOT_FOUND"),
    ],
)
@pytest.mark.asyncio
async def test_domain_errors_map_to_envelope(exc, status_code, message):
    response = await errors.record_shop_error_handler(_request(), exc)

    assert response.status_code == status_code
    assert _body(response) == {
        "statusCode": status_code,
        "message": message,
        "errors": {"message": exc.message},
    }


@pytest.mark.asyncio
async def test_unhandled_exception_hides_detail(monkeypatch):
    monkeypatch.setattr(errors.settings, "debug", False)

    response = await errors.unhandled_exception_handler(_request(), RuntimeError("db exploded"))

    assert response.status_code == 500
    assert _body(response) == {
        "statusCode": 500,
        "message": "INTERNAL_SERVER_ERROR",
        "errors": {"message": errors.GENERIC_ERROR_MESSAGE},
    }


@pytest.mark.asyncio
async def test_unhandled_exception_shows_detail_in_debug(monkeypatch):
    monkeypatch.setattr(errors.settings, "debug", True)

    response = await errors.unhandled_exception_handler(_request(), RuntimeError("db exploded"))

    assert _body(response)["errors"] == {"message": "db exploded"}


def test_validation_errors_keep_first_message_per_field():
    exc = RequestValidationError(
        [
            {"loc": ("body", "name"), "msg": "Name is required", "type": "required"},
            {"loc": ("body", "name"), "msg": "second", "type": "too_long"},
            {"loc": ("path", "genre_id"), "msg": "Input should be a valid UUID", "type": "uuid"},
            {"loc": ("body",), "msg": "Field required", "type": "missing"},
        ]
    )

    assert errors.validation_errors(exc) == {
        "name": "Name is required",
        "genre_id": "Input should be a valid UUID",
        "message": "Field required",
    }


def test_validation_errors_never_key_by_position():
    exc = RequestValidationError(
        [
            {"loc": ("body", 9), "msg": "JSON decode error", "type": "json_invalid"},
            {"loc": ("body", "tags", 0), "msg": "Input should be a string", "type": "string_type"},
        ]
    )

    assert errors.validation_errors(exc) == {
        "message": "JSON decode error",
        "tags": "Input should be a string",
    }


@pytest.mark.asyncio
async def test_unknown_route_uses_envelope(public_client):
    response = await public_client.get("/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {
        "statusCode": 404,
        "message": "NOT_FOUND",
        "errors": {"message": "Not Found"},
    }


@pytest.mark.asyncio
async def test_method_not_allowed_uses_envelope(public_client):
    response = await public_client.patch("/health")

    assert response.status_code == 405
    assert response.json()["message"] == "METHOD_NOT_ALLOWED"
    assert "GET" in response.headers["allow"]


@pytest.mark.asyncio
async def test_missing_body_is_a_validation_error(admin_client):
    response = await admin_client.post("/genres/")

    assert response.status_code == 400
    assert response.json()["statusCode"] == 400
