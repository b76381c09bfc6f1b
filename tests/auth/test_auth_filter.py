"""Tests for bearer token extraction and principal resolution."""

from datetime import timedelta
from types import SimpleNamespace

import pytest
from starlette.datastructures import Headers

from record_shop.auth import (
    Principal,
    authenticate_request,
    extract_bearer_token,
    get_principal,
    resolve_principal,
)
from record_shop.models import UserRole
from record_shop.repositories import UserRepository
from record_shop.security import create_access_token
from tests.factories import ADMIN_EMAIL, USER_EMAIL


def _request(authorization: str | None) -> SimpleNamespace:
    raw = {"Authorization": authorization} if authorization is not None else {}
    return SimpleNamespace(headers=Headers(raw))


def test_extract_bearer_token():
    assert extract_bearer_token(_request("Bearer abc.def.ghi")) == "abc.def.ghi"


def test_extract_bearer_token_missing_or_other_scheme():
    assert extract_bearer_token(_request(None)) is None
    assert extract_bearer_token(_request("Basic dXNlcjpwYXNz")) is None
    assert extract_bearer_token(_request("bearer abc")) is None
    assert extract_bearer_token(_request("Bearer")) is None


def test_principal_authorities_follow_role():
    user = SimpleNamespace(email="a@test.com", role=UserRole.ADMIN)
    principal = Principal.for_user(user)

    assert principal.email == "a@test.com"
    assert principal.role is UserRole.ADMIN
    assert principal.authorities == frozenset({"ADMIN"})
    assert principal.has_authority("ADMIN")
    assert not principal.has_authority("USER")


@pytest.mark.asyncio
async def test_resolve_principal_for_valid_token(db, admin_user):
    principal = await resolve_principal(create_access_token(ADMIN_EMAIL), UserRepository(db))

    assert principal is not None
    assert principal.email == ADMIN_EMAIL
    assert principal.has_authority("ADMIN")


@pytest.mark.asyncio
async def test_resolve_principal_unknown_subject(db):
    token = create_access_token("ghost@test.com")

    assert await resolve_principal(token, UserRepository(db)) is None


@pytest.mark.asyncio
async def test_resolve_principal_expired_token(db, admin_user):
    token = create_access_token(ADMIN_EMAIL, expires_delta=timedelta(seconds=-1))

    assert await resolve_principal(token, UserRepository(db)) is None


@pytest.mark.asyncio
async def test_resolve_principal_malformed_token(db):
    assert await resolve_principal("not-a-jwt", UserRepository(db)) is None


def _request_with_state(authorization: str | None) -> SimpleNamespace:
    request = _request(authorization)
    request.state = SimpleNamespace()
    return request


@pytest.mark.asyncio
async def test_authenticate_request_attaches_principal(session_maker, regular_user):
    request = _request_with_state(f"Bearer {create_access_token(USER_EMAIL)}")

    await authenticate_request(request)

    assert get_principal(request).email == USER_EMAIL
    assert get_principal(request).role is UserRole.USER


@pytest.mark.asyncio
@pytest.mark.parametrize("authorization", [None, "Bearer not-a-token", "Basic abc"])
async def test_authenticate_request_leaves_anonymous(session_maker, authorization):
    request = _request_with_state(authorization)

    await authenticate_request(request)

    assert get_principal(request) is None
