"""Shared test data and client helpers."""

from httpx import ASGITransport, AsyncClient

from record_shop.security import create_access_token

DEFAULT_PASSWORD = "password"
ADMIN_EMAIL = "admin@gmail.com"
USER_EMAIL = "user@gmail.com"

UUID_PATTERN = r"^[0-9a-fA-F-]{36}$"


def bearer(email: str) -> dict[str, str]:
    """Authorization header carrying a freshly issued token for ``email``."""
    return {"Authorization": f"Bearer {create_access_token(email)}"}


def make_client(headers: dict[str, str] | None = None) -> AsyncClient:
    from record_shop.main import app

    return AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers=headers,
    )


def register_payload(**overrides: str) -> dict[str, str]:
    payload = {
        "firstName": "user",
        "lastName": "test",
        "email": "newuser@test.com",
        "password": DEFAULT_PASSWORD,
    }
    payload.update(overrides)
    return payload
