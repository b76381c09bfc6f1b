"""Tests for application wiring."""

import pytest


@pytest.mark.asyncio
async def test_health_is_public(public_client):
    response = await public_client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_request_id_is_echoed(public_client):
    response = await public_client.get("/health", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"


@pytest.mark.asyncio
async def test_request_id_is_generated(public_client):
    response = await public_client.get("/health")

    assert len(response.headers["X-Request-ID"]) == 36
