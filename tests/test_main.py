"""Tests for the root application wiring."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

import main
from services.order_service.main import ORDER_SCHEMA
from shared.observability.setup import get_tracer_provider


def test_order_app_is_mounted_under_api_orders() -> None:
    # No context manager: startup would try to reach PostgreSQL
    client = TestClient(main.app)

    response = client.get("/api/orders/health")

    assert response.status_code == 200
    assert response.json() == {"service": "order", "status": "running"}


def test_unmounted_path_is_not_found() -> None:
    client = TestClient(main.app)

    assert client.get("/health").status_code == 404


def test_startup_bootstraps_order_schema(monkeypatch: pytest.MonkeyPatch) -> None:
    init_schema = AsyncMock()
    engine = MagicMock()
    engine.dispose = AsyncMock()
    monkeypatch.setattr(main, "init_schema", init_schema)
    monkeypatch.setattr(main, "engine", engine)

    with TestClient(main.app):
        init_schema.assert_awaited_once_with("order_schema")

    engine.dispose.assert_awaited_once()
    assert ORDER_SCHEMA == "order_schema"


def test_tracer_provider_is_installed_once() -> None:
    first = get_tracer_provider("order_service")

    assert get_tracer_provider("another_service") is first
