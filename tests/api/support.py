# This file provides shared helpers for API endpoint tests.
# It exists so tests can override the config and service dependencies without global state leaks.
# The helpers build consistent config objects and scoped TestClient contexts.
# Centralized test wiring keeps API tests small and focused on behavior.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.api_config import ApiConfig
from src.api.app import app as default_app
from src.api.dependencies import get_config, get_store_location_service
from src.api.services.store_location_service import StoreLocationService


def build_test_config(**overrides: Any) -> ApiConfig:
    """Create deterministic API config for tests."""

    values: dict[str, Any] = {
        "api_name": "Test Store Locator API",
        "api_version_path": "/api/v1",
        "schema_version": "1.0.0",
        "host": "0.0.0.0",
        "port": 8000,
        "environment": "test",
        "enable_request_logging": False,
        "allowed_origins": [],
        "rate_limit_enabled": False,
        "rate_limit_max_requests": 100,
        "rate_limit_window_seconds": 900,
        "max_pair_checks": 0,
        "app_version": "0.1.0",
    }
    values.update(overrides)
    return ApiConfig(**values)


class ExplodingStoreLocationService:
    """Service double that fails with an unexpected error."""

    def find_store_locations(self, **_: Any) -> dict[str, Any]:
        raise RuntimeError("simulated resource exhaustion")

    def get_examples(self) -> list[dict[str, Any]]:
        raise RuntimeError("simulated resource exhaustion")


@contextmanager
def api_test_client(
    *,
    config: ApiConfig | None = None,
    store_location_service: Any | None = None,
    app: FastAPI | None = None,
    raise_server_exceptions: bool = True,
) -> Iterator[TestClient]:
    """Yield a TestClient with scoped dependency overrides."""

    target_app = app or default_app
    resolved_config = config or build_test_config()
    resolved_service = store_location_service or StoreLocationService(config=resolved_config)

    target_app.dependency_overrides[get_config] = lambda: resolved_config
    target_app.dependency_overrides[get_store_location_service] = lambda: resolved_service
    if target_app.state.rate_limiter is not None:
        target_app.state.rate_limiter.reset()

    try:
        with TestClient(target_app, raise_server_exceptions=raise_server_exceptions) as client:
            yield client
    finally:
        target_app.dependency_overrides.clear()
