# This file provides dependency factories for FastAPI routes and middleware.
# It exists so services are created once and shared through dependency injection.
# The setup keeps routers thin and makes endpoint tests easy to override.
# Centralized construction also ensures one consistent API configuration is used.

from __future__ import annotations

from functools import lru_cache

from src.api.api_config import ApiConfig, get_api_config
from src.api.services.store_location_service import StoreLocationService


@lru_cache(maxsize=1)
def get_store_location_service() -> StoreLocationService:
    config = get_api_config()
    return StoreLocationService(config=config)


def get_config() -> ApiConfig:
    return get_api_config()
