# This file defines the store-location query and worked-examples endpoints.
# It exists so clients can submit (k, grid) queries under the versioned API path.
# Missing fields are rejected here before the core runs; content checks belong to the core validator.
# Successful results are wrapped in the standard envelope with version and request metadata.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Body, Depends, Request

from src.api.api_config import ApiConfig
from src.api.dependencies import get_config, get_store_location_service
from src.api.error_handlers import APIError
from src.api.response_envelope import build_object_envelope
from src.api.schemas.common import ErrorResponse
from src.api.schemas.store_location_schemas import (
    ExampleListResponseV1,
    StoreLocationRequestV1,
    StoreLocationResponseV1,
)
from src.api.services.store_location_service import StoreLocationService

router = APIRouter(tags=["store-locations"])
StoreLocationServiceDep = Annotated[StoreLocationService, Depends(get_store_location_service)]
ConfigDep = Annotated[ApiConfig, Depends(get_config)]


@router.post(
    "/store-locations",
    response_model=StoreLocationResponseV1,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid k / grid."},
        413: {"model": ErrorResponse, "description": "Query exceeds the configured workload limit."},
        500: {"model": ErrorResponse, "description": "Unexpected server error."},
    },
)
def find_store_locations(
    request: Request,
    service: StoreLocationServiceDep,
    config: ConfigDep,
    payload: Annotated[StoreLocationRequestV1 | None, Body()] = None,
) -> dict[str, object]:
    missing: list[str] = []
    if payload is None or payload.k is None:
        missing.append("k")
    if payload is None or payload.grid is None:
        missing.append("grid")
    if missing:
        raise APIError(
            status_code=400,
            error_code="MISSING_REQUIRED_FIELDS",
            message="Both k and grid are required.",
            details={"missing": missing},
        )

    result = service.find_store_locations(k=payload.k, grid=payload.grid)

    return build_object_envelope(
        api_version_path=config.api_version_path,
        schema_version=config.schema_version,
        request_id=request.state.request_id,
        data=result,
    )


@router.get("/examples", response_model=ExampleListResponseV1)
def list_worked_examples(
    request: Request,
    service: StoreLocationServiceDep,
    config: ConfigDep,
) -> dict[str, object]:
    return build_object_envelope(
        api_version_path=config.api_version_path,
        schema_version=config.schema_version,
        request_id=request.state.request_id,
        data=service.get_examples(),
    )
