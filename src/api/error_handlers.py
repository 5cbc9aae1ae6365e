# This file defines consistent API error payloads and exception handlers.
# It exists so every endpoint returns the same error shape with request trace fields.
# The handlers translate query validation, HTTP, and unexpected failures into safe client messages.
# Centralized error handling prevents stack traces from leaking in production responses.

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.store_locator.validation import GridValidationError

LOGGER = logging.getLogger("api")

VALIDATION_KIND = "ValidationError"
INTERNAL_KIND = "InternalError"


class APIError(Exception):
    """Domain error type with structured API details."""

    def __init__(
        self,
        *,
        status_code: int,
        error_code: str,
        message: str,
        details: Any | None = None,
        field: str | None = None,
        kind: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.error_code = error_code
        self.message = message
        self.details = details
        self.field = field
        self.kind = kind
        super().__init__(message)

    @classmethod
    def from_validation_error(cls, exc: GridValidationError) -> APIError:
        return cls(
            status_code=400,
            error_code="VALIDATION_ERROR",
            message=exc.message,
            field=exc.field,
            kind=VALIDATION_KIND,
        )


def _request_id(request: Request) -> str:
    return str(getattr(request.state, "request_id", "unknown"))


def build_error_body(
    *,
    request: Request,
    error_code: str,
    message: str,
    details: Any | None = None,
    field: str | None = None,
    kind: str | None = None,
) -> dict[str, Any]:
    return {
        "error_code": error_code,
        "kind": kind,
        "message": message,
        "field": field,
        "details": details,
        "request_id": _request_id(request),
        "timestamp": datetime.now(tz=UTC).isoformat(),
    }


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=build_error_body(
                request=request,
                error_code=exc.error_code,
                message=exc.message,
                details=exc.details,
                field=exc.field,
                kind=exc.kind,
            ),
        )

    @app.exception_handler(GridValidationError)
    async def grid_validation_error_handler(
        request: Request, exc: GridValidationError
    ) -> JSONResponse:
        return await api_error_handler(request, APIError.from_validation_error(exc))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content=build_error_body(
                request=request,
                error_code="VALIDATION_ERROR",
                message="Invalid request body.",
                details=jsonable_encoder(exc.errors()),
                kind=VALIDATION_KIND,
            ),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        error_code = "NOT_FOUND" if exc.status_code == 404 else "HTTP_ERROR"
        return JSONResponse(
            status_code=exc.status_code,
            content=build_error_body(
                request=request,
                error_code=error_code,
                message=str(exc.detail),
            ),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        LOGGER.exception(
            "Unhandled error request_id=%s path=%s", _request_id(request), request.url.path, exc_info=exc
        )
        return JSONResponse(
            status_code=500,
            content=build_error_body(
                request=request,
                error_code="INTERNAL_SERVER_ERROR",
                message="The server encountered an unexpected error.",
                kind=INTERNAL_KIND,
            ),
        )
