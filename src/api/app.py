# This file builds the FastAPI application and registers all API routers.
# It exists so startup behavior, middleware, and error handling are configured in one place.
# The app adds request IDs, timing headers, per-client rate limiting, and optional request logging.
# Keeping bootstrap logic centralized makes deployment and testing more predictable.

from __future__ import annotations

import logging
import time
import uuid

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest
from starlette.middleware.base import RequestResponseEndpoint

from src.api.api_config import ApiConfig, get_api_config
from src.api.error_handlers import build_error_body, register_error_handlers
from src.api.rate_limit import FixedWindowRateLimiter
from src.api.routers.health import router as health_router
from src.api.routers.store_locations import router as store_locations_router
from src.common.logging import configure_logging

LOGGER = logging.getLogger("api")

RATE_LIMIT_EXEMPT_PATHS = frozenset({"/health", "/metrics"})
KNOWN_METHODS = frozenset({"GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"})
UNMATCHED_ROUTE_LABEL = "unmatched"
SECURITY_HEADERS: dict[str, str] = {
    "x-content-type-options": "nosniff",
    "x-frame-options": "DENY",
    "referrer-policy": "no-referrer",
    "cross-origin-resource-policy": "same-origin",
}

API_HTTP_REQUESTS_TOTAL = Counter(
    "api_http_requests_total",
    "Total number of HTTP requests processed by the API.",
    ["method", "path", "status_code"],
)
API_HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "api_http_request_duration_seconds",
    "API request duration in seconds.",
    ["method", "path"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10),
)
API_HTTP_INFLIGHT_REQUESTS = Gauge(
    "api_http_inflight_requests",
    "Number of API requests currently being processed.",
    ["method"],
)


def route_label(request: Request) -> str:
    """Return the matched route template, so metric labels never carry raw client paths."""

    route = request.scope.get("route")
    path = getattr(route, "path", None)
    return path if isinstance(path, str) else UNMATCHED_ROUTE_LABEL


def create_app(config: ApiConfig | None = None) -> FastAPI:
    """Create configured FastAPI application instance."""

    configure_logging()
    config = config or get_api_config()

    app = FastAPI(
        title=config.api_name,
        description=(
            "Finds every empty plot on a neighbourhood grid whose grid (Manhattan) distance "
            "to all houses is at most k. Responses carry version metadata and a request id."
        ),
        version=config.app_version,
        openapi_tags=[
            {"name": "health", "description": "Service liveness and version metadata."},
            {
                "name": "store-locations",
                "description": "Store-location queries and worked examples.",
            },
        ],
    )
    app.state.rate_limiter = (
        FixedWindowRateLimiter(
            max_requests=config.rate_limit_max_requests,
            window_seconds=config.rate_limit_window_seconds,
        )
        if config.rate_limit_enabled
        else None
    )

    @app.middleware("http")
    async def request_context_middleware(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id

        method_label = request.method if request.method in KNOWN_METHODS else "OTHER"
        started = time.perf_counter()
        status_code = 500
        API_HTTP_INFLIGHT_REQUESTS.labels(method=method_label).inc()
        try:
            limiter: FixedWindowRateLimiter | None = app.state.rate_limiter
            if (
                limiter is not None
                and request.method != "OPTIONS"
                and request.url.path not in RATE_LIMIT_EXEMPT_PATHS
            ):
                client_key = request.client.host if request.client else "unknown"
                decision = limiter.hit(client_key)
                if not decision.allowed:
                    status_code = 429
                    return JSONResponse(
                        status_code=429,
                        content=build_error_body(
                            request=request,
                            error_code="RATE_LIMITED",
                            message="Too many requests from this client, please try again later.",
                            details={"limit": decision.limit},
                        ),
                        headers={
                            **SECURITY_HEADERS,
                            "x-request-id": request_id,
                            "retry-after": str(int(decision.reset_after_seconds) + 1),
                        },
                    )

            response: Response = await call_next(request)
            status_code = response.status_code
            duration_ms = (time.perf_counter() - started) * 1000.0

            response.headers.update(SECURITY_HEADERS)
            response.headers["x-request-id"] = request_id
            response.headers["x-response-time-ms"] = f"{duration_ms:.2f}"

            if config.enable_request_logging:
                LOGGER.info(
                    "request_id=%s method=%s path=%s status=%d duration_ms=%.2f",
                    request_id,
                    request.method,
                    request.url.path,
                    status_code,
                    duration_ms,
                )

            return response
        finally:
            duration_s = time.perf_counter() - started
            path_label = route_label(request)
            API_HTTP_REQUESTS_TOTAL.labels(
                method=method_label,
                path=path_label,
                status_code=str(status_code),
            ).inc()
            API_HTTP_REQUEST_DURATION_SECONDS.labels(
                method=method_label,
                path=path_label,
            ).observe(duration_s)
            API_HTTP_INFLIGHT_REQUESTS.labels(method=method_label).dec()

    # Added last so CORS wraps the rate limiter and 429s still carry CORS headers.
    if config.allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.allowed_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.get("/metrics", include_in_schema=False)
    def metrics() -> Response:
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(store_locations_router, prefix=config.api_version_path)

    return app


app = create_app()
