# This file implements the service behind the store-location query endpoints.
# It exists so routers stay transport-focused while core invocation and error mapping live in one layer.
# Core validation failures become field-tagged 400 errors and oversized workloads become 413 errors.
# Query outcomes are counted in Prometheus so operators can see rejection and success rates.

from __future__ import annotations

import logging
from typing import Any

from prometheus_client import Counter, Histogram

from src.api.api_config import ApiConfig
from src.api.error_handlers import APIError
from src.store_locator.examples import list_examples
from src.store_locator.solver import WorkloadTooLargeError, solve
from src.store_locator.validation import GridValidationError

LOGGER = logging.getLogger("api")

STORE_LOCATOR_QUERIES_TOTAL = Counter(
    "store_locator_queries_total",
    "Store-location queries handled, by outcome.",
    ["outcome"],
)
STORE_LOCATOR_SOLVE_DURATION_MS = Histogram(
    "store_locator_solve_duration_ms",
    "Core solve time in milliseconds as reported by the solver.",
    buckets=(0.1, 0.5, 1, 5, 10, 50, 100, 500, 1000, 5000, 30000),
)
STORE_LOCATOR_LOCATIONS_FOUND = Histogram(
    "store_locator_locations_found",
    "Number of qualifying locations per successful query.",
    buckets=(0, 1, 10, 100, 1000, 10000, 100000),
)


class StoreLocationService:
    """Runs store-location queries and shapes their results for the API."""

    def __init__(self, *, config: ApiConfig) -> None:
        self.config = config

    def find_store_locations(self, *, k: Any, grid: Any) -> dict[str, Any]:
        try:
            result = solve(k, grid, max_pair_checks=self.config.max_pair_checks)
        except GridValidationError as exc:
            STORE_LOCATOR_QUERIES_TOTAL.labels(outcome="invalid").inc()
            LOGGER.info("store-location query rejected field=%s reason=%s", exc.field, exc.message)
            raise APIError.from_validation_error(exc) from exc
        except WorkloadTooLargeError as exc:
            STORE_LOCATOR_QUERIES_TOTAL.labels(outcome="too_large").inc()
            LOGGER.warning(
                "store-location query refused pair_checks=%d limit=%d",
                exc.pair_checks,
                exc.max_pair_checks,
            )
            raise APIError(
                status_code=413,
                error_code="WORKLOAD_TOO_LARGE",
                message=str(exc),
                details={"pair_checks": exc.pair_checks, "max_pair_checks": exc.max_pair_checks},
            ) from exc

        STORE_LOCATOR_QUERIES_TOTAL.labels(outcome="ok").inc()
        STORE_LOCATOR_SOLVE_DURATION_MS.observe(result.elapsed_ms)
        STORE_LOCATOR_LOCATIONS_FOUND.observe(result.count)
        LOGGER.info(
            "store-location query solved count=%d elapsed_ms=%.3f", result.count, result.elapsed_ms
        )
        return result.to_dict()

    def get_examples(self) -> list[dict[str, Any]]:
        return list_examples()
