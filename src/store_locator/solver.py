# This module runs the full store-locator pipeline for a single query.
# It exists so validation, scanning, evaluation, and timing are composed in one deterministic function.
# Qualifying plots are collected in scan order and timed with a monotonic clock, with no artificial delay.
# Nothing here keeps state between calls, so concurrent queries never share data.

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from typing import Any

from src.store_locator.cells import LocationResult, Position
from src.store_locator.feasibility import is_feasible
from src.store_locator.scanner import scan
from src.store_locator.validation import validate

LOGGER = logging.getLogger("store_locator")


class WorkloadTooLargeError(RuntimeError):
    """Raised before evaluation when a query exceeds the caller's pair-check budget."""

    def __init__(self, *, pair_checks: int, max_pair_checks: int) -> None:
        self.pair_checks = pair_checks
        self.max_pair_checks = max_pair_checks
        super().__init__(
            f"Query needs up to {pair_checks} distance checks, above the limit of {max_pair_checks}."
        )


def aggregate(
    empty: Sequence[Position],
    occupied: Sequence[Position],
    k: int,
    *,
    started: float | None = None,
) -> LocationResult:
    """Collect every empty position that is within `k` of all occupied positions.

    `started` is a `time.perf_counter()` reading taken by the caller so the elapsed
    time can span validation and scanning as well; when omitted the clock starts here.
    """

    clock_start = time.perf_counter() if started is None else started
    locations = tuple(position for position in empty if is_feasible(position, occupied, k))
    elapsed_ms = (time.perf_counter() - clock_start) * 1000.0
    return LocationResult(count=len(locations), locations=locations, elapsed_ms=elapsed_ms)


def solve(k: Any, grid: Any, *, max_pair_checks: int | None = None) -> LocationResult:
    """Validate, scan, and evaluate one (k, grid) query.

    `max_pair_checks` bounds |empty| * |occupied|; the query is refused before
    evaluation when the bound is exceeded. None or 0 means no bound.
    """

    started = time.perf_counter()
    query = validate(k, grid)
    scanned = scan(query.grid)

    pair_checks = len(scanned.empty) * len(scanned.occupied)
    if max_pair_checks and pair_checks > max_pair_checks:
        raise WorkloadTooLargeError(pair_checks=pair_checks, max_pair_checks=max_pair_checks)

    result = aggregate(scanned.empty, scanned.occupied, query.k, started=started)
    LOGGER.debug(
        "solved grid=%dx%d k=%d houses=%d plots=%d count=%d elapsed_ms=%.3f",
        query.grid.n_rows,
        query.grid.n_cols,
        query.k,
        len(scanned.occupied),
        len(scanned.empty),
        result.count,
        result.elapsed_ms,
    )
    return result
