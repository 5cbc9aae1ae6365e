"""
Package marker for source code under `src.store_locator`.
It groups the grid validation, scanning, and feasibility modules behind a stable import path.
Most functionality lives in the sibling modules; this file re-exports the public entrypoints.
"""

from src.store_locator.cells import Cell, Grid, LocationResult, Position
from src.store_locator.solver import WorkloadTooLargeError, aggregate, solve
from src.store_locator.validation import GridValidationError, ValidatedQuery, validate

__all__ = [
    "Cell",
    "Grid",
    "GridValidationError",
    "LocationResult",
    "Position",
    "ValidatedQuery",
    "WorkloadTooLargeError",
    "aggregate",
    "solve",
    "validate",
]
