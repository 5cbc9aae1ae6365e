# This module validates raw (k, grid) query input before any scan begins.
# It exists so malformed, undersized, jagged, or house-free grids never reach the evaluator.
# Checks run in a fixed order and the first failure wins, tagged with the offending field.
# Valid input is copied into an immutable Grid so the caller's buffer is never retained.

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final

from src.store_locator.cells import Cell, Grid

MIN_K: Final[int] = 1
MAX_K: Final[int] = 800
MIN_DIMENSION: Final[int] = 2
MAX_DIMENSION: Final[int] = 400


class GridValidationError(ValueError):
    """Raised when a query is rejected; `field` names the input at fault."""

    def __init__(self, message: str, *, field: str) -> None:
        self.message = message
        self.field = field
        super().__init__(message)


@dataclass(frozen=True)
class ValidatedQuery:
    k: int
    grid: Grid


def _as_int(value: Any) -> int | None:
    """Return the integer value of `value`, or None when it is not integral."""

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _validate_k(k: Any) -> int:
    parsed = _as_int(k)
    if parsed is None or parsed < MIN_K or parsed > MAX_K:
        raise GridValidationError(
            f"k must be an integer within the range [{MIN_K}..{MAX_K}]",
            field="k",
        )
    return parsed


def _validate_shape(grid: Any) -> tuple[int, int]:
    if not isinstance(grid, (list, tuple)) or len(grid) == 0:
        raise GridValidationError("grid must be a non-empty array of rows", field="grid")

    n_rows = len(grid)
    first_row = grid[0]
    n_cols = len(first_row) if isinstance(first_row, (list, tuple)) else 0
    if not (MIN_DIMENSION <= n_rows <= MAX_DIMENSION and MIN_DIMENSION <= n_cols <= MAX_DIMENSION):
        raise GridValidationError(
            f"grid dimensions must be within the range [{MIN_DIMENSION}..{MAX_DIMENSION}], "
            f"got {n_rows}x{n_cols}",
            field="grid",
        )

    for row_index, row in enumerate(grid):
        if not isinstance(row, (list, tuple)) or len(row) != n_cols:
            raise GridValidationError(
                f"grid must be rectangular; row {row_index} does not have {n_cols} cells",
                field="grid",
            )
    return n_rows, n_cols


def _convert_cells(grid: Any) -> tuple[tuple[Cell, ...], ...]:
    rows: list[tuple[Cell, ...]] = []
    for row_index, row in enumerate(grid):
        converted: list[Cell] = []
        for col_index, value in enumerate(row):
            parsed = _as_int(value)
            if parsed not in (0, 1):
                raise GridValidationError(
                    f"grid cells must be integers 0 or 1; found {value!r} at ({row_index}, {col_index})",
                    field="grid",
                )
            converted.append(Cell.from_wire(parsed))
        rows.append(tuple(converted))
    return tuple(rows)


def validate(k: Any, grid: Any) -> ValidatedQuery:
    """Validate a raw query and return its immutable, tagged form.

    Order of checks: k range, non-empty grid, dimensions, rectangularity,
    cell values, at least one occupied cell. Raises `GridValidationError`
    on the first failure.
    """

    parsed_k = _validate_k(k)
    _validate_shape(grid)
    cells = _convert_cells(grid)

    if not any(cell is Cell.OCCUPIED for row in cells for cell in row):
        raise GridValidationError(
            "grid must contain at least one occupied cell (value 1)",
            field="grid",
        )

    return ValidatedQuery(k=parsed_k, grid=Grid(cells=cells))
