# This module defines the value types shared by the store-locator pipeline.
# It exists so wire integers are converted into a two-valued cell type exactly once.
# Positions, grids, and results are frozen so one query can never leak state into another.
# The result type also owns its wire shape so routers do not rebuild it by hand.

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Cell(str, Enum):
    """Tagged grid cell. Wire encoding is 1 for occupied and 0 for empty."""

    OCCUPIED = "occupied"
    EMPTY = "empty"

    @classmethod
    def from_wire(cls, value: int) -> Cell:
        return cls.OCCUPIED if value == 1 else cls.EMPTY

    def to_wire(self) -> int:
        return 1 if self is Cell.OCCUPIED else 0


@dataclass(frozen=True)
class Position:
    """Zero-based (row, col) coordinate on the grid."""

    row: int
    col: int

    def distance_to(self, other: Position) -> int:
        """Grid (Manhattan) distance; diagonal moves are never shorter."""
        return abs(self.row - other.row) + abs(self.col - other.col)

    def to_dict(self) -> dict[str, int]:
        return {"row": int(self.row), "col": int(self.col)}


@dataclass(frozen=True)
class Grid:
    """Rectangular table of cells, already validated."""

    cells: tuple[tuple[Cell, ...], ...]

    @property
    def n_rows(self) -> int:
        return len(self.cells)

    @property
    def n_cols(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def cell_at(self, position: Position) -> Cell:
        return self.cells[position.row][position.col]

    def to_wire(self) -> list[list[int]]:
        return [[cell.to_wire() for cell in row] for row in self.cells]


@dataclass(frozen=True)
class LocationResult:
    count: int
    locations: tuple[Position, ...]
    elapsed_ms: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "count": self.count,
            "locations": [position.to_dict() for position in self.locations],
            "elapsed": round(self.elapsed_ms, 3),
        }
