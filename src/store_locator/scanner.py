# This module partitions a validated grid into occupied and empty positions.
# It exists so the evaluator works on plain position sequences instead of the grid itself.
# The single pass is row-major, which fixes the order of returned locations.

from __future__ import annotations

from dataclasses import dataclass

from src.store_locator.cells import Cell, Grid, Position


@dataclass(frozen=True)
class ScanResult:
    occupied: tuple[Position, ...]
    empty: tuple[Position, ...]


def scan(grid: Grid) -> ScanResult:
    occupied: list[Position] = []
    empty: list[Position] = []
    for row_index, row in enumerate(grid.cells):
        for col_index, cell in enumerate(row):
            position = Position(row=row_index, col=col_index)
            if cell is Cell.OCCUPIED:
                occupied.append(position)
            else:
                empty.append(position)
    return ScanResult(occupied=tuple(occupied), empty=tuple(empty))
