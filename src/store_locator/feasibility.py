# This module decides whether a candidate cell is within k of every occupied cell.
# The check is universal, not nearest-neighbour: a single distant house rejects the plot.
# Iteration stops at the first violating house, so cost per candidate is bounded by the house count.

from __future__ import annotations

from collections.abc import Iterable

from src.store_locator.cells import Position


def manhattan_distance(a: Position, b: Position) -> int:
    return a.distance_to(b)


def is_feasible(position: Position, occupied: Iterable[Position], k: int) -> bool:
    for house in occupied:
        if manhattan_distance(position, house) > k:
            return False
    return True
