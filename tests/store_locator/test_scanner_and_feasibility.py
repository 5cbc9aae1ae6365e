# This test file validates grid scanning and the per-candidate feasibility check.
# It exists to pin row-major scan order and the universal (all houses) distance rule.
# The cases also confirm that evaluation stops at the first house out of range.

from __future__ import annotations

from collections.abc import Iterator

from src.store_locator.cells import Position
from src.store_locator.feasibility import is_feasible, manhattan_distance
from src.store_locator.scanner import scan
from src.store_locator.validation import validate


def test_scan_partitions_cells_in_row_major_order() -> None:
    grid = validate(2, [[0, 1, 0], [1, 0, 0]]).grid
    scanned = scan(grid)

    assert scanned.occupied == (Position(0, 1), Position(1, 0))
    assert scanned.empty == (Position(0, 0), Position(0, 2), Position(1, 1), Position(1, 2))
    assert len(scanned.occupied) + len(scanned.empty) == grid.n_rows * grid.n_cols


def test_manhattan_distance_ignores_diagonals() -> None:
    assert manhattan_distance(Position(0, 0), Position(3, 4)) == 7
    assert manhattan_distance(Position(3, 4), Position(0, 0)) == 7
    assert manhattan_distance(Position(2, 2), Position(2, 2)) == 0
    assert Position(1, 5).distance_to(Position(4, 1)) == 7


def test_feasible_only_when_every_house_is_within_k() -> None:
    houses = [Position(0, 0), Position(0, 4)]
    assert is_feasible(Position(0, 2), houses, 2) is True
    assert is_feasible(Position(0, 1), houses, 2) is False
    assert is_feasible(Position(1, 2), houses, 2) is False
    assert is_feasible(Position(1, 2), houses, 3) is True


def test_feasibility_stops_at_first_violating_house() -> None:
    visited: list[Position] = []

    def houses() -> Iterator[Position]:
        for house in (Position(0, 0), Position(9, 9), Position(1, 1)):
            visited.append(house)
            yield house

    assert is_feasible(Position(0, 1), houses(), 2) is False
    assert visited == [Position(0, 0), Position(9, 9)]
