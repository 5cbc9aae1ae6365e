# This module holds the worked store-locator examples served by the API.
# It exists so documentation, the examples endpoint, and tests share one source of truth.

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class WorkedExample:
    description: str
    k: int
    grid: tuple[tuple[int, ...], ...]
    expected_locations: tuple[tuple[int, int], ...]

    @property
    def expected_count(self) -> int:
        return len(self.expected_locations)

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "request": {"k": self.k, "grid": [list(row) for row in self.grid]},
            "expected_result": {
                "count": self.expected_count,
                "locations": [{"row": row, "col": col} for row, col in self.expected_locations],
            },
        }


WORKED_EXAMPLES: tuple[WorkedExample, ...] = (
    WorkedExample(
        description="Basic example with k=2",
        k=2,
        grid=((0, 0, 0, 0), (0, 0, 1, 0), (1, 0, 0, 1)),
        expected_locations=((2, 1), (2, 2)),
    ),
    WorkedExample(
        description="Small example with k=1",
        k=1,
        grid=((0, 1), (0, 0)),
        expected_locations=((0, 0), (1, 1)),
    ),
    WorkedExample(
        description="Complex example with k=4",
        k=4,
        grid=(
            (0, 0, 0, 1),
            (0, 1, 0, 0),
            (0, 0, 1, 0),
            (1, 0, 0, 0),
            (0, 0, 0, 0),
        ),
        expected_locations=((0, 0), (0, 1), (1, 0), (1, 2), (2, 1), (2, 3), (3, 2), (3, 3)),
    ),
    WorkedExample(
        description="Houses in every corner with k=1 leave no valid plot",
        k=1,
        grid=(
            (1, 0, 0, 0, 1),
            (0, 0, 0, 0, 0),
            (0, 0, 0, 0, 0),
            (0, 0, 0, 0, 0),
            (1, 0, 0, 0, 1),
        ),
        expected_locations=(),
    ),
    WorkedExample(
        description="Single centred house with k=2 accepts every plot",
        k=2,
        grid=((0, 0, 0), (0, 1, 0), (0, 0, 0)),
        expected_locations=((0, 0), (0, 1), (0, 2), (1, 0), (1, 2), (2, 0), (2, 1), (2, 2)),
    ),
)


def list_examples() -> list[dict[str, Any]]:
    return [example.to_dict() for example in WORKED_EXAMPLES]
