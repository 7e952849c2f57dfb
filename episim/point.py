"""Integer points on the simulation grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

_NEIGHBOR_OFFSETS = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
)


@dataclass(frozen=True, order=True)
class Point:
    """A cell of the grid."""

    x: int
    y: int

    def neighbors(self) -> Iterator["Point"]:
        """Yield the eight surrounding points, row by row from the top left.

        No check is made that the points lie in any grid or area.
        """
        for dx, dy in _NEIGHBOR_OFFSETS:
            yield Point(self.x + dx, self.y + dy)

    def __add__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)