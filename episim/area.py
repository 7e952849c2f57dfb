"""Rectangular areas of the grid and their construction."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator

from episim.point import Point
from episim.random_wrapper import RandomWrapper

LOCATION_ID_CAPACITY = 16


def location_id(value: str) -> str:
    """Check that ``value`` fits a location id of at most 16 bytes and return it."""
    if not isinstance(value, str):
        raise TypeError(f"location id must be a string, got {value!r}")
    if len(value.encode("utf-8")) > LOCATION_ID_CAPACITY:
        raise ValueError(f"can't convert {value!r} to a location id of {LOCATION_ID_CAPACITY} bytes")
    return value


@dataclass(frozen=True)
class Area:
    """An inclusive rectangle from ``start_offset`` to ``end_offset``.

    Equality and hashing look only at the corners, not at the location id.
    """

    location_id: str = field(compare=False)
    start_offset: Point
    end_offset: Point

    def __post_init__(self) -> None:
        _check_location_id(self.location_id)

    def neighbors_of(self, point: Point) -> Iterator[Point]:
        """Yield the neighbours of ``point`` that lie inside this area."""
        return (p for p in point.neighbors() if self.contains(p))

    def __iter__(self) -> Iterator[Point]:
        for y in range(self.start_offset.y, self.end_offset.y + 1):
            for x in range(self.start_offset.x, self.end_offset.x + 1):
                yield Point(x, y)

    def random_points(self, number_of_points: int, rng: RandomWrapper) -> list[Point]:
        """Up to ``number_of_points`` distinct points picked on a random sub-lattice of the area."""
        if number_of_points < 0:
            raise ValueError("number_of_points must not be negative")
        nx = math.ceil(math.sqrt(number_of_points))
        xs = range(self.start_offset.x, self.end_offset.x + 1)
        ys = range(self.start_offset.y, self.end_offset.y + 1)
        generator = rng.get()
        rand_xs = generator.sample(xs, min(nx, len(xs)))
        rand_ys = generator.sample(ys, min(nx, len(ys)))
        points = (Point(x, y) for x in rand_xs for y in rand_ys)
        return [point for _, point in zip(range(number_of_points), points)]

    def random_point(self, rng: RandomWrapper) -> Point:
        """A uniformly chosen point of the area."""
        generator = rng.get()
        x = generator.randint(self.start_offset.x, self.end_offset.x)
        y = generator.randint(self.start_offset.y, self.end_offset.y)
        return Point(x, y)

    def contains(self, point: Point) -> bool:
        """Whether ``point`` lies inside the area, edges included."""
        return (
            self.start_offset.x <= point.x <= self.end_offset.x
            and self.start_offset.y <= point.y <= self.end_offset.y
        )

    def number_of_cells(self) -> int:
        """Product of the differences between the corner coordinates."""
        return (self.end_offset.x - self.start_offset.x) * (self.end_offset.y - self.start_offset.y)


_check_location_id = location_id


def area_factory(start_point: Point, end_point: Point, size: int, engine_id: str) -> list[Area]:
    """Tile the rectangle with square areas of side ``size``, row by row; partial tiles are dropped."""
    if size <= 0:
        raise ValueError("size must be positive")
    per_row = (end_point.x - start_point.x + 1) // size
    per_column = (end_point.y - start_point.y + 1) // size
    return [
        Area(
            engine_id,
            Point(start_point.x + col * size, start_point.y + row * size),
            Point(start_point.x + (col + 1) * size - 1, start_point.y + (row + 1) * size - 1),
        )
        for row in range(per_column)
        for col in range(per_row)
    ]