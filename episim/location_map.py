"""Where every citizen currently stands on the grid."""

from __future__ import annotations

import logging
from typing import Generic, ItemsView, Protocol, Sequence, TypeVar

from episim.area import Area
from episim.geography import Grid
from episim.point import Point
from episim.random_wrapper import RandomWrapper

logger = logging.getLogger(__name__)


class Occupant(Protocol):
    """What the location map needs to know about a citizen."""

    home_location: Area
    isolated: bool

    def is_essential_worker(self) -> bool: ...


CitizenT = TypeVar("CitizenT", bound=Occupant)


class CitizenLocationMap(Generic[CitizenT]):
    """A grid together with the citizen occupying each taken cell."""

    def __init__(self, grid: Grid, agent_list: Sequence[CitizenT], points: Sequence[Point]) -> None:
        if len(points) < len(agent_list):
            raise ValueError(
                f"{len(agent_list)} agents but only {len(points)} starting points"
            )
        logger.debug("%d agents and %d starting points", len(agent_list), len(points))
        self.grid = grid
        self._locations: dict[Point, CitizenT] = dict(zip(points, agent_list))

    def move_agent(self, old_cell: Point, new_cell: Point) -> Point:
        """``new_cell`` if it is free, otherwise ``old_cell``."""
        return new_cell if self.is_cell_vacant(new_cell) else old_cell

    def goto_hospital(
        self, hospital_area: Area, cell: Point, citizen: CitizenT, rng: RandomWrapper
    ) -> tuple[bool, Point]:
        """Move into the first free hospital cell, or towards home when the hospital is full.

        Returns whether the citizen got a hospital bed and the cell it ends up in.
        """
        vacant = next((point for point in hospital_area if self.is_cell_vacant(point)), None)
        if vacant is not None:
            return True, self.move_agent(cell, vacant)
        return False, self.move_agent(cell, citizen.home_location.random_point(rng))

    def agent_at(self, cell: Point) -> CitizenT | None:
        """The citizen standing on ``cell``, if any."""
        return self._locations.get(cell)

    def is_point_in_grid(self, point: Point) -> bool:
        """Whether ``point`` lies inside the square grid."""
        end = self.grid.grid_size
        return 0 <= point.x < end and 0 <= point.y < end

    def is_cell_vacant(self, cell: Point) -> bool:
        """Whether nobody stands on ``cell``."""
        return cell not in self._locations

    def select_starting_points(self, area: Area, count: int, rng: RandomWrapper) -> list[Point]:
        """Up to ``count`` distinct free cells of ``area``, its far edges excluded."""
        if count < 0:
            raise ValueError("count must not be negative")
        free = [
            Point(x, y)
            for x in range(area.start_offset.x, area.end_offset.x)
            for y in range(area.start_offset.y, area.end_offset.y)
            if Point(x, y) not in self._locations
        ]
        return rng.get().sample(free, min(count, len(free)))

    def lock_city(self, hour: int) -> None:
        """Isolate every citizen who is not an essential worker."""
        logger.info("Locking the city. Hour: %d", hour)
        for citizen in self._locations.values():
            if not citizen.is_essential_worker():
                citizen.isolated = True

    def unlock_city(self, hour: int) -> None:
        """Lift isolation from every isolated citizen."""
        logger.info("Unlocking city. Hour: %d", hour)
        for citizen in self._locations.values():
            if citizen.isolated:
                citizen.isolated = False

    def current_population(self) -> int:
        """Number of citizens on the grid."""
        return len(self._locations)

    def items(self) -> ItemsView[Point, CitizenT]:
        """Pairs of (cell, citizen) for every occupied cell."""
        return self._locations.items()