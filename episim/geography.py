"""Layout of the simulation grid: zones, houses, offices and their occupancy."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Iterable, Protocol, Sequence, TypeVar

from episim.area import Area, area_factory
from episim.point import Point
from episim.random_wrapper import RandomWrapper

HOUSE_AREA_RELATIVE_SIZE = 0.4
TRANSPORT_AREA_RELATIVE_SIZE = 0.2
WORK_AREA_RELATIVE_SIZE = 0.2
INITIAL_HOSPITAL_RELATIVE_SIZE = 0.1


class Resident(Protocol):
    """What the grid needs to know about a citizen."""

    home_location: Area
    work_location: Area

    def is_working(self) -> bool: ...


AgentT = TypeVar("AgentT", bound=Resident)


def _area_to_dict(area: Area) -> dict[str, Any]:
    return {
        "location_id": area.location_id,
        "start_offset": {"x": area.start_offset.x, "y": area.start_offset.y},
        "end_offset": {"x": area.end_offset.x, "y": area.end_offset.y},
    }


@dataclass
class Grid:
    """The zones of the square grid with the houses and offices laid out in them.

    Occupancy counts follow home and work locations and change as travellers
    arrive and leave.
    """

    grid_size: int
    housing_area: Area
    work_area: Area
    transport_area: Area
    hospital_area: Area
    houses: list[Area]
    offices: list[Area]
    home_size: int
    office_size: int
    houses_occupancy: dict[Area, int] = field(default_factory=dict)
    offices_occupancy: dict[Area, int] = field(default_factory=dict)

    @property
    def house_capacity(self) -> int:
        return self.home_size * self.home_size

    @property
    def office_capacity(self) -> int:
        return self.office_size * self.office_size

    def to_dict(self) -> dict[str, Any]:
        """The serialisable part of the grid; occupancy and tile sizes are left out."""
        return {
            "grid_size": self.grid_size,
            "housing_area": _area_to_dict(self.housing_area),
            "work_area": _area_to_dict(self.work_area),
            "transport_area": _area_to_dict(self.transport_area),
            "hospital_area": _area_to_dict(self.hospital_area),
            "houses": [_area_to_dict(house) for house in self.houses],
            "offices": [_area_to_dict(office) for office in self.offices],
        }

    def increase_hospital_size(self, grid_size: int, sim_id: str) -> None:
        """Stretch the hospital from its start corner to the far corner of the grid."""
        self.hospital_area = Area(sim_id, self.hospital_area.start_offset, Point(grid_size, grid_size))

    def resize_hospital(
        self,
        number_of_agents: int,
        hospital_staff_percentage: float,
        hospital_beds_percentage: float,
        sim_id: str,
    ) -> None:
        """Shrink the hospital to fit beds and staff, unless they need more cells than it has."""
        bed_count = math.ceil(
            number_of_agents * hospital_beds_percentage + number_of_agents * hospital_staff_percentage
        )
        if bed_count <= self.hospital_area.number_of_cells():
            width = self.hospital_area.end_offset.x - self.hospital_area.start_offset.x
            end_y = bed_count // width
            self.hospital_area = Area(
                sim_id,
                self.hospital_area.start_offset,
                Point(self.hospital_area.end_offset.x, end_y),
            )

    @staticmethod
    def group_agents_by_home_locations(agent_list: Iterable[AgentT]) -> dict[Area, list[AgentT]]:
        """Agents grouped by home, homes in order of first appearance."""
        groups: dict[Area, list[AgentT]] = {}
        for agent in agent_list:
            groups.setdefault(agent.home_location, []).append(agent)
        return groups

    def set_start_locations_and_occupancies(
        self,
        rng: RandomWrapper,
        agent_list: Sequence[AgentT],
        region_name: str,
    ) -> tuple[list[Point], list[AgentT]]:
        """Place every agent at a random point of its home and record house and office occupancy.

        Returns the start points and the agents in matching order.
        """
        home_loc: list[Point] = []
        agents_in_order: list[AgentT] = []
        for home, agents in self.group_agents_by_home_locations(agent_list).items():
            if len(agents) > self.house_capacity:
                raise ValueError(
                    f"There are {len(agents)} agents assigned to a house, "
                    f"but house capacity is {self.house_capacity}"
                )
            home_loc.extend(home.random_points(len(agents), rng))
            self.houses_occupancy[home] = len(agents)
            agents_in_order.extend(agents)
        self.offices_occupancy = self.group_office_locations_by_occupancy(agents_in_order, region_name)
        return home_loc, agents_in_order

    def group_office_locations_by_occupancy(
        self, citizens: Iterable[Resident], region_name: str
    ) -> dict[Area, int]:
        """Count the workers of ``region_name`` in each office of the grid."""
        occupancy = {office: 0 for office in self.offices}
        for citizen in citizens:
            if citizen.is_working() and citizen.work_location.location_id == region_name:
                office = citizen.work_location
                if office not in occupancy:
                    raise KeyError(f"Unknown office {office!r}! Doesn't exist in grid")
                occupancy[office] += 1
        return occupancy

    def choose_house_with_free_space(self, rng: RandomWrapper) -> Area:
        """The first house that is not full."""
        for house, occupants in self.houses_occupancy.items():
            if occupants < self.house_capacity:
                return house
        raise LookupError("Couldn't find any house with free space!")

    def choose_office_with_free_space(self, rng: RandomWrapper) -> Area:
        """The first office that is not full."""
        for office, occupants in self.offices_occupancy.items():
            if occupants < self.office_capacity:
                return office
        raise LookupError("Couldn't find any offices with free space!")

    def add_house_occupant(self, house: Area) -> None:
        self._adjust(self.houses_occupancy, house, 1, "house")

    def add_office_occupant(self, office: Area) -> None:
        self._adjust(self.offices_occupancy, office, 1, "office")

    def remove_house_occupant(self, house: Area) -> None:
        self._adjust(self.houses_occupancy, house, -1, "house")

    def remove_office_occupant(self, office: Area) -> None:
        self._adjust(self.offices_occupancy, office, -1, "office")

    @staticmethod
    def _adjust(occupancy: dict[Area, int], area: Area, delta: int, what: str) -> None:
        if area not in occupancy:
            raise KeyError(f"Could not find {what} {area!r}!")
        if occupancy[area] + delta < 0:
            raise ValueError(f"{what} {area!r} has no occupants to remove")
        occupancy[area] += delta


def define_geography(grid_size: int, engine_id: str, home_size: int, office_size: int) -> Grid:
    """Split a square grid into housing, transport, work and hospital zones from left to right."""
    if grid_size < 0:
        raise ValueError("grid_size must not be negative")
    home_width = math.ceil(grid_size * HOUSE_AREA_RELATIVE_SIZE)
    transport_start = home_width
    transport_end = home_width + math.ceil(grid_size * TRANSPORT_AREA_RELATIVE_SIZE)
    work_start = transport_end
    work_end = transport_end + math.ceil(grid_size * WORK_AREA_RELATIVE_SIZE)
    hospital_start = work_end
    hospital_end = work_end + math.ceil(grid_size * INITIAL_HOSPITAL_RELATIVE_SIZE)

    housing_area = Area(engine_id, Point(0, 0), Point(home_width - 1, grid_size))
    transport_area = Area(engine_id, Point(transport_start, 0), Point(transport_end - 1, grid_size))
    work_area = Area(engine_id, Point(work_start, 0), Point(work_end - 1, grid_size))
    hospital_area = Area(engine_id, Point(hospital_start, 0), Point(hospital_end - 1, grid_size))

    houses = area_factory(housing_area.start_offset, housing_area.end_offset, home_size, engine_id)
    offices = area_factory(work_area.start_offset, work_area.end_offset, office_size, engine_id)

    return Grid(
        grid_size=grid_size,
        housing_area=housing_area,
        work_area=work_area,
        transport_area=transport_area,
        hospital_area=hospital_area,
        houses=houses,
        offices=offices,
        home_size=home_size,
        office_size=office_size,
    )