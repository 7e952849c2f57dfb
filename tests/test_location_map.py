from dataclasses import dataclass

import pytest

from episim.area import Area
from episim.geography import define_geography
from episim.location_map import CitizenLocationMap
from episim.point import Point
from episim.random_wrapper import RandomWrapper

ENGINE = "engine1"


@dataclass(eq=False)
class Resident:
    home_location: Area
    work_location: Area
    essential: bool = False
    isolated: bool = False

    def is_essential_worker(self) -> bool:
        return self.essential


def grid(size=5):
    return define_geography(size, ENGINE, 2, 2)


def before_each():
    points = [Point(0, 1), Point(1, 0)]
    homes = [
        Area(ENGINE, Point(0, 0), Point(2, 2)),
        Area(ENGINE, Point(3, 0), Point(4, 2)),
    ]
    work = Area(ENGINE, Point(5, 0), Point(6, 2))
    agents = [Resident(homes[0], work), Resident(homes[1], work, essential=True)]
    return CitizenLocationMap(grid(), agents, points), agents, points


def test_new():
    location_map, _, _ = before_each()
    assert location_map.grid.grid_size == 5
    assert location_map.current_population() == 2


def test_agents_are_placed_at_their_points():
    location_map, agents, points = before_each()
    assert location_map.agent_at(points[0]) is agents[0]
    assert location_map.agent_at(points[1]) is agents[1]
    assert location_map.agent_at(Point(3, 3)) is None
    assert dict(location_map.items()) == {points[0]: agents[0], points[1]: agents[1]}


def test_too_few_points_is_an_error():
    home = Area(ENGINE, Point(0, 0), Point(2, 2))
    agents = [Resident(home, home), Resident(home, home)]
    with pytest.raises(ValueError):
        CitizenLocationMap(grid(), agents, [Point(0, 0)])


def test_should_goto_hospital():
    location_map, agents, points = before_each()
    hospital = Area(ENGINE, Point(2, 2), Point(4, 4))
    result = location_map.goto_hospital(hospital, points[0], agents[0], RandomWrapper())
    assert result[0]
    assert result[1] == Point(2, 2)


def test_should_goto_home_location_when_hospital_full():
    points = [Point(0, 0), Point(0, 1), Point(1, 0), Point(1, 1)]
    home = Area(ENGINE, Point(0, 0), Point(2, 2))
    work = Area(ENGINE, Point(5, 0), Point(6, 2))
    agents = [Resident(home, work) for _ in range(4)]
    location_map = CitizenLocationMap(grid(), agents, points)
    hospital = Area(ENGINE, Point(0, 0), Point(1, 1))

    for seed in range(20):
        admitted, cell = location_map.goto_hospital(hospital, points[0], agents[0], RandomWrapper(seed))
        assert not admitted
        assert agents[0].home_location.contains(cell)


@pytest.mark.parametrize("point", [Point(0, 0), Point(4, 4), Point(2, 2)])
def test_should_return_true_when_point_is_in_grid(point):
    location_map, _, _ = before_each()
    assert location_map.is_point_in_grid(point)


@pytest.mark.parametrize("point", [Point(-1, -1), Point(5, 5), Point(2, 12)])
def test_should_return_false_when_point_is_out_of_grid(point):
    location_map, _, _ = before_each()
    assert not location_map.is_point_in_grid(point)


def test_move_agent_only_into_vacant_cells():
    location_map, _, points = before_each()
    assert location_map.move_agent(Point(3, 3), Point(4, 4)) == Point(4, 4)
    assert location_map.move_agent(Point(3, 3), points[1]) == Point(3, 3)
    assert location_map.is_cell_vacant(Point(4, 4))
    assert not location_map.is_cell_vacant(points[0])


def test_select_starting_points_are_free_and_inside_area():
    location_map, _, points = before_each()
    area = Area(ENGINE, Point(0, 0), Point(3, 3))
    chosen = location_map.select_starting_points(area, 5, RandomWrapper(7))
    assert len(chosen) == 5
    assert len(set(chosen)) == 5
    for point in chosen:
        assert point not in points
        assert area.start_offset.x <= point.x < area.end_offset.x
        assert area.start_offset.y <= point.y < area.end_offset.y


def test_select_starting_points_limited_by_free_cells():
    location_map, _, _ = before_each()
    area = Area(ENGINE, Point(0, 0), Point(2, 2))
    chosen = location_map.select_starting_points(area, 100, RandomWrapper(1))
    assert sorted(chosen) == [Point(0, 0), Point(1, 1)]


def test_select_starting_points_rejects_negative_count():
    location_map, _, _ = before_each()
    with pytest.raises(ValueError):
        location_map.select_starting_points(Area(ENGINE, Point(0, 0), Point(2, 2)), -1, RandomWrapper())


def test_lock_city_isolates_non_essential_workers():
    location_map, agents, _ = before_each()
    location_map.lock_city(10)
    assert agents[0].isolated is True
    assert agents[1].isolated is False


def test_unlock_city_lifts_isolation():
    location_map, agents, _ = before_each()
    location_map.lock_city(10)
    location_map.unlock_city(20)
    assert [agent.isolated for agent in agents] == [False, False]