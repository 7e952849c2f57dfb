import pytest

from episim.point import Point


def test_add():
    assert Point(1, 1) + Point(1, 1) == Point(2, 2)


def test_add_rejects_non_point():
    with pytest.raises(TypeError):
        Point(1, 1) + 3


def test_should_iterate_over_neighbor_cells():
    neighbors = list(Point(1, 1).neighbors())
    assert neighbors == [
        Point(0, 0),
        Point(1, 0),
        Point(2, 0),
        Point(0, 1),
        Point(2, 1),
        Point(0, 2),
        Point(1, 2),
        Point(2, 2),
    ]


def test_neighbors_exclude_self_and_are_adjacent():
    centre = Point(-3, 7)
    neighbors = list(centre.neighbors())
    assert centre not in neighbors
    assert len(set(neighbors)) == len(neighbors)
    assert all(max(abs(p.x - centre.x), abs(p.y - centre.y)) == 1 for p in neighbors)


def test_points_are_hashable_and_equal_by_value():
    assert {Point(2, 3), Point(2, 3)} == {Point(2, 3)}