import logging
from collections import namedtuple

import pytest

from hex_directions import Direction, Point, from_adjacency, neighbors


@pytest.mark.parametrize("x,y", [(0, 0), (3, -7), (-12, 40)])
@pytest.mark.parametrize(
    "dx,dy,expected",
    [
        (1, 0, Direction.EAST),
        (-1, 0, Direction.WEST),
        (-1, 1, Direction.NORTH_WEST),
        (0, 1, Direction.NORTH_EAST),
        (0, -1, Direction.SOUTH_WEST),
        (1, -1, Direction.SOUTH_EAST),
    ],
)
def test_adjacent_coordinates_resolve_to_direction(x, y, dx, dy, expected):
    assert from_adjacency(Point(x, y), Point(x + dx, y + dy)) is expected


def test_non_adjacent_returns_none_and_warns(caplog):
    caplog.set_level(logging.WARNING, logger="hex_directions.directions")
    assert from_adjacency(Point(0, 0), Point(5, 5)) is None
    assert any("not adjacent" in rec.message for rec in caplog.records)
    assert any("(5, 5)" in rec.message for rec in caplog.records)


@pytest.mark.parametrize("dst", [(0, 0), (1, 1), (-1, -1), (2, 0)])
def test_same_cell_and_missing_diagonals_are_not_adjacent(dst):
    assert from_adjacency(Point(0, 0), Point(*dst)) is None


def test_accepts_any_object_with_x_and_y():
    Cell = namedtuple("Cell", "x y")
    assert from_adjacency(Cell(2, 2), Cell(3, 1)) is Direction.SOUTH_EAST


def test_step_moves_one_cell():
    origin = Point(4, 4)
    assert Direction.WEST.step(origin) == Point(3, 4)
    assert Direction.NORTH_WEST.step(origin) == Point(3, 5)
    # Input is never modified
    assert origin == Point(4, 4)


def test_neighbors_round_trip_through_from_adjacency():
    origin = Point(-2, 9)
    result = neighbors(origin)
    assert [d for d, _ in result] == list(Direction)
    for direction, cell in result:
        assert from_adjacency(origin, cell) is direction
        assert from_adjacency(cell, origin) is direction.opposite


def test_point_offset_and_str():
    assert Point(1, 2).offset(-1, 1) == Point(0, 3)
    assert str(Point(1, -2)) == "(1, -2)"


def test_east_still_resolves_after_rejected_field_assignment():
    with pytest.raises(AttributeError):
        Direction.EAST.dx = 7  # type: ignore[misc]
    assert from_adjacency(Point(0, 0), Point(1, 0)) is Direction.EAST
