"""Direction model for an axial hex grid whose rows run East-West.

Visual example of the grid (alternate rows offset by half a cell)::

    |  * * * * * * * *
    | * * * * * * * * *
    |  * * * * * * * *
    | * * * * * * * * *

Each cell has six neighbours. West and East share the cell's row; the four
diagonals move exactly one row up or down. The six directions are module-level
constants built once at import time and never mutated, so every function here
is a pure lookup over a fixed table.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, List, NamedTuple, Optional, Tuple

from .coords import Coordinate, Point
from .exceptions import DirectionNotFound, InvalidDirection

logger = logging.getLogger(__name__)


class _DirectionData(NamedTuple):
    label: str
    dx: int
    dy: int
    display_tag: str
    sprite_tag: str


class Direction(Enum):
    """One of the six hex grid directions.

    Members are declared in canonical order; that order defines each
    direction's ordinal. ``label`` is the canonical name ("NorthWest", ...)
    while ``name`` stays the Python identifier ("NORTH_WEST").

    ``display_tag`` and ``sprite_tag`` are opaque identifiers for presentation
    code (the container object and sprite used to draw the direction). They
    are carried verbatim and not interpreted here. All fields are read-only.
    """

    #                           label        dx  dy  display  sprite
    NORTH_WEST = _DirectionData("NorthWest", -1, 1, "NWest", "LineNW")
    NORTH_EAST = _DirectionData("NorthEast", 0, 1, "NEast", "LineNE")
    WEST = _DirectionData("West", -1, 0, "West", "LineW")
    EAST = _DirectionData("East", 1, 0, "East", "LineE")
    SOUTH_WEST = _DirectionData("SouthWest", 0, -1, "SWest", "LineSW")
    SOUTH_EAST = _DirectionData("SouthEast", 1, -1, "SEast", "LineSE")

    @property
    def label(self) -> str:
        return self.value.label

    @property
    def dx(self) -> int:
        return self.value.dx

    @property
    def dy(self) -> int:
        return self.value.dy

    @property
    def display_tag(self) -> str:
        return self.value.display_tag

    @property
    def sprite_tag(self) -> str:
        return self.value.sprite_tag

    @property
    def delta(self) -> Tuple[int, int]:
        return (self.dx, self.dy)

    @property
    def ordinal(self) -> int:
        return ordinal(self)

    @property
    def opposite(self) -> "Direction":
        return opposite(self)

    def step(self, coord: Coordinate) -> Point:
        """Return the neighbour of ``coord`` one cell away in this direction."""
        return Point(coord.x + self.dx, coord.y + self.dy)

    def __str__(self) -> str:
        return f"{self.label} : [{self.dx},{self.dy}]"


_ORDER: Tuple[Direction, ...] = tuple(Direction)

_OPPOSITES: Dict[Direction, Direction] = {
    Direction.NORTH_WEST: Direction.SOUTH_EAST,
    Direction.NORTH_EAST: Direction.SOUTH_WEST,
    Direction.WEST: Direction.EAST,
    Direction.EAST: Direction.WEST,
    Direction.SOUTH_WEST: Direction.NORTH_EAST,
    Direction.SOUTH_EAST: Direction.NORTH_WEST,
}

_BY_LABEL: Dict[str, Direction] = {d.label: d for d in _ORDER}
_BY_DELTA: Dict[Tuple[int, int], Direction] = {d.delta: d for d in _ORDER}


def all_directions() -> Tuple[Direction, ...]:
    """Return the six directions in canonical order.

    NorthWest, NorthEast, West, East, SouthWest, SouthEast.
    """
    return _ORDER


def ordinal(direction: Direction) -> int:
    """Return the zero-based index of ``direction`` in canonical order.

    Raises:
        DirectionNotFound: if ``direction`` is not one of the six members.
    """
    if not isinstance(direction, Direction):
        raise DirectionNotFound(f"Not a hex direction: {direction!r}")
    return _ORDER.index(direction)


def opposite(direction: Optional[Direction]) -> Direction:
    """Return the direction pointing the other way.

    >>> opposite(Direction.WEST) is Direction.EAST
    True

    Raises:
        InvalidDirection: if ``direction`` is None or not a Direction.
    """
    if direction is None:
        raise InvalidDirection("opposite() was passed None instead of a direction")
    if not isinstance(direction, Direction):
        raise InvalidDirection(f"opposite() was not passed a valid direction: {direction!r}")
    return _OPPOSITES[direction]


def from_adjacency(src: Coordinate, dst: Coordinate) -> Optional[Direction]:
    """Return the direction in which ``dst`` lies from ``src``.

    Example: if ``dst`` is the cell to the north-west of ``src`` the result is
    ``Direction.NORTH_WEST``.

    Returns None when the coordinates are not neighbours. That is a normal
    answer, not an error; it is logged at WARNING level since callers usually
    expect adjacent input.
    """
    for direction in _ORDER:
        if src.x + direction.dx == dst.x and src.y + direction.dy == dst.y:
            return direction

    logger.warning(
        "No direction between (%d, %d) and (%d, %d); coordinates are not adjacent",
        src.x, src.y, dst.x, dst.y,
    )
    return None


def from_label(label: str) -> Direction:
    """Look a direction up by its canonical name, e.g. ``"SouthEast"``."""
    try:
        return _BY_LABEL[label]
    except KeyError as exc:
        raise DirectionNotFound(f"Unknown direction label: {label!r}") from exc


def from_delta(dx: int, dy: int) -> Optional[Direction]:
    """Return the direction whose step is ``(dx, dy)``, or None if no direction has it."""
    return _BY_DELTA.get((dx, dy))


def neighbors(coord: Coordinate) -> List[Tuple[Direction, Point]]:
    """Return ``(direction, neighbour)`` pairs for all six neighbours of ``coord``.

    Neighbours are listed in canonical direction order. No bounds are applied.
    """
    return [(direction, direction.step(coord)) for direction in _ORDER]
