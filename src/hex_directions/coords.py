from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class Coordinate(Protocol):
    """Anything exposing integer ``x`` and ``y``. Only ever read, never written."""

    @property
    def x(self) -> int: ...

    @property
    def y(self) -> int: ...


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Point":
        return Point(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
