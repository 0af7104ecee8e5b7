"""
Hex grid direction model.

Six fixed directions for an axial hex grid with rows running East-West, plus
pure lookups over them: canonical order, ordinals, opposites and the
direction relating two adjacent coordinates. Grid storage and rendering live
outside this package.
"""

from .coords import Coordinate, Point
from .directions import (
    Direction,
    all_directions,
    from_adjacency,
    from_delta,
    from_label,
    neighbors,
    opposite,
    ordinal,
)
from .exceptions import DirectionNotFound, DisplayConfigError, HexDirectionsError, InvalidDirection

__version__ = "0.1.0"

__all__ = [
    "Coordinate",
    "Direction",
    "DirectionNotFound",
    "DisplayConfigError",
    "HexDirectionsError",
    "InvalidDirection",
    "Point",
    "all_directions",
    "from_adjacency",
    "from_delta",
    "from_label",
    "neighbors",
    "opposite",
    "ordinal",
]
