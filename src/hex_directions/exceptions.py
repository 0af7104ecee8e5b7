class HexDirectionsError(Exception):
    """Base exception for the hex_directions package."""


class InvalidDirection(HexDirectionsError, ValueError):
    """Raised when an operation is given None or a non-direction value."""


class DirectionNotFound(HexDirectionsError, LookupError):
    """Raised when a lookup names something outside the six directions."""


class DisplayConfigError(HexDirectionsError):
    """Raised when a display configuration file cannot be used."""
