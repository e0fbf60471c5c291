"""Shutter sweep direction."""

from enum import Enum
from typing import Union

from .errors import ConfigError


class Direction(Enum):
    """Where the shutter starts and which way it travels.

    Rows are scanlines for vertical sweeps, columns for horizontal sweeps.
    Reverse sweeps walk scanlines from the far edge of the canvas.
    """
    TOP_TO_BOTTOM = "top-to-bottom"
    BOTTOM_TO_TOP = "bottom-to-top"
    LEFT_TO_RIGHT = "left-to-right"
    RIGHT_TO_LEFT = "right-to-left"

    @property
    def axis(self) -> str:
        if self in (Direction.TOP_TO_BOTTOM, Direction.BOTTOM_TO_TOP):
            return "rows"
        return "columns"

    @property
    def reverse(self) -> bool:
        return self in (Direction.BOTTOM_TO_TOP, Direction.RIGHT_TO_LEFT)

    @property
    def cardinal(self) -> str:
        """Cardinal edge the shutter starts from."""
        return _CARDINALS_BY_DIRECTION[self]

    def mirrored(self) -> "Direction":
        return _MIRRORS[self]

    def scanlines(self, height: int, width: int) -> int:
        """Number of scanlines along the scan axis for a (height, width) canvas."""
        return height if self.axis == "rows" else width

    @classmethod
    def parse(cls, value: Union[str, int, "Direction"]) -> "Direction":
        """Parse a cardinal letter (N, S, W, E), a numeral 0-3, or a name."""
        if isinstance(value, Direction):
            return value
        key = str(value).strip()
        if key.upper() in _BY_CARDINAL:
            return _BY_CARDINAL[key.upper()]
        if key.isdigit() and int(key) < len(_ORDER):
            return _ORDER[int(key)]
        normalized = key.lower().replace("_", "-")
        for direction in cls:
            if direction.value == normalized:
                return direction
        raise ConfigError(
            f"Unknown direction '{value}'; expected one of N, S, W, E, 0-3 or "
            + ", ".join(d.value for d in cls)
        )


_ORDER = [
    Direction.TOP_TO_BOTTOM,
    Direction.BOTTOM_TO_TOP,
    Direction.LEFT_TO_RIGHT,
    Direction.RIGHT_TO_LEFT,
]

_BY_CARDINAL = {
    "N": Direction.TOP_TO_BOTTOM,
    "S": Direction.BOTTOM_TO_TOP,
    "W": Direction.LEFT_TO_RIGHT,
    "E": Direction.RIGHT_TO_LEFT,
}

_CARDINALS_BY_DIRECTION = {d: c for c, d in _BY_CARDINAL.items()}

_MIRRORS = {
    Direction.TOP_TO_BOTTOM: Direction.BOTTOM_TO_TOP,
    Direction.BOTTOM_TO_TOP: Direction.TOP_TO_BOTTOM,
    Direction.LEFT_TO_RIGHT: Direction.RIGHT_TO_LEFT,
    Direction.RIGHT_TO_LEFT: Direction.LEFT_TO_RIGHT,
}
