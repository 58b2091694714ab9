"""
Value types shared by the Snake engine: directions, occupancy codes, points.
"""
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Tuple

from .errors import UnknownDirectionError


class Direction(IntEnum):
    """Direction commands. UNCHANGED means "keep the current heading"."""
    UNCHANGED = 0
    LEFT = 1
    RIGHT = 2
    DOWN = 3
    UP = 4


class Occupancy(IntEnum):
    """What a board cell currently holds."""
    EMPTY = 0
    SNAKE_HEAD = 1
    SNAKE_BODY = 2
    FOOD = 3


# +y is up
DIRECTION_DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
}


@dataclass(frozen=True)
class Point:
    """A point on the game grid."""
    x: int
    y: int

    def moved(self, direction: Direction) -> "Point":
        """Return the neighbouring point one step in ``direction``."""
        dx, dy = DIRECTION_DELTAS[direction]
        return Point(self.x + dx, self.y + dy)

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return {"x": self.x, "y": self.y}


# Food position meaning "no food on the board"
NO_FOOD = Point(-1, -1)


def to_direction(value) -> Direction:
    """
    Coerce a direction tag or its integer code to a Direction.

    Raises:
        UnknownDirectionError: If value is not a known direction code
    """
    if isinstance(value, Direction):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise UnknownDirectionError(f"Unknown direction code: {value!r}")
    try:
        return Direction(value)
    except ValueError:
        raise UnknownDirectionError(f"Unknown direction code: {value!r}") from None
