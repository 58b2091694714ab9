"""
Snake game module for Snaketick.

The engine (SnakeGame and its parts) has no pygame dependency; import the
renderer, input adapter and driver from their own modules.
"""

from .errors import (
    SnakeError,
    InvalidDimensionError,
    OutOfBoundsError,
    UnknownDirectionError,
    ForbiddenDirectionError,
    InternalInvariantError,
)
from .primitives import Direction, Occupancy, Point, NO_FOOD
from .board import Board
from .snake import Snake
from .food import FoodPlacer
from .snake_game import SnakeGame

__all__ = [
    'SnakeGame',
    'Board',
    'Snake',
    'FoodPlacer',
    'Direction',
    'Occupancy',
    'Point',
    'NO_FOOD',
    'SnakeError',
    'InvalidDimensionError',
    'OutOfBoundsError',
    'UnknownDirectionError',
    'ForbiddenDirectionError',
    'InternalInvariantError',
]
