"""
Errors raised by the Snake engine.

Game over is not an error: next_turn() reports it by returning False.
"""


class SnakeError(Exception):
    """Base class for all Snake engine errors."""


class InvalidDimensionError(SnakeError, ValueError):
    """Board width, height or initial snake length is not positive."""


class OutOfBoundsError(SnakeError, IndexError):
    """A cell coordinate lies outside the board."""

    def __init__(self, x: int, y: int):
        super().__init__(f"tile_at({x}, {y}) is off the board")
        self.x = x
        self.y = y


class UnknownDirectionError(SnakeError, ValueError):
    """A direction argument is not one of the Direction tags."""


class ForbiddenDirectionError(SnakeError, ValueError):
    """next_turn() was asked to turn somewhere can_change_direction() rejects."""


class InternalInvariantError(SnakeError, RuntimeError):
    """The engine reached a state that should be impossible."""
