"""
Board Model - per-cell tick stamps and the occupancy they imply.

Instead of keeping the snake body as a list of cells, each cell remembers the
tick at which the head last stood on it. A cell is body while that stamp is
less than ``length`` ticks old, so growing the snake is just ``length += 1``.
"""
from typing import List

import numpy as np

from .errors import OutOfBoundsError
from .primitives import Occupancy, Point


class Board:
    """
    Rectangular grid of last-touched ticks plus the global tick counter.

    Cells are indexed [x, y] with x to the right and y upward.
    """

    def __init__(self, width: int, height: int, initial_tick: int = 0):
        """
        Initialize the board.

        Args:
            width: Grid width in cells
            height: Grid height in cells
            initial_tick: Starting value of the tick counter. Using the
                initial snake length keeps every cell out of the body at
                startup, since all stamps start at 0.
        """
        self.width = width
        self.height = height
        self.tick = initial_tick
        self._touched = np.zeros((width, height), dtype=np.int64)

    def contains(self, x: int, y: int) -> bool:
        """Check if (x, y) lies on the board."""
        return 0 <= x < self.width and 0 <= y < self.height

    def check_bounds(self, x: int, y: int) -> None:
        """Raise OutOfBoundsError unless (x, y) lies on the board."""
        if not self.contains(x, y):
            raise OutOfBoundsError(x, y)

    def touched_at(self, x: int, y: int) -> int:
        """Tick at which the head last occupied (x, y), 0 if never."""
        self.check_bounds(x, y)
        return int(self._touched[x, y])

    def touch(self, x: int, y: int) -> None:
        """Stamp (x, y) with the current tick."""
        self.check_bounds(x, y)
        self._touched[x, y] = self.tick

    def advance(self) -> int:
        """Move to the next tick and return it."""
        self.tick += 1
        return self.tick

    def is_body(self, x: int, y: int, length: int) -> bool:
        """Check if (x, y) was touched within the last ``length`` ticks."""
        return self.tick < self.touched_at(x, y) + length

    def occupancy(self, x: int, y: int, head: Point, food: Point, length: int) -> Occupancy:
        """
        Classify cell (x, y).

        The head wins over food, food wins over body.

        Args:
            x: Column
            y: Row
            head: Snake head position
            food: Food position, or NO_FOOD
            length: Current snake length

        Returns:
            Occupancy of the cell

        Raises:
            OutOfBoundsError: If (x, y) is off the board
        """
        self.check_bounds(x, y)
        if x == head.x and y == head.y:
            return Occupancy.SNAKE_HEAD
        if x == food.x and y == food.y:
            return Occupancy.FOOD
        if self.is_body(x, y, length):
            return Occupancy.SNAKE_BODY
        return Occupancy.EMPTY

    def empty_cells(self, head: Point, food: Point, length: int) -> List[Point]:
        """
        List every EMPTY cell, scanning rows bottom to top, left to right.

        Args:
            head: Snake head position
            food: Food position, or NO_FOOD
            length: Current snake length

        Returns:
            Points of all empty cells in scan order
        """
        free = self._touched + length <= self.tick
        if self.contains(head.x, head.y):
            free[head.x, head.y] = False
        if self.contains(food.x, food.y):
            free[food.x, food.y] = False
        # Transposing gives (y, x) pairs in y-major order
        return [Point(int(x), int(y)) for y, x in np.argwhere(free.T)]
