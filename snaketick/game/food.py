"""
Food Placer - uniform choice of a food cell.
"""
import random
from typing import Optional, Sequence

from .primitives import NO_FOOD, Point


class FoodPlacer:
    """
    Picks food positions.

    The random source only needs a ``random()`` method returning a float in
    [0, 1), so tests can pass a stub or a seeded ``random.Random``.
    """

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        """
        Initialize the placer.

        Args:
            rng: Random source; a new random.Random is created if None
            seed: Seed for the created random.Random (ignored when rng is given)
        """
        self.rng = rng if rng is not None else random.Random(seed)

    def _index(self, count: int) -> int:
        # min() guards against a source that returns exactly 1.0
        return min(int(self.rng.random() * count), count - 1)

    def random_point(self, width: int, height: int) -> Point:
        """Any point of the board, ignoring what occupies it."""
        x = self._index(width)
        y = self._index(height)
        return Point(x, y)

    def place(self, candidates: Sequence[Point]) -> Point:
        """
        Choose one of ``candidates`` uniformly.

        Args:
            candidates: Empty cells in scan order

        Returns:
            The chosen cell, or NO_FOOD if there are no candidates
        """
        if not candidates:
            return NO_FOOD
        return candidates[self._index(len(candidates))]
