"""
Snake Game Core - Pure game logic without rendering.

Composes the board, the snake and the food placer. next_turn() is the only
operation that advances the game; everything else is a query.
"""
import random
from typing import Any, Dict, Optional

from ..core.game_interface import GameInterface, GameMetadata
from .board import Board
from .errors import (
    ForbiddenDirectionError,
    InternalInvariantError,
    InvalidDimensionError,
)
from .food import FoodPlacer
from .primitives import NO_FOOD, Direction, Occupancy, Point, to_direction
from .snake import Snake


class SnakeGame(GameInterface):
    """
    Core Snake game logic.

    The snake starts in the middle of the board heading up. Each tick the
    head moves one cell; eating food makes the snake one cell longer. The
    game ends when the head leaves the board or runs into the body.
    """

    def __init__(
        self,
        width: int = 15,
        height: int = 15,
        initial_length: int = 4,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        """
        Initialize the game.

        Args:
            width: Grid width in cells
            height: Grid height in cells
            initial_length: Starting snake length
            rng: Random source for food placement (needs a random() method)
            seed: Seed for the default random source

        Raises:
            InvalidDimensionError: If any size is not a positive integer
        """
        for name, value in (
            ("width", width),
            ("height", height),
            ("initial_length", initial_length),
        ):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidDimensionError(f"{name} must be a positive integer, got {value!r}")

        self._board = Board(width, height, initial_tick=initial_length)
        self._snake = Snake(Point(width // 2, height // 2), Direction.UP, initial_length)
        self._food_placer = FoodPlacer(rng, seed)
        # May land on the head; it is only eaten by moving onto it later
        self._food = self._food_placer.random_point(width, height)
        self._game_over = False

    @classmethod
    def get_metadata(cls) -> GameMetadata:
        return GameMetadata(
            name="Snake",
            id="snake",
            description="Eat the food, grow longer, avoid the walls and yourself",
        )

    @property
    def width(self) -> int:
        return self._board.width

    @property
    def height(self) -> int:
        return self._board.height

    @property
    def snake_length(self) -> int:
        return self._snake.length

    @property
    def is_game_over(self) -> bool:
        return self._game_over

    @property
    def head(self) -> Point:
        return self._snake.head

    @property
    def heading(self) -> Direction:
        return self._snake.heading

    @property
    def food(self) -> Point:
        """Food position, or NO_FOOD when the board has no empty cell."""
        return self._food

    @property
    def tick(self) -> int:
        return self._board.tick

    def tile_at(self, x: int, y: int) -> Occupancy:
        """
        Get what occupies cell (x, y).

        Raises:
            OutOfBoundsError: If (x, y) is off the board
        """
        return self._board.occupancy(x, y, self._snake.head, self._food, self._snake.length)

    def can_change_direction(self, direction) -> bool:
        """
        Check if ``direction`` would be accepted by next_turn().

        Raises:
            UnknownDirectionError: If direction is not a Direction code
        """
        return self._snake.can_change_direction(direction, self.width, self.height)

    def place_food(self) -> Point:
        """Move the food to a uniformly random empty cell and return it."""
        candidates = self._board.empty_cells(self._snake.head, self._food, self._snake.length)
        self._food = self._food_placer.place(candidates)
        return self._food

    def place_food_at(self, x: int, y: int) -> None:
        """
        Put the food on a chosen cell. (-1, -1) removes it from the board.

        Raises:
            OutOfBoundsError: If (x, y) is off the board and not (-1, -1)
            ValueError: If (x, y) is part of the snake
        """
        point = Point(x, y)
        if point != NO_FOOD:
            self._board.check_bounds(x, y)
            if point == self._snake.head:
                raise ValueError("Food cannot be placed on the snake head")
            if self._board.is_body(x, y, self._snake.length):
                raise ValueError("Food cannot be placed on the snake body")
        self._food = point

    def next_turn(self, direction=Direction.UNCHANGED) -> bool:
        """
        Advance the game by one tick.

        Args:
            direction: New heading, or UNCHANGED to keep going straight.
                Repeating the current heading is always allowed.

        Returns:
            True if the game continues, False if it is (or just became) over

        Raises:
            UnknownDirectionError: If direction is not a Direction code
            ForbiddenDirectionError: If the turn is rejected by
                can_change_direction()
            InternalInvariantError: If the head would move onto itself
        """
        if self._game_over:
            return False

        direction = to_direction(direction)
        if (
            direction != Direction.UNCHANGED
            and direction != self._snake.heading
            and not self.can_change_direction(direction)
        ):
            raise ForbiddenDirectionError(
                f"Cannot turn {direction.name} while heading {self._snake.heading.name} "
                f"at ({self._snake.head.x}, {self._snake.head.y})"
            )
        self._snake.turn(direction)

        target = self._snake.next_position()
        if not self._board.contains(target.x, target.y):
            self._game_over = True
            return False

        tile = self.tile_at(target.x, target.y)
        if tile == Occupancy.SNAKE_BODY:
            self._game_over = True
            return False
        elif tile == Occupancy.FOOD:
            # Growing before the tick advances keeps the tail in place
            self.place_food()
            self._snake.grow()
        elif tile == Occupancy.SNAKE_HEAD:
            raise InternalInvariantError(
                f"Snake head moved onto itself at ({target.x}, {target.y})"
            )

        self._board.advance()
        self._board.touch(target.x, target.y)
        self._snake.move_to(target)
        return True

    def get_state(self) -> Dict[str, Any]:
        """
        Get current game state as plain values.

        Returns:
            Dictionary containing the game state
        """
        return {
            "width": self.width,
            "height": self.height,
            "head": self.head.to_dict(),
            "food": self._food.to_dict() if self._food != NO_FOOD else None,
            "heading": self.heading.name,
            "length": self.snake_length,
            "tick": self.tick,
            "game_over": self._game_over,
        }

    def get_score(self) -> int:
        """The final score is the snake length."""
        return self.snake_length
