"""
Snake Kinematics - head position, heading, length and turning rules.
"""
from .primitives import Direction, Point, to_direction


class Snake:
    """The moving part of the game: where the head is and where it is going."""

    def __init__(self, head: Point, heading: Direction = Direction.UP, length: int = 1):
        self.head = head
        self.heading = heading
        self.length = length

    def can_change_direction(self, direction, width: int, height: int) -> bool:
        """
        Check if ``direction`` is a legal command for the next tick.

        A turn is refused if it reverses onto the neck, keeps to the current
        axis, or would leave the board on the very next tick.

        Args:
            direction: Direction tag or code
            width: Board width in cells
            height: Board height in cells

        Returns:
            True if the command may be issued

        Raises:
            UnknownDirectionError: If direction is not a Direction code
        """
        direction = to_direction(direction)
        horizontal = self.heading in (Direction.LEFT, Direction.RIGHT)
        vertical = self.heading in (Direction.UP, Direction.DOWN)

        if direction == Direction.UNCHANGED:
            return True
        if direction == Direction.LEFT:
            return self.head.x != 0 and not horizontal
        if direction == Direction.RIGHT:
            return self.head.x != width - 1 and not horizontal
        if direction == Direction.UP:
            return self.head.y != height - 1 and not vertical
        # DOWN
        return self.head.y != 0 and not vertical

    def turn(self, direction: Direction) -> None:
        """Set the heading. UNCHANGED keeps the current one."""
        if direction != Direction.UNCHANGED:
            self.heading = direction

    def next_position(self) -> Point:
        """Where the head lands if it moves one step along its heading."""
        return self.head.moved(self.heading)

    def move_to(self, point: Point) -> None:
        self.head = point

    def grow(self) -> None:
        self.length += 1
