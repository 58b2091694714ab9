"""
Abstract game interface for Snaketick.

Renderers and input adapters only talk to a grid game through GameInterface.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Any


@dataclass
class GameMetadata:
    """Metadata describing a game."""

    name: str                           # Display name (e.g., "Snake")
    id: str                             # Unique identifier (e.g., "snake")
    description: str                    # Brief description for UI
    version: str = "1.0.0"              # Game version


class GameInterface(ABC):
    """
    Abstract base class for grid games.

    Games own the core rules and state. Everything outside the game
    (rendering, keyboard input, timers) reads it through queries and
    drives it through next_turn().
    """

    @classmethod
    @abstractmethod
    def get_metadata(cls) -> GameMetadata:
        """
        Return metadata about this game.

        Returns:
            GameMetadata describing the game
        """
        pass

    @property
    @abstractmethod
    def width(self) -> int:
        """Board width in cells."""
        pass

    @property
    @abstractmethod
    def height(self) -> int:
        """Board height in cells."""
        pass

    @property
    @abstractmethod
    def is_game_over(self) -> bool:
        """Whether the game has ended. Once True it stays True."""
        pass

    @abstractmethod
    def tile_at(self, x: int, y: int) -> int:
        """
        Get what occupies cell (x, y).

        Args:
            x: Column, 0 is the left edge
            y: Row, 0 is the bottom edge

        Returns:
            Game-specific occupancy code
        """
        pass

    @abstractmethod
    def can_change_direction(self, direction: int) -> bool:
        """
        Check if a direction command would be accepted right now.

        Args:
            direction: The direction to check

        Returns:
            True if the command is legal, False otherwise
        """
        pass

    @abstractmethod
    def next_turn(self, direction: int) -> bool:
        """
        Advance the game by one tick.

        Args:
            direction: Direction command for this tick

        Returns:
            True while the game continues, False once it is over
        """
        pass

    @abstractmethod
    def get_state(self) -> Dict[str, Any]:
        """
        Get a snapshot of the current game state.

        Returns:
            Dictionary of plain values describing the game
        """
        pass

    def get_score(self) -> int:
        """
        Get the current score.

        Returns:
            Current game score
        """
        return 0
