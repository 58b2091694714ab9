"""
Abstract renderer interface for Snaketick.

All game renderers must implement this interface for visualization.
"""

from abc import ABC, abstractmethod
from typing import Any, Tuple

from .game_interface import GameInterface


class RendererInterface(ABC):
    """
    Abstract renderer for game visualization.

    Renderers query the game between ticks and never mutate it.
    """

    @abstractmethod
    def render(self, game: GameInterface, surface: Any) -> None:
        """
        Render the game to a surface.

        Args:
            game: Game to query
            surface: Target to draw on (a pygame Surface, a rich Console, ...)
        """
        pass

    @abstractmethod
    def get_preferred_size(self) -> Tuple[int, int]:
        """
        Get the preferred render size.

        Returns:
            Tuple of (width, height) in the renderer's units
        """
        pass

    def set_render_area(self, x: int, y: int, width: int, height: int) -> None:
        """
        Set the area where this renderer should draw.

        Args:
            x: Left edge x coordinate
            y: Top edge y coordinate
            width: Width of render area
            height: Height of render area
        """
        pass
