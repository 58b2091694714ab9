"""
Snake Game Renderer - Pygame-based visualization implementing RendererInterface.

Paints one rectangle per cell from tile_at(), so the renderer never needs to
know how the engine stores the snake.
"""

import pygame
from typing import Tuple

from ..core.game_interface import GameInterface
from ..core.renderer_interface import RendererInterface
from .primitives import Occupancy


# Colors
EVEN_COLOR = (225, 225, 225)
ODD_COLOR = (217, 217, 218)
SNAKE_HEAD_COLOR = (0, 144, 60)
SNAKE_BODY_COLOR = (0, 180, 0)
FOOD_COLOR = (220, 0, 255)
GAME_OVER_COLOR = (80, 0, 0)

TILE_COLORS = {
    Occupancy.SNAKE_HEAD: SNAKE_HEAD_COLOR,
    Occupancy.SNAKE_BODY: SNAKE_BODY_COLOR,
    Occupancy.FOOD: FOOD_COLOR,
}

FONT_SIZE = 48


class SnakeRenderer(RendererInterface):
    """
    Renders the Snake board using Pygame, implementing RendererInterface.

    The board is stretched over the render area; +y on the board is up on
    screen.
    """

    def __init__(
        self,
        grid_width: int = 15,
        grid_height: int = 15,
        render_width: int = 720,
        render_height: int = 720,
        font_size: int = FONT_SIZE,
    ):
        """
        Initialize the renderer.

        Args:
            grid_width: Grid width in cells
            grid_height: Grid height in cells
            render_width: Width of the drawing area in pixels
            render_height: Height of the drawing area in pixels
            font_size: Point size of the game over message
        """
        self._grid_width = grid_width
        self._grid_height = grid_height
        self._offset_x = 0
        self._offset_y = 0
        self._render_width = render_width
        self._render_height = render_height
        self._font_size = font_size
        self._font = None

    def get_preferred_size(self) -> Tuple[int, int]:
        """Get the preferred render size."""
        return (self._render_width, self._render_height)

    def set_render_area(self, x: int, y: int, width: int, height: int) -> None:
        """Set the area where this renderer should draw."""
        self._offset_x = x
        self._offset_y = y
        self._render_width = width
        self._render_height = height

    def cell_rect(self, x: int, y: int) -> Tuple[int, int, int, int]:
        """
        Pixel rectangle (left, top, width, height) of board cell (x, y).

        Edges are rounded from exact fractions so neighbouring cells share
        edges and the grid covers the whole render area.
        """
        w, h = self._grid_width, self._grid_height
        left = round(self._render_width * x / w)
        right = round(self._render_width * (x + 1) / w)
        top = round(self._render_height * (h - y - 1) / h)
        bottom = round(self._render_height * (h - y) / h)
        return (self._offset_x + left, self._offset_y + top, right - left, bottom - top)

    def tile_color(self, tile: Occupancy, x: int, y: int) -> Tuple[int, int, int]:
        """Color of a cell; empty cells form a checkerboard."""
        if tile == Occupancy.EMPTY:
            return EVEN_COLOR if (x + y) % 2 == 0 else ODD_COLOR
        return TILE_COLORS[tile]

    def render(self, game: GameInterface, surface: pygame.Surface) -> None:
        """
        Render the board to a surface.

        Args:
            game: Game to query through tile_at()
            surface: Pygame surface to draw on
        """
        for x in range(game.width):
            for y in range(game.height):
                color = self.tile_color(game.tile_at(x, y), x, y)
                pygame.draw.rect(surface, color, pygame.Rect(*self.cell_rect(x, y)))

        if game.is_game_over:
            self._draw_game_over(game, surface)

    def _draw_game_over(self, game: GameInterface, surface: pygame.Surface) -> None:
        """Overlay the final score."""
        if self._font is None:
            self._font = pygame.font.SysFont("sans", self._font_size)
        text = self._font.render(f"GAME OVER: score {game.get_score()}", True, GAME_OVER_COLOR)
        surface.blit(text, (self._offset_x, self._offset_y))
