"""
Terminal board view - Rich-based rendering of the board for the console.

Used for the end-of-game summary printed after the window closes.
"""

from typing import Tuple

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ..core.game_interface import GameInterface
from ..core.renderer_interface import RendererInterface
from .primitives import Occupancy


TILE_STYLES = {
    Occupancy.EMPTY: ("··", "grey70"),
    Occupancy.SNAKE_HEAD: ("██", "bold green4"),
    Occupancy.SNAKE_BODY: ("██", "green3"),
    Occupancy.FOOD: ("◆◆", "bold magenta"),
}


class TerminalRenderer(RendererInterface):
    """Draws the board as colored text, top row first."""

    def __init__(self, grid_width: int = 15, grid_height: int = 15):
        self._grid_width = grid_width
        self._grid_height = grid_height

    def get_preferred_size(self) -> Tuple[int, int]:
        """Size in terminal columns and rows (each cell is two columns wide)."""
        return (self._grid_width * 2, self._grid_height)

    def board_text(self, game: GameInterface) -> Text:
        """Build the board as a single rich Text."""
        text = Text()
        for y in reversed(range(game.height)):
            for x in range(game.width):
                glyph, style = TILE_STYLES[game.tile_at(x, y)]
                text.append(glyph, style=style)
            if y > 0:
                text.append("\n")
        return text

    def render(self, game: GameInterface, surface: Console) -> None:
        """
        Print the board inside a panel, followed by the score.

        Args:
            game: Game to query through tile_at()
            surface: Rich console to print to
        """
        surface.print(Panel.fit(self.board_text(game), title=game.get_metadata().name))
        if game.is_game_over:
            surface.print(f"[bold red]GAME OVER[/]: score {game.get_score()}")
        else:
            surface.print(f"Score: {game.get_score()}")
