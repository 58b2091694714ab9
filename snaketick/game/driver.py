"""
Tick driver and pygame application loop.

GameDriver does one tick: adapter -> engine -> renderer. SnakeApp owns the
window and fires the driver from a pygame timer.
"""
from typing import Optional

import pygame
from rich.console import Console

from ..utils.config_loader import Config
from .input_adapter import InputAdapter
from .renderer import SnakeRenderer
from .snake_game import SnakeGame
from .terminal_renderer import TerminalRenderer


TICK_EVENT = pygame.USEREVENT + 1


class GameDriver:
    """Runs a single tick of the game and redraws it."""

    def __init__(
        self,
        game: SnakeGame,
        adapter: InputAdapter,
        renderer: SnakeRenderer,
        surface: pygame.Surface,
    ):
        self.game = game
        self.adapter = adapter
        self.renderer = renderer
        self.surface = surface

    def tick(self) -> bool:
        """
        Advance the game by one tick and repaint.

        Returns:
            True while the game is running
        """
        running = self.game.next_turn(self.adapter.pop_command())
        self.renderer.render(self.game, self.surface)
        return running


class SnakeApp:
    """
    Standalone Snake window for human play.

    Controls:
        Arrow Keys, WASD or ,AOE: Turn the snake
        R: Restart game
        ESC: Quit
    """

    def __init__(self, config: Optional[Config] = None, console: Optional[Console] = None):
        self.config = config or Config()
        self.console = console or Console()
        self.surface: Optional[pygame.Surface] = None
        self.driver: Optional[GameDriver] = None
        self.running = False
        self.game_running = False

    def new_game(self) -> SnakeGame:
        """Start a fresh game in the current window."""
        game_cfg = self.config.game
        game = SnakeGame(
            game_cfg.grid_width,
            game_cfg.grid_height,
            game_cfg.initial_length,
            seed=game_cfg.seed,
        )
        renderer = SnakeRenderer(
            grid_width=game_cfg.grid_width,
            grid_height=game_cfg.grid_height,
            render_width=self.config.display.window_width,
            render_height=self.config.display.window_height,
        )
        self.driver = GameDriver(game, InputAdapter(game), renderer, self.surface)
        self.game_running = True
        # The timer only fires after its first delay, so tick once now
        self.game_running = self.tick()
        # Re-arming restarts the countdown from this tick
        pygame.time.set_timer(TICK_EVENT, self.config.display.tick_ms)
        return game

    def tick(self) -> bool:
        """Run one tick, flip the display and report game over once."""
        running = self.driver.tick()
        pygame.display.flip()
        if self.game_running and not running:
            self.report_game_over()
        return running

    def report_game_over(self) -> None:
        game = self.driver.game
        print(f"[Snake] Game over! Score: {game.get_score()}")
        TerminalRenderer(game.width, game.height).render(game, self.console)

    def handle_event(self, event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == TICK_EVENT:
            if self.game_running:
                self.game_running = self.tick()
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key == pygame.K_r:
                self.new_game()
            elif self.game_running:
                self.driver.adapter.handle_event(event)

    def run(self) -> int:
        """
        Open the window and play until it is closed.

        Returns:
            Score of the last game
        """
        display = self.config.display
        pygame.init()
        self.surface = pygame.display.set_mode((display.window_width, display.window_height))
        pygame.display.set_caption(display.title)
        clock = pygame.time.Clock()

        self.running = True
        self.new_game()
        try:
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                clock.tick(display.fps)
        finally:
            pygame.time.set_timer(TICK_EVENT, 0)
            pygame.quit()

        return self.driver.game.get_score()
