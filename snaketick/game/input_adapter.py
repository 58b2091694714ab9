"""
Keyboard input adapter - turns key presses into direction commands.

Holds a single pending command that the driver reads and clears once per
tick, so only the last legal key pressed between two ticks takes effect.
"""
from typing import Dict

import pygame

from ..core.game_interface import GameInterface
from .primitives import Direction


def default_key_bindings() -> Dict[int, Direction]:
    """Arrow keys, WASD, and the Dvorak ,AOE cluster."""
    return {
        pygame.K_UP: Direction.UP,
        pygame.K_DOWN: Direction.DOWN,
        pygame.K_LEFT: Direction.LEFT,
        pygame.K_RIGHT: Direction.RIGHT,
        pygame.K_w: Direction.UP,
        pygame.K_s: Direction.DOWN,
        pygame.K_a: Direction.LEFT,
        pygame.K_d: Direction.RIGHT,
        # Dvorak
        pygame.K_COMMA: Direction.UP,
        pygame.K_o: Direction.DOWN,
        pygame.K_e: Direction.RIGHT,
    }


class InputAdapter:
    """Single-slot mailbox between the keyboard and the game."""

    def __init__(self, game: GameInterface):
        self.game = game
        self.pending = Direction.UNCHANGED
        self.key_bindings = default_key_bindings()

    def handle_key(self, key: int) -> bool:
        """
        Offer a key press as the next direction command.

        Args:
            key: pygame key code

        Returns:
            True if the key was stored as the pending command
        """
        direction = self.key_bindings.get(key)
        if direction is None:
            return False
        if not self.game.can_change_direction(direction):
            return False
        self.pending = direction
        return True

    def handle_event(self, event) -> bool:
        """Feed a pygame event; only KEYDOWN events are considered."""
        if event.type != pygame.KEYDOWN:
            return False
        return self.handle_key(event.key)

    def pop_command(self) -> Direction:
        """Return the pending command and reset the slot to UNCHANGED."""
        command = self.pending
        self.pending = Direction.UNCHANGED
        return command
