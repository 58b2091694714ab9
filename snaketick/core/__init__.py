"""
Core abstractions for Snaketick.

Provides abstract interfaces that the game engine and its renderers implement.
"""

from .game_interface import GameInterface, GameMetadata
from .renderer_interface import RendererInterface

__all__ = [
    'GameInterface',
    'GameMetadata',
    'RendererInterface',
]
