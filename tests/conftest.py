"""
Pytest configuration and fixtures for Snaketick tests.

This module sets up pygame mocking to allow testing the renderer, input
adapter and app loop without requiring a display or actual pygame
initialization. Modules that import pygame must be imported inside test
functions so they bind to the mock.
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest


# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))
sys.path.insert(0, str(PROJECT_ROOT / "scripts"))


def create_mock_pygame():
    """Create a comprehensive mock of the pygame module."""
    mock_pygame = MagicMock()

    # Basic initialization
    mock_pygame.init.return_value = (6, 0)  # (success, fail) count
    mock_pygame.quit.return_value = None

    # Display
    mock_surface = MagicMock()
    mock_surface.get_width.return_value = 720
    mock_surface.get_height.return_value = 720
    mock_surface.fill.return_value = None
    mock_surface.blit.return_value = None
    mock_pygame.display.set_mode.return_value = mock_surface
    mock_pygame.display.set_caption.return_value = None
    mock_pygame.display.flip.return_value = None

    # Fonts
    mock_font = MagicMock()
    mock_font.render.return_value = MagicMock()  # Returns a surface
    mock_font.size.return_value = (100, 30)  # (width, height)
    mock_pygame.font.Font.return_value = mock_font
    mock_pygame.font.SysFont.return_value = mock_font
    mock_pygame.font.init.return_value = None

    # Drawing
    mock_pygame.draw.rect.return_value = None

    # Events
    mock_pygame.event.get.return_value = []

    # Constants
    mock_pygame.QUIT = 256
    mock_pygame.KEYDOWN = 768
    mock_pygame.KEYUP = 769
    mock_pygame.USEREVENT = 32866
    mock_pygame.K_ESCAPE = 27
    mock_pygame.K_RETURN = 13
    mock_pygame.K_SPACE = 32
    mock_pygame.K_UP = 273
    mock_pygame.K_DOWN = 274
    mock_pygame.K_LEFT = 276
    mock_pygame.K_RIGHT = 275
    mock_pygame.K_w = 119
    mock_pygame.K_a = 97
    mock_pygame.K_s = 115
    mock_pygame.K_d = 100
    mock_pygame.K_r = 114
    mock_pygame.K_x = 120
    mock_pygame.K_COMMA = 44
    mock_pygame.K_o = 111
    mock_pygame.K_e = 101

    # Time
    mock_clock = MagicMock()
    mock_clock.tick.return_value = 16  # ~60fps
    mock_pygame.time.Clock.return_value = mock_clock
    mock_pygame.time.get_ticks.return_value = 0

    # Rect
    mock_pygame.Rect = MagicMock(side_effect=lambda *args: MagicMock(
        x=args[0] if args else 0,
        y=args[1] if len(args) > 1 else 0,
        width=args[2] if len(args) > 2 else 0,
        height=args[3] if len(args) > 3 else 0,
    ))

    # Surface creation
    mock_pygame.Surface.return_value = mock_surface

    return mock_pygame


@pytest.fixture(scope="session", autouse=True)
def mock_pygame_module():
    """
    Session-scoped fixture that mocks pygame before any imports.

    This runs automatically for all tests and ensures pygame
    is mocked before any front-end modules are imported.
    """
    mock_pygame = create_mock_pygame()

    # Store original module if it exists
    original_pygame = sys.modules.get('pygame')

    # Install mock
    sys.modules['pygame'] = mock_pygame

    yield mock_pygame

    # Restore original (or remove mock)
    if original_pygame:
        sys.modules['pygame'] = original_pygame
    else:
        del sys.modules['pygame']


@pytest.fixture
def pygame_calls(mock_pygame_module):
    """The pygame mock with call history cleared."""
    mock_pygame_module.draw.rect.reset_mock()
    mock_pygame_module.display.flip.reset_mock()
    mock_pygame_module.font.SysFont.return_value.render.reset_mock()
    mock_pygame_module.time.set_timer.reset_mock()
    return mock_pygame_module


@pytest.fixture
def mock_screen(mock_pygame_module):
    """Provide a mock pygame screen surface."""
    screen = MagicMock()
    screen.get_width.return_value = 720
    screen.get_height.return_value = 720
    screen.blit.return_value = None
    return screen


class FixedRandom:
    """Random source that always returns the same value from random()."""

    def __init__(self, value: float = 0.0):
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


@pytest.fixture
def first_choice_rng():
    """Random source that always picks the first candidate."""
    return FixedRandom(0.0)


@pytest.fixture
def sample_config_file(tmp_path):
    """Write a small YAML config and return its path."""
    path = tmp_path / "config.yaml"
    path.write_text(
        "game:\n"
        "  grid_width: 10\n"
        "  grid_height: 8\n"
        "  initial_length: 3\n"
        "  seed: 42\n"
        "  unknown_key: ignored\n"
        "display:\n"
        "  tick_ms: 150\n"
        "  title: Test Snake\n"
    )
    return path


@pytest.fixture
def make_rng():
    """Factory for random sources returning a fixed value."""
    return FixedRandom
