"""Utilities: configuration loading."""

from .config_loader import Config, DisplayConfig, GameConfig, load_config, save_config

__all__ = [
    'Config',
    'DisplayConfig',
    'GameConfig',
    'load_config',
    'save_config',
]
