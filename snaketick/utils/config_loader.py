"""
Configuration Loader - Load and validate configuration from YAML.

Looks for config.yaml in the working directory, then in the project root.
Missing files or sections fall back to the defaults below, which reproduce
the classic 15x15 board with a four-cell snake and 280 ms ticks.
"""
import yaml
from pathlib import Path
from typing import Optional, Any
from dataclasses import dataclass, field, asdict


@dataclass
class GameConfig:
    """Board and snake settings."""
    grid_width: int = 15
    grid_height: int = 15
    initial_length: int = 4
    seed: Optional[int] = None


@dataclass
class DisplayConfig:
    """Window and timing settings."""
    window_width: int = 720
    window_height: int = 720
    tick_ms: int = 280
    fps: int = 60
    title: str = "Snake"


@dataclass
class Config:
    """Complete application configuration."""
    game: GameConfig = field(default_factory=GameConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)

    def validate(self) -> "Config":
        """
        Check that all sizes and timings are positive.

        Returns:
            self, for chaining

        Raises:
            ValueError: If a value is out of range
        """
        positive = {
            "game.grid_width": self.game.grid_width,
            "game.grid_height": self.game.grid_height,
            "game.initial_length": self.game.initial_length,
            "display.window_width": self.display.window_width,
            "display.window_height": self.display.window_height,
            "display.tick_ms": self.display.tick_ms,
            "display.fps": self.display.fps,
        }
        for name, value in positive.items():
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        return self


def _dict_to_dataclass(data: dict, cls: type) -> Any:
    """Convert a dictionary to a dataclass instance."""
    if not data:
        return cls()

    # Get the fields that the dataclass expects
    field_names = {f.name for f in cls.__dataclass_fields__.values()}

    # Filter to only include valid fields
    filtered_data = {k: v for k, v in data.items() if k in field_names}

    return cls(**filtered_data)


def _find_config_file() -> Optional[Path]:
    """Find config.yaml in the usual places."""
    possible_paths = [
        Path("config.yaml"),
        Path(__file__).parent.parent.parent / "config.yaml",
    ]

    for path in possible_paths:
        if path.exists():
            return path
    return None


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file (defaults to config.yaml in the
            working directory or the project root)

    Returns:
        Config object with all settings

    Raises:
        ValueError: If a configured value is invalid
    """
    path = Path(config_path) if config_path is not None else _find_config_file()

    if path is None or not path.exists():
        print("[Config] No config file found, using defaults")
        return Config()

    with open(path, 'r') as f:
        data = yaml.safe_load(f)

    if data is None:
        return Config()
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping, got {type(data).__name__}")

    config = Config()

    for section, cls in (('game', GameConfig), ('display', DisplayConfig)):
        value = data.get(section)
        if value is not None and not isinstance(value, dict):
            raise ValueError(f"{section} must be a mapping, got {type(value).__name__}")
        setattr(config, section, _dict_to_dataclass(value, cls))

    return config.validate()


def save_config(config: Config, config_path: str):
    """
    Save configuration to a YAML file.

    Args:
        config: Config object to save
        config_path: Path to save to
    """
    data = asdict(config)

    with open(config_path, 'w') as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
