#!/usr/bin/env python3
"""
Snaketick - Play Script

Play Snake in a pygame window.

Usage:
    python scripts/play.py                          # Use config.yaml or defaults
    python scripts/play.py --width 20 --height 12   # Override board size
    python scripts/play.py --config my_config.yaml --seed 7

Controls:
    Arrow Keys / WASD / ,AOE (Dvorak): Turn
    R: Restart game
    ESC: Quit
"""
import sys
import os
import argparse
import warnings
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Suppress pygame messages
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = '1'
warnings.filterwarnings('ignore', category=UserWarning, module='pygame')

from snaketick.utils.config_loader import load_config
from snaketick.game.driver import SnakeApp


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Snaketick - Play Snake",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/play.py
  python scripts/play.py --width 20 --height 12 --length 3
  python scripts/play.py --tick-ms 150 --seed 42
"""
    )

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML config file (default: config.yaml)"
    )
    parser.add_argument(
        "--width",
        type=int,
        default=None,
        help="Board width in cells"
    )
    parser.add_argument(
        "--height",
        type=int,
        default=None,
        help="Board height in cells"
    )
    parser.add_argument(
        "--length",
        type=int,
        default=None,
        help="Initial snake length"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for food placement"
    )
    parser.add_argument(
        "--tick-ms",
        type=int,
        default=None,
        help="Milliseconds per game tick"
    )

    return parser.parse_args(argv)


def build_config(args):
    """Load the config file and apply command line overrides."""
    config = load_config(args.config)

    if args.width is not None:
        config.game.grid_width = args.width
    if args.height is not None:
        config.game.grid_height = args.height
    if args.length is not None:
        config.game.initial_length = args.length
    if args.seed is not None:
        config.game.seed = args.seed
    if args.tick_ms is not None:
        config.display.tick_ms = args.tick_ms

    return config.validate()


def main(argv=None):
    """Main entry point for human play mode."""
    args = parse_args(argv)

    try:
        config = build_config(args)
    except ValueError as e:
        print(f"[Config] {e}")
        return 2

    game = config.game
    print("\n" + "=" * 50)
    print("Snaketick")
    print("=" * 50)
    print(f"  Board: {game.grid_width}x{game.grid_height}, snake length {game.initial_length}")
    print("  Arrow Keys / WASD / ,AOE: Turn")
    print("  R: Restart")
    print("  ESC: Quit")
    print("=" * 50 + "\n")

    score = SnakeApp(config).run()
    print(f"\nFinal Score: {score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
