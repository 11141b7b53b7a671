#!/usr/bin/env python3
"""
Entry point for Duck Shoot.

Usage:
    duckshoot                          # Classic mode
    duckshoot --mode fixed_five        # Always five ducks
    duckshoot --skin geometric --seed 42 --log-level DEBUG
    duckshoot --list-modes

Controls:
    - Click a duck to shoot it
    - Click the win banner to start the next round early
    - P to pause, ESC to quit
"""

import argparse
import sys
from typing import List, Optional

from duckshoot.logging import configure_logging

from . import game_info
from .game.mode_loader import GameModeLoader


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser from game_info.ARGUMENTS."""
    parser = argparse.ArgumentParser(
        prog='duckshoot',
        description=f"{game_info.NAME} - {game_info.DESCRIPTION}",
    )
    for arg in game_info.ARGUMENTS:
        options = {key: value for key, value in arg.items() if key != 'name'}
        parser.add_argument(arg['name'], **options)

    parser.add_argument('--fullscreen', action='store_true', help='Open a fullscreen window')
    parser.add_argument('--no-audio', action='store_true', help='Disable sound')
    parser.add_argument('--list-modes', action='store_true', help='List available modes and exit')
    return parser


def list_modes() -> None:
    loader = GameModeLoader()
    for mode_id in loader.list_available_modes():
        info = loader.get_mode_info(mode_id)
        print(f"  {mode_id:<12} {info['name']}: {info['description']}")


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, then initialize and run the game."""
    args = build_parser().parse_args(argv)

    if args.log_level:
        configure_logging(level=args.log_level)

    if args.list_modes:
        list_modes()
        return 0

    try:
        engine = game_info.create_engine(
            mode=args.mode,
            skin=args.skin,
            width=args.width,
            height=args.height,
            fullscreen=args.fullscreen,
            seed=args.seed,
            audio=not args.no_audio,
        )
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        engine.run()
    finally:
        # Ensure the session and pygame shut down cleanly
        engine.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
