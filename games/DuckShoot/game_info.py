"""
Duck Shoot - Game Info

This file defines the game's metadata and CLI arguments, and provides the
factory function used by the launcher to build an engine.
"""

from typing import Any, Dict, List

# Game metadata
NAME = "Duck Shoot"
DESCRIPTION = "Ducks flap around the screen; click them all to win the round."
VERSION = "1.0.0"
AUTHOR = "Duck Shoot Team"

# CLI argument definitions, turned into argparse options by main.py
ARGUMENTS: List[Dict[str, Any]] = [
    {
        'name': '--mode',
        'type': str,
        'default': 'classic',
        'help': 'Game mode config file (without .yaml extension)'
    },
    {
        'name': '--skin',
        'type': str,
        'default': 'classic',
        'choices': ['classic', 'geometric'],
        'help': 'Visual skin'
    },
    {
        'name': '--width',
        'type': int,
        'default': None,
        'help': 'Window width in pixels'
    },
    {
        'name': '--height',
        'type': int,
        'default': None,
        'help': 'Window height in pixels'
    },
    {
        'name': '--seed',
        'type': int,
        'default': None,
        'help': 'Random seed for reproducible rounds'
    },
    {
        'name': '--log-level',
        'type': str,
        'default': None,
        'choices': ['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'OFF'],
        'help': 'Default log level (overrides DUCKSHOOT_LOG_LEVEL)'
    },
]


def create_engine(**kwargs):
    """
    Factory function to create a GameEngine.

    Args:
        **kwargs: Game configuration options
            - mode: Game mode config name (e.g., 'classic')
            - skin: Skin name
            - width, height: Window size (None = config default)
            - fullscreen: Open a fullscreen window
            - seed: Random seed
            - audio: False to disable sound

    Returns:
        GameEngine instance
    """
    from . import config
    from .engine import GameEngine
    from .game.mode_loader import GameModeLoader

    mode_config = GameModeLoader().load_mode(kwargs.get('mode') or 'classic')

    return GameEngine(
        game_config=mode_config,
        width=kwargs.get('width') or config.SCREEN_WIDTH,
        height=kwargs.get('height') or config.SCREEN_HEIGHT,
        fullscreen=kwargs.get('fullscreen', False),
        skin=kwargs.get('skin') or 'classic',
        seed=kwargs.get('seed'),
        audio_enabled=kwargs.get('audio', True),
    )
