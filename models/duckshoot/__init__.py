"""
Duck Shoot models package.

This package contains the data models specific to Duck Shoot: enums,
entity snapshots and configuration models.
"""

from .enums import (
    DuckState,
    Direction,
    WingPhase,
    DogState,
    Leg,
    RoundState,
)

from .models import (
    DuckData,
    DogData,
    RoundData,
)

from .game_config import (
    GameConfig,
    DuckConfig,
    DogConfig,
    RoundConfig,
    AudioConfig,
)

__all__ = [
    # Enums
    "DuckState",
    "Direction",
    "WingPhase",
    "DogState",
    "Leg",
    "RoundState",
    # Snapshots
    "DuckData",
    "DogData",
    "RoundData",
    # Configuration
    "GameConfig",
    "DuckConfig",
    "DogConfig",
    "RoundConfig",
    "AudioConfig",
]
