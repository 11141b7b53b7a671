"""
Unified models library for Duck Shoot.

This package provides all Pydantic data models used across the system:
- Primitives: Basic geometric types (Point2D, Resolution, Rectangle)
- DuckShoot: Entity snapshots, enums and mode configuration

Usage:
    >>> from models import Point2D, Resolution
    >>> from models.duckshoot import DuckData, GameConfig
"""

# ============================================================================
# Primitives (basic types used everywhere)
# ============================================================================
from .primitives import (
    Point2D,
    Resolution,
    Rectangle,
)

# ============================================================================
# Duck Shoot models
# ============================================================================
from .duckshoot import (
    DuckState,
    Direction,
    WingPhase,
    DogState,
    Leg,
    RoundState,
    DuckData,
    DogData,
    RoundData,
    GameConfig,
    DuckConfig,
    DogConfig,
    RoundConfig,
    AudioConfig,
)

__all__ = [
    # Primitives
    "Point2D",
    "Resolution",
    "Rectangle",
    # Duck Shoot
    "DuckState",
    "Direction",
    "WingPhase",
    "DogState",
    "Leg",
    "RoundState",
    "DuckData",
    "DogData",
    "RoundData",
    "GameConfig",
    "DuckConfig",
    "DogConfig",
    "RoundConfig",
    "AudioConfig",
]
