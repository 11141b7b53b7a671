"""
Pydantic v2 models for game mode YAML configuration.

These models validate and parse the mode files that define duck timing,
the dog intro, round sizing and audio for Duck Shoot.
"""

from typing import Optional, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator


def _validate_interval(v: Tuple[float, float]) -> Tuple[float, float]:
    low, high = v
    if low < 0:
        raise ValueError("Interval bounds must be non-negative")
    if low >= high:
        raise ValueError(f"Interval low must be less than high, got ({low}, {high})")
    return v


class DuckConfig(BaseModel):
    """
    Duck movement and animation timing.

    Intervals are half-open millisecond ranges ``[low, high)`` from which
    each delay is drawn uniformly.
    """
    model_config = {"frozen": True}

    size: float = Field(
        default=64.0,
        description="Edge length of the duck hit box in pixels",
        gt=0.0
    )
    move_interval_ms: Tuple[float, float] = Field(
        default=(500.0, 2000.0),
        description="Range for the delay between retargets"
    )
    flap_interval_ms: Tuple[float, float] = Field(
        default=(100.0, 300.0),
        description="Range for the delay between wing toggles"
    )
    removal_delay_ms: float = Field(
        default=500.0,
        description="Time a shot duck stays visible before removal",
        ge=0.0
    )
    flight_speed: Optional[float] = Field(
        default=None,
        description="Glide speed in pixels/second; null or 0 repositions instantly",
        ge=0.0
    )

    @field_validator("move_interval_ms", "flap_interval_ms")
    @classmethod
    def validate_intervals(cls, v: Tuple[float, float]) -> Tuple[float, float]:
        """Ensure 0 <= low < high."""
        return _validate_interval(v)

    @property
    def glides(self) -> bool:
        return bool(self.flight_speed)


class DogConfig(BaseModel):
    """
    Dog intro sequence timing and layout.

    The dog walks in from ``x = -width`` toward the horizontal center,
    then plays the surprised and leaping poses before leaving.
    """
    model_config = {"frozen": True}

    enabled: bool = Field(
        default=True,
        description="Whether the intro sequence plays at all"
    )
    width: float = Field(default=120.0, gt=0.0)
    height: float = Field(default=100.0, gt=0.0)
    step: float = Field(
        default=20.0,
        description="Distance advanced per leg half-step",
        gt=0.0
    )
    step_interval_ms: float = Field(
        default=100.0,
        description="Cadence of the leg cycle",
        gt=0.0
    )
    sniff_interval_ms: Tuple[float, float] = Field(
        default=(900.0, 1200.0),
        description="Range for the delay between sniff toggles"
    )
    surprise_ms: float = Field(
        default=1000.0,
        description="Dwell time in the surprised pose",
        ge=0.0
    )
    leap_ms: float = Field(
        default=500.0,
        description="Dwell time in the leaping pose",
        ge=0.0
    )
    height_breakpoint: int = Field(
        default=600,
        description="Viewport height below which the small ground offset applies",
        gt=0
    )
    ground_offset_small: float = Field(default=150.0, ge=0.0)
    ground_offset_large: float = Field(default=250.0, ge=0.0)

    @field_validator("sniff_interval_ms")
    @classmethod
    def validate_sniff_interval(cls, v: Tuple[float, float]) -> Tuple[float, float]:
        """Ensure 0 <= low < high."""
        return _validate_interval(v)


class RoundConfig(BaseModel):
    """
    Round sizing and pacing.

    The duck count of each round is drawn uniformly from
    ``[duck_count_min, duck_count_max]`` inclusive.
    """
    model_config = {"frozen": True}

    duck_count_min: int = Field(default=3, ge=1)
    duck_count_max: int = Field(default=10, ge=1)
    intro_delay_ms: float = Field(
        default=5000.0,
        description="Spawn delay of the first round when no dog intro holds it",
        ge=0.0
    )
    respawn_delay_ms: float = Field(
        default=0.0,
        description="Spawn delay of every later round",
        ge=0.0
    )
    restart_delay_ms: float = Field(
        default=2500.0,
        description="How long the win notification stays up before the next round",
        ge=0.0
    )
    auto_restart: bool = Field(
        default=True,
        description="Start the next round automatically; otherwise wait for dismissal"
    )

    @model_validator(mode='after')
    def validate_count_range(self) -> 'RoundConfig':
        """Ensure duck_count_min <= duck_count_max."""
        if self.duck_count_min > self.duck_count_max:
            raise ValueError(
                f"duck_count_min ({self.duck_count_min}) must not exceed "
                f"duck_count_max ({self.duck_count_max})"
            )
        return self


class AudioConfig(BaseModel):
    """Audio settings. Failure to initialize audio is never fatal."""
    model_config = {"frozen": True}

    enabled: bool = True
    volume: float = Field(default=0.7, ge=0.0, le=1.0)


class GameConfig(BaseModel):
    """
    Complete game mode configuration from YAML.

    Every section has defaults, so an empty mode file yields the classic
    game.
    """
    model_config = {"frozen": True}

    name: str = Field(
        default="Classic",
        description="Human-readable name of the game mode"
    )
    id: str = Field(
        default="classic",
        description="Unique identifier for the game mode"
    )
    description: str = Field(default="")
    version: str = Field(default="1.0.0")
    duck: DuckConfig = Field(default_factory=DuckConfig)
    dog: DogConfig = Field(default_factory=DogConfig)
    round: RoundConfig = Field(default_factory=RoundConfig)
    audio: AudioConfig = Field(default_factory=AudioConfig)
