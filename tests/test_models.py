"""
Tests for the pydantic models in the models package.

Tests cover:
- Primitive geometry (points, viewport, rectangles)
- Entity snapshots and their computed fields
- Mode configuration validation and defaults
"""

import pytest
from pydantic import ValidationError

from models import (
    AudioConfig,
    Direction,
    DogConfig,
    DogData,
    DogState,
    DuckConfig,
    DuckData,
    DuckState,
    GameConfig,
    Leg,
    Point2D,
    Rectangle,
    Resolution,
    RoundConfig,
    RoundData,
    RoundState,
    WingPhase,
)


# ============================================================================
# Enum Tests
# ============================================================================


class TestEnums:

    def test_wing_phase_toggles(self):
        assert WingPhase.STILL.toggled() == WingPhase.FLAPPING
        assert WingPhase.FLAPPING.toggled() == WingPhase.STILL

    def test_leg_alternates(self):
        assert Leg.LEFT.other() == Leg.RIGHT
        assert Leg.RIGHT.other() == Leg.LEFT

    def test_string_values(self):
        """Enums compare equal to their YAML/string values."""
        assert DuckState.SHOT == "shot"
        assert DogState.LEAPING == "leaping"
        assert RoundState.WON == "won"
        assert Direction.RIGHT == "right"


# ============================================================================
# Primitive Tests
# ============================================================================


class TestPrimitives:

    def test_point_allows_negative(self):
        point = Point2D(x=-120.0, y=350.0)
        assert point.x == -120.0

    def test_point_frozen(self):
        point = Point2D(x=1.0, y=2.0)
        with pytest.raises(ValidationError):
            point.x = 5.0

    def test_resolution_requires_positive(self):
        with pytest.raises(ValidationError):
            Resolution(width=0, height=600)
        with pytest.raises(ValidationError):
            Resolution(width=800, height=-1)

    def test_resolution_contains_is_half_open(self):
        viewport = Resolution(width=800, height=600)
        assert viewport.contains(Point2D(x=0.0, y=0.0))
        assert viewport.contains(Point2D(x=799.9, y=599.9))
        assert not viewport.contains(Point2D(x=800.0, y=10.0))
        assert not viewport.contains(Point2D(x=10.0, y=600.0))
        assert not viewport.contains(Point2D(x=-0.1, y=10.0))

    def test_resolution_center_and_aspect(self):
        viewport = Resolution(width=1280, height=720)
        assert viewport.center_x == 640.0
        assert viewport.aspect_ratio == pytest.approx(16 / 9)

    def test_rectangle_contains_boundary(self):
        rect = Rectangle(x=10.0, y=10.0, width=20.0, height=20.0)
        assert rect.contains_point(Point2D(x=10.0, y=10.0))
        assert rect.contains_point(Point2D(x=30.0, y=30.0))
        assert not rect.contains_point(Point2D(x=31.0, y=20.0))
        assert rect.center == Point2D(x=20.0, y=20.0)

    def test_rectangle_rejects_zero_size(self):
        with pytest.raises(ValidationError):
            Rectangle(x=0.0, y=0.0, width=0.0, height=10.0)


# ============================================================================
# Snapshot Tests
# ============================================================================


def _duck(**overrides):
    data = dict(
        id='duck-1',
        position=Point2D(x=100.0, y=200.0),
        direction=Direction.LEFT,
        wing_phase=WingPhase.STILL,
        state=DuckState.ALIVE,
        size=64.0,
    )
    data.update(overrides)
    return DuckData(**data)


class TestDuckData:

    def test_alive_duck_is_active(self):
        assert _duck().is_active is True

    def test_shot_duck_not_active(self):
        assert _duck(state=DuckState.SHOT).is_active is False

    def test_bounds(self):
        bounds = _duck().get_bounds()
        assert (bounds.x, bounds.y, bounds.right, bounds.bottom) == (100.0, 200.0, 164.0, 264.0)

    def test_size_must_be_positive(self):
        with pytest.raises(ValidationError, match="Size must be positive"):
            _duck(size=0.0)

    def test_frozen(self):
        duck = _duck()
        with pytest.raises(ValidationError):
            duck.state = DuckState.SHOT


class TestDogData:

    def test_intro_active_until_gone(self):
        base = dict(position=Point2D(x=-120.0, y=350.0), leg=Leg.LEFT,
                    sniffing=False, width=120.0, height=100.0)
        assert DogData(state=DogState.SURPRISED, **base).intro_active is True
        assert DogData(state=DogState.GONE, **base).intro_active is False


class TestRoundData:

    def test_eliminated_counts(self):
        data = RoundData(number=1, duck_count=5, remaining=2, state=RoundState.ACTIVE)
        assert data.eliminated == 3

    def test_pending_round_has_no_eliminations(self):
        data = RoundData(number=1, duck_count=5, remaining=0, state=RoundState.PENDING)
        assert data.eliminated == 0

    def test_remaining_never_negative(self):
        with pytest.raises(ValidationError):
            RoundData(number=1, duck_count=5, remaining=-1, state=RoundState.ACTIVE)


# ============================================================================
# Configuration Tests
# ============================================================================


class TestGameConfig:

    def test_defaults(self):
        config = GameConfig()
        assert config.id == "classic"
        assert config.duck.move_interval_ms == (500.0, 2000.0)
        assert config.duck.flap_interval_ms == (100.0, 300.0)
        assert config.duck.removal_delay_ms == 500.0
        assert config.dog.width == 120.0
        assert config.dog.height_breakpoint == 600
        assert (config.round.duck_count_min, config.round.duck_count_max) == (3, 10)
        assert config.round.intro_delay_ms == 5000.0
        assert config.audio.enabled is True

    def test_partial_sections(self):
        config = GameConfig(round={'duck_count_min': 5, 'duck_count_max': 5})
        assert config.round.duck_count_min == 5
        assert config.duck == DuckConfig()

    def test_interval_must_be_increasing(self):
        with pytest.raises(ValidationError):
            DuckConfig(flap_interval_ms=(300.0, 100.0))
        with pytest.raises(ValidationError):
            DuckConfig(move_interval_ms=(500.0, 500.0))
        with pytest.raises(ValidationError):
            DogConfig(sniff_interval_ms=(-1.0, 10.0))

    def test_duck_count_range_checked(self):
        with pytest.raises(ValidationError, match="must not exceed"):
            RoundConfig(duck_count_min=6, duck_count_max=5)

    def test_glides(self):
        assert DuckConfig(flight_speed=300.0).glides is True
        assert DuckConfig(flight_speed=0.0).glides is False
        assert DuckConfig().glides is False

    def test_negative_speed_rejected(self):
        with pytest.raises(ValidationError):
            DuckConfig(flight_speed=-10.0)

    def test_volume_bounds(self):
        with pytest.raises(ValidationError):
            AudioConfig(volume=1.5)

    def test_frozen(self):
        config = GameConfig()
        with pytest.raises(ValidationError):
            config.name = "Other"
