"""
Unit tests for Duck and DuckController.

Covers spawning, the retarget and wing timers, gliding, shooting and
removal, and rescaling into a resized viewport.
"""

import math
import typing
from unittest.mock import Mock

import pytest

from duckshoot.events import DuckEliminated, DuckRemoved
from games.DuckShoot.game.duck import Duck, DuckController, draw_interval, random_position
from models import Direction, DogConfig, DuckConfig, DuckState, Point2D, Resolution, WingPhase

# Deterministic cadence: one retarget per ~1000ms, one flap per ~175ms
STEADY = DuckConfig(move_interval_ms=(1000.0, 1001.0), flap_interval_ms=(175.0, 176.0))


@pytest.fixture
def controller(scheduler, bus, viewport, rng):
    return DuckController(scheduler, bus, STEADY, viewport, rng)


# ============================================================================
# Random draws
# ============================================================================

class TestRandomDraws:

    def test_interval_low_end(self):
        rng = Mock()
        rng.random.return_value = 0.0
        assert draw_interval(rng, (100.0, 300.0)) == 100.0

    def test_interval_is_half_open(self):
        rng = Mock()
        rng.random.return_value = 0.999999
        value = draw_interval(rng, (100.0, 300.0))
        assert 100.0 <= value < 300.0

    def test_interval_matches_config_type(self):
        hints = typing.get_type_hints(draw_interval)
        assert hints['interval'] == DuckConfig.model_fields['move_interval_ms'].annotation
        assert hints['interval'] == DogConfig.model_fields['sniff_interval_ms'].annotation

    def test_position_inside_bounds(self, rng):
        bounds = Resolution(width=320, height=240)
        for _ in range(500):
            assert bounds.contains(random_position(rng, bounds))


# ============================================================================
# Spawning
# ============================================================================

class TestSpawn:

    def test_spawned_duck_is_alive_inside_viewport(self, controller, viewport):
        duck = controller.spawn()

        assert duck.is_alive
        assert duck.state == DuckState.ALIVE
        assert duck.wing_phase == WingPhase.STILL
        assert duck.direction in (Direction.LEFT, Direction.RIGHT)
        assert viewport.contains(duck.position)
        assert duck.size == STEADY.size

    def test_ids_are_unique(self, controller):
        ids = {controller.spawn().id for _ in range(20)}
        assert len(ids) == 20

    def test_spawn_starts_move_and_flap_timers(self, controller, scheduler):
        duck = controller.spawn()

        assert duck.move_timer is not None and duck.move_timer.active
        assert duck.flap_timer is not None and duck.flap_timer.active
        assert scheduler.pending(duck) == 2

    def test_gliding_duck_also_gets_ticker(self, scheduler, bus, viewport, rng):
        controller = DuckController(scheduler, bus, DuckConfig(flight_speed=300.0), viewport, rng)
        duck = controller.spawn()
        assert scheduler.pending(duck) == 3

    def test_spawn_in_explicit_bounds(self, controller):
        small = Resolution(width=50, height=40)
        for _ in range(50):
            assert small.contains(controller.spawn(small).position)


# ============================================================================
# Movement and animation
# ============================================================================

class TestMovement:

    def test_first_timer_delays_within_configured_ranges(self, scheduler, bus, viewport, rng):
        config = DuckConfig()
        controller = DuckController(scheduler, bus, config, viewport, rng)
        for _ in range(100):
            duck = controller.spawn()
            assert 500.0 <= duck.move_timer.due_ms < 2000.0
            assert 100.0 <= duck.flap_timer.due_ms < 300.0

    def test_wings_toggle_on_flap_timer(self, controller, scheduler):
        duck = controller.spawn()

        scheduler.tick(174)
        assert duck.wing_phase == WingPhase.STILL

        scheduler.tick(2)
        assert duck.wing_phase == WingPhase.FLAPPING

        scheduler.tick(176)
        assert duck.wing_phase == WingPhase.STILL

    def test_move_repositions_inside_viewport(self, controller, scheduler, viewport):
        duck = controller.spawn()
        start = duck.position

        scheduler.tick(1001)

        assert duck.position != start
        assert duck.position == duck.target
        assert viewport.contains(duck.position)

    def test_direction_follows_horizontal_motion(self, controller, scheduler):
        duck = controller.spawn()
        for _ in range(30):
            before = duck.position
            scheduler.tick(1001)
            expected = Direction.RIGHT if duck.position.x > before.x else Direction.LEFT
            assert duck.direction == expected

    def test_timers_keep_rescheduling(self, controller, scheduler):
        duck = controller.spawn()
        scheduler.tick(10_000)
        assert duck.is_alive
        assert scheduler.pending(duck) == 2

    def test_glide_moves_toward_target(self, scheduler, bus, viewport, rng):
        config = DuckConfig(move_interval_ms=(1000.0, 1001.0), flight_speed=100.0)
        controller = DuckController(scheduler, bus, config, viewport, rng)
        duck = controller.spawn()
        duck.position = Point2D(x=100.0, y=100.0)
        duck.target = Point2D(x=150.0, y=100.0)

        # 100 px/s for 100 ms
        scheduler.tick(100)
        assert duck.position.x == pytest.approx(110.0)
        assert duck.position.y == pytest.approx(100.0)

        scheduler.tick(800)
        assert duck.position == duck.target

    def test_glide_retarget_keeps_position_until_ticker(self, scheduler, bus, viewport, rng):
        config = DuckConfig(move_interval_ms=(1000.0, 1001.0), flight_speed=1.0)
        controller = DuckController(scheduler, bus, config, viewport, rng)
        duck = controller.spawn()
        start = duck.position

        scheduler.tick(1001)

        distance = math.hypot(duck.position.x - start.x, duck.position.y - start.y)
        assert duck.target != start
        assert distance <= 1.01


# ============================================================================
# Shooting and removal
# ============================================================================

class TestShoot:

    def test_shoot_marks_duck_and_publishes_once(self, controller, bus, record):
        duck = controller.spawn()

        assert controller.shoot(duck) is True
        assert controller.shoot(duck) is False

        assert duck.state == DuckState.SHOT
        eliminated = [e for e in record if isinstance(e, DuckEliminated)]
        assert [e.duck_id for e in eliminated] == [duck.id]

    def test_shot_duck_stops_moving_and_flapping(self, controller, scheduler):
        duck = controller.spawn()
        scheduler.tick(176)
        controller.shoot(duck)
        position, phase = duck.position, duck.wing_phase

        scheduler.tick(499)

        assert duck.position == position
        assert duck.wing_phase == phase
        assert duck.move_timer is None
        assert duck.flap_timer is None

    def test_shot_duck_removed_after_delay(self, controller, scheduler, record):
        duck = controller.spawn()
        controller.shoot(duck)

        scheduler.tick(499)
        assert duck.state == DuckState.SHOT

        scheduler.tick(1)
        assert duck.state == DuckState.REMOVED
        assert [e.duck_id for e in record if isinstance(e, DuckRemoved)] == [duck.id]
        assert scheduler.pending(duck) == 0

    def test_removed_duck_cannot_be_shot(self, controller, scheduler):
        duck = controller.spawn()
        controller.shoot(duck)
        scheduler.tick(500)

        assert controller.shoot(duck) is False

    def test_destroy_cancels_everything(self, controller, scheduler):
        duck = controller.spawn()
        controller.destroy(duck)

        assert duck.state == DuckState.REMOVED
        assert scheduler.pending(duck) == 0
        scheduler.tick(5000)
        assert duck.wing_phase == WingPhase.STILL


# ============================================================================
# Hit testing and resize
# ============================================================================

class TestDuckGeometry:

    def test_contains_point(self):
        duck = Duck('duck-1', Point2D(x=10.0, y=20.0), Direction.LEFT, 64.0)
        assert duck.contains_point(Point2D(x=10.0, y=20.0))
        assert duck.contains_point(Point2D(x=74.0, y=84.0))
        assert not duck.contains_point(Point2D(x=75.0, y=50.0))

    def test_snapshot_reflects_state(self):
        duck = Duck('duck-1', Point2D(x=10.0, y=20.0), Direction.RIGHT, 64.0)
        duck.wing_phase = WingPhase.FLAPPING
        data = duck.snapshot()

        assert data.id == 'duck-1'
        assert data.direction == Direction.RIGHT
        assert data.wing_phase == WingPhase.FLAPPING
        assert data.is_active

    def test_rescale_proportional(self):
        duck = Duck('duck-1', Point2D(x=400.0, y=300.0), Direction.LEFT, 64.0)
        duck.rescale(Resolution(width=800, height=600), Resolution(width=400, height=300))
        assert duck.position == Point2D(x=200.0, y=150.0)
        assert duck.target == Point2D(x=200.0, y=150.0)

    def test_rescale_stays_inside_half_open_bounds(self):
        old = Resolution(width=3, height=3)
        new = Resolution(width=7, height=7)
        duck = Duck('duck-1', Point2D(x=math.nextafter(3.0, 0), y=2.9999999), Direction.LEFT, 1.0)

        duck.rescale(old, new)

        assert new.contains(duck.position)
