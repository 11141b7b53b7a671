"""
Duck entity and its movement/animation controller.

Each duck carries two self-rescheduling timers on the session scheduler:
a retarget timer (new random destination every 0.5-2s) and a flap timer
(wing toggle every 100-300ms). Both are registered with the duck as
owner, so shooting or destroying the duck cancels them in one call.
"""

import itertools
import math
import random
from typing import Optional, Tuple

from duckshoot.events import DuckEliminated, DuckRemoved, EventBus
from duckshoot.logging import get_logger
from duckshoot.scheduler import Scheduler, TimerHandle
from models import Direction, DuckConfig, DuckData, DuckState, Point2D, Resolution, WingPhase

log = get_logger('duck')


def draw_interval(rng: random.Random, interval: Tuple[float, float]) -> float:
    """Draw a delay uniformly from the half-open range [low, high)."""
    low, high = interval
    return low + rng.random() * (high - low)


def random_position(rng: random.Random, bounds: Resolution) -> Point2D:
    """Uniformly random point in [0, width) x [0, height)."""
    return Point2D(x=rng.random() * bounds.width, y=rng.random() * bounds.height)


class Duck:
    """A live duck.

    Mutated only by its own scheduler callbacks and by
    `DuckController.shoot()`. Presentation code should read `snapshot()`.

    Attributes:
        id: Opaque identifier ("duck-<n>")
        position: Current top-left position
        target: Destination of the current glide (equals position when idle)
        direction: Facing direction
        wing_phase: Current wing frame
        state: Lifecycle state
        size: Edge length of the hit box
    """

    def __init__(self, duck_id: str, position: Point2D, direction: Direction, size: float):
        self.id = duck_id
        self.position = position
        self.target = position
        self.direction = direction
        self.wing_phase = WingPhase.STILL
        self.state = DuckState.ALIVE
        self.size = size
        self.move_timer: Optional[TimerHandle] = None
        self.flap_timer: Optional[TimerHandle] = None

    @property
    def is_alive(self) -> bool:
        return self.state == DuckState.ALIVE

    def snapshot(self) -> DuckData:
        return DuckData(
            id=self.id,
            position=self.position,
            direction=self.direction,
            wing_phase=self.wing_phase,
            state=self.state,
            size=self.size,
        )

    def contains_point(self, point: Point2D) -> bool:
        """Check if a point falls inside the duck's hit box."""
        return (self.position.x <= point.x <= self.position.x + self.size and
                self.position.y <= point.y <= self.position.y + self.size)

    def rescale(self, old: Resolution, new: Resolution) -> None:
        """Map position and target proportionally into a resized viewport."""
        sx = new.width / old.width
        sy = new.height / old.height
        self.position = _scaled(self.position, sx, sy, new)
        self.target = _scaled(self.target, sx, sy, new)

    def __repr__(self) -> str:
        return f"Duck({self.id}, {self.state.value})"


def _scaled(point: Point2D, sx: float, sy: float, bounds: Resolution) -> Point2D:
    # Float rounding must not push a point onto the open upper edge
    x = min(point.x * sx, math.nextafter(bounds.width, 0))
    y = min(point.y * sy, math.nextafter(bounds.height, 0))
    return Point2D(x=x, y=y)


class DuckController:
    """Spawns ducks and drives their movement, flapping and elimination.

    Attributes:
        bounds: Current viewport; new targets are drawn inside it

    Examples:
        >>> scheduler = Scheduler()
        >>> controller = DuckController(scheduler, EventBus(), DuckConfig(),
        ...                             Resolution(width=800, height=600))
        >>> duck = controller.spawn()
        >>> controller.shoot(duck)
        True
        >>> controller.shoot(duck)
        False
    """

    def __init__(
        self,
        scheduler: Scheduler,
        bus: EventBus,
        config: DuckConfig,
        bounds: Resolution,
        rng: Optional[random.Random] = None,
    ):
        self._scheduler = scheduler
        self._bus = bus
        self._config = config
        self._rng = rng or random.Random()
        self._ids = itertools.count(1)
        self.bounds = bounds

    @property
    def config(self) -> DuckConfig:
        return self._config

    def spawn(self, bounds: Optional[Resolution] = None) -> Duck:
        """Create a duck at a random point and start its timers.

        Args:
            bounds: Area to spawn in (defaults to the controller's viewport)

        Returns:
            The new, alive duck
        """
        area = bounds or self.bounds
        direction = self._rng.choice([Direction.LEFT, Direction.RIGHT])
        duck = Duck(
            duck_id=f"duck-{next(self._ids)}",
            position=random_position(self._rng, area),
            direction=direction,
            size=self._config.size,
        )
        self.schedule_next_move(duck)
        self.schedule_next_flap(duck)
        if self._config.glides:
            self._scheduler.add_ticker(duck, lambda dt: self._glide(duck, dt))
        log.debug("Spawned %s at %s", duck.id, duck.position)
        return duck

    def schedule_next_move(self, duck: Duck) -> Optional[TimerHandle]:
        """Arm the retarget timer; it re-arms itself while the duck is alive."""
        if not duck.is_alive:
            return None
        delay = draw_interval(self._rng, self._config.move_interval_ms)
        duck.move_timer = self._scheduler.call_later(duck, delay, lambda: self._move(duck))
        return duck.move_timer

    def schedule_next_flap(self, duck: Duck) -> Optional[TimerHandle]:
        """Arm the wing timer; it re-arms itself while the duck is alive."""
        if not duck.is_alive:
            return None
        delay = draw_interval(self._rng, self._config.flap_interval_ms)
        duck.flap_timer = self._scheduler.call_later(duck, delay, lambda: self._flap(duck))
        return duck.flap_timer

    def _move(self, duck: Duck) -> None:
        if not duck.is_alive:
            return
        new_target = random_position(self._rng, self.bounds)
        duck.direction = Direction.RIGHT if new_target.x > duck.position.x else Direction.LEFT
        duck.target = new_target
        if not self._config.glides:
            duck.position = new_target
        self.schedule_next_move(duck)

    def _flap(self, duck: Duck) -> None:
        if not duck.is_alive:
            return
        duck.wing_phase = duck.wing_phase.toggled()
        self.schedule_next_flap(duck)

    def _glide(self, duck: Duck, delta_ms: float) -> None:
        dx = duck.target.x - duck.position.x
        dy = duck.target.y - duck.position.y
        distance = math.hypot(dx, dy)
        if distance == 0:
            return
        travel = self._config.flight_speed * delta_ms / 1000.0
        if travel >= distance:
            duck.position = duck.target
        else:
            ratio = travel / distance
            duck.position = Point2D(
                x=duck.position.x + dx * ratio,
                y=duck.position.y + dy * ratio,
            )

    def shoot(self, duck: Duck) -> bool:
        """Eliminate a duck.

        Only valid while the duck is alive; a second call (or a call on a
        removed duck) does nothing.

        Args:
            duck: Duck that was clicked

        Returns:
            True if the duck was alive and is now shot
        """
        if not duck.is_alive:
            log.debug("Ignoring shot at %s (%s)", duck.id, duck.state.value)
            return False

        duck.state = DuckState.SHOT
        duck.target = duck.position
        self._scheduler.cancel_owner(duck)
        duck.move_timer = None
        duck.flap_timer = None

        self._bus.publish(DuckEliminated(duck_id=duck.id, time_ms=self._scheduler.now_ms))
        self._scheduler.call_later(duck, self._config.removal_delay_ms, lambda: self._remove(duck))
        return True

    def _remove(self, duck: Duck) -> None:
        self.destroy(duck)
        self._bus.publish(DuckRemoved(duck_id=duck.id, time_ms=self._scheduler.now_ms))

    def destroy(self, duck: Duck) -> None:
        """Detach a duck immediately, cancelling all of its callbacks."""
        duck.state = DuckState.REMOVED
        self._scheduler.cancel_owner(duck)
        duck.move_timer = None
        duck.flap_timer = None
