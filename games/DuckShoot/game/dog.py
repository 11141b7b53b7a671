"""
Dog intro sequence.

The dog walks in from the left edge, sniffing as it goes, stops at the
center of the screen, looks surprised, leaps into the grass and is gone.
The sequence is an explicit state machine driven by scheduler timers
owned by the dog; reaching GONE cancels everything the dog registered.

    ENTERING -> WALKING -> SURPRISED -> LEAPING -> GONE

ENTERING may also go straight to SURPRISED. That only happens when the
viewport is narrower than the dog, which puts the center target off-screen.
"""

import math
import random
from typing import Dict, FrozenSet, List, Optional

from duckshoot.events import DogIntroFinished, EventBus
from duckshoot.logging import get_logger
from duckshoot.scheduler import Scheduler
from models import DogConfig, DogData, DogState, Leg, Point2D, Resolution

from .duck import draw_interval

log = get_logger('dog')


DOG_TRANSITIONS: Dict[DogState, FrozenSet[DogState]] = {
    DogState.ENTERING: frozenset({DogState.WALKING, DogState.SURPRISED}),
    DogState.WALKING: frozenset({DogState.SURPRISED}),
    DogState.SURPRISED: frozenset({DogState.LEAPING}),
    DogState.LEAPING: frozenset({DogState.GONE}),
    DogState.GONE: frozenset(),
}


class DogSequenceError(RuntimeError):
    """Raised on a transition the intro state machine does not allow."""


class Dog:
    """The intro dog.

    Attributes:
        x: Left edge in viewport pixels (negative while off-screen)
        y: Top edge in viewport pixels
        state: Current sequence state
        leg: Leading leg of the walk cycle
        sniffing: Cosmetic sniff pose flag
    """

    def __init__(self, x: float, y: float, width: float, height: float):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.state = DogState.ENTERING
        self.leg = Leg.LEFT
        self.sniffing = False

    @property
    def intro_active(self) -> bool:
        return self.state != DogState.GONE

    def snapshot(self) -> DogData:
        return DogData(
            position=Point2D(x=self.x, y=self.y),
            state=self.state,
            leg=self.leg,
            sniffing=self.sniffing,
            width=self.width,
            height=self.height,
        )

    def __repr__(self) -> str:
        return f"Dog(x={self.x:.1f}, {self.state.value})"


class DogSequencer:
    """Runs the one-shot dog intro on a scheduler.

    Attributes:
        history: Every state the dog has entered, in order

    Examples:
        >>> scheduler = Scheduler()
        >>> sequencer = DogSequencer(scheduler, EventBus(), DogConfig(),
        ...                          Resolution(width=400, height=300))
        >>> dog = sequencer.start()
        >>> dog.x
        -120.0
        >>> scheduler.tick(10_000)
        >>> sequencer.dog is None
        True
    """

    def __init__(
        self,
        scheduler: Scheduler,
        bus: EventBus,
        config: DogConfig,
        viewport: Resolution,
        rng: Optional[random.Random] = None,
    ):
        self._scheduler = scheduler
        self._bus = bus
        self._config = config
        self._viewport = viewport
        self._rng = rng or random.Random()
        self._dog: Optional[Dog] = None
        self._started = False
        self.history: List[DogState] = []

    @property
    def dog(self) -> Optional[Dog]:
        """The live dog, or None before start and after it is gone."""
        return self._dog

    @property
    def finished(self) -> bool:
        return self._started and self._dog is None

    @property
    def center_target(self) -> float:
        """Left-edge x at which the dog stands centered in the viewport."""
        return (self._viewport.width - self._config.width) / 2

    @property
    def intro_duration_ms(self) -> float:
        """Length of a full intro from `start()` in the current viewport."""
        distance = self.center_target + self._config.width
        steps = max(math.ceil(distance / self._config.step), 1)
        return (steps * self._config.step_interval_ms
                + self._config.surprise_ms + self._config.leap_ms)

    def ground_y(self, viewport: Optional[Resolution] = None) -> float:
        """Vertical position for the given viewport height."""
        viewport = viewport or self._viewport
        if viewport.height < self._config.height_breakpoint:
            offset = self._config.ground_offset_small
        else:
            offset = self._config.ground_offset_large
        return viewport.height - offset

    def start(self) -> Dog:
        """Place the dog just off the left edge and start walking.

        Raises:
            DogSequenceError: If the intro already ran in this session
        """
        if self._started:
            raise DogSequenceError("Dog intro runs once per session")
        self._started = True

        dog = Dog(
            x=-self._config.width,
            y=self.ground_y(),
            width=self._config.width,
            height=self._config.height,
        )
        self._dog = dog
        self.history.append(dog.state)
        self._scheduler.call_later(dog, self._config.step_interval_ms, lambda: self._step(dog))
        self._schedule_sniff(dog)
        log.debug("Dog intro started at x=%.1f", dog.x)
        return dog

    def _transition(self, dog: Dog, new_state: DogState) -> None:
        if new_state not in DOG_TRANSITIONS[dog.state]:
            raise DogSequenceError(
                f"Illegal dog transition {dog.state.value} -> {new_state.value}"
            )
        log.debug("Dog %s -> %s", dog.state.value, new_state.value)
        dog.state = new_state
        self.history.append(new_state)

    def _step(self, dog: Dog) -> None:
        dog.x += self._config.step
        dog.leg = dog.leg.other()

        if dog.state == DogState.ENTERING and dog.x >= 0:
            self._transition(dog, DogState.WALKING)

        if dog.x >= self.center_target:
            self._surprise(dog)
            return

        self._scheduler.call_later(dog, self._config.step_interval_ms, lambda: self._step(dog))

    def _schedule_sniff(self, dog: Dog) -> None:
        delay = draw_interval(self._rng, self._config.sniff_interval_ms)
        self._scheduler.call_later(dog, delay, lambda: self._toggle_sniff(dog))

    def _toggle_sniff(self, dog: Dog) -> None:
        dog.sniffing = not dog.sniffing
        self._schedule_sniff(dog)

    def _surprise(self, dog: Dog) -> None:
        self._transition(dog, DogState.SURPRISED)
        # Walking and sniffing stop here
        self._scheduler.cancel_owner(dog)
        dog.sniffing = False
        self._scheduler.call_later(dog, self._config.surprise_ms, lambda: self._leap(dog))

    def _leap(self, dog: Dog) -> None:
        self._transition(dog, DogState.LEAPING)
        self._scheduler.call_later(dog, self._config.leap_ms, lambda: self._finish(dog))

    def _finish(self, dog: Dog) -> None:
        self._transition(dog, DogState.GONE)
        self._detach(dog)
        self._bus.publish(DogIntroFinished(time_ms=self._scheduler.now_ms))
        log.info("Dog intro finished")

    def _detach(self, dog: Dog) -> None:
        self._scheduler.cancel_owner(dog)
        if self._dog is dog:
            self._dog = None

    def resize(self, viewport: Resolution) -> None:
        """Adopt a new viewport and re-seat the dog on the ground line."""
        self._viewport = viewport
        if self._dog is not None:
            self._dog.y = self.ground_y(viewport)

    def stop(self) -> None:
        """Abort the intro, cancelling all of the dog's callbacks."""
        if self._dog is not None:
            self._detach(self._dog)
