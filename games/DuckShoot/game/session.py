"""
Game session for Duck Shoot.

The session is the only holder of game state: scheduler, event bus,
ducks, dog and rounds all hang off it, and `teardown()` releases every
scheduled callback in one step.

Usage:
    session = GameSession.create(Resolution(width=1280, height=720), config)

    # Game loop
    while running:
        session.tick(clock.tick(60))
        for click in clicks:
            session.click_at(click)
        render(session.snapshot())

    session.teardown()
"""

import random
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from duckshoot.events import DogIntroFinished, EventBus
from duckshoot.logging import get_logger
from duckshoot.scheduler import Scheduler
from models import DogData, DuckData, GameConfig, Point2D, Resolution, RoundData

from .dog import Dog, DogSequencer
from .duck import Duck, DuckController
from .round import Round, RoundController

log = get_logger('session')


class SessionClosedError(RuntimeError):
    """Raised when a torn-down session is used."""


class SessionSnapshot(BaseModel):
    """Everything a renderer needs for one frame."""
    time_ms: float
    viewport: Resolution
    ducks: List[DuckData]
    dog: Optional[DogData] = None
    round: Optional[RoundData] = None

    model_config = ConfigDict(frozen=True)


class GameSession:
    """Owns and wires every game component for one play session.

    Attributes:
        scheduler: Session clock
        bus: Session event bus
        config: Mode configuration
        viewport: Current viewport size
    """

    def __init__(
        self,
        viewport: Resolution,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
        bus: Optional[EventBus] = None,
        scheduler: Optional[Scheduler] = None,
    ):
        self.config = config or GameConfig()
        self.viewport = viewport
        self.scheduler = scheduler or Scheduler()
        self.bus = bus or EventBus()
        self._rng = rng or random.Random()
        self._closed = False

        self._duck_controller = DuckController(
            self.scheduler, self.bus, self.config.duck, viewport, self._rng
        )
        self._rounds = RoundController(
            self.scheduler, self.bus, self._duck_controller, self.config.round, self._rng
        )
        self._dog = DogSequencer(
            self.scheduler, self.bus, self.config.dog, viewport, self._rng
        )

    @classmethod
    def create(
        cls,
        viewport: Resolution,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
        bus: Optional[EventBus] = None,
    ) -> 'GameSession':
        """Build a session and start the dog intro and the first round.

        Collaborators that need to hear the first `RoundStarted` must
        subscribe to `bus` before calling this.
        """
        session = cls(viewport, config, rng=rng, bus=bus)
        session.start()
        return session

    def start(self) -> None:
        """Start the dog intro and the first round.

        With the dog enabled the first round is held until the intro has
        finished, however long the walk takes in this viewport.
        """
        self._check_open()
        if self.config.dog.enabled:
            self.bus.subscribe(DogIntroFinished, self._on_intro_finished)
            self._dog.start()
            self._rounds.start_round(delay_ms=self._dog.intro_duration_ms, hold=True)
        else:
            self._rounds.start_round()
        log.info("Session started (%s, %s)", self.config.name, self.viewport)

    def _on_intro_finished(self, event: DogIntroFinished) -> None:
        self.bus.unsubscribe(DogIntroFinished, self._on_intro_finished)
        self._rounds.release()

    def _check_open(self) -> None:
        if self._closed:
            raise SessionClosedError("Game session has been torn down")

    @property
    def closed(self) -> bool:
        return self._closed

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------

    def tick(self, delta_ms: float) -> None:
        """Advance the session clock."""
        self._check_open()
        self.scheduler.tick(delta_ms)

    def click(self, duck_id: str) -> bool:
        """Report a click on the duck with the given id."""
        self._check_open()
        return self._rounds.shoot(duck_id)

    def click_at(self, point: Point2D) -> Optional[str]:
        """Report a click at a viewport position.

        Returns:
            Id of the duck that was shot, or None for a miss
        """
        self._check_open()
        duck = self._rounds.duck_at(point)
        if duck is None:
            log.debug("Click at %s hit nothing", point)
            return None
        return duck.id if self._rounds.shoot(duck.id) else None

    def resize(self, width: int, height: int) -> None:
        """React to a viewport resize notification."""
        self._check_open()
        new = Resolution(width=width, height=height)
        if new == self.viewport:
            return
        old = self.viewport
        self.viewport = new
        self._rounds.resize(old, new)
        self._dog.resize(new)
        log.debug("Viewport resized %s -> %s", old, new)

    def dismiss_win(self) -> bool:
        """Dismiss the win notification and start the next round now."""
        self._check_open()
        return self._rounds.dismiss_win()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def ducks(self) -> List[Duck]:
        return self._rounds.ducks

    def alive_ducks(self) -> List[Duck]:
        return self._rounds.alive_ducks

    def dog(self) -> Optional[Dog]:
        return self._dog.dog

    def round(self) -> Optional[Round]:
        return self._rounds.current

    @property
    def dog_sequencer(self) -> DogSequencer:
        return self._dog

    @property
    def rounds(self) -> RoundController:
        return self._rounds

    def entities(self) -> List[object]:
        """Every attached entity: ducks, then the dog while it is present."""
        entities: List[object] = list(self._rounds.ducks)
        if self._dog.dog is not None:
            entities.append(self._dog.dog)
        return entities

    def snapshot(self) -> SessionSnapshot:
        dog = self._dog.dog
        current = self._rounds.current
        return SessionSnapshot(
            time_ms=self.scheduler.now_ms,
            viewport=self.viewport,
            ducks=[duck.snapshot() for duck in self._rounds.ducks],
            dog=dog.snapshot() if dog is not None else None,
            round=current.snapshot() if current is not None else None,
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def teardown(self) -> None:
        """Destroy all entities and cancel every scheduled callback."""
        if self._closed:
            return
        self._rounds.teardown()
        self._dog.stop()
        self.bus.unsubscribe(DogIntroFinished, self._on_intro_finished)
        leftover = self.scheduler.clear()
        if leftover:
            log.debug("Teardown cancelled %d stray callbacks", leftover)
        self._closed = True
        log.info("Session torn down")
