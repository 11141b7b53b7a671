"""
Round controller for Duck Shoot.

Owns every duck, draws the duck count of each round, counts eliminations
and starts the next round once the current one is won. The win condition
is the `remaining` counter, never a query of what is on screen.
"""

import random
from typing import Dict, List, Optional, Set

from duckshoot.events import (
    DuckEliminated,
    DuckRemoved,
    DucksSpawned,
    EventBus,
    RoundStarted,
    RoundWon,
)
from duckshoot.logging import get_logger
from duckshoot.scheduler import Scheduler
from models import Point2D, Resolution, RoundConfig, RoundData, RoundState

from .duck import Duck, DuckController

log = get_logger('round')


class Round:
    """A single round.

    Attributes:
        number: 1-based round number
        duck_count: Ducks drawn for this round
        remaining: Ducks of this round still alive
        state: PENDING until the ducks spawn, then ACTIVE, then WON
        alive_ids: Ids of this round's ducks still alive
        restarted: True once the follow-up round has been started
    """

    def __init__(self, number: int, duck_count: int):
        self.number = number
        self.duck_count = duck_count
        self.remaining = 0
        self.state = RoundState.PENDING
        self.alive_ids: Set[str] = set()
        self.restarted = False

    def snapshot(self) -> RoundData:
        return RoundData(
            number=self.number,
            duck_count=self.duck_count,
            remaining=self.remaining,
            state=self.state,
        )

    def __repr__(self) -> str:
        return f"Round({self.number}, {self.remaining}/{self.duck_count}, {self.state.value})"


class RoundController:
    """Spawns rounds of ducks and detects wins.

    Attributes:
        current: The active round, or None before the first start
    """

    def __init__(
        self,
        scheduler: Scheduler,
        bus: EventBus,
        ducks: DuckController,
        config: RoundConfig,
        rng: Optional[random.Random] = None,
    ):
        self._scheduler = scheduler
        self._bus = bus
        self._ducks = ducks
        self._config = config
        self._rng = rng or random.Random()
        self._live: Dict[str, Duck] = {}
        self.current: Optional[Round] = None

        bus.subscribe(DuckEliminated, self._handle_eliminated)
        bus.subscribe(DuckRemoved, self._handle_removed)

    @property
    def ducks(self) -> List[Duck]:
        """Every attached duck (alive or shot), oldest first."""
        return list(self._live.values())

    @property
    def alive_ducks(self) -> List[Duck]:
        return [duck for duck in self._live.values() if duck.is_alive]

    def get_duck(self, duck_id: str) -> Optional[Duck]:
        return self._live.get(duck_id)

    def draw_count(self) -> int:
        """Uniform integer in [duck_count_min, duck_count_max]."""
        return self._rng.randint(self._config.duck_count_min, self._config.duck_count_max)

    def start_round(self, delay_ms: Optional[float] = None, hold: bool = False) -> Round:
        """Begin a new round.

        Args:
            delay_ms: Spawn delay override. Defaults to `intro_delay_ms` for
                the first round and `respawn_delay_ms` afterwards.
            hold: Keep the round PENDING until `release()` instead of
                arming a spawn timer. `delay_ms` is then only reported in
                `RoundStarted` as the expected wait.

        Returns:
            The new round (PENDING until its ducks spawn)
        """
        previous = self.current
        if previous is not None:
            # Drop a pending spawn or restart timer of the round being replaced
            self._scheduler.cancel_owner(previous)
            previous.restarted = True
            # Survivors of an abandoned round would never be counted
            for duck in self.alive_ducks:
                self._ducks.destroy(duck)
                del self._live[duck.id]

        number = previous.number + 1 if previous else 1
        new_round = Round(number=number, duck_count=self.draw_count())
        self.current = new_round

        if delay_ms is None:
            delay_ms = self._config.intro_delay_ms if number == 1 else self._config.respawn_delay_ms

        log.info("Round %d: %d ducks", number, new_round.duck_count)
        self._bus.publish(RoundStarted(
            round_number=number,
            duck_count=new_round.duck_count,
            spawn_delay_ms=delay_ms,
            time_ms=self._scheduler.now_ms,
        ))

        if hold:
            log.debug("Round %d held until release", number)
        elif delay_ms > 0:
            self._scheduler.call_later(new_round, delay_ms, lambda: self._spawn(new_round))
        else:
            self._spawn(new_round)
        return new_round

    def release(self) -> bool:
        """Spawn the ducks of a held (or still pending) round now.

        Returns:
            True if ducks were spawned
        """
        round_ = self.current
        if round_ is None or round_.state != RoundState.PENDING:
            return False
        self._scheduler.cancel_owner(round_)
        self._spawn(round_)
        return True

    def _spawn(self, round_: Round) -> None:
        if round_ is not self.current or round_.state != RoundState.PENDING:
            return

        for _ in range(round_.duck_count):
            duck = self._ducks.spawn()
            self._live[duck.id] = duck
            round_.alive_ids.add(duck.id)

        round_.remaining = len(round_.alive_ids)
        round_.state = RoundState.ACTIVE
        self._bus.publish(DucksSpawned(
            round_number=round_.number,
            duck_ids=sorted(round_.alive_ids),
            time_ms=self._scheduler.now_ms,
        ))

    def shoot(self, duck_id: str) -> bool:
        """Report a click on a duck.

        Returns:
            True if the click eliminated a live duck
        """
        duck = self._live.get(duck_id)
        if duck is None:
            log.debug("Click on unknown duck %s", duck_id)
            return False
        return self._ducks.shoot(duck)

    def duck_at(self, point: Point2D) -> Optional[Duck]:
        """Topmost alive duck under `point` (latest spawned wins)."""
        for duck in reversed(list(self._live.values())):
            if duck.is_alive and duck.contains_point(point):
                return duck
        return None

    def on_duck_eliminated(self, duck_id: str) -> None:
        """Count an elimination and detect the win.

        Ids that are not alive ducks of the current round are ignored, so
        `remaining` can never go negative or be decremented twice for the
        same duck.
        """
        round_ = self.current
        if round_ is None or round_.state != RoundState.ACTIVE:
            return
        if duck_id not in round_.alive_ids:
            return

        round_.alive_ids.discard(duck_id)
        round_.remaining = max(round_.remaining - 1, 0)
        log.info("Duck shot, %d more to go.", round_.remaining)

        if round_.remaining == 0:
            self._win(round_)

    def _win(self, round_: Round) -> None:
        round_.state = RoundState.WON
        event = RoundWon(round_number=round_.number, time_ms=self._scheduler.now_ms)
        log.info(event.message)
        self._bus.publish(event)

        if self._config.auto_restart:
            self._scheduler.call_later(
                round_, self._config.restart_delay_ms, lambda: self._restart(round_)
            )

    def dismiss_win(self) -> bool:
        """Skip the rest of the win notification and start the next round.

        Returns:
            True if a new round was started
        """
        round_ = self.current
        if round_ is None or round_.state != RoundState.WON:
            return False
        return self._restart(round_)

    def _restart(self, round_: Round) -> bool:
        if round_ is not self.current or round_.restarted:
            return False
        round_.restarted = True
        self.start_round()
        return True

    def _handle_eliminated(self, event: DuckEliminated) -> None:
        self.on_duck_eliminated(event.duck_id)

    def _handle_removed(self, event: DuckRemoved) -> None:
        self._live.pop(event.duck_id, None)

    def resize(self, old: Resolution, new: Resolution) -> None:
        """Rescale every attached duck into a resized viewport."""
        self._ducks.bounds = new
        for duck in self._live.values():
            duck.rescale(old, new)

    def teardown(self) -> None:
        """Destroy every duck and cancel round timers."""
        for duck in list(self._live.values()):
            self._ducks.destroy(duck)
        self._live.clear()
        if self.current is not None:
            self._scheduler.cancel_owner(self.current)
        self._bus.unsubscribe(DuckEliminated, self._handle_eliminated)
        self._bus.unsubscribe(DuckRemoved, self._handle_removed)
