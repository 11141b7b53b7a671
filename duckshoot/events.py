"""
Duck Shoot Event Types

Defines the events that flow between the game core and its collaborators
(audio, notification overlay, logging) and the bus that delivers them.

Events are immutable pydantic models. The bus dispatches synchronously:
`publish()` runs every subscriber to completion before returning, which
keeps the single-threaded run-to-completion ordering of the scheduler.
"""

from typing import Callable, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field


class GameEvent(BaseModel):
    """Base class for all game events.

    Attributes:
        time_ms: Scheduler time at which the event was raised
    """
    time_ms: float = Field(default=0.0, ge=0, description="Scheduler time when raised")

    model_config = ConfigDict(frozen=True)


class RoundStarted(GameEvent):
    """A new round began; ducks will spawn after `spawn_delay_ms`."""
    round_number: int = Field(..., ge=1)
    duck_count: int = Field(..., ge=1)
    spawn_delay_ms: float = Field(default=0.0, ge=0)


class DucksSpawned(GameEvent):
    """The ducks of a round have been placed on screen."""
    round_number: int = Field(..., ge=1)
    duck_ids: List[str]


class DuckEliminated(GameEvent):
    """A duck was shot. Published exactly once per duck."""
    duck_id: str


class DuckRemoved(GameEvent):
    """A shot duck finished its fall and was detached."""
    duck_id: str


class RoundWon(GameEvent):
    """Every duck of the round has been eliminated."""
    round_number: int = Field(..., ge=1)
    message: str = "Winner, winner! Duck dinner."


class DogIntroFinished(GameEvent):
    """The dog completed its intro sequence and left the scene."""


E = TypeVar('E', bound=GameEvent)
Handler = Callable[[GameEvent], None]


class EventBus:
    """Synchronous publish/subscribe bus keyed by event class.

    Subscribers registered for a base class also receive subclasses.

    Examples:
        >>> bus = EventBus()
        >>> seen = []
        >>> bus.subscribe(DuckEliminated, seen.append)
        >>> bus.publish(DuckEliminated(duck_id='duck-1'))
        >>> [e.duck_id for e in seen]
        ['duck-1']
    """

    def __init__(self):
        self._subscribers: Dict[Type[GameEvent], List[Handler]] = {}

    def subscribe(self, event_type: Type[E], handler: Callable[[E], None]) -> None:
        self._subscribers.setdefault(event_type, []).append(handler)

    def unsubscribe(self, event_type: Type[GameEvent], handler: Handler) -> bool:
        handlers = self._subscribers.get(event_type)
        if not handlers or handler not in handlers:
            return False
        handlers.remove(handler)
        return True

    def publish(self, event: GameEvent) -> None:
        """Deliver `event` to every matching subscriber, in subscription order."""
        for event_type in type(event).__mro__:
            for handler in list(self._subscribers.get(event_type, [])):
                handler(event)
            if event_type is GameEvent:
                break

    def subscriber_count(self, event_type: Optional[Type[GameEvent]] = None) -> int:
        if event_type is None:
            return sum(len(h) for h in self._subscribers.values())
        return len(self._subscribers.get(event_type, []))

    def clear(self) -> None:
        self._subscribers.clear()
