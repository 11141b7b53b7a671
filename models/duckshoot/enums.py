"""
Duck Shoot enumerations.

These enums define the lifecycle and animation states of the game's
entities and rounds.
"""

from enum import Enum


class DuckState(str, Enum):
    """Lifecycle of a duck.

    Attributes:
        ALIVE: Flying and clickable
        SHOT: Hit; showing the shot sprite before removal
        REMOVED: Detached from the session; never mutated again
    """
    ALIVE = "alive"
    SHOT = "shot"
    REMOVED = "removed"


class Direction(str, Enum):
    """Horizontal facing direction of a duck."""
    LEFT = "left"
    RIGHT = "right"


class WingPhase(str, Enum):
    """Wing animation frame of a duck."""
    STILL = "still"
    FLAPPING = "flapping"

    def toggled(self) -> 'WingPhase':
        return WingPhase.FLAPPING if self is WingPhase.STILL else WingPhase.STILL


class DogState(str, Enum):
    """States of the dog's intro sequence.

    Attributes:
        ENTERING: Walking in from off-screen (x < 0)
        WALKING: Fully visible, walking toward the center
        SURPRISED: Reached the center; startled pose
        LEAPING: Jumping into the grass
        GONE: Sequence finished; dog detached
    """
    ENTERING = "entering"
    WALKING = "walking"
    SURPRISED = "surprised"
    LEAPING = "leaping"
    GONE = "gone"


class Leg(str, Enum):
    """Which leg leads in the dog's walk cycle."""
    LEFT = "left"
    RIGHT = "right"

    def other(self) -> 'Leg':
        return Leg.RIGHT if self is Leg.LEFT else Leg.LEFT


class RoundState(str, Enum):
    """State of a round.

    Attributes:
        PENDING: Count drawn, ducks not yet spawned
        ACTIVE: Ducks on screen
        WON: Every duck eliminated
    """
    PENDING = "pending"
    ACTIVE = "active"
    WON = "won"
