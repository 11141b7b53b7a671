"""
Duck Shoot data models.

Immutable snapshots of entity state handed to the presentation layer.
The live entities are mutated by scheduler callbacks; skins and tests
only ever see these frozen copies.
"""

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from ..primitives import Point2D, Rectangle
from .enums import DogState, Direction, DuckState, Leg, RoundState, WingPhase


class DuckData(BaseModel):
    """Snapshot of a duck.

    Attributes:
        id: Opaque duck identifier
        position: Top-left corner in viewport pixels
        direction: Facing direction
        wing_phase: Current wing frame
        state: Lifecycle state
        size: Edge length of the duck's square hit box

    Examples:
        >>> duck = DuckData(
        ...     id='duck-1',
        ...     position=Point2D(x=100.0, y=200.0),
        ...     direction=Direction.RIGHT,
        ...     wing_phase=WingPhase.STILL,
        ...     state=DuckState.ALIVE,
        ...     size=64.0,
        ... )
        >>> duck.is_active
        True
        >>> duck.get_bounds().right
        164.0
    """
    id: str
    position: Point2D
    direction: Direction
    wing_phase: WingPhase
    state: DuckState
    size: float

    @field_validator('size')
    @classmethod
    def validate_size(cls, v: float) -> float:
        """Validate size is positive."""
        if v <= 0:
            raise ValueError(f'Size must be positive, got {v}')
        return v

    @computed_field
    @property
    def is_active(self) -> bool:
        """True if the duck can still be shot."""
        return self.state == DuckState.ALIVE

    def get_bounds(self) -> Rectangle:
        """Hit box anchored at the duck's top-left position."""
        return Rectangle(
            x=self.position.x,
            y=self.position.y,
            width=self.size,
            height=self.size,
        )

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return (f"DuckData({self.id}, pos={self.position}, {self.direction.value}, "
                f"{self.wing_phase.value}, {self.state.value})")


class DogData(BaseModel):
    """Snapshot of the intro dog."""
    position: Point2D
    state: DogState
    leg: Leg
    sniffing: bool
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)

    @computed_field
    @property
    def intro_active(self) -> bool:
        return self.state != DogState.GONE

    model_config = ConfigDict(frozen=True)


class RoundData(BaseModel):
    """Snapshot of the current round.

    Attributes:
        number: 1-based round number within the session
        duck_count: Number of ducks drawn for the round
        remaining: Ducks of this round still alive
        state: Round state
    """
    number: int = Field(..., ge=1)
    duck_count: int = Field(..., ge=1)
    remaining: int = Field(..., ge=0)
    state: RoundState

    @computed_field
    @property
    def eliminated(self) -> int:
        if self.state == RoundState.PENDING:
            return 0
        return self.duck_count - self.remaining

    model_config = ConfigDict(frozen=True)
