"""Duck Shoot gameplay: entities, controllers and the game session."""

from .dog import Dog, DogSequencer, DogSequenceError, DOG_TRANSITIONS
from .duck import Duck, DuckController
from .round import Round, RoundController
from .session import GameSession, SessionClosedError, SessionSnapshot

__all__ = [
    'Dog',
    'DogSequencer',
    'DogSequenceError',
    'DOG_TRANSITIONS',
    'Duck',
    'DuckController',
    'Round',
    'RoundController',
    'GameSession',
    'SessionClosedError',
    'SessionSnapshot',
]
