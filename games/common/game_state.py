"""Platform-level game state shared by Duck Shoot front ends.

The engine reports one of these states; finer-grained state lives in
the round controller (`RoundState`) and the dog sequencer (`DogState`).
"""
from enum import Enum


class GameState(Enum):
    """Coarse state of a running game.

    States:
        PLAYING: Ducks and/or the intro are running
        PAUSED: Session clock frozen by the player
        WON: A round was just won; the win notification is showing
    """
    PLAYING = "playing"
    PAUSED = "paused"
    WON = "won"
