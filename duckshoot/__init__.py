"""
Duck Shoot core

Clock, event bus and logging shared by every part of the game. Nothing
in this package knows about pygame or about ducks; game code in
games/DuckShoot builds on it.
"""

from duckshoot.events import EventBus, GameEvent
from duckshoot.scheduler import Scheduler, TickerHandle, TimerHandle

__all__ = ['EventBus', 'GameEvent', 'Scheduler', 'TickerHandle', 'TimerHandle']
