"""Shared pieces for Duck Shoot front ends."""

from .game_state import GameState

__all__ = ['GameState']
