"""
Non-blocking win notification.

Shows "Winner, winner! Duck dinner." over the game while the next round
is pending. It never halts the loop; it simply listens for `RoundWon`
to appear and `RoundStarted` to disappear.
"""

from typing import Optional

import pygame

from duckshoot.events import EventBus, RoundStarted, RoundWon

from .. import config
from .skins.text import get_font


class WinBanner:
    """Overlay shown between a win and the next round.

    Attributes:
        message: Text currently shown, or None when hidden
        round_number: Round the banner celebrates
    """

    def __init__(self, bus: EventBus):
        self.message: Optional[str] = None
        self.round_number: Optional[int] = None
        bus.subscribe(RoundWon, self._on_round_won)
        bus.subscribe(RoundStarted, self._on_round_started)

    @property
    def visible(self) -> bool:
        return self.message is not None

    def _on_round_won(self, event: RoundWon) -> None:
        self.message = event.message
        self.round_number = event.round_number

    def _on_round_started(self, event: RoundStarted) -> None:
        self.hide()

    def hide(self) -> None:
        self.message = None
        self.round_number = None

    def render(self, screen: pygame.Surface) -> None:
        """Draw the banner centered on screen (no-op while hidden)."""
        if self.message is None:
            return

        font = get_font(config.Fonts.LARGE)
        text = font.render(self.message, True, config.Colors.BANNER_TEXT)
        hint = get_font(config.Fonts.SMALL).render("click to continue", True, config.Colors.BANNER_TEXT)

        width = max(text.get_width(), hint.get_width()) + 2 * config.BANNER_PADDING
        height = text.get_height() + hint.get_height() + 2 * config.BANNER_PADDING
        panel = pygame.Rect(0, 0, width, height)
        panel.center = screen.get_rect().center

        overlay = pygame.Surface(panel.size, pygame.SRCALPHA)
        overlay.fill(config.Colors.BANNER_BACKGROUND)
        screen.blit(overlay, panel.topleft)
        screen.blit(text, (panel.centerx - text.get_width() // 2, panel.y + config.BANNER_PADDING))
        screen.blit(hint, (panel.centerx - hint.get_width() // 2,
                           panel.y + config.BANNER_PADDING + text.get_height()))
