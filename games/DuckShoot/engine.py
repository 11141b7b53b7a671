"""
Main game engine for Duck Shoot.

This module provides the pygame window, the frame loop and the glue
between pygame events and the game session: clicks become shots, window
resizes become viewport notifications and the frame delta drives the
session scheduler.
"""

import random
from typing import List, Optional

import pygame

from duckshoot.events import EventBus
from duckshoot.logging import get_logger
from games.common.game_state import GameState
from models import GameConfig, Point2D, Resolution, RoundState

from . import config
from .game.audio import RoundAudio
from .game.notification import WinBanner
from .game.session import GameSession
from .game.skins import get_skin
from .game.skins.text import get_font

log = get_logger('engine')


class GameEngine:
    """Main game engine managing the game loop and pygame state.

    Attributes:
        screen: Pygame display surface
        clock: Pygame clock for frame timing
        running: Whether the game loop should continue
        paused: While True the session clock does not advance
        session: The game session being played
        skin: Active skin
        audio: Round start audio collaborator
        banner: Win notification overlay

    Examples:
        >>> engine = GameEngine()
        >>> engine.run()
    """

    def __init__(
        self,
        game_config: Optional[GameConfig] = None,
        width: int = config.SCREEN_WIDTH,
        height: int = config.SCREEN_HEIGHT,
        fullscreen: bool = False,
        skin: str = "classic",
        seed: Optional[int] = None,
        audio_enabled: bool = True,
    ):
        """Initialize pygame, the window and a fresh game session."""
        self.game_config = game_config or GameConfig()

        pygame.init()

        flags = pygame.RESIZABLE
        if fullscreen:
            flags |= pygame.FULLSCREEN
        self.display_flags = flags
        self.screen = pygame.display.set_mode((width, height), flags)
        pygame.display.set_caption(config.WINDOW_TITLE)

        self.clock = pygame.time.Clock()
        self.running = True
        self.paused = False

        self.skin = get_skin(skin)

        audio_config = self.game_config.audio
        if not audio_enabled:
            audio_config = audio_config.model_copy(update={'enabled': False})

        # Collaborators subscribe before the session publishes its first round
        self.bus = EventBus()
        self.audio = RoundAudio(self.bus, audio_config)
        self.banner = WinBanner(self.bus)

        viewport = Resolution(width=self.screen.get_width(), height=self.screen.get_height())
        self.session = GameSession.create(
            viewport,
            self.game_config,
            rng=random.Random(seed),
            bus=self.bus,
        )
        log.info("Engine started: %s, skin=%s", viewport, self.skin.NAME)

    @property
    def state(self) -> GameState:
        """Platform-level game state."""
        if self.paused:
            return GameState.PAUSED
        current = self.session.round()
        if current is not None and current.state == RoundState.WON:
            return GameState.WON
        return GameState.PLAYING

    def handle_events(self) -> None:
        """Process pending pygame events."""
        self.handle_pygame_events(pygame.event.get())

    def handle_click(self, position: Point2D) -> Optional[str]:
        """Route a click to the banner or the session.

        Returns:
            Id of the duck that was shot, if any
        """
        if self.paused:
            return None
        if self.banner.visible:
            self.session.dismiss_win()
            return None
        return self.session.click_at(position)

    def handle_pygame_events(self, events: List[pygame.event.Event]) -> None:
        for event in events:
            if event.type == pygame.QUIT:
                self.running = False
                return
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                    return
                if event.key == pygame.K_p:
                    self.paused = not self.paused
                    log.info("Paused" if self.paused else "Resumed")
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.handle_click(Point2D(x=float(event.pos[0]), y=float(event.pos[1])))
            elif event.type == pygame.VIDEORESIZE:
                self.handle_resize(event.w, event.h)

    def handle_resize(self, width: int, height: int) -> None:
        """Pass a window resize on to the session."""
        width = max(width, config.MIN_WIDTH)
        height = max(height, config.MIN_HEIGHT)
        if (width, height) != self.screen.get_size():
            self.screen = pygame.display.set_mode((width, height), self.display_flags)
        self.session.resize(width, height)

    def update(self, dt_ms: float) -> None:
        """Advance the session unless paused.

        Args:
            dt_ms: Milliseconds since the previous frame
        """
        if not self.paused:
            self.session.tick(dt_ms)

    def render(self) -> None:
        """Render the current frame."""
        self.skin.render_scene(self.session.snapshot(), self.screen)
        self.banner.render(self.screen)
        if self.paused:
            label = get_font(config.Fonts.LARGE).render("PAUSED", True, config.Colors.HUD_TEXT)
            rect = label.get_rect(center=self.screen.get_rect().center)
            self.screen.blit(label, rect)
        pygame.display.flip()

    def run(self) -> None:
        """Run the main game loop until the window is closed."""
        while self.running:
            dt_ms = self.clock.tick(config.FPS)
            self.handle_events()
            self.update(dt_ms)
            self.render()

    def quit(self) -> None:
        """Tear down the session and shut down pygame."""
        self.session.teardown()
        pygame.quit()
