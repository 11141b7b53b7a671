"""
Base class for Duck Shoot skins.

A skin provides the visual representation of the game without affecting
game logic. Skins only ever see immutable snapshots (`DuckData`,
`DogData`, `RoundData`) and map them to pixels.

Games select a skin via the --skin CLI argument.
"""

from abc import ABC, abstractmethod
from typing import Optional

import pygame

from models import DogData, DogState, DuckData, RoundData

from ... import config
from .text import get_font


class GameSkin(ABC):
    """Base class for game skins.

    Subclasses implement render_duck() and render_dog(); the background
    and HUD have simple defaults.
    """

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    def render_background(self, screen: pygame.Surface) -> None:
        """Fill the sky."""
        screen.fill(config.Colors.BACKGROUND)

    def render_foreground(self, screen: pygame.Surface) -> None:
        """Draw anything that covers the entities (grass line by default)."""
        pass

    @abstractmethod
    def render_duck(self, duck: DuckData, screen: pygame.Surface) -> None:
        """Render a duck.

        Args:
            duck: Snapshot of the duck to render
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_dog(self, dog: DogData, screen: pygame.Surface) -> None:
        """Render the intro dog.

        Args:
            dog: Snapshot of the dog to render
            screen: Pygame surface to draw on
        """
        pass

    def render_hud(self, round_data: Optional[RoundData], screen: pygame.Surface) -> None:
        """Render round number and ducks remaining in the top-left corner."""
        if round_data is None or not config.SHOW_HUD:
            return
        font = get_font(config.Fonts.SMALL)
        label = f"Round {round_data.number}   Ducks {round_data.remaining}/{round_data.duck_count}"
        screen.blit(font.render(label, True, config.Colors.HUD_TEXT), (12, 10))

    def render_hitbox(self, duck: DuckData, screen: pygame.Surface) -> None:
        """Outline the duck's hit box (debug aid)."""
        bounds = duck.get_bounds()
        rect = pygame.Rect(int(bounds.x), int(bounds.y), int(bounds.width), int(bounds.height))
        pygame.draw.rect(screen, config.Colors.OUTLINE, rect, 1)

    def render_scene(self, snapshot, screen: pygame.Surface) -> None:
        """Render a full frame from a session snapshot.

        The leaping dog disappears behind the foreground; every other
        entity is drawn on top of it.

        Args:
            snapshot: SessionSnapshot for the frame
            screen: Pygame surface to draw on
        """
        self.render_background(screen)

        dog = snapshot.dog
        if dog is not None and dog.state == DogState.LEAPING:
            self.render_dog(dog, screen)
        self.render_foreground(screen)
        if dog is not None and dog.state != DogState.LEAPING:
            self.render_dog(dog, screen)

        for duck in snapshot.ducks:
            self.render_duck(duck, screen)
            if config.SHOW_HITBOXES:
                self.render_hitbox(duck, screen)

        self.render_hud(snapshot.round, screen)
