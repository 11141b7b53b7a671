"""
Geometric skin for Duck Shoot - simple colored shapes.

This skin renders ducks as circles and the dog as a rectangle, useful
for debugging timing without any artwork in the way.
"""

import pygame

from models import DogData, DogState, DuckData, DuckState, WingPhase
from .base import GameSkin


class GeometricSkin(GameSkin):
    """Renders entities as plain shapes."""

    NAME = "geometric"
    DESCRIPTION = "Simple shapes for testing"

    STATE_COLORS = {
        DuckState.ALIVE: (255, 100, 100),   # Red - active target
        DuckState.SHOT: (150, 150, 150),    # Gray - shot
    }

    DOG_COLORS = {
        DogState.ENTERING: (200, 140, 80),
        DogState.WALKING: (200, 140, 80),
        DogState.SURPRISED: (255, 220, 80),
        DogState.LEAPING: (255, 160, 60),
    }

    def render_duck(self, duck: DuckData, screen: pygame.Surface) -> None:
        """Render a duck as a circle; flapping shrinks it slightly."""
        if duck.state == DuckState.REMOVED:
            return
        center = duck.get_bounds().center
        radius = int(duck.size / 2)
        if duck.wing_phase == WingPhase.FLAPPING:
            radius = max(radius - 4, 1)
        color = self.STATE_COLORS.get(duck.state, (255, 255, 255))

        pos = (int(center.x), int(center.y))
        pygame.draw.circle(screen, color, pos, radius)
        pygame.draw.circle(screen, (255, 255, 255), pos, radius, 2)

    def render_dog(self, dog: DogData, screen: pygame.Surface) -> None:
        """Render the dog as a rectangle colored by sequence state."""
        color = self.DOG_COLORS.get(dog.state)
        if color is None:
            return
        rect = pygame.Rect(int(dog.position.x), int(dog.position.y), int(dog.width), int(dog.height))
        pygame.draw.rect(screen, color, rect)
        pygame.draw.rect(screen, (255, 255, 255), rect, 2)
