"""
Classic skin for Duck Shoot - hand-drawn cartoon ducks and dog.

Everything is drawn with pygame primitives so the game runs without
any image assets. Ducks face their flight direction and alternate wing
frames; the dog shows its leg cycle, sniffing, surprised and leaping
poses.
"""

import pygame

from models import Direction, DogData, DogState, DuckData, DuckState, Leg, WingPhase

from ... import config
from .base import GameSkin
from .text import get_font


class ClassicSkin(GameSkin):
    """Cartoon skin with sky, grass and animated sprites."""

    NAME = "classic"
    DESCRIPTION = "Cartoon ducks and dog drawn with pygame primitives"

    def render_foreground(self, screen: pygame.Surface) -> None:
        """Grass strip along the bottom of the screen."""
        width, height = screen.get_size()
        grass_top = int(height * (1 - config.GRASS_HEIGHT_RATIO))
        pygame.draw.rect(screen, config.Colors.GRASS, (0, grass_top, width, height - grass_top))
        pygame.draw.rect(screen, config.Colors.DIRT, (0, height - 12, width, 12))

    def render_duck(self, duck: DuckData, screen: pygame.Surface) -> None:
        """Render a duck facing its direction of flight."""
        if duck.state == DuckState.REMOVED:
            return

        size = duck.size
        x, y = duck.position.x, duck.position.y
        facing_right = duck.direction == Direction.RIGHT
        shot = duck.state == DuckState.SHOT

        body_color = config.Colors.DUCK_SHOT if shot else config.Colors.DUCK_BODY
        body = pygame.Rect(int(x + size * 0.1), int(y + size * 0.4), int(size * 0.7), int(size * 0.4))
        pygame.draw.ellipse(screen, body_color, body)
        pygame.draw.ellipse(screen, config.Colors.OUTLINE, body, 1)

        head_x = x + size * (0.8 if facing_right else 0.2)
        head_y = y + size * 0.35
        head_radius = max(int(size * 0.15), 2)
        pygame.draw.circle(screen, config.Colors.DUCK_HEAD, (int(head_x), int(head_y)), head_radius)

        beak_dir = 1 if facing_right else -1
        beak = [
            (head_x + beak_dir * head_radius * 0.8, head_y - head_radius * 0.3),
            (head_x + beak_dir * head_radius * 2.0, head_y),
            (head_x + beak_dir * head_radius * 0.8, head_y + head_radius * 0.3),
        ]
        pygame.draw.polygon(screen, config.Colors.DUCK_BEAK, beak)

        eye = (int(head_x + beak_dir * head_radius * 0.3), int(head_y - head_radius * 0.3))
        if shot:
            self._draw_cross(screen, eye, max(head_radius // 3, 2))
        else:
            pygame.draw.circle(screen, config.Colors.OUTLINE, eye, max(head_radius // 4, 1))

        if not shot:
            self._draw_wing(screen, body, duck.wing_phase, size)

    def _draw_wing(self, screen: pygame.Surface, body: pygame.Rect, phase: WingPhase, size: float) -> None:
        root_left = (body.centerx - size * 0.15, body.top + size * 0.1)
        root_right = (body.centerx + size * 0.15, body.top + size * 0.1)
        if phase == WingPhase.FLAPPING:
            tip = (body.centerx, body.top - size * 0.35)
        else:
            tip = (body.centerx, body.bottom + size * 0.1)
        pygame.draw.polygon(screen, config.Colors.DUCK_WING, [root_left, tip, root_right])

    def _draw_cross(self, screen: pygame.Surface, center, radius: int) -> None:
        cx, cy = center
        pygame.draw.line(screen, config.Colors.OUTLINE, (cx - radius, cy - radius), (cx + radius, cy + radius), 2)
        pygame.draw.line(screen, config.Colors.OUTLINE, (cx - radius, cy + radius), (cx + radius, cy - radius), 2)

    def render_dog(self, dog: DogData, screen: pygame.Surface) -> None:
        """Render the dog in its current pose."""
        if dog.state == DogState.GONE:
            return

        w, h = dog.width, dog.height
        x, y = dog.position.x, dog.position.y
        if dog.state == DogState.LEAPING:
            y -= h * 0.6

        body = pygame.Rect(int(x + w * 0.1), int(y + h * 0.35), int(w * 0.65), int(h * 0.4))
        pygame.draw.ellipse(screen, config.Colors.DOG, body)
        pygame.draw.circle(screen, config.Colors.DOG_SPOT, (int(body.centerx), int(body.centery)), int(h * 0.1))

        head_drop = h * 0.2 if dog.sniffing else 0.0
        head = pygame.Rect(int(x + w * 0.62), int(y + h * 0.1 + head_drop), int(w * 0.35), int(h * 0.35))
        pygame.draw.ellipse(screen, config.Colors.DOG, head)

        ear_lift = h * 0.25 if dog.state in (DogState.SURPRISED, DogState.LEAPING) else 0.0
        ear = [
            (head.left + w * 0.05, head.top + h * 0.05),
            (head.left + w * 0.02, head.top - ear_lift + h * 0.25),
            (head.left + w * 0.12, head.top + h * 0.1),
        ]
        pygame.draw.polygon(screen, config.Colors.DOG_SPOT, ear)
        pygame.draw.circle(screen, config.Colors.OUTLINE, (int(head.right - w * 0.04), int(head.centery)), 3)

        if dog.state != DogState.LEAPING:
            self._draw_legs(screen, body, dog.leg, h)

        if dog.state == DogState.SURPRISED:
            mark = get_font(config.Fonts.MEDIUM).render("!", True, config.Colors.OUTLINE)
            screen.blit(mark, (int(head.centerx), int(head.top - mark.get_height())))

    def _draw_legs(self, screen: pygame.Surface, body: pygame.Rect, leg: Leg, height: float) -> None:
        stride = height * 0.12
        forward = 1 if leg == Leg.RIGHT else -1
        for hip_x, sign in ((body.left + body.width * 0.25, forward), (body.left + body.width * 0.8, -forward)):
            foot = (hip_x + sign * stride, body.bottom + height * 0.25)
            pygame.draw.line(screen, config.Colors.DOG, (hip_x, body.bottom - 2), foot, 6)
