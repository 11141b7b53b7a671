"""Font cache shared by the skins and the win banner."""

from typing import Dict

import pygame

_fonts: Dict[int, pygame.font.Font] = {}


def get_font(size: int) -> pygame.font.Font:
    """Default pygame font at the given size, initializing the font module."""
    if not pygame.font.get_init():
        # Fonts from a previous init are invalid after pygame.quit()
        _fonts.clear()
        pygame.font.init()
    font = _fonts.get(size)
    if font is None:
        font = pygame.font.Font(None, size)
        _fonts[size] = font
    return font
