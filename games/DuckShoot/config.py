"""
Configuration file for Duck Shoot.

Contains display settings, colors and layout constants for the pygame
front end. Gameplay timing lives in the mode YAML files (see modes/).
"""

# Screen and Display Settings
SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
MIN_WIDTH = 320  # Smallest window the resize handler accepts
MIN_HEIGHT = 240
FPS = 60  # Target frame rate
WINDOW_TITLE = "Duck Shoot"

# Colors (RGBA tuples)
BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)
RED = (220, 40, 40, 255)
SKY_BLUE = (120, 190, 255, 255)
GRASS_GREEN = (70, 150, 40, 255)
DIRT_BROWN = (140, 95, 50, 255)
DUCK_GREEN = (30, 110, 60, 255)
DUCK_BODY = (110, 75, 45, 255)
DUCK_BEAK = (240, 180, 30, 255)
DUCK_WING = (80, 55, 35, 255)
DOG_BROWN = (170, 110, 60, 255)
DOG_SPOT = (110, 65, 30, 255)

# Layout
GRASS_HEIGHT_RATIO = 0.22  # Fraction of the screen covered by grass
BANNER_PADDING = 24

# Font sizes
FONT_SIZE_SMALL = 24
FONT_SIZE_MEDIUM = 36
FONT_SIZE_LARGE = 48


# Organized Constants for Code Access
class Colors:
    """Color constants for easy access in code."""
    BACKGROUND = SKY_BLUE
    GRASS = GRASS_GREEN
    DIRT = DIRT_BROWN
    DUCK_HEAD = DUCK_GREEN
    DUCK_BODY = DUCK_BODY
    DUCK_BEAK = DUCK_BEAK
    DUCK_WING = DUCK_WING
    DUCK_SHOT = RED
    DOG = DOG_BROWN
    DOG_SPOT = DOG_SPOT
    OUTLINE = BLACK
    HUD_TEXT = WHITE
    BANNER_TEXT = WHITE
    BANNER_BACKGROUND = (0, 0, 0, 170)


class Fonts:
    """Font size constants for easy access in code."""
    SMALL = FONT_SIZE_SMALL
    MEDIUM = FONT_SIZE_MEDIUM
    LARGE = FONT_SIZE_LARGE


# Debug Settings
SHOW_HITBOXES = False
SHOW_HUD = True
