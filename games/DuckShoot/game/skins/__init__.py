"""
Duck Shoot game skins - visual presentation layers.

Skins provide different visual representations of the game without
changing game logic. Available skins:
- classic: Cartoon ducks and dog drawn with pygame primitives
- geometric: Plain circles and rectangles (debugging)
"""

from typing import Dict, List, Type

from .base import GameSkin
from .classic import ClassicSkin
from .geometric import GeometricSkin

SKINS: Dict[str, Type[GameSkin]] = {
    ClassicSkin.NAME: ClassicSkin,
    GeometricSkin.NAME: GeometricSkin,
}


def list_skins() -> List[str]:
    return sorted(SKINS)


def get_skin(name: str) -> GameSkin:
    """Instantiate a skin by name.

    Raises:
        ValueError: If no skin has that name
    """
    try:
        return SKINS[name]()
    except KeyError:
        raise ValueError(f"Unknown skin '{name}'. Available: {', '.join(list_skins())}") from None


__all__ = ['GameSkin', 'ClassicSkin', 'GeometricSkin', 'get_skin', 'list_skins']
