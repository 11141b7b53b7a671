"""
Game Mode Loader - YAML configuration loading with Pydantic validation.

This module discovers mode files in the modes/ directory, loads them with
PyYAML and validates them into `GameConfig` models.

Examples:
    >>> loader = GameModeLoader()
    >>> config = loader.load_mode("classic")
    >>> config.round.duck_count_min
    3
    >>> loader.list_available_modes()
    ['classic', 'fixed_five', 'teleport']
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import ValidationError

from models import GameConfig

DEFAULT_MODES_DIR = Path(__file__).resolve().parent.parent / "modes"


class GameModeLoader:
    """Loads and validates game mode configurations from YAML files.

    Attributes:
        modes_dir: Path to the directory containing mode YAML files
    """

    def __init__(self, modes_dir: Optional[Path] = None):
        """Initialize the game mode loader.

        Args:
            modes_dir: Optional custom path to modes directory.
                      Defaults to the modes/ directory shipped with the game.
        """
        self.modes_dir = Path(modes_dir) if modes_dir is not None else DEFAULT_MODES_DIR

    def load_mode(self, mode_id: str) -> GameConfig:
        """Load and validate a game mode configuration from YAML.

        Args:
            mode_id: The ID of the mode to load (without .yaml extension)

        Returns:
            Validated GameConfig instance

        Raises:
            FileNotFoundError: If the mode YAML file doesn't exist
            ValueError: If the YAML content fails validation
            yaml.YAMLError: If the YAML syntax is malformed
        """
        yaml_path = self.modes_dir / f"{mode_id}.yaml"

        if not yaml_path.exists():
            raise FileNotFoundError(
                f"Game mode '{mode_id}' not found. "
                f"Expected file: {yaml_path}"
            )

        return self.load_file(yaml_path)

    def load_file(self, yaml_path: Path) -> GameConfig:
        """Load and validate a mode file from an explicit path."""
        try:
            with open(yaml_path, 'r') as f:
                config_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(
                f"Failed to parse YAML file '{yaml_path}': {e}"
            )

        # An empty file means "all defaults"
        if config_dict is None:
            config_dict = {}
        if not isinstance(config_dict, dict):
            raise ValueError(f"Mode file '{yaml_path}' must contain a mapping")

        config_dict.setdefault('id', Path(yaml_path).stem)

        try:
            return GameConfig(**config_dict)
        except ValidationError as e:
            raise ValueError(
                f"Invalid game mode configuration in '{yaml_path}':\n{e}"
            ) from e

    def list_available_modes(self) -> List[str]:
        """List all available game mode IDs, sorted alphabetically."""
        if not self.modes_dir.exists():
            return []
        return sorted(f.stem for f in self.modes_dir.glob("*.yaml"))

    def mode_exists(self, mode_id: str) -> bool:
        return (self.modes_dir / f"{mode_id}.yaml").exists()

    def get_mode_info(self, mode_id: str) -> Dict[str, Any]:
        """Get basic metadata about a mode without full validation.

        Raises:
            FileNotFoundError: If the mode doesn't exist
            yaml.YAMLError: If the YAML is malformed
        """
        yaml_path = self.modes_dir / f"{mode_id}.yaml"

        if not yaml_path.exists():
            raise FileNotFoundError(f"Game mode '{mode_id}' not found")

        with open(yaml_path, 'r') as f:
            config_dict = yaml.safe_load(f) or {}

        return {
            'name': config_dict.get('name', mode_id),
            'description': config_dict.get('description', ''),
            'version': config_dict.get('version', '1.0.0'),
        }


def load_game_mode_config(mode_id: str, modes_dir: Optional[Path] = None) -> GameConfig:
    """Convenience wrapper around GameModeLoader.load_mode()."""
    return GameModeLoader(modes_dir).load_mode(mode_id)
