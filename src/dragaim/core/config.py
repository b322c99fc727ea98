"""YAML loading for drag aim settings and presets.

A settings file holds an engine section and, optionally, named presets:

    drag_aim:
      drag_speed: 0.05
      adaptive_speed: false
    presets:
      sniper:
        drag_speed: 0.4

Typical usage example:
    from dragaim.core.config import ConfigLoader

    loader = ConfigLoader.load("config/drag_aim.yaml")
    settings = loader.get_section("drag_aim")
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from dragaim.core.errors import DragAimError

logger = logging.getLogger(__name__)


class ConfigError(DragAimError):
    """Raised when configuration cannot be loaded or is invalid."""


class ConfigLoader:
    """Parsed settings document with section lookup.

    Examples:
        >>> loader = ConfigLoader({"presets": {"fast": {"drag_speed": 0.5}}})
        >>> loader.get_section("presets.fast")
        {'drag_speed': 0.5}
    """

    def __init__(self, data: dict[str, Any]) -> None:
        self._data = data

    @classmethod
    def load(cls, path: str | Path) -> "ConfigLoader":
        """Load a settings document from a YAML file.

        Args:
            path: Path to YAML file.

        Returns:
            Loader over the parsed document; an empty file yields no sections.

        Raises:
            ConfigError: If the file is missing, unparsable or not a mapping.
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to load configuration: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {path}")

        logger.info("Loaded drag aim configuration from: %s", path)
        return cls(data)

    def get_section(self, key: str) -> dict[str, Any]:
        """Get a mapping section by dotted key, e.g. "presets.sniper".

        Raises:
            ConfigError: If the section is missing or is not a mapping.
        """
        value: Any = self._data
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                raise ConfigError(f"Configuration section not found: {key}")
            value = value[part]

        if not isinstance(value, dict):
            raise ConfigError(f"Configuration key is not a section: {key}")

        return value
