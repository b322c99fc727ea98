"""Named drag aim presets.

Three built-in bundles are provided:
    - smooth: slow, heavily smoothed, wide lock threshold.
    - responsive: fast, lightly smoothed, wider lock threshold, adaptive.
    - precise: fast, heavily smoothed, narrow lock threshold, constant speed.

Extra presets can be read from a YAML file with a ``presets:`` section.

Typical usage example:
    from dragaim.tracking.presets import create_engine_with_preset, load_presets

    engine = create_engine_with_preset("responsive")
    custom = create_engine_with_preset("sniper", presets=load_presets("presets.yaml"))
"""

import logging
from pathlib import Path
from typing import Any

from dragaim.core.config import ConfigError, ConfigLoader
from dragaim.tracking.drag_aim import DragAimConfig, DragAimEngine

logger = logging.getLogger(__name__)

DEFAULT_PRESET = "smooth"

BUILTIN_PRESETS: dict[str, dict[str, Any]] = {
    "smooth": {
        "drag_speed": 0.01,
        "smoothing_factor": 0.9,
        "adaptive_speed": True,
        "head_lock_threshold": 0.03,
    },
    "responsive": {
        "drag_speed": 0.25,
        "smoothing_factor": 0.7,
        "adaptive_speed": True,
        "head_lock_threshold": 0.08,
    },
    "precise": {
        "drag_speed": 0.3,
        "smoothing_factor": 0.95,
        "adaptive_speed": False,
        "head_lock_threshold": 0.02,
    },
}


def load_presets(path: str | Path) -> dict[str, dict[str, Any]]:
    """Read named presets from the ``presets`` section of a YAML file.

    Each preset is validated eagerly so a bad file fails at load time.

    Args:
        path: YAML file path.

    Returns:
        Mapping of preset name to partial config.

    Raises:
        ConfigError: If the file, section or any preset is invalid.
    """
    section = ConfigLoader.load(path).get_section("presets")
    presets: dict[str, dict[str, Any]] = {}
    for name, values in section.items():
        if not isinstance(values, dict):
            raise ConfigError(f"Preset '{name}' must be a mapping")
        DragAimConfig.from_dict(values)
        presets[str(name)] = dict(values)
    logger.info("Loaded %d drag aim presets from %s", len(presets), path)
    return presets


def preset_config(name: str, presets: dict[str, dict[str, Any]] | None = None) -> DragAimConfig:
    """Resolve a preset name to a config, falling back to 'smooth'.

    Args:
        name: Preset name.
        presets: Extra presets that extend or override the built-in ones.

    Returns:
        Configuration for the preset.
    """
    available = {**BUILTIN_PRESETS, **(presets or {})}
    values = available.get(name)
    if values is None:
        logger.warning("Unknown drag aim preset '%s', using '%s'", name, DEFAULT_PRESET)
        values = available[DEFAULT_PRESET]
    return DragAimConfig.from_dict(values)


def create_engine_with_preset(
    name: str, presets: dict[str, dict[str, Any]] | None = None
) -> DragAimEngine:
    """Create an engine configured from a named preset."""
    return DragAimEngine(preset_config(name, presets))
