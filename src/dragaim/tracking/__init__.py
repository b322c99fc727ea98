"""Aim tracking package.

Provides the drag aim state machine together with the velocity history
and adaptive speed model it is built on, plus named presets.

Typical usage:
    from dragaim.tracking import create_engine_with_preset

    engine = create_engine_with_preset("precise")
"""

from dragaim.tracking.adaptive_speed import adaptive_speed
from dragaim.tracking.drag_aim import (
    AimMode,
    DragAimConfig,
    DragAimEngine,
    DragAimState,
    DragDirection,
)
from dragaim.tracking.presets import (
    BUILTIN_PRESETS,
    create_engine_with_preset,
    load_presets,
    preset_config,
)
from dragaim.tracking.velocity_history import VelocityHistory

__all__ = [
    "AimMode",
    "BUILTIN_PRESETS",
    "DragAimConfig",
    "DragAimEngine",
    "DragAimState",
    "DragDirection",
    "VelocityHistory",
    "adaptive_speed",
    "create_engine_with_preset",
    "load_presets",
    "preset_config",
]
