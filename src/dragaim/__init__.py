"""Drag aim: per-tick aim smoothing with a latching head lock.

Typical usage:
    from dragaim import DragAimEngine, Vector3

    engine = DragAimEngine()
    aim = engine.step(aim, head, chest, dt=1 / 60)
"""

from dragaim.core.errors import DragAimError, InvalidInputError
from dragaim.physics.vectors import Vector3
from dragaim.tracking import (
    AimMode,
    DragAimConfig,
    DragAimEngine,
    DragAimState,
    DragDirection,
    VelocityHistory,
    adaptive_speed,
    create_engine_with_preset,
)

__version__ = "0.1.0"

__all__ = [
    "AimMode",
    "DragAimConfig",
    "DragAimEngine",
    "DragAimError",
    "DragAimState",
    "DragDirection",
    "InvalidInputError",
    "Vector3",
    "VelocityHistory",
    "adaptive_speed",
    "create_engine_with_preset",
]
