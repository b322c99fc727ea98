"""Distance- and motion-aware drag speed.

Slows the drag near the target to avoid overshoot and when recent motion
has been slow to avoid jitter; speeds it up when far away or moving fast.

The result always lies in [0.3, 2.0] * drag_speed for non-negative
average velocities.
"""

from typing import TYPE_CHECKING

from dragaim.physics.vectors import Vector3

if TYPE_CHECKING:
    from dragaim.tracking.drag_aim import DragAimConfig

MIN_DISTANCE_MULTIPLIER = 0.3
MAX_VELOCITY_MULTIPLIER = 2.0


def adaptive_speed(
    config: "DragAimConfig",
    current_aim: Vector3,
    target: Vector3,
    avg_velocity: float,
) -> float:
    """Compute the drag speed for this tick.

    Args:
        config: Engine configuration (drag_speed, max_drag_distance).
        current_aim: Current aim position.
        target: Point being dragged toward.
        avg_velocity: Rolling mean speed from the velocity history.

    Returns:
        Scaled drag speed.

    Examples:
        >>> from dragaim.tracking.drag_aim import DragAimConfig
        >>> config = DragAimConfig(drag_speed=0.1, max_drag_distance=10.0)
        >>> adaptive_speed(config, Vector3.zero(), Vector3(10.0, 0.0, 0.0), 0.0)
        0.1
    """
    distance = current_aim.distance_to(target)
    normalized_distance = min(distance / config.max_drag_distance, 1.0)
    distance_multiplier = MIN_DISTANCE_MULTIPLIER + (1.0 - MIN_DISTANCE_MULTIPLIER) * normalized_distance
    velocity_multiplier = min(1.0 + avg_velocity * 2.0, MAX_VELOCITY_MULTIPLIER)
    return config.drag_speed * distance_multiplier * velocity_multiplier
