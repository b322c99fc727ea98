"""Drag aim engine: smoothed aim tracking with a latching head lock.

Once per tick the host supplies the current aim position, the target's
head and chest anchors and the elapsed time. The engine drags the aim
toward the head with an exponentially smoothed drag vector (FREE_DRAG).
When the drag vector's vertical component is growing (direction UP) and
the aim projects onto the chest->head segment between 50% and 120% of
its length, the engine latches into HEAD_LOCKED and converges directly
onto the head, snapping to it once within ``head_lock_threshold``.

A new engine starts latched, so the first session converges straight onto
the head. ``reset`` releases the latch and drops into FREE_DRAG; from there
the lock is one-way again until the next reset.

Typical usage example:
    from dragaim.tracking.drag_aim import DragAimEngine

    engine = DragAimEngine({"drag_speed": 0.05})
    aim = engine.step(aim, head, chest, dt=1 / 60)
"""

import logging
import math
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any

from dragaim.core.clock import FrameClock
from dragaim.core.config import ConfigError, ConfigLoader
from dragaim.core.errors import InvalidInputError
from dragaim.physics.vectors import Vector3
from dragaim.tracking.adaptive_speed import adaptive_speed as compute_adaptive_speed
from dragaim.tracking.velocity_history import VelocityHistory

logger = logging.getLogger(__name__)

MIN_DT = 1e-6  # seconds; non-positive dt is clamped to this
MIN_SEGMENT_LENGTH_SQUARED = 1e-12
LOCK_PROGRESS_MIN = 0.5
LOCK_PROGRESS_MAX = 1.2
MAX_LOCK_LERP = 0.5

# camelCase aliases accepted in config mappings
_CAMEL_CASE_KEYS = {
    "dragSpeed": "drag_speed",
    "smoothingFactor": "smoothing_factor",
    "headLockThreshold": "head_lock_threshold",
    "maxDragDistance": "max_drag_distance",
    "velocityThreshold": "velocity_threshold",
    "adaptiveSpeed": "adaptive_speed",
}


class DragDirection(Enum):
    """Last detected vertical trend of the drag vector."""

    UNKNOWN = "unknown"
    UP = "up"
    DOWN = "down"


class AimMode(Enum):
    """Top-level engine state."""

    FREE_DRAG = "free_drag"
    HEAD_LOCKED = "head_locked"


@dataclass(frozen=True)
class DragAimConfig:
    """Drag aim tuning parameters.

    Attributes:
        drag_speed: Base drag rate per tick.
        smoothing_factor: EMA weight kept from the previous smoothed velocity, in [0, 1).
        head_lock_threshold: Distance below which a locked aim snaps onto the head.
        max_drag_distance: Distance at which the adaptive distance multiplier saturates.
        velocity_threshold: Minimum change in drag y needed to register a direction.
        adaptive_speed: Use the adaptive speed model instead of a constant drag_speed.
    """

    drag_speed: float = 0.01
    smoothing_factor: float = 0.8
    head_lock_threshold: float = 0.01
    max_drag_distance: float = 999.0
    velocity_threshold: float = 0.01
    adaptive_speed: bool = True

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "adaptive_speed":
                if not isinstance(value, bool):
                    raise ConfigError(f"adaptive_speed must be a bool, got {value!r}")
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"{f.name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ConfigError(f"{f.name} must be finite, got {value!r}")

        if not 0.0 <= self.smoothing_factor < 1.0:
            raise ConfigError(f"smoothing_factor must be in [0, 1), got {self.smoothing_factor}")
        if self.max_drag_distance <= 0:
            raise ConfigError(f"max_drag_distance must be positive, got {self.max_drag_distance}")
        for name in ("drag_speed", "head_lock_threshold", "velocity_threshold"):
            if getattr(self, name) < 0:
                raise ConfigError(f"{name} must be non-negative, got {getattr(self, name)}")

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "DragAimConfig":
        """Build a config from a mapping, filling absent keys with defaults.

        Explicitly supplied falsy values (0, False) are kept.

        Args:
            data: Mapping of snake_case or camelCase keys.

        Returns:
            Validated configuration.

        Raises:
            ConfigError: On unknown keys or invalid values.
        """
        return cls().merged(data or {})

    @classmethod
    def from_yaml(cls, path: str | Path, section: str = "drag_aim") -> "DragAimConfig":
        """Load a config from a section of a YAML file.

        Args:
            path: YAML file path.
            section: Dotted key of the section holding the settings.

        Returns:
            Validated configuration.

        Raises:
            ConfigError: If the file or section is missing or invalid.
        """
        loader = ConfigLoader.load(path)
        return cls.from_dict(loader.get_section(section))

    def merged(self, changes: dict[str, Any]) -> "DragAimConfig":
        """Return a copy with only the supplied fields replaced."""
        return replace(self, **_normalize_keys(changes))

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def _normalize_keys(data: dict[str, Any]) -> dict[str, Any]:
    known = {f.name for f in fields(DragAimConfig)}
    result: dict[str, Any] = {}
    for key, value in data.items():
        name = _CAMEL_CASE_KEYS.get(key, key)
        if name not in known:
            raise ConfigError(f"Unknown drag aim option: {key}")
        result[name] = value
    return result


@dataclass
class DragAimState:
    """Mutable per-session state, owned by exactly one engine."""

    last_drag_vec: Vector3 = field(default_factory=Vector3.zero)
    smoothed_velocity: Vector3 = field(default_factory=Vector3.zero)
    drag_direction: DragDirection = DragDirection.UNKNOWN
    last_y: float | None = None
    head_locked: bool = True
    frame_count: int = 0
    velocity_history: VelocityHistory = field(default_factory=VelocityHistory)

    @property
    def mode(self) -> AimMode:
        return AimMode.HEAD_LOCKED if self.head_locked else AimMode.FREE_DRAG


class DragAimEngine:
    """Per-tick aim smoothing state machine.

    Not thread-safe: drive each instance from one thread at a time. Separate
    instances share nothing.

    Examples:
        >>> engine = DragAimEngine({"adaptive_speed": False, "drag_speed": 0.3})
        >>> engine.get_debug_info()["state"]
        'head_locked'
        >>> engine.reset()
        >>> aim = engine.step(Vector3(0, 1.0, 0), Vector3(0, 1.6, 0), Vector3(0, 1.2, 0), dt=0.1)
        >>> engine.get_debug_info()["state"]
        'free_drag'
    """

    def __init__(
        self,
        config: DragAimConfig | dict[str, Any] | None = None,
        clock: FrameClock | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            config: Config object or partial mapping; absent fields take defaults.
            clock: Time source used when ``step`` is called without ``dt``.
        """
        if isinstance(config, DragAimConfig):
            self.config = config
        else:
            self.config = DragAimConfig.from_dict(config)
        self._clock = clock or FrameClock()
        self._state = DragAimState()
        logger.debug("Drag aim engine created: %s", self.config)

    @property
    def state(self) -> DragAimState:
        """Live session state. Treat as read-only."""
        return self._state

    @property
    def is_head_locked(self) -> bool:
        return self._state.head_locked

    def step(
        self,
        current_aim: Vector3,
        head: Vector3,
        chest: Vector3,
        dt: float | None = None,
    ) -> Vector3:
        """Advance one tick and return the new aim position.

        Args:
            current_aim: Aim position at the start of the tick.
            head: Target head anchor.
            chest: Target chest anchor.
            dt: Elapsed seconds since the previous tick. When omitted the
                engine's clock supplies it; pass it explicitly for
                reproducible results.

        Returns:
            New aim position (a fresh vector; inputs are never mutated).

        Raises:
            InvalidInputError: If dt or any input component is NaN or infinite,
                or the drag vector or velocity overflows. State is left
                untouched in every case.
        """
        dt = self._resolve_dt(dt)
        for name, vec in (("current_aim", current_aim), ("head", head), ("chest", chest)):
            if not vec.is_finite():
                raise InvalidInputError(f"{name} has non-finite components: {vec!r}")

        state = self._state
        drag_vec = head - current_aim
        if not drag_vec.is_finite():
            raise InvalidInputError(f"Drag vector overflows: {drag_vec!r}")
        velocity = (state.last_drag_vec - drag_vec) * (1.0 / dt)
        if not velocity.is_finite():
            raise InvalidInputError(f"Drag velocity overflows at dt={dt}: {velocity!r}")

        self._update_direction(drag_vec.y)
        state.velocity_history.push(velocity)

        if (
            not state.head_locked
            and state.drag_direction is DragDirection.UP
            and self._should_lock_head(current_aim, head, chest)
        ):
            state.head_locked = True
            logger.info(
                "Head lock engaged after %d frames at distance %.4f",
                state.frame_count,
                current_aim.distance_to(head),
            )

        if state.head_locked:
            if current_aim.distance_to(head) < self.config.head_lock_threshold:
                return head.clone()
            lerp_factor = min(self.config.drag_speed * 3.0, MAX_LOCK_LERP)
            return current_aim.lerp(head, lerp_factor)

        if self.config.adaptive_speed:
            speed = compute_adaptive_speed(
                self.config, current_aim, head, state.velocity_history.average_speed()
            )
        else:
            speed = self.config.drag_speed

        factor = self.config.smoothing_factor
        state.smoothed_velocity = state.smoothed_velocity * factor + drag_vec * (1.0 - factor)

        new_aim = current_aim + state.smoothed_velocity * speed
        state.last_drag_vec = drag_vec
        state.frame_count += 1
        return new_aim

    def _resolve_dt(self, dt: float | None) -> float:
        if dt is None:
            started = self._clock.started
            dt = self._clock.tick()
            if not started:
                # First clock tick has no previous reference
                return MIN_DT
        if not math.isfinite(dt):
            raise InvalidInputError(f"Elapsed time must be finite, got {dt}")
        if dt <= 0:
            logger.warning("Non-positive dt %.6f clamped to %.0e", dt, MIN_DT)
            return MIN_DT
        return dt

    def _update_direction(self, drag_y: float) -> None:
        state = self._state
        if state.last_y is not None:
            y_diff = drag_y - state.last_y
            # Within threshold: keep the previous direction
            if abs(y_diff) > self.config.velocity_threshold:
                state.drag_direction = DragDirection.UP if y_diff > 0 else DragDirection.DOWN
        state.last_y = drag_y

    @staticmethod
    def _should_lock_head(current_aim: Vector3, head: Vector3, chest: Vector3) -> bool:
        chest_to_head = head - chest
        segment_length_sq = chest_to_head.length_squared()
        if segment_length_sq < MIN_SEGMENT_LENGTH_SQUARED:
            return False
        progress = (current_aim - chest).dot(chest_to_head) / segment_length_sq
        return LOCK_PROGRESS_MIN <= progress <= LOCK_PROGRESS_MAX

    def predict_trajectory(self, current_aim: Vector3, target: Vector3, steps: int = 3) -> Vector3:
        """Simulate a few drag sub-steps toward a target without touching state.

        Args:
            current_aim: Starting point.
            target: Point to drag toward.
            steps: Number of sub-steps, each moving by drag_speed / steps of
                the remaining distance.

        Returns:
            Predicted aim position.

        Raises:
            InvalidInputError: If steps is less than 1.
        """
        if steps < 1:
            raise InvalidInputError(f"steps must be at least 1, got {steps}")

        predicted = current_aim.clone()
        step_size = self.config.drag_speed / steps
        for _ in range(steps):
            predicted = predicted + (target - predicted) * step_size
        return predicted

    def get_debug_info(self) -> dict[str, Any]:
        """Snapshot of the engine state for host-side logging.

        Returns:
            Dictionary with direction, lock flag, frame count, average
            velocity and smoothed velocity, rounded to 4 digits.
        """
        state = self._state
        return {
            "state": state.mode.value,
            "direction": state.drag_direction.value,
            "head_locked": state.head_locked,
            "frame_count": state.frame_count,
            "avg_velocity": round(state.velocity_history.average_speed(), 4),
            "smoothed_velocity": {
                "x": round(state.smoothed_velocity.x, 4),
                "y": round(state.smoothed_velocity.y, 4),
                "z": round(state.smoothed_velocity.z, 4),
            },
        }

    def reset(self, full_reset: bool = True) -> None:
        """Release the head lock and forget the drag direction.

        Args:
            full_reset: Also clear velocity history, smoothed velocity and
                frame count. A partial reset keeps momentum for quick
                re-acquisition.
        """
        state = self._state
        state.drag_direction = DragDirection.UNKNOWN
        state.head_locked = False
        state.last_y = None
        if full_reset:
            state.velocity_history.clear()
            state.smoothed_velocity = Vector3.zero()
            state.frame_count = 0
        logger.debug("Drag aim engine reset (full=%s)", full_reset)

    def update_config(self, changes: dict[str, Any]) -> None:
        """Overlay the supplied fields on the current config.

        Raises:
            ConfigError: On unknown keys or invalid values; the current
                config is kept.
        """
        self.config = self.config.merged(changes)
        logger.debug("Drag aim config updated: %s", self.config)
