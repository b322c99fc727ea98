"""Bounded history of recent per-tick velocities.

Typical usage example:
    from dragaim.tracking.velocity_history import VelocityHistory

    history = VelocityHistory(capacity=50)
    history.push(Vector3(0.0, 1.5, 0.0))
    speed = history.average_speed()
"""

from collections import deque
from collections.abc import Iterator

from dragaim.physics.vectors import Vector3

DEFAULT_HISTORY_CAPACITY = 50


class VelocityHistory:
    """Fixed-capacity FIFO of velocity vectors.

    Once full, each push evicts the oldest entry. Entries are copied on
    push so callers may keep mutating their own vectors.

    Examples:
        >>> history = VelocityHistory(capacity=2)
        >>> history.push(Vector3(1.0, 0.0, 0.0))
        >>> history.push(Vector3(3.0, 0.0, 0.0))
        >>> history.average_speed()
        2.0
    """

    def __init__(self, capacity: int = DEFAULT_HISTORY_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"History capacity must be at least 1, got {capacity}")
        self._samples: deque[Vector3] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        """Maximum number of retained samples."""
        return self._samples.maxlen or 0

    def push(self, velocity: Vector3) -> None:
        """Append a velocity, evicting the oldest one when full."""
        self._samples.append(velocity.clone())

    def average_speed(self) -> float:
        """Mean length of the stored velocities, 0.0 when empty."""
        if not self._samples:
            return 0.0
        return sum(v.length() for v in self._samples) / len(self._samples)

    def clear(self) -> None:
        self._samples.clear()

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[Vector3]:
        return (v.clone() for v in self._samples)
