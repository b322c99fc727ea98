"""Wall-clock frame timing for hosts that do not track elapsed time.

The drag aim engine is deterministic when the caller passes ``dt``. When
it does not, the engine asks a ``FrameClock`` for the time since the
previous tick instead of keeping a global "last call" timestamp.

Typical usage example:
    from dragaim.core.clock import FrameClock

    clock = FrameClock()
    dt = clock.tick()  # seconds since previous tick
"""

import time
from collections.abc import Callable


class FrameClock:
    """Measures elapsed seconds between successive ticks.

    Examples:
        >>> clock = FrameClock(time_source=lambda: 10.0)
        >>> clock.tick()
        0.0
    """

    def __init__(self, time_source: Callable[[], float] = time.monotonic) -> None:
        """Initialize the clock.

        Args:
            time_source: Function returning the current time in seconds.
        """
        self._time_source = time_source
        self._last_time: float | None = None

    @property
    def started(self) -> bool:
        """True once a tick has been taken since construction or reset."""
        return self._last_time is not None

    def tick(self) -> float:
        """Return seconds elapsed since the previous tick.

        The first tick after construction or reset returns 0.0.

        Returns:
            Elapsed seconds.
        """
        current_time = self._time_source()
        elapsed = 0.0 if self._last_time is None else current_time - self._last_time
        self._last_time = current_time
        return elapsed

    def reset(self) -> None:
        """Forget the previous tick so the next one starts fresh."""
        self._last_time = None
