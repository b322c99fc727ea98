"""Exception hierarchy for the drag aim engine.

Typical usage example:
    from dragaim.core.errors import InvalidInputError

    if not math.isfinite(dt):
        raise InvalidInputError(f"Elapsed time must be finite, got {dt}")
"""


class DragAimError(Exception):
    """Base class for all drag aim errors."""


class InvalidInputError(DragAimError, ValueError):
    """Raised when per-tick inputs cannot be processed (NaN, infinity, bad step counts)."""
