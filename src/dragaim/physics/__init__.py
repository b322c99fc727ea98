"""Vector math."""

from dragaim.physics.vectors import Vector3

__all__ = ["Vector3"]
