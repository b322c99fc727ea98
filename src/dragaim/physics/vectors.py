"""Vector mathematics utilities for aim tracking.

This module provides the 3D vector type used for aim positions, skeleton
anchor points (head, chest), drag vectors and per-tick velocities.

All arithmetic returns new vectors. Only ``set_from`` and ``add_in_place``
mutate, and they are meant for hot per-tick paths.

Typical usage example:
    from dragaim.physics.vectors import Vector3

    aim = Vector3(0.0, 1.0, 0.0)
    head = Vector3(0.0, 1.6, 0.0)
    drag = head - aim
    next_aim = aim + drag * 0.01
"""

import math
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt


@dataclass
class Vector3:
    """3D vector with common operations.

    Represents a point or direction in 3D space. Used for aim positions,
    bone anchors, drag vectors and velocities.

    Attributes:
        x: X component (horizontal).
        y: Y component (vertical, up-down).
        z: Z component (depth).

    Examples:
        >>> v1 = Vector3(1.0, 2.0, 3.0)
        >>> v2 = Vector3(4.0, 5.0, 6.0)
        >>> v1 + v2
        Vector3(x=5.0, y=7.0, z=9.0)
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def add(self, other: "Vector3") -> "Vector3":
        """Add two vectors component-wise.

        Args:
            other: Vector to add.

        Returns:
            Sum of the two vectors.
        """
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: "Vector3") -> "Vector3":
        """Subtract two vectors component-wise.

        Args:
            other: Vector to subtract.

        Returns:
            Difference of the two vectors.
        """
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def multiply_scalar(self, scalar: float) -> "Vector3":
        """Multiply vector by scalar.

        Args:
            scalar: Scalar value.

        Returns:
            Scaled vector.
        """
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __add__(self, other: "Vector3") -> "Vector3":
        return self.add(other)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return self.subtract(other)

    def __mul__(self, scalar: float) -> "Vector3":
        return self.multiply_scalar(scalar)

    def __rmul__(self, scalar: float) -> "Vector3":
        return self.multiply_scalar(scalar)

    def __truediv__(self, scalar: float) -> "Vector3":
        """Divide vector by scalar.

        Args:
            scalar: Scalar value.

        Returns:
            Scaled vector.

        Raises:
            ZeroDivisionError: If scalar is zero.
        """
        if scalar == 0:
            raise ZeroDivisionError("Cannot divide vector by zero")
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def length(self) -> float:
        """Calculate the length (magnitude) of the vector.

        Returns:
            Vector length.

        Examples:
            >>> Vector3(3.0, 4.0, 0.0).length()
            5.0
        """
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def length_squared(self) -> float:
        """Calculate the squared length (avoids sqrt).

        Returns:
            Squared length.
        """
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalize(self) -> "Vector3":
        """Return a unit vector in the same direction.

        A zero-length vector normalizes to the zero vector.

        Returns:
            Normalized vector, or the zero vector.

        Examples:
            >>> Vector3(3.0, 4.0, 0.0).normalize().length()
            1.0
            >>> Vector3.zero().normalize()
            Vector3(x=0.0, y=0.0, z=0.0)
        """
        length = self.length()
        if length > 0:
            return self.multiply_scalar(1.0 / length)
        return Vector3.zero()

    def dot(self, other: "Vector3") -> float:
        """Calculate dot product with another vector.

        Args:
            other: Other vector.

        Returns:
            Dot product.
        """
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        """Calculate cross product with another vector.

        Args:
            other: Other vector.

        Returns:
            Cross product vector (perpendicular to both).
        """
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def distance_to(self, other: "Vector3") -> float:
        """Calculate distance to another point.

        Args:
            other: Other vector (point).

        Returns:
            Euclidean distance.
        """
        return self.subtract(other).length()

    def lerp(self, other: "Vector3", t: float) -> "Vector3":
        """Linear interpolation between this vector and another.

        The factor is not clamped: values outside [0, 1] extrapolate.

        Args:
            other: Target vector.
            t: Interpolation factor.

        Returns:
            Interpolated vector.

        Examples:
            >>> Vector3(0.0, 0.0, 0.0).lerp(Vector3(10.0, 10.0, 10.0), 0.5)
            Vector3(x=5.0, y=5.0, z=5.0)
        """
        return Vector3(
            self.x + (other.x - self.x) * t,
            self.y + (other.y - self.y) * t,
            self.z + (other.z - self.z) * t,
        )

    def clone(self) -> "Vector3":
        """Return an independent copy of this vector."""
        return Vector3(self.x, self.y, self.z)

    def is_finite(self) -> bool:
        """Check that no component is NaN or infinite."""
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.z)

    def set_from(self, other: "Vector3") -> "Vector3":
        """Overwrite this vector's components in place.

        Mutates and returns ``self``; any other reference to this instance
        sees the new values.

        Args:
            other: Vector to copy components from.

        Returns:
            This same instance.
        """
        self.x = other.x
        self.y = other.y
        self.z = other.z
        return self

    def add_in_place(self, other: "Vector3") -> "Vector3":
        """Accumulate another vector into this one in place.

        Mutates and returns ``self``; any other reference to this instance
        sees the new values.

        Args:
            other: Vector to add.

        Returns:
            This same instance.
        """
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def to_array(self) -> npt.NDArray[np.float64]:
        """Convert to numpy array.

        Returns:
            Numpy array [x, y, z].
        """
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: npt.NDArray[np.float64]) -> "Vector3":
        """Create vector from numpy array.

        Args:
            arr: Numpy array with at least 3 elements.

        Returns:
            Vector3 instance.
        """
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    @classmethod
    def zero(cls) -> "Vector3":
        """Create a zero vector (0, 0, 0).

        Returns:
            Zero vector.
        """
        return cls(0.0, 0.0, 0.0)

    def __str__(self) -> str:
        return f"Vector3(x={self.x:.3f}, y={self.y:.3f}, z={self.z:.3f})"

    def __repr__(self) -> str:
        return f"Vector3(x={self.x}, y={self.y}, z={self.z})"
