# MIT License (see LICENSE)
"""
Two-dimensional vector with cartesian and polar views.

A Vector2d exposes both (x, y) and (magnitude, angle). The four values are
written together by set_cartesian, set_polar, zero and copy_from, and are
read-only from the outside, so the two forms can never drift apart:

    x = magnitude * cos(angle)
    y = magnitude * sin(angle)

set_cartesian derives the angle with atan2, so it lies in (-π, π].
set_polar stores magnitude and angle exactly as given.

Non-finite inputs are not rejected; NaN and infinity propagate into the
derived values.
"""
from __future__ import annotations
import math

import numpy as np

from .errors import InvalidArgumentError
from .util import f64


class Vector2d:
    """
    A 2D vector stored in cartesian and polar form.

    Attributes (read-only):
        x, y: Cartesian components.
        magnitude: Length of the vector.
        angle: Direction in radians, counterclockwise from +x.

    Example:
        v = Vector2d.from_polar(2.0, math.pi / 2)
        v.x, v.y          # (~0.0, 2.0)
        v.set_cartesian(3.0, 4.0)
        v.magnitude       # 5.0
    """

    __slots__ = ("_x", "_y", "_magnitude", "_angle")

    def __init__(self) -> None:
        self._x = 0.0
        self._y = 0.0
        self._magnitude = 0.0
        self._angle = 0.0

    @classmethod
    def from_cartesian(cls, x: float, y: float) -> Vector2d:
        """Create a vector from cartesian components."""
        v = cls()
        v.set_cartesian(x, y)
        return v

    @classmethod
    def from_polar(cls, magnitude: float, angle: float) -> Vector2d:
        """Create a vector from a length and a direction (radians)."""
        v = cls()
        v.set_polar(magnitude, angle)
        return v

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def magnitude(self) -> float:
        return self._magnitude

    @property
    def angle(self) -> float:
        return self._angle

    def set_cartesian(self, x: float, y: float) -> None:
        """Store (x, y) and derive magnitude and angle from them."""
        self._x = float(x)
        self._y = float(y)
        self._magnitude = math.hypot(self._x, self._y)
        self._angle = math.atan2(self._y, self._x)

    def set_polar(self, magnitude: float, angle: float) -> None:
        """Store (magnitude, angle) and derive x and y from them."""
        self._magnitude = float(magnitude)
        self._angle = float(angle)
        self._x = self._magnitude * math.cos(self._angle)
        self._y = self._magnitude * math.sin(self._angle)

    def zero(self) -> None:
        """Set all four fields to exactly 0."""
        self._x = self._y = self._magnitude = self._angle = 0.0

    def copy_from(self, src: Vector2d) -> None:
        """Overwrite this vector with the values of src."""
        self._x = src._x
        self._y = src._y
        self._magnitude = src._magnitude
        self._angle = src._angle

    def copy(self) -> Vector2d:
        """Return an independent copy of this vector."""
        v = Vector2d()
        v.copy_from(self)
        return v

    def is_zero(self) -> bool:
        """True when the vector has zero length."""
        return self._magnitude == 0.0

    def as_array(self) -> np.ndarray:
        """Return [x, y] as a new float64 numpy array."""
        return f64((self._x, self._y))

    def __iter__(self):
        yield self._x
        yield self._y

    def __repr__(self) -> str:
        return (
            f"Vector2d(x={self._x:.6g}, y={self._y:.6g}, "
            f"magnitude={self._magnitude:.6g}, angle={self._angle:.6g})"
        )


def copy_vector(dest: Vector2d, src: Vector2d) -> None:
    """
    Copy every field of src into dest.

    dest stays independently mutable afterwards.
    """
    dest.copy_from(src)


def to_vector(value) -> Vector2d:
    """
    Build a fresh Vector2d from a Vector2d, an (x, y) pair or None.

    None gives the zero vector. A Vector2d argument is copied, never shared.
    """
    if value is None:
        return Vector2d()
    if isinstance(value, Vector2d):
        return value.copy()
    try:
        x, y = value
        return Vector2d.from_cartesian(x, y)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"Expected an (x, y) pair, got {value!r}") from exc
