"""
Vectors and rectangles

Every operation returns a new value, nothing is changed in place.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

_EPSILON = 1.0e-37


@dataclass(frozen=True)
class Vector2d:
    """
    2D vector
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        return self.x, self.y


def vector_add(v1: Vector2d, v2: Vector2d) -> Vector2d:
    return Vector2d(v1.x + v2.x, v1.y + v2.y)


def vector_subtract(v1: Vector2d, v2: Vector2d) -> Vector2d:
    return Vector2d(v1.x - v2.x, v1.y - v2.y)


def vector_scalar_multiply(v: Vector2d, s: float) -> Vector2d:
    return Vector2d(v.x * s, v.y * s)


def vector_length(v: Vector2d) -> float:
    return math.sqrt(v.x * v.x + v.y * v.y)


def vector_normalize(v: Vector2d) -> Vector2d:
    """
    Scale a vector to unit length

    A zero vector stays a zero vector instead of dividing by zero.

    :param v: Vector to normalize
    :type v: Vector2d

    :return: Vector2d
    :rtype: Vector2d
    """
    reciprocal = 1.0 / (vector_length(v) + _EPSILON)
    return vector_scalar_multiply(v, reciprocal)


@dataclass(frozen=True)
class Rectangle:
    """
    Axis aligned rectangle

    Only the origin and size are stored, the edges are derived from them.
    """

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def centered(
        cls, cx: float, cy: float, width: float, height: float
    ) -> "Rectangle":
        """Build a rectangle of the given size around a centre point."""
        return cls(cx - width / 2, cy - height / 2, width, height)

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def intersects(self, other: "Rectangle") -> bool:
        """
        Check whether two rectangles overlap

        Both the horizontal and the vertical spans must overlap. Rectangles
        that only share an edge do not intersect, the same as
        ``pygame.Rect.colliderect``.

        :param other: Rectangle to test against
        :type other: Rectangle

        :return: bool
        :rtype: bool
        """
        return (
            self.left < other.right
            and other.left < self.right
            and self.top < other.bottom
            and other.top < self.bottom
        )

    def contains(self, other: "Rectangle") -> bool:
        """Check whether ``other`` lies fully inside this rectangle."""
        return (
            self.left <= other.left
            and other.right <= self.right
            and self.top <= other.top
            and other.bottom <= self.bottom
        )
