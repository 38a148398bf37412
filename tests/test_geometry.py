import math

import pygame
import pytest

from space_invaders.geometry import (
    Rectangle,
    Vector2d,
    vector_add,
    vector_length,
    vector_normalize,
    vector_scalar_multiply,
    vector_subtract,
)


def test_vector_arithmetic_does_not_change_operands():
    v1 = Vector2d(1, 2)
    v2 = Vector2d(3, 5)

    assert vector_add(v1, v2) == Vector2d(4, 7)
    assert vector_subtract(v1, v2) == Vector2d(-2, -3)
    assert vector_scalar_multiply(v1, 3) == Vector2d(3, 6)
    assert v1 == Vector2d(1, 2) and v2 == Vector2d(3, 5)


def test_vector_length():
    assert vector_length(Vector2d(3, 4)) == 5


def test_vector_normalize():
    v = vector_normalize(Vector2d(3, 4))
    assert v.x == pytest.approx(0.6)
    assert v.y == pytest.approx(0.8)
    assert vector_length(v) == pytest.approx(1.0)


def test_vector_normalize_zero_vector():
    v = vector_normalize(Vector2d(0, 0))
    assert v == Vector2d(0, 0)
    assert not math.isnan(v.x)


def test_rectangle_edges_are_derived():
    r = Rectangle(5, 10, 20, 30)
    assert (r.left, r.right, r.top, r.bottom) == (5, 25, 10, 40)


def test_rectangle_centered():
    r = Rectangle.centered(400, 300, 400, 300)
    assert (r.left, r.top, r.right, r.bottom) == (200, 150, 600, 450)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ((0, 0, 10, 10), (5, 5, 10, 10), True),
        ((0, 0, 10, 10), (2, 2, 2, 2), True),
        ((0, 0, 10, 10), (20, 0, 10, 10), False),
        ((0, 0, 10, 10), (0, 20, 10, 10), False),
        # Overlapping horizontally only
        ((0, 0, 10, 10), (5, 15, 10, 10), False),
        # Touching edges
        ((0, 0, 10, 10), (10, 0, 10, 10), False),
        ((0, 0, 10, 10), (0, 10, 10, 10), False),
        ((0, 0, 10, 10), (10, 10, 10, 10), False),
    ],
)
def test_rectangle_intersects(a, b, expected):
    r1 = Rectangle(*a)
    r2 = Rectangle(*b)
    assert r1.intersects(r2) is expected
    assert r2.intersects(r1) is expected


@pytest.mark.parametrize(
    "a, b",
    [
        ((0, 0, 10, 10), (10, 0, 10, 10)),
        ((0, 0, 10, 10), (9, 0, 10, 10)),
        ((0, 0, 10, 10), (0, 10, 10, 10)),
        ((0, 0, 10, 10), (0, 9, 10, 10)),
    ],
)
def test_touching_edges_match_pygame(a, b):
    assert Rectangle(*a).intersects(Rectangle(*b)) == pygame.Rect(a).colliderect(
        pygame.Rect(b)
    )


def test_rectangle_contains():
    outer = Rectangle(0, 0, 100, 100)
    assert outer.contains(Rectangle(0, 0, 100, 100))
    assert outer.contains(Rectangle(10, 10, 5, 5))
    assert not outer.contains(Rectangle(95, 10, 10, 5))
