"""
Entity rendering
"""

from __future__ import annotations

from typing import Iterable

from space_invaders.constants import GRAY
from space_invaders.entities import Entity
from space_invaders.geometry import Rectangle
from space_invaders.surface import DrawSurface


def render(surface: DrawSurface, entities: Iterable[Entity]) -> int:
    """
    Draw entities as filled rectangles

    :param surface: Where to draw
    :type surface: DrawSurface

    :param entities: What to draw
    :type entities: Iterable[Entity]

    :return: How many entities were drawn
    :rtype: int
    """
    count = 0
    for entity in entities:
        sprite = entity.describe_for_rendering()
        rect = sprite.rect
        surface.fill_rect(rect.x, rect.y, rect.width, rect.height, sprite.color)
        count += 1
    return count


def render_bounds(surface: DrawSurface, bounds: Rectangle, color=GRAY):
    """Outline the play field, used by the debug overlay."""
    surface.fill_rect(bounds.left, bounds.top, bounds.width, 1, color)
    surface.fill_rect(bounds.left, bounds.bottom - 1, bounds.width, 1, color)
    surface.fill_rect(bounds.left, bounds.top, 1, bounds.height, color)
    surface.fill_rect(bounds.right - 1, bounds.top, 1, bounds.height, color)
