"""
Draw surface

The game only ever fills rectangles and writes text, anything able to do
both can be drawn on.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Protocol

import pygame

from space_invaders.constants import WHITE

Align = Literal["left", "center", "right"]
Color = tuple[int, int, int]


@dataclass(frozen=True)
class Font:
    size: int = 16
    family: str = "arial"


class DrawSurface(Protocol):
    """
    Capability the states draw through
    """

    def fill_rect(
        self, x: float, y: float, width: float, height: float, color: Color
    ) -> None: ...

    def fill_text(
        self,
        text: str,
        x: float,
        y: float,
        font: Font,
        color: Color = WHITE,
        align: Align = "center",
    ) -> None: ...


class PygameSurface:
    """
    Draw surface backed by a pygame.Surface
    """

    def __init__(self, surface: pygame.Surface):
        """
        :param surface: Surface to draw on, usually the display
        :type surface: pygame.Surface
        """
        self.surface = surface
        self._fonts: dict[Font, pygame.font.Font] = {}

    @property
    def size(self) -> tuple[int, int]:
        return self.surface.get_size()

    def _font(self, font: Font) -> pygame.font.Font:
        if font not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[font] = pygame.font.SysFont(font.family, font.size)
        return self._fonts[font]

    def fill_rect(
        self, x: float, y: float, width: float, height: float, color: Color
    ) -> None:
        rect = pygame.Rect(round(x), round(y), round(width), round(height))
        self.surface.fill(color, rect)

    def fill_text(
        self,
        text: str,
        x: float,
        y: float,
        font: Font,
        color: Color = WHITE,
        align: Align = "center",
    ) -> None:
        """
        Write a line of text

        ``x`` is the left, centre or right of the text depending on
        ``align``; ``y`` is the vertical centre.
        """
        image = self._font(font).render(text, True, color)
        rect = image.get_rect()
        rect.centery = round(y)
        if align == "left":
            rect.left = round(x)
        elif align == "right":
            rect.right = round(x)
        else:
            rect.centerx = round(x)
        self.surface.blit(image, rect)
