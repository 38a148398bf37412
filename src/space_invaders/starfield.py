"""
Scrolling star field drawn behind the game
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from space_invaders.constants import BLACK, WHITE
from space_invaders.surface import DrawSurface


@dataclass
class Star:
    x: float
    y: float
    size: float
    velocity: float


class Starfield:  # pylint: disable=too-many-instance-attributes
    """
    Stars falling down the screen at random speeds
    """

    def __init__(
        self,
        width: int,
        height: int,
        fps: int = 30,
        stars: int = 100,
        min_velocity: float = 15,
        max_velocity: float = 30,
        rng: random.Random | None = None,
    ):  # pylint: disable=too-many-arguments,too-many-positional-arguments
        self.width = width
        self.height = height
        self.fps = fps
        self.star_count = stars
        self.min_velocity = min_velocity
        self.max_velocity = max_velocity
        self.stars: list[Star] = []
        self._rng = rng or random.Random()

    def _new_star(self, y: float | None = None) -> Star:
        rng = self._rng
        return Star(
            x=rng.random() * self.width,
            y=rng.random() * self.height if y is None else y,
            size=rng.random() * 3 + 1,
            velocity=rng.random() * (self.max_velocity - self.min_velocity)
            + self.min_velocity,
        )

    def start(self) -> None:
        self.stars = [self._new_star() for _ in range(self.star_count)]

    def update(self, dt: float | None = None) -> None:
        """
        Move the stars down, respawning at the top those that fell off

        :param dt: Seconds since the last update, one frame by default
        :type dt: float | None
        """
        if dt is None:
            dt = 1 / self.fps
        for i, star in enumerate(self.stars):
            star.y += dt * star.velocity
            if star.y > self.height:
                self.stars[i] = self._new_star(y=0)

    def draw(self, surface: DrawSurface) -> None:
        surface.fill_rect(0, 0, self.width, self.height, BLACK)
        for star in self.stars:
            surface.fill_rect(star.x, star.y, star.size, star.size, WHITE)

    def resize(
        self, width: int, height: int, surface: DrawSurface | None = None
    ) -> None:
        """
        Take on new dimensions, redrawing straight away if given a surface
        """
        self.width = width
        self.height = height
        if surface is not None:
            self.draw(surface)
