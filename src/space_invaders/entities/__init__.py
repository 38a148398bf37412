"""
Space Invaders entities
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Literal

from space_invaders.constants import (
    BOMB_COLOR,
    ENEMY_COLOR,
    PLAYER_COLOR,
    ROCKET_COLOR,
)
from space_invaders.geometry import Rectangle, Vector2d

Axis = Literal["x", "y"]
Color = tuple[int, int, int]


class EntityKind(str, Enum):
    PLAYER = "player"
    ENEMY = "enemy"
    ROCKET = "rocket"
    BOMB = "bomb"


@dataclass(frozen=True)
class Sprite:
    """
    What the renderer needs to know to draw an entity
    """

    kind: EntityKind
    rect: Rectangle
    color: Color


@dataclass(eq=False)
class Entity:
    """
    A positioned, sized body moving back and forth along one axis
    """

    kind: ClassVar[EntityKind]
    color: ClassVar[Color] = (255, 255, 255)

    position: Vector2d
    width: float = 10
    height: float = 10
    direction: int = 1
    axis: Axis = "y"

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    @property
    def rect(self) -> Rectangle:
        return Rectangle(self.position.x, self.position.y, self.width, self.height)

    def move_by(self, dx: float, dy: float) -> None:
        self.position = Vector2d(self.position.x + dx, self.position.y + dy)

    def move_to(self, x: float, y: float) -> None:
        self.position = Vector2d(x, y)

    def step(self, bounds: Rectangle, distance: float) -> None:
        """
        Move along the axis of motion and bounce off the bounds

        The direction flips once the leading edge reaches or passes the
        bound it is heading for.

        :param bounds: Play field
        :type bounds: Rectangle

        :param distance: How far to move this tick
        :type distance: float
        """
        if self.axis == "x":
            self.move_by(self.direction * distance, 0)
            low, high = self.rect.left, self.rect.right
            bound_low, bound_high = bounds.left, bounds.right
        else:
            self.move_by(0, self.direction * distance)
            low, high = self.rect.top, self.rect.bottom
            bound_low, bound_high = bounds.top, bounds.bottom

        if self.direction < 0 and low <= bound_low:
            self.direction = 1
        elif self.direction > 0 and high >= bound_high:
            self.direction = -1

    def describe_for_rendering(self) -> Sprite:
        return Sprite(self.kind, self.rect, self.color)


@dataclass(eq=False)
class Player(Entity):
    """
    The ship at the bottom of the field, moved sideways by the keyboard
    """

    kind: ClassVar[EntityKind] = EntityKind.PLAYER
    color: ClassVar[Color] = PLAYER_COLOR

    width: float = 20
    height: float = 16
    direction: int = -1
    axis: Axis = "x"

    @classmethod
    def centered_at(cls, cx: float, cy: float) -> "Player":
        rect = Rectangle.centered(cx, cy, cls.width, cls.height)
        return cls(Vector2d(rect.x, rect.y))


@dataclass(eq=False)
class Enemy(Entity):
    """
    Invader, part of a formation of ranks (rows) and files (columns)
    """

    kind: ClassVar[EntityKind] = EntityKind.ENEMY
    color: ClassVar[Color] = ENEMY_COLOR

    width: float = 18
    height: float = 14
    direction: int = 1
    axis: Axis = "x"
    rank: int = 0
    file: int = 0


@dataclass(eq=False)
class Rocket(Entity):
    """
    Shot fired upwards by the player
    """

    kind: ClassVar[EntityKind] = EntityKind.ROCKET
    color: ClassVar[Color] = ROCKET_COLOR

    width: float = 2
    height: float = 6
    direction: int = -1
    velocity: float = 120.0


@dataclass(eq=False)
class Bomb(Entity):
    """
    Shot dropped by an invader
    """

    kind: ClassVar[EntityKind] = EntityKind.BOMB
    color: ClassVar[Color] = BOMB_COLOR

    width: float = 4
    height: float = 4
    direction: int = 1
    velocity: float = 50.0
