"""
Entity movement
"""

from __future__ import annotations

from typing import Iterable

from space_invaders.entities import Bomb, Enemy, Entity, Rocket
from space_invaders.geometry import Rectangle


def update(entities: Iterable[Entity], bounds: Rectangle, distance: float):
    """
    Step every entity along its axis, bouncing off the bounds

    The generic mover for free bouncing bodies, used by the welcome screen.
    Play moves its entities with the formation and projectile movers.

    :param entities: Entities to move
    :type entities: Iterable[Entity]

    :param bounds: Play field
    :type bounds: Rectangle

    :param distance: How far each entity moves this tick
    :type distance: float
    """
    for entity in entities:
        entity.step(bounds, distance)


def move_projectiles(
    projectiles: list[Rocket] | list[Bomb], bounds: Rectangle, dt: float
) -> list:
    """
    Move rockets and bombs, dropping the ones that left the field

    Projectiles fly straight and never bounce.

    :return: The projectiles still inside the bounds
    :rtype: list
    """
    alive = []
    for projectile in projectiles:
        projectile.move_by(0, projectile.direction * projectile.velocity * dt)
        if projectile.rect.intersects(bounds):
            alive.append(projectile)
    return alive


def move_formation(
    enemies: list[Enemy],
    bounds: Rectangle,
    distance: float,
    drop_distance: float,
) -> bool:
    """
    Move invaders as a group

    - Move horizontally
    - If any reaches a side -> every invader reverses and drops down

    :return: True if the formation dropped this tick
    :rtype: bool
    """
    if not enemies:
        return False

    direction = enemies[0].direction

    hit_wall = False
    for enemy in enemies:
        next_left = enemy.rect.left + direction * distance
        next_right = enemy.rect.right + direction * distance
        if (direction < 0 and next_left <= bounds.left) or (
            direction > 0 and next_right >= bounds.right
        ):
            hit_wall = True
            break

    if hit_wall:
        for enemy in enemies:
            enemy.direction = -direction
            enemy.move_by(0, drop_distance)
        return True

    for enemy in enemies:
        enemy.move_by(direction * distance, 0)
    return False
