"""
Play scene

The scene is a world (player, invaders, rockets, bombs) stepped by a
pipeline of small systems, each one doing one job per tick.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from space_invaders import physics, renderer
from space_invaders.config import GameConfig
from space_invaders.constants import (
    INVADER_FILES,
    INVADER_RANKS,
    KEY_LEFT,
    KEY_P,
    KEY_RIGHT,
    KEY_SPACE,
)
from space_invaders.entities import Bomb, Enemy, Player, Rocket
from space_invaders.geometry import Rectangle, Vector2d
from space_invaders.scenes.game_over import GameOverState
from space_invaders.scenes.level_intro import LevelIntroState
from space_invaders.scenes.pause import PauseState
from space_invaders.state_machine import State
from space_invaders.surface import Font
from space_invaders.utils import logger

if TYPE_CHECKING:
    from space_invaders.session import GameSession

LEVEL_BONUS = 50


@dataclass(frozen=True)
class LevelSettings:
    """
    Gameplay speeds for one level, harder as levels go up
    """

    ship_speed: float
    invader_velocity: float
    bomb_rate: float
    bomb_min_velocity: float
    bomb_max_velocity: float
    rocket_max_fire_rate: float

    @classmethod
    def for_level(cls, config: GameConfig, level: int) -> "LevelSettings":
        multiplier = level * config.level_difficulty_multiplier
        limit_level = min(level, config.limit_level_increase)
        return cls(
            ship_speed=config.ship_speed,
            invader_velocity=config.invader_initial_velocity
            + 1.5 * (multiplier * config.invader_initial_velocity),
            bomb_rate=config.bomb_rate + multiplier * config.bomb_rate,
            bomb_min_velocity=config.bomb_min_velocity
            + multiplier * config.bomb_min_velocity,
            bomb_max_velocity=config.bomb_max_velocity
            + multiplier * config.bomb_max_velocity,
            rocket_max_fire_rate=config.rocket_max_fire_rate + 0.4 * limit_level,
        )


@dataclass
class PlayWorld:  # pylint: disable=too-many-instance-attributes
    """
    Everything on the field during a level
    """

    bounds: Rectangle
    settings: LevelSettings
    player: Player
    enemies: list[Enemy] = field(default_factory=list)
    rockets: list[Rocket] = field(default_factory=list)
    bombs: list[Bomb] = field(default_factory=list)
    invader_velocity: float = 0.0
    rocket_cooldown: float = 0.0
    invaded: bool = False

    def entities(self) -> list:
        return [self.player, *self.enemies, *self.rockets, *self.bombs]


@dataclass
class TickContext:
    """
    What every system gets for one tick
    """

    session: "GameSession"
    world: PlayWorld
    dt: float
    rng: random.Random


class System(Protocol):
    name: str
    order: int

    def step(self, ctx: TickContext) -> None: ...


@dataclass
class ShipSystem:
    """
    Move the ship from the held arrow keys, clamped to the field
    """

    name: str = "ship"
    order: int = 10

    def step(self, ctx: TickContext):
        keys = ctx.session.pressed_keys
        player = ctx.world.player
        bounds = ctx.world.bounds

        move_x = (KEY_RIGHT in keys) - (KEY_LEFT in keys)
        player.move_by(move_x * ctx.world.settings.ship_speed * ctx.dt, 0)

        x = max(bounds.left, min(bounds.right - player.width, player.x))
        player.move_to(x, player.y)


@dataclass
class FireSystem:
    """
    Fire a rocket while space is held

    One rocket on screen at a time, and no faster than the level's fire rate.
    """

    name: str = "fire"
    order: int = 20

    def step(self, ctx: TickContext):
        world = ctx.world
        world.rocket_cooldown = max(0.0, world.rocket_cooldown - ctx.dt)

        if KEY_SPACE not in ctx.session.pressed_keys:
            return
        if world.rockets or world.rocket_cooldown > 0:
            return

        player = world.player
        rocket = Rocket(
            Vector2d(0, 0), velocity=ctx.session.config.rocket_velocity
        )
        rocket.move_to(
            player.x + player.width / 2 - rocket.width / 2,
            player.y - rocket.height,
        )
        world.rockets.append(rocket)
        world.rocket_cooldown = 1 / world.settings.rocket_max_fire_rate

        logger.debug(f"Rocket fired at {rocket.position}")


@dataclass
class ProjectileSystem:
    """
    Move rockets and bombs, forgetting the ones that left the field
    """

    name: str = "projectiles"
    order: int = 30

    def step(self, ctx: TickContext):
        world = ctx.world
        world.rockets = physics.move_projectiles(world.rockets, world.bounds, ctx.dt)
        world.bombs = physics.move_projectiles(world.bombs, world.bounds, ctx.dt)


@dataclass
class InvaderSystem:
    """
    March the invaders, dropping a row at each side of the field
    """

    name: str = "invaders"
    order: int = 40

    def step(self, ctx: TickContext):
        world = ctx.world
        physics.move_formation(
            world.enemies,
            world.bounds,
            world.invader_velocity * ctx.dt,
            ctx.session.config.invader_drop_distance,
        )
        for enemy in world.enemies:
            if enemy.rect.bottom >= world.bounds.bottom:
                world.invaded = True
                break


@dataclass
class BombSystem:
    """
    Let the front invader of each file drop a bomb now and then
    """

    name: str = "bombs"
    order: int = 50

    def step(self, ctx: TickContext):
        world = ctx.world
        settings = world.settings
        chance = settings.bomb_rate * ctx.dt

        for enemy in front_rank(world.enemies):
            if ctx.rng.random() >= chance:
                continue
            bomb = Bomb(
                Vector2d(0, 0),
                velocity=settings.bomb_min_velocity
                + ctx.rng.random()
                * (settings.bomb_max_velocity - settings.bomb_min_velocity),
            )
            bomb.move_to(
                enemy.x + enemy.width / 2 - bomb.width / 2, enemy.rect.bottom
            )
            world.bombs.append(bomb)


@dataclass
class CollisionSystem:
    """
    Rockets kill invaders, bombs and invaders cost the player a life
    """

    name: str = "collisions"
    order: int = 60

    def step(self, ctx: TickContext):
        world = ctx.world
        session = ctx.session
        config = session.config

        for rocket in list(world.rockets):
            for enemy in world.enemies:
                if enemy.rect.intersects(rocket.rect):
                    world.enemies.remove(enemy)
                    world.rockets.remove(rocket)
                    session.score += config.points_per_invader
                    world.invader_velocity += config.invader_acceleration
                    logger.debug(f"Hit! Score: {session.score}")
                    break

        player_rect = world.player.rect
        for bomb in list(world.bombs):
            if bomb.rect.intersects(player_rect):
                world.bombs.remove(bomb)
                session.lose_life()

        for enemy in world.enemies:
            if enemy.rect.intersects(player_rect):
                world.invaded = True
                break


def front_rank(enemies: list[Enemy]) -> list[Enemy]:
    """Return the lowest invader of every file."""
    front: dict[int, Enemy] = {}
    for enemy in enemies:
        current = front.get(enemy.file)
        if current is None or enemy.rank > current.rank:
            front[enemy.file] = enemy
    return [front[f] for f in sorted(front)]


def default_systems() -> list[System]:
    return [
        ShipSystem(),
        FireSystem(),
        ProjectileSystem(),
        InvaderSystem(),
        BombSystem(),
        CollisionSystem(),
    ]


class PlayState(State):
    """
    A level being played
    """

    def __init__(
        self,
        config: GameConfig,
        level: int,
        rng: random.Random | None = None,
        systems: list[System] | None = None,
    ):
        """
        :param config: Game settings
        :type config: GameConfig

        :param level: Level number, starting at 1
        :type level: int

        :param rng: Random source for bombs
        :type rng: random.Random | None

        :param systems: Systems stepping the world, the default pipeline if
            not given
        :type systems: list[System] | None
        """
        self.config = config
        self.level = level
        self.settings = LevelSettings.for_level(config, level)
        self.rng = rng or random.Random()
        self.systems = sorted(systems or default_systems(), key=lambda s: s.order)
        self.world: PlayWorld | None = None

    def __repr__(self) -> str:
        return f"PlayState(level={self.level})"

    def enter(self, session):
        bounds = session.bounds
        player = Player.centered_at(
            bounds.left + bounds.width / 2, bounds.bottom - Player.height / 2
        )
        self.world = PlayWorld(
            bounds=bounds,
            settings=self.settings,
            player=player,
            enemies=self._spawn_invaders(session),
            invader_velocity=self.settings.invader_velocity,
        )
        logger.debug(
            f"Level {self.level}: {len(self.world.enemies)} invaders, "
            f"settings {self.settings}"
        )

    def _spawn_invaders(self, session) -> list[Enemy]:
        bounds = session.bounds
        cx = bounds.left + bounds.width / 2
        spacing = 200 / INVADER_FILES

        enemies = []
        for rank in range(INVADER_RANKS):
            for file in range(INVADER_FILES):
                enemy = Enemy(Vector2d(0, 0), rank=rank, file=file)
                enemy.move_to(
                    cx + (file - INVADER_FILES / 2) * spacing,
                    bounds.top + rank * 20,
                )
                enemies.append(enemy)
        return enemies

    def update(self, session, dt):
        world = self.world
        if world is None:
            return

        # The session may have been resized since the level started
        world.bounds = session.bounds

        ctx = TickContext(session=session, world=world, dt=dt, rng=self.rng)
        for system in self.systems:
            system.step(ctx)

        if world.invaded:
            logger.info("The invaders landed")
            session.lives = 0

        if session.lives <= 0:
            session.move_to_state(GameOverState())
            return

        if not world.enemies:
            session.score += self.level * LEVEL_BONUS
            session.move_to_state(LevelIntroState(self.level + 1))

    def draw(self, session, dt, surface):
        world = self.world
        if world is None:
            return

        renderer.render(surface, world.entities())

        bottom = world.bounds.bottom + 14
        surface.fill_text(
            f"Lives: {session.lives}",
            world.bounds.left,
            bottom,
            Font(14),
            align="left",
        )
        surface.fill_text(
            f"Score: {session.score}, Level: {self.level}",
            world.bounds.right,
            bottom,
            Font(14),
            align="right",
        )

        if self.config.debug_mode:
            renderer.render_bounds(surface, world.bounds)
            surface.fill_text(
                f"Invaders: {len(world.enemies)} Rockets: {len(world.rockets)} "
                f"Bombs: {len(world.bombs)}",
                world.bounds.left,
                world.bounds.top - 10,
                Font(10),
                align="left",
            )

    def key_down(self, session, code):
        if code == KEY_P:
            session.push_state(PauseState())
