"""
Game configuration
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from space_invaders.errors import ConfigurationError

# Keys used by the browser version of the game
_CAMEL_CASE_KEYS = {
    "gameWidth": "game_width",
    "gameHeight": "game_height",
    "fps": "fps",
    "debugMode": "debug_mode",
    "shipSpeed": "ship_speed",
    "rocketVelocity": "rocket_velocity",
    "rocketMaxFireRate": "rocket_max_fire_rate",
    "invaderInitialVelocity": "invader_initial_velocity",
    "invaderAcceleration": "invader_acceleration",
    "invaderDropDistance": "invader_drop_distance",
    "bombRate": "bomb_rate",
    "bombMinVelocity": "bomb_min_velocity",
    "bombMaxVelocity": "bomb_max_velocity",
    "pointsPerInvader": "points_per_invader",
    "levelDifficultyMultiplier": "level_difficulty_multiplier",
    "limitLevelIncrease": "limit_level_increase",
}


@dataclass(frozen=True)
class GameConfig:  # pylint: disable=too-many-instance-attributes
    """
    Immutable game settings, set once at start up

    :raise ConfigurationError: If the tick rate or field size is not positive
    """

    game_width: int = 400
    game_height: int = 300
    fps: int = 50
    debug_mode: bool = False

    # gameplay tuning
    ship_speed: float = 120.0
    rocket_velocity: float = 120.0
    rocket_max_fire_rate: float = 2.0
    invader_initial_velocity: float = 25.0
    invader_acceleration: float = 0.0
    invader_drop_distance: float = 20.0
    bomb_rate: float = 0.05
    bomb_min_velocity: float = 50.0
    bomb_max_velocity: float = 50.0
    points_per_invader: int = 5
    level_difficulty_multiplier: float = 0.2
    limit_level_increase: int = 25

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "debug_mode":
                if not isinstance(value, bool):
                    raise ConfigurationError(f"debug_mode must be a bool, got {value!r}")
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(f"{f.name} must be a number, got {value!r}")

        if self.fps <= 0:
            raise ConfigurationError(f"fps must be positive, got {self.fps}")
        if self.game_width <= 0 or self.game_height <= 0:
            raise ConfigurationError(
                f"Field dimensions must be positive, got "
                f"{self.game_width}x{self.game_height}"
            )
        if self.rocket_max_fire_rate <= 0:
            raise ConfigurationError("rocket_max_fire_rate must be positive")
        if self.bomb_min_velocity > self.bomb_max_velocity:
            raise ConfigurationError("bomb_min_velocity exceeds bomb_max_velocity")

    @property
    def tick_seconds(self) -> float:
        """Length of one tick in seconds."""
        return 1 / self.fps

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GameConfig":
        """
        Build the config from a dictionary

        Accepts both ``gameWidth`` style keys and the attribute names.

        :param data: Settings
        :type data: Mapping[str, Any]

        :return: GameConfig
        :rtype: GameConfig

        :raise ConfigurationError: On unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _CAMEL_CASE_KEYS.get(key, key)
            if name not in known:
                raise ConfigurationError(f"Unknown config option: {key}")
            kwargs[name] = value

        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Return the settings keyed by attribute name."""
        return {f.name: getattr(self, f.name) for f in fields(self)}
