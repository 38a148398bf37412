"""
Game session
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from space_invaders.config import GameConfig
from space_invaders.constants import START_LIVES
from space_invaders.errors import ConfigurationError
from space_invaders.geometry import Rectangle
from space_invaders.state_machine import State, StateMachine
from space_invaders.utils import logger

if TYPE_CHECKING:
    from space_invaders.highscores import HighScoreTable
    from space_invaders.surface import DrawSurface


class GameSession:  # pylint: disable=too-many-instance-attributes
    """
    Everything that changes while the game runs

    One session per game. It is created by the entry point and handed to
    every state callback, the loop and the input router.
    """

    def __init__(
        self,
        config: GameConfig,
        surface: "DrawSurface",
        width: int,
        height: int,
        scores: "HighScoreTable | None" = None,
    ):
        """
        :param config: Game settings
        :type config: GameConfig

        :param surface: Where states draw
        :type surface: DrawSurface

        :param width: Width of the surface
        :type width: int

        :param height: Height of the surface
        :type height: int

        :param scores: High score table, if scores are kept
        :type scores: HighScoreTable | None

        :raise ConfigurationError: If the surface has no area
        """
        self.config = config
        self.surface = surface
        self.scores = scores

        self.lives = START_LIVES
        self.level = 1
        self.score = 0

        self.pressed_keys: set[int] = set()
        self.states = StateMachine()

        self.width = 0
        self.height = 0
        self.bounds = Rectangle(0, 0, 0, 0)
        self.resize(width, height)

    def resize(self, width: int, height: int) -> None:
        """
        Centre the play field on a surface of the new size

        :raise ConfigurationError: If either dimension is not positive
        """
        if width <= 0 or height <= 0:
            raise ConfigurationError(
                f"Surface dimensions must be positive, got {width}x{height}"
            )

        self.width = width
        self.height = height
        self.bounds = Rectangle.centered(
            width / 2,
            height / 2,
            self.config.game_width,
            self.config.game_height,
        )
        logger.debug(f"Surface {width}x{height}, bounds {self.bounds}")

    def reset(self) -> None:
        """Start over with full lives, no score, on the first level."""
        self.lives = START_LIVES
        self.level = 1
        self.score = 0

    def lose_life(self) -> int:
        """Take a life away, never going below zero."""
        self.lives = max(0, self.lives - 1)
        logger.info(f"Life lost, {self.lives} left")
        return self.lives

    def current_state(self) -> State | None:
        return self.states.current_state()

    def move_to_state(self, state: State) -> None:
        self.states.move_to_state(self, state)

    def push_state(self, state: State) -> None:
        self.states.push_state(self, state)

    def pop_state(self) -> State | None:
        return self.states.pop_state(self)
