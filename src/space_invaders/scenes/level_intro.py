"""
Level intro, a countdown before each level
"""

from __future__ import annotations

import math

from space_invaders.constants import LEVEL_INTRO_SECONDS
from space_invaders.state_machine import State
from space_invaders.surface import Font
from space_invaders.utils import logger


class LevelIntroState(State):
    """
    Shows "Level N" and counts down before play starts
    """

    def __init__(self, level: int, countdown: float = LEVEL_INTRO_SECONDS):
        self.level = level
        self.countdown = countdown
        self.countdown_message = str(math.ceil(countdown))

    def __repr__(self) -> str:
        return f"LevelIntroState(level={self.level})"

    def enter(self, session):
        session.level = self.level
        logger.info(f"Level {self.level} starting")

    def update(self, session, dt):
        # pylint: disable=import-outside-toplevel
        from space_invaders.scenes.play import PlayState

        self.countdown -= dt
        if self.countdown > 0:
            self.countdown_message = str(math.ceil(self.countdown))
            return

        self.countdown = 0
        session.move_to_state(PlayState(session.config, self.level))

    def draw(self, session, dt, surface):
        surface.fill_text(
            f"Level {self.level}", session.width / 2, session.height / 2, Font(36)
        )
        surface.fill_text(
            f"Ready in {self.countdown_message}",
            session.width / 2,
            session.height / 2 + 36,
            Font(24),
        )
