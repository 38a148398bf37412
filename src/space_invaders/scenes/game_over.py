"""
Game over screen
"""

from __future__ import annotations

from space_invaders.constants import KEY_SPACE
from space_invaders.highscores import ANONYMOUS
from space_invaders.scenes.level_intro import LevelIntroState
from space_invaders.state_machine import State
from space_invaders.surface import Font
from space_invaders.utils import logger

SHOWN_SCORES = 5


class GameOverState(State):
    """
    Shows the final score and the best scores so far
    """

    def __init__(self):
        self.rank: int | None = None

    def enter(self, session):
        logger.info(f"Game over, score {session.score} on level {session.level}")

        table = session.scores
        if table is None:
            return

        self.rank = table.submit(session.score, ANONYMOUS)
        if self.rank is not None:
            table.save()

    def draw(self, session, dt, surface):
        cx = session.width / 2
        cy = session.height / 2

        surface.fill_text("Game Over!", cx, cy - 40, Font(30))
        surface.fill_text(
            f"You scored {session.score} and got to level {session.level}",
            cx,
            cy,
            Font(16),
        )
        if self.rank is not None:
            surface.fill_text(f"New high score! #{self.rank}", cx, cy + 24, Font(16))

        y = cy + 56
        if session.scores is not None:
            for i, entry in enumerate(session.scores.entries[:SHOWN_SCORES]):
                surface.fill_text(
                    f"{i + 1}. {entry.name} {entry.score}", cx, y, Font(14)
                )
                y += 18

        surface.fill_text("Press 'Space' to play again.", cx, y + 16, Font(16))

    def key_down(self, session, code):
        if code == KEY_SPACE:
            session.reset()
            session.move_to_state(LevelIntroState(1))
