"""
Pause screen
"""

from __future__ import annotations

from space_invaders.constants import KEY_P
from space_invaders.state_machine import State
from space_invaders.surface import Font


class PauseState(State):
    """
    Pushed over the play state, which is not told about it

    Pressing P again pops back to the game.
    """

    def key_down(self, session, code):
        if code == KEY_P:
            session.pop_state()

    def draw(self, session, dt, surface):
        surface.fill_text(
            "Paused", session.width / 2, session.height / 2 - 40, Font(14)
        )
