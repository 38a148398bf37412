"""
Keyboard input
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from space_invaders.constants import MAX_KEY_CODE
from space_invaders.errors import InputOutOfRangeError
from space_invaders.state_machine import call_state
from space_invaders.utils import logger

if TYPE_CHECKING:
    from space_invaders.session import GameSession


def validate_key_code(code: int) -> int:
    """
    Check a key code is one the router understands

    :raise InputOutOfRangeError: If the code is not in 0..MAX_KEY_CODE
    """
    if isinstance(code, bool) or not isinstance(code, int):
        raise InputOutOfRangeError(code)
    if not 0 <= code <= MAX_KEY_CODE:
        raise InputOutOfRangeError(code)
    return code


class InputRouter:
    """
    Keeps track of held keys and tells the active state about key presses

    States read ``session.pressed_keys`` for held keys (moving) and get
    ``key_down``/``key_up`` for one-shot actions (starting the game).
    """

    def __init__(self, session: "GameSession"):
        self.session = session

    def key_down(self, code: int) -> bool:
        """
        A key went down

        :return: False if the code was ignored
        :rtype: bool
        """
        try:
            validate_key_code(code)
        except InputOutOfRangeError as e:
            logger.warning(f"Ignoring key down: {e}")
            return False

        self.session.pressed_keys.add(code)

        state = self.session.current_state()
        if state is not None:
            call_state(
                state, "key_down", lambda: state.key_down(self.session, code)
            )
        return True

    def key_up(self, code: int) -> bool:
        """
        A key went up

        :return: False if the code was ignored
        :rtype: bool
        """
        try:
            validate_key_code(code)
        except InputOutOfRangeError as e:
            logger.warning(f"Ignoring key up: {e}")
            return False

        self.session.pressed_keys.discard(code)

        state = self.session.current_state()
        if state is not None:
            call_state(state, "key_up", lambda: state.key_up(self.session, code))
        return True
