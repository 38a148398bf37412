"""
Space Invaders errors
"""

from __future__ import annotations


class SpaceInvadersError(Exception):
    """
    Base class for every error raised by the game
    """


class ConfigurationError(SpaceInvadersError):
    """
    Invalid settings, raised while building the game configuration
    """


class StateCallbackError(SpaceInvadersError):
    """
    A state callback raised while being dispatched

    The original exception is available as ``__cause__``.
    """

    def __init__(self, state: object, callback: str):
        """
        :param state: State whose callback failed
        :type state: object

        :param callback: Name of the callback (enter, leave, update, ...)
        :type callback: str
        """
        super().__init__(f"{type(state).__name__}.{callback} failed")
        self.state = state
        self.callback = callback


class InputOutOfRangeError(SpaceInvadersError):
    """
    A key code outside the range the input router understands
    """

    def __init__(self, code: int):
        super().__init__(f"Key code out of range: {code}")
        self.code = code
