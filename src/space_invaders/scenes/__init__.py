"""
Game scenes, one state per screen
"""

from space_invaders.scenes.game_over import GameOverState
from space_invaders.scenes.level_intro import LevelIntroState
from space_invaders.scenes.pause import PauseState
from space_invaders.scenes.play import PlayState
from space_invaders.scenes.welcome import WelcomeState

__all__ = [
    "GameOverState",
    "LevelIntroState",
    "PauseState",
    "PlayState",
    "WelcomeState",
]
