"""
Constants for the game.
"""

from __future__ import annotations

WINDOW_SIZE = (800, 600)

START_LIVES = 3

# Key codes understood by the input router
MAX_KEY_CODE = 255
KEY_ESCAPE = 27
KEY_SPACE = 32
KEY_LEFT = 37
KEY_RIGHT = 39
KEY_P = 80

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GRAY = (128, 128, 128)
RED = (255, 0, 0)
BLUE = (0, 0, 255)
PLAYER_COLOR = (0, 110, 255)
ENEMY_COLOR = (0, 200, 60)
ROCKET_COLOR = (255, 40, 40)
BOMB_COLOR = (255, 85, 170)

INVADER_RANKS = 5
INVADER_FILES = 10
LEVEL_INTRO_SECONDS = 3.0
