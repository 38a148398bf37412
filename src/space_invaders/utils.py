"""
Space Invaders utils
"""

from __future__ import annotations

import logging
from pathlib import Path

import pygame

logger = logging.getLogger("space_invaders")


def configure_logging(debug: bool = False) -> None:
    """
    Configure the root logger for the game

    :param debug: Log everything when True
    :type debug: bool
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def default_scores_path() -> Path:
    """Return where the high score table lives unless told otherwise."""
    return Path.home() / ".space_invaders" / "highscores.json"


def set_screen(caption: str, width: int, height: int) -> pygame.Surface:
    """
    Set the screen

    :param caption: Caption of the screen
    :type caption: str

    :param width: Width of the screen
    :type width: int

    :param height: Height of the screen
    :type height: int

    :return: pygame.Surface
    """
    screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
    pygame.display.set_caption(caption)

    return screen
