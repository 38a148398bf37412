"""
Space Invaders game, pygame host
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import pygame

from space_invaders.config import GameConfig
from space_invaders.constants import (
    KEY_ESCAPE,
    KEY_LEFT,
    KEY_P,
    KEY_RIGHT,
    KEY_SPACE,
    MAX_KEY_CODE,
    WINDOW_SIZE,
)
from space_invaders.errors import ConfigurationError, StateCallbackError
from space_invaders.highscores import HighScoreTable
from space_invaders.input import InputRouter
from space_invaders.loop import GameLoop
from space_invaders.scenes import WelcomeState
from space_invaders.session import GameSession
from space_invaders.starfield import Starfield
from space_invaders.surface import PygameSurface
from space_invaders.utils import (
    configure_logging,
    default_scores_path,
    logger,
    set_screen,
)

# pygame keys that map to a different key code
PYGAME_KEYS = {
    pygame.K_SPACE: KEY_SPACE,
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_RIGHT: KEY_RIGHT,
    pygame.K_p: KEY_P,
    pygame.K_ESCAPE: KEY_ESCAPE,
}


# Codes only the keys above may produce
RESERVED_CODES = frozenset(PYGAME_KEYS.values())


def translate_key(key: int) -> int:
    """
    Turn a pygame key into the key code states expect

    Keys without a translation are passed through as they are, unless they
    would collide with a reserved code (``K_QUOTE`` is 39, the same as
    ``KEY_RIGHT``). Those are moved past ``MAX_KEY_CODE`` so the input router
    ignores them.
    """
    if key in PYGAME_KEYS:
        return PYGAME_KEYS[key]
    if key in RESERVED_CODES:
        return MAX_KEY_CODE + 1 + key
    return key


class SpaceInvaders:
    """
    Space Invaders window

    Owns the pygame display, the star field behind the game and the loop.
    """

    def __init__(
        self,
        config: GameConfig,
        window_size: tuple[int, int] = WINDOW_SIZE,
        scores: HighScoreTable | None = None,
    ):
        """
        :param config: Game settings
        :type config: GameConfig

        :param window_size: Initial size of the window
        :type window_size: tuple[int, int]

        :param scores: High score table
        :type scores: HighScoreTable | None
        """
        logger.debug("Initializing Space Invaders")
        pygame.init()

        width, height = window_size
        self._screen = set_screen("Space Invaders", width, height)
        self.surface = PygameSurface(self._screen)

        self.session = GameSession(config, self.surface, width, height, scores)
        self.router = InputRouter(self.session)

        self.starfield = Starfield(width, height)
        self.starfield.start()

        self.loop = GameLoop(
            self.session,
            before_tick=self.handle_events,
            after_tick=self.draw_stuff,
        )

    def handle_events(self, session: GameSession):
        """
        Handle the events, then draw the stars behind the coming frame
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logger.debug("Quitting the game")
                self.loop.stop()
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.loop.stop()
                self.router.key_down(translate_key(event.key))
            elif event.type == pygame.KEYUP:
                self.router.key_up(translate_key(event.key))
            elif event.type == pygame.VIDEORESIZE:
                self._resize(event.w, event.h)

        self.starfield.update(session.config.tick_seconds)
        self.starfield.draw(self.surface)

    def _resize(self, width: int, height: int):
        logger.debug(f"Resizing to {width}x{height}")
        self._screen = set_screen("Space Invaders", width, height)
        self.surface.surface = self._screen
        self.session.resize(width, height)
        self.starfield.resize(width, height, self.surface)

    def draw_stuff(self, session: GameSession):
        pygame.display.flip()

    def run(self) -> int:
        """
        Run the game until the window is closed

        :return: Number of ticks run
        :rtype: int
        """
        logger.debug("Running the game")

        self.session.move_to_state(WelcomeState())
        try:
            return self.loop.run()
        finally:
            pygame.quit()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    defaults = GameConfig()
    parser = argparse.ArgumentParser(prog="space-invaders", description=__doc__)
    parser.add_argument("--width", type=int, default=defaults.game_width)
    parser.add_argument("--height", type=int, default=defaults.game_height)
    parser.add_argument("--fps", type=int, default=defaults.fps)
    parser.add_argument("--debug", action="store_true")
    parser.add_argument("--window-width", type=int, default=WINDOW_SIZE[0])
    parser.add_argument("--window-height", type=int, default=WINDOW_SIZE[1])
    parser.add_argument(
        "--scores",
        type=Path,
        default=None,
        help="high score file (default: ~/.space_invaders/highscores.json)",
    )
    return parser.parse_args(argv)


def run(argv: list[str] | None = None) -> int:
    """
    Main entry point for Space Invaders

    :return: Process exit status
    :rtype: int
    """
    args = parse_args(argv)
    configure_logging(args.debug)

    try:
        config = GameConfig.from_dict(
            {
                "gameWidth": args.width,
                "gameHeight": args.height,
                "fps": args.fps,
                "debugMode": args.debug,
            }
        )
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    scores = HighScoreTable(args.scores or default_scores_path())
    scores.load()

    logger.info("Starting Space Invaders...")
    logger.info(config.to_dict())

    game = SpaceInvaders(
        config, (args.window_width, args.window_height), scores=scores
    )
    try:
        game.run()
    except StateCallbackError as e:
        logger.error(f"Game stopped: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(run())
