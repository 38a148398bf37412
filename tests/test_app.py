import random

import pygame
import pytest

from space_invaders import app
from space_invaders.config import GameConfig
from space_invaders.constants import (
    KEY_ESCAPE,
    KEY_LEFT,
    KEY_P,
    KEY_RIGHT,
    KEY_SPACE,
)
from space_invaders.scenes import LevelIntroState, PlayState, WelcomeState
from space_invaders.surface import Font, PygameSurface


@pytest.fixture
def game(tmp_path):
    game = app.SpaceInvaders(GameConfig(), (640, 480))
    yield game
    pygame.quit()


def test_translate_key():
    assert app.translate_key(pygame.K_SPACE) == KEY_SPACE
    assert app.translate_key(pygame.K_LEFT) == KEY_LEFT
    assert app.translate_key(pygame.K_p) == KEY_P
    assert app.translate_key(pygame.K_a) == pygame.K_a


def test_parse_args():
    args = app.parse_args(["--fps", "30", "--debug"])
    assert args.fps == 30
    assert args.debug
    assert args.width == 400


def test_invalid_configuration_exits_with_error():
    assert app.run(["--fps", "0"]) == 2


def test_pygame_surface_draws(game):
    surface = game.surface
    surface.fill_rect(10, 10, 5, 5, (255, 0, 0))
    assert tuple(surface.surface.get_at((12, 12)))[:3] == (255, 0, 0)

    surface.fill_text("Space Invaders", 320, 240, Font(16))
    surface.fill_text("left", 0, 10, Font(16), align="left")
    surface.fill_text("right", 640, 10, Font(16), align="right")
    assert surface.size == (640, 480)


def test_quit_event_stops_the_game(game):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert game.run() == 0


def test_key_events_reach_the_active_state(game):
    game.session.move_to_state(WelcomeState())
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))

    game.handle_events(game.session)

    assert isinstance(game.session.current_state(), LevelIntroState)
    assert KEY_SPACE in game.session.pressed_keys

    pygame.event.post(pygame.event.Event(pygame.KEYUP, key=pygame.K_SPACE))
    game.handle_events(game.session)
    assert game.session.pressed_keys == set()


def test_session_draws_on_the_display(game):
    assert isinstance(game.session.surface, PygameSurface)
    assert (game.session.width, game.session.height) == (640, 480)


def test_colliding_keys_are_not_translated_to_game_codes():
    assert app.translate_key(pygame.K_QUOTE) not in app.RESERVED_CODES
    assert app.translate_key(pygame.K_PERCENT) not in app.RESERVED_CODES
    assert app.translate_key(pygame.K_ESCAPE) == KEY_ESCAPE


def test_quote_and_percent_do_not_move_the_ship(game):
    session = game.session
    play = PlayState(session.config, 1, rng=random.Random(0))
    session.move_to_state(play)
    x = play.world.player.x

    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_QUOTE))
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_PERCENT))
    game.handle_events(session)

    assert session.pressed_keys == set()
    play.update(session, 0.02)
    assert play.world.player.x == x


def test_quote_release_keeps_right_arrow_held(game):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RIGHT))
    pygame.event.post(pygame.event.Event(pygame.KEYUP, key=pygame.K_QUOTE))
    game.handle_events(game.session)

    assert game.session.pressed_keys == {KEY_RIGHT}
