"""
Welcome screen
"""

from __future__ import annotations

from space_invaders import physics, renderer
from space_invaders.constants import KEY_SPACE
from space_invaders.entities import Enemy, Entity, Player
from space_invaders.geometry import Vector2d
from space_invaders.scenes.level_intro import LevelIntroState
from space_invaders.state_machine import State
from space_invaders.surface import Font

# pixels per second
DEMO_SPEED = 50


class WelcomeState(State):
    """
    Shows the title and waits for the space bar

    Behind the title a ship and a few invaders bounce up and down the field.
    """

    def __init__(self):
        self.demo: list[Entity] = []

    def enter(self, session):
        bounds = session.bounds
        self.demo = [
            Player(Vector2d(bounds.left + 100, bounds.bottom - 25), axis="y"),
            Enemy(Vector2d(bounds.left + 20, bounds.top + 25), axis="y"),
            Enemy(Vector2d(bounds.left + 80, bounds.top + 25), axis="y"),
            Enemy(Vector2d(bounds.left + 160, bounds.top + 25), axis="y"),
        ]

    def update(self, session, dt):
        physics.update(self.demo, session.bounds, DEMO_SPEED * dt)

    def draw(self, session, dt, surface):
        renderer.render(surface, self.demo)
        surface.fill_text(
            "Space Invaders",
            session.width / 2,
            session.height / 2 - 40,
            Font(30),
        )
        surface.fill_text(
            "Press 'Space' to start.",
            session.width / 2,
            session.height / 2,
            Font(16),
        )

    def key_down(self, session, code):
        if code == KEY_SPACE:
            session.reset()
            session.move_to_state(LevelIntroState(session.level))
