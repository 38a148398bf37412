import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from space_invaders.config import GameConfig
from space_invaders.loop import ManualClock
from space_invaders.session import GameSession
from space_invaders.state_machine import State


class RecordingSurface:
    """Draw surface keeping a list of what was drawn."""

    def __init__(self):
        self.calls = []

    def fill_rect(self, x, y, width, height, color):
        self.calls.append(("rect", x, y, width, height, color))

    def fill_text(self, text, x, y, font, color=(255, 255, 255), align="center"):
        self.calls.append(("text", text, x, y))

    @property
    def texts(self):
        return [c[1] for c in self.calls if c[0] == "text"]

    @property
    def rects(self):
        return [c[1:] for c in self.calls if c[0] == "rect"]


class RecordingState(State):
    """State logging every callback into a shared journal."""

    def __init__(self, name, journal):
        self.name = name
        self.journal = journal

    def enter(self, session):
        self.journal.append((self.name, "enter"))

    def leave(self, session):
        self.journal.append((self.name, "leave"))

    def update(self, session, dt):
        self.journal.append((self.name, "update"))

    def draw(self, session, dt, surface):
        self.journal.append((self.name, "draw"))

    def key_down(self, session, code):
        self.journal.append((self.name, "key_down", code))

    def key_up(self, session, code):
        self.journal.append((self.name, "key_up", code))

    def __repr__(self):
        return f"RecordingState({self.name!r})"


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def session(config, surface):
    return GameSession(config, surface, 800, 600)


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def journal():
    return []


@pytest.fixture
def make_state(journal):
    def _make(name):
        return RecordingState(name, journal)

    return _make
