"""
Fixed tick game loop
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Callable, Protocol

from space_invaders.errors import StateCallbackError
from space_invaders.state_machine import call_state
from space_invaders.utils import logger

if TYPE_CHECKING:
    from space_invaders.session import GameSession


class Clock(Protocol):
    def now(self) -> float: ...

    def sleep(self, seconds: float) -> None: ...


class SystemClock:
    """
    Wall clock
    """

    def now(self) -> float:
        return time.monotonic()

    def sleep(self, seconds: float) -> None:
        if seconds > 0:
            time.sleep(seconds)


class ManualClock:
    """
    Virtual clock, time only passes when told to
    """

    def __init__(self, start: float = 0.0):
        self.time = start
        self.slept: list[float] = []

    def now(self) -> float:
        return self.time

    def advance(self, seconds: float) -> None:
        self.time += seconds

    def sleep(self, seconds: float) -> None:
        self.slept.append(seconds)
        if seconds > 0:
            self.advance(seconds)


Hook = Callable[["GameSession"], None]


class GameLoop:
    """
    Ticks the active state at the configured rate

    The loop holds no game logic: each tick updates then draws whatever state
    is on top of the session's stack.
    """

    def __init__(
        self,
        session: "GameSession",
        clock: Clock | None = None,
        before_tick: Hook | None = None,
        after_tick: Hook | None = None,
    ):
        """
        :param session: Session to run
        :type session: GameSession

        :param clock: Time source, the wall clock by default
        :type clock: Clock | None

        :param before_tick: Called before every tick, e.g. to pump events
        :type before_tick: Callable[[GameSession], None] | None

        :param after_tick: Called after every tick, e.g. to flip the display
        :type after_tick: Callable[[GameSession], None] | None
        """
        self.session = session
        self.clock = clock or SystemClock()
        self.before_tick = before_tick
        self.after_tick = after_tick

        self.ticks = 0
        self._running = False
        self._in_tick = False

    @property
    def running(self) -> bool:
        return self._running

    @property
    def period(self) -> float:
        return self.session.config.tick_seconds

    def stop(self) -> None:
        """Stop once the current tick is done."""
        logger.debug("Stopping the game loop")
        self._running = False

    def tick(self) -> None:
        """
        Update then draw the active state once

        Does nothing when no state is active.

        :raise StateCallbackError: If ``update`` or ``draw`` raises; the loop
            is stopped before the error propagates
        :raise RuntimeError: If called while a tick is already running
        """
        if self._in_tick:
            raise RuntimeError("Game loop re-entered during a tick")

        self._in_tick = True
        try:
            state = self.session.current_state()
            if state is None:
                return

            dt = self.period
            session = self.session
            call_state(state, "update", lambda: state.update(session, dt))
            call_state(
                state, "draw", lambda: state.draw(session, dt, session.surface)
            )
        except StateCallbackError as e:
            logger.exception(f"Fatal error in {e}")
            self._running = False
            raise
        finally:
            self._in_tick = False
            self.ticks += 1

    def run(self, max_ticks: int | None = None) -> int:
        """
        Run ticks until stopped

        :param max_ticks: Stop after this many ticks
        :type max_ticks: int | None

        :return: Number of ticks run
        :rtype: int
        """
        if self._running:
            raise RuntimeError("Game loop is already running")

        logger.info(f"Running the game loop at {self.session.config.fps} fps")
        self._running = True
        count = 0
        try:
            while self._running and (max_ticks is None or count < max_ticks):
                started = self.clock.now()

                if self.before_tick is not None:
                    self.before_tick(self.session)
                if not self._running:
                    break

                self.tick()
                count += 1

                if self.after_tick is not None:
                    self.after_tick(self.session)

                elapsed = self.clock.now() - started
                self.clock.sleep(max(0.0, self.period - elapsed))
        finally:
            self._running = False

        return count
