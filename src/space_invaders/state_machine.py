"""
Game states and the stack that holds them

Only the state on top of the stack is active: it alone is ticked, drawn and
told about key presses.

- ``move_to_state`` replaces the top, calling ``leave`` then ``enter``
- ``push_state`` covers the top without telling it (e.g. pausing)
- ``pop_state`` removes the top, calling ``leave``; the state underneath
  picks up on the next tick without being told
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from space_invaders.errors import StateCallbackError
from space_invaders.utils import logger

if TYPE_CHECKING:
    from space_invaders.session import GameSession
    from space_invaders.surface import DrawSurface


class State:
    """
    Base class for game states

    Every callback is a no-op, subclasses override the ones they need.
    """

    def enter(self, session: "GameSession") -> None:
        """Called before the state becomes active."""

    def leave(self, session: "GameSession") -> None:
        """Called before the state is removed by a pop or a move."""

    def update(self, session: "GameSession", dt: float) -> None:
        """Advance the simulation by ``dt`` seconds."""

    def draw(
        self, session: "GameSession", dt: float, surface: "DrawSurface"
    ) -> None:
        """Draw the state."""

    def key_down(self, session: "GameSession", code: int) -> None:
        """A key went down while this state was active."""

    def key_up(self, session: "GameSession", code: int) -> None:
        """A key went up while this state was active."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def call_state(state: State, callback: str, fn: Callable[[], None]) -> None:
    """
    Run a state callback, wrapping anything it raises

    :raise StateCallbackError: If the callback raises
    """
    try:
        fn()
    except StateCallbackError:
        raise
    except Exception as e:
        raise StateCallbackError(state, callback) from e


class StateMachine:
    """
    Stack of game states
    """

    def __init__(self):
        self._stack: list[State] = []

    def __len__(self) -> int:
        return len(self._stack)

    @property
    def depth(self) -> int:
        return len(self._stack)

    @property
    def states(self) -> tuple[State, ...]:
        """The stack, bottom first."""
        return tuple(self._stack)

    def current_state(self) -> State | None:
        """
        Return the active state

        :return: Top of the stack, or None if the stack is empty
        :rtype: State | None
        """
        return self._stack[-1] if self._stack else None

    def move_to_state(self, session: "GameSession", state: State) -> None:
        """
        Replace the active state

        :param session: Session passed to the callbacks
        :type session: GameSession

        :param state: New state
        :type state: State

        :raise StateCallbackError: If ``leave`` or ``enter`` raises. A failed
            ``leave`` keeps the old state on top, a failed ``enter`` keeps the
            new one off the stack.
        """
        current = self.current_state()
        if current is not None:
            call_state(current, "leave", lambda: current.leave(session))
            self._stack.pop()

        call_state(state, "enter", lambda: state.enter(session))
        self._stack.append(state)

        logger.debug(f"Moved from {current!r} to {state!r}")

    def push_state(self, session: "GameSession", state: State) -> None:
        """
        Put a state on top of the active one

        The covered state is not notified.

        :raise StateCallbackError: If ``enter`` raises, the state is not pushed
        """
        call_state(state, "enter", lambda: state.enter(session))
        self._stack.append(state)

        logger.debug(f"Pushed {state!r}, depth {len(self._stack)}")

    def pop_state(self, session: "GameSession") -> State | None:
        """
        Remove the active state

        Popping an empty stack does nothing.

        :return: The removed state, if any
        :rtype: State | None

        :raise StateCallbackError: If ``leave`` raises, the state stays on top
        """
        current = self.current_state()
        if current is None:
            return None

        call_state(current, "leave", lambda: current.leave(session))
        self._stack.pop()

        logger.debug(f"Popped {current!r}, depth {len(self._stack)}")
        return current
