"""Player actions and the key-state map the simulation reads each tick."""

from __future__ import annotations

from enum import Enum, auto
from typing import Iterable, Protocol


class Action(Enum):
    """Inputs the simulation understands."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    CHOP = auto()
    MINE = auto()
    CRAFT = auto()


MOVEMENT_ACTIONS = (Action.UP, Action.DOWN, Action.LEFT, Action.RIGHT)


class InputSource(Protocol):
    """Anything that can answer whether an action is currently held."""

    def is_action_held(self, action: Action) -> bool: ...


class ActionState:
    """
    Pressed/released state for every action.

    The host event loop presses and releases actions between ticks. The
    simulation also releases actions itself: craft after it has been seen
    once, and movement when the player can no longer move.
    """

    def __init__(self, held: Iterable[Action] = ()):
        self._held: set[Action] = set(held)

    def is_action_held(self, action: Action) -> bool:
        """Check whether an action is currently held."""
        return action in self._held

    def press(self, action: Action) -> None:
        """Mark an action as held."""
        self._held.add(action)

    def release(self, action: Action) -> None:
        """Mark an action as released; releasing an unheld action is a no-op."""
        self._held.discard(action)

    def release_all(self, actions: Iterable[Action]) -> None:
        """Release each of the given actions."""
        for action in actions:
            self._held.discard(action)

    def clear(self) -> None:
        """Release every action."""
        self._held.clear()

    @property
    def held(self) -> frozenset[Action]:
        """Snapshot of the currently held actions."""
        return frozenset(self._held)


def movement_intent(source: InputSource) -> tuple[float, float]:
    """Get the raw (unnormalized) movement direction from the held actions."""
    dx = 0.0
    dy = 0.0
    if source.is_action_held(Action.UP):
        dy -= 1.0
    if source.is_action_held(Action.DOWN):
        dy += 1.0
    if source.is_action_held(Action.LEFT):
        dx -= 1.0
    if source.is_action_held(Action.RIGHT):
        dx += 1.0
    return (dx, dy)
