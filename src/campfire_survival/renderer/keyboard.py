"""Keyboard input adapter - turns pygame key events into held actions."""

from __future__ import annotations

import pygame

from ..simulation.controls import Action, ActionState

KEY_BINDINGS: dict[int, Action] = {
    pygame.K_w: Action.UP,
    pygame.K_UP: Action.UP,
    pygame.K_s: Action.DOWN,
    pygame.K_DOWN: Action.DOWN,
    pygame.K_a: Action.LEFT,
    pygame.K_LEFT: Action.LEFT,
    pygame.K_d: Action.RIGHT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_x: Action.CHOP,
    pygame.K_z: Action.MINE,
    pygame.K_c: Action.CRAFT,
}


class KeyboardInput:
    """
    Feeds key presses into an ActionState between ticks.

    Several keys can drive one action (W and the up arrow); the action stays
    held until the last of its keys comes up. Craft is only ever pressed by a
    fresh key-down, so holding C (or key repeat) cannot queue it again after
    the simulation has consumed it.
    """

    def __init__(self, actions: ActionState | None = None):
        self.actions = actions if actions is not None else ActionState()
        self._keys_down: set[int] = set()

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Update the held actions from one pygame event.

        Returns:
            True if the event was a bound key
        """
        if event.type == pygame.WINDOWFOCUSLOST:
            # Key-up events are lost while unfocused
            self._keys_down.clear()
            self.actions.clear()
            return False

        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return False

        action = KEY_BINDINGS.get(event.key)
        if action is None:
            return False

        if event.type == pygame.KEYDOWN:
            self._keys_down.add(event.key)
            self.actions.press(action)
            return True

        self._keys_down.discard(event.key)
        if not any(KEY_BINDINGS[key] == action for key in self._keys_down):
            self.actions.release(action)
        return True
