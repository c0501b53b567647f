"""Renderer module - visualization and keyboard input."""

from .keyboard import KEY_BINDINGS, KeyboardInput
from .pygame_renderer import PygameRenderer
from .sprites import Sprites
from .ui import ShortcutButton, SimulationMode, Sparkline, StatBar

__all__ = [
    "KEY_BINDINGS",
    "KeyboardInput",
    "PygameRenderer",
    "ShortcutButton",
    "SimulationMode",
    "Sparkline",
    "Sprites",
    "StatBar",
]
