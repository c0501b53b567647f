"""Simulation module - pure logic, no rendering."""

from .controls import Action, ActionState, InputSource
from .entity import Resource, ResourceType
from .player import Player
from .registry import EntityRegistry
from .world import HudReadout, StatsHistory, World, WorldStats

__all__ = [
    "Action",
    "ActionState",
    "EntityRegistry",
    "HudReadout",
    "InputSource",
    "Player",
    "Resource",
    "ResourceType",
    "StatsHistory",
    "World",
    "WorldStats",
]
