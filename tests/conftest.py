"""Shared fixtures for the simulation tests."""

import pytest

from campfire_survival.config import PlayerConfig, SpawnRule, WorldConfig
from campfire_survival.simulation import ActionState, World


def empty_rule(inset: float = 20.0) -> SpawnRule:
    return SpawnRule(initial=0, threshold=0, rate=0.0, inset=inset)


@pytest.fixture
def world_config() -> WorldConfig:
    """An 800x600 world that never spawns anything on its own."""
    return WorldConfig(
        seed=1234,
        trees=empty_rule(40.0),
        rocks=empty_rule(40.0),
        berries=empty_rule(20.0),
        waters=empty_rule(80.0),
    )


@pytest.fixture
def player_config() -> PlayerConfig:
    return PlayerConfig()


@pytest.fixture
def world(world_config, player_config) -> World:
    world = World(world_config, player_config)
    world.initialize()
    return world


@pytest.fixture
def controls() -> ActionState:
    return ActionState()
