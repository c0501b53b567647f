import pytest

from campfire_survival.config import PROFILES, Config, SpawnRule


def test_default_is_classic_profile():
    config = Config.default()
    assert config.name == "classic"
    assert config.player.speed == 3.6
    assert config.player.hunger_speed_cap == 0.6
    assert config.world.berries == SpawnRule(24, 10, 0.9, 20.0)
    assert config.world.max_dt == 0.06


def test_every_listed_profile_builds():
    for name in PROFILES:
        assert Config.profile(name).name == name


def test_relaxed_profile_only_changes_tuning():
    classic = Config.profile("classic")
    relaxed = Config.profile("relaxed")

    assert relaxed.player.hunger_decay < classic.player.hunger_decay
    assert relaxed.player.thirst_decay < classic.player.thirst_decay
    assert relaxed.player.hunger_speed_cap < classic.player.hunger_speed_cap
    assert relaxed.world.berries.threshold > classic.world.berries.threshold
    # Interaction rules are shared
    assert relaxed.player.reach == classic.player.reach
    assert relaxed.player.berry_hunger == classic.player.berry_hunger
    assert relaxed.world.tree_hp == classic.world.tree_hp


def test_unknown_profile_is_rejected():
    with pytest.raises(ValueError, match="unknown profile"):
        Config.profile("nightmare")


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(initial=-1, threshold=0, rate=0.1, inset=0),
        dict(initial=0, threshold=-2, rate=0.1, inset=0),
        dict(initial=0, threshold=0, rate=-0.1, inset=0),
        dict(initial=0, threshold=0, rate=0.1, inset=-5),
    ],
)
def test_spawn_rule_rejects_negative_values(kwargs):
    with pytest.raises(ValueError):
        SpawnRule(**kwargs)
