"""Centralized configuration for the simulation."""

from dataclasses import dataclass, field

PROFILES = ("classic", "relaxed")


@dataclass
class SpawnRule:
    """Population policy for one resource type."""

    initial: int  # bulk spawned at world initialization
    threshold: int  # respawn only while the live count is below this
    rate: float  # respawn chance per second while below threshold
    inset: float  # keep spawns this far from the world edges

    def __post_init__(self) -> None:
        """Reject rules that cannot describe a population."""
        if self.initial < 0 or self.threshold < 0:
            raise ValueError(f"spawn counts must be non-negative: {self}")
        if self.rate < 0:
            raise ValueError(f"spawn rate must be non-negative: {self}")
        if self.inset < 0:
            raise ValueError(f"spawn inset must be non-negative: {self}")


@dataclass
class WorldConfig:
    """Configuration for the world simulation."""

    width: int = 800
    height: int = 600
    # Random seed for reproducibility (None = random seed)
    seed: int | None = None
    # Largest dt a single tick integrates, in seconds
    max_dt: float = 0.06
    trees: SpawnRule = field(default_factory=lambda: SpawnRule(12, 6, 0.2, 40.0))
    rocks: SpawnRule = field(default_factory=lambda: SpawnRule(10, 5, 0.2, 40.0))
    berries: SpawnRule = field(default_factory=lambda: SpawnRule(24, 10, 0.9, 20.0))
    waters: SpawnRule = field(default_factory=lambda: SpawnRule(5, 3, 0.03, 80.0))
    water_radius_min: float = 28.0
    water_radius_max: float = 56.0
    tree_hp: int = 2
    rock_hp: int = 3


@dataclass
class PlayerConfig:
    """Configuration for the player and its interactions."""

    # Movement
    size: float = 20.0
    speed: float = 3.6
    hunger_speed_cap: float = 0.6  # max speed bonus from a full stomach
    frame_rate_normalization: float = 60.0
    edge_margin: float = 12.0

    # Interaction radii
    reach: float = 64.0
    berry_reach_factor: float = 0.7
    water_margin: float = 6.0
    campfire_radius: float = 72.0

    # Gains
    berry_hunger: float = 22.0
    water_regen_rate: float = 30.0  # thirst per second
    campfire_regen_rate: float = 8.0  # health per second

    # Decay (per second)
    hunger_decay: float = 6.0
    thirst_decay: float = 9.0
    health_loss_rate: float = 6.0
    deficit_single: float = 0.6
    deficit_both: float = 1.2

    # Crafting
    campfire_wood_cost: int = 2
    campfire_stone_cost: int = 1
    campfire_jitter: float = 40.0


@dataclass
class RendererConfig:
    """Configuration for the Pygame renderer."""

    window_width: int = 1040
    window_height: int = 600
    sidebar_width: int = 240
    target_fps: int = 60
    # Directory holding player.png, tree.png, ... (None = shapes only)
    assets_dir: str | None = None


@dataclass
class Config:
    """Main configuration container."""

    world: WorldConfig
    player: PlayerConfig
    renderer: RendererConfig
    name: str = "classic"

    @classmethod
    def default(cls) -> "Config":
        """Create default configuration."""
        return cls(
            world=WorldConfig(),
            player=PlayerConfig(),
            renderer=RendererConfig(),
        )

    @classmethod
    def profile(cls, name: str) -> "Config":
        """
        Create the configuration for a named tuning profile.

        Args:
            name: One of PROFILES

        Raises:
            ValueError: If the profile name is unknown
        """
        if name == "classic":
            return cls.default()
        if name == "relaxed":
            return cls(
                world=WorldConfig(
                    trees=SpawnRule(12, 8, 0.3, 40.0),
                    rocks=SpawnRule(10, 6, 0.3, 40.0),
                    berries=SpawnRule(24, 14, 1.2, 20.0),
                    waters=SpawnRule(5, 3, 0.05, 80.0),
                ),
                player=PlayerConfig(
                    speed=3.2,
                    hunger_speed_cap=0.3,
                    hunger_decay=4.0,
                    thirst_decay=6.0,
                ),
                renderer=RendererConfig(),
                name="relaxed",
            )
        raise ValueError(f"unknown profile {name!r}, expected one of {', '.join(PROFILES)}")
