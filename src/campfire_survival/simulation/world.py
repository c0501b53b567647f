"""World simulation - owns the player and every entity and advances them."""

from __future__ import annotations

import logging
import math
import random
from collections import deque
from dataclasses import dataclass

from ..config import PlayerConfig, SpawnRule, WorldConfig
from .controls import MOVEMENT_ACTIONS, Action, ActionState, movement_intent
from .entity import Resource, ResourceType
from .player import STAT_MAX, Player
from .registry import EntityRegistry
from .spawning import jitter, random_position, should_respawn

logger = logging.getLogger(__name__)


@dataclass
class WorldStats:
    """Statistics about the current world state."""

    tick: int = 0
    elapsed: float = 0.0  # simulated seconds
    time_survived: float = 0.0  # simulated seconds with health above 0
    # Live counts
    tree_count: int = 0
    rock_count: int = 0
    berry_count: int = 0
    water_count: int = 0
    campfire_count: int = 0
    # Session totals
    trees_felled: int = 0
    rocks_mined: int = 0
    berries_eaten: int = 0
    campfires_built: int = 0


@dataclass(frozen=True)
class HudReadout:
    """Whole-number values for the heads-up display."""

    health: int
    hunger: int
    thirst: int
    wood: int
    stone: int
    campfires: int


class StatsHistory:
    """Tracks the player's stats over time for charting."""

    def __init__(self, max_length: int = 300):
        """
        Initialize stats history.

        Args:
            max_length: Maximum number of ticks to keep in history
        """
        self.max_length = max_length
        self.health: deque[float] = deque(maxlen=max_length)
        self.hunger: deque[float] = deque(maxlen=max_length)
        self.thirst: deque[float] = deque(maxlen=max_length)

    def record(self, player: Player) -> None:
        """Record the player's current stats to history."""
        self.health.append(player.health)
        self.hunger.append(player.hunger)
        self.thirst.append(player.thirst)

    def clear(self) -> None:
        """Forget all recorded ticks."""
        self.health.clear()
        self.hunger.clear()
        self.thirst.clear()


class World:
    """
    The simulation world containing the player and all resource entities.

    Manages:
    - The player and its survival stats
    - Resources (trees, rocks, berries, water, campfires) and respawning
    - Simulation stepping
    """

    def __init__(self, world_config: WorldConfig, player_config: PlayerConfig):
        """
        Initialize the world.

        Args:
            world_config: Configuration for world parameters
            player_config: Configuration for the player and its interactions
        """
        self.config = world_config
        self.player_config = player_config
        self.width = world_config.width
        self.height = world_config.height

        self._reseed(world_config.seed)

        # Entity storage
        self.registry = EntityRegistry()
        self.player = self._create_player()

        # Statistics
        self.stats = WorldStats()
        self.stats_history = StatsHistory()

    def _reseed(self, seed: int | None) -> None:
        # Seeded random number generator for reproducibility
        if seed is not None:
            self.seed = seed
        else:
            self.seed = random.randint(0, 2**31 - 1)
        self.rng = random.Random(self.seed)

    def _create_player(self) -> Player:
        return Player(
            x=self.width / 2,
            y=self.height / 2,
            size=self.player_config.size,
            speed=self.player_config.speed,
            reach=self.player_config.reach,
        )

    @property
    def spawn_rules(self) -> dict[ResourceType, SpawnRule]:
        """Population policy per naturally spawning resource type."""
        return {
            ResourceType.TREE: self.config.trees,
            ResourceType.ROCK: self.config.rocks,
            ResourceType.BERRY: self.config.berries,
            ResourceType.WATER: self.config.waters,
        }

    def spawn_resource(
        self,
        resource_type: ResourceType,
        x: float | None = None,
        y: float | None = None,
    ) -> Resource:
        """
        Spawn a new resource at the given position (or random if not specified).

        Random positions keep the type's spawn inset away from the world edges.

        Returns the spawned resource.
        """
        if x is None or y is None:
            rule = self.spawn_rules.get(resource_type)
            inset = rule.inset if rule is not None else 0.0
            rand_x, rand_y = random_position(self.rng, self.width, self.height, inset)
            x = rand_x if x is None else x
            y = rand_y if y is None else y

        if resource_type == ResourceType.TREE:
            resource = Resource(x=x, y=y, type=resource_type, hp=self.config.tree_hp)
        elif resource_type == ResourceType.ROCK:
            resource = Resource(x=x, y=y, type=resource_type, hp=self.config.rock_hp)
        elif resource_type == ResourceType.WATER:
            radius = self.rng.uniform(self.config.water_radius_min, self.config.water_radius_max)
            resource = Resource(x=x, y=y, type=resource_type, radius=radius)
        else:
            resource = Resource(x=x, y=y, type=resource_type)

        return self.registry.add(resource)

    def initialize(self) -> None:
        """Populate the world with its starting resources."""
        for resource_type, rule in self.spawn_rules.items():
            for _ in range(rule.initial):
                self.spawn_resource(resource_type)

        self._update_stats()
        self.stats_history.record(self.player)

        logger.info(
            "World initialized (seed=%d, %dx%d): %d trees, %d rocks, %d berries, %d water pools",
            self.seed, self.width, self.height,
            self.stats.tree_count, self.stats.rock_count,
            self.stats.berry_count, self.stats.water_count,
        )

    def reset(self) -> None:
        """
        Start a fresh session with the same configuration.

        A new seed is always drawn, so a restart never replays the layout of
        the previous session. Pass `--seed` on the command line to replay one.
        """
        self._reseed(None)
        self.registry.clear()
        self.player = self._create_player()
        self.stats = WorldStats()
        self.stats_history.clear()
        self.initialize()

    def hud(self) -> HudReadout:
        """Get the values the heads-up display shows, rounded down."""
        return HudReadout(
            health=math.floor(self.player.health),
            hunger=math.floor(self.player.hunger),
            thirst=math.floor(self.player.thirst),
            wood=self.player.wood,
            stone=self.player.stone,
            campfires=self.registry.count(ResourceType.CAMPFIRE),
        )

    def step(self, controls: ActionState, dt: float) -> None:
        """
        Advance the simulation by one tick.

        This:
        1. Moves the player from the held direction keys
        2. Resolves chop, mine and craft
        3. Eats berries and drinks/heals near water and campfires
        4. Decays hunger and thirst and drains health when either is empty
        5. Removes consumed entities and tops up depleted populations

        Args:
            controls: Held actions; craft is released once seen and movement
                is released while the player is incapacitated
            dt: Seconds since the last tick, clamped to the configured maximum
        """
        dt = max(0.0, min(self.config.max_dt, dt))

        if dt == 0:
            # No simulated time passes; only a queued craft resolves
            if controls.is_action_held(Action.CRAFT):
                self._try_craft()
                controls.release(Action.CRAFT)
                self._update_stats()
            return

        self.stats.tick += 1
        self.stats.elapsed += dt
        player = self.player
        cfg = self.player_config
        was_incapacitated = player.is_incapacitated

        if was_incapacitated:
            controls.release_all(MOVEMENT_ACTIONS)

        player.apply_movement(
            movement_intent(controls),
            dt,
            self.width,
            self.height,
            cfg.hunger_speed_cap,
            cfg.frame_rate_normalization,
            cfg.edge_margin,
        )

        # Actions
        if controls.is_action_held(Action.CHOP):
            self._chop()
        if controls.is_action_held(Action.MINE):
            self._mine()
        if controls.is_action_held(Action.CRAFT):
            self._try_craft()
            controls.release(Action.CRAFT)

        # Proximity effects
        self._eat_berries()
        self._drink(dt)
        self._warm_up(dt)

        # Natural decay
        self._decay(dt)

        if player.is_incapacitated:
            if not was_incapacitated:
                logger.info(
                    "Player incapacitated at tick %d after %.1fs survived",
                    self.stats.tick, self.stats.time_survived,
                )
            player.health = 0.0
            controls.release_all(MOVEMENT_ACTIONS)
        else:
            self.stats.time_survived += dt

        # Remove consumed entities, then refill
        self.registry.compact()
        self._respawn(dt)

        self._update_stats()
        self.stats_history.record(player)

    def _chop(self) -> None:
        """Hit every tree in reach; fallen trees give one wood each."""
        player = self.player
        for tree in self.registry.within(ResourceType.TREE, player.x, player.y, player.reach):
            if tree.hit() and self.registry.mark_removed(tree):
                player.wood += 1
                self.stats.trees_felled += 1
                logger.debug("Tree %d felled at (%.0f, %.0f)", tree.id, tree.x, tree.y)

    def _mine(self) -> None:
        """Hit every rock in reach; broken rocks give one stone each."""
        player = self.player
        for rock in self.registry.within(ResourceType.ROCK, player.x, player.y, player.reach):
            if rock.hit() and self.registry.mark_removed(rock):
                player.stone += 1
                self.stats.rocks_mined += 1
                logger.debug("Rock %d broken at (%.0f, %.0f)", rock.id, rock.x, rock.y)

    def _try_craft(self) -> bool:
        """
        Build a campfire next to the player if the inventory covers it.

        Returns:
            True if a campfire was built
        """
        player = self.player
        cfg = self.player_config
        if player.wood < cfg.campfire_wood_cost or player.stone < cfg.campfire_stone_cost:
            return False

        player.wood -= cfg.campfire_wood_cost
        player.stone -= cfg.campfire_stone_cost

        x, y = jitter(self.rng, player.x, player.y, cfg.campfire_jitter)
        x = max(0.0, min(self.width, x))
        y = max(0.0, min(self.height, y))
        campfire = self.spawn_resource(ResourceType.CAMPFIRE, x, y)
        self.stats.campfires_built += 1

        logger.info("Campfire %d built at (%.0f, %.0f)", campfire.id, campfire.x, campfire.y)
        return True

    def _eat_berries(self) -> None:
        player = self.player
        radius = player.reach * self.player_config.berry_reach_factor
        for berry in self.registry.within(ResourceType.BERRY, player.x, player.y, radius):
            if self.registry.mark_removed(berry):
                player.hunger = min(STAT_MAX, player.hunger + self.player_config.berry_hunger)
                self.stats.berries_eaten += 1
                logger.debug("Berry %d eaten, hunger now %.1f", berry.id, player.hunger)

    def _drink(self, dt: float) -> None:
        # Overlapping pools each add their own share
        player = self.player
        pools = self.registry.within(
            ResourceType.WATER, player.x, player.y,
            self.player_config.water_margin, use_entity_radius=True,
        )
        for _ in pools:
            player.thirst = min(STAT_MAX, player.thirst + self.player_config.water_regen_rate * dt)

    def _warm_up(self, dt: float) -> None:
        player = self.player
        fires = self.registry.within(
            ResourceType.CAMPFIRE, player.x, player.y, self.player_config.campfire_radius
        )
        for _ in fires:
            player.health = min(STAT_MAX, player.health + self.player_config.campfire_regen_rate * dt)

    def _decay(self, dt: float) -> None:
        """Drain hunger and thirst; drain health while either is empty."""
        player = self.player
        cfg = self.player_config

        player.hunger = max(0.0, player.hunger - cfg.hunger_decay * dt)
        player.thirst = max(0.0, player.thirst - cfg.thirst_decay * dt)

        starving = player.hunger <= 0
        parched = player.thirst <= 0
        if starving or parched:
            deficit = cfg.deficit_both if starving and parched else cfg.deficit_single
            player.health = max(0.0, player.health - cfg.health_loss_rate * dt * deficit)

    def _respawn(self, dt: float) -> None:
        """Spawn resources into populations that have dropped below threshold."""
        for resource_type, rule in self.spawn_rules.items():
            if should_respawn(self.rng, rule, self.registry.count(resource_type), dt):
                resource = self.spawn_resource(resource_type)
                logger.debug(
                    "Respawned %s %d at (%.0f, %.0f)",
                    resource_type.name.lower(), resource.id, resource.x, resource.y,
                )

    def _update_stats(self) -> None:
        self.stats.tree_count = self.registry.count(ResourceType.TREE)
        self.stats.rock_count = self.registry.count(ResourceType.ROCK)
        self.stats.berry_count = self.registry.count(ResourceType.BERRY)
        self.stats.water_count = self.registry.count(ResourceType.WATER)
        self.stats.campfire_count = self.registry.count(ResourceType.CAMPFIRE)
