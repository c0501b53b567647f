"""Player entity - the survivor the user controls."""

from __future__ import annotations

import math
from dataclasses import dataclass

STAT_MAX = 100.0


@dataclass
class Player:
    """
    The player in the simulation.

    The player has:
    - Position in 2D space (the only entity that moves)
    - Survival stats (health, hunger, thirst) in [0, 100]
    - An inventory of wood and stone
    - A reach within which it can chop, mine and eat
    """

    # Position and body
    x: float
    y: float
    size: float = 20.0
    speed: float = 3.6
    reach: float = 64.0

    # Survival stats
    health: float = STAT_MAX
    hunger: float = STAT_MAX
    thirst: float = STAT_MAX

    # Inventory
    wood: int = 0
    stone: int = 0

    @property
    def is_incapacitated(self) -> bool:
        """Check if the player has run out of health."""
        return self.health <= 0

    def effective_speed(self, hunger_speed_cap: float) -> float:
        """Get the speed after the hunger bonus (a full stomach moves faster)."""
        return self.speed * (1 + min(hunger_speed_cap, self.hunger / STAT_MAX))

    def apply_movement(
        self,
        direction: tuple[float, float],
        dt: float,
        world_width: float,
        world_height: float,
        hunger_speed_cap: float,
        frame_rate_normalization: float,
        edge_margin: float,
    ) -> None:
        """
        Move the player for one tick.

        Args:
            direction: Movement intent; any non-zero vector is normalized
            dt: Elapsed seconds
            world_width: Width of the world (for boundary clamping)
            world_height: Height of the world (for boundary clamping)
            hunger_speed_cap: Largest speed bonus hunger can give
            frame_rate_normalization: Frames per second the base speed is tuned for
            edge_margin: Closest the player may come to a world edge
        """
        dx, dy = direction
        length = math.hypot(dx, dy)
        if length > 0:
            step = self.effective_speed(hunger_speed_cap) * dt * frame_rate_normalization
            self.x += dx / length * step
            self.y += dy / length * step

        self.x = max(edge_margin, min(world_width - edge_margin, self.x))
        self.y = max(edge_margin, min(world_height - edge_margin, self.y))
