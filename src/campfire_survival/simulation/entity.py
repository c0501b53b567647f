"""Resource entities - trees, rocks, berries, water pools and campfires."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from enum import Enum, auto

_ids = itertools.count(1)


class ResourceType(Enum):
    """Types of resource entities in the world."""

    TREE = auto()
    ROCK = auto()
    BERRY = auto()
    WATER = auto()
    CAMPFIRE = auto()


@dataclass
class Resource:
    """
    A resource entity in the world.

    Position is fixed at creation. Trees and rocks carry hit points and are
    removed when those run out; berries are removed when eaten; water pools
    (which carry a radius) and campfires are never removed.
    """

    x: float
    y: float
    type: ResourceType
    hp: int = 0
    radius: float = 0.0

    # Set when the entity is consumed; the registry drops it on compaction
    removed: bool = field(default=False, init=False)

    # Unique identifier
    id: int = field(default=-1, init=False)

    def __post_init__(self) -> None:
        """Assign unique ID after initialization."""
        self.id = next(_ids)

    def __hash__(self) -> int:
        """Hash based on unique ID."""
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        """Equality based on unique ID."""
        if not isinstance(other, Resource):
            return NotImplemented
        return self.id == other.id

    @property
    def is_destroyed(self) -> bool:
        """Check if the entity has run out of hit points."""
        return self.hp <= 0

    def hit(self) -> bool:
        """
        Take one hit.

        Returns:
            True if this hit destroyed the entity
        """
        self.hp -= 1
        return self.is_destroyed
