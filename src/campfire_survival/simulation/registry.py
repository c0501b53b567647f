"""Entity registry - arena of resource entities keyed by stable id."""

from __future__ import annotations

from typing import Iterator

import numpy as np

from .entity import Resource, ResourceType


class EntityRegistry:
    """
    Typed collections of resource entities.

    Entities are stored per type in insertion order, keyed by their id.
    Consuming an entity only marks it; marked entities stay visible to the
    interaction phase that is still running and are dropped by `compact()`,
    so no traversal ever skips or repeats an element.
    """

    def __init__(self) -> None:
        self._entities: dict[ResourceType, dict[int, Resource]] = {
            resource_type: {} for resource_type in ResourceType
        }

    def add(self, resource: Resource) -> Resource:
        """Add an entity and return it."""
        self._entities[resource.type][resource.id] = resource
        return resource

    def get(self, resource_id: int) -> Resource | None:
        """Look up a live entity by id."""
        for entities in self._entities.values():
            resource = entities.get(resource_id)
            if resource is not None:
                return resource if not resource.removed else None
        return None

    def mark_removed(self, resource: Resource) -> bool:
        """
        Mark an entity for removal.

        Returns:
            False if it was already marked
        """
        if resource.removed:
            return False
        resource.removed = True
        return True

    def compact(self) -> int:
        """Drop every marked entity. Returns how many were dropped."""
        dropped = 0
        for resource_type, entities in self._entities.items():
            marked = [rid for rid, resource in entities.items() if resource.removed]
            for rid in marked:
                del entities[rid]
            dropped += len(marked)
        return dropped

    def of_type(self, resource_type: ResourceType) -> list[Resource]:
        """Get the live entities of a type."""
        return [r for r in self._entities[resource_type].values() if not r.removed]

    def count(self, resource_type: ResourceType) -> int:
        """Count the live entities of a type."""
        return sum(1 for r in self._entities[resource_type].values() if not r.removed)

    def within(
        self,
        resource_type: ResourceType,
        x: float,
        y: float,
        radius: float,
        use_entity_radius: bool = False,
    ) -> list[Resource]:
        """
        Get live entities of a type strictly closer than `radius` to a position.

        Args:
            resource_type: Type of entity to look for
            x: Query x coordinate
            y: Query y coordinate
            radius: Distance threshold
            use_entity_radius: Add each entity's own radius to the threshold
                (water pools are reached at their rim, not their centre)

        Returns:
            Matching entities, in insertion order
        """
        candidates = self.of_type(resource_type)
        if not candidates:
            return []

        xs = np.fromiter((r.x for r in candidates), dtype=np.float64, count=len(candidates))
        ys = np.fromiter((r.y for r in candidates), dtype=np.float64, count=len(candidates))
        limits = np.full(len(candidates), radius, dtype=np.float64)
        if use_entity_radius:
            limits += np.fromiter(
                (r.radius for r in candidates), dtype=np.float64, count=len(candidates)
            )

        distances = np.hypot(xs - x, ys - y)
        hits = np.flatnonzero(distances < limits)
        return [candidates[i] for i in hits]

    def clear(self) -> None:
        """Remove all entities."""
        for entities in self._entities.values():
            entities.clear()

    def __iter__(self) -> Iterator[Resource]:
        """Iterate over every live entity."""
        for entities in self._entities.values():
            for resource in entities.values():
                if not resource.removed:
                    yield resource

    def __len__(self) -> int:
        """Return the total number of live entities."""
        return sum(self.count(resource_type) for resource_type in ResourceType)
