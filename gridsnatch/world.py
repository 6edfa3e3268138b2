"""Bounded component stores and the world that holds every entity."""

from __future__ import annotations

from typing import Iterator

from .components import MAX_COMPONENTS, MAX_ENTITIES, ComponentType, Entity


class VectorError(Exception):
    """Raised when a bounded vector is used out of range or beyond capacity."""


class BoundedVector:
    """A list with a fixed maximum length."""

    def __init__(self, capacity):
        if capacity < 1:
            raise VectorError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._items = []

    def _check_index(self, index, limit):
        if index < 0 or index > limit:
            raise VectorError(f"index {index} out of range 0..{limit}")

    def insert(self, index, item):
        """Insert item at index, shifting later items along."""
        self._check_index(index, len(self._items))
        if self.is_full():
            raise VectorError(f"vector is full ({self.capacity} items)")
        self._items.insert(index, item)

    def append(self, item):
        self.insert(len(self._items), item)

    def remove(self, index):
        """Remove and return the item at index."""
        self._check_index(index, len(self._items) - 1)
        return self._items.pop(index)

    def set(self, index, item):
        self._check_index(index, len(self._items) - 1)
        self._items[index] = item

    def get(self, index):
        self._check_index(index, len(self._items) - 1)
        return self._items[index]

    def is_full(self):
        return len(self._items) == self.capacity

    def is_empty(self):
        return not self._items

    def clear(self):
        self._items.clear()

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __repr__(self):
        return f"BoundedVector(capacity={self.capacity}, items={self._items!r})"


class World:
    """Entities and one bounded store per component kind."""

    def __init__(self):
        self.reset()

    def reset(self):
        """Drop every entity and component."""
        self._entities = BoundedVector(MAX_ENTITIES)
        self._stores = {kind: BoundedVector(MAX_COMPONENTS) for kind in ComponentType}

    def add_entity(self, entity_id):
        """Register an entity with the given id and return it."""
        if self._entities.is_full():
            raise VectorError("entity store is full")
        entity = Entity(index=entity_id)
        self._entities.append(entity)
        return entity

    def add_component(self, component):
        self.store(component.kind).append(component)
        return component

    def component(self, kind, entity_id):
        """Return the first component of kind owned by entity_id, or None."""
        return next(
            (item for item in self.store(kind) if item.id == entity_id),
            None,
        )

    def components(self, entity_id, *args):
        """Return the entity's components of the given kinds, or None if any is missing."""
        found = tuple(self.component(kind, entity_id) for kind in args)
        if any(item is None for item in found):
            return None
        return found

    def store(self, kind):
        return self._stores[ComponentType(kind)]

    def entities(self) -> Iterator[Entity]:
        return iter(self._entities)