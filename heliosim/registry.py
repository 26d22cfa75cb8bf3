"""Entity population registry.

The registry is the container the simulator adds entities to, removes them
from and enumerates by kind. It is the view a renderer or other external
consumer reads; the simulator keeps its own authoritative rosters and keeps
the registry consistent with them.

Both failure modes of the registry contract raise
:class:`~heliosim.errors.EntityNotFoundError`:

* removing an entity that is not registered;
* enumerating a kind that has no registered instances.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, runtime_checkable

from heliosim.entities import Entity, EntityKind
from heliosim.errors import EntityNotFoundError


@runtime_checkable
class Registry(Protocol):
    """Interface the simulator requires from an entity container."""

    def add(self, entity: Entity) -> None: ...
    def remove(self, entity: Entity) -> None: ...
    def get_all(self, kind: EntityKind) -> list[Entity]: ...


class EntityRegistry:
    """Insertion-ordered entity store with typed views.

    Example:
        >>> from heliosim.geo import ProjectedPoint
        >>> from heliosim.entities import Storm, EntityKind
        >>> registry = EntityRegistry()
        >>> storm = Storm(ProjectedPoint(0, 0))
        >>> registry.add(storm)
        >>> registry.get_all(EntityKind.STORM) == [storm]
        True
    """

    _entities: dict[int, Entity]

    def __init__(self):
        self._entities = {}

    def add(self, entity: Entity) -> None:
        self._entities[entity.id] = entity

    def remove(self, entity: Entity) -> None:
        """Unregister ``entity``.

        Raises:
            EntityNotFoundError: If this exact entity is not registered.
        """
        if self._entities.get(entity.id) is not entity:
            raise EntityNotFoundError(entity_id=entity.id)
        del self._entities[entity.id]

    def get_all(self, kind: EntityKind) -> list[Entity]:
        """Snapshot of all registered entities of ``kind``, in insertion order.

        Raises:
            EntityNotFoundError: If no entity of ``kind`` is registered.
        """
        found = [e for e in self._entities.values() if e.kind is kind]
        if not found:
            raise EntityNotFoundError(kind=kind)
        return found

    def count(self, kind: EntityKind | None = None) -> int:
        if kind is None:
            return len(self._entities)
        return sum(1 for e in self._entities.values() if e.kind is kind)

    def __contains__(self, entity: object) -> bool:
        return isinstance(entity, Entity) and self._entities.get(entity.id) is entity

    def __iter__(self) -> Iterator[Entity]:
        return iter(list(self._entities.values()))

    def __len__(self) -> int:
        return len(self._entities)

    def __repr__(self) -> str:
        counts = ", ".join(f"{k.value}={self.count(k)}" for k in EntityKind)
        return f"EntityRegistry({counts})"
