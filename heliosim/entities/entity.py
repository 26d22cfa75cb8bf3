"""Base class shared by every simulated airspace entity.

An entity is anything the population registry can hold: static helipads and
the moving helicopters, multirotors and storms. Each entity owns exactly one
:class:`~heliosim.geo.ProjectedPoint` as its authoritative position and carries
an :class:`EntityKind` tag so a presentation layer can style it without the
simulation knowing anything about appearance.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
import itertools

from heliosim.geo import GeoPoint, ProjectedPoint, to_geographic

_ids = itertools.count(1)


class EntityKind(Enum):
    """Tag identifying the kind of an entity."""

    HELIPAD = "helipad"
    HELICOPTER = "helicopter"
    MULTIROTOR = "multirotor"
    STORM = "storm"


class Entity(ABC):
    """Abstract base for registry-held entities.

    Attributes:
        id (int): Process-unique identifier, assigned on construction.
        position (ProjectedPoint): Current position, mutated in place by motion.
        kind (EntityKind): Class-level tag set by each concrete subclass.
    """

    id: int
    position: ProjectedPoint

    def __init__(self, position: ProjectedPoint):
        self.id = next(_ids)
        self.position = position

    @property
    @abstractmethod
    def kind(self) -> EntityKind:
        """Kind tag; concrete subclasses override it with a class attribute."""

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    @property
    def geo(self) -> GeoPoint:
        """Geographic position, recomputed from the projected position."""
        return to_geographic(self.position)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self.id}, "
            f"x={self.position.x:.1f}, y={self.position.y:.1f})"
        )
