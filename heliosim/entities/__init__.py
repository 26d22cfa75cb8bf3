"""Simulated airspace entities and their motion rules.

Entity hierarchy:
    Entity (ABC)
    ├── Helipad       static flight endpoint
    ├── Helicopter    goal-seeking, per-axis speed, OR-based arrival test
    ├── Multirotor    wind drift, lifetime countdown
    └── Storm         linear drift along X

Every entity owns one ProjectedPoint and exposes an EntityKind tag.

Example:
    >>> from heliosim.geo import ProjectedPoint
    >>> from heliosim.entities import Storm
    >>> storm = Storm(ProjectedPoint(0.0, 0.0), speed=10)
    >>> storm.drift()
    >>> storm.position.x
    -10.0
"""

from .entity import Entity, EntityKind
from .helicopter import Helicopter
from .helipad import Helipad
from .multirotor import Multirotor
from .storm import Storm

__all__ = ["Entity", "EntityKind", "Helipad", "Helicopter", "Multirotor", "Storm"]
