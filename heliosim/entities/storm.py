"""Slow-moving hazard zone."""

from __future__ import annotations

from heliosim.config import STORM_SPEED
from heliosim.geo import ProjectedPoint

from .entity import Entity, EntityKind


class Storm(Entity):
    """Storm drifting along the projected X axis.

    Storms move by ``speed`` toward decreasing X every tick, with no boundary
    and no reversal. They live for the whole run.
    """

    kind = EntityKind.STORM

    speed: float

    def __init__(self, position: ProjectedPoint, speed: float = STORM_SPEED):
        super().__init__(position)
        self.speed = speed

    def drift(self) -> None:
        self.position.translate(-self.speed, 0.0)
