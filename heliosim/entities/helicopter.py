"""Goal-seeking helicopter flying between two helipads.

Motion is axis-independent: each tick the X and Y coordinates are moved by
the full speed toward the destination, separately, as long as that axis is at
least one speed-step away. The result is Chebyshev-style approach rather than
straight-line travel.
"""

from __future__ import annotations

from collections.abc import Sequence
import math
from typing import TYPE_CHECKING

from heliosim.config import FLIGHT_SPEED
from heliosim.geo import ProjectedPoint

from .entity import Entity, EntityKind

if TYPE_CHECKING:
    from .storm import Storm


def _axis_step(current: float, target: float, speed: float) -> float:
    delta = target - current
    if abs(delta) < speed:
        return 0.0
    return math.copysign(speed, delta)


class Helicopter(Entity):
    """A flight in progress.

    Attributes:
        speed (float): Per-axis displacement per tick, fixed for the flight.
        destination (ProjectedPoint): Position of the destination helipad.
        origin (ProjectedPoint): Position of the origin helipad at dispatch.

    Example:
        >>> heli = Helicopter(ProjectedPoint(0, 0), ProjectedPoint(1000, -1000))
        >>> heli.fly_to_destination()
        >>> heli.position
        ProjectedPoint(x=220.0, y=-220.0)
    """

    kind = EntityKind.HELICOPTER

    speed: float
    destination: ProjectedPoint
    origin: ProjectedPoint

    def __init__(
        self,
        position: ProjectedPoint,
        destination: ProjectedPoint,
        speed: float = FLIGHT_SPEED,
    ):
        if speed <= 0:
            msg = f"helicopter speed must be positive, got {speed}"
            raise ValueError(msg)
        super().__init__(position)
        self.origin = position.copy()
        self.destination = destination
        self.speed = speed

    def fly_to_destination(self, storms: Sequence["Storm"] = ()) -> None:
        """Advance one tick toward the destination.

        Args:
            storms: Current hazard zones. Accepted for a future avoidance
                rule; flight behaviour does not depend on them yet.
        """
        dx = _axis_step(self.position.x, self.destination.x, self.speed)
        dy = _axis_step(self.position.y, self.destination.y, self.speed)
        self.position.translate(dx, dy)

    @property
    def arrived(self) -> bool:
        """True once either axis is within one speed-step of the destination.

        Either axis suffices. A flight can therefore be retired while still far
        away on the other axis.
        """
        return (
            abs(self.position.x - self.destination.x) < self.speed
            or abs(self.position.y - self.destination.y) < self.speed
        )
