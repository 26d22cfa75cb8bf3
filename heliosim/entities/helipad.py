"""Fixed ground station serving as a flight endpoint."""

from __future__ import annotations

from heliosim.geo import to_projected

from .entity import Entity, EntityKind


class Helipad(Entity):
    """Static helipad. Created once at startup and never removed."""

    kind = EntityKind.HELIPAD

    @classmethod
    def from_latlon(cls, latitude: float, longitude: float) -> "Helipad":
        return cls(to_projected(latitude, longitude))
