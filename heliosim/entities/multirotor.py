"""Wind-driven multirotor with a limited lifetime."""

from __future__ import annotations

import logging

from heliosim.errors import MissingWindDataError
from heliosim.geo import ProjectedPoint
from heliosim.wind import WindField

from .entity import Entity, EntityKind

logger = logging.getLogger(__name__)


class Multirotor(Entity):
    """Drifter carried by the shared wind field.

    Each :meth:`drift` uses up one tick of lifetime and displaces the drifter
    by the raw wind vector of the cell beneath it. The vector magnitude is the
    displacement; there is no speed clamp. Once the lifetime is spent the
    drifter reports :attr:`declining` and the simulator retires it.

    Attributes:
        lifetime (int): Remaining ticks, never negative.
        wind_field (WindField): Shared, read-only wind data.
    """

    kind = EntityKind.MULTIROTOR

    lifetime: int
    wind_field: WindField

    def __init__(self, position: ProjectedPoint, wind_field: WindField, lifetime: int):
        if lifetime < 0:
            msg = f"lifetime must be non-negative, got {lifetime}"
            raise ValueError(msg)
        super().__init__(position)
        self.wind_field = wind_field
        self.lifetime = lifetime

    def drift(self) -> bool:
        """Advance one tick.

        Returns:
            bool: True if the drifter moved, False if no wind data exists for
            its current cell (the displacement is skipped for this tick).
        """
        self.lifetime = max(0, self.lifetime - 1)
        try:
            u, v = self.wind_field.lookup(self.position)
        except MissingWindDataError as e:
            logger.debug("Multirotor %d held in place: %s", self.id, e)
            return False
        self.position.translate(u, v)
        return True

    @property
    def declining(self) -> bool:
        return self.lifetime == 0
