"""Sparse wind-vector lookup keyed by rounded geographic grid cells.

The wind field stores one integer displacement vector per 1 x 1 degree cell.
Samples arrive as raw ``(U, V, lat, lon)`` tuples from a data provider; the
components are scaled by :data:`heliosim.config.WIND_SCALE` and truncated to
integers, so the stored vector is directly the per-tick displacement of a
drifting entity in projected units.

Lookups on a cell that was never ingested raise
:class:`~heliosim.errors.MissingWindDataError`. There is deliberately no
zero-vector default: callers decide how to treat the gap.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import NamedTuple

from heliosim.config import WIND_SCALE
from heliosim.errors import MissingWindDataError
from heliosim.geo import ProjectedPoint, to_geographic

GridKey = tuple[int, int]


class WindVector(NamedTuple):
    """Scaled wind components, used as-is as a per-tick displacement."""

    u: int
    v: int


class WindField:
    """Read-mostly mapping from ``(lat_index, lon_index)`` to :class:`WindVector`.

    The field is filled once during startup and then only read by the drifting
    entities that share it.

    Example:
        >>> field = WindField()
        >>> field.add_sample(1.5, -2.0, 20.0, 10.0)
        >>> field[(20, 10)]
        WindVector(u=150, v=-200)
    """

    _vectors: dict[GridKey, WindVector]

    def __init__(self, scale: float = WIND_SCALE):
        self._vectors = {}
        self.scale = scale

    @classmethod
    def from_samples(
        cls, samples: Iterable[tuple[float, float, float, float]], scale: float = WIND_SCALE
    ) -> "WindField":
        """Build a field from ``(U, V, lat, lon)`` tuples."""
        field = cls(scale)
        for u, v, latitude, longitude in samples:
            field.add_sample(u, v, latitude, longitude)
        return field

    def insert(self, lon_index: int, lat_index: int, u_scaled: float, v_scaled: float) -> None:
        """Store or overwrite the vector for one grid cell.

        Args:
            lon_index: Integer longitude of the cell. Lookups only reach
                non-negative indices.
            lat_index: Integer latitude of the cell.
            u_scaled: Already scaled east component; truncated toward zero.
            v_scaled: Already scaled north component; truncated toward zero.
        """
        self._vectors[(lat_index, lon_index)] = WindVector(int(u_scaled), int(v_scaled))

    def add_sample(self, u: float, v: float, latitude: float, longitude: float) -> None:
        """Ingest one raw provider sample, scaling the components."""
        self.insert(int(longitude), int(latitude), u * self.scale, v * self.scale)

    @staticmethod
    def cell_of(position: ProjectedPoint) -> GridKey:
        """Grid key of the cell containing a projected position."""
        geo = to_geographic(position)
        return (round(geo.latitude), abs(round(geo.longitude)))

    def lookup(self, position: ProjectedPoint) -> WindVector:
        """Return the wind vector for the cell under ``position``.

        Raises:
            MissingWindDataError: If no vector was ever inserted for the cell.
        """
        cell = self.cell_of(position)
        try:
            return self._vectors[cell]
        except KeyError:
            raise MissingWindDataError(cell) from None

    def __getitem__(self, cell: GridKey) -> WindVector:
        try:
            return self._vectors[cell]
        except KeyError:
            raise MissingWindDataError(cell) from None

    def __contains__(self, cell: object) -> bool:
        return cell in self._vectors

    def __len__(self) -> int:
        return len(self._vectors)

    def __iter__(self) -> Iterator[GridKey]:
        return iter(self._vectors)

    def __repr__(self) -> str:
        return f"WindField(cells={len(self._vectors)}, scale={self.scale})"
