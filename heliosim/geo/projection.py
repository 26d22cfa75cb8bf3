"""Ellipsoidal Mercator projection between geographic and planar coordinates.

All motion and distance math in the simulation happens in projected units
(metres on the Mercator plane). Geographic coordinates are only derived, for
wind lookup and for placing stations read from latitude/longitude data.

The inverse latitude is computed with a fixed-point refinement starting from
the spherical approximation. Iteration stops once the correction falls below
``1e-7`` radians or after 15 rounds, whichever comes first; stopping on the
iteration bound is not an error.
"""

from __future__ import annotations

from dataclasses import dataclass
import math

R_MAJOR = 6378137.0
R_MINOR = 6356752.3142
RATIO = R_MINOR / R_MAJOR
ECCENTRICITY = math.sqrt(1.0 - RATIO * RATIO)
COM = 0.5 * ECCENTRICITY

HALF_PI = math.pi / 2.0
CONVERGENCE_TOLERANCE = 1e-7
MAX_ITERATIONS = 15


@dataclass
class ProjectedPoint:
    """Mutable position on the projection plane.

    Each entity owns exactly one of these; it is the authoritative position.

    Attributes:
        x: Easting in projected units.
        y: Northing in projected units.
    """

    x: float
    y: float

    def translate(self, dx: float, dy: float) -> None:
        """Shift the point in place."""
        self.x += dx
        self.y += dy

    def copy(self) -> "ProjectedPoint":
        return ProjectedPoint(self.x, self.y)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def to_geographic(self) -> "GeoPoint":
        return to_geographic(self)


@dataclass(frozen=True)
class GeoPoint:
    """Latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float

    def to_projected(self) -> ProjectedPoint:
        return to_projected(self.latitude, self.longitude)


def x_to_longitude(x: float) -> float:
    return math.degrees(x / R_MAJOR)


def y_to_latitude(y: float) -> float:
    """Invert the ellipsoidal Mercator northing to latitude in degrees."""
    ts = math.exp(-y / R_MAJOR)
    phi = HALF_PI - 2.0 * math.atan(ts)
    dphi = 1.0
    i = 0
    while abs(dphi) > CONVERGENCE_TOLERANCE and i < MAX_ITERATIONS:
        con = ECCENTRICITY * math.sin(phi)
        dphi = HALF_PI - 2.0 * math.atan(ts * ((1.0 - con) / (1.0 + con)) ** COM) - phi
        phi += dphi
        i += 1
    return math.degrees(phi)


def longitude_to_x(longitude: float) -> float:
    return R_MAJOR * math.radians(longitude)


def latitude_to_y(latitude: float) -> float:
    """Project a latitude in degrees to an ellipsoidal Mercator northing.

    Raises:
        ValueError: For the poles, where the projection is undefined.
    """
    if abs(latitude) >= 90.0:
        msg = f"latitude {latitude} is outside the projection domain"
        raise ValueError(msg)
    phi = math.radians(latitude)
    con = ECCENTRICITY * math.sin(phi)
    ts = math.tan(0.5 * (HALF_PI - phi)) / ((1.0 - con) / (1.0 + con)) ** COM
    return -R_MAJOR * math.log(ts)


def to_geographic(point: ProjectedPoint) -> GeoPoint:
    """Convert a projected point to latitude/longitude degrees."""
    return GeoPoint(y_to_latitude(point.y), x_to_longitude(point.x))


def to_projected(latitude: float, longitude: float) -> ProjectedPoint:
    """Convert latitude/longitude degrees to a new projected point."""
    return ProjectedPoint(longitude_to_x(longitude), latitude_to_y(latitude))
