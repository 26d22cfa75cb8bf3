"""Coordinate utilities for the airspace simulation.

This package maps between geographic coordinates (latitude/longitude in
degrees) and the planar ellipsoidal Mercator projection used for every
distance and movement computation in the simulation.

Components:
    ProjectedPoint: Mutable planar position owned by an entity
    GeoPoint: Immutable latitude/longitude pair derived from a ProjectedPoint
    to_geographic: Projected -> geographic (iterative inverse)
    to_projected: Geographic -> projected

Typical Usage:
    >>> from heliosim.geo import to_projected, to_geographic
    >>> pad = to_projected(55.75, 37.62)
    >>> back = to_geographic(pad)
    >>> round(back.latitude, 6), round(back.longitude, 6)
    (55.75, 37.62)
"""

from .projection import GeoPoint, ProjectedPoint, to_geographic, to_projected

__all__ = ["GeoPoint", "ProjectedPoint", "to_geographic", "to_projected"]
