"""Wind data for drifting entities.

Exports:
    WindField: Sparse grid of wind vectors keyed by rounded lat/lon cells
    WindVector: Integer (u, v) displacement per tick
"""

from .field import WindField, WindVector

__all__ = ["WindField", "WindVector"]
