"""Error taxonomy for the airspace simulation.

Startup errors (missing data sources) are fatal and propagate to the caller.
Per-tick lookup and removal errors are recovered where they occur so that a
single missing entry never halts the tick sequence.

Exports:
    SimulationError: Base class for every simulation error
    MissingWindDataError: Wind lookup for a grid cell that was never ingested
    EntityNotFoundError: Registry removal/query for an absent entity or kind
    DataSourceMissingError: Required ingestion data absent at initialization
"""

from __future__ import annotations

from typing import Any


class SimulationError(Exception):
    """Base class for all heliosim errors."""


class MissingWindDataError(SimulationError, KeyError):
    """Raised when the wind field has no vector for the requested grid cell.

    Attributes:
        cell: The ``(lat_index, lon_index)`` key that was looked up.
    """

    def __init__(self, cell: tuple[int, int]):
        self.cell = cell
        super().__init__(f"no wind data for cell lat={cell[0]} lon={cell[1]}")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return self.args[0]


class EntityNotFoundError(SimulationError, KeyError):
    """Raised by the registry for an entity or entity kind that is not present."""

    def __init__(self, entity_id: int | None = None, kind: Any = None):
        self.entity_id = entity_id
        self.kind = kind
        if entity_id is not None:
            msg = f"entity {entity_id} is not registered"
        else:
            msg = f"no entities of kind {getattr(kind, 'name', kind)} registered"
        super().__init__(msg)

    def __str__(self) -> str:
        return self.args[0]


class DataSourceMissingError(SimulationError, FileNotFoundError):
    """Raised at startup when required wind or helipad data is unavailable.

    Attributes:
        source: Path or description of the missing data source.
    """

    def __init__(self, source: str, reason: str = "data file not found"):
        self.source = source
        self.reason = reason
        super().__init__(f"{reason}: {source}")

    def __str__(self) -> str:
        return f"{self.reason}: {self.source}"
