"""Airspace traffic simulation: drifting multirotors, scheduled helicopters and storms.

heliosim advances a population of airspace entities over a geographic region
in discrete ticks. Multirotors drift with a gridded wind field for a limited
lifetime, helicopters fly between fixed helipads and retire on arrival, and
storms move slowly across the map.

Framework Components:
    Geographic Systems (heliosim.geo):
        • ProjectedPoint / GeoPoint: planar and latitude/longitude positions
        • Ellipsoidal Mercator forward and iterative inverse projection

    Wind (heliosim.wind):
        • WindField: rounded-degree grid of integer wind displacements

    Entities (heliosim.entities):
        • Helipad, Helicopter, Multirotor, Storm with per-kind motion rules

    Simulation Engine (heliosim.simulator):
        • AirspaceSimulator: spawn/retire policies and the six-step tick loop
        • TickReport / RunSummary: per-tick and aggregate statistics

    Support:
        • EntityRegistry (heliosim.registry): typed entity container
        • Sampler (heliosim.sampling): single seeded random source
        • CSV data providers (heliosim.data)
        • SimulationConfig (heliosim.config)

Usage:
    >>> from heliosim import AirspaceSimulator, Sampler, SimulationConfig
    >>> from heliosim.data import CsvStationProvider, CsvWindProvider
    >>>
    >>> sim = AirspaceSimulator.from_providers(
    ...     CsvWindProvider("current-wind.csv"),
    ...     CsvStationProvider("helipad.dat"),
    ...     config=SimulationConfig(),
    ...     sampler=Sampler(seed=42),
    ... )
    >>> summary = sim.run(1000)
    >>> summary.totals["flights_arrived"]

Command Line:
    $ python -m heliosim --wind current-wind.csv --helipads helipad.dat --ticks 1000
"""

from heliosim.config import SimulationConfig
from heliosim.registry import EntityRegistry
from heliosim.sampling import Sampler
from heliosim.simulator import AirspaceSimulator, RunSummary, TickReport

__version__ = "0.1.0"

__all__ = [
    "AirspaceSimulator",
    "EntityRegistry",
    "RunSummary",
    "Sampler",
    "SimulationConfig",
    "TickReport",
]
