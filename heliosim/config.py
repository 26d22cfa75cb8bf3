"""Simulation configuration for the airspace traffic simulator.

Module-level constants hold the reference parameters of the simulation. The
:class:`SimulationConfig` dataclass bundles them so a simulator instance can
be configured independently (tests, CLI overrides) without touching globals.

Example:
    >>> from heliosim.config import SimulationConfig
    >>> config = SimulationConfig(flight_capacity=10, initial_flights=2)
    >>> config.drifter_capacity
    300
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


class BoundingBox(NamedTuple):
    """Axis-aligned box in projected units used for spawn sampling."""

    left_x: int
    right_x: int
    down_y: int
    up_y: int


# Data sources
WIND_DATA_FILE = "./current-wind.csv"
HELIPAD_DATA_FILE = "./helipad.dat"

# Wind
WIND_SCALE = 100

# Drifter (multirotor) configuration
DRIFTER_CAPACITY = 300
DRIFTER_SPAWN_PROBABILITY = 0.3
DRIFTER_LIFETIME = (500, 700)
SEED_DRIFTER = (4940278, 6233593)
SPAWN_BOUNDS = BoundingBox(0, 18628621 * 2, -15000000, 15000000)

# Flight (helicopter) configuration
FLIGHT_CAPACITY = 300
FLIGHT_SPEED = 220
INITIAL_FLIGHTS = 50

# Storm configuration
INITIAL_STORMS = 20
STORM_SPEED = 10
STORM_LATLON_RANGE = (-70, 70)


@dataclass(frozen=True)
class SimulationConfig:
    """Tunable parameters of one simulation run.

    Defaults reproduce the reference dynamics. Values are validated on
    construction; an invalid combination raises ``ValueError``.

    Attributes:
        drifter_capacity: Upper bound on live multirotors.
        drifter_spawn_probability: Chance per tick of taking the spawn branch.
        drifter_lifetime: Inclusive ``(min, max)`` lifetime range in ticks.
        seed_drifter: Projected position of the multirotor placed at startup,
            or ``None`` to start without one.
        spawn_bounds: Box in which new multirotors are placed.
        flight_capacity: Target number of simultaneous flights.
        flight_speed: Per-axis displacement of a helicopter per tick.
        initial_flights: Flights dispatched during initialization.
        initial_storms: Storms created during initialization.
        storm_speed: Per-tick westward displacement of a storm.
        storm_latlon_range: Half-open integer degree range for storm placement.
    """

    drifter_capacity: int = DRIFTER_CAPACITY
    drifter_spawn_probability: float = DRIFTER_SPAWN_PROBABILITY
    drifter_lifetime: tuple[int, int] = DRIFTER_LIFETIME
    seed_drifter: tuple[float, float] | None = SEED_DRIFTER
    spawn_bounds: BoundingBox = SPAWN_BOUNDS
    flight_capacity: int = FLIGHT_CAPACITY
    flight_speed: float = FLIGHT_SPEED
    initial_flights: int = INITIAL_FLIGHTS
    initial_storms: int = INITIAL_STORMS
    storm_speed: float = STORM_SPEED
    storm_latlon_range: tuple[int, int] = STORM_LATLON_RANGE

    def __post_init__(self):
        if self.drifter_capacity < 0 or self.flight_capacity < 0:
            msg = "capacities must be non-negative"
            raise ValueError(msg)
        if not 0.0 <= self.drifter_spawn_probability <= 1.0:
            msg = f"spawn probability {self.drifter_spawn_probability} outside [0, 1]"
            raise ValueError(msg)
        low, high = self.drifter_lifetime
        if low < 1 or high < low:
            msg = f"invalid drifter lifetime range {self.drifter_lifetime}"
            raise ValueError(msg)
        if self.flight_speed <= 0 or self.storm_speed <= 0:
            msg = "flight and storm speeds must be positive"
            raise ValueError(msg)
        if self.initial_flights < 0 or self.initial_storms < 0:
            msg = "initial populations must be non-negative"
            raise ValueError(msg)
        bounds = self.spawn_bounds
        if bounds.right_x < bounds.left_x or bounds.up_y < bounds.down_y:
            msg = f"inverted spawn bounds {tuple(bounds)}"
            raise ValueError(msg)
        low, high = self.storm_latlon_range
        if high <= low:
            msg = f"invalid storm placement range {self.storm_latlon_range}"
            raise ValueError(msg)
