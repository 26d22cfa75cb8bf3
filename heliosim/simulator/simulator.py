"""Population manager and tick loop for the airspace simulation.

The :class:`AirspaceSimulator` owns the flight roster, the storm list and the
drifter counter, and mirrors every population change into an entity registry
that external consumers (renderers, exporters) read.

Tick Sequence:
    Each call to :meth:`AirspaceSimulator.tick` runs these steps in a fixed
    order; no step starts before the previous one has finished.

    1. Drift advance: every live multirotor drifts with the wind.
    2. Spawn xor retire: with probability ``drifter_spawn_probability`` and
       below capacity, launch one multirotor; otherwise retire every
       multirotor whose lifetime is spent. Never both in one tick.
    3. Flight replenishment: below ``flight_capacity``, dispatch one flight
       between two distinct helipads.
    4. Arrival detection: retire every flight that has arrived.
    5. Flight advance: remaining flights move toward their destination.
    6. Storm advance: every storm drifts.

Failure Handling:
    Startup data problems raise :class:`~heliosim.errors.DataSourceMissingError`.
    During a tick, missing wind cells and missing registry entries are
    recovered locally and logged at DEBUG level; they never abort the tick.

Example:
    >>> from heliosim import AirspaceSimulator, Sampler
    >>> from heliosim.wind import WindField
    >>> sim = AirspaceSimulator(WindField(), [(55.75, 37.62), (59.93, 30.33)],
    ...                         sampler=Sampler(7))
    >>> sim.initialize()
    >>> report = sim.tick()
    >>> report.tick
    1
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import logging
from pathlib import Path

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
    TimeRemainingColumn,
)

from heliosim.config import HELIPAD_DATA_FILE, WIND_DATA_FILE, SimulationConfig
from heliosim.data import CsvStationProvider, CsvWindProvider, StationDataProvider, WindDataProvider
from heliosim.entities import Entity, EntityKind, Helicopter, Helipad, Multirotor, Storm
from heliosim.errors import DataSourceMissingError, EntityNotFoundError
from heliosim.geo import GeoPoint, ProjectedPoint, to_projected
from heliosim.registry import EntityRegistry, Registry
from heliosim.sampling import Sampler
from heliosim.wind import WindField

from .report import RunSummary, TickReport

logger = logging.getLogger(__name__)
CONSOLE = Console()


class AirspaceSimulator:
    """Tick-driven simulation of drifters, flights and storms.

    Args:
        wind_field: Wind data shared by all multirotors.
        stations: Helipad coordinates as ``(lat, lon)`` pairs or GeoPoints.
        config: Simulation parameters; reference defaults when omitted.
        sampler: Random source; pass a seeded one for reproducible runs.
        registry: Entity container to mirror populations into.

    Raises:
        DataSourceMissingError: If fewer than two distinct helipad
            coordinates are supplied, since no flight could be dispatched.
    """

    config: SimulationConfig
    wind_field: WindField
    registry: Registry
    sampler: Sampler

    _stations: list[GeoPoint]
    _helipads: list[Helipad]
    _flights: list[Helicopter]
    _storms: list[Storm]
    _drifter_count: int
    _tick: int
    _initialized: bool

    def __init__(
        self,
        wind_field: WindField,
        stations: Iterable[tuple[float, float] | GeoPoint],
        config: SimulationConfig | None = None,
        sampler: Sampler | None = None,
        registry: Registry | None = None,
    ):
        self.config = config or SimulationConfig()
        self.wind_field = wind_field
        self.sampler = sampler or Sampler()
        self.registry = registry if registry is not None else EntityRegistry()

        self._stations = [s if isinstance(s, GeoPoint) else GeoPoint(*s) for s in stations]
        if len(set(self._stations)) < 2:
            raise DataSourceMissingError(
                "helipads", reason="at least two distinct helipad coordinates required"
            )

        self._helipads = []
        self._flights = []
        self._storms = []
        self._drifter_count = 0
        self._tick = 0
        self._initialized = False

    @classmethod
    def from_providers(
        cls,
        wind_provider: WindDataProvider,
        station_provider: StationDataProvider,
        config: SimulationConfig | None = None,
        sampler: Sampler | None = None,
        registry: Registry | None = None,
    ) -> "AirspaceSimulator":
        """Load data from providers and return an initialized simulator."""
        wind_field = WindField.from_samples(wind_provider)
        sim = cls(wind_field, list(station_provider), config, sampler, registry)
        sim.initialize()
        return sim

    @classmethod
    def from_files(
        cls,
        wind_path: str | Path = WIND_DATA_FILE,
        helipad_path: str | Path = HELIPAD_DATA_FILE,
        config: SimulationConfig | None = None,
        sampler: Sampler | None = None,
    ) -> "AirspaceSimulator":
        return cls.from_providers(
            CsvWindProvider(wind_path), CsvStationProvider(helipad_path), config, sampler
        )

    # -- read-only views --------------------------------------------------

    @property
    def flights(self) -> tuple[tuple[Helicopter, ProjectedPoint], ...]:
        """Active flights as ``(helicopter, destination)`` pairs, in dispatch order."""
        return tuple((h, h.destination) for h in self._flights)

    @property
    def storms(self) -> tuple[Storm, ...]:
        return tuple(self._storms)

    @property
    def helipads(self) -> tuple[Helipad, ...]:
        return tuple(self._helipads)

    @property
    def drifter_count(self) -> int:
        return self._drifter_count

    @property
    def tick_count(self) -> int:
        return self._tick

    # -- population changes -----------------------------------------------

    def initialize(self) -> None:
        """Place helipads, the seed drifter, storms and the initial flights.

        Raises:
            RuntimeError: If called more than once.
        """
        if self._initialized:
            msg = "simulation is already initialized"
            raise RuntimeError(msg)
        self._initialized = True

        for station in self._stations:
            helipad = Helipad.from_latlon(station.latitude, station.longitude)
            self._helipads.append(helipad)
            self.registry.add(helipad)

        if self.config.seed_drifter is not None and self.config.drifter_capacity > 0:
            self.spawn_drifter(ProjectedPoint(*self.config.seed_drifter))

        for _ in range(self.config.initial_storms):
            self.add_storm()

        for _ in range(self.config.initial_flights):
            self.add_helicopter()

        logger.info(
            "Initialized airspace: %d helipads, %d storms, %d flights, %d wind cells",
            len(self._helipads),
            len(self._storms),
            len(self._flights),
            len(self.wind_field),
        )

    def spawn_drifter(
        self, position: ProjectedPoint | None = None, lifetime: int | None = None
    ) -> Multirotor:
        """Launch a multirotor, at a random point and lifetime unless given."""
        if position is None:
            position = self.sampler.point_in(self.config.spawn_bounds)
        if lifetime is None:
            lifetime = self.sampler.in_range(*self.config.drifter_lifetime)
        return self.add_drifter(Multirotor(position, self.wind_field, lifetime))

    def add_drifter(self, drifter: Multirotor) -> Multirotor:
        self.registry.add(drifter)
        self._drifter_count += 1
        logger.info("Multirotor %d launched at %.0f, %.0f", drifter.id, drifter.x, drifter.y)
        return drifter

    def add_helicopter(self) -> Helicopter:
        """Dispatch a flight between two randomly chosen distinct helipads."""
        origin, destination = self.sampler.distinct_pair(self._stations)
        helicopter = Helicopter(
            to_projected(origin.latitude, origin.longitude),
            to_projected(destination.latitude, destination.longitude),
            self.config.flight_speed,
        )
        return self.add_flight(helicopter)

    def add_flight(self, helicopter: Helicopter) -> Helicopter:
        self._flights.append(helicopter)
        self.registry.add(helicopter)
        logger.info(
            "Helicopter %d departed from %.0f, %.0f for %.0f, %.0f",
            helicopter.id,
            helicopter.x,
            helicopter.y,
            helicopter.destination.x,
            helicopter.destination.y,
        )
        return helicopter

    def add_storm(self) -> Storm:
        low, high = self.config.storm_latlon_range
        latitude = self.sampler.integer(low, high)
        longitude = self.sampler.integer(low, high)
        storm = Storm(to_projected(latitude, longitude), self.config.storm_speed)
        self._storms.append(storm)
        self.registry.add(storm)
        return storm

    # -- tick -------------------------------------------------------------

    def tick(self) -> TickReport:
        """Advance the simulation by one step and report what happened."""
        self._tick += 1
        report = TickReport(tick=self._tick)

        report.drifters_stalled = self._advance_drifters()
        report.drifters_spawned, report.drifters_retired = self._spawn_or_retire_drifters()
        report.flights_dispatched = self._replenish_flights()
        report.flights_arrived = self._retire_arrived_flights()
        logger.info("Helicopters airborne: %d", len(self._flights))
        self._advance_flights()
        self._advance_storms()

        report.drifters = self._drifter_count
        report.flights = len(self._flights)
        report.storms = len(self._storms)
        return report

    def run(self, ticks: int, progress: bool = True) -> RunSummary:
        """Execute ``ticks`` steps and summarize them.

        Args:
            ticks: Number of ticks to run; must be non-negative.
            progress: Show a rich progress bar on the console.
        """
        if ticks < 0:
            msg = f"tick count must be non-negative, got {ticks}"
            raise ValueError(msg)
        reports: list[TickReport] = []
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(bar_width=40),
            TaskProgressColumn(),
            TimeElapsedColumn(),
            TimeRemainingColumn(),
            console=CONSOLE,
            disable=not progress,
        ) as bar:
            p = bar.add_task("[green]Simulating airspace...", total=ticks)
            for _ in range(ticks):
                reports.append(self.tick())
                bar.advance(p)
        return RunSummary.from_reports(reports)

    def _advance_drifters(self) -> int:
        stalled = 0
        for drifter in self._live(EntityKind.MULTIROTOR):
            if not drifter.drift():
                stalled += 1
        return stalled

    def _spawn_or_retire_drifters(self) -> tuple[int, int]:
        config = self.config
        if (
            self.sampler.maybe(config.drifter_spawn_probability)
            and self._drifter_count < config.drifter_capacity
        ):
            self.spawn_drifter()
            return 1, 0

        retired = 0
        for drifter in self._live(EntityKind.MULTIROTOR):
            if not drifter.declining:
                continue
            self._discard(drifter)
            self._drifter_count -= 1
            retired += 1
            logger.info("Multirotor %d landed at %.0f, %.0f", drifter.id, drifter.x, drifter.y)
        return 0, retired

    def _replenish_flights(self) -> int:
        if len(self._flights) >= self.config.flight_capacity:
            return 0
        self.add_helicopter()
        return 1

    def _retire_arrived_flights(self) -> int:
        arrived = [h for h in self._flights if h.arrived]
        for helicopter in arrived:
            self._discard(helicopter)
            self._flights.remove(helicopter)
            logger.info(
                "Helicopter %d arrived at %.0f, %.0f", helicopter.id, helicopter.x, helicopter.y
            )
        return len(arrived)

    def _advance_flights(self) -> None:
        storms = self.storms
        for helicopter in self._flights:
            helicopter.fly_to_destination(storms)

    def _advance_storms(self) -> None:
        for storm in self._storms:
            storm.drift()

    # -- registry access --------------------------------------------------

    def _live(self, kind: EntityKind) -> Sequence[Entity]:
        try:
            return self.registry.get_all(kind)
        except EntityNotFoundError:
            return []

    def _discard(self, entity: Entity) -> None:
        try:
            self.registry.remove(entity)
        except EntityNotFoundError:
            logger.debug("%r was already removed from the registry", entity)
