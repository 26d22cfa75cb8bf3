"""Run an airspace simulation from the command line.

Example:
    $ python -m heliosim --wind current-wind.csv --helipads helipad.dat \\
          --ticks 2000 --seed 42 --verbose
"""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console
from rich.table import Table

from heliosim.config import (
    DRIFTER_CAPACITY,
    FLIGHT_CAPACITY,
    HELIPAD_DATA_FILE,
    WIND_DATA_FILE,
    SimulationConfig,
)
from heliosim.errors import DataSourceMissingError
from heliosim.logs import configure_logging
from heliosim.sampling import Sampler
from heliosim.simulator import AirspaceSimulator, RunSummary


def non_negative(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"{value} must be >= 0")
    return number


def add_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--wind", default=WIND_DATA_FILE, help="CSV file of U,V,lat,lon wind samples")
    parser.add_argument(
        "--helipads", default=HELIPAD_DATA_FILE, help="File of lat,lon helipad coordinates"
    )
    parser.add_argument(
        "--ticks", type=non_negative, default=1000, help="Number of ticks to simulate"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for the shared random generator"
    )
    parser.add_argument(
        "--flight-capacity",
        type=non_negative,
        default=FLIGHT_CAPACITY,
        help="Target number of simultaneous flights",
    )
    parser.add_argument(
        "--drifter-capacity",
        type=non_negative,
        default=DRIFTER_CAPACITY,
        help="Maximum number of live multirotors",
    )
    parser.add_argument("--verbose", action="store_true", help="Log every lifecycle event")
    parser.add_argument(
        "--debug", action="store_true", help="Also log recovered lookup and removal misses"
    )
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar")


def summary_table(summary: RunSummary) -> Table:
    table = Table(title="Airspace Simulation Summary")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")
    for name, value in summary.get_summary().items():
        text = f"{value:.2f}" if isinstance(value, float) else str(value)
        table.add_row(name.replace("_", " "), text)
    return table


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="heliosim", description=__doc__.splitlines()[0])
    add_arguments(parser)
    args = parser.parse_args(argv)

    if args.debug:
        level = logging.DEBUG
    elif args.verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    logger = configure_logging(level)

    config = SimulationConfig(
        flight_capacity=args.flight_capacity,
        drifter_capacity=args.drifter_capacity,
    )
    try:
        sim = AirspaceSimulator.from_files(args.wind, args.helipads, config, Sampler(args.seed))
    except DataSourceMissingError as e:
        logger.error("Cannot start simulation: %s", e)
        return 1

    summary = sim.run(args.ticks, progress=not args.no_progress)
    Console().print(summary_table(summary))
    return 0


if __name__ == "__main__":
    sys.exit(main())
