"""Data providers for wind samples and ground stations.

The simulator only depends on the provider protocols: an iterable of
``(U, V, lat, lon)`` wind tuples and an iterable of ``(lat, lon)`` station
coordinates. The CSV-backed providers below read the plain-text formats the
simulation ships with:

* wind file: one header line, then ``U,V,lat,lon`` rows;
* station files (helipads, cities): header-less ``lat,lon`` rows.

A missing file raises :class:`~heliosim.errors.DataSourceMissingError`, which
is fatal at startup.
"""

from __future__ import annotations

from collections.abc import Iterator
import csv
import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from heliosim.errors import DataSourceMissingError

logger = logging.getLogger(__name__)

WindSample = tuple[float, float, float, float]
Station = tuple[float, float]


@runtime_checkable
class WindDataProvider(Protocol):
    def __iter__(self) -> Iterator[WindSample]: ...


@runtime_checkable
class StationDataProvider(Protocol):
    def __iter__(self) -> Iterator[Station]: ...


def _lenient_float(cell: str) -> float:
    """Parse a numeric cell, reading anything unparseable as 0.0."""
    try:
        return float(cell.strip())
    except ValueError:
        return 0.0


class _CsvProvider:
    """Shared file handling for the CSV providers."""

    has_header = False

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _rows(self) -> Iterator[list[str]]:
        if not self.path.is_file():
            raise DataSourceMissingError(str(self.path))
        with open(self.path, encoding="utf-8", newline="") as f:
            reader = csv.reader(f)
            if self.has_header:
                next(reader, None)
            for row in reader:
                if not row or all(not cell.strip() for cell in row):
                    continue
                yield row

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.path)!r})"


class CsvWindProvider(_CsvProvider):
    """Wind samples from a ``U,V,lat,lon`` CSV file with a header line."""

    has_header = True

    def __iter__(self) -> Iterator[WindSample]:
        count = 0
        for row in self._rows():
            if len(row) < 4:
                logger.warning("%s: skipping short wind row %r", self.path, row)
                continue
            u, v, latitude, longitude = (_lenient_float(cell) for cell in row[:4])
            count += 1
            yield (u, v, latitude, longitude)
        logger.info("Loaded %d wind samples from %s", count, self.path)


class CsvStationProvider(_CsvProvider):
    """Ground-station coordinates from a header-less ``lat,lon`` file."""

    def __iter__(self) -> Iterator[Station]:
        count = 0
        for row in self._rows():
            if len(row) < 2:
                logger.warning("%s: skipping short station row %r", self.path, row)
                continue
            latitude, longitude = float(row[0]), float(row[1])
            logger.debug("Station %s %s", latitude, longitude)
            count += 1
            yield (latitude, longitude)
        logger.info("Loaded %d stations from %s", count, self.path)
