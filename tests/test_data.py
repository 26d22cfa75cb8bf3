"""
Tests for data providers, configuration and the command-line entry point.
"""

import os
import tempfile
import unittest

from heliosim.__main__ import main
from heliosim.config import BoundingBox, SimulationConfig
from heliosim.data import (
    CsvStationProvider,
    CsvWindProvider,
    StationDataProvider,
    WindDataProvider,
)
from heliosim.errors import DataSourceMissingError
from heliosim.simulator import AirspaceSimulator

WIND_CSV = """U,V,la,lo
1.5,-2.0,20.0,10.0

0.25,abc,55.4,37.9
"""

HELIPADS = """55.75,37.62
59.93,30.33
43.60,39.73
"""


class DataFilesTestCase(unittest.TestCase):
    """Writes sample data files into a temporary directory."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.wind_path = self.write("current-wind.csv", WIND_CSV)
        self.helipad_path = self.write("helipad.dat", HELIPADS)

    def tearDown(self):
        self.tmpdir.cleanup()

    def write(self, name, content):
        path = os.path.join(self.tmpdir.name, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path


class TestProviders(DataFilesTestCase):
    """Test CSV-backed providers."""

    def test_wind_provider_skips_header_and_blank_lines(self):
        samples = list(CsvWindProvider(self.wind_path))
        self.assertEqual(samples[0], (1.5, -2.0, 20.0, 10.0))
        self.assertEqual(len(samples), 2)

    def test_wind_provider_reads_bad_cells_as_zero(self):
        samples = list(CsvWindProvider(self.wind_path))
        self.assertEqual(samples[1], (0.25, 0.0, 55.4, 37.9))

    def test_station_provider(self):
        stations = list(CsvStationProvider(self.helipad_path))
        self.assertEqual(stations, [(55.75, 37.62), (59.93, 30.33), (43.60, 39.73)])

    def test_providers_satisfy_protocols(self):
        self.assertIsInstance(CsvWindProvider(self.wind_path), WindDataProvider)
        self.assertIsInstance(CsvStationProvider(self.helipad_path), StationDataProvider)

    def test_missing_file_is_fatal(self):
        missing = os.path.join(self.tmpdir.name, "nope.dat")
        with self.assertRaises(DataSourceMissingError):
            list(CsvStationProvider(missing))
        with self.assertRaises(FileNotFoundError):
            list(CsvWindProvider(missing))

    def test_simulator_from_files(self):
        sim = AirspaceSimulator.from_files(
            self.wind_path, self.helipad_path, SimulationConfig(initial_flights=4)
        )
        self.assertEqual(len(sim.helipads), 3)
        self.assertEqual(len(sim.flights), 4)
        self.assertEqual(len(sim.wind_field), 2)

    def test_simulator_from_missing_files(self):
        with self.assertRaises(DataSourceMissingError):
            AirspaceSimulator.from_files(
                os.path.join(self.tmpdir.name, "missing.csv"), self.helipad_path
            )


class TestConfig(unittest.TestCase):
    """Test SimulationConfig validation."""

    def test_defaults(self):
        config = SimulationConfig()
        self.assertEqual(config.drifter_capacity, 300)
        self.assertEqual(config.flight_capacity, 300)
        self.assertEqual(config.drifter_spawn_probability, 0.3)
        self.assertEqual(config.flight_speed, 220)

    def test_invalid_values(self):
        invalid = [
            {"drifter_spawn_probability": 1.5},
            {"drifter_capacity": -1},
            {"drifter_lifetime": (700, 500)},
            {"flight_speed": 0},
            {"storm_speed": 0},
            {"storm_speed": -10},
            {"initial_storms": -2},
            {"spawn_bounds": BoundingBox(10, 0, 0, 10)},
            {"storm_latlon_range": (5, 5)},
        ]
        for kwargs in invalid:
            with self.subTest(**{k: str(v) for k, v in kwargs.items()}):
                with self.assertRaises(ValueError):
                    SimulationConfig(**kwargs)


class TestCommandLine(DataFilesTestCase):
    """Test the python -m heliosim entry point."""

    def test_runs_with_data_files(self):
        code = main([
            "--wind", self.wind_path,
            "--helipads", self.helipad_path,
            "--ticks", "3",
            "--seed", "1",
            "--no-progress",
        ])
        self.assertEqual(code, 0)

    def test_missing_data_exits_with_error(self):
        code = main([
            "--wind", os.path.join(self.tmpdir.name, "missing.csv"),
            "--helipads", self.helipad_path,
            "--no-progress",
        ])
        self.assertEqual(code, 1)


if __name__ == "__main__":
    unittest.main()
