"""
Tests for the Mercator coordinate transform.
"""

import math
import unittest

from heliosim.geo import GeoPoint, ProjectedPoint, to_geographic, to_projected
from heliosim.geo.projection import R_MAJOR, latitude_to_y, y_to_latitude


class TestToGeographic(unittest.TestCase):
    """Test projected -> geographic conversion."""

    def test_origin_maps_to_null_island(self):
        """The projection origin is lat 0, lon 0."""
        geo = to_geographic(ProjectedPoint(0.0, 0.0))
        self.assertAlmostEqual(geo.latitude, 0.0, places=9)
        self.assertAlmostEqual(geo.longitude, 0.0, places=9)

    def test_longitude_is_linear_in_x(self):
        """Half the equatorial circumference is 180 degrees east."""
        geo = to_geographic(ProjectedPoint(math.pi * R_MAJOR, 0.0))
        self.assertAlmostEqual(geo.longitude, 180.0, places=9)

    def test_latitude_sign_follows_y(self):
        """Northings above zero are northern latitudes."""
        self.assertGreater(y_to_latitude(5_000_000), 0.0)
        self.assertLess(y_to_latitude(-5_000_000), 0.0)
        self.assertAlmostEqual(y_to_latitude(5_000_000), -y_to_latitude(-5_000_000), places=9)

    def test_extreme_northing_stays_below_pole(self):
        """Very large northings converge toward 90 degrees."""
        self.assertAlmostEqual(y_to_latitude(1e9), 90.0, places=6)


class TestToProjected(unittest.TestCase):
    """Test geographic -> projected conversion."""

    def test_equator_has_zero_northing(self):
        self.assertAlmostEqual(latitude_to_y(0.0), 0.0, places=6)

    def test_pole_is_rejected(self):
        with self.assertRaises(ValueError):
            latitude_to_y(90.0)

    def test_geopoint_helper(self):
        """GeoPoint.to_projected matches the function form."""
        point = GeoPoint(55.75, 37.62).to_projected()
        expected = to_projected(55.75, 37.62)
        self.assertEqual(point, expected)


class TestRoundTrip(unittest.TestCase):
    """Round trips are exact up to the iteration tolerance."""

    def test_projected_round_trip(self):
        """to_projected(to_geographic(P)) returns P."""
        for x in (-2.0e7, -1.2345e6, 0.0, 4940278.0, 1.9e7):
            for y in (-1.5e7, -6233593.0, 0.0, 6233593.0, 1.5e7):
                point = ProjectedPoint(x, y)
                back = to_projected(*_latlon(to_geographic(point)))
                with self.subTest(x=x, y=y):
                    self.assertAlmostEqual(back.x, x, delta=1e-6)
                    self.assertAlmostEqual(back.y, y, delta=1e-2)

    def test_geographic_round_trip(self):
        """to_geographic(to_projected(lat, lon)) returns lat, lon."""
        for latitude in (-80.0, -45.5, 0.0, 20.0, 55.75, 84.9):
            for longitude in (-179.0, -10.0, 0.0, 37.62, 179.0):
                geo = to_geographic(to_projected(latitude, longitude))
                with self.subTest(latitude=latitude, longitude=longitude):
                    self.assertAlmostEqual(geo.latitude, latitude, delta=1e-7)
                    self.assertAlmostEqual(geo.longitude, longitude, delta=1e-9)

    def test_point_helpers(self):
        point = ProjectedPoint(1000.0, 2000.0)
        self.assertEqual(point.to_geographic(), to_geographic(point))
        copy = point.copy()
        copy.translate(1.0, -1.0)
        self.assertEqual(point.as_tuple(), (1000.0, 2000.0))
        self.assertEqual(copy.as_tuple(), (1001.0, 1999.0))


def _latlon(geo):
    return geo.latitude, geo.longitude


if __name__ == "__main__":
    unittest.main()
