"""
Tests for the wind field.
"""

import unittest

from heliosim.errors import MissingWindDataError
from heliosim.geo import to_projected
from heliosim.wind import WindField, WindVector


class TestWindFieldLookup(unittest.TestCase):
    """Test inserting and looking up wind vectors."""

    def setUp(self):
        self.field = WindField()

    def test_sample_is_scaled_and_retrievable(self):
        """A (1.5, -2.0) sample at lat 20, lon 10 reads back as (150, -200)."""
        self.field.add_sample(1.5, -2.0, 20.0, 10.0)
        vector = self.field.lookup(to_projected(20.0, 10.0))
        self.assertEqual(vector, WindVector(150, -200))

    def test_insert_truncates_toward_zero(self):
        self.field.insert(10, 20, 150.9, -200.9)
        self.assertEqual(self.field[(20, 10)], WindVector(150, -200))

    def test_insert_overwrites(self):
        self.field.insert(10, 20, 1, 1)
        self.field.insert(10, 20, 5, 6)
        self.assertEqual(len(self.field), 1)
        self.assertEqual(self.field[(20, 10)], WindVector(5, 6))

    def test_lookup_rounds_position(self):
        """Positions within half a degree of the cell centre share its vector."""
        self.field.insert(10, 20, 7, 8)
        for latitude, longitude in ((19.6, 10.4), (20.4, 9.6), (20.0, 10.0)):
            with self.subTest(latitude=latitude, longitude=longitude):
                self.assertEqual(
                    self.field.lookup(to_projected(latitude, longitude)), WindVector(7, 8)
                )

    def test_western_longitudes_use_absolute_index(self):
        self.field.insert(10, 20, 7, 8)
        self.assertEqual(self.field.lookup(to_projected(20.0, -10.2)), WindVector(7, 8))

    def test_sample_grid_key_is_truncated(self):
        """Raw sample coordinates are truncated, not rounded, into the grid."""
        self.field.add_sample(0.1, 0.2, 20.9, 10.7)
        self.assertIn((20, 10), self.field)
        self.assertEqual(self.field[(20, 10)], WindVector(10, 20))

    def test_western_sample_keeps_signed_key(self):
        self.field.add_sample(0.1, 0.2, 20.9, -10.7)
        self.assertIn((20, -10), self.field)
        self.assertNotIn((20, 10), self.field)

    def test_western_sample_does_not_overwrite_eastern_cell(self):
        field = WindField.from_samples([(1, 1, 20, 10), (5, 5, 20, -10)])
        self.assertEqual(len(field), 2)
        self.assertEqual(field.lookup(to_projected(20, 10)), WindVector(100, 100))

    def test_from_samples(self):
        field = WindField.from_samples([(1.0, 1.0, 0.0, 0.0), (2.0, -3.0, 45.0, 90.0)])
        self.assertEqual(len(field), 2)
        self.assertEqual(field[(45, 90)], WindVector(200, -300))
        self.assertEqual(sorted(field), [(0, 0), (45, 90)])


class TestMissingWindData(unittest.TestCase):
    """Lookups on cells that were never ingested fail loudly."""

    def test_missing_cell_raises(self):
        field = WindField()
        field.insert(10, 20, 1, 1)
        with self.assertRaises(MissingWindDataError) as ctx:
            field.lookup(to_projected(40.0, 10.0))
        self.assertEqual(ctx.exception.cell, (40, 10))

    def test_missing_cell_is_a_key_error(self):
        with self.assertRaises(KeyError):
            WindField()[(0, 0)]

    def test_no_zero_default(self):
        self.assertNotIn((0, 0), WindField())


if __name__ == "__main__":
    unittest.main()
