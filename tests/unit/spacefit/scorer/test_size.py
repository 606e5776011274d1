#!/usr/bin/env python3
"""
Unit tests for the size scorer.
"""

import unittest

from spacefit.scorer.size import calculate_size_score


class TestSizeScore(unittest.TestCase):
    """Band membership and midpoint deviation tiers."""

    def test_inside_band(self):
        self.assertEqual(calculate_size_score(1500, 1400, 1600), 100)

    def test_band_edges_inclusive(self):
        self.assertEqual(calculate_size_score(1400, 1400, 1600), 100)
        self.assertEqual(calculate_size_score(1600, 1400, 1600), 100)

    def test_deviation_tiers(self):
        # band midpoint 1000
        self.assertEqual(calculate_size_score(1080, 950, 1050), 100)
        self.assertEqual(calculate_size_score(1150, 950, 1050), 70)
        self.assertEqual(calculate_size_score(1350, 950, 1050), 40)
        self.assertEqual(calculate_size_score(700, 950, 1050), 40)
        self.assertEqual(calculate_size_score(1500, 950, 1050), 0)

    def test_only_minimum(self):
        self.assertEqual(calculate_size_score(5000, 1000, None), 100)
        self.assertEqual(calculate_size_score(850, 1000, None), 70)

    def test_only_maximum(self):
        self.assertEqual(calculate_size_score(200, None, 1000), 100)
        self.assertEqual(calculate_size_score(1300, None, 1000), 40)

    def test_no_band_is_permissive(self):
        self.assertEqual(calculate_size_score(1500, None, None), 80)
        self.assertEqual(calculate_size_score(1500, 0, 0), 80)

    def test_missing_area_is_neutral(self):
        self.assertEqual(calculate_size_score(None, 1400, 1600), 50)
        self.assertEqual(calculate_size_score(0, 1400, 1600), 50)
        self.assertEqual(calculate_size_score(-10, 1400, 1600), 50)

    def test_inverted_band(self):
        self.assertEqual(calculate_size_score(1500, 1600, 1400), 100)


if __name__ == '__main__':
    unittest.main()
