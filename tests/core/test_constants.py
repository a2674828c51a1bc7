#!/usr/bin/env python3
"""Test suite for datum and grid constants"""

import unittest
import numpy as np
from pyosgb.core.constants import (
    D2R, R2D, ARCSEC2RAD,
    RE_WGS84, E2_WGS84, RE_AIRY, RP_AIRY, E2_AIRY,
    HELMERT_TX, HELMERT_TY, HELMERT_TZ, HELMERT_S,
    F0_OSGB, E0_OSGB, N0_OSGB, LAT0_OSGB, LON0_OSGB,
    LAT_TOLERANCE, MAX_LAT_ITERATIONS,
)


class TestUnitConversions(unittest.TestCase):

    def test_degree_radian_inverse(self):
        self.assertAlmostEqual(D2R * R2D, 1.0, places=15)
        self.assertAlmostEqual(180.0 * D2R, np.pi, places=15)

    def test_arcseconds(self):
        self.assertAlmostEqual(3600.0 * ARCSEC2RAD, D2R, places=15)


class TestEllipsoidConstants(unittest.TestCase):

    def test_wgs84(self):
        self.assertEqual(RE_WGS84, 6378137.0)
        # e2 = f (2 - f) with f ~ 1/298.257
        f = 1.0 / 298.257223563
        self.assertAlmostEqual(E2_WGS84, f * (2.0 - f), delta=1e-8)

    def test_airy_consistency(self):
        """Airy eccentricity matches its own axes"""
        e2 = 1.0 - RP_AIRY**2 / RE_AIRY**2
        self.assertAlmostEqual(E2_AIRY, e2, delta=1e-9)
        self.assertLess(RE_AIRY, RE_WGS84)


class TestGridConstants(unittest.TestCase):

    def test_true_origin(self):
        self.assertEqual(LAT0_OSGB, 49.0)
        self.assertEqual(LON0_OSGB, -2.0)
        self.assertEqual(E0_OSGB, 400000.0)
        self.assertEqual(N0_OSGB, -100000.0)
        self.assertAlmostEqual(F0_OSGB, 0.9996012717, places=10)

    def test_helmert_translation_magnitude(self):
        shift = np.sqrt(HELMERT_TX**2 + HELMERT_TY**2 + HELMERT_TZ**2)
        self.assertAlmostEqual(shift, 713.2, delta=1.0)
        self.assertGreater(HELMERT_S, 0.0)

    def test_solver_limits(self):
        self.assertEqual(LAT_TOLERANCE, 1e-3)
        self.assertEqual(MAX_LAT_ITERATIONS, 20)


if __name__ == '__main__':
    unittest.main()
