#!/usr/bin/env python3
"""Test suite for core value types"""

import dataclasses
import math
import unittest

import numpy as np

from pyosgb.core.constants import E2_AIRY, HELMERT_S, HELMERT_TX, RE_WGS84, RP_AIRY
from pyosgb.core.data_structures import (
    AIRY1830,
    OSGB36_TO_WGS84,
    WGS84,
    WGS84_TO_OSGB36,
    CartesianCoordinate,
    EllipsoidParameters,
    GeographicCoordinate,
    GridReference,
    HelmertParameters,
)


class TestEllipsoidParameters(unittest.TestCase):

    def test_named_instances(self):
        self.assertEqual(WGS84.semi_major_axis, RE_WGS84)
        self.assertEqual(AIRY1830.semi_minor, RP_AIRY)
        self.assertEqual(AIRY1830.eccentricity_squared, E2_AIRY)

    def test_derived_semi_minor(self):
        ell = EllipsoidParameters(1000.0, 0.19)
        self.assertAlmostEqual(ell.semi_minor, 900.0, places=9)

    def test_third_flattening(self):
        a, b = AIRY1830.semi_major_axis, AIRY1830.semi_minor
        self.assertAlmostEqual(AIRY1830.third_flattening, (a - b) / (a + b), places=15)
        self.assertAlmostEqual(AIRY1830.third_flattening, 0.00167322, delta=1e-8)

    def test_immutable(self):
        with self.assertRaises(dataclasses.FrozenInstanceError):
            WGS84.semi_major_axis = 1.0


class TestHelmertParameters(unittest.TestCase):

    def test_default_set(self):
        self.assertEqual(WGS84_TO_OSGB36.tx, HELMERT_TX)
        self.assertEqual(WGS84_TO_OSGB36.s, HELMERT_S)

    def test_inverse_negates(self):
        params = HelmertParameters(1.0, -2.0, 3.0, 0.1, -0.2, 0.3, 4.0)
        inv = params.inverse()
        self.assertEqual(inv, HelmertParameters(-1.0, 2.0, -3.0, -0.1, 0.2, -0.3, -4.0))
        self.assertEqual(inv.inverse(), params)

    def test_reverse_instance(self):
        self.assertEqual(OSGB36_TO_WGS84, WGS84_TO_OSGB36.inverse())


class TestGeographicCoordinate(unittest.TestCase):

    def test_defaults(self):
        coord = GeographicCoordinate(51.5, -0.1)
        self.assertEqual(coord.height, 0.0)

    def test_llh_radians(self):
        coord = GeographicCoordinate(45.0, -90.0, 12.0)
        np.testing.assert_allclose(coord.llh, [np.pi / 4, -np.pi / 2, 12.0])

    def test_range_validation(self):
        with self.assertRaises(ValueError):
            GeographicCoordinate(90.5, 0.0)
        with self.assertRaises(ValueError):
            GeographicCoordinate(0.0, -181.0)
        with self.assertRaises(ValueError):
            GeographicCoordinate(float('nan'), 0.0)

    def test_boundaries_accepted(self):
        GeographicCoordinate(-90.0, 180.0)
        GeographicCoordinate(90.0, -180.0)


class TestCartesianCoordinate(unittest.TestCase):

    def test_as_array(self):
        cart = CartesianCoordinate(1.0, 2.0, 3.0)
        np.testing.assert_array_equal(cart.as_array(), [1.0, 2.0, 3.0])


class TestGridReference(unittest.TestCase):

    def test_valid_flag(self):
        self.assertTrue(GridReference(651524.0, 313130.0, "TG 51524 13130").valid)
        self.assertFalse(GridReference(math.nan, math.nan, "").valid)

    def test_to_string(self):
        ref = GridReference(651524.0, 313130.0, "TG 51524 13130")
        self.assertEqual(ref.to_string(), "TG 51524 13130")
        self.assertEqual(ref.to_string(6), "TG 515 131")
        self.assertEqual(ref.to_string(2), "TG 5 1")

    def test_to_string_invalid(self):
        self.assertEqual(GridReference(math.nan, math.nan, "").to_string(6), "")


if __name__ == '__main__':
    unittest.main()
