import unittest
import numpy as np
from pyosgb.coordinate.projection import PHI0, grid_to_latlon, meridional_arc, project_to_grid
from pyosgb.coordinate.transforms import TransformError
from pyosgb.core.constants import F0_OSGB
from pyosgb.core.data_structures import AIRY1830


class TestForwardProjection(unittest.TestCase):
    """Transverse Mercator on the Airy 1830 ellipsoid"""

    def test_ordnance_survey_worked_example(self):
        # OSGB36 52 39 27.2531 N, 1 43 4.5177 E -> E 651409.903, N 313177.270
        e, n = project_to_grid(52.65757030, 1.71792158, round_result=False)
        self.assertAlmostEqual(e, 651409.903, delta=1e-2)
        self.assertAlmostEqual(n, 313177.270, delta=1e-2)

    def test_rounded_to_whole_metres(self):
        e, n = project_to_grid(52.65757030, 1.71792158)
        self.assertEqual(e, 651410.0)
        self.assertEqual(n, 313177.0)

    def test_true_origin(self):
        e, n = project_to_grid(49.0, -2.0, round_result=False)
        self.assertAlmostEqual(e, 400000.0, places=6)
        self.assertAlmostEqual(n, -100000.0, places=6)

    def test_central_meridian_has_false_easting(self):
        for lat in (50.0, 55.0, 60.0):
            e, _ = project_to_grid(lat, -2.0, round_result=False)
            self.assertAlmostEqual(e, 400000.0, places=6)

    def test_monotonic_easting(self):
        lons = np.arange(-7.5, 1.75, 0.25)
        e, _ = project_to_grid(np.full(lons.shape, 54.0), lons, round_result=False)
        self.assertTrue(np.all(np.diff(e) > 0))

    def test_monotonic_northing(self):
        lats = np.arange(49.5, 61.0, 0.25)
        for lon in (-6.0, -2.0, 1.5):
            _, n = project_to_grid(lats, np.full(lats.shape, lon), round_result=False)
            self.assertTrue(np.all(np.diff(n) > 0))

    def test_vectorised_matches_scalar(self):
        lats = np.array([50.5, 53.25, 57.0])
        lons = np.array([-4.5, -1.0, -3.75])
        e, n = project_to_grid(lats, lons)
        for i in range(3):
            es, ns = project_to_grid(lats[i], lons[i])
            self.assertEqual(e[i], es)
            self.assertEqual(n[i], ns)


class TestMeridionalArc(unittest.TestCase):

    def setUp(self):
        self.bf0 = AIRY1830.semi_minor * F0_OSGB
        self.n = AIRY1830.third_flattening

    def test_zero_at_origin(self):
        self.assertEqual(meridional_arc(self.bf0, self.n, PHI0, PHI0), 0.0)

    def test_one_degree(self):
        # one degree of latitude near 49.5 N is about 111.2 km
        m = meridional_arc(self.bf0, self.n, PHI0, np.radians(50.0))
        self.assertAlmostEqual(m, 111.2e3, delta=200.0)

    def test_antisymmetric(self):
        up = meridional_arc(self.bf0, self.n, PHI0, PHI0 + 0.01)
        down = meridional_arc(self.bf0, self.n, PHI0, PHI0 - 0.01)
        self.assertGreater(up, 0.0)
        self.assertLess(down, 0.0)


class TestInverseProjection(unittest.TestCase):

    def test_ordnance_survey_worked_example(self):
        lat, lon = grid_to_latlon(651409.903, 313177.270)
        self.assertAlmostEqual(lat, 52.65757030, delta=5e-8)
        self.assertAlmostEqual(lon, 1.71792158, delta=5e-8)

    def test_round_trip(self):
        lats = np.array([49.9, 51.5, 54.2, 57.3, 60.1])
        lons = np.array([-5.7, -0.1, -3.0, -6.1, -1.2])
        e, n = project_to_grid(lats, lons, round_result=False)
        lat2, lon2 = grid_to_latlon(e, n)
        np.testing.assert_allclose(lat2, lats, atol=1e-7)
        np.testing.assert_allclose(lon2, lons, atol=1e-7)

    def test_non_finite(self):
        with self.assertRaises(TransformError):
            grid_to_latlon(np.nan, 100000.0)


if __name__ == '__main__':
    unittest.main()
