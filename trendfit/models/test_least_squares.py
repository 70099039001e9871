import math
import unittest

import numpy as np
from scipy import stats

from trendfit.models import least_squares


class TestLeastSquaresModel(unittest.TestCase):

    def test_happy(self):
        model = least_squares.LeastSquaresModel()
        xs = np.arange(4)
        ys = np.array([10, 2, 3, 4])
        data = np.column_stack((xs, ys)).astype(float)
        fit = model.fit(data)
        self.assertAlmostEqual(fit[0], -1.7)
        self.assertAlmostEqual(fit[1], 7.3)
        residuals = model.get_residuals(data, fit)
        self.assertEqual(tuple(int(r) for r in residuals), (7, 12, 0, 3))

    def test_perfect_line(self):
        model = least_squares.LeastSquaresModel()
        data = np.array([(x, 100. * x) for x in range(1, 9)])
        slope, intercept = model.fit(data)
        self.assertEqual(slope, 100)
        self.assertEqual(intercept, 0)
        self.assertEqual(model.r_squared(data), 1)

    def test_matches_linregress(self):
        model = least_squares.LeastSquaresModel()
        data = np.array([
            (1, 0), (2, 50), (3, 100), (4, 200),
            (5, 400), (6, 800), (7, 1600), (8, 3200)], dtype=float)
        slope, intercept = model.fit(data)
        expected = stats.linregress(data[:, 0], data[:, 1])
        self.assertAlmostEqual(slope, expected.slope)
        self.assertAlmostEqual(intercept, expected.intercept)
        self.assertAlmostEqual(model.r_squared(data), expected.rvalue ** 2)
        self.assertEqual(round(slope, 2), 386.31)
        self.assertEqual(round(intercept, 2), -944.64)
        self.assertEqual(round(model.r_squared(data), 2), 0.73)

    def test_forced_intercept(self):
        model = least_squares.LeastSquaresModel(forced_intercept=12)
        data = np.array([
            (1, 200), (2, 300), (3, 0), (4, 500),
            (5, 600), (7, 800), (8, 900)], dtype=float)
        slope, intercept = model.fit(data)
        self.assertEqual(intercept, 12)
        self.assertAlmostEqual(slope, 18240 / 168)
        self.assertEqual(round(model.r_squared(data), 2), 0.79)

    def test_forced_intercept_is_exact(self):
        model = least_squares.LeastSquaresModel(forced_intercept=0.1)
        data = np.array([(0.3, 1.7), (1.1, 2.9), (2.7, 0.2)])
        _, intercept = model.fit(data)
        self.assertEqual(intercept, 0.1)

    def test_r_squared_not_clamped(self):
        model = least_squares.LeastSquaresModel(forced_intercept=100)
        data = np.array([(1, 1), (2, 2), (3, 3)], dtype=float)
        self.assertLess(model.r_squared(data), 0)

    def test_too_few_data_points(self):
        model = least_squares.LeastSquaresModel()
        for data in (np.zeros((0, 2)), np.array([(1., 2.)])):
            slope, intercept = model.fit(data)
            self.assertTrue(math.isnan(slope))
            self.assertTrue(math.isnan(intercept))
            self.assertTrue(math.isnan(model.r_squared(data)))

    def test_constant_xs(self):
        model = least_squares.LeastSquaresModel()
        data = np.array([(2, 1), (2, 5), (2, 9)], dtype=float)
        slope, intercept = model.fit(data)
        self.assertFalse(np.isfinite(slope))
        self.assertFalse(np.isfinite(intercept))

    def test_constant_xs_forced_intercept(self):
        model = least_squares.LeastSquaresModel(forced_intercept=1)
        data = np.array([(0, 1), (0, 5)], dtype=float)
        slope, intercept = model.fit(data)
        self.assertFalse(np.isfinite(slope))
        self.assertEqual(intercept, 1)

    def test_constant_ys(self):
        model = least_squares.LeastSquaresModel()
        data = np.array([(1, 5), (2, 5), (3, 5), (4, 5)], dtype=float)
        slope, intercept = model.fit(data)
        self.assertEqual(slope, 0)
        self.assertEqual(intercept, 5)
        self.assertTrue(math.isnan(model.r_squared(data)))

    def test_non_finite_forced_intercept(self):
        with self.assertRaises(ValueError):
            least_squares.LeastSquaresModel(forced_intercept=float('nan'))
        with self.assertRaises(ValueError):
            least_squares.LeastSquaresModel(forced_intercept=float('inf'))
