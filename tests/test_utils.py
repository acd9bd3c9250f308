# tests/test_utils.py

import unittest

import numpy as np

from vecmath import EPSILON, Vector3, errors
from vecmath.utils import approx_equals, approx_equals_absolute, exact_equals, seed


class TestTolerance(unittest.TestCase):
    def test_epsilon(self):
        self.assertEqual(EPSILON, float(np.finfo(np.float32).eps))

    def test_approx_equals_is_relative(self):
        self.assertTrue(approx_equals(1.0, 1.0 + EPSILON / 2))
        self.assertFalse(approx_equals(1.0, 1.0 + EPSILON * 2))
        # the bound grows with magnitude
        self.assertTrue(approx_equals(1e6, 1e6 + 1e-2))
        self.assertFalse(approx_equals_absolute(1e6, 1e6 + 1e-2))

    def test_approx_equals_near_zero(self):
        self.assertTrue(approx_equals(0.0, EPSILON / 2))
        self.assertFalse(approx_equals(0.0, EPSILON * 2))

    def test_approx_equals_absolute(self):
        self.assertTrue(approx_equals_absolute(0.5, 0.5 + EPSILON / 2))
        self.assertFalse(approx_equals_absolute(0.5, 0.5 + EPSILON * 2))

    def test_exact_equals(self):
        self.assertTrue(exact_equals(0.25, 0.25))
        self.assertFalse(exact_equals(0.25, 0.25 + 1e-12))


class TestSeed(unittest.TestCase):
    def test_same_seed_same_values(self):
        seed(1234)
        first = [Vector3.random() for _ in range(3)]
        seed(1234)
        second = [Vector3.random() for _ in range(3)]
        self.assertEqual(first, second)

    def test_different_seeds_differ(self):
        seed(1)
        first = Vector3.random()
        seed(2)
        self.assertNotEqual(first, Vector3.random())

    def test_large_seed_wraps(self):
        seed(2 ** 32 + 5)
        first = Vector3.random()
        seed(5)
        self.assertEqual(first, Vector3.random())


class TestErrors(unittest.TestCase):
    def test_hierarchy(self):
        self.assertTrue(issubclass(errors.SingularMatrixError, ZeroDivisionError))
        self.assertTrue(issubclass(errors.VectorSizeError, errors.SizeMismatchError))
        self.assertTrue(issubclass(errors.MatrixSizeError, ValueError))
        self.assertTrue(issubclass(errors.PartialMatrixError, ValueError))
        for error in (errors.SingularMatrixError, errors.SizeMismatchError,
                      errors.VectorSizeError, errors.MatrixSizeError, errors.PartialMatrixError):
            self.assertTrue(issubclass(error, errors.VecmathError))


if __name__ == "__main__":
    unittest.main()
