# tests/test_algorithms.py

import itertools
import math
import unittest

from vecmath import algorithms


class TestCombinatorics(unittest.TestCase):
    def test_factorial(self):
        self.assertEqual(algorithms.factorial(0), 1)
        self.assertEqual(algorithms.factorial(1), 1)
        self.assertEqual(algorithms.factorial(3), 6)
        self.assertEqual(algorithms.factorial(10), 3628800)
        self.assertEqual(algorithms.factorial(25), math.factorial(25))

    def test_factorial_of_negative(self):
        self.assertEqual(algorithms.factorial(-1), math.inf)
        self.assertEqual(algorithms.factorial(-2), -math.inf)

    def test_combinations(self):
        self.assertEqual(algorithms.combinations(1, 1), 1)
        self.assertEqual(algorithms.combinations(2, 1), 2)
        self.assertEqual(algorithms.combinations(10, 5), 252)
        self.assertEqual(algorithms.combinations(10, 10), 1)
        self.assertEqual(algorithms.combinations(10, 0), 1)
        self.assertIsInstance(algorithms.combinations(30, 15), int)
        self.assertEqual(algorithms.combinations(30, 15), math.comb(30, 15))

    def test_permutations(self):
        self.assertEqual(algorithms.permutations(5, 2), 20)
        self.assertEqual(algorithms.permutations(5, 5), 120)
        self.assertEqual(algorithms.permutations(5, 0), 1)
        self.assertEqual(algorithms.permutations(12, 4), math.perm(12, 4))

    def test_hypergeometric_pmf(self):
        expected = math.comb(5, 4) * math.comb(45, 6) / math.comb(50, 10)
        self.assertAlmostEqual(algorithms.hypergeometric_pmf(50, 5, 10, 4), expected)

    def test_hypergeometric_pmf_sums_to_one(self):
        total = sum(algorithms.hypergeometric_pmf(20, 7, 5, k) for k in range(6))
        self.assertAlmostEqual(total, 1.0)


class TestNumberTheory(unittest.TestCase):
    def test_gcd(self):
        self.assertEqual(algorithms.gcd(12, 18), 6)
        self.assertEqual(algorithms.gcd(-12, 18), 6)
        self.assertEqual(algorithms.gcd(17, 5), 1)
        self.assertEqual(algorithms.gcd(0, 5), 5)
        self.assertEqual(algorithms.gcd(0, 0), 0)

    def test_is_prime(self):
        primes = [n for n in range(-3, 30) if algorithms.is_prime(n)]
        self.assertEqual(primes, [2, 3, 5, 7, 11, 13, 17, 19, 23, 29])
        self.assertTrue(algorithms.is_prime(7919))
        self.assertFalse(algorithms.is_prime(7917))

    def test_prime_factorization(self):
        self.assertEqual(algorithms.prime_factorization(360), [2, 2, 2, 3, 3, 5])
        self.assertEqual(algorithms.prime_factorization(97), [97])
        self.assertEqual(algorithms.prime_factorization(2 * 7919), [2, 7919])
        self.assertEqual(algorithms.prime_factorization(1), [])
        self.assertEqual(algorithms.prime_factorization(0), [])

    def test_prime_factorization_multiplies_back(self):
        for n in range(2, 200):
            factors = algorithms.prime_factorization(n)
            self.assertEqual(math.prod(factors), n)
            self.assertTrue(all(algorithms.is_prime(f) for f in factors))
            self.assertEqual(factors, sorted(factors))


class TestSequences(unittest.TestCase):
    def test_summation(self):
        self.assertEqual(algorithms.summation(1, 100, lambda i: i), 5050)
        self.assertEqual(algorithms.summation(1, 3, lambda i: i * i), 14)
        self.assertEqual(algorithms.summation(5, 4, lambda i: i), 0)

    def test_fibonacci(self):
        first = list(itertools.islice(algorithms.fibonacci(), 14))
        self.assertEqual(first, [0, 1, 1, 2, 3, 5, 8, 13, 21, 34, 55, 89, 144, 233])

    def test_angle_conversions(self):
        self.assertAlmostEqual(algorithms.degrees_to_radians(180), math.pi)
        self.assertAlmostEqual(algorithms.degrees_to_radians(-90), -math.pi / 2)
        self.assertAlmostEqual(algorithms.radians_to_degrees(math.pi / 4), 45.0)
        self.assertAlmostEqual(algorithms.radians_to_degrees(algorithms.degrees_to_radians(33.0)),
                               33.0)


if __name__ == "__main__":
    unittest.main()
