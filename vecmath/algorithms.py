# algorithms.py
"""
Scalar number-theory and combinatorics helpers.

These work on Python numbers and are not compiled; integer inputs give exact
integer results wherever the result is defined.
"""

import math
from typing import Callable, Iterator, List, Union

Number = Union[int, float]

_DEGREES_TO_RADIANS = math.pi / 180.0


def factorial(n: int) -> Number:
    """
    n! computed iteratively.

    A negative ``n`` has no factorial; the result is the signed infinity the
    Gamma function approaches there (``inf`` for odd ``n``, ``-inf`` for
    even ``n``), so ratios built from it collapse to zero.
    """
    if n < 0:
        return math.inf if n % 2 else -math.inf
    out = 1
    for i in range(2, int(n) + 1):
        out *= i
    return out


def _factorial_ratio(numerator: Number, denominator: Number) -> Number:
    if isinstance(numerator, int) and isinstance(denominator, int):
        return numerator // denominator
    return numerator / denominator


def combinations(n: int, r: int) -> Number:
    """Ways to choose ``r`` of ``n`` items ignoring order, nCr."""
    return _factorial_ratio(factorial(n), factorial(r) * factorial(n - r))


def permutations(n: int, r: int) -> Number:
    """Ordered ways to choose ``r`` of ``n`` items, nPr."""
    return _factorial_ratio(factorial(n), factorial(n - r))


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm; always non-negative."""
    a = -a if a < 0 else a
    b = -b if b < 0 else b
    while b:
        a, b = b, a % b
    return a


def is_prime(n: int) -> bool:
    if n < 2:
        return False
    i = 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += 1
    return True


def prime_factorization(n: int) -> List[int]:
    """
    Prime factors of ``n`` in ascending order, with repetition.

    Values below 2 have no factors and give an empty list.
    """
    out = []
    divisor = 2
    while n >= 2:
        if divisor * divisor > n:
            out.append(int(n))
            break
        if n % divisor == 0:
            out.append(divisor)
            n //= divisor
        else:
            divisor += 1
    return out


def summation(minimum: int, maximum: int, term: Callable[[int], Number]) -> Number:
    """Sum of ``term(i)`` for ``i`` from ``minimum`` to ``maximum`` inclusive."""
    out = 0
    for i in range(minimum, maximum + 1):
        out += term(i)
    return out


def degrees_to_radians(degrees: float) -> float:
    return degrees * _DEGREES_TO_RADIANS


def radians_to_degrees(radians: float) -> float:
    return radians * 180.0 / math.pi


def fibonacci() -> Iterator[int]:
    """Endless generator of the Fibonacci sequence, starting 0, 1, 1, 2."""
    a, b = 0, 1
    while True:
        yield a
        a, b = b, a + b


def hypergeometric_pmf(population: int, successes: int, draws: int, observed: int) -> float:
    """
    Probability of ``observed`` successes in ``draws`` draws without
    replacement from ``population`` items, ``successes`` of which count.
    """
    return (combinations(successes, observed)
            * combinations(population - successes, draws - observed)
            / combinations(population, draws))
