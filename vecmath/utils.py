# utils.py

import logging
from typing import Final

import numpy as np
from numba import njit

from numba.core.errors import NumbaPerformanceWarning
import warnings
warnings.filterwarnings("ignore", category=NumbaPerformanceWarning)

logger = logging.getLogger(__name__)

# single precision machine epsilon, shared by every tolerance comparison
EPSILON: Final[float] = float(np.finfo(np.float32).eps)


@njit(cache=True)
def approx_equals(a: float, b: float) -> bool:
    """
    Compare two scalars with a tolerance relative to their magnitude.

    Args:
        a: first value.
        b: second value.

    Returns:
        True when |a - b| <= EPSILON * max(1, |a|, |b|).
    """
    return abs(a - b) <= EPSILON * max(1.0, abs(a), abs(b))


@njit(cache=True)
def approx_equals_absolute(a: float, b: float) -> bool:
    """True when |a - b| <= EPSILON."""
    return abs(a - b) <= EPSILON


@njit(cache=True)
def exact_equals(a: float, b: float) -> bool:
    return a == b


@njit(cache=True)
def _seed(value):
    np.random.seed(value)


def seed(value: int) -> None:
    """
    Seed the generator used by every random constructor.

    The compiled kernels draw from numba's own generator, which is separate
    from numpy's global one, so seeding numpy directly has no effect on them.

    Args:
        value: non-negative integer seed (taken modulo 2**32).
    """
    value = int(value) % (2 ** 32)
    logger.debug("seeding random source with %d", value)
    _seed(value)
