# elementwise.py
"""
Length-generic kernels shared by every fixed-size type.

Each kernel walks its inputs index by index and writes ``out[i]`` only after
reading index ``i`` of every input, so ``out`` may alias any input. The
public wrappers accept any flat sequences of equal length and, when ``out``
is omitted, allocate the type of the first value-instance argument.
"""

import math
import numpy as np
from numba import njit

from vecmath.base import as_array, out_like
from vecmath.errors import SizeMismatchError
from vecmath.utils import approx_equals

from numba.core.errors import NumbaPerformanceWarning
import warnings
warnings.filterwarnings("ignore", category=NumbaPerformanceWarning)


@njit(cache=True)
def _add(a, b, out):
    for i in range(out.shape[0]):
        out[i] = a[i] + b[i]


@njit(cache=True)
def _subtract(a, b, out):
    for i in range(out.shape[0]):
        out[i] = a[i] - b[i]


@njit(cache=True)
def _multiply(a, b, out):
    for i in range(out.shape[0]):
        out[i] = a[i] * b[i]


@njit(cache=True, error_model="numpy")
def _divide(a, b, out):
    for i in range(out.shape[0]):
        out[i] = a[i] / b[i]


@njit(cache=True)
def _scale(a, s, out):
    for i in range(out.shape[0]):
        out[i] = a[i] * s


@njit(cache=True)
def _scale_and_add(a, b, s, out):
    for i in range(out.shape[0]):
        out[i] = a[i] + b[i] * s


@njit(cache=True)
def _negate(a, out):
    for i in range(out.shape[0]):
        out[i] = -a[i]


@njit(cache=True, error_model="numpy")
def _inverse(a, out):
    for i in range(out.shape[0]):
        out[i] = 1.0 / a[i]


@njit(cache=True)
def _abs(a, out):
    for i in range(out.shape[0]):
        out[i] = math.fabs(a[i])


@njit(cache=True)
def _ceil(a, out):
    for i in range(out.shape[0]):
        out[i] = np.ceil(a[i])


@njit(cache=True)
def _floor(a, out):
    for i in range(out.shape[0]):
        out[i] = np.floor(a[i])


@njit(cache=True)
def _round(a, out):
    # halves round towards positive infinity
    for i in range(out.shape[0]):
        out[i] = np.floor(a[i] + 0.5)


@njit(cache=True)
def _min(a, b, out):
    for i in range(out.shape[0]):
        out[i] = a[i] if a[i] < b[i] else b[i]


@njit(cache=True)
def _max(a, b, out):
    for i in range(out.shape[0]):
        out[i] = a[i] if a[i] > b[i] else b[i]


@njit(cache=True, error_model="numpy")
def _pow(a, exponent, out):
    for i in range(out.shape[0]):
        out[i] = a[i] ** exponent


@njit(cache=True)
def _lerp(a, b, t, out):
    for i in range(out.shape[0]):
        ai = a[i]
        out[i] = ai + t * (b[i] - ai)


@njit(cache=True)
def _dot(a, b):
    total = 0.0
    for i in range(a.shape[0]):
        total += a[i] * b[i]
    return total


@njit(cache=True)
def _squared_magnitude(a):
    total = 0.0
    for i in range(a.shape[0]):
        total += a[i] * a[i]
    return total


@njit(cache=True)
def _magnitude(a):
    return math.sqrt(_squared_magnitude(a))


@njit(cache=True)
def _squared_distance(a, b):
    total = 0.0
    for i in range(a.shape[0]):
        d = b[i] - a[i]
        total += d * d
    return total


@njit(cache=True)
def _normalize(a, out):
    length = _squared_magnitude(a)
    if length > 0.0:
        length = 1.0 / math.sqrt(length)
    for i in range(out.shape[0]):
        out[i] = a[i] * length


@njit(cache=True)
def _copy(a, out):
    for i in range(out.shape[0]):
        out[i] = a[i]


@njit(cache=True)
def _fill(out, value):
    for i in range(out.shape[0]):
        out[i] = value


@njit(cache=True)
def _equals(a, b):
    for i in range(a.shape[0]):
        if not approx_equals(a[i], b[i]):
            return False
    return True


@njit(cache=True)
def _exact_equals(a, b):
    for i in range(a.shape[0]):
        if a[i] != b[i]:
            return False
    return True


def _pair(a, b):
    a_arr = as_array(a)
    b_arr = as_array(b)
    if a_arr.shape[0] != b_arr.shape[0]:
        raise SizeMismatchError(
            f"Operands have {a_arr.shape[0]} and {b_arr.shape[0]} components")
    return a_arr, b_arr


def _binary(kernel, a, b, out):
    a_arr, b_arr = _pair(a, b)
    out, buffer = out_like(out, a if out is None else out, a_arr.shape[0])
    kernel(a_arr, b_arr, buffer)
    return out


def _unary(kernel, a, out):
    a_arr = as_array(a)
    out, buffer = out_like(out, a if out is None else out, a_arr.shape[0])
    kernel(a_arr, buffer)
    return out


def add(a, b, out=None):
    """Component-wise ``a + b``."""
    return _binary(_add, a, b, out)


def subtract(a, b, out=None):
    """Component-wise ``a - b``."""
    return _binary(_subtract, a, b, out)


def multiply(a, b, out=None):
    """Component-wise (Hadamard) product."""
    return _binary(_multiply, a, b, out)


def divide(a, b, out=None):
    """Component-wise quotient. Zero divisors yield inf or nan."""
    return _binary(_divide, a, b, out)


def min(a, b, out=None):
    return _binary(_min, a, b, out)


def max(a, b, out=None):
    return _binary(_max, a, b, out)


def scale(a, s: float, out=None):
    a_arr = as_array(a)
    out, buffer = out_like(out, a, a_arr.shape[0])
    _scale(a_arr, float(s), buffer)
    return out


def pow(a, exponent: float, out=None):
    """Raise each component of ``a`` to ``exponent``."""
    a_arr = as_array(a)
    out, buffer = out_like(out, a, a_arr.shape[0])
    _pow(a_arr, float(exponent), buffer)
    return out


def scale_and_add(a, b, s: float, out=None):
    """Fused ``a + b * s``."""
    a_arr, b_arr = _pair(a, b)
    out, buffer = out_like(out, a, a_arr.shape[0])
    _scale_and_add(a_arr, b_arr, float(s), buffer)
    return out


def lerp(a, b, t: float, out=None):
    """
    Linear interpolation ``a + t * (b - a)``.

    ``t`` is not clamped, so values outside [0, 1] extrapolate.
    """
    a_arr, b_arr = _pair(a, b)
    out, buffer = out_like(out, a, a_arr.shape[0])
    _lerp(a_arr, b_arr, float(t), buffer)
    return out


def negate(a, out=None):
    return _unary(_negate, a, out)


def inverse(a, out=None):
    """Component-wise reciprocal. Zero components become inf."""
    return _unary(_inverse, a, out)


def abs(a, out=None):
    return _unary(_abs, a, out)


def ceil(a, out=None):
    return _unary(_ceil, a, out)


def floor(a, out=None):
    return _unary(_floor, a, out)


def round(a, out=None):
    """Round each component to the nearest integer, halves going up."""
    return _unary(_round, a, out)


def normalize(a, out=None):
    """
    Scale ``a`` to unit length.

    A zero-length input produces the zero vector rather than an error.
    """
    return _unary(_normalize, a, out)


def copy(a, out=None):
    """Copy the components of ``a`` into ``out``."""
    return _unary(_copy, a, out)


def zero(out):
    """Set every component of ``out`` to zero and return it."""
    out, buffer = out_like(out, out, as_array(out).shape[0])
    _fill(buffer, 0.0)
    return out


def dot(a, b) -> float:
    a_arr, b_arr = _pair(a, b)
    return float(_dot(a_arr, b_arr))


def magnitude(a) -> float:
    return float(_magnitude(as_array(a)))


def squared_magnitude(a) -> float:
    return float(_squared_magnitude(as_array(a)))


def distance(a, b) -> float:
    a_arr, b_arr = _pair(a, b)
    return math.sqrt(_squared_distance(a_arr, b_arr))


def squared_distance(a, b) -> float:
    a_arr, b_arr = _pair(a, b)
    return float(_squared_distance(a_arr, b_arr))


def equals(a, b) -> bool:
    """Tolerance equality of every component pair (see utils.approx_equals)."""
    a_arr, b_arr = _pair(a, b)
    return bool(_equals(a_arr, b_arr))


def exact_equals(a, b) -> bool:
    a_arr, b_arr = _pair(a, b)
    return bool(_exact_equals(a_arr, b_arr))
