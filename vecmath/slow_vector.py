# slow_vector.py
"""
Vector whose length is only known at runtime.

Every binary operation checks operand lengths first and raises
VectorSizeError before touching the output. Operations write through numpy
ufuncs with ``out=``, so the output may be either operand.
"""

import math
from typing import Iterator, Optional

import numpy as np
from numpy import float64 as np_float64
from numpy import ndarray
from numba import njit

from vecmath.errors import VectorSizeError
from vecmath.utils import EPSILON

from numba.core.errors import NumbaPerformanceWarning
import warnings
warnings.filterwarnings("ignore", category=NumbaPerformanceWarning)


@njit(cache=True)
def _random_direction(out):
    # normalized gaussian samples are uniform on the sphere
    total = 0.0
    while total == 0.0:
        for i in range(out.shape[0]):
            out[i] = np.random.standard_normal()
            total += out[i] * out[i]
    scale = 1.0 / np.sqrt(total)
    for i in range(out.shape[0]):
        out[i] *= scale


class SlowVector:
    """
    Variable length vector backed by a float64 array.

    Args:
        *values: the components. The length is fixed from here on.
    """

    __slots__ = ("array",)

    def __init__(self, *values: float):
        self.array = np.array(values, dtype=np_float64)

    @classmethod
    def from_unsafe(cls, array: ndarray) -> "SlowVector":
        """Wrap an existing flat float64 array without copying."""
        obj = cls.__new__(cls)
        obj.array = array
        return obj

    @classmethod
    def zeros(cls, length: int) -> "SlowVector":
        return cls.from_unsafe(np.zeros(length, dtype=np_float64))

    @classmethod
    def random(cls, length: int, magnitude: float = 1.0) -> "SlowVector":
        """
        Random direction scaled to ``magnitude``.

        Draws from the source seeded by :func:`vecmath.utils.seed`.
        """
        out = cls.zeros(length)
        if length > 0:
            _random_direction(out.array)
            out.array *= magnitude
        return out

    @property
    def length(self) -> int:
        return self.array.shape[0]

    @property
    def magnitude(self) -> float:
        return float(np.sqrt(np.dot(self.array, self.array)))

    @property
    def squared_magnitude(self) -> float:
        return float(np.dot(self.array, self.array))

    def _check(self, other: "SlowVector") -> None:
        if other.length != self.length:
            raise VectorSizeError(
                f"vector lengths differ: {self.length} and {other.length}")

    def _target(self, out: Optional["SlowVector"]) -> "SlowVector":
        if out is None:
            return SlowVector.zeros(self.length)
        self._check(out)
        return out

    def add(self, other: "SlowVector", out=None) -> "SlowVector":
        self._check(other)
        out = self._target(out)
        np.add(self.array, other.array, out=out.array)
        return out

    def subtract(self, other: "SlowVector", out=None) -> "SlowVector":
        self._check(other)
        out = self._target(out)
        np.subtract(self.array, other.array, out=out.array)
        return out

    def multiply(self, other: "SlowVector", out=None) -> "SlowVector":
        self._check(other)
        out = self._target(out)
        np.multiply(self.array, other.array, out=out.array)
        return out

    def divide(self, other: "SlowVector", out=None) -> "SlowVector":
        """Component-wise quotient. Division by zero yields inf or nan."""
        self._check(other)
        out = self._target(out)
        with np.errstate(divide="ignore", invalid="ignore"):
            np.divide(self.array, other.array, out=out.array)
        return out

    def min(self, other: "SlowVector", out=None) -> "SlowVector":
        self._check(other)
        out = self._target(out)
        np.minimum(self.array, other.array, out=out.array)
        return out

    def max(self, other: "SlowVector", out=None) -> "SlowVector":
        self._check(other)
        out = self._target(out)
        np.maximum(self.array, other.array, out=out.array)
        return out

    def scale(self, s: float, out=None) -> "SlowVector":
        out = self._target(out)
        np.multiply(self.array, s, out=out.array)
        return out

    def scale_and_add(self, other: "SlowVector", s: float, out=None) -> "SlowVector":
        """Fused ``self + other * s``."""
        self._check(other)
        out = self._target(out)
        scaled = other.array * s
        np.add(self.array, scaled, out=out.array)
        return out

    def pow(self, exponent: float, out=None) -> "SlowVector":
        out = self._target(out)
        with np.errstate(divide="ignore", invalid="ignore"):
            np.power(self.array, exponent, out=out.array)
        return out

    def negate(self, out=None) -> "SlowVector":
        out = self._target(out)
        np.negative(self.array, out=out.array)
        return out

    def inverse(self, out=None) -> "SlowVector":
        out = self._target(out)
        with np.errstate(divide="ignore"):
            np.divide(1.0, self.array, out=out.array)
        return out

    def abs(self, out=None) -> "SlowVector":
        out = self._target(out)
        np.abs(self.array, out=out.array)
        return out

    def ceil(self, out=None) -> "SlowVector":
        out = self._target(out)
        np.ceil(self.array, out=out.array)
        return out

    def floor(self, out=None) -> "SlowVector":
        out = self._target(out)
        np.floor(self.array, out=out.array)
        return out

    def round(self, out=None) -> "SlowVector":
        """Round half up, matching the fixed-size vectors."""
        out = self._target(out)
        np.floor(self.array + 0.5, out=out.array)
        return out

    def normalize(self, out=None) -> "SlowVector":
        """Unit vector in the same direction; zero stays zero."""
        out = self._target(out)
        length = self.magnitude
        if length > 0.0:
            np.multiply(self.array, 1.0 / length, out=out.array)
        else:
            out.array[:] = self.array
        return out

    def lerp(self, other: "SlowVector", t: float, out=None) -> "SlowVector":
        self._check(other)
        out = self._target(out)
        delta = other.array - self.array
        np.add(self.array, delta * t, out=out.array)
        return out

    def dot(self, other: "SlowVector") -> float:
        self._check(other)
        return float(np.dot(self.array, other.array))

    def squared_distance(self, other: "SlowVector") -> float:
        self._check(other)
        delta = other.array - self.array
        return float(np.dot(delta, delta))

    def distance(self, other: "SlowVector") -> float:
        return math.sqrt(self.squared_distance(other))

    def zero(self) -> "SlowVector":
        self.array.fill(0.0)
        return self

    def copy_from(self, source: "SlowVector") -> "SlowVector":
        self._check(source)
        self.array[:] = source.array
        return self

    def clone(self) -> "SlowVector":
        return SlowVector.from_unsafe(self.array.copy())

    def equals(self, other: "SlowVector") -> bool:
        """
        Tolerance equality, component by component.

        Vectors of different lengths are never equal.
        """
        if other.length != self.length:
            return False
        a = self.array
        b = other.array
        bound = EPSILON * np.maximum(1.0, np.maximum(np.abs(a), np.abs(b)))
        return bool(np.all(np.abs(a - b) <= bound))

    def exact_equals(self, other: "SlowVector") -> bool:
        return other.length == self.length and bool(np.array_equal(self.array, other.array))

    def __len__(self) -> int:
        return self.length

    def __getitem__(self, index):
        return float(self.array[index])

    def __setitem__(self, index, value):
        self.array[index] = value

    def __iter__(self) -> Iterator[float]:
        return iter(self.array.tolist())

    def __array__(self, dtype=None, copy=None):
        if dtype is None or dtype == self.array.dtype:
            return self.array.copy() if copy else self.array
        return self.array.astype(dtype)

    def __eq__(self, other) -> bool:
        if not isinstance(other, SlowVector):
            return NotImplemented
        return self.exact_equals(other)

    __hash__ = None

    def __neg__(self) -> "SlowVector":
        return self.negate()

    def __add__(self, other):
        if not isinstance(other, SlowVector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, SlowVector):
            return NotImplemented
        return self.subtract(other)

    def __repr__(self) -> str:
        values = ", ".join(repr(v) for v in self.array.tolist())
        return f"SlowVector({values})"

    __str__ = __repr__

    def __reduce__(self):
        return (SlowVector, tuple(self.array.tolist()))

    def __copy__(self) -> "SlowVector":
        return self.clone()

    def __deepcopy__(self, memo) -> "SlowVector":
        return self.clone()
