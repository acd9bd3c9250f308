# vector4.py

import math
import numpy as np
from numpy import float64 as np_float64
from numba import njit

from vecmath.base import as_array, resolve_out
from vecmath.elementwise import (
    abs, add, ceil, copy, distance, divide, dot, equals, exact_equals, floor,
    inverse, lerp, magnitude, max, min, multiply, negate, normalize, pow,
    round, scale, scale_and_add, squared_distance, squared_magnitude,
    subtract, zero,
)
from vecmath.vector import Vector

from numba.core.errors import NumbaPerformanceWarning
import warnings
warnings.filterwarnings("ignore", category=NumbaPerformanceWarning)


@njit(cache=True)
def _cross(a, b, c, out):
    d = b[0] * c[1] - b[1] * c[0]
    e = b[0] * c[2] - b[2] * c[0]
    f = b[0] * c[3] - b[3] * c[0]
    g = b[1] * c[2] - b[2] * c[1]
    h = b[1] * c[3] - b[3] * c[1]
    i = b[2] * c[3] - b[3] * c[2]
    a0, a1, a2, a3 = a[0], a[1], a[2], a[3]
    out[0] = a1 * i - a2 * h + a3 * g
    out[1] = -(a0 * i) + a2 * f - a3 * e
    out[2] = a0 * h - a1 * f + a3 * d
    out[3] = -(a0 * g) + a1 * e - a2 * d


@njit(cache=True)
def _random(magnitude, out):
    # Marsaglia: two points drawn uniformly inside the unit disc by rejection,
    # the second rescaled so the 4D length is 1
    v1 = v2 = v3 = v4 = 0.0
    s1 = 1.0
    while s1 >= 1.0:
        v1 = np.random.random() * 2.0 - 1.0
        v2 = np.random.random() * 2.0 - 1.0
        s1 = v1 * v1 + v2 * v2

    s2 = 1.0
    while s2 >= 1.0 or s2 == 0.0:
        v3 = np.random.random() * 2.0 - 1.0
        v4 = np.random.random() * 2.0 - 1.0
        s2 = v3 * v3 + v4 * v4

    d = math.sqrt((1.0 - s1) / s2)
    out[0] = magnitude * v1
    out[1] = magnitude * v2
    out[2] = magnitude * v3 * d
    out[3] = magnitude * v4 * d


@njit(cache=True)
def _transform_matrix4(v, m, out):
    x, y, z, w = v[0], v[1], v[2], v[3]
    out[0] = m[0] * x + m[4] * y + m[8] * z + m[12] * w
    out[1] = m[1] * x + m[5] * y + m[9] * z + m[13] * w
    out[2] = m[2] * x + m[6] * y + m[10] * z + m[14] * w
    out[3] = m[3] * x + m[7] * y + m[11] * z + m[15] * w


@njit(cache=True)
def _transform_quaternion(v, q, out):
    qx, qy, qz, qw = q[0], q[1], q[2], q[3]
    x, y, z, w = v[0], v[1], v[2], v[3]

    tx = 2.0 * (qy * z - qz * y)
    ty = 2.0 * (qz * x - qx * z)
    tz = 2.0 * (qx * y - qy * x)

    out[0] = x + qw * tx + qy * tz - qz * ty
    out[1] = y + qw * ty + qz * tx - qx * tz
    out[2] = z + qw * tz + qx * ty - qy * tx
    out[3] = w


def from_values(x: float, y: float, z: float, w: float, out=None):
    out, buffer = resolve_out(out, Vector4)
    buffer[0] = x
    buffer[1] = y
    buffer[2] = z
    buffer[3] = w
    return out


def cross(a, b, c, out=None):
    """
    Generalized cross product of three 4D vectors.

    The result is orthogonal to all three inputs.
    """
    out, buffer = resolve_out(out, Vector4)
    _cross(as_array(a, 4), as_array(b, 4), as_array(c, 4), buffer)
    return out


def random(magnitude: float = 1.0, out=None):
    """Uniformly distributed point on the 3-sphere of radius ``magnitude``."""
    out, buffer = resolve_out(out, Vector4)
    _random(float(magnitude), buffer)
    return out


def transform_matrix4(v, matrix, out=None):
    out, buffer = resolve_out(out, Vector4)
    _transform_matrix4(as_array(v, 4), as_array(matrix, 16), buffer)
    return out


def transform_quaternion(v, quaternion, out=None):
    """Rotate the xyz part of ``v`` by a unit quaternion, keeping ``w``."""
    out, buffer = resolve_out(out, Vector4)
    _transform_quaternion(as_array(v, 4), as_array(quaternion, 4), buffer)
    return out


class Vector4(Vector):
    """A four-component vector ``(x, y, z, w)``."""

    __slots__ = ()

    size = 4
    _default = np.zeros(4, dtype=np_float64)

    @property
    def z(self) -> float:
        return float(self.array[2])

    @z.setter
    def z(self, value: float) -> None:
        self.array[2] = value

    @property
    def w(self) -> float:
        return float(self.array[3])

    @w.setter
    def w(self, value: float) -> None:
        self.array[3] = value

    @classmethod
    def from_values(cls, x: float, y: float, z: float, w: float) -> "Vector4":
        return cls(x, y, z, w)

    @classmethod
    def random(cls, magnitude: float = 1.0) -> "Vector4":
        return random(magnitude, cls())

    def cross(self, b, c, out=None) -> "Vector4":
        return cross(self, b, c, out)

    def transform_matrix4(self, matrix, out=None) -> "Vector4":
        return transform_matrix4(self, matrix, out)

    def transform_quaternion(self, quaternion, out=None) -> "Vector4":
        return transform_quaternion(self, quaternion, out)
