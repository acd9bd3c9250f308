# vector2.py

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
from vecmath.vector3 import Vector3

from numba.core.errors import NumbaPerformanceWarning
import warnings
warnings.filterwarnings("ignore", category=NumbaPerformanceWarning)


@njit(cache=True)
def _cross(a, b, out):
    z = a[0] * b[1] - a[1] * b[0]
    out[0] = 0.0
    out[1] = 0.0
    out[2] = z


@njit(cache=True)
def _random(magnitude, out):
    r = np.random.random() * 2.0 * math.pi
    out[0] = math.cos(r) * magnitude
    out[1] = math.sin(r) * magnitude


@njit(cache=True)
def _transform_matrix2(v, m, out):
    x = v[0]
    y = v[1]
    out[0] = m[0] * x + m[2] * y
    out[1] = m[1] * x + m[3] * y


@njit(cache=True)
def _transform_matrix3(v, m, out):
    x = v[0]
    y = v[1]
    out[0] = m[0] * x + m[3] * y + m[6]
    out[1] = m[1] * x + m[4] * y + m[7]


@njit(cache=True)
def _transform_matrix4(v, m, out):
    x = v[0]
    y = v[1]
    out[0] = m[0] * x + m[4] * y + m[12]
    out[1] = m[1] * x + m[5] * y + m[13]


@njit(cache=True)
def _rotate(v, origin, radians, out):
    p0 = v[0] - origin[0]
    p1 = v[1] - origin[1]
    s = math.sin(radians)
    c = math.cos(radians)
    o0 = origin[0]
    o1 = origin[1]
    out[0] = p0 * c - p1 * s + o0
    out[1] = p0 * s + p1 * c + o1


@njit(cache=True)
def _angle(a, b):
    mag = math.sqrt(a[0] * a[0] + a[1] * a[1]) * \
        math.sqrt(b[0] * b[0] + b[1] * b[1])
    cosine = 0.0
    if mag != 0.0:
        cosine = (a[0] * b[0] + a[1] * b[1]) / mag
    if cosine > 1.0:
        cosine = 1.0
    elif cosine < -1.0:
        cosine = -1.0
    return math.acos(cosine)


def from_values(x: float, y: float, out=None):
    out, buffer = resolve_out(out, Vector2)
    buffer[0] = x
    buffer[1] = y
    return out


def cross(a, b, out=None):
    """
    Cross product of two 2D vectors embedded in the XY plane.

    Returns:
        A Vector3 ``(0, 0, a.x * b.y - a.y * b.x)``.
    """
    out, buffer = resolve_out(out, Vector3)
    _cross(as_array(a, 2), as_array(b, 2), buffer)
    return out


def random(magnitude: float = 1.0, out=None):
    """Point on the circle of radius ``magnitude`` at a uniformly random angle."""
    out, buffer = resolve_out(out, Vector2)
    _random(float(magnitude), buffer)
    return out


def transform_matrix2(v, matrix, out=None):
    out, buffer = resolve_out(out, Vector2)
    _transform_matrix2(as_array(v, 2), as_array(matrix, 4), buffer)
    return out


def transform_matrix3(v, matrix, out=None):
    """Apply a 3x3 matrix to ``v`` as a point (affine 2D transform)."""
    out, buffer = resolve_out(out, Vector2)
    _transform_matrix3(as_array(v, 2), as_array(matrix, 9), buffer)
    return out


def transform_matrix4(v, matrix, out=None):
    """Apply a 4x4 matrix to ``v`` treated as ``(x, y, 0, 1)``."""
    out, buffer = resolve_out(out, Vector2)
    _transform_matrix4(as_array(v, 2), as_array(matrix, 16), buffer)
    return out


def rotate(v, origin, radians: float, out=None):
    """Rotate ``v`` counter-clockwise about ``origin``."""
    out, buffer = resolve_out(out, Vector2)
    _rotate(as_array(v, 2), as_array(origin, 2), float(radians), buffer)
    return out


def angle(a, b) -> float:
    """Unsigned angle between two vectors, in radians."""
    return float(_angle(as_array(a, 2), as_array(b, 2)))


class Vector2(Vector):
    """A two-component vector ``(x, y)``."""

    __slots__ = ()

    size = 2
    _default = np.zeros(2, dtype=np_float64)

    @classmethod
    def from_values(cls, x: float, y: float) -> "Vector2":
        return cls(x, y)

    @classmethod
    def random(cls, magnitude: float = 1.0) -> "Vector2":
        return random(magnitude, cls())

    def cross(self, other, out=None) -> Vector3:
        return cross(self, other, out)

    def transform_matrix2(self, matrix, out=None) -> "Vector2":
        return transform_matrix2(self, matrix, out)

    def transform_matrix3(self, matrix, out=None) -> "Vector2":
        return transform_matrix3(self, matrix, out)

    def transform_matrix4(self, matrix, out=None) -> "Vector2":
        return transform_matrix4(self, matrix, out)

    def rotate(self, origin, radians: float, out=None) -> "Vector2":
        return rotate(self, origin, radians, out)

    def angle(self, other) -> float:
        return angle(self, other)
