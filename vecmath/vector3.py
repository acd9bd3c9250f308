# vector3.py

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
from vecmath.utils import EPSILON
from vecmath.vector import Vector

from numba.core.errors import NumbaPerformanceWarning
import warnings
warnings.filterwarnings("ignore", category=NumbaPerformanceWarning)


@njit(cache=True)
def _cross(a, b, out):
    ax, ay, az = a[0], a[1], a[2]
    bx, by, bz = b[0], b[1], b[2]
    out[0] = ay * bz - az * by
    out[1] = az * bx - ax * bz
    out[2] = ax * by - ay * bx


@njit(cache=True)
def _random(magnitude, out):
    r = np.random.random() * 2.0 * math.pi
    z = np.random.random() * 2.0 - 1.0
    z_scale = math.sqrt(1.0 - z * z) * magnitude
    out[0] = math.cos(r) * z_scale
    out[1] = math.sin(r) * z_scale
    out[2] = z * magnitude


@njit(cache=True)
def _transform_matrix3(v, m, out):
    x, y, z = v[0], v[1], v[2]
    out[0] = x * m[0] + y * m[3] + z * m[6]
    out[1] = x * m[1] + y * m[4] + z * m[7]
    out[2] = x * m[2] + y * m[5] + z * m[8]


@njit(cache=True, error_model="numpy")
def _transform_matrix4(v, m, out):
    x, y, z = v[0], v[1], v[2]
    w = m[3] * x + m[7] * y + m[11] * z + m[15]
    if w == 0.0:
        w = 1.0
    out[0] = (m[0] * x + m[4] * y + m[8] * z + m[12]) / w
    out[1] = (m[1] * x + m[5] * y + m[9] * z + m[13]) / w
    out[2] = (m[2] * x + m[6] * y + m[10] * z + m[14]) / w


@njit(cache=True)
def _transform_quaternion(v, q, out):
    qx, qy, qz, qw = q[0], q[1], q[2], q[3]
    x, y, z = v[0], v[1], v[2]

    # t = 2 * cross(q.xyz, v)
    tx = 2.0 * (qy * z - qz * y)
    ty = 2.0 * (qz * x - qx * z)
    tz = 2.0 * (qx * y - qy * x)

    # v + w * t + cross(q.xyz, t)
    out[0] = x + qw * tx + qy * tz - qz * ty
    out[1] = y + qw * ty + qz * tx - qx * tz
    out[2] = z + qw * tz + qx * ty - qy * tx


@njit(cache=True)
def _rotate_x(v, origin, radians, out):
    p0 = v[0] - origin[0]
    p1 = v[1] - origin[1]
    p2 = v[2] - origin[2]
    s = math.sin(radians)
    c = math.cos(radians)
    o0, o1, o2 = origin[0], origin[1], origin[2]
    out[0] = p0 + o0
    out[1] = p1 * c - p2 * s + o1
    out[2] = p1 * s + p2 * c + o2


@njit(cache=True)
def _rotate_y(v, origin, radians, out):
    p0 = v[0] - origin[0]
    p1 = v[1] - origin[1]
    p2 = v[2] - origin[2]
    s = math.sin(radians)
    c = math.cos(radians)
    o0, o1, o2 = origin[0], origin[1], origin[2]
    out[0] = p2 * s + p0 * c + o0
    out[1] = p1 + o1
    out[2] = p2 * c - p0 * s + o2


@njit(cache=True)
def _rotate_z(v, origin, radians, out):
    p0 = v[0] - origin[0]
    p1 = v[1] - origin[1]
    p2 = v[2] - origin[2]
    s = math.sin(radians)
    c = math.cos(radians)
    o0, o1, o2 = origin[0], origin[1], origin[2]
    out[0] = p0 * c - p1 * s + o0
    out[1] = p0 * s + p1 * c + o1
    out[2] = p2 + o2


@njit(cache=True)
def _clamped_acos(cosine):
    if cosine > 1.0:
        cosine = 1.0
    elif cosine < -1.0:
        cosine = -1.0
    return math.acos(cosine)


@njit(cache=True)
def _angle(a, b):
    ax, ay, az = a[0], a[1], a[2]
    bx, by, bz = b[0], b[1], b[2]
    mag = math.sqrt((ax * ax + ay * ay + az * az) * (bx * bx + by * by + bz * bz))
    cosine = 0.0
    if mag != 0.0:
        cosine = (ax * bx + ay * by + az * bz) / mag
    return _clamped_acos(cosine)


@njit(cache=True)
def _slerp(a, b, t, out):
    ax, ay, az = a[0], a[1], a[2]
    bx, by, bz = b[0], b[1], b[2]
    theta = _clamped_acos(ax * bx + ay * by + az * bz)
    sin_total = math.sin(theta)
    if sin_total < EPSILON:
        # parallel or anti-parallel inputs, no unique arc
        ratio_a = 1.0 - t
        ratio_b = t
    else:
        ratio_a = math.sin((1.0 - t) * theta) / sin_total
        ratio_b = math.sin(t * theta) / sin_total
    out[0] = ratio_a * ax + ratio_b * bx
    out[1] = ratio_a * ay + ratio_b * by
    out[2] = ratio_a * az + ratio_b * bz


@njit(cache=True)
def _hermite(a, b, c, d, t, out):
    t2 = t * t
    f1 = t2 * (2.0 * t - 3.0) + 1.0
    f2 = t2 * (t - 2.0) + t
    f3 = t2 * (t - 1.0)
    f4 = t2 * (3.0 - 2.0 * t)
    for i in range(3):
        out[i] = a[i] * f1 + b[i] * f2 + c[i] * f3 + d[i] * f4


@njit(cache=True)
def _bezier(a, b, c, d, t, out):
    inv = 1.0 - t
    inv2 = inv * inv
    t2 = t * t
    f1 = inv2 * inv
    f2 = 3.0 * t * inv2
    f3 = 3.0 * t2 * inv
    f4 = t2 * t
    for i in range(3):
        out[i] = a[i] * f1 + b[i] * f2 + c[i] * f3 + d[i] * f4


def from_values(x: float, y: float, z: float, out=None):
    out, buffer = resolve_out(out, Vector3)
    buffer[0] = x
    buffer[1] = y
    buffer[2] = z
    return out


def cross(a, b, out=None):
    out, buffer = resolve_out(out, Vector3)
    _cross(as_array(a, 3), as_array(b, 3), buffer)
    return out


def random(magnitude: float = 1.0, out=None):
    """
    Uniformly distributed point on the sphere of radius ``magnitude``.

    Draws from the generator seeded by ``vecmath.utils.seed``.
    """
    out, buffer = resolve_out(out, Vector3)
    _random(float(magnitude), buffer)
    return out


def transform_matrix3(v, matrix, out=None):
    """Multiply ``v`` by a 3x3 column-major matrix."""
    out, buffer = resolve_out(out, Vector3)
    _transform_matrix3(as_array(v, 3), as_array(matrix, 9), buffer)
    return out


def transform_matrix4(v, matrix, out=None):
    """
    Transform ``v`` as the point ``(x, y, z, 1)`` by a 4x4 matrix.

    The result is divided by the resulting ``w``, or left undivided if that
    ``w`` is zero.
    """
    out, buffer = resolve_out(out, Vector3)
    _transform_matrix4(as_array(v, 3), as_array(matrix, 16), buffer)
    return out


def transform_quaternion(v, quaternion, out=None):
    """Rotate ``v`` by a unit quaternion, equivalent to ``q * v * conj(q)``."""
    out, buffer = resolve_out(out, Vector3)
    _transform_quaternion(as_array(v, 3), as_array(quaternion, 4), buffer)
    return out


def rotate_x(v, origin, radians: float, out=None):
    out, buffer = resolve_out(out, Vector3)
    _rotate_x(as_array(v, 3), as_array(origin, 3), float(radians), buffer)
    return out


def rotate_y(v, origin, radians: float, out=None):
    out, buffer = resolve_out(out, Vector3)
    _rotate_y(as_array(v, 3), as_array(origin, 3), float(radians), buffer)
    return out


def rotate_z(v, origin, radians: float, out=None):
    out, buffer = resolve_out(out, Vector3)
    _rotate_z(as_array(v, 3), as_array(origin, 3), float(radians), buffer)
    return out


def angle(a, b) -> float:
    """Unsigned angle between two vectors, in radians."""
    return float(_angle(as_array(a, 3), as_array(b, 3)))


def slerp(a, b, t: float, out=None):
    """
    Spherical interpolation between two unit directions.

    Falls back to linear weights when the inputs are (anti-)parallel.
    """
    out, buffer = resolve_out(out, Vector3)
    _slerp(as_array(a, 3), as_array(b, 3), float(t), buffer)
    return out


def hermite(a, b, c, d, t: float, out=None):
    """Hermite interpolation between ``a`` and ``d`` with tangents ``b`` and ``c``."""
    out, buffer = resolve_out(out, Vector3)
    _hermite(as_array(a, 3), as_array(b, 3), as_array(c, 3),
             as_array(d, 3), float(t), buffer)
    return out


def bezier(a, b, c, d, t: float, out=None):
    """Cubic Bezier interpolation with control points ``b`` and ``c``."""
    out, buffer = resolve_out(out, Vector3)
    _bezier(as_array(a, 3), as_array(b, 3), as_array(c, 3),
            as_array(d, 3), float(t), buffer)
    return out


class Vector3(Vector):
    """A three-component vector ``(x, y, z)``."""

    __slots__ = ()

    size = 3
    _default = np.zeros(3, dtype=np_float64)

    @property
    def z(self) -> float:
        return float(self.array[2])

    @z.setter
    def z(self, value: float) -> None:
        self.array[2] = value

    @classmethod
    def from_values(cls, x: float, y: float, z: float) -> "Vector3":
        return cls(x, y, z)

    @classmethod
    def random(cls, magnitude: float = 1.0) -> "Vector3":
        return random(magnitude, cls())

    def cross(self, other, out=None) -> "Vector3":
        return cross(self, other, out)

    def transform_matrix3(self, matrix, out=None) -> "Vector3":
        return transform_matrix3(self, matrix, out)

    def transform_matrix4(self, matrix, out=None) -> "Vector3":
        return transform_matrix4(self, matrix, out)

    def transform_quaternion(self, quaternion, out=None) -> "Vector3":
        return transform_quaternion(self, quaternion, out)

    def rotate_x(self, origin, radians: float, out=None) -> "Vector3":
        return rotate_x(self, origin, radians, out)

    def rotate_y(self, origin, radians: float, out=None) -> "Vector3":
        return rotate_y(self, origin, radians, out)

    def rotate_z(self, origin, radians: float, out=None) -> "Vector3":
        return rotate_z(self, origin, radians, out)

    def angle(self, other) -> float:
        return angle(self, other)

    def slerp(self, other, t: float, out=None) -> "Vector3":
        return slerp(self, other, t, out)

    def hermite(self, b, c, d, t: float, out=None) -> "Vector3":
        return hermite(self, b, c, d, t, out)

    def bezier(self, b, c, d, t: float, out=None) -> "Vector3":
        return bezier(self, b, c, d, t, out)
