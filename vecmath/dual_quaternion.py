# dual_quaternion.py
"""
Dual quaternions ``real + e * dual`` encoding rigid transforms.

Components 0-3 hold the real part (the rotation) and 4-7 the dual part,
which for a unit dual quaternion equals ``0.5 * t * real`` where ``t`` is the
translation as a pure quaternion. Compositions apply the right operand
first, matching Matrix4 and Quaternion products.
"""

import math
import numpy as np
from numpy import float64 as np_float64
from numba import njit

from vecmath import elementwise
from vecmath.base import FixedArray, as_array, resolve_out
from vecmath.elementwise import add, copy, equals, exact_equals, scale
from vecmath.matrix4 import _get_rotation
from vecmath.quaternion import Quaternion
from vecmath.quaternion import _rotate_x as _quaternion_rotate_x
from vecmath.quaternion import _rotate_y as _quaternion_rotate_y
from vecmath.quaternion import _rotate_z as _quaternion_rotate_z
from vecmath.utils import EPSILON
from vecmath.vector3 import Vector3

from numba.core.errors import NumbaPerformanceWarning
import warnings
warnings.filterwarnings("ignore", category=NumbaPerformanceWarning)


@njit(cache=True)
def _hamilton(ax, ay, az, aw, bx, by, bz, bw):
    return (ax * bw + aw * bx + ay * bz - az * by,
            ay * bw + aw * by + az * bx - ax * bz,
            az * bw + aw * bz + ax * by - ay * bx,
            aw * bw - ax * bx - ay * by - az * bz)


@njit(cache=True)
def _set(out, r0, r1, r2, r3, d0, d1, d2, d3):
    out[0] = r0
    out[1] = r1
    out[2] = r2
    out[3] = r3
    out[4] = d0
    out[5] = d1
    out[6] = d2
    out[7] = d3


@njit(cache=True)
def _identity(out):
    _set(out, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0)


@njit(cache=True)
def _from_rotation_translation(q, t, out):
    bx, by, bz, bw = q[0], q[1], q[2], q[3]
    ax = t[0] * 0.5
    ay = t[1] * 0.5
    az = t[2] * 0.5
    d0, d1, d2, d3 = _hamilton(ax, ay, az, 0.0, bx, by, bz, bw)
    _set(out, bx, by, bz, bw, d0, d1, d2, d3)


@njit(cache=True)
def _from_matrix4(m, out):
    rotation = np.empty(4, dtype=np_float64)
    _get_rotation(m, rotation)
    translation = np.empty(3, dtype=np_float64)
    translation[0] = m[12]
    translation[1] = m[13]
    translation[2] = m[14]
    _from_rotation_translation(rotation, translation, out)


@njit(cache=True)
def _half_translation(dq):
    # dual * conjugate(real), which is t / 2 for a unit dual quaternion
    return _hamilton(dq[4], dq[5], dq[6], dq[7], -dq[0], -dq[1], -dq[2], dq[3])


@njit(cache=True)
def _get_translation(dq, out):
    tx, ty, tz, _ = _half_translation(dq)
    out[0] = tx * 2.0
    out[1] = ty * 2.0
    out[2] = tz * 2.0


@njit(cache=True)
def _translate(dq, v, out):
    ax, ay, az, aw = dq[0], dq[1], dq[2], dq[3]
    d0, d1, d2, d3 = _hamilton(ax, ay, az, aw, v[0] * 0.5, v[1] * 0.5, v[2] * 0.5, 0.0)
    _set(out, ax, ay, az, aw, d0 + dq[4], d1 + dq[5], d2 + dq[6], d3 + dq[7])


@njit(cache=True)
def _with_rotated_real(dq, real, out):
    # keep the translation, swap in a new rotation
    tx, ty, tz, tw = _half_translation(dq)
    rx, ry, rz, rw = real[0], real[1], real[2], real[3]
    d0, d1, d2, d3 = _hamilton(tx, ty, tz, tw, rx, ry, rz, rw)
    _set(out, rx, ry, rz, rw, d0, d1, d2, d3)


@njit(cache=True)
def _rotate_x(dq, radians, out):
    real = np.empty(4, dtype=np_float64)
    _quaternion_rotate_x(dq[0:4], radians, real)
    _with_rotated_real(dq, real, out)


@njit(cache=True)
def _rotate_y(dq, radians, out):
    real = np.empty(4, dtype=np_float64)
    _quaternion_rotate_y(dq[0:4], radians, real)
    _with_rotated_real(dq, real, out)


@njit(cache=True)
def _rotate_z(dq, radians, out):
    real = np.empty(4, dtype=np_float64)
    _quaternion_rotate_z(dq[0:4], radians, real)
    _with_rotated_real(dq, real, out)


@njit(cache=True)
def _append(dq, qx, qy, qz, qw, out):
    r0, r1, r2, r3 = _hamilton(dq[0], dq[1], dq[2], dq[3], qx, qy, qz, qw)
    d0, d1, d2, d3 = _hamilton(dq[4], dq[5], dq[6], dq[7], qx, qy, qz, qw)
    _set(out, r0, r1, r2, r3, d0, d1, d2, d3)


@njit(cache=True)
def _rotate_by_quaternion_append(dq, q, out):
    _append(dq, q[0], q[1], q[2], q[3], out)


@njit(cache=True)
def _rotate_by_quaternion_prepend(dq, q, out):
    qx, qy, qz, qw = q[0], q[1], q[2], q[3]
    r0, r1, r2, r3 = _hamilton(qx, qy, qz, qw, dq[0], dq[1], dq[2], dq[3])
    d0, d1, d2, d3 = _hamilton(qx, qy, qz, qw, dq[4], dq[5], dq[6], dq[7])
    _set(out, r0, r1, r2, r3, d0, d1, d2, d3)


@njit(cache=True)
def _rotate_around_axis(dq, axis, radians, out):
    x, y, z = axis[0], axis[1], axis[2]
    length = math.sqrt(x * x + y * y + z * z)
    if math.fabs(radians) < EPSILON or length < EPSILON:
        for i in range(8):
            out[i] = dq[i]
        return
    half = radians * 0.5
    s = math.sin(half) / length
    _append(dq, s * x, s * y, s * z, math.cos(half), out)


@njit(cache=True)
def _multiply(a, b, out):
    ar = (a[0], a[1], a[2], a[3])
    ad = (a[4], a[5], a[6], a[7])
    br = (b[0], b[1], b[2], b[3])
    bd = (b[4], b[5], b[6], b[7])
    r0, r1, r2, r3 = _hamilton(ar[0], ar[1], ar[2], ar[3], br[0], br[1], br[2], br[3])
    # dual = real_a * dual_b + dual_a * real_b
    p0, p1, p2, p3 = _hamilton(ar[0], ar[1], ar[2], ar[3], bd[0], bd[1], bd[2], bd[3])
    q0, q1, q2, q3 = _hamilton(ad[0], ad[1], ad[2], ad[3], br[0], br[1], br[2], br[3])
    _set(out, r0, r1, r2, r3, p0 + q0, p1 + q1, p2 + q2, p3 + q3)


@njit(cache=True)
def _real_dot(a, b):
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2] + a[3] * b[3]


@njit(cache=True)
def _lerp(a, b, t, out):
    mt = 1.0 - t
    if _real_dot(a, b) < 0.0:
        t = -t
    for i in range(8):
        out[i] = a[i] * mt + b[i] * t


@njit(cache=True)
def _invert(dq, out):
    squared = _real_dot(dq, dq)
    inv = 0.0
    if squared != 0.0:
        inv = 1.0 / squared
    _set(out,
         -dq[0] * inv, -dq[1] * inv, -dq[2] * inv, dq[3] * inv,
         -dq[4] * inv, -dq[5] * inv, -dq[6] * inv, dq[7] * inv)


@njit(cache=True)
def _conjugate(dq, out):
    _set(out, -dq[0], -dq[1], -dq[2], dq[3], -dq[4], -dq[5], -dq[6], dq[7])


@njit(cache=True)
def _normalize(dq, out):
    magnitude = _real_dot(dq, dq)
    if magnitude <= 0.0:
        for i in range(8):
            out[i] = dq[i]
        return
    magnitude = math.sqrt(magnitude)
    a0 = dq[0] / magnitude
    a1 = dq[1] / magnitude
    a2 = dq[2] / magnitude
    a3 = dq[3] / magnitude
    b0 = dq[4] / magnitude
    b1 = dq[5] / magnitude
    b2 = dq[6] / magnitude
    b3 = dq[7] / magnitude
    # remove the component of the dual part along the real part
    a_dot_b = a0 * b0 + a1 * b1 + a2 * b2 + a3 * b3
    _set(out, a0, a1, a2, a3,
         b0 - a0 * a_dot_b, b1 - a1 * a_dot_b, b2 - a2 * a_dot_b, b3 - a3 * a_dot_b)


def from_values(x1: float, y1: float, z1: float, w1: float,
                x2: float, y2: float, z2: float, w2: float, out=None):
    """Real part ``(x1, y1, z1, w1)``, dual part ``(x2, y2, z2, w2)``."""
    out, buffer = resolve_out(out, DualQuaternion)
    _set(buffer, float(x1), float(y1), float(z1), float(w1),
         float(x2), float(y2), float(z2), float(w2))
    return out


def identity(out=None):
    out, buffer = resolve_out(out, DualQuaternion)
    _identity(buffer)
    return out


def from_rotation_translation(q, t, out=None):
    """Rotation by unit quaternion ``q`` followed by translation ``t``."""
    out, buffer = resolve_out(out, DualQuaternion)
    _from_rotation_translation(as_array(q, 4), as_array(t, 3), buffer)
    return out


def from_translation(t, out=None):
    out, buffer = resolve_out(out, DualQuaternion)
    t = as_array(t, 3)
    _set(buffer, 0.0, 0.0, 0.0, 1.0, t[0] * 0.5, t[1] * 0.5, t[2] * 0.5, 0.0)
    return out


def from_rotation(q, out=None):
    out, buffer = resolve_out(out, DualQuaternion)
    q = as_array(q, 4)
    _set(buffer, q[0], q[1], q[2], q[3], 0.0, 0.0, 0.0, 0.0)
    return out


def from_matrix4(m, out=None):
    """Rigid part of a 4x4 TRS matrix. Scale is discarded."""
    out, buffer = resolve_out(out, DualQuaternion)
    _from_matrix4(as_array(m, 16), buffer)
    return out


def get_real(dq, out=None):
    out, buffer = resolve_out(out, Quaternion)
    buffer[:] = as_array(dq, 8)[0:4]
    return out


def get_dual(dq, out=None):
    out, buffer = resolve_out(out, Quaternion)
    buffer[:] = as_array(dq, 8)[4:8]
    return out


def set_real(q, out=None):
    """
    Overwrite the real part of ``out`` with ``q`` and return ``out``.

    The dual part of ``out`` is kept; a fresh ``out`` starts as the identity.
    """
    out, buffer = resolve_out(out, DualQuaternion)
    buffer[0:4] = as_array(q, 4)
    return out


def set_dual(q, out=None):
    """Overwrite the dual part of ``out`` with ``q`` and return ``out``."""
    out, buffer = resolve_out(out, DualQuaternion)
    buffer[4:8] = as_array(q, 4)
    return out


def get_translation(dq, out=None):
    """Translation of a unit dual quaternion."""
    out, buffer = resolve_out(out, Vector3)
    _get_translation(as_array(dq, 8), buffer)
    return out


def translate(dq, v, out=None):
    """Follow ``dq`` by a translation of ``v`` in its local frame."""
    out, buffer = resolve_out(out, DualQuaternion)
    _translate(as_array(dq, 8), as_array(v, 3), buffer)
    return out


def rotate_x(dq, radians: float, out=None):
    """Rotate the rotation part about the X axis, keeping the translation."""
    out, buffer = resolve_out(out, DualQuaternion)
    _rotate_x(as_array(dq, 8), float(radians), buffer)
    return out


def rotate_y(dq, radians: float, out=None):
    out, buffer = resolve_out(out, DualQuaternion)
    _rotate_y(as_array(dq, 8), float(radians), buffer)
    return out


def rotate_z(dq, radians: float, out=None):
    out, buffer = resolve_out(out, DualQuaternion)
    _rotate_z(as_array(dq, 8), float(radians), buffer)
    return out


def rotate_by_quaternion_append(dq, q, out=None):
    """``dq * q``: rotate by ``q`` before applying ``dq``."""
    out, buffer = resolve_out(out, DualQuaternion)
    _rotate_by_quaternion_append(as_array(dq, 8), as_array(q, 4), buffer)
    return out


def rotate_by_quaternion_prepend(dq, q, out=None):
    """``q * dq``: apply ``dq`` and then rotate the result by ``q``."""
    out, buffer = resolve_out(out, DualQuaternion)
    _rotate_by_quaternion_prepend(as_array(dq, 8), as_array(q, 4), buffer)
    return out


def rotate_around_axis(dq, axis, radians: float, out=None):
    """
    Append a rotation of ``radians`` about ``axis`` (need not be unit length).

    A negligible angle or axis copies ``dq`` unchanged.
    """
    out, buffer = resolve_out(out, DualQuaternion)
    _rotate_around_axis(as_array(dq, 8), as_array(axis, 3), float(radians), buffer)
    return out


def multiply(a, b, out=None):
    """Dual quaternion product ``a * b`` (applies ``b`` first)."""
    out, buffer = resolve_out(out, DualQuaternion)
    _multiply(as_array(a, 8), as_array(b, 8), buffer)
    return out


def dot(a, b) -> float:
    """Dot product of the real parts."""
    return float(_real_dot(as_array(a, 8), as_array(b, 8)))


def lerp(a, b, t: float, out=None):
    """Linear blend, flipping ``b`` when the rotations lie in opposite hemispheres."""
    out, buffer = resolve_out(out, DualQuaternion)
    _lerp(as_array(a, 8), as_array(b, 8), float(t), buffer)
    return out


def invert(dq, out=None):
    """
    Inverse of ``dq``, which for unit dual quaternions equals the conjugate.

    A zero real part produces the zero dual quaternion.
    """
    out, buffer = resolve_out(out, DualQuaternion)
    _invert(as_array(dq, 8), buffer)
    return out


def conjugate(dq, out=None):
    out, buffer = resolve_out(out, DualQuaternion)
    _conjugate(as_array(dq, 8), buffer)
    return out


def normalize(dq, out=None):
    """
    Unit dual quaternion closest to ``dq``.

    The real part is scaled to unit length and the dual part is made
    orthogonal to it. A zero real part is copied unchanged.
    """
    out, buffer = resolve_out(out, DualQuaternion)
    _normalize(as_array(dq, 8), buffer)
    return out


def magnitude(dq) -> float:
    """Length of the real part."""
    return math.sqrt(_real_dot(as_array(dq, 8), as_array(dq, 8)))


def squared_magnitude(dq) -> float:
    return float(_real_dot(as_array(dq, 8), as_array(dq, 8)))


class DualQuaternion(FixedArray):
    """A dual quaternion, defaulting to the identity transform."""

    __slots__ = ()

    size = 8
    _default = np.array([0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0], dtype=np_float64)

    @property
    def magnitude(self) -> float:
        return magnitude(self)

    @property
    def squared_magnitude(self) -> float:
        return squared_magnitude(self)

    @classmethod
    def identity(cls) -> "DualQuaternion":
        return cls()

    @classmethod
    def from_values(cls, *values: float) -> "DualQuaternion":
        return cls(*values)

    @classmethod
    def from_rotation_translation(cls, q, t) -> "DualQuaternion":
        return from_rotation_translation(q, t, cls())

    @classmethod
    def from_translation(cls, t) -> "DualQuaternion":
        return from_translation(t, cls())

    @classmethod
    def from_rotation(cls, q) -> "DualQuaternion":
        return from_rotation(q, cls())

    @classmethod
    def from_matrix4(cls, m) -> "DualQuaternion":
        return from_matrix4(m, cls())

    def set_identity(self) -> "DualQuaternion":
        return identity(self)

    def get_real(self, out=None) -> Quaternion:
        return get_real(self, out)

    def get_dual(self, out=None) -> Quaternion:
        return get_dual(self, out)

    def set_real(self, q) -> "DualQuaternion":
        return set_real(q, self)

    def set_dual(self, q) -> "DualQuaternion":
        return set_dual(q, self)

    def get_translation(self, out=None) -> Vector3:
        return get_translation(self, out)

    def translate(self, v, out=None) -> "DualQuaternion":
        return translate(self, v, out)

    def rotate_x(self, radians: float, out=None) -> "DualQuaternion":
        return rotate_x(self, radians, out)

    def rotate_y(self, radians: float, out=None) -> "DualQuaternion":
        return rotate_y(self, radians, out)

    def rotate_z(self, radians: float, out=None) -> "DualQuaternion":
        return rotate_z(self, radians, out)

    def rotate_by_quaternion_append(self, q, out=None) -> "DualQuaternion":
        return rotate_by_quaternion_append(self, q, out)

    def rotate_by_quaternion_prepend(self, q, out=None) -> "DualQuaternion":
        return rotate_by_quaternion_prepend(self, q, out)

    def rotate_around_axis(self, axis, radians: float, out=None) -> "DualQuaternion":
        return rotate_around_axis(self, axis, radians, out)

    def multiply(self, other, out=None) -> "DualQuaternion":
        return multiply(self, other, out)

    def add(self, other, out=None) -> "DualQuaternion":
        return elementwise.add(self, other, out)

    def scale(self, scalar: float, out=None) -> "DualQuaternion":
        return elementwise.scale(self, scalar, out)

    def dot(self, other) -> float:
        return dot(self, other)

    def lerp(self, other, t: float, out=None) -> "DualQuaternion":
        return lerp(self, other, t, out)

    def invert(self, out=None) -> "DualQuaternion":
        return invert(self, out)

    def conjugate(self, out=None) -> "DualQuaternion":
        return conjugate(self, out)

    def normalize(self, out=None) -> "DualQuaternion":
        return normalize(self, out)

    def equals(self, other) -> bool:
        return elementwise.equals(self, other)

    def exact_equals(self, other) -> bool:
        return elementwise.exact_equals(self, other)

    def copy_from(self, source) -> "DualQuaternion":
        return elementwise.copy(source, self)

    def __matmul__(self, other) -> "DualQuaternion":
        return self.multiply(other)
