# quaternion.py
"""
Quaternions ``(x, y, z, w)`` representing ``xi + yj + zk + w``.

Rotation-related operations (slerp, axis-angle extraction, vector rotation)
assume unit quaternions and do not renormalize their inputs.
"""

import math
import numpy as np
from numpy import float64 as np_float64
from numba import njit

from vecmath.base import FixedArray, as_array, resolve_out
from vecmath.elementwise import (
    _normalize, add, copy, dot, equals, exact_equals, lerp, magnitude,
    normalize, scale, squared_magnitude,
)
from vecmath import elementwise
from vecmath.structures import AxisAngle
from vecmath.utils import EPSILON
from vecmath.vector3 import Vector3

from numba.core.errors import NumbaPerformanceWarning
import warnings
warnings.filterwarnings("ignore", category=NumbaPerformanceWarning)

# below this dot product from_rotation_to treats its inputs as opposite
_ANTI_PARALLEL = -0.999999


@njit(cache=True)
def _identity(out):
    out[0] = 0.0
    out[1] = 0.0
    out[2] = 0.0
    out[3] = 1.0


@njit(cache=True)
def _set_axis_angle(axis, radians, out):
    half = radians * 0.5
    s = math.sin(half)
    x, y, z = axis[0], axis[1], axis[2]
    out[0] = s * x
    out[1] = s * y
    out[2] = s * z
    out[3] = math.cos(half)


@njit(cache=True)
def _clamp_unit(value):
    if value > 1.0:
        return 1.0
    if value < -1.0:
        return -1.0
    return value


@njit(cache=True)
def _get_axis_angle(q, axis):
    radians = math.acos(_clamp_unit(q[3])) * 2.0
    s = math.sin(radians / 2.0)
    if s > EPSILON:
        axis[0] = q[0] / s
        axis[1] = q[1] / s
        axis[2] = q[2] / s
    else:
        # any axis describes a zero rotation
        axis[0] = 1.0
        axis[1] = 0.0
        axis[2] = 0.0
    return radians


@njit(cache=True)
def _get_angle(a, b):
    d = a[0] * b[0] + a[1] * b[1] + a[2] * b[2] + a[3] * b[3]
    return math.acos(_clamp_unit(2.0 * d * d - 1.0))


@njit(cache=True)
def _multiply(a, b, out):
    ax, ay, az, aw = a[0], a[1], a[2], a[3]
    bx, by, bz, bw = b[0], b[1], b[2], b[3]
    out[0] = ax * bw + aw * bx + ay * bz - az * by
    out[1] = ay * bw + aw * by + az * bx - ax * bz
    out[2] = az * bw + aw * bz + ax * by - ay * bx
    out[3] = aw * bw - ax * bx - ay * by - az * bz


@njit(cache=True)
def _rotate_x(q, radians, out):
    half = radians * 0.5
    s = math.sin(half)
    c = math.cos(half)
    ax, ay, az, aw = q[0], q[1], q[2], q[3]
    out[0] = ax * c + aw * s
    out[1] = ay * c + az * s
    out[2] = az * c - ay * s
    out[3] = aw * c - ax * s


@njit(cache=True)
def _rotate_y(q, radians, out):
    half = radians * 0.5
    s = math.sin(half)
    c = math.cos(half)
    ax, ay, az, aw = q[0], q[1], q[2], q[3]
    out[0] = ax * c - az * s
    out[1] = ay * c + aw * s
    out[2] = az * c + ax * s
    out[3] = aw * c - ay * s


@njit(cache=True)
def _rotate_z(q, radians, out):
    half = radians * 0.5
    s = math.sin(half)
    c = math.cos(half)
    ax, ay, az, aw = q[0], q[1], q[2], q[3]
    out[0] = ax * c + ay * s
    out[1] = ay * c - ax * s
    out[2] = az * c + aw * s
    out[3] = aw * c - az * s


@njit(cache=True)
def _calculate_w(q, out):
    x, y, z = q[0], q[1], q[2]
    out[0] = x
    out[1] = y
    out[2] = z
    out[3] = math.sqrt(math.fabs(1.0 - x * x - y * y - z * z))


@njit(cache=True)
def _exp(q, out):
    x, y, z, w = q[0], q[1], q[2], q[3]
    r = math.sqrt(x * x + y * y + z * z)
    et = math.exp(w)
    s = 0.0
    if r > 0.0:
        s = et * math.sin(r) / r
    out[0] = x * s
    out[1] = y * s
    out[2] = z * s
    out[3] = et * math.cos(r)


@njit(cache=True, error_model="numpy")
def _ln(q, out):
    x, y, z, w = q[0], q[1], q[2], q[3]
    r = math.sqrt(x * x + y * y + z * z)
    t = 0.0
    if r > 0.0:
        t = math.atan2(r, w) / r
    out[0] = x * t
    out[1] = y * t
    out[2] = z * t
    out[3] = 0.5 * math.log(x * x + y * y + z * z + w * w)


@njit(cache=True, error_model="numpy")
def _pow(q, exponent, out):
    _ln(q, out)
    for i in range(4):
        out[i] = out[i] * exponent
    _exp(out, out)


@njit(cache=True)
def _slerp(a, b, t, out):
    ax, ay, az, aw = a[0], a[1], a[2], a[3]
    bx, by, bz, bw = b[0], b[1], b[2], b[3]

    cosom = ax * bx + ay * by + az * bz + aw * bw
    if cosom < 0.0:
        # take the shorter arc
        cosom = -cosom
        bx = -bx
        by = -by
        bz = -bz
        bw = -bw

    if 1.0 - cosom > EPSILON:
        omega = math.acos(cosom)
        sinom = math.sin(omega)
        scale0 = math.sin((1.0 - t) * omega) / sinom
        scale1 = math.sin(t * omega) / sinom
        out[0] = scale0 * ax + scale1 * bx
        out[1] = scale0 * ay + scale1 * by
        out[2] = scale0 * az + scale1 * bz
        out[3] = scale0 * aw + scale1 * bw
    else:
        scale0 = 1.0 - t
        out[0] = scale0 * ax + t * bx
        out[1] = scale0 * ay + t * by
        out[2] = scale0 * az + t * bz
        out[3] = scale0 * aw + t * bw
        _normalize(out, out)


@njit(cache=True)
def _sqlerp(a, b, c, d, t, out):
    first = np.empty(4, dtype=np_float64)
    second = np.empty(4, dtype=np_float64)
    _slerp(a, d, t, first)
    _slerp(b, c, t, second)
    _slerp(first, second, 2.0 * t * (1.0 - t), out)


@njit(cache=True)
def _random(out):
    u1 = np.random.random()
    u2 = np.random.random()
    u3 = np.random.random()
    sqrt1_minus_u1 = math.sqrt(1.0 - u1)
    sqrt_u1 = math.sqrt(u1)
    out[0] = sqrt1_minus_u1 * math.sin(2.0 * math.pi * u2)
    out[1] = sqrt1_minus_u1 * math.cos(2.0 * math.pi * u2)
    out[2] = sqrt_u1 * math.sin(2.0 * math.pi * u3)
    out[3] = sqrt_u1 * math.cos(2.0 * math.pi * u3)


@njit(cache=True)
def _invert(q, out):
    x, y, z, w = q[0], q[1], q[2], q[3]
    d = x * x + y * y + z * z + w * w
    inv = 0.0
    if d != 0.0:
        inv = 1.0 / d
    out[0] = -x * inv
    out[1] = -y * inv
    out[2] = -z * inv
    out[3] = w * inv


@njit(cache=True)
def _conjugate(q, out):
    out[0] = -q[0]
    out[1] = -q[1]
    out[2] = -q[2]
    out[3] = q[3]


@njit(cache=True)
def _from_matrix3(m, out):
    # Shoemake: pick the largest of w, x, y, z to divide by
    trace = m[0] + m[4] + m[8]
    if trace > 0.0:
        root = math.sqrt(trace + 1.0)
        w = 0.5 * root
        root = 0.5 / root
        out[0] = (m[5] - m[7]) * root
        out[1] = (m[6] - m[2]) * root
        out[2] = (m[1] - m[3]) * root
        out[3] = w
        return

    i = 0
    if m[4] > m[0]:
        i = 1
    if m[8] > m[i * 3 + i]:
        i = 2
    j = (i + 1) % 3
    k = (i + 2) % 3

    root = math.sqrt(m[i * 3 + i] - m[j * 3 + j] - m[k * 3 + k] + 1.0)
    qi = 0.5 * root
    root = 0.5 / root
    w = (m[j * 3 + k] - m[k * 3 + j]) * root
    qj = (m[j * 3 + i] + m[i * 3 + j]) * root
    qk = (m[k * 3 + i] + m[i * 3 + k]) * root
    out[i] = qi
    out[j] = qj
    out[k] = qk
    out[3] = w


@njit(cache=True)
def _half_angle_terms(x, y, z):
    x2 = x * 0.5
    y2 = y * 0.5
    z2 = z * 0.5
    return (math.sin(x2), math.cos(x2), math.sin(y2), math.cos(y2),
            math.sin(z2), math.cos(z2))


@njit(cache=True)
def _from_euler_xyz(x, y, z, out):
    sx, cx, sy, cy, sz, cz = _half_angle_terms(x, y, z)
    sxcy = sx * cy
    cxsy = cx * sy
    cxcy = cx * cy
    sxsy = sx * sy
    out[0] = sxcy * cz + cxsy * sz
    out[1] = cxsy * cz - sxcy * sz
    out[2] = cxcy * sz + sxsy * cz
    out[3] = cxcy * cz - sxsy * sz


@njit(cache=True)
def _from_euler_xzy(x, y, z, out):
    sx, cx, sy, cy, sz, cz = _half_angle_terms(x, y, z)
    sxcy = sx * cy
    cxsy = cx * sy
    cxcy = cx * cy
    sxsy = sx * sy
    out[0] = sxcy * cz - cxsy * sz
    out[1] = cxsy * cz - sxcy * sz
    out[2] = cxcy * sz + sxsy * cz
    out[3] = cxcy * cz + sxsy * sz


@njit(cache=True)
def _from_euler_yxz(x, y, z, out):
    sx, cx, sy, cy, sz, cz = _half_angle_terms(x, y, z)
    sxcy = sx * cy
    cxsy = cx * sy
    cxcy = cx * cy
    sxsy = sx * sy
    out[0] = sxcy * cz + cxsy * sz
    out[1] = cxsy * cz - sxcy * sz
    out[2] = cxcy * sz - sxsy * cz
    out[3] = cxcy * cz + sxsy * sz


@njit(cache=True)
def _from_euler_yzx(x, y, z, out):
    sx, cx, sy, cy, sz, cz = _half_angle_terms(x, y, z)
    sxcy = sx * cy
    cxsy = cx * sy
    cxcy = cx * cy
    sxsy = sx * sy
    out[0] = sxcy * cz + cxsy * sz
    out[1] = cxsy * cz + sxcy * sz
    out[2] = cxcy * sz - sxsy * cz
    out[3] = cxcy * cz - sxsy * sz


@njit(cache=True)
def _from_euler_zxy(x, y, z, out):
    sx, cx, sy, cy, sz, cz = _half_angle_terms(x, y, z)
    sxcy = sx * cy
    cxsy = cx * sy
    cxcy = cx * cy
    sxsy = sx * sy
    out[0] = sxcy * cz - cxsy * sz
    out[1] = cxsy * cz + sxcy * sz
    out[2] = cxcy * sz + sxsy * cz
    out[3] = cxcy * cz - sxsy * sz


@njit(cache=True)
def _from_euler_zyx(x, y, z, out):
    sx, cx, sy, cy, sz, cz = _half_angle_terms(x, y, z)
    sxcy = sx * cy
    cxsy = cx * sy
    cxcy = cx * cy
    sxsy = sx * sy
    out[0] = sxcy * cz - cxsy * sz
    out[1] = cxsy * cz + sxcy * sz
    out[2] = cxcy * sz - sxsy * cz
    out[3] = cxcy * cz + sxsy * sz


@njit(cache=True)
def _from_axes(view, right, up, out):
    m = np.empty(9, dtype=np_float64)
    m[0] = right[0]
    m[1] = up[0]
    m[2] = -view[0]
    m[3] = right[1]
    m[4] = up[1]
    m[5] = -view[1]
    m[6] = right[2]
    m[7] = up[2]
    m[8] = -view[2]
    _from_matrix3(m, out)
    _normalize(out, out)


@njit(cache=True)
def _from_rotation_to(a, b, out):
    ax, ay, az = a[0], a[1], a[2]
    bx, by, bz = b[0], b[1], b[2]
    d = ax * bx + ay * by + az * bz

    if d < _ANTI_PARALLEL:
        # anti-parallel: rotate half a turn about any perpendicular axis,
        # X cross a, or Y cross a when a lies along X
        cx = 0.0
        cy = -az
        cz = ay
        if math.sqrt(cy * cy + cz * cz) < EPSILON:
            cx = az
            cy = 0.0
            cz = -ax
        length = math.sqrt(cx * cx + cy * cy + cz * cz)
        if length > 0.0:
            cx /= length
            cy /= length
            cz /= length
        out[0] = cx
        out[1] = cy
        out[2] = cz
        out[3] = 0.0
        return

    if d > 1.0 - EPSILON:
        _identity(out)
        return

    out[0] = ay * bz - az * by
    out[1] = az * bx - ax * bz
    out[2] = ax * by - ay * bx
    out[3] = 1.0 + d
    _normalize(out, out)


def _radians(x, y, z, degrees):
    if degrees:
        return math.radians(x), math.radians(y), math.radians(z)
    return float(x), float(y), float(z)


def from_values(x: float, y: float, z: float, w: float, out=None):
    out, buffer = resolve_out(out, Quaternion)
    buffer[0] = x
    buffer[1] = y
    buffer[2] = z
    buffer[3] = w
    return out


def identity(out=None):
    """Set ``out`` to the identity rotation ``(0, 0, 0, 1)``."""
    out, buffer = resolve_out(out, Quaternion)
    _identity(buffer)
    return out


def set_axis_angle(axis, radians: float, out=None):
    """
    Rotation of ``radians`` about ``axis``.

    Args:
        axis: unit 3-vector.
        radians: rotation angle.
        out: destination quaternion.

    Returns:
        ``out``.
    """
    out, buffer = resolve_out(out, Quaternion)
    _set_axis_angle(as_array(axis, 3), float(radians), buffer)
    return out


from_axis_angle = set_axis_angle


def get_axis_angle(q) -> AxisAngle:
    """
    Split a unit quaternion into a rotation axis and an angle in [0, 2*pi].

    A zero rotation reports the X axis.
    """
    axis = Vector3()
    radians = _get_axis_angle(as_array(q, 4), axis.array)
    return AxisAngle(axis, float(radians))


def get_angle(a, b) -> float:
    """Angular distance between two unit quaternions, in radians."""
    return float(_get_angle(as_array(a, 4), as_array(b, 4)))


def multiply(a, b, out=None):
    """Hamilton product ``a * b`` (applies ``b`` first, then ``a``)."""
    out, buffer = resolve_out(out, Quaternion)
    _multiply(as_array(a, 4), as_array(b, 4), buffer)
    return out


def rotate_x(q, radians: float, out=None):
    out, buffer = resolve_out(out, Quaternion)
    _rotate_x(as_array(q, 4), float(radians), buffer)
    return out


def rotate_y(q, radians: float, out=None):
    out, buffer = resolve_out(out, Quaternion)
    _rotate_y(as_array(q, 4), float(radians), buffer)
    return out


def rotate_z(q, radians: float, out=None):
    out, buffer = resolve_out(out, Quaternion)
    _rotate_z(as_array(q, 4), float(radians), buffer)
    return out


def calculate_w(q, out=None):
    """Copy x, y and z and derive w assuming unit length."""
    out, buffer = resolve_out(out, Quaternion)
    _calculate_w(as_array(q, 4), buffer)
    return out


def exp(q, out=None):
    out, buffer = resolve_out(out, Quaternion)
    _exp(as_array(q, 4), buffer)
    return out


def ln(q, out=None):
    """Natural logarithm. A zero vector part yields a zero vector part."""
    out, buffer = resolve_out(out, Quaternion)
    _ln(as_array(q, 4), buffer)
    return out


def pow(q, exponent: float, out=None):
    """``exp(exponent * ln(q))``."""
    out, buffer = resolve_out(out, Quaternion)
    _pow(as_array(q, 4), float(exponent), buffer)
    return out


def slerp(a, b, t: float, out=None):
    """
    Spherical linear interpolation along the shorter arc.

    When the inputs are nearly identical the result is a normalized linear
    interpolation instead.
    """
    out, buffer = resolve_out(out, Quaternion)
    _slerp(as_array(a, 4), as_array(b, 4), float(t), buffer)
    return out


def sqlerp(a, b, c, d, t: float, out=None):
    """Spherical quadrangle interpolation from ``a`` to ``d`` with controls ``b`` and ``c``."""
    out, buffer = resolve_out(out, Quaternion)
    _sqlerp(as_array(a, 4), as_array(b, 4), as_array(c, 4),
            as_array(d, 4), float(t), buffer)
    return out


def random(out=None):
    """Uniformly distributed unit quaternion."""
    out, buffer = resolve_out(out, Quaternion)
    _random(buffer)
    return out


def invert(q, out=None):
    """
    Multiplicative inverse, ``conjugate(q) / dot(q, q)``.

    The zero quaternion inverts to the zero quaternion.
    """
    out, buffer = resolve_out(out, Quaternion)
    _invert(as_array(q, 4), buffer)
    return out


def conjugate(q, out=None):
    out, buffer = resolve_out(out, Quaternion)
    _conjugate(as_array(q, 4), buffer)
    return out


def from_matrix3(matrix, out=None):
    """Rotation quaternion from a 3x3 rotation matrix."""
    out, buffer = resolve_out(out, Quaternion)
    _from_matrix3(as_array(matrix, 9), buffer)
    return out


def from_euler_xyz(x: float, y: float, z: float, out=None, degrees: bool = True):
    """Intrinsic x-y'-z'' Tait-Bryan angles."""
    out, buffer = resolve_out(out, Quaternion)
    _from_euler_xyz(*_radians(x, y, z, degrees), buffer)
    return out


def from_euler_xzy(x: float, z: float, y: float, out=None, degrees: bool = True):
    """Intrinsic x-z'-y'' Tait-Bryan angles."""
    out, buffer = resolve_out(out, Quaternion)
    _from_euler_xzy(*_radians(x, y, z, degrees), buffer)
    return out


def from_euler_yxz(y: float, x: float, z: float, out=None, degrees: bool = True):
    """Intrinsic y-x'-z'' Tait-Bryan angles."""
    out, buffer = resolve_out(out, Quaternion)
    _from_euler_yxz(*_radians(x, y, z, degrees), buffer)
    return out


def from_euler_yzx(y: float, z: float, x: float, out=None, degrees: bool = True):
    """Intrinsic y-z'-x'' Tait-Bryan angles."""
    out, buffer = resolve_out(out, Quaternion)
    _from_euler_yzx(*_radians(x, y, z, degrees), buffer)
    return out


def from_euler_zxy(z: float, x: float, y: float, out=None, degrees: bool = True):
    """Intrinsic z-x'-y'' Tait-Bryan angles."""
    out, buffer = resolve_out(out, Quaternion)
    _from_euler_zxy(*_radians(x, y, z, degrees), buffer)
    return out


def from_euler_zyx(z: float, y: float, x: float, out=None, degrees: bool = True):
    """
    Intrinsic z-y'-x'' Tait-Bryan angles (yaw, pitch, roll).

    Args:
        z: yaw.
        y: pitch.
        x: roll.
        out: destination quaternion.
        degrees: whether the angles are in degrees. Defaults to True.
    """
    out, buffer = resolve_out(out, Quaternion)
    _from_euler_zyx(*_radians(x, y, z, degrees), buffer)
    return out


from_euler = from_euler_zyx


def from_axes(view, right, up, out=None):
    """
    Rotation whose basis is the given orthonormal vectors.

    ``view`` maps to -Z, ``right`` to +X and ``up`` to +Y.
    """
    out, buffer = resolve_out(out, Quaternion)
    _from_axes(as_array(view, 3), as_array(right, 3), as_array(up, 3), buffer)
    return out


def from_rotation_to(a, b, out=None):
    """
    Shortest-arc rotation taking unit vector ``a`` onto unit vector ``b``.

    Anti-parallel inputs produce a half turn about an axis perpendicular to
    ``a``; parallel inputs produce the identity.
    """
    out, buffer = resolve_out(out, Quaternion)
    _from_rotation_to(as_array(a, 3), as_array(b, 3), buffer)
    return out


class Quaternion(FixedArray):
    """A quaternion ``(x, y, z, w)``, defaulting to the identity rotation."""

    __slots__ = ()

    size = 4
    _default = np.array([0.0, 0.0, 0.0, 1.0], dtype=np_float64)

    @property
    def x(self) -> float:
        return float(self.array[0])

    @x.setter
    def x(self, value: float) -> None:
        self.array[0] = value

    @property
    def y(self) -> float:
        return float(self.array[1])

    @y.setter
    def y(self, value: float) -> None:
        self.array[1] = value

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

    @property
    def magnitude(self) -> float:
        return elementwise.magnitude(self)

    @property
    def squared_magnitude(self) -> float:
        return elementwise.squared_magnitude(self)

    @classmethod
    def identity(cls) -> "Quaternion":
        return cls()

    @classmethod
    def from_values(cls, x: float, y: float, z: float, w: float) -> "Quaternion":
        return cls(x, y, z, w)

    @classmethod
    def from_axis_angle(cls, axis, radians: float) -> "Quaternion":
        return set_axis_angle(axis, radians, cls())

    @classmethod
    def from_matrix3(cls, matrix) -> "Quaternion":
        return from_matrix3(matrix, cls())

    @classmethod
    def from_euler(cls, z: float, y: float, x: float, degrees: bool = True) -> "Quaternion":
        return from_euler_zyx(z, y, x, cls(), degrees)

    @classmethod
    def from_axes(cls, view, right, up) -> "Quaternion":
        return from_axes(view, right, up, cls())

    @classmethod
    def from_rotation_to(cls, a, b) -> "Quaternion":
        return from_rotation_to(a, b, cls())

    @classmethod
    def random(cls) -> "Quaternion":
        return random(cls())

    def set_identity(self) -> "Quaternion":
        return identity(self)

    def get_axis_angle(self) -> AxisAngle:
        return get_axis_angle(self)

    def set_axis_angle(self, axis, radians: float) -> "Quaternion":
        """Overwrite this quaternion with a rotation about ``axis``."""
        return set_axis_angle(axis, radians, self)

    def get_angle(self, other) -> float:
        return get_angle(self, other)

    def multiply(self, other, out=None) -> "Quaternion":
        return multiply(self, other, out)

    def rotate_x(self, radians: float, out=None) -> "Quaternion":
        return rotate_x(self, radians, out)

    def rotate_y(self, radians: float, out=None) -> "Quaternion":
        return rotate_y(self, radians, out)

    def rotate_z(self, radians: float, out=None) -> "Quaternion":
        return rotate_z(self, radians, out)

    def calculate_w(self, out=None) -> "Quaternion":
        return calculate_w(self, out)

    def exp(self, out=None) -> "Quaternion":
        return exp(self, out)

    def ln(self, out=None) -> "Quaternion":
        return ln(self, out)

    def pow(self, exponent: float, out=None) -> "Quaternion":
        return pow(self, exponent, out)

    def slerp(self, other, t: float, out=None) -> "Quaternion":
        return slerp(self, other, t, out)

    def sqlerp(self, b, c, d, t: float, out=None) -> "Quaternion":
        return sqlerp(self, b, c, d, t, out)

    def invert(self, out=None) -> "Quaternion":
        return invert(self, out)

    def conjugate(self, out=None) -> "Quaternion":
        return conjugate(self, out)

    def add(self, other, out=None) -> "Quaternion":
        return elementwise.add(self, other, out)

    def scale(self, scalar: float, out=None) -> "Quaternion":
        return elementwise.scale(self, scalar, out)

    def lerp(self, other, t: float, out=None) -> "Quaternion":
        return elementwise.lerp(self, other, t, out)

    def normalize(self, out=None) -> "Quaternion":
        return elementwise.normalize(self, out)

    def dot(self, other) -> float:
        return elementwise.dot(self, other)

    def equals(self, other) -> bool:
        return elementwise.equals(self, other)

    def exact_equals(self, other) -> bool:
        return elementwise.exact_equals(self, other)

    def copy_from(self, source) -> "Quaternion":
        return elementwise.copy(source, self)

    def __matmul__(self, other) -> "Quaternion":
        return self.multiply(other)
