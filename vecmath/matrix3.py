# matrix3.py

import math
import numpy as np
from numpy import float64 as np_float64
from numba import njit

from vecmath.base import as_array, resolve_out
from vecmath.elementwise import (
    add, copy, equals, exact_equals, subtract,
    magnitude as frob,
    scale as multiply_scalar,
    scale_and_add as multiply_scalar_and_add,
)
from vecmath.errors import SingularMatrixError
from vecmath.matrix import Matrix

from numba.core.errors import NumbaPerformanceWarning
import warnings
warnings.filterwarnings("ignore", category=NumbaPerformanceWarning)


@njit(cache=True)
def _set(out, a0, a1, a2, a3, a4, a5, a6, a7, a8):
    out[0] = a0
    out[1] = a1
    out[2] = a2
    out[3] = a3
    out[4] = a4
    out[5] = a5
    out[6] = a6
    out[7] = a7
    out[8] = a8


@njit(cache=True)
def _identity(out):
    _set(out, 1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)


@njit(cache=True)
def _from_rotation(radians, out):
    s = math.sin(radians)
    c = math.cos(radians)
    _set(out, c, s, 0.0, -s, c, 0.0, 0.0, 0.0, 1.0)


@njit(cache=True)
def _from_scaling(v, out):
    _set(out, v[0], 0.0, 0.0, 0.0, v[1], 0.0, 0.0, 0.0, 1.0)


@njit(cache=True)
def _from_translation(v, out):
    _set(out, 1.0, 0.0, 0.0, 0.0, 1.0, 0.0, v[0], v[1], 1.0)


@njit(cache=True)
def _from_quaternion(q, out):
    x, y, z, w = q[0], q[1], q[2], q[3]
    x2 = x + x
    y2 = y + y
    z2 = z + z

    xx = x * x2
    yx = y * x2
    yy = y * y2
    zx = z * x2
    zy = z * y2
    zz = z * z2
    wx = w * x2
    wy = w * y2
    wz = w * z2

    _set(out,
         1.0 - yy - zz, yx + wz, zx - wy,
         yx - wz, 1.0 - xx - zz, zy + wx,
         zx + wy, zy - wx, 1.0 - xx - yy)


@njit(cache=True)
def _normal_from_matrix4(m, out):
    a00, a01, a02, a03 = m[0], m[1], m[2], m[3]
    a10, a11, a12, a13 = m[4], m[5], m[6], m[7]
    a20, a21, a22, a23 = m[8], m[9], m[10], m[11]
    a30, a31, a32, a33 = m[12], m[13], m[14], m[15]

    b00 = a00 * a11 - a01 * a10
    b01 = a00 * a12 - a02 * a10
    b02 = a00 * a13 - a03 * a10
    b03 = a01 * a12 - a02 * a11
    b04 = a01 * a13 - a03 * a11
    b05 = a02 * a13 - a03 * a12
    b06 = a20 * a31 - a21 * a30
    b07 = a20 * a32 - a22 * a30
    b08 = a20 * a33 - a23 * a30
    b09 = a21 * a32 - a22 * a31
    b10 = a21 * a33 - a23 * a31
    b11 = a22 * a33 - a23 * a32

    det = b00 * b11 - b01 * b10 + b02 * b09 + b03 * b08 - b04 * b07 + b05 * b06
    if det == 0.0:
        raise SingularMatrixError("Matrix is singular and cannot be inverted.")
    det = 1.0 / det

    # transpose of the inverse's upper-left 3x3
    _set(out,
         (a11 * b11 - a12 * b10 + a13 * b09) * det,
         (a12 * b08 - a10 * b11 - a13 * b07) * det,
         (a10 * b10 - a11 * b08 + a13 * b06) * det,
         (a02 * b10 - a01 * b11 - a03 * b09) * det,
         (a00 * b11 - a02 * b08 + a03 * b07) * det,
         (a01 * b08 - a00 * b10 - a03 * b06) * det,
         (a31 * b05 - a32 * b04 + a33 * b03) * det,
         (a32 * b02 - a30 * b05 - a33 * b01) * det,
         (a30 * b04 - a31 * b02 + a33 * b00) * det)


@njit(cache=True)
def _projection(width, height, out):
    _set(out, 2.0 / width, 0.0, 0.0, 0.0, -2.0 / height, 0.0, -1.0, 1.0, 1.0)


@njit(cache=True)
def _from_matrix4(m, out):
    _set(out, m[0], m[1], m[2], m[4], m[5], m[6], m[8], m[9], m[10])


@njit(cache=True)
def _adjoint(m, out):
    a00, a01, a02 = m[0], m[1], m[2]
    a10, a11, a12 = m[3], m[4], m[5]
    a20, a21, a22 = m[6], m[7], m[8]
    _set(out,
         a11 * a22 - a12 * a21,
         a02 * a21 - a01 * a22,
         a01 * a12 - a02 * a11,
         a12 * a20 - a10 * a22,
         a00 * a22 - a02 * a20,
         a02 * a10 - a00 * a12,
         a10 * a21 - a11 * a20,
         a01 * a20 - a00 * a21,
         a00 * a11 - a01 * a10)


@njit(cache=True)
def _multiply(a, b, out):
    a00, a01, a02 = a[0], a[1], a[2]
    a10, a11, a12 = a[3], a[4], a[5]
    a20, a21, a22 = a[6], a[7], a[8]
    b00, b01, b02 = b[0], b[1], b[2]
    b10, b11, b12 = b[3], b[4], b[5]
    b20, b21, b22 = b[6], b[7], b[8]
    _set(out,
         b00 * a00 + b01 * a10 + b02 * a20,
         b00 * a01 + b01 * a11 + b02 * a21,
         b00 * a02 + b01 * a12 + b02 * a22,
         b10 * a00 + b11 * a10 + b12 * a20,
         b10 * a01 + b11 * a11 + b12 * a21,
         b10 * a02 + b11 * a12 + b12 * a22,
         b20 * a00 + b21 * a10 + b22 * a20,
         b20 * a01 + b21 * a11 + b22 * a21,
         b20 * a02 + b21 * a12 + b22 * a22)


@njit(cache=True)
def _transpose(m, out):
    for column in range(3):
        for row in range(3):
            out[column * 3 + row] = m[row * 3 + column]


@njit(cache=True)
def _transpose_in_place(m):
    a01, a02, a12 = m[1], m[2], m[5]
    m[1] = m[3]
    m[2] = m[6]
    m[3] = a01
    m[5] = m[7]
    m[6] = a02
    m[7] = a12


@njit(cache=True)
def _determinant(m):
    a00, a01, a02 = m[0], m[1], m[2]
    a10, a11, a12 = m[3], m[4], m[5]
    a20, a21, a22 = m[6], m[7], m[8]
    return (a00 * (a22 * a11 - a12 * a21)
            + a01 * (-a22 * a10 + a12 * a20)
            + a02 * (a21 * a10 - a11 * a20))


@njit(cache=True)
def _invert(m, out):
    a00, a01, a02 = m[0], m[1], m[2]
    a10, a11, a12 = m[3], m[4], m[5]
    a20, a21, a22 = m[6], m[7], m[8]

    b01 = a22 * a11 - a12 * a21
    b11 = -a22 * a10 + a12 * a20
    b21 = a21 * a10 - a11 * a20

    det = a00 * b01 + a01 * b11 + a02 * b21
    if det == 0.0:
        raise SingularMatrixError("Matrix is singular and cannot be inverted.")
    det = 1.0 / det

    _set(out,
         b01 * det,
         (-a22 * a01 + a02 * a21) * det,
         (a12 * a01 - a02 * a11) * det,
         b11 * det,
         (a22 * a00 - a02 * a20) * det,
         (-a12 * a00 + a02 * a10) * det,
         b21 * det,
         (-a21 * a00 + a01 * a20) * det,
         (a11 * a00 - a01 * a10) * det)


@njit(cache=True)
def _rotate(m, radians, out):
    a00, a01, a02 = m[0], m[1], m[2]
    a10, a11, a12 = m[3], m[4], m[5]
    a20, a21, a22 = m[6], m[7], m[8]
    s = math.sin(radians)
    c = math.cos(radians)
    _set(out,
         c * a00 + s * a10,
         c * a01 + s * a11,
         c * a02 + s * a12,
         c * a10 - s * a00,
         c * a11 - s * a01,
         c * a12 - s * a02,
         a20, a21, a22)


@njit(cache=True)
def _scale(m, v, out):
    x, y = v[0], v[1]
    _set(out,
         x * m[0], x * m[1], x * m[2],
         y * m[3], y * m[4], y * m[5],
         m[6], m[7], m[8])


@njit(cache=True)
def _translate(m, v, out):
    a00, a01, a02 = m[0], m[1], m[2]
    a10, a11, a12 = m[3], m[4], m[5]
    a20, a21, a22 = m[6], m[7], m[8]
    x, y = v[0], v[1]
    _set(out,
         a00, a01, a02,
         a10, a11, a12,
         x * a00 + y * a10 + a20,
         x * a01 + y * a11 + a21,
         x * a02 + y * a12 + a22)


def from_values(c0r0: float, c0r1: float, c0r2: float,
                c1r0: float, c1r1: float, c1r2: float,
                c2r0: float, c2r1: float, c2r2: float, out=None):
    """Build a matrix from components given in column-major order."""
    out, buffer = resolve_out(out, Matrix3)
    _set(buffer, float(c0r0), float(c0r1), float(c0r2), float(c1r0), float(c1r1),
         float(c1r2), float(c2r0), float(c2r1), float(c2r2))
    return out


def identity(out=None):
    out, buffer = resolve_out(out, Matrix3)
    _identity(buffer)
    return out


def from_rotation(radians: float, out=None):
    """2D rotation about the origin, in homogeneous coordinates."""
    out, buffer = resolve_out(out, Matrix3)
    _from_rotation(float(radians), buffer)
    return out


def from_scaling(v, out=None):
    out, buffer = resolve_out(out, Matrix3)
    _from_scaling(as_array(v, 2), buffer)
    return out


def from_translation(v, out=None):
    out, buffer = resolve_out(out, Matrix3)
    _from_translation(as_array(v, 2), buffer)
    return out


def from_quaternion(q, out=None):
    """Rotation matrix of a unit quaternion."""
    out, buffer = resolve_out(out, Matrix3)
    _from_quaternion(as_array(q, 4), buffer)
    return out


def normal_from_matrix4(m, out=None):
    """
    Normal matrix (inverse transpose of the upper-left 3x3) of a 4x4 matrix.

    Raises:
        SingularMatrixError: if the 4x4 matrix is singular.
    """
    out, buffer = resolve_out(out, Matrix3)
    _normal_from_matrix4(as_array(m, 16), buffer)
    return out


def projection(width: float, height: float, out=None):
    """2D projection mapping ``[0, width] x [0, height]`` to clip space with Y down."""
    out, buffer = resolve_out(out, Matrix3)
    _projection(float(width), float(height), buffer)
    return out


def from_matrix4(m, out=None):
    """Upper-left 3x3 of a 4x4 matrix."""
    out, buffer = resolve_out(out, Matrix3)
    _from_matrix4(as_array(m, 16), buffer)
    return out


def adjoint(m, out=None):
    out, buffer = resolve_out(out, Matrix3)
    _adjoint(as_array(m, 9), buffer)
    return out


def multiply(a, b, out=None):
    """Matrix product ``a x b``."""
    out, buffer = resolve_out(out, Matrix3)
    _multiply(as_array(a, 9), as_array(b, 9), buffer)
    return out


def transpose(m, out=None):
    out, buffer = resolve_out(out, Matrix3)
    source = as_array(m, 9)
    if buffer is source:
        _transpose_in_place(buffer)
        return out
    if np.may_share_memory(buffer, source):
        source = source.copy()
    _transpose(source, buffer)
    return out


def determinant(m) -> float:
    return float(_determinant(as_array(m, 9)))


def invert(m, out=None):
    """
    Inverse of ``m``.

    Raises:
        SingularMatrixError: if the determinant is exactly zero. ``out`` is
            left untouched.
    """
    out, buffer = resolve_out(out, Matrix3)
    _invert(as_array(m, 9), buffer)
    return out


def rotate(m, radians: float, out=None):
    out, buffer = resolve_out(out, Matrix3)
    _rotate(as_array(m, 9), float(radians), buffer)
    return out


def scale(m, v, out=None):
    out, buffer = resolve_out(out, Matrix3)
    _scale(as_array(m, 9), as_array(v, 2), buffer)
    return out


def translate(m, v, out=None):
    out, buffer = resolve_out(out, Matrix3)
    _translate(as_array(m, 9), as_array(v, 2), buffer)
    return out


class Matrix3(Matrix):
    """
    A 3x3 column-major matrix, defaulting to the identity.

    Used both as a 3D linear map and as a 2D affine transform in homogeneous
    coordinates.
    """

    __slots__ = ()

    size = 9
    width = 3
    height = 3
    _default = np.eye(3, dtype=np_float64).reshape(9)

    @classmethod
    def from_values(cls, *values: float) -> "Matrix3":
        return cls(*values)

    @classmethod
    def from_rotation(cls, radians: float) -> "Matrix3":
        return from_rotation(radians, cls())

    @classmethod
    def from_scaling(cls, v) -> "Matrix3":
        return from_scaling(v, cls())

    @classmethod
    def from_translation(cls, v) -> "Matrix3":
        return from_translation(v, cls())

    @classmethod
    def from_quaternion(cls, q) -> "Matrix3":
        return from_quaternion(q, cls())

    @classmethod
    def normal_from_matrix4(cls, m) -> "Matrix3":
        return normal_from_matrix4(m, cls())

    @classmethod
    def projection(cls, width: float, height: float) -> "Matrix3":
        return projection(width, height, cls())

    @classmethod
    def from_matrix4(cls, m) -> "Matrix3":
        return from_matrix4(m, cls())

    def multiply(self, other, out=None) -> "Matrix3":
        return multiply(self, other, out)

    def transpose(self, out=None) -> "Matrix3":
        return transpose(self, out)

    def determinant(self) -> float:
        return determinant(self)

    def adjoint(self, out=None) -> "Matrix3":
        return adjoint(self, out)

    def invert(self, out=None) -> "Matrix3":
        return invert(self, out)

    def rotate(self, radians: float, out=None) -> "Matrix3":
        return rotate(self, radians, out)

    def scale(self, v, out=None) -> "Matrix3":
        return scale(self, v, out)

    def translate(self, v, out=None) -> "Matrix3":
        return translate(self, v, out)
