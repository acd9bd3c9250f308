# matrix2.py

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
def _identity(out):
    out[0] = 1.0
    out[1] = 0.0
    out[2] = 0.0
    out[3] = 1.0


@njit(cache=True)
def _from_rotation(radians, out):
    s = math.sin(radians)
    c = math.cos(radians)
    out[0] = c
    out[1] = s
    out[2] = -s
    out[3] = c


@njit(cache=True)
def _from_scaling(v, out):
    x, y = v[0], v[1]
    out[0] = x
    out[1] = 0.0
    out[2] = 0.0
    out[3] = y


@njit(cache=True)
def _adjoint(m, out):
    a0, a1, a2, a3 = m[0], m[1], m[2], m[3]
    out[0] = a3
    out[1] = -a1
    out[2] = -a2
    out[3] = a0


@njit(cache=True)
def _multiply(a, b, out):
    a0, a1, a2, a3 = a[0], a[1], a[2], a[3]
    b0, b1, b2, b3 = b[0], b[1], b[2], b[3]
    out[0] = a0 * b0 + a2 * b1
    out[1] = a1 * b0 + a3 * b1
    out[2] = a0 * b2 + a2 * b3
    out[3] = a1 * b2 + a3 * b3


@njit(cache=True)
def _transpose(m, out):
    out[0] = m[0]
    out[1] = m[2]
    out[2] = m[1]
    out[3] = m[3]


@njit(cache=True)
def _transpose_in_place(m):
    a1 = m[1]
    m[1] = m[2]
    m[2] = a1


@njit(cache=True)
def _determinant(m):
    return m[0] * m[3] - m[2] * m[1]


@njit(cache=True)
def _invert(m, out):
    a0, a1, a2, a3 = m[0], m[1], m[2], m[3]
    det = a0 * a3 - a2 * a1
    if det == 0.0:
        raise SingularMatrixError("Matrix is singular and cannot be inverted.")
    det = 1.0 / det
    out[0] = a3 * det
    out[1] = -a1 * det
    out[2] = -a2 * det
    out[3] = a0 * det


@njit(cache=True)
def _rotate(m, radians, out):
    a0, a1, a2, a3 = m[0], m[1], m[2], m[3]
    s = math.sin(radians)
    c = math.cos(radians)
    out[0] = a0 * c + a2 * s
    out[1] = a1 * c + a3 * s
    out[2] = a0 * -s + a2 * c
    out[3] = a1 * -s + a3 * c


@njit(cache=True)
def _scale(m, v, out):
    x, y = v[0], v[1]
    out[0] = m[0] * x
    out[1] = m[1] * x
    out[2] = m[2] * y
    out[3] = m[3] * y


def from_values(c0r0: float, c0r1: float, c1r0: float, c1r1: float, out=None):
    """Build a matrix from components given in column-major order."""
    out, buffer = resolve_out(out, Matrix2)
    buffer[0] = c0r0
    buffer[1] = c0r1
    buffer[2] = c1r0
    buffer[3] = c1r1
    return out


def identity(out=None):
    out, buffer = resolve_out(out, Matrix2)
    _identity(buffer)
    return out


def from_rotation(radians: float, out=None):
    """Counter-clockwise rotation by ``radians``."""
    out, buffer = resolve_out(out, Matrix2)
    _from_rotation(float(radians), buffer)
    return out


def from_scaling(v, out=None):
    out, buffer = resolve_out(out, Matrix2)
    _from_scaling(as_array(v, 2), buffer)
    return out


def adjoint(m, out=None):
    out, buffer = resolve_out(out, Matrix2)
    _adjoint(as_array(m, 4), buffer)
    return out


def multiply(a, b, out=None):
    """Matrix product ``a x b``."""
    out, buffer = resolve_out(out, Matrix2)
    _multiply(as_array(a, 4), as_array(b, 4), buffer)
    return out


def transpose(m, out=None):
    out, buffer = resolve_out(out, Matrix2)
    source = as_array(m, 4)
    if buffer is source:
        _transpose_in_place(buffer)
        return out
    if np.may_share_memory(buffer, source):
        source = source.copy()
    _transpose(source, buffer)
    return out


def determinant(m) -> float:
    return float(_determinant(as_array(m, 4)))


def invert(m, out=None):
    """
    Inverse of ``m``.

    Raises:
        SingularMatrixError: if the determinant is exactly zero. ``out`` is
            left untouched.
    """
    out, buffer = resolve_out(out, Matrix2)
    _invert(as_array(m, 4), buffer)
    return out


def rotate(m, radians: float, out=None):
    """Post-multiply ``m`` by a rotation of ``radians``."""
    out, buffer = resolve_out(out, Matrix2)
    _rotate(as_array(m, 4), float(radians), buffer)
    return out


def scale(m, v, out=None):
    """Post-multiply ``m`` by a scaling of ``v``."""
    out, buffer = resolve_out(out, Matrix2)
    _scale(as_array(m, 4), as_array(v, 2), buffer)
    return out


class Matrix2(Matrix):
    """A 2x2 column-major matrix, defaulting to the identity."""

    __slots__ = ()

    size = 4
    width = 2
    height = 2
    _default = np.array([1.0, 0.0, 0.0, 1.0], dtype=np_float64)

    @classmethod
    def from_values(cls, c0r0: float, c0r1: float, c1r0: float, c1r1: float) -> "Matrix2":
        return cls(c0r0, c0r1, c1r0, c1r1)

    @classmethod
    def from_rotation(cls, radians: float) -> "Matrix2":
        return from_rotation(radians, cls())

    @classmethod
    def from_scaling(cls, v) -> "Matrix2":
        return from_scaling(v, cls())

    def multiply(self, other, out=None) -> "Matrix2":
        return multiply(self, other, out)

    def transpose(self, out=None) -> "Matrix2":
        return transpose(self, out)

    def determinant(self) -> float:
        return determinant(self)

    def adjoint(self, out=None) -> "Matrix2":
        return adjoint(self, out)

    def invert(self, out=None) -> "Matrix2":
        return invert(self, out)

    def rotate(self, radians: float, out=None) -> "Matrix2":
        return rotate(self, radians, out)

    def scale(self, v, out=None) -> "Matrix2":
        return scale(self, v, out)
