# matrix4.py
"""
4x4 column-major matrices for 3D affine and projective transforms.

Translation lives in components 12, 13 and 14. Projection builders follow
the OpenGL conventions (right-handed view space, clip space [-1, 1]) unless
their name ends in ``_zo``, in which case depth maps to [0, 1].
"""

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
from vecmath.quaternion import Quaternion
from vecmath.structures import FieldOfView
from vecmath.utils import EPSILON, approx_equals_absolute
from vecmath.vector3 import Vector3

from numba.core.errors import NumbaPerformanceWarning
import warnings
warnings.filterwarnings("ignore", category=NumbaPerformanceWarning)


@njit(cache=True)
def _set(out, a0, a1, a2, a3, a4, a5, a6, a7, a8, a9, a10, a11, a12, a13, a14, a15):
    out[0] = a0
    out[1] = a1
    out[2] = a2
    out[3] = a3
    out[4] = a4
    out[5] = a5
    out[6] = a6
    out[7] = a7
    out[8] = a8
    out[9] = a9
    out[10] = a10
    out[11] = a11
    out[12] = a12
    out[13] = a13
    out[14] = a14
    out[15] = a15


@njit(cache=True)
def _identity(out):
    _set(out,
         1.0, 0.0, 0.0, 0.0,
         0.0, 1.0, 0.0, 0.0,
         0.0, 0.0, 1.0, 0.0,
         0.0, 0.0, 0.0, 1.0)


@njit(cache=True)
def _from_translation(v, out):
    _set(out,
         1.0, 0.0, 0.0, 0.0,
         0.0, 1.0, 0.0, 0.0,
         0.0, 0.0, 1.0, 0.0,
         v[0], v[1], v[2], 1.0)


@njit(cache=True)
def _from_scaling(v, out):
    _set(out,
         v[0], 0.0, 0.0, 0.0,
         0.0, v[1], 0.0, 0.0,
         0.0, 0.0, v[2], 0.0,
         0.0, 0.0, 0.0, 1.0)


@njit(cache=True)
def _from_rotation(radians, axis, out):
    x, y, z = axis[0], axis[1], axis[2]
    length = math.sqrt(x * x + y * y + z * z)
    if length < EPSILON:
        # no usable axis, so no rotation
        _identity(out)
        return
    length = 1.0 / length
    x *= length
    y *= length
    z *= length

    s = math.sin(radians)
    c = math.cos(radians)
    t = 1.0 - c

    _set(out,
         x * x * t + c, y * x * t + z * s, z * x * t - y * s, 0.0,
         x * y * t - z * s, y * y * t + c, z * y * t + x * s, 0.0,
         x * z * t + y * s, y * z * t - x * s, z * z * t + c, 0.0,
         0.0, 0.0, 0.0, 1.0)


@njit(cache=True)
def _from_x_rotation(radians, out):
    s = math.sin(radians)
    c = math.cos(radians)
    _set(out,
         1.0, 0.0, 0.0, 0.0,
         0.0, c, s, 0.0,
         0.0, -s, c, 0.0,
         0.0, 0.0, 0.0, 1.0)


@njit(cache=True)
def _from_y_rotation(radians, out):
    s = math.sin(radians)
    c = math.cos(radians)
    _set(out,
         c, 0.0, -s, 0.0,
         0.0, 1.0, 0.0, 0.0,
         s, 0.0, c, 0.0,
         0.0, 0.0, 0.0, 1.0)


@njit(cache=True)
def _from_z_rotation(radians, out):
    s = math.sin(radians)
    c = math.cos(radians)
    _set(out,
         c, s, 0.0, 0.0,
         -s, c, 0.0, 0.0,
         0.0, 0.0, 1.0, 0.0,
         0.0, 0.0, 0.0, 1.0)


@njit(cache=True)
def _from_rotation_translation_scale_origin(q, v, scaling, origin, out):
    x, y, z, w = q[0], q[1], q[2], q[3]
    x2 = x + x
    y2 = y + y
    z2 = z + z

    xx = x * x2
    xy = x * y2
    xz = x * z2
    yy = y * y2
    yz = y * z2
    zz = z * z2
    wx = w * x2
    wy = w * y2
    wz = w * z2

    sx, sy, sz = scaling[0], scaling[1], scaling[2]
    ox, oy, oz = origin[0], origin[1], origin[2]

    r0 = (1.0 - (yy + zz)) * sx
    r1 = (xy + wz) * sx
    r2 = (xz - wy) * sx
    r4 = (xy - wz) * sy
    r5 = (1.0 - (xx + zz)) * sy
    r6 = (yz + wx) * sy
    r8 = (xz + wy) * sz
    r9 = (yz - wx) * sz
    r10 = (1.0 - (xx + yy)) * sz

    # t + o - R * S * o
    _set(out,
         r0, r1, r2, 0.0,
         r4, r5, r6, 0.0,
         r8, r9, r10, 0.0,
         v[0] + ox - (r0 * ox + r4 * oy + r8 * oz),
         v[1] + oy - (r1 * ox + r5 * oy + r9 * oz),
         v[2] + oz - (r2 * ox + r6 * oy + r10 * oz),
         1.0)


@njit(cache=True)
def _adjugate(m, out, factor):
    # cofactors from the twelve 2x2 sub-determinants, transposed and scaled
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

    _set(out,
         (a11 * b11 - a12 * b10 + a13 * b09) * factor,
         (a02 * b10 - a01 * b11 - a03 * b09) * factor,
         (a31 * b05 - a32 * b04 + a33 * b03) * factor,
         (a22 * b04 - a21 * b05 - a23 * b03) * factor,
         (a12 * b08 - a10 * b11 - a13 * b07) * factor,
         (a00 * b11 - a02 * b08 + a03 * b07) * factor,
         (a32 * b02 - a30 * b05 - a33 * b01) * factor,
         (a20 * b05 - a22 * b02 + a23 * b01) * factor,
         (a10 * b10 - a11 * b08 + a13 * b06) * factor,
         (a01 * b08 - a00 * b10 - a03 * b06) * factor,
         (a30 * b04 - a31 * b02 + a33 * b00) * factor,
         (a21 * b02 - a20 * b04 - a23 * b00) * factor,
         (a11 * b07 - a10 * b09 - a12 * b06) * factor,
         (a00 * b09 - a01 * b07 + a02 * b06) * factor,
         (a31 * b01 - a30 * b03 - a32 * b00) * factor,
         (a20 * b03 - a21 * b01 + a22 * b00) * factor)


@njit(cache=True)
def _determinant(m):
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

    return b00 * b11 - b01 * b10 + b02 * b09 + b03 * b08 - b04 * b07 + b05 * b06


@njit(cache=True)
def _invert(m, out):
    det = _determinant(m)
    if det == 0.0:
        raise SingularMatrixError("Matrix is singular and cannot be inverted.")
    _adjugate(m, out, 1.0 / det)


@njit(cache=True)
def _multiply(a, b, out):
    a00, a01, a02, a03 = a[0], a[1], a[2], a[3]
    a10, a11, a12, a13 = a[4], a[5], a[6], a[7]
    a20, a21, a22, a23 = a[8], a[9], a[10], a[11]
    a30, a31, a32, a33 = a[12], a[13], a[14], a[15]

    # one column of b at a time; column j of out only depends on column j of b
    for j in range(4):
        k = j * 4
        b0, b1, b2, b3 = b[k], b[k + 1], b[k + 2], b[k + 3]
        out[k] = b0 * a00 + b1 * a10 + b2 * a20 + b3 * a30
        out[k + 1] = b0 * a01 + b1 * a11 + b2 * a21 + b3 * a31
        out[k + 2] = b0 * a02 + b1 * a12 + b2 * a22 + b3 * a32
        out[k + 3] = b0 * a03 + b1 * a13 + b2 * a23 + b3 * a33


@njit(cache=True)
def _transpose(m, out):
    for column in range(4):
        for row in range(4):
            out[column * 4 + row] = m[row * 4 + column]


@njit(cache=True)
def _transpose_in_place(m):
    for column in range(4):
        for row in range(column + 1, 4):
            upper = m[row * 4 + column]
            m[row * 4 + column] = m[column * 4 + row]
            m[column * 4 + row] = upper


@njit(cache=True, error_model="numpy")
def _frustum(left, right, bottom, top, near, far, out):
    rl = 1.0 / (right - left)
    tb = 1.0 / (top - bottom)
    if far != math.inf:
        nf = 1.0 / (near - far)
        m10 = (far + near) * nf
        m14 = far * near * 2.0 * nf
    else:
        m10 = -1.0
        m14 = -2.0 * near
    _set(out,
         near * 2.0 * rl, 0.0, 0.0, 0.0,
         0.0, near * 2.0 * tb, 0.0, 0.0,
         (right + left) * rl, (top + bottom) * tb, m10, -1.0,
         0.0, 0.0, m14, 0.0)


@njit(cache=True, error_model="numpy")
def _perspective(fovy, aspect, near, far, zero_to_one, out):
    f = 1.0 / math.tan(fovy / 2.0)
    if far != math.inf:
        nf = 1.0 / (near - far)
        if zero_to_one:
            m10 = far * nf
            m14 = far * near * nf
        else:
            m10 = (far + near) * nf
            m14 = 2.0 * far * near * nf
    else:
        m10 = -1.0
        m14 = -near if zero_to_one else -2.0 * near
    _set(out,
         f / aspect, 0.0, 0.0, 0.0,
         0.0, f, 0.0, 0.0,
         0.0, 0.0, m10, -1.0,
         0.0, 0.0, m14, 0.0)


@njit(cache=True, error_model="numpy")
def _perspective_from_field_of_view(up, down, left, right, near, far, out):
    up_tan = math.tan(up * math.pi / 180.0)
    down_tan = math.tan(down * math.pi / 180.0)
    left_tan = math.tan(left * math.pi / 180.0)
    right_tan = math.tan(right * math.pi / 180.0)
    x_scale = 2.0 / (left_tan + right_tan)
    y_scale = 2.0 / (up_tan + down_tan)
    _set(out,
         x_scale, 0.0, 0.0, 0.0,
         0.0, y_scale, 0.0, 0.0,
         -((left_tan - right_tan) * x_scale * 0.5),
         (up_tan - down_tan) * y_scale * 0.5,
         far / (near - far),
         -1.0,
         0.0, 0.0, far * near / (near - far), 0.0)


@njit(cache=True, error_model="numpy")
def _ortho(left, right, bottom, top, near, far, zero_to_one, out):
    lr = 1.0 / (left - right)
    bt = 1.0 / (bottom - top)
    nf = 1.0 / (near - far)
    if zero_to_one:
        m10 = nf
        m14 = near * nf
    else:
        m10 = 2.0 * nf
        m14 = (far + near) * nf
    _set(out,
         -2.0 * lr, 0.0, 0.0, 0.0,
         0.0, -2.0 * bt, 0.0, 0.0,
         0.0, 0.0, m10, 0.0,
         (left + right) * lr, (top + bottom) * bt, m14, 1.0)


@njit(cache=True)
def _look_at(eye, center, up, out):
    eye_x, eye_y, eye_z = eye[0], eye[1], eye[2]
    center_x, center_y, center_z = center[0], center[1], center[2]
    up_x, up_y, up_z = up[0], up[1], up[2]

    if (approx_equals_absolute(eye_x, center_x)
            and approx_equals_absolute(eye_y, center_y)
            and approx_equals_absolute(eye_z, center_z)):
        # no view direction
        _identity(out)
        return

    z0 = eye_x - center_x
    z1 = eye_y - center_y
    z2 = eye_z - center_z
    length = 1.0 / math.sqrt(z0 * z0 + z1 * z1 + z2 * z2)
    z0 *= length
    z1 *= length
    z2 *= length

    x0 = up_y * z2 - up_z * z1
    x1 = up_z * z0 - up_x * z2
    x2 = up_x * z1 - up_y * z0
    length = math.sqrt(x0 * x0 + x1 * x1 + x2 * x2)
    if length == 0.0:
        # up is parallel to the view direction
        x0 = 0.0
        x1 = 0.0
        x2 = 0.0
    else:
        length = 1.0 / length
        x0 *= length
        x1 *= length
        x2 *= length

    y0 = z1 * x2 - z2 * x1
    y1 = z2 * x0 - z0 * x2
    y2 = z0 * x1 - z1 * x0
    length = math.sqrt(y0 * y0 + y1 * y1 + y2 * y2)
    if length == 0.0:
        y0 = 0.0
        y1 = 0.0
        y2 = 0.0
    else:
        length = 1.0 / length
        y0 *= length
        y1 *= length
        y2 *= length

    _set(out,
         x0, y0, z0, 0.0,
         x1, y1, z1, 0.0,
         x2, y2, z2, 0.0,
         -(x0 * eye_x + x1 * eye_y + x2 * eye_z),
         -(y0 * eye_x + y1 * eye_y + y2 * eye_z),
         -(z0 * eye_x + z1 * eye_y + z2 * eye_z),
         1.0)


@njit(cache=True)
def _target_to(eye, target, up, out):
    eye_x, eye_y, eye_z = eye[0], eye[1], eye[2]
    up_x, up_y, up_z = up[0], up[1], up[2]

    z0 = eye_x - target[0]
    z1 = eye_y - target[1]
    z2 = eye_z - target[2]
    length = z0 * z0 + z1 * z1 + z2 * z2
    if length > 0.0:
        length = 1.0 / math.sqrt(length)
        z0 *= length
        z1 *= length
        z2 *= length

    x0 = up_y * z2 - up_z * z1
    x1 = up_z * z0 - up_x * z2
    x2 = up_x * z1 - up_y * z0
    length = x0 * x0 + x1 * x1 + x2 * x2
    if length > 0.0:
        length = 1.0 / math.sqrt(length)
        x0 *= length
        x1 *= length
        x2 *= length

    _set(out,
         x0, x1, x2, 0.0,
         z1 * x2 - z2 * x1, z2 * x0 - z0 * x2, z0 * x1 - z1 * x0, 0.0,
         z0, z1, z2, 0.0,
         eye_x, eye_y, eye_z, 1.0)


@njit(cache=True)
def _scale(m, v, out):
    x, y, z = v[0], v[1], v[2]
    for i in range(4):
        a0, a1, a2, a3 = m[i], m[i + 4], m[i + 8], m[i + 12]
        out[i] = a0 * x
        out[i + 4] = a1 * y
        out[i + 8] = a2 * z
        out[i + 12] = a3


@njit(cache=True)
def _translate(m, v, out):
    x, y, z = v[0], v[1], v[2]
    for i in range(4):
        a0, a1, a2, a3 = m[i], m[i + 4], m[i + 8], m[i + 12]
        out[i] = a0
        out[i + 4] = a1
        out[i + 8] = a2
        out[i + 12] = a0 * x + a1 * y + a2 * z + a3


@njit(cache=True)
def _rotate(m, radians, axis, out):
    x, y, z = axis[0], axis[1], axis[2]
    length = math.sqrt(x * x + y * y + z * z)
    if length < EPSILON:
        for i in range(16):
            out[i] = m[i]
        return
    length = 1.0 / length
    x *= length
    y *= length
    z *= length

    s = math.sin(radians)
    c = math.cos(radians)
    t = 1.0 - c

    b00 = x * x * t + c
    b01 = y * x * t + z * s
    b02 = z * x * t - y * s
    b10 = x * y * t - z * s
    b11 = y * y * t + c
    b12 = z * y * t + x * s
    b20 = x * z * t + y * s
    b21 = y * z * t - x * s
    b22 = z * z * t + c

    for i in range(4):
        a0, a1, a2, a3 = m[i], m[i + 4], m[i + 8], m[i + 12]
        out[i] = a0 * b00 + a1 * b01 + a2 * b02
        out[i + 4] = a0 * b10 + a1 * b11 + a2 * b12
        out[i + 8] = a0 * b20 + a1 * b21 + a2 * b22
        out[i + 12] = a3


@njit(cache=True)
def _rotate_x(m, radians, out):
    s = math.sin(radians)
    c = math.cos(radians)
    for i in range(4):
        a0, a1, a2, a3 = m[i], m[i + 4], m[i + 8], m[i + 12]
        out[i] = a0
        out[i + 4] = a1 * c + a2 * s
        out[i + 8] = a2 * c - a1 * s
        out[i + 12] = a3


@njit(cache=True)
def _rotate_y(m, radians, out):
    s = math.sin(radians)
    c = math.cos(radians)
    for i in range(4):
        a0, a1, a2, a3 = m[i], m[i + 4], m[i + 8], m[i + 12]
        out[i] = a0 * c - a2 * s
        out[i + 4] = a1
        out[i + 8] = a0 * s + a2 * c
        out[i + 12] = a3


@njit(cache=True)
def _rotate_z(m, radians, out):
    s = math.sin(radians)
    c = math.cos(radians)
    for i in range(4):
        a0, a1, a2, a3 = m[i], m[i + 4], m[i + 8], m[i + 12]
        out[i] = a0 * c + a1 * s
        out[i + 4] = a1 * c - a0 * s
        out[i + 8] = a2
        out[i + 12] = a3


@njit(cache=True)
def _get_scaling(m, out):
    x = math.sqrt(m[0] * m[0] + m[1] * m[1] + m[2] * m[2])
    y = math.sqrt(m[4] * m[4] + m[5] * m[5] + m[6] * m[6])
    z = math.sqrt(m[8] * m[8] + m[9] * m[9] + m[10] * m[10])
    out[0] = x
    out[1] = y
    out[2] = z


@njit(cache=True, error_model="numpy")
def _get_rotation(m, out):
    is1 = 1.0 / math.sqrt(m[0] * m[0] + m[1] * m[1] + m[2] * m[2])
    is2 = 1.0 / math.sqrt(m[4] * m[4] + m[5] * m[5] + m[6] * m[6])
    is3 = 1.0 / math.sqrt(m[8] * m[8] + m[9] * m[9] + m[10] * m[10])

    # normalized basis, sm{column}{row} with 1-based indices
    sm11 = m[0] * is1
    sm12 = m[1] * is1
    sm13 = m[2] * is1
    sm21 = m[4] * is2
    sm22 = m[5] * is2
    sm23 = m[6] * is2
    sm31 = m[8] * is3
    sm32 = m[9] * is3
    sm33 = m[10] * is3

    trace = sm11 + sm22 + sm33
    if trace > 0.0:
        s = math.sqrt(trace + 1.0) * 2.0
        w = 0.25 * s
        x = (sm23 - sm32) / s
        y = (sm31 - sm13) / s
        z = (sm12 - sm21) / s
    elif sm11 > sm22 and sm11 > sm33:
        s = math.sqrt(1.0 + sm11 - sm22 - sm33) * 2.0
        w = (sm23 - sm32) / s
        x = 0.25 * s
        y = (sm12 + sm21) / s
        z = (sm31 + sm13) / s
    elif sm22 > sm33:
        s = math.sqrt(1.0 + sm22 - sm11 - sm33) * 2.0
        w = (sm31 - sm13) / s
        x = (sm12 + sm21) / s
        y = 0.25 * s
        z = (sm23 + sm32) / s
    else:
        s = math.sqrt(1.0 + sm33 - sm11 - sm22) * 2.0
        w = (sm12 - sm21) / s
        x = (sm31 + sm13) / s
        y = (sm23 + sm32) / s
        z = 0.25 * s

    out[0] = x
    out[1] = y
    out[2] = z
    out[3] = w


@njit(cache=True, error_model="numpy")
def _from_dual_quaternion(dq, out):
    # translation = 2 * dual * conjugate(real) / |real|^2
    bx, by, bz, bw = -dq[0], -dq[1], -dq[2], dq[3]
    ax, ay, az, aw = dq[4], dq[5], dq[6], dq[7]
    magnitude = bx * bx + by * by + bz * bz + bw * bw
    factor = 2.0
    if magnitude > 0.0:
        factor = 2.0 / magnitude
    translation = np.empty(3, dtype=np_float64)
    translation[0] = (ax * bw + aw * bx + ay * bz - az * by) * factor
    translation[1] = (ay * bw + aw * by + az * bx - ax * bz) * factor
    translation[2] = (az * bw + aw * bz + ax * by - ay * bx) * factor
    unit = np.ones(3, dtype=np_float64)
    _from_rotation_translation_scale_origin(
        dq[0:4], translation, unit, np.zeros(3, dtype=np_float64), out)


def from_values(*values: float, out=None):
    """Build a matrix from 16 components given in column-major order."""
    out, buffer = resolve_out(out, Matrix4)
    buffer[:] = as_array(values, 16)
    return out


def identity(out=None):
    out, buffer = resolve_out(out, Matrix4)
    _identity(buffer)
    return out


def from_translation(v, out=None):
    out, buffer = resolve_out(out, Matrix4)
    _from_translation(as_array(v, 3), buffer)
    return out


def from_scaling(v, out=None):
    out, buffer = resolve_out(out, Matrix4)
    _from_scaling(as_array(v, 3), buffer)
    return out


def from_rotation(radians: float, axis, out=None):
    """
    Rotation of ``radians`` about ``axis`` (Rodrigues' formula).

    ``axis`` need not be normalized. A zero-length axis gives the identity.
    """
    out, buffer = resolve_out(out, Matrix4)
    _from_rotation(float(radians), as_array(axis, 3), buffer)
    return out


def from_x_rotation(radians: float, out=None):
    out, buffer = resolve_out(out, Matrix4)
    _from_x_rotation(float(radians), buffer)
    return out


def from_y_rotation(radians: float, out=None):
    out, buffer = resolve_out(out, Matrix4)
    _from_y_rotation(float(radians), buffer)
    return out


def from_z_rotation(radians: float, out=None):
    out, buffer = resolve_out(out, Matrix4)
    _from_z_rotation(float(radians), buffer)
    return out


_ONES3 = np.ones(3, dtype=np_float64)
_ZEROS3 = np.zeros(3, dtype=np_float64)


def from_quaternion(q, out=None):
    """Rotation matrix of a unit quaternion."""
    out, buffer = resolve_out(out, Matrix4)
    _from_rotation_translation_scale_origin(
        as_array(q, 4), _ZEROS3, _ONES3, _ZEROS3, buffer)
    return out


def from_rotation_translation(q, v, out=None):
    """Rotation by ``q`` followed by translation by ``v``."""
    out, buffer = resolve_out(out, Matrix4)
    _from_rotation_translation_scale_origin(
        as_array(q, 4), as_array(v, 3), _ONES3, _ZEROS3, buffer)
    return out


def from_rotation_translation_scale(q, v, s, out=None):
    """Scale by ``s``, then rotate by ``q``, then translate by ``v``."""
    out, buffer = resolve_out(out, Matrix4)
    _from_rotation_translation_scale_origin(
        as_array(q, 4), as_array(v, 3), as_array(s, 3), _ZEROS3, buffer)
    return out


def from_rotation_translation_scale_origin(q, v, s, origin, out=None):
    """Like from_rotation_translation_scale, scaling and rotating about ``origin``."""
    out, buffer = resolve_out(out, Matrix4)
    _from_rotation_translation_scale_origin(
        as_array(q, 4), as_array(v, 3), as_array(s, 3), as_array(origin, 3), buffer)
    return out


def from_dual_quaternion(dq, out=None):
    """Rigid transform encoded by a dual quaternion."""
    out, buffer = resolve_out(out, Matrix4)
    _from_dual_quaternion(as_array(dq, 8), buffer)
    return out


def frustum(left: float, right: float, bottom: float, top: float,
            near: float, far: float = math.inf, out=None):
    """Perspective frustum. ``far`` may be ``math.inf`` for an infinite far plane."""
    out, buffer = resolve_out(out, Matrix4)
    _frustum(float(left), float(right), float(bottom), float(top),
             float(near), float(far), buffer)
    return out


def perspective(fovy: float, aspect: float, near: float, far: float = math.inf, out=None):
    """
    Perspective projection with depth mapped to [-1, 1].

    Args:
        fovy: vertical field of view in radians.
        aspect: width over height.
        near: distance to the near plane.
        far: distance to the far plane, or ``math.inf``.
        out: destination matrix.
    """
    out, buffer = resolve_out(out, Matrix4)
    _perspective(float(fovy), float(aspect), float(near), float(far), False, buffer)
    return out


def perspective_zo(fovy: float, aspect: float, near: float, far: float = math.inf, out=None):
    """Perspective projection with depth mapped to [0, 1]."""
    out, buffer = resolve_out(out, Matrix4)
    _perspective(float(fovy), float(aspect), float(near), float(far), True, buffer)
    return out


def perspective_from_field_of_view(fov: FieldOfView, near: float, far: float, out=None):
    """Perspective projection from four half-angles in degrees."""
    out, buffer = resolve_out(out, Matrix4)
    _perspective_from_field_of_view(
        float(fov.up_degrees), float(fov.down_degrees),
        float(fov.left_degrees), float(fov.right_degrees),
        float(near), float(far), buffer)
    return out


def ortho(left: float, right: float, bottom: float, top: float,
          near: float, far: float, out=None):
    """Orthographic projection with depth mapped to [-1, 1]."""
    out, buffer = resolve_out(out, Matrix4)
    _ortho(float(left), float(right), float(bottom), float(top),
           float(near), float(far), False, buffer)
    return out


def ortho_zo(left: float, right: float, bottom: float, top: float,
             near: float, far: float, out=None):
    """Orthographic projection with depth mapped to [0, 1]."""
    out, buffer = resolve_out(out, Matrix4)
    _ortho(float(left), float(right), float(bottom), float(top),
           float(near), float(far), True, buffer)
    return out


def look_at(eye, center, up, out=None):
    """
    View matrix for a camera at ``eye`` looking towards ``center``.

    When ``eye`` and ``center`` coincide there is no view direction and the
    identity is returned.
    """
    out, buffer = resolve_out(out, Matrix4)
    _look_at(as_array(eye, 3), as_array(center, 3), as_array(up, 3), buffer)
    return out


def target_to(eye, target, up, out=None):
    """
    Model matrix placing an object at ``eye`` oriented towards ``target``.

    This is the inverse of look_at for the same arguments.
    """
    out, buffer = resolve_out(out, Matrix4)
    _target_to(as_array(eye, 3), as_array(target, 3), as_array(up, 3), buffer)
    return out


def adjoint(m, out=None):
    out, buffer = resolve_out(out, Matrix4)
    _adjugate(as_array(m, 16), buffer, 1.0)
    return out


def multiply(a, b, out=None):
    """Matrix product ``a x b``."""
    out, buffer = resolve_out(out, Matrix4)
    _multiply(as_array(a, 16), as_array(b, 16), buffer)
    return out


def transpose(m, out=None):
    out, buffer = resolve_out(out, Matrix4)
    source = as_array(m, 16)
    if buffer is source:
        _transpose_in_place(buffer)
        return out
    if np.may_share_memory(buffer, source):
        source = source.copy()
    _transpose(source, buffer)
    return out


def determinant(m) -> float:
    return float(_determinant(as_array(m, 16)))


def invert(m, out=None):
    """
    Inverse of ``m``.

    Raises:
        SingularMatrixError: if the determinant is exactly zero. ``out`` is
            left untouched.
    """
    out, buffer = resolve_out(out, Matrix4)
    _invert(as_array(m, 16), buffer)
    return out


def scale(m, v, out=None):
    out, buffer = resolve_out(out, Matrix4)
    _scale(as_array(m, 16), as_array(v, 3), buffer)
    return out


def translate(m, v, out=None):
    out, buffer = resolve_out(out, Matrix4)
    _translate(as_array(m, 16), as_array(v, 3), buffer)
    return out


def rotate(m, radians: float, axis, out=None):
    """Post-multiply ``m`` by a rotation about ``axis``. A zero axis copies ``m``."""
    out, buffer = resolve_out(out, Matrix4)
    _rotate(as_array(m, 16), float(radians), as_array(axis, 3), buffer)
    return out


def rotate_x(m, radians: float, out=None):
    out, buffer = resolve_out(out, Matrix4)
    _rotate_x(as_array(m, 16), float(radians), buffer)
    return out


def rotate_y(m, radians: float, out=None):
    out, buffer = resolve_out(out, Matrix4)
    _rotate_y(as_array(m, 16), float(radians), buffer)
    return out


def rotate_z(m, radians: float, out=None):
    out, buffer = resolve_out(out, Matrix4)
    _rotate_z(as_array(m, 16), float(radians), buffer)
    return out


def get_translation(m, out=None):
    out, buffer = resolve_out(out, Vector3)
    source = as_array(m, 16)
    buffer[0] = source[12]
    buffer[1] = source[13]
    buffer[2] = source[14]
    return out


def set_translation(m, v, out=None):
    """Copy of ``m`` with its translation replaced by ``v``."""
    out, buffer = resolve_out(out, Matrix4)
    translation = as_array(v, 3).copy()
    source = as_array(m, 16)
    if buffer is not source:
        buffer[:] = source
    buffer[12:15] = translation
    return out


def get_scaling(m, out=None):
    """Length of each basis column. Negative scales are not recovered."""
    out, buffer = resolve_out(out, Vector3)
    _get_scaling(as_array(m, 16), buffer)
    return out


def get_rotation(m, out=None):
    """
    Rotation of a TRS matrix as a unit quaternion.

    Each basis column is divided by its own length first. Shear is not
    detected.
    """
    out, buffer = resolve_out(out, Quaternion)
    _get_rotation(as_array(m, 16), buffer)
    return out


class Matrix4(Matrix):
    """A 4x4 column-major matrix, defaulting to the identity."""

    __slots__ = ()

    size = 16
    width = 4
    height = 4
    _default = np.eye(4, dtype=np_float64).reshape(16)

    @property
    def translation(self) -> Vector3:
        return get_translation(self)

    @property
    def scaling(self) -> Vector3:
        return get_scaling(self)

    @property
    def rotation(self) -> Quaternion:
        return get_rotation(self)

    @classmethod
    def from_values(cls, *values: float) -> "Matrix4":
        return cls(*values)

    @classmethod
    def from_translation(cls, v) -> "Matrix4":
        return from_translation(v, cls())

    @classmethod
    def from_scaling(cls, v) -> "Matrix4":
        return from_scaling(v, cls())

    @classmethod
    def from_rotation(cls, radians: float, axis) -> "Matrix4":
        return from_rotation(radians, axis, cls())

    @classmethod
    def from_x_rotation(cls, radians: float) -> "Matrix4":
        return from_x_rotation(radians, cls())

    @classmethod
    def from_y_rotation(cls, radians: float) -> "Matrix4":
        return from_y_rotation(radians, cls())

    @classmethod
    def from_z_rotation(cls, radians: float) -> "Matrix4":
        return from_z_rotation(radians, cls())

    @classmethod
    def from_quaternion(cls, q) -> "Matrix4":
        return from_quaternion(q, cls())

    @classmethod
    def from_rotation_translation(cls, q, v) -> "Matrix4":
        return from_rotation_translation(q, v, cls())

    @classmethod
    def from_rotation_translation_scale(cls, q, v, s) -> "Matrix4":
        return from_rotation_translation_scale(q, v, s, cls())

    @classmethod
    def from_rotation_translation_scale_origin(cls, q, v, s, origin) -> "Matrix4":
        return from_rotation_translation_scale_origin(q, v, s, origin, cls())

    @classmethod
    def from_dual_quaternion(cls, dq) -> "Matrix4":
        return from_dual_quaternion(dq, cls())

    @classmethod
    def frustum(cls, left: float, right: float, bottom: float, top: float,
                near: float, far: float = math.inf) -> "Matrix4":
        return frustum(left, right, bottom, top, near, far, cls())

    @classmethod
    def perspective(cls, fovy: float, aspect: float, near: float, far: float = math.inf) -> "Matrix4":
        return perspective(fovy, aspect, near, far, cls())

    @classmethod
    def perspective_zo(cls, fovy: float, aspect: float, near: float, far: float = math.inf) -> "Matrix4":
        return perspective_zo(fovy, aspect, near, far, cls())

    @classmethod
    def perspective_from_field_of_view(cls, fov: FieldOfView, near: float, far: float) -> "Matrix4":
        return perspective_from_field_of_view(fov, near, far, cls())

    @classmethod
    def ortho(cls, left: float, right: float, bottom: float, top: float,
              near: float, far: float) -> "Matrix4":
        return ortho(left, right, bottom, top, near, far, cls())

    @classmethod
    def ortho_zo(cls, left: float, right: float, bottom: float, top: float,
                 near: float, far: float) -> "Matrix4":
        return ortho_zo(left, right, bottom, top, near, far, cls())

    @classmethod
    def look_at(cls, eye, center, up) -> "Matrix4":
        return look_at(eye, center, up, cls())

    @classmethod
    def target_to(cls, eye, target, up) -> "Matrix4":
        return target_to(eye, target, up, cls())

    def multiply(self, other, out=None) -> "Matrix4":
        return multiply(self, other, out)

    def transpose(self, out=None) -> "Matrix4":
        return transpose(self, out)

    def determinant(self) -> float:
        return determinant(self)

    def adjoint(self, out=None) -> "Matrix4":
        return adjoint(self, out)

    def invert(self, out=None) -> "Matrix4":
        return invert(self, out)

    def scale(self, v, out=None) -> "Matrix4":
        return scale(self, v, out)

    def translate(self, v, out=None) -> "Matrix4":
        return translate(self, v, out)

    def rotate(self, radians: float, axis, out=None) -> "Matrix4":
        return rotate(self, radians, axis, out)

    def rotate_x(self, radians: float, out=None) -> "Matrix4":
        return rotate_x(self, radians, out)

    def rotate_y(self, radians: float, out=None) -> "Matrix4":
        return rotate_y(self, radians, out)

    def rotate_z(self, radians: float, out=None) -> "Matrix4":
        return rotate_z(self, radians, out)

    def get_translation(self, out=None) -> Vector3:
        return get_translation(self, out)

    def set_translation(self, v, out=None) -> "Matrix4":
        return set_translation(self, v, out)

    def get_scaling(self, out=None) -> Vector3:
        return get_scaling(self, out)

    def get_rotation(self, out=None) -> Quaternion:
        return get_rotation(self, out)
