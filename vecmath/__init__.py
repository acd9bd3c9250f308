"""
vecmath: fixed-size vectors, matrices, quaternions and dual quaternions for
3D math, compiled with numba, plus variable-size counterparts and a few
scalar helpers.

Every operation is available as a free function ``module.op(inputs..., out=None)``
that writes into ``out`` (which may alias an input) and as a method on the
value classes.
"""

__version__ = version = "0.1.0"

import logging

from vecmath import (
    algorithms,
    dual_quaternion,
    elementwise,
    matrix2,
    matrix3,
    matrix4,
    quaternion,
    utils,
    vector2,
    vector3,
    vector4,
)
from vecmath.dual_quaternion import DualQuaternion
from vecmath.errors import (
    MatrixSizeError,
    PartialMatrixError,
    SingularMatrixError,
    SizeMismatchError,
    VecmathError,
    VectorSizeError,
)
from vecmath.matrix import Matrix, SquareMatrix
from vecmath.matrix2 import Matrix2
from vecmath.matrix3 import Matrix3
from vecmath.matrix4 import Matrix4
from vecmath.quaternion import Quaternion
from vecmath.slow_matrix import SlowMatrix, SlowSquareMatrix
from vecmath.slow_vector import SlowVector
from vecmath.structures import AxisAngle, FieldOfView
from vecmath.utils import EPSILON, seed
from vecmath.vector import Vector
from vecmath.vector2 import Vector2
from vecmath.vector3 import Vector3
from vecmath.vector4 import Vector4

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AxisAngle",
    "DualQuaternion",
    "EPSILON",
    "FieldOfView",
    "Matrix",
    "Matrix2",
    "Matrix3",
    "Matrix4",
    "MatrixSizeError",
    "PartialMatrixError",
    "Quaternion",
    "SingularMatrixError",
    "SizeMismatchError",
    "SlowMatrix",
    "SlowSquareMatrix",
    "SlowVector",
    "SquareMatrix",
    "VecmathError",
    "Vector",
    "Vector2",
    "Vector3",
    "Vector4",
    "VectorSizeError",
    "algorithms",
    "dual_quaternion",
    "elementwise",
    "matrix2",
    "matrix3",
    "matrix4",
    "quaternion",
    "seed",
    "utils",
    "vector2",
    "vector3",
    "vector4",
]
