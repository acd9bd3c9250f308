# matrix.py

from abc import ABC, abstractmethod

import numpy as np
from numpy import float64 as np_float64
from numpy import ndarray

from vecmath import elementwise
from vecmath.base import FixedArray
from vecmath.errors import MatrixSizeError


class SquareMatrix(ABC):
    """
    Capability shared by every square matrix, fixed-size or not.

    ``invert`` and ``adjoint`` return the implementing type.
    """

    __slots__ = ()

    @abstractmethod
    def determinant(self) -> float:
        ...

    @abstractmethod
    def adjoint(self, out=None):
        ...

    @abstractmethod
    def invert(self, out=None):
        """
        Inverse of this matrix.

        Raises:
            SingularMatrixError: if the determinant is exactly zero.
        """

    @abstractmethod
    def set_identity(self):
        """Reset this matrix to the identity in place and return it."""


class Matrix(FixedArray, SquareMatrix):
    """
    Column-major N x N matrix stored as a flat array.

    Component ``i`` sits at column ``i // N`` and row ``i % N``.
    """

    __slots__ = ()

    width: int = 0
    height: int = 0

    @classmethod
    def identity(cls):
        return cls()

    @classmethod
    def from_numpy(cls, matrix):
        """Build from a conventional (row, column) indexed 2D array."""
        matrix = np.asarray(matrix, dtype=np_float64)
        if matrix.shape != (cls.height, cls.width):
            raise MatrixSizeError(
                f"{cls.__name__} needs a {cls.height}x{cls.width} array, got {matrix.shape}")
        return cls.from_unsafe(matrix.T.flatten())

    def to_numpy(self) -> ndarray:
        """(row, column) indexed view sharing memory with this matrix."""
        return self.array.reshape(self.width, self.height).T

    @abstractmethod
    def multiply(self, other, out=None):
        ...

    @abstractmethod
    def transpose(self, out=None):
        ...

    def set_identity(self):
        elementwise.copy(self._default, self)
        return self

    def add(self, other, out=None):
        return elementwise.add(self, other, out)

    def subtract(self, other, out=None):
        return elementwise.subtract(self, other, out)

    def multiply_scalar(self, scalar: float, out=None):
        return elementwise.scale(self, scalar, out)

    def multiply_scalar_and_add(self, other, scalar: float, out=None):
        """``self + other * scalar``."""
        return elementwise.scale_and_add(self, other, scalar, out)

    def frob(self) -> float:
        """Frobenius norm."""
        return elementwise.magnitude(self)

    def equals(self, other) -> bool:
        return elementwise.equals(self, other)

    def exact_equals(self, other) -> bool:
        return elementwise.exact_equals(self, other)

    def copy_from(self, source):
        return elementwise.copy(source, self)

    def __matmul__(self, other):
        return self.multiply(other)
