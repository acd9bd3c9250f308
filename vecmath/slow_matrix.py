# slow_matrix.py
"""
Matrices whose dimensions are only known at runtime.

Storage is column-major like the fixed-size matrices: component ``i`` sits in
column ``i // height`` and row ``i % height``. Constructors take a list of
columns.
"""

import logging
from typing import Iterator, Sequence

import numpy as np
from numpy import float64 as np_float64
from numpy import ndarray

from vecmath.errors import MatrixSizeError, PartialMatrixError, SingularMatrixError
from vecmath.matrix import SquareMatrix
from vecmath.utils import EPSILON

logger = logging.getLogger(__name__)


class SlowMatrix:
    """
    General width x height matrix.

    Args:
        *columns: equal-length sequences, one per column.

    Raises:
        PartialMatrixError: if the columns differ in length.
    """

    __slots__ = ("array", "width", "height")

    def __init__(self, *columns: Sequence[float]):
        height = len(columns[0]) if columns else 0
        for column in columns:
            if len(column) != height:
                raise PartialMatrixError(
                    f"column of length {len(column)} in a matrix of height {height}")
        self.width = len(columns)
        self.height = height
        self.array = np.array(
            [value for column in columns for value in column], dtype=np_float64)

    @classmethod
    def from_unsafe(cls, array: ndarray, width: int, height: int):
        """Wrap a flat column-major float64 array without copying."""
        obj = cls.__new__(cls)
        obj.array = array
        obj.width = width
        obj.height = height
        return obj

    @classmethod
    def zeros(cls, width: int, height: int):
        return cls.from_unsafe(np.zeros(width * height, dtype=np_float64), width, height)

    @classmethod
    def from_numpy(cls, matrix):
        """Build from a conventional (row, column) indexed 2D array."""
        matrix = np.asarray(matrix, dtype=np_float64)
        if matrix.ndim != 2:
            raise MatrixSizeError(f"expected a 2D array, got {matrix.ndim} dimensions")
        height, width = matrix.shape
        return cls.from_unsafe(matrix.T.flatten(), width, height)

    def to_numpy(self) -> ndarray:
        """(row, column) indexed view sharing memory with this matrix."""
        return self.array.reshape(self.width, self.height).T

    def get(self, column: int, row: int) -> float:
        return float(self.array[column * self.height + row])

    def set(self, column: int, row: int, value: float) -> None:
        self.array[column * self.height + row] = value

    def _check(self, other: "SlowMatrix") -> None:
        if other.width != self.width or other.height != self.height:
            raise MatrixSizeError(
                f"matrix sizes differ: {self.width}x{self.height} and "
                f"{other.width}x{other.height}")

    def _target(self, out, width: int, height: int):
        if out is None:
            cls = type(self) if width == height else SlowMatrix
            return cls.zeros(width, height)
        if out.width != width or out.height != height:
            raise MatrixSizeError(
                f"output is {out.width}x{out.height}, result is {width}x{height}")
        return out

    def add(self, other: "SlowMatrix", out=None):
        self._check(other)
        out = self._target(out, self.width, self.height)
        np.add(self.array, other.array, out=out.array)
        return out

    def subtract(self, other: "SlowMatrix", out=None):
        self._check(other)
        out = self._target(out, self.width, self.height)
        np.subtract(self.array, other.array, out=out.array)
        return out

    def multiply_scalar(self, s: float, out=None):
        out = self._target(out, self.width, self.height)
        np.multiply(self.array, s, out=out.array)
        return out

    def multiply_scalar_and_add(self, other: "SlowMatrix", s: float, out=None):
        """Fused ``self + other * s``."""
        self._check(other)
        out = self._target(out, self.width, self.height)
        scaled = other.array * s
        np.add(self.array, scaled, out=out.array)
        return out

    def multiply(self, other: "SlowMatrix", out=None):
        """
        Matrix product ``self @ other``.

        The result is ``other.width`` wide and ``self.height`` tall.

        Raises:
            MatrixSizeError: if ``self.width != other.height``.
        """
        if self.width != other.height:
            raise MatrixSizeError(
                f"cannot multiply {self.width}x{self.height} by "
                f"{other.width}x{other.height}")
        product = self.to_numpy() @ other.to_numpy()
        out = self._target(out, other.width, self.height)
        out.array[:] = product.T.ravel()
        return out

    def transpose(self, out=None):
        # double buffered, so out may be self
        transposed = self.to_numpy().ravel()
        out = self._target(out, self.height, self.width)
        out.array[:] = transposed
        return out

    def frob(self) -> float:
        """Frobenius norm."""
        return float(np.sqrt(np.dot(self.array, self.array)))

    def equals(self, other: "SlowMatrix") -> bool:
        """
        Tolerance equality, component by component.

        Matrices of different dimensions are never equal.
        """
        if other.width != self.width or other.height != self.height:
            return False
        a = self.array
        b = other.array
        bound = EPSILON * np.maximum(1.0, np.maximum(np.abs(a), np.abs(b)))
        return bool(np.all(np.abs(a - b) <= bound))

    def exact_equals(self, other: "SlowMatrix") -> bool:
        return (other.width == self.width and other.height == self.height
                and bool(np.array_equal(self.array, other.array)))

    def copy_from(self, source: "SlowMatrix"):
        self._check(source)
        self.array[:] = source.array
        return self

    def clone(self):
        return type(self).from_unsafe(self.array.copy(), self.width, self.height)

    def columns(self) -> list:
        return [self.array[c * self.height:(c + 1) * self.height].tolist()
                for c in range(self.width)]

    def __len__(self) -> int:
        return self.array.shape[0]

    def __getitem__(self, index):
        return float(self.array[index])

    def __setitem__(self, index, value):
        self.array[index] = value

    def __iter__(self) -> Iterator[float]:
        return iter(self.array.tolist())

    def __array__(self, dtype=None, copy=None):
        # flat column-major, like the fixed-size matrices; use to_numpy for 2D
        if copy:
            return self.array.astype(dtype or np_float64, copy=True)
        if dtype is None:
            return self.array
        return self.array.astype(dtype, copy=False)

    def __eq__(self, other) -> bool:
        if not isinstance(other, SlowMatrix):
            return NotImplemented
        return self.exact_equals(other)

    __hash__ = None

    def __matmul__(self, other):
        if not isinstance(other, SlowMatrix):
            return NotImplemented
        return self.multiply(other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}{tuple(self.columns())}"

    __str__ = __repr__

    def __reduce__(self):
        return (type(self), tuple(self.columns()))

    def __copy__(self):
        return self.clone()

    def __deepcopy__(self, memo):
        return self.clone()


class SlowSquareMatrix(SlowMatrix, SquareMatrix):
    """
    Square SlowMatrix.

    ``determinant`` expands cofactors along the first row, which is
    exponential in the size; ``invert`` runs Gauss-Jordan elimination.

    Raises:
        MatrixSizeError: if the columns do not form a square.
    """

    __slots__ = ()

    def __init__(self, *columns: Sequence[float]):
        super().__init__(*columns)
        if self.width != self.height:
            raise MatrixSizeError(
                f"a square matrix cannot be {self.width}x{self.height}")

    @classmethod
    def identity(cls, size: int) -> "SlowSquareMatrix":
        out = cls.zeros(size, size)
        return out.set_identity()

    @classmethod
    def from_numpy(cls, matrix):
        matrix = np.asarray(matrix, dtype=np_float64)
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
            raise MatrixSizeError(f"expected a square 2D array, got shape {matrix.shape}")
        return super().from_numpy(matrix)

    @property
    def size(self) -> int:
        return self.width

    def set_identity(self) -> "SlowSquareMatrix":
        self.array.fill(0.0)
        self.array[::self.width + 1] = 1.0
        return self

    def submatrix(self, row: int, column: int) -> "SlowSquareMatrix":
        """Copy of this matrix with ``row`` and ``column`` removed."""
        if not (0 <= row < self.height and 0 <= column < self.width):
            raise IndexError(f"({row}, {column}) is outside a {self.width}x{self.height} matrix")
        rows = self.to_numpy()
        reduced = np.delete(np.delete(rows, row, axis=0), column, axis=1)
        size = self.width - 1
        return SlowSquareMatrix.from_unsafe(reduced.T.flatten(), size, size)

    def minor(self, row: int, column: int) -> float:
        return self.submatrix(row, column).determinant()

    def cofactor(self, row: int, column: int) -> float:
        sign = -1.0 if (row + column) % 2 else 1.0
        return sign * self.minor(row, column)

    def determinant(self) -> float:
        """
        Determinant by recursive cofactor expansion along the first row.

        Raises:
            MatrixSizeError: for an empty matrix.
        """
        if self.width < 1:
            raise MatrixSizeError("determinant of an empty matrix")
        if self.width == 1:
            return float(self.array[0])
        total = 0.0
        for column in range(self.width):
            value = self.array[column * self.height]
            if value != 0.0:
                total += value * self.cofactor(0, column)
        return float(total)

    def adjoint(self, out=None) -> "SlowSquareMatrix":
        """Transpose of the cofactor matrix."""
        size = self.width
        if size == 1:
            adjugate = np.ones(1, dtype=np_float64)
        else:
            # adjugate[row][column] = cofactor(column, row)
            adjugate = np.array(
                [self.cofactor(column, row) for row in range(size) for column in range(size)],
                dtype=np_float64).reshape(size, size).T.flatten()
        out = self._target(out, size, size)
        out.array[:] = adjugate
        return out

    def invert(self, out=None) -> "SlowSquareMatrix":
        """
        Inverse by Gauss-Jordan elimination.

        A pivot of exactly zero is replaced by swapping in the first later
        row with a nonzero entry in that column.

        Raises:
            SingularMatrixError: if some column has no nonzero pivot.
        """
        size = self.width
        work = self.to_numpy().copy()
        result = np.eye(size, dtype=np_float64)
        for i in range(size):
            if work[i, i] == 0.0:
                for candidate in range(i + 1, size):
                    if work[candidate, i] != 0.0:
                        logger.debug("swapping rows %d and %d for a nonzero pivot", i, candidate)
                        work[[i, candidate]] = work[[candidate, i]]
                        result[[i, candidate]] = result[[candidate, i]]
                        break
                else:
                    logger.debug("no nonzero pivot in column %d of %dx%d matrix", i, size, size)
                    raise SingularMatrixError(f"matrix is singular: no pivot in column {i}")
            pivot = work[i, i]
            work[i] /= pivot
            result[i] /= pivot
            for row in range(size):
                if row != i:
                    factor = work[row, i]
                    if factor != 0.0:
                        work[row] -= factor * work[i]
                        result[row] -= factor * result[i]
        out = self._target(out, size, size)
        out.array[:] = result.T.ravel()
        return out
