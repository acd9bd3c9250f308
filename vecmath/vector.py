# vector.py

from abc import ABC, abstractmethod


from vecmath import elementwise
from vecmath.base import FixedArray


class Vector(FixedArray, ABC):
    """
    Behaviour shared by the fixed-size vectors.

    Every method that produces a vector takes an optional ``out``; when it is
    omitted a new vector of the same type is returned, otherwise ``out`` is
    written and returned. ``out`` may be ``self`` or any other operand.
    """

    __slots__ = ()

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
    def magnitude(self) -> float:
        return elementwise.magnitude(self)

    @property
    def squared_magnitude(self) -> float:
        return elementwise.squared_magnitude(self)

    @classmethod
    @abstractmethod
    def random(cls, magnitude: float = 1.0):
        """A vector pointing in a uniformly random direction with the given length."""

    @abstractmethod
    def transform_matrix4(self, matrix, out=None):
        """Apply a 4x4 column-major matrix to this vector."""

    def add(self, other, out=None):
        return elementwise.add(self, other, out)

    def subtract(self, other, out=None):
        return elementwise.subtract(self, other, out)

    def multiply(self, other, out=None):
        return elementwise.multiply(self, other, out)

    def divide(self, other, out=None):
        return elementwise.divide(self, other, out)

    def min(self, other, out=None):
        return elementwise.min(self, other, out)

    def max(self, other, out=None):
        return elementwise.max(self, other, out)

    def pow(self, exponent: float, out=None):
        return elementwise.pow(self, exponent, out)

    def scale(self, scalar: float, out=None):
        return elementwise.scale(self, scalar, out)

    def scale_and_add(self, other, scalar: float, out=None):
        return elementwise.scale_and_add(self, other, scalar, out)

    def lerp(self, other, t: float, out=None):
        return elementwise.lerp(self, other, t, out)

    def negate(self, out=None):
        return elementwise.negate(self, out)

    def inverse(self, out=None):
        return elementwise.inverse(self, out)

    def abs(self, out=None):
        return elementwise.abs(self, out)

    def ceil(self, out=None):
        return elementwise.ceil(self, out)

    def floor(self, out=None):
        return elementwise.floor(self, out)

    def round(self, out=None):
        return elementwise.round(self, out)

    def normalize(self, out=None):
        return elementwise.normalize(self, out)

    def dot(self, other) -> float:
        return elementwise.dot(self, other)

    def distance(self, other) -> float:
        return elementwise.distance(self, other)

    def squared_distance(self, other) -> float:
        return elementwise.squared_distance(self, other)

    def equals(self, other) -> bool:
        return elementwise.equals(self, other)

    def exact_equals(self, other) -> bool:
        return elementwise.exact_equals(self, other)

    def zero(self):
        """Reset every component to zero in place."""
        return elementwise.zero(self)

    def copy_from(self, source):
        """Overwrite this vector with the components of ``source``."""
        return elementwise.copy(source, self)

    def __neg__(self):
        return self.negate()

    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.subtract(other)
