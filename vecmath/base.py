# base.py

import numpy as np
from numpy import ascontiguousarray as np_ascontiguousarray
from numpy import float64 as np_float64
from numpy import ndarray
from typing import Iterable, Tuple, Type, TypeVar, Union

from vecmath.errors import SizeMismatchError

T = TypeVar("T", bound="FixedArray")


class FixedArray:
    """
    Flat, contiguous float64 storage shared by every fixed-size value type.

    Subclasses set ``size`` and ``_default``. The wrapped array is exposed as
    ``array`` and is what the compiled kernels read and write, so anything
    holding a reference to it observes in-place updates.
    """

    __slots__ = ("array",)

    size: int = 0
    _default: ndarray = np.zeros(0, dtype=np_float64)

    def __init__(self, *values: float):
        if values:
            if len(values) != self.size:
                raise SizeMismatchError(
                    f"{type(self).__name__} takes {self.size} values, got {len(values)}")
            self.array = np.array(values, dtype=np_float64)
        else:
            self.array = self._default.copy()

    @classmethod
    def from_unsafe(cls: Type[T], array: ndarray) -> T:
        """Wrap an existing flat float64 array without copying or checking it."""
        instance = object.__new__(cls)
        instance.array = array
        return instance

    @classmethod
    def from_iterable(cls: Type[T], values: Iterable[float]) -> T:
        """Build an instance from any flat sequence of ``size`` numbers (copied)."""
        return cls.from_unsafe(as_array(values, cls.size).copy())

    def clone(self: T) -> T:
        return type(self).from_unsafe(self.array.copy())

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, key):
        return self.array[key]

    def __setitem__(self, key, value) -> None:
        self.array[key] = value

    def __iter__(self):
        return iter(self.array.tolist())

    def __array__(self, dtype=None, copy=None) -> ndarray:
        if copy:
            return self.array.astype(dtype or np_float64, copy=True)
        if dtype is None:
            return self.array
        return self.array.astype(dtype, copy=False)

    def __eq__(self, other) -> bool:
        if not isinstance(other, FixedArray) or type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self.array, other.array))

    __hash__ = None

    def __repr__(self) -> str:
        values = ", ".join(repr(v) for v in self.array.tolist())
        return f"{type(self).__name__}({values})"

    def __str__(self) -> str:
        return self.__repr__()

    def __reduce__(self):
        return (type(self), tuple(self.array.tolist()))

    def __copy__(self):
        return self.clone()

    def __deepcopy__(self, memo):
        return self.clone()


def as_array(value: Union[FixedArray, ndarray, Iterable[float]], size: Union[None, int] = None) -> ndarray:
    """
    Return a flat float64 view of ``value`` suitable for a compiled kernel.

    Value instances and contiguous float64 arrays are passed through without a
    copy; anything else is converted.

    Args:
        value: a value instance, numpy array or flat sequence of numbers.
        size: required length, or None to accept any length.

    Raises:
        SizeMismatchError: if ``value`` is not flat or has the wrong length.
    """
    if isinstance(value, FixedArray):
        array = value.array
    else:
        array = np_ascontiguousarray(value, dtype=np_float64)
        if array.ndim != 1:
            raise SizeMismatchError(
                f"Expected a flat sequence, got shape {array.shape}")
    if size is not None and array.shape[0] != size:
        raise SizeMismatchError(
            f"Expected {size} components, got {array.shape[0]}")
    return array


def resolve_out(out, cls: Union[None, Type[FixedArray]], size: Union[None, int] = None) -> Tuple[object, ndarray]:
    """
    Turn an ``out`` argument into the object to return and the buffer to fill.

    Args:
        out: None, a value instance, or a flat contiguous float64 array.
        cls: type to allocate when ``out`` is None. When None a bare numpy
            array of ``size`` is allocated instead.
        size: required length; defaults to ``cls.size``.

    Returns:
        (out, buffer) where buffer is the ndarray the kernel writes to.
    """
    if size is None:
        size = cls.size
    if out is None:
        if cls is None:
            buffer = np.zeros(size, dtype=np_float64)
            return buffer, buffer
        out = cls()
        return out, out.array
    if isinstance(out, FixedArray):
        buffer = out.array
    elif isinstance(out, ndarray):
        if out.dtype != np_float64 or out.ndim != 1 or not out.flags.c_contiguous:
            raise TypeError(
                f"out must be a flat contiguous float64 array, got {out.dtype} with shape {out.shape}")
        buffer = out
    else:
        raise TypeError(
            f"out must be a vecmath value or a numpy array, got {type(out).__name__}")
    if buffer.shape[0] != size:
        raise SizeMismatchError(
            f"out must hold {size} components, got {buffer.shape[0]}")
    return out, buffer


def out_like(out, template, size: int) -> Tuple[object, ndarray]:
    """resolve_out, allocating the template's type when it is a value instance."""
    cls = type(template) if isinstance(template, FixedArray) else None
    return resolve_out(out, cls, size)
