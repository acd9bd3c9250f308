"""
Exception hierarchy for vecmath.

Every error raised by the library derives from VecmathError. Each concrete
error also derives from the builtin exception a caller would reach for
without knowing about this module (ZeroDivisionError for singular
inversion, ValueError for shape problems).

The fixed-size kernels raise these from compiled code, so messages are
constant strings and no error overrides __init__.
"""


class VecmathError(Exception):
    """Base exception for all vecmath errors."""
    pass


class SingularMatrixError(VecmathError, ZeroDivisionError):
    """
    Matrix has a determinant of exactly zero.

    Raised by invert (and normal_from_matrix4) before anything is written
    to the output. Near-singular matrices are still inverted.
    """
    pass


class SizeMismatchError(VecmathError, ValueError):
    """
    Operand sizes disagree.

    Raised when two operands of a binary operation have different lengths,
    or when a fixed-size function receives a sequence of the wrong length.
    """
    pass


class VectorSizeError(SizeMismatchError):
    """Vectors of different lengths were combined."""
    pass


class MatrixSizeError(SizeMismatchError):
    """
    Matrices of incompatible dimensions were combined.

    For element-wise operations the widths and heights must match; for a
    product the left operand's width must equal the right operand's height.
    """
    pass


class PartialMatrixError(VecmathError, ValueError):
    """A matrix was built from columns of differing lengths."""
    pass
