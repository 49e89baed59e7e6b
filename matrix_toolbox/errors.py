# errors.py
"""
Exception types raised by matrix_toolbox.

Every failure is a MatrixError subclass, and each one also derives from the
builtin/numpy exception a caller would naturally expect (ValueError for bad
shapes, LinAlgError for singular matrices, MemoryError for allocation).
"""
from typing import Optional, Tuple

import numpy as np


def _fmt_shape(shape) -> str:
    return "x".join(str(d) for d in shape) if len(shape) else "()"


class MatrixError(Exception):
    """Base class for all matrix_toolbox failures."""


class AllocationError(MatrixError, MemoryError):
    """Storage for a matrix could not be obtained."""

    def __init__(self, rows, cols, reason: str = "cannot allocate storage"):
        self.rows = rows
        self.cols = cols
        super().__init__(f"{reason} for a {rows}x{cols} matrix")


class ShapeMismatch(MatrixError, ValueError):
    """
    Operand dimensions are incompatible for the requested operation.

    With a single shape (right=None) the operand itself has the wrong number
    of dimensions, e.g. a 1-D or 3-D array where a matrix is expected.
    """

    def __init__(self, operation: str, left: Tuple[int, ...], right: Optional[Tuple[int, ...]] = None):
        self.operation = operation
        self.left = left
        self.right = right
        if right is None:
            msg = f"{operation}: expected a 2-D matrix, got shape {_fmt_shape(left)}"
        else:
            msg = f"{operation}: incompatible shapes {_fmt_shape(left)} and {_fmt_shape(right)}"
        super().__init__(msg)


class NotSquareError(MatrixError, ValueError):
    """Determinant or inverse requested on a non-square matrix."""

    def __init__(self, operation: str, shape: Tuple[int, int]):
        self.operation = operation
        self.shape = shape
        super().__init__(f"{operation}: matrix is not square ({shape[0]}x{shape[1]})")


class SingularMatrixError(MatrixError, np.linalg.LinAlgError):
    """A pivot fell below the singularity threshold during elimination."""

    def __init__(self, column: int, pivot: Optional[float] = None):
        self.column = column
        self.pivot = pivot
        msg = f"matrix is singular (no usable pivot in column {column})"
        if pivot is not None:
            msg += f", |pivot| = {abs(pivot):.3g}"
        super().__init__(msg)


class MatrixFormatError(MatrixError, ValueError):
    """Text input could not be parsed into a matrix."""


class InvalidRangeError(MatrixError, ValueError):
    """Random bounds are not finite or their span overflows a double."""

    def __init__(self, low, high):
        self.low = low
        self.high = high
        super().__init__(f"random range [{low}, {high}] is not a finite interval")
