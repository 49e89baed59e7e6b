# linalg.py
"""
Determinant (Gaussian elimination) and inverse (Gauss-Jordan) of square
matrices. Neither routine mutates its input; all elimination happens on a
private working array that is dropped on return, including on failure.
"""
import logging

import numpy as np

from .errors import NotSquareError, SingularMatrixError
from .matrix import Matrix
from .reduction import row_reduce

LOG = logging.getLogger(__name__)


def determinant(a: Matrix) -> float:
    """
    Determinant of a square matrix via reduction to upper-triangular form.

    A numerically singular matrix (some pivot below EPS) gives exactly 0.0.
    The empty 0x0 matrix gives 1.0.

    Raises NotSquareError when a.rows != a.cols.
    """
    if not a.is_square:
        raise NotSquareError("determinant", a.shape)
    n = a.rows
    work = a.to_array()
    outcome = row_reduce(work, n, full=False)
    if outcome.singular:
        return 0.0
    return outcome.pivot_product * outcome.sign


def augment_with_identity(a: Matrix) -> np.ndarray:
    """[A | I] as an n x 2n float64 array."""
    n = a.rows
    aug = np.zeros((n, 2 * n), dtype=np.float64)
    aug[:, :n] = a.data.reshape(n, n)
    aug[:, n:] = np.eye(n)
    return aug


def inverse(a: Matrix) -> Matrix:
    """
    Inverse of a square matrix by Gauss-Jordan elimination on [A | I].

    Raises:
      NotSquareError      when a.rows != a.cols
      SingularMatrixError when a pivot magnitude falls below EPS
    """
    if not a.is_square:
        raise NotSquareError("inverse", a.shape)
    n = a.rows
    aug = augment_with_identity(a)
    outcome = row_reduce(aug, n, full=True)
    if outcome.singular:
        LOG.info("inverse of %dx%d matrix failed at column %d", n, n, outcome.column)
        raise SingularMatrixError(outcome.column, outcome.pivot)
    return Matrix.from_array(aug[:, n:])
