# ops.py
"""
Elementwise and structural matrix operations.

All functions are pure: operands are read, never written, and the result is
a freshly allocated Matrix.
"""
import logging

from .errors import ShapeMismatch
from .matrix import Matrix

LOG = logging.getLogger(__name__)


def add_sub(a: Matrix, b: Matrix, subtract: bool = False) -> Matrix:
    """
    Return a + b, or a - b when subtract is True.

    Raises ShapeMismatch unless a and b have identical shapes.
    """
    op = "subtract" if subtract else "add"
    if a.shape != b.shape:
        raise ShapeMismatch(op, a.shape, b.shape)
    c = Matrix(a.rows, a.cols)
    if subtract:
        c.data[:] = a.data - b.data
    else:
        c.data[:] = a.data + b.data
    LOG.debug("%s %dx%d", op, a.rows, a.cols)
    return c


def add(a: Matrix, b: Matrix) -> Matrix:
    return add_sub(a, b, subtract=False)


def subtract(a: Matrix, b: Matrix) -> Matrix:
    return add_sub(a, b, subtract=True)


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """
    Matrix product a @ b (a.rows x b.cols).

    Accumulates in i-k-j order: for each result row i and shared index k,
    a[i, k] * (row k of b) is added to result row i.
    """
    if a.cols != b.rows:
        raise ShapeMismatch("multiply", a.shape, b.shape)
    c = Matrix(a.rows, b.cols)
    if b.cols == 0:
        return c
    A = a.data.reshape(a.rows, a.cols)
    B = b.data.reshape(b.rows, b.cols)
    C = c.data.reshape(c.rows, c.cols)  # view, writes land in c.data
    for i in range(a.rows):
        out_row = C[i]
        for k in range(a.cols):
            out_row += A[i, k] * B[k]
    LOG.debug("multiply %dx%d by %dx%d", a.rows, a.cols, b.rows, b.cols)
    return c


def transpose(a: Matrix) -> Matrix:
    t = Matrix(a.cols, a.rows)
    if a.rows and a.cols:
        t.data[:] = a.data.reshape(a.rows, a.cols).T.reshape(-1)
    return t
