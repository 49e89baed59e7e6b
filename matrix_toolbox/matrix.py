# matrix.py
"""
Dense row-major matrix of float64 values.

A Matrix owns a flat numpy buffer of length rows*cols; element (i, j) lives
at index i*cols + j. The shape is fixed for the lifetime of an instance, so
operations that change it (transpose, multiply) return a new Matrix.
"""
import logging
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from .errors import AllocationError, ShapeMismatch

LOG = logging.getLogger(__name__)


def _is_dim(value) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, np.integer)) and value >= 0


class Matrix:
    """
    rows x cols matrix with exclusively owned, zero-initialised storage.

    Parameters:
      rows, cols : non-negative ints

    Raises:
      AllocationError if the shape is invalid or numpy cannot provide memory.
    """

    __slots__ = ("_rows", "_cols", "_data")

    def __init__(self, rows: int, cols: int):
        for name, value in (("rows", rows), ("cols", cols)):
            if not _is_dim(value):
                raise AllocationError(rows, cols, f"{name} must be a non-negative integer")
        rows, cols = int(rows), int(cols)
        try:
            data = np.zeros(rows * cols, dtype=np.float64)
        except (MemoryError, ValueError) as exc:
            LOG.error("Allocation of %dx%d matrix failed: %s", rows, cols, exc)
            raise AllocationError(rows, cols) from exc
        self._rows = rows
        self._cols = cols
        self._data = data

    # -------------------------
    # Construction helpers
    # -------------------------
    @classmethod
    def create(cls, rows: int, cols: int) -> "Matrix":
        return cls(rows, cols)

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        m = cls(n, n)
        m.data[:: n + 1] = 1.0
        return m

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix":
        """Build a matrix from a list of equal-length rows."""
        rows = [list(r) for r in rows]
        n_rows = len(rows)
        n_cols = len(rows[0]) if n_rows else 0
        for r in rows:
            if len(r) != n_cols:
                raise ShapeMismatch("from_rows", (n_rows, n_cols), (1, len(r)))
        m = cls(n_rows, n_cols)
        if n_rows and n_cols:
            m.data[:] = np.asarray(rows, dtype=np.float64).reshape(-1)
        return m

    @classmethod
    def from_array(cls, array) -> "Matrix":
        arr = np.asarray(array, dtype=np.float64)
        if arr.ndim != 2:
            raise ShapeMismatch("from_array", arr.shape)
        m = cls(arr.shape[0], arr.shape[1])
        m.data[:] = arr.reshape(-1)
        return m

    # -------------------------
    # Shape
    # -------------------------
    @property
    def data(self) -> np.ndarray:
        """Flat row-major storage. Elements are writable, the buffer itself is not replaceable."""
        return self._data

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        return self._rows, self._cols

    @property
    def is_square(self) -> bool:
        return self._rows == self._cols

    # -------------------------
    # Element access
    # -------------------------
    def _index(self, i: int, j: int) -> int:
        if not (0 <= i < self._rows and 0 <= j < self._cols):
            raise IndexError(f"index ({i}, {j}) out of range for {self._rows}x{self._cols} matrix")
        return i * self._cols + j

    def get(self, i: int, j: int) -> float:
        return float(self.data[self._index(i, j)])

    def set(self, i: int, j: int, value: float) -> None:
        self.data[self._index(i, j)] = value

    def __getitem__(self, key) -> float:
        i, j = key
        return self.get(i, j)

    def __setitem__(self, key, value: float) -> None:
        i, j = key
        self.set(i, j, value)

    def clone(self) -> "Matrix":
        """Deep copy with independent storage."""
        m = Matrix(self._rows, self._cols)
        m.data[:] = self.data
        return m

    def to_array(self) -> np.ndarray:
        """2-D copy of the contents (rows x cols)."""
        return self.data.reshape(self._rows, self._cols).copy()

    def tolist(self) -> List[List[float]]:
        return self.to_array().tolist()

    def iter_rows(self) -> Iterable[np.ndarray]:
        for i in range(self._rows):
            yield self.data[i * self._cols:(i + 1) * self._cols]

    # -------------------------
    # Comparison
    # -------------------------
    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self.data, other.data))

    __hash__ = None

    def allclose(self, other: "Matrix", rtol: float = 1e-9, atol: float = 1e-12) -> bool:
        if self.shape != other.shape:
            return False
        return bool(np.allclose(self.data, other.data, rtol=rtol, atol=atol))

    def __repr__(self) -> str:
        return f"Matrix({self._rows}x{self._cols}, {self.tolist()!r})"
