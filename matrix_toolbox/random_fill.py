# random_fill.py
"""Uniform random matrices backed by numpy.random.Generator."""
import math
from typing import Union

import numpy as np

from .errors import InvalidRangeError
from .matrix import Matrix

RngLike = Union[None, int, np.random.Generator]


def _as_generator(rng: RngLike) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def fill_random(m: Matrix, low: float, high: float, rng: RngLike = None) -> Matrix:
    """
    Overwrite every entry of m with a uniform value in [low, high).
    Bounds given in reverse order are swapped. Returns m.

    Raises InvalidRangeError when a bound is not finite or high - low
    overflows (e.g. -1e308 .. 1e308).
    """
    if high < low:
        low, high = high, low
    if not (math.isfinite(low) and math.isfinite(high) and math.isfinite(high - low)):
        raise InvalidRangeError(low, high)
    gen = _as_generator(rng)
    m.data[:] = gen.uniform(low, high, size=m.data.size)
    return m


def random_matrix(rows: int, cols: int, low: float = 0.0, high: float = 1.0,
                  rng: RngLike = None) -> Matrix:
    return fill_random(Matrix(rows, cols), low, high, rng)
