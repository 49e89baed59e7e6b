# reduction.py
"""
Row reduction with partial pivoting, shared by determinant and inverse.

row_reduce() works in place on a float64 working array whose first n
columns are the square block being reduced. Two modes:

  full=False : forward elimination to upper-triangular form
               (only rows below the pivot, only columns >= pivot column)
  full=True  : Gauss-Jordan; pivot row normalised and the pivot column
               cleared from every other row across the whole array

Both modes pick pivots the same way and stop at the first pivot whose
magnitude is below EPS.
"""
import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

LOG = logging.getLogger(__name__)

EPS = 1e-12  # singularity threshold for pivots


@dataclass
class ReductionOutcome:
    sign: int                      # +1/-1, flipped by every row swap
    pivot_product: float           # product of pivots (before normalisation)
    singular: bool = False
    column: Optional[int] = None   # column where no usable pivot was found
    pivot: Optional[float] = None  # the rejected pivot value


def select_pivot(work: np.ndarray, i: int, n: int) -> int:
    """Row in [i, n) with the largest |work[r, i]|; the first one wins ties."""
    return i + int(np.argmax(np.abs(work[i:n, i])))


def swap_rows(work: np.ndarray, r1: int, r2: int) -> None:
    work[[r1, r2]] = work[[r2, r1]]


def row_reduce(work: np.ndarray, n: int, full: bool = False) -> ReductionOutcome:
    """
    Reduce the leading n x n block of `work` in place.

    Parameters:
      work : ndarray (n, w) with w >= n, float64; mutated
      n    : number of pivot columns / rows
      full : False -> triangular form, True -> reduced (Gauss-Jordan) form

    Returns:
      ReductionOutcome. When singular is True the array is left partially
      reduced and should be discarded by the caller.
    """
    sign = 1
    product = 1.0
    for i in range(n):
        piv = select_pivot(work, i, n)
        if abs(work[piv, i]) < EPS:
            LOG.debug("pivot %.3g in column %d below EPS, stopping", work[piv, i], i)
            return ReductionOutcome(sign, 0.0, singular=True, column=i, pivot=float(work[piv, i]))

        if piv != i:
            swap_rows(work, i, piv)
            sign = -sign

        pivot = work[i, i]
        product *= pivot

        if full:
            work[i] /= pivot
            for r in range(n):
                if r == i:
                    continue
                factor = work[r, i]
                if abs(factor) < EPS:
                    continue
                work[r] -= factor * work[i]
        else:
            for r in range(i + 1, n):
                factor = work[r, i] / pivot
                work[r, i:] -= factor * work[i, i:]

    return ReductionOutcome(sign, float(product))
