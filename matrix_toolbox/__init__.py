# __init__.py
"""Dense row-major matrices with Gaussian-elimination determinant and Gauss-Jordan inverse."""
from .errors import (
    AllocationError,
    InvalidRangeError,
    MatrixError,
    MatrixFormatError,
    NotSquareError,
    ShapeMismatch,
    SingularMatrixError,
)
from .linalg import determinant, inverse
from .matrix import Matrix
from .ops import add, add_sub, multiply, subtract, transpose
from .random_fill import fill_random, random_matrix
from .reduction import EPS
from .textio import dumps, load_txt, loads, save_txt

__version__ = "0.1.0"

__all__ = [
    "AllocationError",
    "EPS",
    "InvalidRangeError",
    "Matrix",
    "MatrixError",
    "MatrixFormatError",
    "NotSquareError",
    "ShapeMismatch",
    "SingularMatrixError",
    "add",
    "add_sub",
    "determinant",
    "dumps",
    "fill_random",
    "inverse",
    "load_txt",
    "loads",
    "multiply",
    "random_matrix",
    "save_txt",
    "subtract",
    "transpose",
]
