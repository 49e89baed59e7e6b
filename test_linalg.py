# test_linalg.py
import numpy as np
import pytest

from matrix_toolbox import (
    EPS,
    Matrix,
    NotSquareError,
    SingularMatrixError,
    determinant,
    inverse,
    multiply,
    transpose,
)
from matrix_toolbox.reduction import row_reduce, select_pivot


def test_concrete_2x2():
    A = Matrix.from_rows([[4., 3.], [6., 3.]])
    assert determinant(A) == pytest.approx(-6.0, rel=1e-12)
    inv = inverse(A)
    assert np.allclose(inv.to_array(), [[-0.5, 0.5], [1.0, -2.0 / 3.0]], atol=1e-12)


def test_singular_2x2():
    A = Matrix.from_rows([[1., 2.], [2., 4.]])
    assert determinant(A) == 0.0
    with pytest.raises(SingularMatrixError) as info:
        inverse(A)
    assert info.value.column == 1
    assert isinstance(info.value, np.linalg.LinAlgError)


def test_zero_matrix_singular_at_first_column():
    with pytest.raises(SingularMatrixError) as info:
        inverse(Matrix(3, 3))
    assert info.value.column == 0
    assert determinant(Matrix(3, 3)) == 0.0


@pytest.mark.parametrize("n", [1, 2, 5, 8])
def test_identity(n):
    I = Matrix.identity(n)
    assert determinant(I) == 1.0
    assert inverse(I) == I


def test_empty_matrix_determinant_is_one():
    assert determinant(Matrix(0, 0)) == 1.0
    assert inverse(Matrix(0, 0)) == Matrix(0, 0)


def test_not_square():
    A = Matrix(2, 3)
    with pytest.raises(NotSquareError):
        determinant(A)
    with pytest.raises(NotSquareError):
        inverse(A)


def test_determinant_matches_numpy_and_transpose():
    np.random.seed(0)
    for n in (3, 6, 10):
        A_np = np.random.randn(n, n)
        A = Matrix.from_array(A_np)
        d = determinant(A)
        assert d == pytest.approx(np.linalg.det(A_np), rel=1e-9)
        assert determinant(transpose(A)) == pytest.approx(d, rel=1e-9)


def test_inverse_times_matrix_is_identity():
    np.random.seed(1)
    n = 6
    A_np = np.random.randn(n, n) + np.eye(n) * 0.1
    A = Matrix.from_array(A_np)
    inv = inverse(A)
    assert np.allclose(inv.to_array(), np.linalg.inv(A_np), atol=1e-9)
    assert multiply(A, inv).allclose(Matrix.identity(n), rtol=0, atol=1e-9)


def test_row_swap_flips_sign():
    A = Matrix.from_rows([[0., 1.], [1., 0.]])
    assert determinant(A) == -1.0
    assert inverse(A) == A


def test_inputs_not_mutated():
    rows = [[2., 1., 1.], [4., -6., 0.], [-2., 7., 2.]]
    A = Matrix.from_rows(rows)
    determinant(A)
    inverse(A)
    assert A == Matrix.from_rows(rows)


def test_tiny_pivot_counts_as_singular():
    A = Matrix.from_rows([[EPS / 10, 0.], [0., EPS / 10]])
    assert determinant(A) == 0.0
    with pytest.raises(SingularMatrixError):
        inverse(A)


def test_select_pivot_takes_first_of_ties():
    work = np.array([[1., 0.], [-3., 0.], [3., 0.]])
    assert select_pivot(work, 0, 3) == 1


def test_row_reduce_triangular_leaves_upper_form():
    work = np.array([[2., 1., 1.], [4., -6., 0.], [-2., 7., 2.]])
    out = row_reduce(work, 3, full=False)
    assert not out.singular
    assert np.allclose(np.tril(work, -1), 0.0)
    assert out.pivot_product * out.sign == pytest.approx(np.linalg.det(
        np.array([[2., 1., 1.], [4., -6., 0.], [-2., 7., 2.]])), rel=1e-12)
