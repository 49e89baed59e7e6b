# test_ops.py
import numpy as np
import pytest

from matrix_toolbox import Matrix, ShapeMismatch, add, add_sub, multiply, subtract, transpose


def test_add_and_subtract():
    a = Matrix.from_rows([[1., 2.], [3., 4.]])
    b = Matrix.from_rows([[10., 20.], [30., 40.]])
    assert add_sub(a, b) == Matrix.from_rows([[11., 22.], [33., 44.]])
    assert add_sub(b, a, subtract=True) == Matrix.from_rows([[9., 18.], [27., 36.]])
    assert add(a, b) == add_sub(a, b)
    assert subtract(a, b) == add_sub(a, b, True)
    # operands untouched
    assert a == Matrix.from_rows([[1., 2.], [3., 4.]])


def test_add_sub_shape_mismatch():
    with pytest.raises(ShapeMismatch):
        add_sub(Matrix(2, 3), Matrix(3, 2))
    with pytest.raises(ShapeMismatch):
        add_sub(Matrix(2, 2), Matrix(2, 3), subtract=True)


def test_multiply_matches_numpy():
    rng = np.random.default_rng(1)
    A = rng.standard_normal((4, 3))
    B = rng.standard_normal((3, 5))
    C = multiply(Matrix.from_array(A), Matrix.from_array(B))
    assert C.shape == (4, 5)
    assert np.allclose(C.to_array(), A @ B, atol=1e-12)


def test_multiply_shape_mismatch():
    with pytest.raises(ShapeMismatch):
        multiply(Matrix(2, 3), Matrix(2, 3))


def test_multiply_empty_inner_dimension_is_zero():
    C = multiply(Matrix(2, 0), Matrix(0, 3))
    assert C == Matrix(2, 3)


def test_transpose():
    a = Matrix.from_rows([[1., 2., 3.], [4., 5., 6.]])
    t = transpose(a)
    assert t.shape == (3, 2)
    assert t == Matrix.from_rows([[1., 4.], [2., 5.], [3., 6.]])
    assert transpose(t) == a
