# test_random_fill.py
import numpy as np
import pytest

from matrix_toolbox import InvalidRangeError, Matrix, MatrixError, fill_random, random_matrix


def test_values_in_range():
    m = random_matrix(20, 30, -2.0, 5.0, rng=0)
    assert m.shape == (20, 30)
    assert np.all(m.data >= -2.0) and np.all(m.data <= 5.0)


def test_reversed_bounds_are_swapped():
    m = random_matrix(10, 10, 5.0, -2.0, rng=1)
    assert np.all(m.data >= -2.0) and np.all(m.data <= 5.0)
    assert m.data.min() < 0.0 < m.data.max()


def test_seeded_generator_is_reproducible():
    a = random_matrix(3, 3, rng=np.random.default_rng(7))
    b = fill_random(Matrix(3, 3), 0.0, 1.0, rng=np.random.default_rng(7))
    assert a == b


@pytest.mark.parametrize("low, high", [
    (-1e308, 1e308),
    (0.0, float("inf")),
    (float("-inf"), 1.0),
    (0.0, float("nan")),
])
def test_non_finite_range_rejected(low, high):
    with pytest.raises(InvalidRangeError):
        random_matrix(2, 2, low, high, rng=0)
    m = Matrix(2, 2)
    with pytest.raises(InvalidRangeError):
        fill_random(m, high, low, rng=0)
    assert m == Matrix(2, 2)


def test_upper_bound_is_exclusive():
    m = random_matrix(50, 50, 1.0, 2.0, rng=4)
    assert np.all(m.data < 2.0)


def test_invalid_range_is_a_matrix_error():
    assert issubclass(InvalidRangeError, MatrixError)
    assert issubclass(InvalidRangeError, ValueError)
