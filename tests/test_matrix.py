import random

import pytest

from tinyneuro.matrix import Matrix


def test_new_matrix_is_zero_filled():
    m = Matrix(2, 3)
    assert m.shape == (2, 3)
    assert m.to_list() == [0.0] * 6


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        Matrix(-1, 2)


def test_from_list_is_single_row():
    m = Matrix.from_list([1, 2, 3])
    assert m.shape == (1, 3)
    assert m.to_list() == [1.0, 2.0, 3.0]


def test_from_rows_ragged_rejected():
    with pytest.raises(ValueError):
        Matrix.from_rows([[1, 2], [3]])


def test_to_list_round_trip():
    rows = [[1.5, -2.0], [3.25, 4.0], [0.0, 7.0]]
    m = Matrix.from_rows(rows)
    assert m.to_list() == [v for row in rows for v in row]


def test_copy_is_independent():
    m = Matrix.from_rows([[1, 2]])
    c = m.copy()
    c.add_scalar(1)
    assert m.to_list() == [1.0, 2.0]
    assert c != m


def test_scale_equals_adding_to_itself():
    m = Matrix.from_rows([[1, -2], [3.5, 4]])
    doubled = m.copy()
    doubled.scale(2)
    m.add(m.copy())
    assert doubled == m


def test_randomize_within_bounds_and_deterministic():
    a = Matrix(4, 5)
    b = Matrix(4, 5)
    a.randomize(-1, 1, random.Random(7))
    b.randomize(-1, 1, random.Random(7))
    assert a == b
    assert all(-1 <= v <= 1 for v in a.to_list())


def test_add_scalar_then_negative_restores():
    m = Matrix.from_rows([[1, 2], [3, 4]])
    original = m.copy()
    m.add_scalar(5)
    assert m != original
    m.add_scalar(-5)
    assert m == original


def test_add_shape_mismatch():
    with pytest.raises(ValueError):
        Matrix(2, 2).add(Matrix(2, 1))


def test_subtract_then_add_round_trip():
    a = Matrix.from_rows([[1, 2], [3, 4]])
    b = Matrix.from_rows([[0.5, 1], [1, 2]])
    diff = a.subtract(b)
    diff.add(b)
    assert diff == a


def test_subtract_self_is_zero():
    a = Matrix.from_rows([[1, 2], [3, 4]])
    assert a.subtract(a) == Matrix(2, 2)


def test_hadamard_with_ones_is_identity():
    a = Matrix.from_rows([[1, 2], [3, 4]])
    ones = Matrix(2, 2)
    ones.add_scalar(1)
    b = a.copy()
    b.hadamard(ones)
    assert b == a


def test_matmul_with_identity():
    a = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    identity = Matrix.from_rows([[1, 0, 0], [0, 1, 0], [0, 0, 1]])
    assert a @ identity == a
    assert a.matmul(identity) == a


def test_matmul_shape():
    assert Matrix(2, 3).matmul(Matrix(3, 4)).shape == (2, 4)


def test_matmul_mismatch_rejected():
    with pytest.raises(ValueError):
        Matrix(2, 3).matmul(Matrix(2, 3))


def test_transpose_of_product():
    a = Matrix.from_rows([[1, 2], [3, 4], [5, 6]])
    b = Matrix.from_rows([[7, 8, 9], [1, 2, 3]])
    assert (a @ b).transpose() == b.transpose() @ a.transpose()


def test_transpose_twice_is_identity():
    a = Matrix.from_rows([[1, 2, 3]])
    t = a.transpose()
    assert t.shape == (3, 1)
    assert t.transpose() == a


def test_map_in_place_and_mapped_copy():
    a = Matrix.from_rows([[1, 2]])
    b = a.mapped(lambda v: v * 10)
    assert a.to_list() == [1.0, 2.0]
    assert b.to_list() == [10.0, 20.0]
    a.map(lambda v: v * 10)
    assert a == b


def test_format_rows():
    assert Matrix.from_rows([[0, 1], [0.5, 2]]).format() == "0 1 \n0.5 2 \n"