import random

import pytest

from tictacnet.matrix import Matrix


def identity(n):
    return Matrix.from_rows([[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)])


def test_new_matrix_is_zero_filled():
    m = Matrix(2, 3)
    assert m.shape == (2, 3)
    assert list(m) == [0.0] * 6
    assert len(m) == 6


def test_wrong_data_length_raises():
    with pytest.raises(ValueError):
        Matrix(2, 2, [1.0, 2.0, 3.0])


def test_from_rows_is_row_major():
    m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    assert m.shape == (2, 3)
    assert list(m) == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
    assert m[1, 0] == 4.0
    assert m[2] == 3.0


def test_from_rows_ragged_raises():
    with pytest.raises(ValueError):
        Matrix.from_rows([[1, 2], [3]])


def test_column_vector():
    v = Matrix.column([1, 2, 3])
    assert v.shape == (3, 1)
    assert v[2, 0] == 3.0


def test_setitem_and_bounds():
    m = Matrix(2, 2)
    m[0, 1] = 7
    m[3] = 9
    assert list(m) == [0.0, 7.0, 0.0, 9.0]
    with pytest.raises(IndexError):
        m[2, 0]
    with pytest.raises(IndexError):
        m[4] = 1.0


def test_fill():
    m = Matrix(3, 2)
    m.fill(2.5)
    assert list(m) == [2.5] * 6


def test_randomize_within_bounds():
    m = Matrix(10, 10)
    m.randomize(-1, 1, random.Random(3))
    assert all(-1.0 <= v <= 1.0 for v in m)
    assert len(set(m)) > 1


def test_randomize_is_reproducible_with_seed():
    a, b = Matrix(4, 4), Matrix(4, 4)
    a.randomize(-1, 1, random.Random(42))
    b.randomize(-1, 1, random.Random(42))
    assert a == b


def test_dot_with_identity_is_unchanged():
    m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    assert m.dot(identity(3)) == m
    assert identity(2).dot(m) == m
    assert identity(2) @ m == m


def test_dot_shape():
    a = Matrix(2, 3)
    b = Matrix(3, 4)
    assert a.dot(b).shape == (2, 4)


def test_dot_small_example():
    a = Matrix.from_rows([[1, 2], [3, 4]])
    b = Matrix.from_rows([[5, 6], [7, 8]])
    assert list(a.dot(b)) == [19.0, 22.0, 43.0, 50.0]


def test_dot_mismatch_raises():
    with pytest.raises(ValueError):
        Matrix(2, 3).dot(Matrix(2, 3))


def test_add_sub_round_trip():
    rng = random.Random(7)
    a, b = Matrix(3, 3), Matrix(3, 3)
    a.randomize(-5, 5, rng)
    b.randomize(-5, 5, rng)
    back = (a + b) - b
    assert back.shape == a.shape
    assert all(x == pytest.approx(y) for x, y in zip(back, a))


def test_sub_self_is_zero():
    m = Matrix.from_rows([[1.5, -2.0], [3.0, 0.25]])
    assert list(m - m) == [0.0] * 4


def test_add_shape_mismatch_raises():
    with pytest.raises(ValueError):
        Matrix(2, 2) + Matrix(2, 3)
    with pytest.raises(ValueError):
        Matrix(1, 2) - Matrix(2, 1)


def test_transpose():
    m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    t = m.transpose()
    assert t.shape == (3, 2)
    assert t == Matrix.from_rows([[1, 4], [2, 5], [3, 6]])
    assert t.transpose() == m


def test_apply_in_place():
    m = Matrix.from_rows([[1, -2], [3, -4]])
    m.apply(abs)
    assert list(m) == [1.0, 2.0, 3.0, 4.0]


def test_format_uses_fixed_width():
    m = Matrix.from_rows([[1, 0.5], [-2, 0]])
    lines = m.format().splitlines()
    assert len(lines) == 2
    assert lines[0] == " 1.000  0.500 "
    assert lines[1] == "-2.000  0.000 "