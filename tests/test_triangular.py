"""
tests/test_triangular.py

Тесты треугольных чисел и номеров рядов.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from itertools import islice

from core.triangular import triangular, is_triangular, row_tri, row_num


def test_triangular_sequence_prefix():
    """Первые члены: частичные суммы 1, 2, 3, ..."""
    assert list(islice(triangular(), 8)) == [1, 3, 6, 10, 15, 21, 28, 36]


def test_triangular_is_restartable():
    """Каждый вызов начинает последовательность заново."""
    first = triangular()
    next(first)
    next(first)
    assert next(triangular()) == 1
    assert next(first) == 6


def test_is_triangular_matches_closed_form():
    """Треугольные ровно {0, 1, 3, 6, 10, ...} на отрезке 0..500."""
    expected = {k * (k + 1) // 2 for k in range(0, 40)}
    for n in range(0, 501):
        assert is_triangular(n) == (n in expected), n


def test_is_triangular_zero():
    assert is_triangular(0)


def test_row_tri_closed_form_matches_sequence():
    """Формула r(r+1)/2 совпадает с итеративным определением."""
    terms = list(islice(triangular(), 60))
    assert [row_tri(r) for r in range(1, 61)] == terms


def test_row_tri_zero():
    assert row_tri(0) == 0


def test_row_num_first_rows():
    """p1 -> r1; p2,p3 -> r2; p4..p6 -> r3."""
    assert [row_num(p) for p in range(1, 11)] == [1, 2, 2, 3, 3, 3, 4, 4, 4, 4]


def test_row_num_monotonic():
    rows = [row_num(p) for p in range(1, 300)]
    assert all(a <= b for a, b in zip(rows, rows[1:]))


def test_row_num_of_row_end():
    """Треугольное число закрывает свой ряд."""
    for r in range(1, 40):
        assert row_num(row_tri(r)) == r
        assert row_num(row_tri(r) + 1) == r + 1
