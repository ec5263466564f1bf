"""
core/triangular.py

Треугольные числа: 1, 3, 6, 10, 15, ...

Границы рядов доски не хранятся, а выводятся из этой последовательности:
ряд r занимает позиции (T(r-1), T(r)].
"""

from itertools import accumulate, count, takewhile
from typing import Iterator


def triangular() -> Iterator[int]:
    """Бесконечная ленивая последовательность треугольных чисел."""
    return accumulate(count(1))


def is_triangular(n: int) -> bool:
    """
    Является ли число треугольным? 0, 1, 3, 6, 10, ...

    Перебирает члены последовательности, пока они <= n,
    и сравнивает последний с n. Ноль считается нулевым треугольным числом.
    """
    last = 0
    for term in takewhile(lambda t: t <= n, triangular()):
        last = term
    return last == n


def row_tri(row: int) -> int:
    """Треугольное число, закрывающее ряд row; row_tri(0) == 0."""
    if row <= 0:
        return 0
    return row * (row + 1) // 2


def row_num(pos: int) -> int:
    """Номер ряда (с 1) для позиции: p1 -> r1, p2,p3 -> r2."""
    return 1 + sum(1 for _ in takewhile(lambda t: t < pos, triangular()))
