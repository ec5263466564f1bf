"""
solutions/verify.py

Проверка последовательности ходов на треугольной доске.
"""

from typing import Iterable, Tuple

from core.board import Board
from utils.error_handling import PegGameError

Move = Tuple[int, int]


def play_line(board: Board, moves: Iterable[Move]) -> Board:
    """
    Применяет ходы по порядку и возвращает итоговую доску.

    Каждый ход проверяется по состоянию на момент хода.

    Raises:
        InvalidMoveError: на первом недопустимом ходе
        OutOfRangeError: если исходной позиции хода нет на доске
    """
    for p1, p2 in moves:
        board = board.make_move(p1, p2)
    return board


def verify_line(board: Board, moves: Iterable[Move], require_finished: bool = False) -> bool:
    """
    Проверяет корректность последовательности ходов.

    Правила:
    - каждый ход допустим на доске, получившейся после предыдущих;
    - если require_finished=True, после последнего хода ходов не остаётся.
    """
    try:
        final = play_line(board, moves)
    except PegGameError:
        return False

    if require_finished:
        return not final.can_move()

    return True
