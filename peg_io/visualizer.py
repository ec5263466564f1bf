"""
peg_io/visualizer.py

Текстовый вывод треугольной доски.

    rows=5, пустая лунка d:

          a0
         b0 c0
       d- e0 f0
      g0 h0 i0 j0
    k0 l0 m0 n0 o0
"""

from typing import List

from core.board import Board
from core.triangular import row_tri
from core.utils import PEG, HOLE, POS_CHARS
from .parser import pos_to_letter


def render_pos(board: Board, pos: int) -> str:
    """Буква позиции и отметка: '0' колышек, '-' пусто."""
    return pos_to_letter(pos) + (PEG if board.is_pegged(pos) else HOLE)


def row_positions(row: int) -> range:
    """Все позиции ряда row."""
    return range(row_tri(row - 1) + 1, row_tri(row) + 1)


def row_padding(row: int, rows: int) -> str:
    """Отступ для центрирования ряда (половина сдвига округляется вверх)."""
    pad_length = -(-(rows - row) * POS_CHARS // 2)
    return " " * max(pad_length, 0)


def render_row(board: Board, row: int) -> str:
    return row_padding(row, board.rows) + " ".join(
        render_pos(board, pos) for pos in row_positions(row)
    )


def render_board(board: Board) -> str:
    """Вся доска, по строке на ряд."""
    lines: List[str] = [render_row(board, row) for row in range(1, board.rows + 1)]
    return "\n".join(lines)


def format_game_over(board: Board) -> str:
    """Итог партии: счёт и финальная доска."""
    return f"Game over! You had {board.peg_count()} pegs left:\n{render_board(board)}"
