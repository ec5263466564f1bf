"""
core - Ядро Peg Thing

Треугольные числа, построение доски и правила ходов.
"""

from .board import Board, Cell, Position
from .builder import new_board, board_from_pegged, build_connections
from .triangular import triangular, is_triangular, row_tri, row_num
from .utils import (
    PEG, HOLE, LETTERS, MAX_LETTER_POS,
    DEFAULT_ROWS, DEFAULT_EMPTY, MAX_CLI_ROWS
)

__all__ = [
    'Board', 'Cell', 'Position',
    'new_board', 'board_from_pegged', 'build_connections',
    'triangular', 'is_triangular', 'row_tri', 'row_num',
    'PEG', 'HOLE', 'LETTERS', 'MAX_LETTER_POS',
    'DEFAULT_ROWS', 'DEFAULT_EMPTY', 'MAX_CLI_ROWS'
]
