"""
peg_io - Ввод/вывод для Peg Thing

Экспортирует:
- Разбор ввода игрока
- Текстовый вывод доски
"""

from .parser import (
    letter_to_pos, pos_to_letter, clean_input, letters_in,
    parse_move, parse_rows
)
from .visualizer import (
    render_pos, row_positions, row_padding, render_row,
    render_board, format_game_over
)

__all__ = [
    'letter_to_pos',
    'pos_to_letter',
    'clean_input',
    'letters_in',
    'parse_move',
    'parse_rows',
    'render_pos',
    'row_positions',
    'row_padding',
    'render_row',
    'render_board',
    'format_game_over'
]
