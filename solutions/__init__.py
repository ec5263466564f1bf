"""
solutions - Проверка последовательностей ходов.
"""

from .verify import play_line, verify_line

__all__ = [
    'play_line',
    'verify_line',
]
