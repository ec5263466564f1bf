"""
core/utils.py

Общие константы Peg Thing.
"""

# Символы для отображения
PEG = '0'       # Колышек
HOLE = '-'      # Пустая лунка

# Буквенная нотация: 'a' -> 1, 'b' -> 2, ...
ALPHA_START = ord('a')
LETTERS = [chr(code) for code in range(ALPHA_START, ord('z') + 1)]
MAX_LETTER_POS = len(LETTERS)

# Ширина клетки при выводе: буква, отметка, пробел
POS_CHARS = 3

DEFAULT_ROWS = 5
DEFAULT_EMPTY = 'e'

# T(6) = 21 <= 26 букв, T(7) = 28 уже не помещается
MAX_CLI_ROWS = 6
