"""
peg_io/parser.py

Разбор ввода игрока: буквы позиций, ходы, число рядов.
"""

from typing import List, Optional, Tuple

from core.utils import ALPHA_START, LETTERS, MAX_LETTER_POS, MAX_CLI_ROWS
from utils.error_handling import InputError, OutOfRangeError


def letter_to_pos(letter: str) -> int:
    """
    Буква → номер позиции: 'a' -> 1, 'b' -> 2, ...

    Учитывается только первый символ; допустимы только буквы a..z.
    """
    first = letter[0].lower() if letter else ''
    if first not in LETTERS:
        raise InputError(f"Ожидалась буква позиции a..z, получено {letter!r}")
    return ord(first) - ALPHA_START + 1


def pos_to_letter(pos: int) -> str:
    """Номер позиции → буква. Представимы только позиции 1..26."""
    if not 1 <= pos <= MAX_LETTER_POS:
        raise OutOfRangeError(pos, MAX_LETTER_POS)
    return LETTERS[pos - 1]


def clean_input(text: Optional[str], default=None):
    """Обрезает пробелы; пустой ввод заменяется на default, иначе нижний регистр."""
    text = (text or '').strip()
    if not text:
        return default
    return text.lower()


def letters_in(text: str) -> List[str]:
    """Все буквы строки по порядку, по одной."""
    return [ch for ch in text if ch.isalpha()]


def parse_move(text: Optional[str]) -> Tuple[int, int]:
    """
    Ход из двух букв: "ad", "a d", "a-d" → (1, 4).

    Лишние буквы после второй игнорируются.
    """
    letters = letters_in(text or '')
    if len(letters) < 2:
        raise InputError(f"Ход задаётся двумя буквами, получено {text!r}")
    return letter_to_pos(letters[0]), letter_to_pos(letters[1])


def parse_rows(text: Optional[str], default: int) -> int:
    """Число рядов для CLI: 1..MAX_CLI_ROWS, пустой ввод → default."""
    value = clean_input(text, None)
    if value is None:
        return default
    try:
        rows = int(value)
    except ValueError:
        raise InputError(f"Число рядов должно быть целым, получено {value!r}")
    if not 1 <= rows <= MAX_CLI_ROWS:
        raise InputError(f"Число рядов должно быть от 1 до {MAX_CLI_ROWS}, получено {rows}")
    return rows
