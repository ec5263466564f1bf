#!/usr/bin/env python3
"""
main.py

Точка входа Peg Thing: треугольный пег-солитер в терминале.

Использование:
    python main.py                    # спросит число рядов и пустую лунку
    python main.py --rows 5 --empty e # сразу к ходам
    python main.py --verbose          # отладочный лог в stderr
"""

import sys
import argparse
import logging
from typing import Callable, Optional

from core.board import Board
from core.builder import new_board
from core.utils import DEFAULT_ROWS, DEFAULT_EMPTY, MAX_CLI_ROWS
from peg_io import (
    clean_input, letter_to_pos, parse_move, parse_rows,
    render_board, format_game_over
)
from utils.error_handling import PegGameError, InputError
from utils.logging import get_logger, setup_file_logging

InputFn = Callable[[], str]

logger = get_logger()


def get_input(input_fn: InputFn, default=None):
    """Ждёт строку от игрока и чистит её (см. clean_input)."""
    return clean_input(input_fn(), default)


def prompt_rows(input_fn: InputFn) -> Board:
    """Спрашивает число рядов, пока не получит допустимое."""
    while True:
        print(f"How many rows? [{DEFAULT_ROWS}]")
        try:
            rows = parse_rows(get_input(input_fn), DEFAULT_ROWS)
        except InputError as e:
            logger.debug(f"Некорректное число рядов: {e}")
            print(f"Please enter a number from 1 to {MAX_CLI_ROWS}.")
            continue
        return new_board(rows)


def prompt_empty_peg(board: Board, input_fn: InputFn) -> Board:
    """Показывает полную доску и убирает выбранный игроком колышек."""
    while True:
        print("Here's your board:")
        print(render_board(board))
        print(f"Remove which peg? [{DEFAULT_EMPTY}]")
        try:
            return board.remove_peg(letter_to_pos(get_input(input_fn, DEFAULT_EMPTY)))
        except PegGameError as e:
            logger.debug(f"Некорректная лунка: {e}")
            print("\n!!! There is no such peg on this board.\n")


def remove_first_peg(board: Board, input_fn: InputFn, empty: Optional[str] = None) -> Board:
    """Пустая лунка из --empty, а если её нет на этой доске, то вопрос игроку."""
    if empty:
        try:
            return board.remove_peg(letter_to_pos(empty))
        except PegGameError as e:
            logger.warning(f"--empty {empty!r} не подходит к доске: {e}")
    return prompt_empty_peg(board, input_fn)


def prompt_move(board: Board, input_fn: InputFn) -> Board:
    """
    Один шаг партии: спрашивает ход и применяет его.

    При недопустимом ходе возвращает ту же доску.
    """
    print("\nHere's your board:")
    print(render_board(board))
    print("Move from where to where? Enter two letters:")
    try:
        p1, p2 = parse_move(get_input(input_fn))
        new = board.make_move(p1, p2)
    except PegGameError as e:
        logger.debug(f"Отклонён ход: {e}")
        print("\n!!! That was an invalid move. :(\n")
        return board
    logger.debug(f"Ход {p1} -> {p2}, осталось {new.peg_count()}")
    return new


def play_round(board: Board, input_fn: InputFn) -> Board:
    """Ходы до тех пор, пока на доске есть хоть один допустимый прыжок."""
    while board.can_move():
        board = prompt_move(board, input_fn)
    return board


def game_over(board: Board, input_fn: InputFn) -> bool:
    """Объявляет итог и спрашивает, играть ли ещё."""
    logger.info(f"Партия окончена: {board.peg_count()} колышков, {board.rows} рядов")
    print(format_game_over(board))
    print("Play again? [y/n]")
    return get_input(input_fn, "y") == "y"


def run(input_fn: InputFn = input, rows: Optional[int] = None,
        empty: Optional[str] = None) -> int:
    """
    Цикл партий: выбор доски → пустая лунка → ходы → итог → повтор.

    rows и empty, если заданы, заменяют соответствующие вопросы.
    """
    try:
        while True:
            board = new_board(rows) if rows else prompt_rows(input_fn)
            board = remove_first_peg(board, input_fn, empty)
            board = play_round(board, input_fn)
            if not game_over(board, input_fn):
                break
    except EOFError:
        logger.debug("Ввод закончился")
    print("Bye!")
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description='Peg Thing: triangular peg solitaire',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  python main.py                     # всё спросит
  python main.py --rows 4            # доска из 4 рядов
  python main.py --rows 5 --empty e  # пустая лунка e
        """
    )
    parser.add_argument(
        '--rows', '-r', type=int, default=None,
        help=f'Число рядов (1..{MAX_CLI_ROWS})'
    )
    parser.add_argument(
        '--empty', '-e', default=None,
        help='Буква лунки, из которой убирается первый колышек'
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Отладочный лог в stderr'
    )
    parser.add_argument(
        '--log-file', default=None,
        help='Дополнительно писать лог в файл'
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logger.set_level(logging.DEBUG)
    if args.log_file:
        setup_file_logging(args.log_file, logging.DEBUG if args.verbose else logging.INFO)

    if args.rows is not None and not 1 <= args.rows <= MAX_CLI_ROWS:
        parser.error(f"--rows должно быть от 1 до {MAX_CLI_ROWS}")
    if args.empty is not None:
        try:
            pos = letter_to_pos(args.empty)
            if args.rows is not None:
                new_board(args.rows).remove_peg(pos)
        except PegGameError as e:
            parser.error(f"--empty: {e}")

    return run(input, rows=args.rows, empty=args.empty)


if __name__ == "__main__":
    sys.exit(main())
