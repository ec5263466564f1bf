"""
utils/error_handling.py

Исключения игры и общие обработчики ошибок.
"""

from typing import Optional, Callable, Any
from functools import wraps

from .logging import get_logger


class PegGameError(Exception):
    """Базовое исключение игры."""
    pass


class OutOfRangeError(PegGameError, IndexError):
    """Позиции нет на доске."""

    def __init__(self, pos: Any, max_pos: Optional[int] = None):
        self.pos = pos
        self.max_pos = max_pos
        if max_pos is None:
            message = f"Позиция {pos!r} вне доски"
        else:
            message = f"Позиция {pos!r} вне доски (допустимо 1..{max_pos})"
        super().__init__(message)


class InvalidMoveError(PegGameError):
    """Недопустимый прыжок при текущей расстановке."""

    def __init__(self, p1: Any, p2: Any):
        self.p1 = p1
        self.p2 = p2
        super().__init__(f"Недопустимый ход {p1!r} -> {p2!r}")


class InvalidBoardError(PegGameError):
    """Доску нельзя построить или на ней нельзя играть."""
    pass


class InputError(PegGameError, ValueError):
    """Ввод игрока не удалось разобрать."""
    pass


def handle_errors(on_error: Callable[[PegGameError], Any], log_error: bool = True):
    """
    Декоратор: перехватывает PegGameError и отдаёт результат on_error.

    Остальные исключения пробрасываются дальше без изменений.

    Args:
        on_error: построитель результата по исключению
        log_error: логировать ли ошибку
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except PegGameError as e:
                if log_error:
                    get_logger().warning(f"{func.__name__}: {e}")
                return on_error(e)
        return wrapper
    return decorator


def validate_board(board) -> bool:
    """
    Проверяет, что на доске можно играть.

    Args:
        board: доска для валидации

    Returns:
        True если доска пригодна для игры

    Raises:
        InvalidBoardError: если доска вырождена
    """
    if board is None:
        raise InvalidBoardError("Доска не может быть None")

    if board.rows <= 0 or board.max_pos == 0:
        raise InvalidBoardError(
            f"Доска из {board.rows} рядов вырождена: на ней нет позиций"
        )

    return True
