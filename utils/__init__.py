"""
utils - Логирование и обработка ошибок.
"""

from .logging import get_logger, setup_file_logging
from .error_handling import (
    PegGameError, OutOfRangeError, InvalidMoveError,
    InvalidBoardError, InputError, handle_errors, validate_board
)

__all__ = [
    'get_logger', 'setup_file_logging',
    'PegGameError', 'OutOfRangeError', 'InvalidMoveError',
    'InvalidBoardError', 'InputError', 'handle_errors', 'validate_board'
]
