"""
tests/test_error_handling.py

Тесты исключений, декоратора handle_errors и логгера.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import logging

import pytest

from core.builder import new_board
from utils.error_handling import (
    PegGameError, OutOfRangeError, InvalidMoveError, InvalidBoardError,
    InputError, handle_errors, validate_board
)
from utils.logging import get_logger, setup_file_logging


def test_hierarchy():
    for exc in (OutOfRangeError(5), InvalidMoveError(1, 2), InvalidBoardError("x"), InputError("x")):
        assert isinstance(exc, PegGameError)
    assert isinstance(OutOfRangeError(5), IndexError)
    assert isinstance(InputError("x"), ValueError)


def test_out_of_range_message():
    exc = OutOfRangeError(16, 15)
    assert exc.pos == 16
    assert exc.max_pos == 15
    assert "1..15" in str(exc)


def test_handle_errors_converts_game_errors():
    @handle_errors(on_error=lambda e: ('error', type(e).__name__), log_error=False)
    def bad_move():
        raise InvalidMoveError(1, 6)

    assert bad_move() == ('error', 'InvalidMoveError')


def test_handle_errors_passes_results_and_other_errors():
    @handle_errors(on_error=lambda e: None)
    def ok(x):
        return x * 2

    @handle_errors(on_error=lambda e: None)
    def broken():
        raise KeyError('boom')

    assert ok(3) == 6
    assert ok.__name__ == 'ok'
    with pytest.raises(KeyError):
        broken()


def test_validate_board():
    assert validate_board(new_board(1)) is True
    with pytest.raises(InvalidBoardError):
        validate_board(None)
    with pytest.raises(InvalidBoardError):
        validate_board(new_board(0))


def test_get_logger_is_shared():
    assert get_logger() is get_logger()
    assert get_logger().logger.name == 'peg_thing'


def test_set_level():
    logger = get_logger()
    old = logger.logger.level
    try:
        logger.set_level(logging.DEBUG)
        assert logger.logger.level == logging.DEBUG
        assert all(h.level == logging.DEBUG for h in logger.logger.handlers)
    finally:
        logger.set_level(old)


def test_setup_file_logging(tmp_path):
    log_file = tmp_path / "peg.log"
    logger = get_logger()
    handler = setup_file_logging(str(log_file), logging.INFO)
    try:
        logger.info("board built")
        handler.flush()
        assert "board built" in log_file.read_text(encoding='utf-8')
    finally:
        logger.logger.removeHandler(handler)
        handler.close()
