"""
web/app.py

Flask JSON API для Peg Thing.

Сервер ничего не хранит: доска приходит в каждом запросе как
{"rows": 5, "pegged": [1, 2, 3, ...]} и возвращается в том же виде.
"""

import os
import sys
from flask import Flask, request, jsonify, Response

# Добавляем корень проекта в path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.board import Board
from core.builder import new_board, board_from_pegged
from core.utils import DEFAULT_ROWS, DEFAULT_EMPTY, MAX_LETTER_POS
from peg_io.parser import letter_to_pos
from peg_io.visualizer import render_board
from solutions.verify import play_line, verify_line
from utils.error_handling import (
    PegGameError, InputError, handle_errors, validate_board
)

# Верхняя граница, чтобы один запрос не строил огромный граф
MAX_API_ROWS = 50

app = Flask(__name__)


def _error_response(e: PegGameError):
    return jsonify({
        'success': False,
        'error': str(e),
        'type': type(e).__name__
    }), 400


api_errors = handle_errors(on_error=_error_response)


def _int(value, name):
    if isinstance(value, bool) or not isinstance(value, int):
        raise InputError(f"Поле '{name}' должно быть целым числом")
    return value


def _query_int(name, default=None):
    """Целый параметр строки запроса; нераспознанное значение даёт ошибку, а не default."""
    raw = request.args.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise InputError(f"Параметр '{name}' должен быть целым числом, получено {raw!r}")


def _bool(value, name):
    if not isinstance(value, bool):
        raise InputError(f"Поле '{name}' должно быть true или false")
    return value


def _rows(value) -> int:
    # 0 пропускаем: вырожденную доску отклоняет validate_board
    rows = _int(value, 'rows')
    if not 0 <= rows <= MAX_API_ROWS:
        raise InputError(f"Число рядов должно быть от 1 до {MAX_API_ROWS}")
    return rows


def _playable_board(rows: int) -> Board:
    board = new_board(rows)
    validate_board(board)
    return board


def _default_empty(board: Board) -> int:
    """Лунка DEFAULT_EMPTY, а на досках меньше неё последняя позиция."""
    return min(letter_to_pos(DEFAULT_EMPTY), board.max_pos)


def board_from_json(data) -> Board:
    """Доска из {"rows": n, "pegged": [...]}."""
    if not isinstance(data, dict):
        raise InputError("Ожидался JSON-объект")
    rows = _rows(data.get('rows'))
    pegged = data.get('pegged')
    if not isinstance(pegged, list):
        raise InputError("Поле 'pegged' должно быть списком позиций")
    board = board_from_pegged(rows, [_int(pos, 'pegged') for pos in pegged])
    validate_board(board)
    return board


def board_to_json(board: Board) -> dict:
    """Доска в ответ API; текст есть только для досок, описываемых буквами."""
    return {
        'success': True,
        'rows': board.rows,
        'max_pos': board.max_pos,
        'pegged': sorted(board.pegs),
        'peg_count': board.peg_count(),
        'can_move': board.can_move(),
        'text': render_board(board) if board.max_pos <= MAX_LETTER_POS else None
    }


@app.route('/api/new', methods=['GET'])
@api_errors
def new_game():
    """
    Новая доска с одной пустой лункой.

    Параметры: rows (по умолчанию 5), empty: номер пустой лунки
    (по умолчанию лунка 'e').
    """
    board = _playable_board(_rows(_query_int('rows', DEFAULT_ROWS)))
    empty = _query_int('empty', _default_empty(board))
    board = board.remove_peg(empty)
    return jsonify(board_to_json(board))


@app.route('/api/moves', methods=['POST'])
@api_errors
def list_moves():
    """
    Допустимые прыжки из позиции.

    Входные данные:
    {
        "rows": 5,
        "pegged": [...],
        "pos": 6
    }
    """
    data = request.get_json(silent=True)
    board = board_from_json(data)
    pos = _int(data.get('pos'), 'pos')
    moves = board.valid_moves(pos)
    return jsonify({
        'success': True,
        'pos': pos,
        'moves': [{'to': dest, 'jumped': jumped} for dest, jumped in sorted(moves.items())]
    })


@app.route('/api/move', methods=['POST'])
@api_errors
def make_move():
    """
    Один ход.

    Входные данные:
    {
        "rows": 5,
        "pegged": [...],
        "from": 1,
        "to": 4
    }
    """
    data = request.get_json(silent=True)
    board = board_from_json(data)
    p1 = _int(data.get('from'), 'from')
    p2 = _int(data.get('to'), 'to')
    jumped = board.valid_move(p1, p2)
    result = board_to_json(board.make_move(p1, p2))
    result['jumped'] = jumped
    return jsonify(result)


@app.route('/api/verify', methods=['POST'])
@api_errors
def verify():
    """
    Проверка последовательности ходов с начальной позиции.

    Входные данные:
    {
        "rows": 5,
        "empty": 4,
        "moves": [[1, 4], [6, 1]],
        "require_finished": false
    }
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InputError("Ожидался JSON-объект")
    board = _playable_board(_rows(data.get('rows')))
    board = board.remove_peg(_int(data.get('empty'), 'empty'))

    raw_moves = data.get('moves', [])
    if not isinstance(raw_moves, list):
        raise InputError("Поле 'moves' должно быть списком пар")
    moves = []
    for move in raw_moves:
        if not isinstance(move, list) or len(move) != 2:
            raise InputError("Каждый ход должен быть парой [from, to]")
        moves.append((_int(move[0], 'moves'), _int(move[1], 'moves')))

    require_finished = _bool(data.get('require_finished', False), 'require_finished')
    if not verify_line(board, moves, require_finished=require_finished):
        return jsonify({'success': True, 'valid': False})

    result = board_to_json(play_line(board, moves))
    result['valid'] = True
    return jsonify(result)


@app.route('/api/render', methods=['GET'])
@api_errors
def render():
    """Текст доски: ?rows=5&pegged=1,2,3"""
    rows = _rows(_query_int('rows', DEFAULT_ROWS))
    raw = request.args.get('pegged', '')
    try:
        pegged = [int(p) for p in raw.split(',') if p.strip()]
    except ValueError:
        raise InputError(f"Некорректный список позиций: {raw!r}")
    board = board_from_pegged(rows, pegged)
    validate_board(board)
    return Response(render_board(board) + "\n", mimetype='text/plain')


def debug_enabled() -> bool:
    """Отладчик Werkzeug только по явному PEG_THING_DEBUG=1."""
    return os.environ.get('PEG_THING_DEBUG', '').strip().lower() in ('1', 'true', 'yes')


if __name__ == '__main__':
    print("=" * 50)
    print("Peg Thing - JSON API")
    print("=" * 50)
    print("\nhttp://localhost:5000/api/new?rows=5&empty=5")
    print()

    app.run(debug=debug_enabled(), host='0.0.0.0', port=5000)
