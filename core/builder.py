"""
core/builder.py

Построение треугольной доски: позиции и граф прыжков.

Для каждой позиции пробуются три направления: вправо, вниз-влево,
вниз-вправо. Каждая найденная связь записывается в обе стороны, так что
обратные прыжки (влево, вверх-вправо, вверх-влево) получаются сами.
"""

from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Iterable, Mapping

from .board import Board, Connections, Position
from .triangular import is_triangular, row_num, row_tri
from utils.error_handling import InvalidBoardError
from utils.logging import get_logger


def _connect(connections: Dict[Position, Dict[Position, Position]], max_pos: int,
             pos: Position, neighbor: Position, destination: Position) -> None:
    """Взаимная связь pos <-> destination через neighbor."""
    if destination <= max_pos:
        connections[pos][destination] = neighbor
        connections[destination][pos] = neighbor


def _connect_right(connections, max_pos: int, pos: Position) -> None:
    neighbor = pos + 1
    destination = neighbor + 1
    # Треугольная позиция последняя в ряду: вправо идти некуда
    if not (is_triangular(neighbor) or is_triangular(pos)):
        _connect(connections, max_pos, pos, neighbor, destination)


def _connect_down_left(connections, max_pos: int, pos: Position) -> None:
    row = row_num(pos)
    neighbor = pos + row
    destination = 1 + row + neighbor
    _connect(connections, max_pos, pos, neighbor, destination)


def _connect_down_right(connections, max_pos: int, pos: Position) -> None:
    row = row_num(pos)
    neighbor = 1 + pos + row
    destination = 2 + row + neighbor
    _connect(connections, max_pos, pos, neighbor, destination)


CONNECTION_RULES = (_connect_right, _connect_down_left, _connect_down_right)


@lru_cache(maxsize=None)
def build_connections(rows: int) -> Mapping[Position, Connections]:
    """
    Граф прыжков для доски из rows рядов: {pos: {destination: jumped}}.

    Результат read-only, поэтому его безопасно кэшировать и делить
    между всеми досками одного размера.
    """
    if rows < 0:
        raise InvalidBoardError(f"Число рядов не может быть отрицательным: {rows}")

    max_pos = row_tri(rows)
    connections: Dict[Position, Dict[Position, Position]] = {
        pos: {} for pos in range(1, max_pos + 1)
    }
    for pos in range(1, max_pos + 1):
        for rule in CONNECTION_RULES:
            rule(connections, max_pos, pos)

    get_logger().debug(
        f"Граф для {rows} рядов: {max_pos} позиций, "
        f"{sum(len(c) for c in connections.values())} связей"
    )
    return MappingProxyType({
        pos: MappingProxyType(dests) for pos, dests in connections.items()
    })


def new_board(rows: int) -> Board:
    """
    Создаёт доску из rows рядов, все лунки заняты.

    rows == 0 даёт пустую (вырожденную) доску, а не ошибку.
    """
    connections = build_connections(rows)
    return Board(rows, connections, range(1, row_tri(rows) + 1))


def board_from_pegged(rows: int, pegged: Iterable[Position]) -> Board:
    """Доска из rows рядов с колышками только в позициях pegged."""
    return Board(rows, build_connections(rows), pegged)
