"""
core/board.py

Треугольная доска Peg Thing.

Граф прыжков строится один раз (core/builder.py) и общий для всех досок,
полученных друг из друга. Занятость хранится в frozenset, поэтому любое
изменение возвращает новую доску, а исходная остаётся прежней.
"""

from typing import Dict, FrozenSet, Iterable, Mapping, NamedTuple, Optional

from .triangular import row_tri
from utils.error_handling import OutOfRangeError, InvalidMoveError

Position = int
# destination -> jumped
Connections = Mapping[Position, Position]


class Cell(NamedTuple):
    """Лунка: есть ли в ней колышек и куда из неё можно прыгнуть."""
    pegged: bool
    connections: Connections


class Board:
    """
    Иммутабельная доска: число рядов, граф прыжков и множество колышков.
    """
    __slots__ = ('rows', 'max_pos', 'connections', 'pegs', '_hash')

    def __init__(self, rows: int, connections: Mapping[Position, Connections],
                 pegs: Iterable[Position]):
        self.rows = rows
        self.max_pos = row_tri(rows)
        self.connections = connections
        self.pegs: FrozenSet[Position] = frozenset(pegs)
        for pos in self.pegs:
            self._check(pos)
        self._hash = hash((self.rows, self.pegs))

    def _check(self, pos: Position) -> None:
        if not isinstance(pos, int) or isinstance(pos, bool) or not 1 <= pos <= self.max_pos:
            raise OutOfRangeError(pos, self.max_pos)

    def _with_pegs(self, pegs: FrozenSet[Position]) -> 'Board':
        return Board(self.rows, self.connections, pegs)

    def positions(self) -> range:
        """Все позиции доски по возрастанию."""
        return range(1, self.max_pos + 1)

    def cell(self, pos: Position) -> Cell:
        self._check(pos)
        return Cell(pos in self.pegs, self.connections[pos])

    def is_pegged(self, pos: Position) -> bool:
        """Есть ли колышек в позиции?"""
        self._check(pos)
        return pos in self.pegs

    def peg_count(self) -> int:
        """Количество колышков, это и есть счёт партии."""
        return len(self.pegs)

    def remove_peg(self, pos: Position) -> 'Board':
        """Новая доска без колышка в pos."""
        self._check(pos)
        return self._with_pegs(self.pegs - {pos})

    def place_peg(self, pos: Position) -> 'Board':
        """Новая доска с колышком в pos."""
        self._check(pos)
        return self._with_pegs(self.pegs | {pos})

    def move_peg(self, p1: Position, p2: Position) -> 'Board':
        """Переносит колышек из p1 в p2 без проверки правил."""
        return self.remove_peg(p1).place_peg(p2)

    def valid_moves(self, pos: Position) -> Dict[Position, Position]:
        """
        Допустимые прыжки из pos: {destination: jumped}.

        Пустой словарь, если в pos нет колышка или прыгать некуда.
        """
        self._check(pos)
        if pos not in self.pegs:
            return {}
        return {
            destination: jumped
            for destination, jumped in self.connections[pos].items()
            if destination not in self.pegs and jumped in self.pegs
        }

    def valid_move(self, p1: Position, p2: Position) -> Optional[Position]:
        """Позиция перепрыгиваемого колышка или None, если ход недопустим."""
        return self.valid_moves(p1).get(p2)

    def make_move(self, p1: Position, p2: Position) -> 'Board':
        """
        Прыжок из p1 в p2 с удалением перепрыгнутого колышка.

        Raises:
            InvalidMoveError: прыжок невозможен; доска не меняется
            OutOfRangeError: p1 нет на доске
        """
        jumped = self.valid_move(p1, p2)
        if jumped is None:
            raise InvalidMoveError(p1, p2)
        return self._with_pegs((self.pegs - {p1, jumped}) | {p2})

    def can_move(self) -> bool:
        """Есть ли хоть один допустимый ход на всей доске?"""
        return any(self.valid_moves(pos) for pos in self.pegs)

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.rows == other.rows and self.pegs == other.pegs

    def __repr__(self) -> str:
        return f"Board(rows={self.rows}, {self.peg_count()}/{self.max_pos} pegs)"
