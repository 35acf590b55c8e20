from __future__ import annotations

from typing import Mapping

from subsettoe.errors import InvalidMove

from .types import BOARD_SIZE, NO_PLAYER, is_valid_cell, is_valid_player

CELL_BITS = 2
CELL_MASK = 0b11


def cell_shift(cell: int) -> int:
    return cell * CELL_BITS


class Board:
    """16-cell board packed into a single integer, 2 bits per cell.

    Cell ``c`` lives at bits ``2c`` and ``2c + 1`` and holds the id of the
    player occupying it (0 = empty). Occupancy is permanent: there is no
    way to clear a cell once played.
    """

    __slots__ = ("_state",)

    def __init__(self, state: int = 0) -> None:
        self._state = state

    @classmethod
    def from_cells(cls, cells: Mapping[int, int]) -> Board:
        """Build a board from a ``{cell: player}`` mapping."""
        board = cls()
        for cell, player in cells.items():
            board.play(player, cell)
        return board

    @property
    def state(self) -> int:
        return self._state

    def get(self, cell: int) -> int:
        return (self._state >> cell_shift(cell)) & CELL_MASK

    def is_occupied(self, cell: int) -> bool:
        return bool(self._state & (CELL_MASK << cell_shift(cell)))

    def play(self, player: int, cell: int) -> None:
        if not is_valid_player(player):
            raise InvalidMove(f"invalid player id {player}")
        if not is_valid_cell(cell):
            raise InvalidMove(f"cell {cell} is off the board")
        if self.is_occupied(cell):
            raise InvalidMove(f"cell {cell} is occupied")
        self._state |= player << cell_shift(cell)

    def snapshot(self) -> Board:
        return Board(self._state)

    def empty_cells(self) -> list[int]:
        return [cell for cell in range(BOARD_SIZE) if not self.is_occupied(cell)]

    def count_empty(self) -> int:
        return sum(1 for cell in range(BOARD_SIZE) if not self.is_occupied(cell))

    @property
    def occupied_count(self) -> int:
        return BOARD_SIZE - self.count_empty()

    @property
    def is_full(self) -> bool:
        return self.count_empty() == 0

    def players(self) -> set[int]:
        """Ids of the players that have at least one mark on the board."""
        return {self.get(cell) for cell in range(BOARD_SIZE)} - {NO_PLAYER}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._state == other._state

    def __repr__(self) -> str:
        return f"Board(0x{self._state:08x})"
