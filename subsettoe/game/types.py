from __future__ import annotations

from typing import NamedTuple

BOARD_SIZE = 16
BOARD_WIDTH = 4  # cells per rendered row

NO_PLAYER = 0
FIRST_PLAYER = 1
MAX_PLAYERS = 3  # a cell holds a 2-bit player id

PLAYER_SYMBOLS = ".XO#"


def is_valid_player(player: int) -> bool:
    return FIRST_PLAYER <= player <= MAX_PLAYERS


def is_valid_cell(cell: int) -> bool:
    return 0 <= cell < BOARD_SIZE


class Move(NamedTuple):
    player: int
    cell: int

    def __str__(self) -> str:
        return f"{PLAYER_SYMBOLS[self.player]}: {self.cell}"
