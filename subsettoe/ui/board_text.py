"""Plain-text board renderer for diagnostic output."""

from __future__ import annotations

from typing import Iterable

from subsettoe.game.board import Board
from subsettoe.game.catalog import WinningSubsetCatalog
from subsettoe.game.types import BOARD_SIZE, BOARD_WIDTH, NO_PLAYER, PLAYER_SYMBOLS


def _grid(symbols: list[str]) -> str:
    rows = [
        " ".join(symbols[start:start + BOARD_WIDTH])
        for start in range(0, BOARD_SIZE, BOARD_WIDTH)
    ]
    return "\n".join(rows)


def render_board(board: Board, show_indices: bool = False) -> str:
    """Render the board as a 4x4 grid.

    Empty cells are shown as ``.``, or as their hex index when
    ``show_indices`` is set, so the output doubles as a move prompt.
    """
    symbols: list[str] = []
    for cell in range(BOARD_SIZE):
        player = board.get(cell)
        if player == NO_PLAYER and show_indices:
            symbols.append(f"{cell:x}")
        else:
            symbols.append(PLAYER_SYMBOLS[player])
    return _grid(symbols)


def render_cells(cells: Iterable[int]) -> str:
    """Render a group of cells (e.g. a winning subset) as X on an empty grid."""
    members = set(cells)
    return _grid([
        PLAYER_SYMBOLS[1] if cell in members else PLAYER_SYMBOLS[NO_PLAYER]
        for cell in range(BOARD_SIZE)
    ])


def render_catalog(catalog: WinningSubsetCatalog) -> str:
    return "\n\n".join(render_cells(subset.cells) for subset in catalog.subsets())
