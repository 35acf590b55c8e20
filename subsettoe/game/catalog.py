"""Randomly generated winning subsets.

A winning subset is a group of cells; the first player to occupy all of
them wins. Subsets are drawn at random per game, may overlap, and need not
resemble rows or columns.
"""

from __future__ import annotations

import random
from typing import Iterable, Iterator, Optional, Sequence

from .board import CELL_MASK, Board, cell_shift
from .types import BOARD_SIZE, FIRST_PLAYER, MAX_PLAYERS, NO_PLAYER, is_valid_cell

DEFAULT_SUBSET_COUNT = 15
DEFAULT_SUBSET_SIZES = (3, 5)


class WinningSubset:
    """An immutable group of cells with precomputed ownership patterns.

    ``mask`` covers both bits of every member cell on the packed board.
    ``_owned[p]`` is the packed pattern of player ``p`` occupying every
    member cell, so ownership is one and-and-compare on ``Board.state``.
    """

    __slots__ = ("cells", "mask", "_owned")

    def __init__(self, cells: Iterable[int]) -> None:
        cells = tuple(cells)
        if len(set(cells)) != len(cells):
            raise ValueError(f"duplicate cells in winning subset {cells}")
        for cell in cells:
            if not is_valid_cell(cell):
                raise ValueError(f"cell {cell} is off the board")
        self.cells = frozenset(cells)
        self.mask = 0
        for cell in cells:
            self.mask |= CELL_MASK << cell_shift(cell)
        self._owned = [0] * (MAX_PLAYERS + 1)
        for player in range(FIRST_PLAYER, MAX_PLAYERS + 1):
            for cell in cells:
                self._owned[player] |= player << cell_shift(cell)

    def __contains__(self, cell: object) -> bool:
        return cell in self.cells

    def __len__(self) -> int:
        return len(self.cells)

    def owner(self, board: Board) -> int:
        """Return the player occupying every cell of this subset, or 0."""
        covered = board.state & self.mask
        if not covered:
            return NO_PLAYER
        for player in range(FIRST_PLAYER, MAX_PLAYERS + 1):
            if covered == self._owned[player]:
                return player
        return NO_PLAYER

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WinningSubset):
            return NotImplemented
        return self.cells == other.cells

    def __hash__(self) -> int:
        return hash(self.cells)

    def __repr__(self) -> str:
        return f"WinningSubset({sorted(self.cells)})"


class WinningSubsetCatalog:
    """All winning subsets of one game, read-only after construction.

    Identical ``(seed, count, size_range)`` always yields identical subsets.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        count: int = DEFAULT_SUBSET_COUNT,
        size_range: tuple[int, int] = DEFAULT_SUBSET_SIZES,
    ) -> None:
        min_size, max_size = size_range
        if count < 0:
            raise ValueError(f"subset count must be non-negative, got {count}")
        if not (1 <= min_size <= max_size <= BOARD_SIZE):
            raise ValueError(f"invalid subset size range {size_range}")
        self.seed = seed
        rng = random.Random(seed)
        self._subsets = tuple(
            WinningSubset(_draw_cells(rng, rng.randint(min_size, max_size)))
            for _ in range(count)
        )

    @classmethod
    def from_cells(cls, groups: Iterable[Iterable[int]]) -> WinningSubsetCatalog:
        """Build a catalog from explicit cell groups instead of a seed."""
        catalog = cls.__new__(cls)
        catalog.seed = None
        catalog._subsets = tuple(WinningSubset(group) for group in groups)
        return catalog

    def subsets(self) -> Sequence[WinningSubset]:
        return self._subsets

    def __len__(self) -> int:
        return len(self._subsets)

    def __iter__(self) -> Iterator[WinningSubset]:
        return iter(self._subsets)

    def winner(self, board: Board) -> int:
        """Owner of the first fully occupied subset in generation order, or 0."""
        for subset in self._subsets:
            player = subset.owner(board)
            if player != NO_PLAYER:
                return player
        return NO_PLAYER

    def is_winning_move(self, board: Board, player: int, cell: int) -> bool:
        """True if ``player`` playing ``cell`` makes them the winner.

        The move is tried on a snapshot; ``board`` is left untouched.
        """
        trial = board.snapshot()
        trial.play(player, cell)
        return self.winner(trial) == player


def _draw_cells(rng: random.Random, size: int) -> list[int]:
    cells: list[int] = []
    while len(cells) < size:
        cell = rng.randrange(BOARD_SIZE)
        if cell not in cells:
            cells.append(cell)
    return cells
