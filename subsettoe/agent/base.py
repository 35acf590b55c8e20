from __future__ import annotations

import abc
import random
from typing import Optional

from subsettoe.errors import NoLegalMove
from subsettoe.game.board import Board
from subsettoe.game.catalog import WinningSubsetCatalog
from subsettoe.game.types import NO_PLAYER, is_valid_player


def random_move(board: Board, rng: random.Random) -> int:
    """Pick an empty cell uniformly at random."""
    cells = board.empty_cells()
    if not cells:
        raise NoLegalMove("no empty cells left on the board")
    return rng.choice(cells)


class Agent(abc.ABC):
    """A move-selection strategy.

    Each agent owns its random generator; the simulator reseeds it at the
    start of every game so that a game is reproducible from its seed.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = random.Random(seed)
        self.player = NO_PLAYER

    def set_player(self, player: int) -> None:
        if not is_valid_player(player):
            raise ValueError(f"invalid player id {player}")
        self.player = player

    @abc.abstractmethod
    def select_move(self, board: Board, catalog: WinningSubsetCatalog) -> int:
        """Return the empty cell this agent wants to play."""

    def reset(self) -> None:
        """Clear per-game state. Stateless agents need not override this."""

    def register_opponent_move(self, player: int, cell: int) -> None:
        """Called after another player moves. Ignored by default."""

    @property
    def name(self) -> str:
        return self.__class__.__name__
