from __future__ import annotations

from subsettoe.game.board import Board
from subsettoe.game.catalog import WinningSubsetCatalog

from .base import Agent, random_move


class RandomAgent(Agent):
    def select_move(self, board: Board, catalog: WinningSubsetCatalog) -> int:
        return random_move(board, self.rng)
