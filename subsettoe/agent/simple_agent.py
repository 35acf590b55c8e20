"""Simple agent: one-ply lookahead over the winning subsets.

Plays an immediately winning cell when there is one, otherwise blocks a
cell that would hand an opponent the game, otherwise plays at random.
"""

from __future__ import annotations

from typing import Optional

from subsettoe.game.board import Board
from subsettoe.game.catalog import WinningSubsetCatalog
from subsettoe.game.types import NO_PLAYER

from .base import Agent, random_move


class SimpleAgent(Agent):
    def select_move(self, board: Board, catalog: WinningSubsetCatalog) -> int:
        if self.player == NO_PLAYER:
            raise ValueError("SimpleAgent has no player id; call set_player() first")

        opponents = sorted(board.players() - {self.player})
        block: Optional[int] = None
        for move in board.empty_cells():
            if catalog.is_winning_move(board, self.player, move):
                return move
            # Later blocking cells overwrite earlier ones
            if any(catalog.is_winning_move(board, opp, move) for opp in opponents):
                block = move

        if block is not None:
            return block
        return random_move(board, self.rng)
