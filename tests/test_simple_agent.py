"""Tests for the one-ply lookahead agent."""

import pytest

from subsettoe.agent.simple_agent import SimpleAgent
from subsettoe.game.board import Board
from subsettoe.game.catalog import WinningSubsetCatalog


def simple(player=1, seed=0):
    agent = SimpleAgent(seed=seed)
    agent.set_player(player)
    return agent


class TestSimpleAgent:
    def test_takes_winning_move(self, triple_catalog):
        board = Board.from_cells({0: 1, 1: 1})
        assert simple().select_move(board, triple_catalog) == 2

    def test_blocks_opponent(self, triple_catalog):
        board = Board.from_cells({0: 2, 1: 2})
        assert simple().select_move(board, triple_catalog) == 2

    def test_win_beats_earlier_block(self):
        catalog = WinningSubsetCatalog.from_cells([[8, 9, 10], [0, 1, 2]])
        board = Board.from_cells({8: 1, 9: 1, 0: 2, 1: 2})
        assert simple().select_move(board, catalog) == 10

    def test_last_block_is_kept(self, triple_catalog):
        board = Board.from_cells({0: 2, 1: 2, 4: 2, 5: 2})
        assert simple().select_move(board, triple_catalog) == 6

    def test_blocks_any_opponent(self, triple_catalog):
        board = Board.from_cells({4: 3, 5: 3, 0: 1})
        assert simple(player=2).select_move(board, triple_catalog) == 6

    def test_random_fallback(self, triple_catalog, board):
        move = simple(seed=5).select_move(board, triple_catalog)
        assert 0 <= move < 16
        assert simple(seed=5).select_move(board, triple_catalog) == move

    def test_needs_player_id(self, triple_catalog, board):
        with pytest.raises(ValueError):
            SimpleAgent().select_move(board, triple_catalog)

    def test_name(self):
        assert SimpleAgent().name == "SimpleAgent"
