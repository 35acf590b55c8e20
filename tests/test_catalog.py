import pytest

from subsettoe.game.board import Board
from subsettoe.game.catalog import WinningSubset, WinningSubsetCatalog
from subsettoe.game.types import BOARD_SIZE, NO_PLAYER


def cells_of(catalog):
    return [sorted(s.cells) for s in catalog.subsets()]


class TestGeneration:
    def test_same_seed_same_subsets(self):
        a = WinningSubsetCatalog(seed=1234, count=15, size_range=(3, 5))
        b = WinningSubsetCatalog(seed=1234, count=15, size_range=(3, 5))
        assert cells_of(a) == cells_of(b)
        board = Board.from_cells({c: 1 for c in range(0, BOARD_SIZE, 2)})
        assert a.winner(board) == b.winner(board)

    def test_seeds_differ(self):
        catalogs = [cells_of(WinningSubsetCatalog(seed=s)) for s in range(5)]
        assert any(c != catalogs[0] for c in catalogs[1:])

    @pytest.mark.parametrize("seed", range(30))
    def test_subset_shape(self, seed):
        catalog = WinningSubsetCatalog(seed=seed, count=15, size_range=(3, 5))
        assert len(catalog) == 15
        for subset in catalog:
            assert 3 <= len(subset) <= 5
            assert all(0 <= c < BOARD_SIZE for c in subset.cells)

    def test_fixed_size(self):
        catalog = WinningSubsetCatalog(seed=9, count=20, size_range=(4, 4))
        assert {len(s) for s in catalog} == {4}

    def test_empty_catalog(self):
        catalog = WinningSubsetCatalog(seed=0, count=0)
        assert len(catalog) == 0
        assert catalog.winner(Board.from_cells({c: 1 for c in range(BOARD_SIZE)})) == NO_PLAYER

    @pytest.mark.parametrize("size_range", [(0, 3), (4, 3), (3, BOARD_SIZE + 1)])
    def test_bad_size_range(self, size_range):
        with pytest.raises(ValueError):
            WinningSubsetCatalog(seed=0, size_range=size_range)

    def test_negative_count(self):
        with pytest.raises(ValueError):
            WinningSubsetCatalog(seed=0, count=-1)


class TestWinner:
    def test_single_subset_seed_42(self):
        catalog = WinningSubsetCatalog(seed=42, count=1, size_range=(3, 3))
        assert len(catalog) == 1
        cells = sorted(catalog.subsets()[0].cells)
        assert len(cells) == 3

        owned = Board.from_cells({c: 1 for c in cells})
        assert catalog.winner(owned) == 1

        shared = Board.from_cells({cells[0]: 1, cells[1]: 1, cells[2]: 2})
        assert catalog.winner(shared) == NO_PLAYER
        # Contested for good: filling the rest changes nothing
        for cell in shared.empty_cells():
            shared.play(1, cell)
            assert catalog.winner(shared) == NO_PLAYER

    def test_partial_subset_has_no_winner(self, triple_catalog):
        board = Board.from_cells({0: 1, 1: 1})
        assert triple_catalog.winner(board) == NO_PLAYER

    def test_first_subset_in_order_wins(self):
        board = Board.from_cells({0: 1, 1: 1, 2: 1, 4: 2, 5: 2, 6: 2})
        first = WinningSubsetCatalog.from_cells([[0, 1, 2], [4, 5, 6]])
        second = WinningSubsetCatalog.from_cells([[4, 5, 6], [0, 1, 2]])
        assert first.winner(board) == 1
        assert second.winner(board) == 2

    def test_is_winning_move(self, triple_catalog):
        board = Board.from_cells({0: 1, 1: 1, 4: 2})
        assert triple_catalog.is_winning_move(board, 1, 2)
        assert not triple_catalog.is_winning_move(board, 2, 2)
        assert not triple_catalog.is_winning_move(board, 1, 3)
        assert not board.is_occupied(2)


class TestWinningSubset:
    def test_mask_covers_both_bits(self):
        assert WinningSubset([0]).mask == 0b11
        assert WinningSubset([1, 2]).mask == 0b111100

    def test_owner(self):
        subset = WinningSubset([3, 7])
        assert subset.owner(Board()) == NO_PLAYER
        assert subset.owner(Board.from_cells({3: 3, 7: 3})) == 3
        assert subset.owner(Board.from_cells({3: 3, 7: 1})) == NO_PLAYER
        assert subset.owner(Board.from_cells({3: 2})) == NO_PLAYER

    def test_membership(self):
        subset = WinningSubset([3, 7, 11])
        assert 7 in subset
        assert 8 not in subset
        assert subset == WinningSubset([11, 3, 7])

    def test_duplicate_cells_rejected(self):
        with pytest.raises(ValueError):
            WinningSubset([1, 1, 2])

    def test_off_board_rejected(self):
        with pytest.raises(ValueError):
            WinningSubsetCatalog.from_cells([[0, 1, BOARD_SIZE]])
