from subsettoe.game.board import Board
from subsettoe.game.catalog import WinningSubsetCatalog
from subsettoe.ui.board_text import render_board, render_catalog, render_cells


def test_empty_board():
    assert render_board(Board()) == "\n".join([". . . ."] * 4)


def test_empty_board_with_indices():
    rows = render_board(Board(), show_indices=True).splitlines()
    assert rows[0] == "0 1 2 3"
    assert rows[3] == "c d e f"


def test_board_with_marks():
    board = Board.from_cells({0: 1, 5: 2, 15: 3})
    rows = render_board(board, show_indices=True).splitlines()
    assert rows[0] == "X 1 2 3"
    assert rows[1] == "4 O 6 7"
    assert rows[3] == "c d e #"


def test_render_cells():
    assert render_cells([0, 15]).splitlines() == ["X . . .", ". . . .", ". . . .", ". . . X"]


def test_render_catalog():
    catalog = WinningSubsetCatalog.from_cells([[0, 1, 2], [4, 8, 12]])
    blocks = render_catalog(catalog).split("\n\n")
    assert len(blocks) == 2
    assert blocks[1].splitlines()[1] == "X . . ."
