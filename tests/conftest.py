"""Shared fixtures: hand-built catalogs and boards."""

import pytest

from subsettoe.game.board import Board
from subsettoe.game.catalog import WinningSubsetCatalog


@pytest.fixture
def board():
    return Board()


@pytest.fixture
def triple_catalog():
    """Two disjoint 3-cell subsets in the first two rows."""
    return WinningSubsetCatalog.from_cells([[0, 1, 2], [4, 5, 6]])
