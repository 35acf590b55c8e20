"""Error hierarchy.

``InvalidMove`` is the only error a caller can trigger by passing bad
arguments. The others signal a defect in the subset bookkeeping or in
the game loop and are never expected during valid play.
"""

from __future__ import annotations


class SubsetToeError(Exception):
    """Base class for all errors raised by subsettoe."""


class InvalidMove(SubsetToeError, ValueError):
    """A move on an occupied or out-of-range cell, or by an invalid player id."""


class InternalInconsistency(SubsetToeError, RuntimeError):
    """The board and the winning-subset catalog disagree about the game state."""


class NoLegalMove(SubsetToeError, RuntimeError):
    """An agent was asked to move on a full board."""


class NoDecision(SubsetToeError, RuntimeError):
    """An agent evaluated the board but could not settle on a move."""
