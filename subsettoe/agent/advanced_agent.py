"""Advanced agent: two-level positional evaluation over the winning subsets.

For every empty cell the agent measures, after hypothetically playing it:

  1. my closest win: fewest empty cells left in a subset I can still own
  2. my variability: how many subsets sit at that distance
  3. their closest win: fewest empty cells left in a subset I do not own
  4. their variability: how many subsets sit at that distance

and folds these into a two-level ``PositionScore``. Cells that complete one
of my subsets are played outright. When an opponent is one cell from a win
the score only counts how many such threats survive the move, so the agent
blocks whenever a block exists.

Subsets touched by two different players can never be won and are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from subsettoe.errors import InternalInconsistency, NoDecision, NoLegalMove
from subsettoe.game.board import Board
from subsettoe.game.catalog import WinningSubset, WinningSubsetCatalog
from subsettoe.game.types import BOARD_SIZE, NO_PLAYER

from .base import Agent

# ---------------------------------------------------------------------------
# Score levels
# ---------------------------------------------------------------------------

NO_THREAT_LEVEL = 100      # opponent has no live subset left
FORCED_LEVEL = -100        # opponent wins next turn unless blocked
CLOSEST_WIN_WEIGHT = 10    # secondary weight of my distance when unthreatened

# Sentinel distance: no live subset seen yet
FAR = BOARD_SIZE


# ---------------------------------------------------------------------------
# Position score
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PositionScore:
    """Ordered by ``(primary, secondary)``; ``immediate_win`` overrides all."""

    primary: int
    secondary: int
    immediate_win: bool = False

    def __lt__(self, other: PositionScore) -> bool:
        return (self.primary, self.secondary) < (other.primary, other.secondary)

    @classmethod
    def winning(cls) -> PositionScore:
        return cls(0, 0, immediate_win=True)


# ---------------------------------------------------------------------------
# Subset bookkeeping
# ---------------------------------------------------------------------------

@dataclass
class WinningSubsetState:
    """Occupancy summary of one subset on the current board."""

    subset: WinningSubset
    empty: int = 0
    player: int = NO_PLAYER
    contested: bool = False

    def add(self, occupant: int) -> None:
        """Account for one member cell holding ``occupant`` (0 = empty)."""
        if occupant == NO_PLAYER:
            self.empty += 1
        elif self.player == NO_PLAYER:
            self.player = occupant
        elif self.player != occupant:
            self.contested = True


def build_subset_states(
    board: Board, catalog: WinningSubsetCatalog,
) -> list[WinningSubsetState]:
    """Scan the board once and summarize every subset.

    Raises InternalInconsistency if a live subset has no empty cell left,
    i.e. someone has already won and the game should have ended.
    """
    states = [WinningSubsetState(subset) for subset in catalog.subsets()]
    for cell in range(BOARD_SIZE):
        occupant = board.get(cell)
        for state in states:
            if state.contested:
                continue
            if cell in state.subset:
                state.add(occupant)

    for state in states:
        if not state.contested and state.empty == 0:
            raise InternalInconsistency(
                f"{state.subset!r} is complete but the game was not over"
            )
    return states


# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------

def position_score(
    move: int, player: int, states: list[WinningSubsetState],
) -> PositionScore:
    """Score ``player`` playing ``move`` given the current subset states."""
    my_closest = their_closest = FAR
    my_variability = their_variability = 0

    for state in states:
        if state.contested:
            continue
        owner = state.player
        left = state.empty
        if left == 0:
            raise InternalInconsistency(f"{state.subset!r} has no empty cell")

        if move in state.subset:
            if owner != player and owner != NO_PLAYER:
                continue  # playing here contests it
            owner = player
            left -= 1
            if left == 0:
                return PositionScore.winning()

        if owner == player or owner == NO_PLAYER:
            if left == my_closest:
                my_variability += 1
            elif left < my_closest:
                my_closest = left
                my_variability = 1

        if owner != player:
            if left == their_closest:
                their_variability += 1
            elif left < their_closest:
                their_closest = left
                their_variability = 1

    if their_variability == 0:
        return PositionScore(
            NO_THREAT_LEVEL, -my_closest * CLOSEST_WIN_WEIGHT + my_variability,
        )
    if their_closest < 1:
        raise InternalInconsistency("opponent has already completed a subset")
    if their_closest == 1:
        return PositionScore(FORCED_LEVEL, -their_variability)
    return PositionScore(
        their_closest - my_closest, my_variability - their_variability,
    )


def score_moves(
    board: Board, catalog: WinningSubsetCatalog, player: int,
) -> dict[int, PositionScore]:
    """Score every empty cell for ``player``. Useful for diagnostics."""
    states = build_subset_states(board, catalog)
    return {move: position_score(move, player, states) for move in board.empty_cells()}


# ---------------------------------------------------------------------------
# AdvancedAgent
# ---------------------------------------------------------------------------

class AdvancedAgent(Agent):
    """Greedy one-move agent driven by ``position_score``.

    Picks the empty cell with the largest score, keeping the lowest cell on
    ties, and returns a winning cell as soon as one is found.
    """

    def select_move(self, board: Board, catalog: WinningSubsetCatalog) -> int:
        if self.player == NO_PLAYER:
            raise ValueError("AdvancedAgent has no player id; call set_player() first")
        moves = board.empty_cells()
        if not moves:
            raise NoLegalMove("no empty cells left on the board")

        states = build_subset_states(board, catalog)
        best_move: Optional[int] = None
        best_score: Optional[PositionScore] = None
        for move in moves:
            score = position_score(move, self.player, states)
            if score.immediate_win:
                return move
            if best_score is None or best_score < score:
                best_score = score
                best_move = move

        if best_move is None:
            raise NoDecision("no empty cell produced a score")
        return best_move
