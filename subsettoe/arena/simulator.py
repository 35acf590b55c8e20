"""Game loop: plays randomized games between agents and tallies the results.

Every game is driven by its own seed. The seed fixes the winning subsets,
the agents' random generators and the turn order, so any single game can
be replayed from ``(top-level seed, game index)``.
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from typing import Optional, Sequence

from tqdm.auto import trange

from subsettoe.agent.base import Agent
from subsettoe.game.board import Board
from subsettoe.game.catalog import (
    DEFAULT_SUBSET_COUNT,
    DEFAULT_SUBSET_SIZES,
    WinningSubsetCatalog,
)
from subsettoe.game.types import BOARD_SIZE, FIRST_PLAYER, MAX_PLAYERS, NO_PLAYER, Move
from subsettoe.ui.board_text import render_board

logger = logging.getLogger(__name__)

MIN_PLAYERS = 2


@dataclass
class GameResult:
    seed: int
    catalog_seed: int
    wins: list[int]               # 1 for the winning agent, 0 otherwise
    winner: Optional[int]         # agent index, None on a draw
    moves: list[Move]
    move_time: list[float]        # seconds spent inside each agent

    @property
    def is_draw(self) -> bool:
        return self.winner is None


@dataclass
class SimulationStats:
    names: list[str]
    games: int = 0
    draws: int = 0
    wins: list[int] = field(default_factory=list)
    time_spent: list[float] = field(default_factory=list)
    overhead: float = 0.0         # wall time not spent inside agents

    def __post_init__(self) -> None:
        if not self.wins:
            self.wins = [0] * len(self.names)
        if not self.time_spent:
            self.time_spent = [0.0] * len(self.names)

    def record(self, result: GameResult) -> None:
        self.games += 1
        if result.is_draw:
            self.draws += 1
        for i, won in enumerate(result.wins):
            self.wins[i] += won
            self.time_spent[i] += result.move_time[i]

    def win_rate(self, index: int) -> float:
        return self.wins[index] / self.games if self.games else 0.0

    @property
    def draw_rate(self) -> float:
        return self.draws / self.games if self.games else 0.0

    def report(self) -> str:
        lines = [f"Draws:\t{self.draws} = {self.draw_rate:.5f} time spent: {self.overhead:.3f}s"]
        for i, name in enumerate(self.names):
            lines.append(
                f"{name} wins: {self.wins[i]} = {self.win_rate(i):.5f} "
                f"time spent: {self.time_spent[i]:.3f}s"
            )
        return "\n".join(lines)


class GameSimulator:
    """Plays games among 2..MAX_PLAYERS agents.

    Agents get player ids 1..N in list order. Each turn the mover is drawn
    uniformly from all agents, so the same agent may move several times in
    a row.
    """

    def __init__(
        self,
        agents: Sequence[Agent],
        seed: Optional[int] = None,
        subset_count: int = DEFAULT_SUBSET_COUNT,
        size_range: tuple[int, int] = DEFAULT_SUBSET_SIZES,
        verbose: bool = False,
    ) -> None:
        if not (MIN_PLAYERS <= len(agents) <= MAX_PLAYERS):
            raise ValueError(
                f"need {MIN_PLAYERS} to {MAX_PLAYERS} agents, got {len(agents)}"
            )
        self.agents = list(agents)
        for i, agent in enumerate(self.agents):
            agent.set_player(FIRST_PLAYER + i)
        if seed is None:
            seed = random.SystemRandom().getrandbits(64)
        self.seed = seed
        self.subset_count = subset_count
        self.size_range = size_range
        self.verbose = verbose

    @property
    def names(self) -> list[str]:
        return [agent.name for agent in self.agents]

    def game_seed(self, index: int) -> int:
        """Seed of game ``index`` within ``run()``."""
        rng = random.Random(self.seed)
        for _ in range(index):
            rng.getrandbits(64)
        return rng.getrandbits(64)

    def play_game(self, seed: int) -> GameResult:
        rng = random.Random(seed)
        catalog_seed = rng.getrandbits(32)
        catalog = WinningSubsetCatalog(catalog_seed, self.subset_count, self.size_range)
        for agent in self.agents:
            agent.rng.seed(rng.getrandbits(64))
            agent.reset()

        board = Board()
        moves: list[Move] = []
        move_time = [0.0] * len(self.agents)
        winner = NO_PLAYER
        for _ in range(BOARD_SIZE):
            index = rng.randrange(len(self.agents))
            mover = self.agents[index]

            start = time.perf_counter()
            cell = mover.select_move(board, catalog)
            move_time[index] += time.perf_counter() - start

            board.play(mover.player, cell)
            moves.append(Move(mover.player, cell))
            if self.verbose:
                logger.debug("%s played %d\n%s", mover.name, cell, render_board(board))

            for other in self.agents:
                if other is not mover:
                    other.register_opponent_move(mover.player, cell)

            winner = catalog.winner(board)
            if winner != NO_PLAYER:
                break

        wins = [0] * len(self.agents)
        winner_index: Optional[int] = None
        if winner != NO_PLAYER:
            winner_index = winner - FIRST_PLAYER
            wins[winner_index] = 1
        logger.debug(
            "game %d: %s after %d moves",
            seed,
            "draw" if winner_index is None else f"{self.agents[winner_index].name} won",
            len(moves),
        )
        return GameResult(seed, catalog_seed, wins, winner_index, moves, move_time)

    def run(self, num_games: int, progress: bool = False) -> SimulationStats:
        logger.info(
            "simulating %d games: %s (seed %d)", num_games, " vs ".join(self.names), self.seed,
        )
        stats = SimulationStats(self.names)
        rng = random.Random(self.seed)
        start = time.perf_counter()
        for _ in trange(num_games, desc="games", disable=not progress):
            stats.record(self.play_game(rng.getrandbits(64)))
        stats.overhead = time.perf_counter() - start - sum(stats.time_spent)
        logger.info("finished %d games in %.2fs", num_games, time.perf_counter() - start)
        return stats
