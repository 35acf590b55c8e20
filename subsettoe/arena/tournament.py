"""Round-robin tournament over every group of 2 or 3 agents.

Each group plays many games; within a group the agent with the most wins
gets ``group_size - 1`` points, the next one point less, and so on down to
0. Equal win counts are ranked by roster order. Totals are compared by
points, then by raw wins.
"""

from __future__ import annotations

import itertools
import logging
import random
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Optional, Sequence

from tqdm.auto import tqdm

from subsettoe.agent.registry import make_agent
from subsettoe.game.catalog import DEFAULT_SUBSET_COUNT, DEFAULT_SUBSET_SIZES

from .simulator import GameSimulator

logger = logging.getLogger(__name__)

DEFAULT_GAMES = 100_000
GROUP_SIZES = (2, 3)


@dataclass
class PlayerScore:
    points: int = 0
    tiebreak: int = 0     # raw wins over all groups
    groups: int = 0


@dataclass
class GroupResult:
    names: tuple[str, ...]
    wins: list[int]
    draws: int
    points: list[int]


@dataclass
class TournamentResult:
    scores: dict[str, PlayerScore] = field(default_factory=dict)
    groups: list[GroupResult] = field(default_factory=list)

    def ranking(self) -> list[str]:
        return sorted(
            self.scores,
            key=lambda name: (self.scores[name].points, self.scores[name].tiebreak),
            reverse=True,
        )

    def report(self) -> str:
        lines = []
        for place, name in enumerate(self.ranking(), start=1):
            score = self.scores[name]
            lines.append(f"  {place}. {name}: {score.points} pts, {score.tiebreak} wins")
        return "\n".join(lines)


def award_points(wins: Sequence[int]) -> list[int]:
    """Points per participant: size-1 for the most wins down to 0.

    ``sorted`` is stable, so equal win counts keep their input order.
    """
    order = sorted(range(len(wins)), key=lambda i: -wins[i])
    points = [0] * len(wins)
    for rank, i in enumerate(order):
        points[i] = len(wins) - 1 - rank
    return points


def play_group(
    names: Sequence[str],
    games: int,
    seed: int,
    subset_count: int = DEFAULT_SUBSET_COUNT,
    size_range: tuple[int, int] = DEFAULT_SUBSET_SIZES,
) -> GroupResult:
    """Play one group with fresh agents. Module-level so it pickles."""
    agents = [make_agent(name) for name in names]
    simulator = GameSimulator(agents, seed=seed, subset_count=subset_count, size_range=size_range)
    stats = simulator.run(games)
    return GroupResult(tuple(names), stats.wins, stats.draws, award_points(stats.wins))


class Tournament:
    def __init__(
        self,
        roster: Sequence[str],
        group_size: int = 2,
        games_per_group: int = DEFAULT_GAMES,
        seed: Optional[int] = None,
        workers: int = 1,
        subset_count: int = DEFAULT_SUBSET_COUNT,
        size_range: tuple[int, int] = DEFAULT_SUBSET_SIZES,
    ) -> None:
        if group_size not in GROUP_SIZES:
            raise ValueError(f"group size must be one of {GROUP_SIZES}, got {group_size}")
        if len(roster) < group_size:
            raise ValueError(f"roster of {len(roster)} is too small for groups of {group_size}")
        if len(set(roster)) != len(roster):
            raise ValueError("roster names must be unique")
        for name in roster:
            make_agent(name)  # fail fast on unknown names
        self.roster = list(roster)
        self.group_size = group_size
        self.games_per_group = games_per_group
        if seed is None:
            seed = random.SystemRandom().getrandbits(64)
        self.seed = seed
        self.workers = workers
        self.subset_count = subset_count
        self.size_range = size_range

    def groups(self) -> list[tuple[str, ...]]:
        return list(itertools.combinations(self.roster, self.group_size))

    def run(self, progress: bool = False) -> TournamentResult:
        groups = self.groups()
        rng = random.Random(self.seed)
        seeds = [rng.getrandbits(64) for _ in groups]
        logger.info(
            "tournament: %d groups of %d, %d games each (seed %d)",
            len(groups), self.group_size, self.games_per_group, self.seed,
        )

        results: list[Optional[GroupResult]] = [None] * len(groups)
        bar = tqdm(total=len(groups), desc="groups", disable=not progress)
        if self.workers > 1:
            with ProcessPoolExecutor(max_workers=self.workers) as pool:
                future_to_index = {
                    pool.submit(
                        play_group, names, self.games_per_group, seed,
                        self.subset_count, self.size_range,
                    ): i
                    for i, (names, seed) in enumerate(zip(groups, seeds))
                }
                for future in as_completed(future_to_index):
                    i = future_to_index[future]
                    results[i] = future.result()
                    logger.debug("group %s done: wins %s", groups[i], results[i].wins)
                    bar.update()
        else:
            for i, (names, seed) in enumerate(zip(groups, seeds)):
                results[i] = play_group(
                    names, self.games_per_group, seed, self.subset_count, self.size_range,
                )
                logger.debug("group %s done: wins %s", names, results[i].wins)
                bar.update()
        bar.close()

        tournament = TournamentResult({name: PlayerScore() for name in self.roster})
        for group in results:
            tournament.groups.append(group)
            for name, wins, points in zip(group.names, group.wins, group.points):
                score = tournament.scores[name]
                score.points += points
                score.tiebreak += wins
                score.groups += 1
        logger.info("tournament ranking: %s", ", ".join(tournament.ranking()))
        return tournament
