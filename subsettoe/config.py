"""Fixed run configuration for the ``app.py`` entry point."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from subsettoe.arena.tournament import DEFAULT_GAMES
from subsettoe.game.catalog import DEFAULT_SUBSET_COUNT, DEFAULT_SUBSET_SIZES


@dataclass(frozen=True)
class SimulationConfig:
    match: tuple[str, ...] = ("Random", "Advanced")
    games: int = DEFAULT_GAMES
    subset_count: int = DEFAULT_SUBSET_COUNT
    size_range: tuple[int, int] = DEFAULT_SUBSET_SIZES
    seed: Optional[int] = None

    # Round robin after the main match
    roster: tuple[str, ...] = ("Random", "Simple", "Advanced")
    group_size: int = 2
    games_per_group: int = 10_000
    workers: int = 1


DEFAULT_CONFIG = SimulationConfig()
