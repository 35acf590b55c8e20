"""subsettoe: winning-subset tic-tac-toe simulation entry point."""

import logging
import time

from subsettoe.agent.registry import make_agent
from subsettoe.arena.simulator import GameSimulator
from subsettoe.arena.tournament import Tournament
from subsettoe.config import DEFAULT_CONFIG, SimulationConfig


def main(config: SimulationConfig = DEFAULT_CONFIG) -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s: %(message)s")
    start = time.perf_counter()

    agents = [make_agent(name) for name in config.match]
    simulator = GameSimulator(
        agents,
        seed=config.seed,
        subset_count=config.subset_count,
        size_range=config.size_range,
    )
    stats = simulator.run(config.games, progress=True)
    print(stats.report())
    print(f"{time.perf_counter() - start:.3f}s")

    tournament = Tournament(
        config.roster,
        group_size=config.group_size,
        games_per_group=config.games_per_group,
        seed=config.seed,
        workers=config.workers,
        subset_count=config.subset_count,
        size_range=config.size_range,
    )
    result = tournament.run(progress=True)
    print(f"Round robin ({config.games_per_group} games per pair):")
    print(result.report())


if __name__ == "__main__":
    main()
