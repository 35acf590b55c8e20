"""Agents by name, so worker processes can build fresh instances."""

from __future__ import annotations

from typing import Optional

from .advanced_agent import AdvancedAgent
from .base import Agent
from .random_agent import RandomAgent
from .simple_agent import SimpleAgent

AGENTS: dict[str, type[Agent]] = {
    "Random": RandomAgent,
    "Simple": SimpleAgent,
    "Advanced": AdvancedAgent,
}


def make_agent(name: str, seed: Optional[int] = None) -> Agent:
    try:
        cls = AGENTS[name]
    except KeyError:
        raise ValueError(f"unknown agent {name!r}; choose from {sorted(AGENTS)}") from None
    return cls(seed)
