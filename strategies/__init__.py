"""The built-in Wordle strategies.

The set of strategies is closed: :class:`StrategyKind` names each one and
:func:`create_strategy` builds an instance from a kind.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from strategy import Strategy
from strategies.entropy_strat import EntropyGuesser
from strategies.heuristic_strat import HeuristicGuesser
from strategies.random_strat import RandomGuesser
from strategies.random_updates_strat import RandomWithUpdates

__all__ = [
    "EntropyGuesser",
    "HeuristicGuesser",
    "RandomGuesser",
    "RandomWithUpdates",
    "StrategyKind",
    "create_strategy",
]


class StrategyKind(Enum):
    RANDOM = "random"
    RANDOM_UPDATES = "random-updates"
    HEURISTIC = "heuristic"
    ENTROPY = "entropy"

    @classmethod
    def parse(cls, value: str) -> StrategyKind:
        try:
            return cls(value.lower())
        except ValueError:
            available = ", ".join(k.value for k in cls)
            raise ValueError(
                f"unknown strategy {value!r} (available: {available})"
            ) from None


# Cheap enough to simulate thousands of games by default
FAST_KINDS = (StrategyKind.RANDOM, StrategyKind.RANDOM_UPDATES, StrategyKind.HEURISTIC)


def create_strategy(
    kind: StrategyKind,
    vocabulary: Sequence[str],
    seed: int | None = None,
    entropy_workers: int | None = None,
) -> Strategy:
    """Build a fresh strategy of the given *kind* over *vocabulary*.

    *seed* only affects the random strategies and *entropy_workers* only
    the entropy strategy.
    """
    if kind is StrategyKind.RANDOM:
        return RandomGuesser(vocabulary, seed=seed)
    if kind is StrategyKind.RANDOM_UPDATES:
        return RandomWithUpdates(vocabulary, seed=seed)
    if kind is StrategyKind.HEURISTIC:
        return HeuristicGuesser(vocabulary)
    if kind is StrategyKind.ENTROPY:
        return EntropyGuesser(vocabulary, max_workers=entropy_workers)
    raise ValueError(f"unknown strategy kind: {kind!r}")
