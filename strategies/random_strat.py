"""Random strategy: draw words without replacement, ignoring feedback."""

from __future__ import annotations

import random
from typing import Sequence

from strategy import Strategy


class RandomGuesser(Strategy):
    """Guess a random unused word from the full list.

    This is the baseline that informed strategies are measured against:
    feedback is never looked at, so each word is tried at most once.
    """

    def __init__(self, vocabulary: Sequence[str], seed: int | None = None) -> None:
        super().__init__(vocabulary)
        self._rng = random.Random(seed)
        self._pool = list(range(len(self._words)))

    @property
    def name(self) -> str:
        return "Random"

    def make_guess(self) -> str | None:
        pool = self._pool
        while pool:
            # Swap-remove keeps each draw O(1)
            i = self._rng.randrange(len(pool))
            pool[i], pool[-1] = pool[-1], pool[i]
            word = self._words[pool.pop()]
            if word not in self._invalid:
                return word
        return None

    def reset(self) -> None:
        super().reset()
        self._pool = list(range(len(self._words)))
