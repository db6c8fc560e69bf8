"""Random strategy that only draws from words consistent with feedback."""

from __future__ import annotations

import random
from typing import Iterable, Sequence

from knowledge import ALPHABET, DEFAULT_WORD_LENGTH
from strategy import KnowledgeStrategy


class RandomWithUpdates(KnowledgeStrategy):
    """Guess a random word from the remaining candidates."""

    def __init__(
        self,
        vocabulary: Sequence[str],
        seed: int | None = None,
        word_length: int = DEFAULT_WORD_LENGTH,
        alphabet: Iterable[str] = ALPHABET,
    ) -> None:
        super().__init__(vocabulary, word_length, alphabet)
        self._rng = random.Random(seed)

    @property
    def name(self) -> str:
        return "RandomUpdates"

    def make_guess(self) -> str | None:
        # Re-filter from scratch (simple & correct)
        candidates = self.candidates()
        if not candidates:
            return None
        return self._rng.choice(candidates)
