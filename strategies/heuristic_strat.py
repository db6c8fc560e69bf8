"""Heuristic strategy: favour letters present in about half the candidates."""

from __future__ import annotations

import math
from collections import Counter
from typing import Iterable, Mapping, Sequence

from strategy import KnowledgeStrategy


def binary_entropy(p: float) -> float:
    """Entropy in bits of a yes/no event with probability *p*."""
    if p <= 0.0 or p >= 1.0:
        return 0.0
    q = 1.0 - p
    return -(p * math.log2(p) + q * math.log2(q))


class HeuristicGuesser(KnowledgeStrategy):
    """Score candidates by the letter-presence entropy of their distinct letters.

    Each letter is treated independently: a letter contained in a fraction
    ``p`` of the candidates splits them with ``binary_entropy(p)`` bits, so
    letters in ~50% of candidates are worth the most and letters in all or
    none of them are worth nothing.  This is a cheap stand-in for the exact
    partition entropy used by :class:`EntropyGuesser`.
    """

    @property
    def name(self) -> str:
        return "Heuristic"

    @staticmethod
    def letter_frequencies(candidates: Sequence[str]) -> dict[str, float]:
        """Fraction of *candidates* containing each letter at least once."""
        counts: Counter[str] = Counter()
        for w in candidates:
            counts.update(set(w))
        total = len(candidates)
        return {letter: c / total for letter, c in counts.items()}

    @staticmethod
    def score_word(word: Iterable[str], frequencies: Mapping[str, float]) -> float:
        # Repeated letters carry no extra presence information
        return sum(binary_entropy(frequencies.get(c, 0.0)) for c in set(word))

    def make_guess(self) -> str | None:
        candidates = self.candidates()
        if not candidates:
            return None

        freqs = self.letter_frequencies(candidates)
        best_guess = candidates[0]
        best_score = -1.0
        for w in candidates:
            s = self.score_word(w, freqs)
            if s > best_score:
                best_score = s
                best_guess = w
        return best_guess
