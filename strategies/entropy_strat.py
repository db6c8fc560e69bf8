"""Entropy strategy: maximise expected information gain per guess.

Every allowed word is scored against the current candidate set by the
Shannon entropy of the feedback partition it would produce.  The scan is
O(words x candidates) feedback evaluations per turn, so it can be split
into chunks and run on a process pool; the reduction keeps the first
maximum in word-list order, making the parallel answer identical to the
sequential one.
"""

from __future__ import annotations

import os
from collections import defaultdict
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Iterable, Sequence

import numpy as np

from knowledge import ALPHABET, DEFAULT_WORD_LENGTH
from strategy import KnowledgeStrategy
from wordle_env import encode_pattern, feedback

# Below this many candidates the answer itself is the best guess
_SHORT_CIRCUIT = 2
_MIN_CHUNK = 50


def guess_entropy(guess: str, candidates: Sequence[str]) -> float:
    """Entropy in bits of the feedback partition *guess* induces on *candidates*."""
    partition: dict[int, int] = defaultdict(int)
    for c in candidates:
        partition[encode_pattern(feedback(c, guess))] += 1

    counts = np.fromiter(partition.values(), dtype=np.float64, count=len(partition))
    p = counts / len(candidates)
    return float(-np.sum(p * np.log2(p)))


def _eval_chunk(args):
    """Worker: best (index, word, entropy) within one slice of the guess pool."""
    indexed, candidates = args
    best = (-1, None, -1.0)
    for idx, g in indexed:
        ent = guess_entropy(g, candidates)
        if ent > best[2]:
            best = (idx, g, ent)
    return best


class EntropyGuesser(KnowledgeStrategy):
    """Select the guess that maximises Shannon entropy of the feedback partition.

    Parameters
    ----------
    vocabulary : sequence of str
        Allowed guesses; also the universe candidates are drawn from.
    max_workers : int or None
        Processes used for the per-turn scan.  ``None`` or ``1`` scans
        in-process; ``0`` means one per CPU core.
    """

    def __init__(
        self,
        vocabulary: Sequence[str],
        max_workers: int | None = None,
        word_length: int = DEFAULT_WORD_LENGTH,
        alphabet: Iterable[str] = ALPHABET,
    ) -> None:
        super().__init__(vocabulary, word_length, alphabet)
        if max_workers == 0:
            max_workers = os.cpu_count() or 1
        self._max_workers = max_workers

    @property
    def name(self) -> str:
        return "Entropy"

    def make_guess(self) -> str | None:
        candidates = self.candidates()
        if not candidates:
            return None
        # At most one bit is left to learn; guessing a candidate may win outright
        if len(candidates) <= _SHORT_CIRCUIT:
            return candidates[0]

        pool = [
            (i, w) for i, w in enumerate(self._words) if w not in self._invalid
        ]
        if self._max_workers and self._max_workers > 1 and len(pool) > _MIN_CHUNK:
            return self._scan_parallel(pool, candidates)
        return _eval_chunk((pool, candidates))[1]

    def _scan_parallel(self, pool, candidates: list[str]) -> str | None:
        workers = self._max_workers
        chunk_size = max(_MIN_CHUNK, len(pool) // (workers * 4))
        chunks = [pool[i:i + chunk_size] for i in range(0, len(pool), chunk_size)]

        best = (-1, None, -1.0)
        with ProcessPoolExecutor(max_workers=workers) as executor:
            futs = [executor.submit(_eval_chunk, (ch, candidates)) for ch in chunks]
            for fut in as_completed(futs):
                idx, g, ent = fut.result()
                if g is None:
                    continue
                if ent > best[2] or (ent == best[2] and idx < best[0]):
                    best = (idx, g, ent)
        return best[1]
