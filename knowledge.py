"""Cumulative constraint store built from (guess, feedback) pairs."""

from __future__ import annotations

import string
from collections import Counter
from typing import Iterable, Iterator, Sequence

from wordle_env import LetterStatus

ALPHABET = string.ascii_lowercase
DEFAULT_WORD_LENGTH = 5


class Knowledge:
    """What is known about the hidden word so far.

    Attributes
    ----------
    possible : list[set[str]]
        For each position, the letters still permitted there.
    min_count : dict[str, int]
        Lower bound on the number of occurrences of each letter that has
        been seen as correct or misplaced.  Upper bounds are never stored.
    fixed : list[bool]
        Positions pinned by a correct observation.
    """

    def __init__(
        self,
        word_length: int = DEFAULT_WORD_LENGTH,
        alphabet: Iterable[str] = ALPHABET,
    ) -> None:
        letters = frozenset(alphabet)
        self.word_length = word_length
        self.possible: list[set[str]] = [set(letters) for _ in range(word_length)]
        self.min_count: dict[str, int] = {}
        self.fixed: list[bool] = [False] * word_length

    def update(self, guess: str, pattern: Sequence[LetterStatus]) -> None:
        """Fold the feedback for one played guess into the constraints."""
        # Occurrences of each letter confirmed by this guess alone
        positive: Counter[str] = Counter(
            letter
            for letter, status in zip(guess, pattern)
            if status != LetterStatus.ABSENT
        )

        for pos, (letter, status) in enumerate(zip(guess, pattern)):
            if status == LetterStatus.CORRECT:
                self.possible[pos] = {letter}
                self.fixed[pos] = True
            elif status == LetterStatus.MISPLACED:
                self.possible[pos].discard(letter)
            elif positive[letter] == 0:
                # Not in the word at all; pinned positions keep their letter
                for p in range(self.word_length):
                    if not self.fixed[p]:
                        self.possible[p].discard(letter)
            else:
                # Extra copy of a letter that does occur: only rules out here
                self.possible[pos].discard(letter)

        for letter, count in positive.items():
            if count > self.min_count.get(letter, 0):
                self.min_count[letter] = count

    def matches(self, word: str) -> bool:
        """Return True if *word* is consistent with everything known."""
        for letter, allowed in zip(word, self.possible):
            if letter not in allowed:
                return False
        for letter, count in self.min_count.items():
            if word.count(letter) < count:
                return False
        return True

    def filter(self, words: Iterable[str]) -> Iterator[str]:
        """Yield the words that match, in input order."""
        return (w for w in words if self.matches(w))

    def copy(self) -> Knowledge:
        clone = Knowledge.__new__(Knowledge)
        clone.word_length = self.word_length
        clone.possible = [set(s) for s in self.possible]
        clone.min_count = dict(self.min_count)
        clone.fixed = list(self.fixed)
        return clone

    def __repr__(self) -> str:
        cells = [
            "".join(sorted(s)) if len(s) <= 3 else f"<{len(s)}>"
            for s in self.possible
        ]
        return (
            f"Knowledge(possible={cells}, min_count={self.min_count}, "
            f"fixed={self.fixed})"
        )
