"""Abstract base classes for Wordle strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Sequence

from knowledge import ALPHABET, DEFAULT_WORD_LENGTH, Knowledge
from wordle_env import LetterStatus


class Strategy(ABC):
    """Interface that every Wordle strategy implements.

    A strategy is built once over a word list and then driven by a front
    end: ``make_guess`` -> play the word -> ``update`` (or ``mark_invalid``
    if the game rejected it) -> ``make_guess`` ...  ``reset`` starts a new
    puzzle.  Instances are not thread-safe; the word list is shared
    read-only and never copied.

    Parameters
    ----------
    vocabulary : sequence of str
        All words the strategy may suggest.  Tuples are kept as-is so many
        strategies can share one list.
    """

    def __init__(self, vocabulary: Sequence[str]) -> None:
        self._words: tuple[str, ...] = (
            vocabulary if isinstance(vocabulary, tuple) else tuple(vocabulary)
        )
        self._invalid: set[str] = set()

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable strategy name (used in reports)."""
        ...

    @property
    def words(self) -> tuple[str, ...]:
        return self._words

    @abstractmethod
    def make_guess(self) -> str | None:
        """Return the next guess, or None when no candidate is left."""
        ...

    def update(self, guess: str, pattern: Sequence[LetterStatus]) -> None:
        """Incorporate feedback for a guess that was played.

        The default implementation ignores feedback.
        """

    def mark_invalid(self, word: str) -> None:
        """Never suggest *word* again during this puzzle."""
        self._invalid.add(word)

    def is_invalid(self, word: str) -> bool:
        return word in self._invalid

    def reset(self) -> None:
        """Forget everything learned during the current puzzle."""
        self._invalid.clear()


class KnowledgeStrategy(Strategy):
    """Base for strategies that narrow the word list with :class:`Knowledge`."""

    def __init__(
        self,
        vocabulary: Sequence[str],
        word_length: int = DEFAULT_WORD_LENGTH,
        alphabet: Iterable[str] = ALPHABET,
    ) -> None:
        super().__init__(vocabulary)
        self._word_length = word_length
        self._alphabet = tuple(alphabet)
        self._knowledge = Knowledge(word_length, self._alphabet)

    @property
    def knowledge(self) -> Knowledge:
        return self._knowledge

    def candidates(self) -> list[str]:
        """Words that match Knowledge and were not rejected, in list order."""
        return list(self._knowledge.filter(
            w for w in self._words if w not in self._invalid
        ))

    def update(self, guess: str, pattern: Sequence[LetterStatus]) -> None:
        self._knowledge.update(guess, pattern)

    def reset(self) -> None:
        super().reset()
        self._knowledge = Knowledge(self._word_length, self._alphabet)
