"""Wordle environment: feedback oracle and a single game session."""

from __future__ import annotations

import random
from collections import Counter
from enum import IntEnum
from typing import Iterable

MAX_GUESSES = 6


class LetterStatus(IntEnum):
    """Per-position feedback for one guessed letter.

    The integer values double as the digits of :func:`encode_pattern`.
    """

    ABSENT = 0      # gray: not present, or already consumed by greens/yellows
    MISPLACED = 1   # yellow: present, but not at this position
    CORRECT = 2     # green: correct letter, correct position


Pattern = tuple[LetterStatus, ...]


class WordNotInListError(ValueError):
    """Raised when a guess is not in the game's dictionary."""

    def __init__(self, word: str) -> None:
        super().__init__(f"{word!r} is not in the word list")
        self.word = word


def feedback(secret: str, guess: str) -> Pattern:
    """Score *guess* against *secret*, one :class:`LetterStatus` per tile.

    Exact hits claim their secret letters first.  Whatever the hits leave
    over is then handed out to the other guess letters in reading order,
    so a repeated letter turns gray once the secret has no copies left.
    """
    if len(guess) != len(secret):
        raise ValueError(
            f"cannot score a {len(guess)}-letter guess "
            f"against a {len(secret)}-letter secret"
        )

    hits = [s == g for s, g in zip(secret, guess)]
    unclaimed = Counter(s for s, hit in zip(secret, hits) if not hit)

    tiles = []
    for g, hit in zip(guess, hits):
        if hit:
            tiles.append(LetterStatus.CORRECT)
        elif unclaimed[g] > 0:
            unclaimed[g] -= 1
            tiles.append(LetterStatus.MISPLACED)
        else:
            tiles.append(LetterStatus.ABSENT)
    return tuple(tiles)


def is_win(pattern: Iterable[LetterStatus]) -> bool:
    return all(s == LetterStatus.CORRECT for s in pattern)


def encode_pattern(pattern: Iterable[int]) -> int:
    """Encode a feedback pattern as a single integer for fast hashing."""
    val = 0
    for i, c in enumerate(pattern):
        val += int(c) * (3 ** i)
    return val


_EMOJI = {
    LetterStatus.CORRECT: "\U0001f7e9",
    LetterStatus.MISPLACED: "\U0001f7e8",
    LetterStatus.ABSENT: "⬛",
}


def format_pattern(pattern: Iterable[LetterStatus]) -> str:
    return "".join(_EMOJI[LetterStatus(c)] for c in pattern)


class WordleEnv:
    """A single Wordle game.

    Parameters
    ----------
    vocabulary : sequence of str
        The game's dictionary (all words must have the same length).
        Secrets are drawn from it and guesses outside it are rejected.
    word_length : int
        Expected word length (validated against vocabulary).
    max_guesses : int
        Maximum allowed guesses before the game is lost.
    rng : random.Random or None
        Source for picking random secrets.
    """

    def __init__(
        self,
        vocabulary: Iterable[str],
        word_length: int = 5,
        max_guesses: int = MAX_GUESSES,
        rng: random.Random | None = None,
    ) -> None:
        vocab = list(vocabulary)
        bad = [w for w in vocab if len(w) != word_length]
        if bad:
            raise ValueError(
                f"Words with wrong length (expected {word_length}): {bad[:5]}"
            )
        if not vocab:
            raise ValueError("vocabulary is empty")
        self._vocab = vocab
        self._vocab_set = set(vocab)
        self._word_length = word_length
        self._max_guesses = max_guesses
        self._rng = rng or random.Random()

        # Game state (set by reset)
        self._secret: str | None = None
        self._history: list[tuple[str, Pattern]] = []
        self._solved = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def reset(self, secret: str | None = None) -> None:
        """Begin a fresh game with *secret*, or with a random dictionary word."""
        if secret is not None and secret not in self._vocab_set:
            raise ValueError(f"secret {secret!r} is not in vocabulary")
        self._secret = secret if secret is not None else self._rng.choice(self._vocab)
        self._history = []
        self._solved = False

    def guess(self, word: str) -> Pattern:
        """Submit a guess and receive feedback.

        A word rejected by the dictionary does not use up an attempt.

        Raises
        ------
        RuntimeError
            If no game was started or the game is over.
        ValueError
            If *word* has the wrong length.
        WordNotInListError
            If *word* is not in the vocabulary.
        """
        if self._secret is None:
            raise RuntimeError("no game started; call reset() first")
        if self.game_over():
            raise RuntimeError("this game has finished")
        word = word.lower()
        if len(word) != self._word_length:
            raise ValueError(
                f"expected a {self._word_length}-letter guess, got {word!r}"
            )
        if word not in self._vocab_set:
            raise WordNotInListError(word)

        pat = feedback(self._secret, word)
        self._history.append((word, pat))
        if word == self._secret:
            self._solved = True
        return pat

    def is_solved(self) -> bool:
        return self._solved

    def remaining_guesses(self) -> int:
        return self._max_guesses - len(self._history)

    def game_over(self) -> bool:
        return self._solved or len(self._history) >= self._max_guesses

    @property
    def history(self) -> list[tuple[str, Pattern]]:
        return list(self._history)

    @property
    def secret(self) -> str:
        """The hidden word, readable once the game has ended."""
        if self._secret is None:
            raise RuntimeError("No game in progress")
        if not self.game_over():
            raise RuntimeError("Game is still in progress")
        return self._secret

    @property
    def word_length(self) -> int:
        return self._word_length

    @property
    def max_guesses(self) -> int:
        return self._max_guesses
