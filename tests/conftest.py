from __future__ import annotations

import pytest

from wordle_env import LetterStatus

C = LetterStatus.CORRECT
M = LetterStatus.MISPLACED
A = LetterStatus.ABSENT


@pytest.fixture
def small_words() -> tuple[str, ...]:
    return ("apple", "about", "hello")


@pytest.fixture
def words() -> tuple[str, ...]:
    return (
        "crane", "slate", "about", "apple", "hello", "world", "tests",
        "eerie", "geese", "llama", "mamma", "sassy", "nanny", "radar",
        "abaca", "axaxa", "aayaa", "stare", "tears", "rates", "aster",
        "lemon", "melon", "solar", "roast",
    )
