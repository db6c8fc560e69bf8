"""Word-list loading utilities.

Supports two formats:
  - Plain text: one word per line
  - CSV with a ``word`` column (other columns are ignored)

Bundled lists live in the ``wordlists`` package as
``wordlist-<language>.txt``; they are small samples, not full
dictionaries.  Loading is an explicit step: the result is an immutable
tuple that any number of strategies (and worker processes) can share
read-only.
"""

from __future__ import annotations

import csv
import re
import unicodedata
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

import wordlists

DATA_DIR = Path(wordlists.__file__).resolve().parent

LANGUAGES = ("en", "de")


def _strip_accents(text: str) -> str:
    nfkd = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in nfkd if unicodedata.category(ch) != "Mn")


# ------------------------------------------------------------------
# Lexicon dataclass
# ------------------------------------------------------------------

@dataclass(frozen=True)
class Lexicon:
    """A loaded word list.

    *language* is None when the words came from a user-supplied file.
    """
    words: tuple[str, ...]
    language: str | None
    source: Path
    _members: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_members", frozenset(self.words))

    def __len__(self) -> int:
        return len(self.words)

    def __contains__(self, word: object) -> bool:
        return word in self._members


# ------------------------------------------------------------------
# Loading
# ------------------------------------------------------------------

def normalize_words(raw: Iterable[str], word_length: int = 5) -> tuple[str, ...]:
    """Lowercase, strip accents, keep ``[a-z]{word_length}``, dedupe and sort."""
    pattern = re.compile(rf"^[a-z]{{{word_length}}}$")
    seen: set[str] = set()
    for r in raw:
        w = _strip_accents(r.strip().lower())
        if w and pattern.match(w):
            seen.add(w)
    return tuple(sorted(seen))


def _read_txt(path: Path) -> list[str]:
    return path.read_text(encoding="utf-8").splitlines()


def _read_csv(path: Path) -> list[str]:
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        if reader.fieldnames is None or "word" not in reader.fieldnames:
            raise ValueError(f"{path}: CSV word lists need a 'word' column")
        return [row["word"] or "" for row in reader]


def default_path(language: str) -> Path:
    if language not in LANGUAGES:
        raise ValueError(
            f"language must be one of {', '.join(LANGUAGES)}, got {language!r}"
        )
    return DATA_DIR / f"wordlist-{language}.txt"


def load_lexicon(
    path: str | Path | None = None,
    word_length: int = 5,
    language: str = "en",
) -> Lexicon:
    """Load a word list.

    Parameters
    ----------
    path : str, Path or None
        Path to a ``.txt`` (one word/line) or ``.csv`` (``word`` column).
        None falls back to the bundled list for *language*.
    word_length : int
        Only keep words of this exact length.
    language : ``"en"`` or ``"de"``
        Bundled list to use when *path* is None.  The returned lexicon
        records the language only for bundled lists.

    Returns
    -------
    Lexicon
    """
    src = Path(path) if path is not None else default_path(language)
    if not src.exists():
        raise FileNotFoundError(f"Word list not found: {src}")

    raw = _read_csv(src) if src.suffix == ".csv" else _read_txt(src)
    words = normalize_words(raw, word_length)
    if not words:
        raise ValueError(f"No {word_length}-letter words found in {src}")

    return Lexicon(
        words=words,
        language=language if path is None else None,
        source=src,
    )
