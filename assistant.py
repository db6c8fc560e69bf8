#!/usr/bin/env python3
"""Interactive Wordle assistant for the terminal.

Play the suggested word in any Wordle game, then type the colours you got
back, one letter per tile:

    c or g   correct (green)
    m or y   misplaced (yellow)
    a, b, x or .   absent (gray)

Other commands: ``n`` (the game rejected the word), ``r`` (new puzzle),
``q`` (quit).
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from lexicon import LANGUAGES, load_lexicon
from strategies import StrategyKind, create_strategy
from strategy import KnowledgeStrategy, Strategy
from wordle_env import LetterStatus, Pattern, format_pattern, is_win

_SYMBOLS = {
    "c": LetterStatus.CORRECT,
    "g": LetterStatus.CORRECT,
    "m": LetterStatus.MISPLACED,
    "y": LetterStatus.MISPLACED,
    "a": LetterStatus.ABSENT,
    "b": LetterStatus.ABSENT,
    "x": LetterStatus.ABSENT,
    ".": LetterStatus.ABSENT,
}


def parse_feedback(text: str, word_length: int = 5) -> Pattern:
    """Parse a typed feedback row such as ``"cmaaa"`` or ``"G Y . . ."``."""
    cells = "".join(text.split()).lower()
    if len(cells) != word_length:
        raise ValueError(
            f"expected {word_length} feedback symbols, got {len(cells)}"
        )
    try:
        return tuple(_SYMBOLS[c] for c in cells)
    except KeyError as exc:
        raise ValueError(f"unknown feedback symbol {exc.args[0]!r}") from None


class Assistant:
    """Keeps one strategy and its recommendation in step with the user."""

    def __init__(self, strategy: Strategy) -> None:
        self.strategy = strategy
        self.history: list[tuple[str, Pattern]] = []
        self.solved = False
        self.recommendation = strategy.make_guess()

    def submit(self, pattern: Pattern) -> str | None:
        """Record feedback for the current recommendation and get the next one."""
        word = self.recommendation
        if word is None:
            raise RuntimeError("no recommendation to give feedback on")
        self.history.append((word, pattern))
        if is_win(pattern):
            self.solved = True
            self.recommendation = None
            return None
        self.strategy.update(word, pattern)
        self.recommendation = self.strategy.make_guess()
        return self.recommendation

    def reject(self) -> str | None:
        """The game refused the current recommendation; suggest another."""
        if self.recommendation is not None:
            self.strategy.mark_invalid(self.recommendation)
        self.recommendation = self.strategy.make_guess()
        return self.recommendation

    def new_game(self) -> str | None:
        self.strategy.reset()
        self.history = []
        self.solved = False
        self.recommendation = self.strategy.make_guess()
        return self.recommendation

    def remaining(self) -> int | None:
        """Number of words still consistent with the feedback, if tracked."""
        if isinstance(self.strategy, KnowledgeStrategy):
            return len(self.strategy.candidates())
        return None


def _show_state(assistant: Assistant) -> None:
    for word, pat in assistant.history:
        print(f"  {word.upper()}  {format_pattern(pat)}")
    if assistant.solved:
        print(f"Solved in {len(assistant.history)} guesses! "
              "Type r for a new puzzle or q to quit.")
        return
    if assistant.recommendation is None:
        print("No more words to suggest. Check the feedback you entered, "
              "or type r for a new puzzle.")
        return
    left = assistant.remaining()
    extra = f"  ({left} candidates left)" if left is not None else ""
    print(f"Try: {assistant.recommendation.upper()}{extra}")


def run(assistant: Assistant, lines, word_length: int = 5) -> None:
    """Drive *assistant* from an iterable of input lines."""
    _show_state(assistant)
    for raw in lines:
        line = raw.strip().lower()
        if not line:
            continue
        if line in ("q", "quit", "exit"):
            break
        if line in ("r", "reset"):
            assistant.new_game()
        elif line in ("n", "not in list"):
            if assistant.recommendation is not None:
                print(f"Marked {assistant.recommendation.upper()} as not in the list")
            assistant.reject()
        else:
            if assistant.recommendation is None:
                print("Nothing to give feedback on.", file=sys.stderr)
                continue
            try:
                pattern = parse_feedback(line, word_length)
            except ValueError as exc:
                print(f"error: {exc}", file=sys.stderr)
                continue
            assistant.submit(pattern)
        _show_state(assistant)


def _lines():
    while True:
        try:
            yield input("> ")
        except EOFError:
            return


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Wordle assistant: suggests guesses from your feedback",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("-a", "--ai", type=StrategyKind.parse, default=StrategyKind.HEURISTIC,
                        metavar="STRATEGY",
                        help="random, random-updates, heuristic or entropy "
                             "(default: heuristic)")
    parser.add_argument("-l", "--language", choices=LANGUAGES, default="en",
                        help="Bundled word list (default: en)")
    parser.add_argument("--words", type=str, default=None, help="Path to word list")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the random strategies")
    args = parser.parse_args(argv)

    try:
        lex = load_lexicon(path=args.words, language=args.language)
    except (FileNotFoundError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)

    strat = create_strategy(args.ai, lex.words, seed=args.seed)
    print(f"{strat.name} strategy over {len(lex)} words. "
          "Enter feedback like 'cmaaa' (c=correct, m=misplaced, a=absent), "
          "n = not in list, r = new puzzle, q = quit.")
    run(Assistant(strat), _lines())


if __name__ == "__main__":
    main()
