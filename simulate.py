#!/usr/bin/env python3
"""Simulate many games per strategy and compare them.

Features:
  - Every game is played by a freshly built strategy over a shared,
    read-only word list.
  - Runs strategies in parallel (one process per strategy).
  - Outputs summary table, CSV, JSON, and histogram.
"""

from __future__ import annotations

import argparse
import json
import csv
import os
import random
import sys
import time as _time_mod
from collections import defaultdict
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Sequence

from lexicon import LANGUAGES, load_lexicon
from strategies import FAST_KINDS, StrategyKind, create_strategy
from strategy import Strategy
from wordle_env import MAX_GUESSES, WordleEnv, WordNotInListError, is_win

RESULTS_DIR = Path(__file__).resolve().parent / "results"
PROGRESS_EVERY = 100


@dataclass(frozen=True)
class SimulationConfig:
    """Parameters shared by every game of a simulation run.

    Attributes
    ----------
    vocabulary : tuple[str, ...]
        Words the strategies may suggest.
    game_vocabulary : tuple[str, ...] or None
        The game's dictionary (secrets and accepted guesses).  None means
        the same as *vocabulary*; a smaller list makes the game reject
        some suggestions, exercising ``mark_invalid``.
    num_games : int
        Number of secrets to play; each strategy plays all of them.
    max_guesses : int
        Attempts per game.
    seed : int
        Seeds secret selection and the random strategies.
    max_workers : int or None
        Worker processes (default: one per strategy, capped at CPU count).
    entropy_workers : int or None
        Processes used inside the entropy strategy's per-turn scan.
    """

    vocabulary: tuple[str, ...]
    game_vocabulary: tuple[str, ...] | None = None
    num_games: int = 1000
    max_guesses: int = MAX_GUESSES
    seed: int = 42
    max_workers: int | None = None
    entropy_workers: int | None = None

    @property
    def dictionary(self) -> tuple[str, ...]:
        return self.game_vocabulary if self.game_vocabulary is not None else self.vocabulary


# ------------------------------------------------------------------
# Result containers
# ------------------------------------------------------------------

@dataclass
class GameResult:
    strategy: str
    secret: str
    num_guesses: int
    solved: bool


@dataclass
class StrategyStats:
    name: str
    wins: int = 0
    losses: int = 0
    total_guesses: int = 0
    guess_distribution: dict[int, int] = field(default_factory=dict)

    def record_win(self, num_guesses: int) -> None:
        self.wins += 1
        self.total_guesses += num_guesses
        self.guess_distribution[num_guesses] = self.guess_distribution.get(num_guesses, 0) + 1

    def record_loss(self) -> None:
        self.losses += 1

    @property
    def games(self) -> int:
        return self.wins + self.losses

    @property
    def win_rate(self) -> float:
        """Percentage of games won."""
        return 100.0 * self.wins / self.games if self.games else 0.0

    @property
    def avg_guesses(self) -> float:
        """Mean guesses over won games only."""
        return self.total_guesses / self.wins if self.wins else 0.0

    @property
    def min_guesses(self) -> int | None:
        return min(self.guess_distribution) if self.guess_distribution else None

    @property
    def max_guesses(self) -> int | None:
        return max(self.guess_distribution) if self.guess_distribution else None


@dataclass
class SimulationResults:
    games: list[GameResult] = field(default_factory=list)

    def stats(self) -> dict[str, StrategyStats]:
        by_strat: dict[str, StrategyStats] = {}
        for g in self.games:
            st = by_strat.setdefault(g.strategy, StrategyStats(g.strategy))
            if g.solved:
                st.record_win(g.num_guesses)
            else:
                st.record_loss()
        return by_strat

    def to_csv(self, path: str | Path) -> None:
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        with p.open("w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(["strategy", "secret", "num_guesses", "solved"])
            for g in self.games:
                writer.writerow([g.strategy, g.secret, g.num_guesses, int(g.solved)])

    def print_summary(self) -> None:
        print(f"\n{'Strategy':<25} {'Games':>6} {'Wins':>6} {'Rate':>7} "
              f"{'Avg':>6} {'Min':>4} {'Max':>4}")
        print("-" * 64)
        # Best win rate first, then fewest guesses
        ranking = sorted(self.stats().values(), key=lambda s: (-s.win_rate, s.avg_guesses))
        for st in ranking:
            mn = st.min_guesses if st.min_guesses is not None else "-"
            mx = st.max_guesses if st.max_guesses is not None else "-"
            print(f"{st.name:<25} {st.games:>6} {st.wins:>6} {st.win_rate:>6.1f}% "
                  f"{st.avg_guesses:>6.2f} {mn:>4} {mx:>4}")
        print()

    def plot_histograms(self, path: str | Path | None = None) -> None:
        try:
            import matplotlib
            matplotlib.use("Agg")
            import matplotlib.pyplot as plt
        except ImportError:
            print("matplotlib not installed, skipping plot", file=sys.stderr)
            return

        stats = self.stats()
        names = sorted(stats)
        if not names:
            return

        cols = min(len(names), 4)
        rows = (len(names) + cols - 1) // cols
        fig, axes = plt.subplots(rows, cols, figsize=(5 * cols, 4 * rows), squeeze=False)
        max_guess = max(g.num_guesses for g in self.games)
        labels = list(range(1, max_guess + 1))

        for idx, name in enumerate(names):
            ax = axes[idx // cols][idx % cols]
            dist = stats[name].guess_distribution
            ax.bar(labels, [dist.get(n, 0) for n in labels], edgecolor="black")
            ax.set_title(f"{name} ({stats[name].win_rate:.1f}% won)", fontsize=10)
            ax.set_xlabel("Guesses")
            ax.set_ylabel("Wins")

        # Hide unused axes
        for idx in range(len(names), rows * cols):
            axes[idx // cols][idx % cols].set_visible(False)

        fig.suptitle("Guess distribution by strategy")
        fig.tight_layout()
        dest = Path(path) if path else RESULTS_DIR / "simulation_histograms.png"
        dest.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(dest, dpi=150)
        plt.close(fig)
        print(f"Histogram saved to {dest}")

    def to_json(self, path: str | Path, config: dict | None = None) -> None:
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        summary = {}
        for name, st in self.stats().items():
            summary[name] = {
                "wins": st.wins,
                "losses": st.losses,
                "win_rate": round(st.win_rate, 2),
                "avg_guesses": round(st.avg_guesses, 3),
                "min_guesses": st.min_guesses,
                "max_guesses": st.max_guesses,
                "guess_distribution": {str(k): v for k, v in sorted(st.guess_distribution.items())},
            }
        data = {
            "timestamp": datetime.now().isoformat(),
            "config": config or {},
            "summary": summary,
            "games": [asdict(g) for g in self.games],
        }
        p.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")


# ------------------------------------------------------------------
# Playing
# ------------------------------------------------------------------

def play_game(strategy: Strategy, env: WordleEnv, secret: str) -> int | None:
    """Play one game; return the number of guesses on a win, else None.

    Words the game rejects are marked invalid and do not cost an attempt.
    """
    env.reset(secret=secret)
    while not env.game_over():
        word = strategy.make_guess()
        if word is None:
            return None
        try:
            pat = env.guess(word)
        except WordNotInListError:
            strategy.mark_invalid(word)
            continue
        if is_win(pat):
            return len(env.history)
        strategy.update(word, pat)
    return None


def _run_strategy_worker(
    kind: StrategyKind,
    config: SimulationConfig,
    secrets: list[str],
) -> list[GameResult]:
    """Play every secret with fresh strategies of one kind. Runs in a subprocess."""
    env = WordleEnv(config.dictionary, max_guesses=config.max_guesses)
    rng = random.Random(f"{config.seed}:{kind.value}")
    results: list[GameResult] = []

    for n, secret in enumerate(secrets, 1):
        strat = create_strategy(
            kind,
            config.vocabulary,
            seed=rng.randrange(2**32),
            entropy_workers=config.entropy_workers,
        )
        guesses = play_game(strat, env, secret)
        results.append(GameResult(
            strategy=strat.name,
            secret=secret,
            num_guesses=guesses if guesses is not None else len(env.history),
            solved=guesses is not None,
        ))
        if n % PROGRESS_EVERY == 0:
            print(f"  [{kind.value}] {n}/{len(secrets)}", file=sys.stderr, flush=True)

    return results


def draw_secrets(config: SimulationConfig) -> list[str]:
    """Secrets for the run; with replacement once the dictionary runs out."""
    rng = random.Random(config.seed)
    words = list(config.dictionary)
    if config.num_games <= len(words):
        return rng.sample(words, config.num_games)
    return [rng.choice(words) for _ in range(config.num_games)]


def run_simulation(
    config: SimulationConfig,
    kinds: Sequence[StrategyKind] = FAST_KINDS,
) -> SimulationResults:
    secrets = draw_secrets(config)
    results = SimulationResults()
    if not kinds:
        print("No strategies selected.", file=sys.stderr)
        return results

    max_workers = config.max_workers
    if max_workers is None:
        max_workers = min(len(kinds), os.cpu_count() or 4)

    print(f"Simulating {len(secrets)} games for "
          f"{', '.join(k.value for k in kinds)} (workers: {max_workers}) ...",
          flush=True)

    by_kind: dict[StrategyKind, list[GameResult]] = defaultdict(list)
    with ProcessPoolExecutor(max_workers=max_workers) as executor:
        futures = {
            executor.submit(_run_strategy_worker, kind, config, secrets): kind
            for kind in kinds
        }
        for fut in as_completed(futures):
            kind = futures[fut]
            try:
                game_results = fut.result()
            except Exception as exc:
                print(f"  {kind.value:<25} FAILED: {exc}", file=sys.stderr)
                continue
            by_kind[kind] = game_results
            won = sum(1 for g in game_results if g.solved)
            print(f"  {kind.value:<25} done: {won}/{len(game_results)} won")

    # Keep the requested order regardless of completion order
    for kind in kinds:
        results.games.extend(by_kind.get(kind, []))
    return results


# ------------------------------------------------------------------
# CLI
# ------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Simulate Wordle games and compare strategies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
examples:
  python simulate.py                                  # fast strategies, 1000 games
  python simulate.py --ai entropy --num-games 50      # entropy only
  python simulate.py --ai heuristic --ai entropy      # pick several
  python simulate.py --language de                    # German word list
""",
    )
    parser.add_argument("-n", "--num-games", type=int, default=1000,
                        help="Number of games to simulate (default: 1000)")
    parser.add_argument("-a", "--ai", action="append", default=None,
                        type=StrategyKind.parse, metavar="STRATEGY",
                        help="Strategy to test, repeatable "
                             "(default: random, random-updates, heuristic)")
    parser.add_argument("-l", "--language", choices=LANGUAGES, default="en",
                        help="Bundled word list (default: en)")
    parser.add_argument("--words", type=str, default=None,
                        help="Word list the strategies may suggest (.txt or .csv)")
    parser.add_argument("--game-words", type=str, default=None,
                        help="Dictionary the game accepts (default: same as --words)")
    parser.add_argument("--max-guesses", type=int, default=MAX_GUESSES,
                        help=f"Max guesses per game (default: {MAX_GUESSES})")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    parser.add_argument("--workers", type=int, default=None,
                        help="Parallel worker processes (default: auto)")
    parser.add_argument("--entropy-workers", type=int, default=None,
                        help="Processes for the entropy scan (0 = all cores)")
    parser.add_argument("--csv", type=str, default=None, help="Save per-game CSV")
    parser.add_argument("--json", type=str, default=None, help="Save results JSON")
    parser.add_argument("--plot", type=str, default=None, help="Save histogram PNG")
    args = parser.parse_args(argv)

    if args.num_games <= 0:
        print("--num-games must be positive", file=sys.stderr)
        sys.exit(1)

    try:
        lex = load_lexicon(path=args.words, language=args.language)
        game_lex = load_lexicon(path=args.game_words, language=args.language) \
            if args.game_words else None
    except (FileNotFoundError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)
    print(f"Vocabulary: {len(lex)} words ({lex.source.name})")

    kinds = args.ai or list(FAST_KINDS)
    config = SimulationConfig(
        vocabulary=lex.words,
        game_vocabulary=game_lex.words if game_lex else None,
        num_games=args.num_games,
        max_guesses=args.max_guesses,
        seed=args.seed,
        max_workers=args.workers,
        entropy_workers=args.entropy_workers,
    )

    t0 = _time_mod.time()
    results = run_simulation(config, kinds)
    elapsed = _time_mod.time() - t0

    results.print_summary()
    print(f"Elapsed: {elapsed:.1f}s")

    if args.csv:
        results.to_csv(args.csv)
        print(f"CSV saved to {args.csv}")
    if args.json:
        results.to_json(args.json, config={
            "language": lex.language,
            "num_games": args.num_games,
            "max_guesses": args.max_guesses,
            "seed": args.seed,
            "strategies": [k.value for k in kinds],
        })
        print(f"JSON saved to {args.json}")
    if args.plot:
        results.plot_histograms(args.plot)


if __name__ == "__main__":
    main()
