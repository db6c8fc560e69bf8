from __future__ import annotations

import pytest

from strategies import (
    EntropyGuesser,
    HeuristicGuesser,
    RandomGuesser,
    RandomWithUpdates,
    StrategyKind,
    create_strategy,
)
from strategies import entropy_strat
from strategies.heuristic_strat import binary_entropy
from wordle_env import feedback

from conftest import A, C

ALL_KINDS = list(StrategyKind)


# ------------------------------------------------------------------
# Shared contract
# ------------------------------------------------------------------

@pytest.mark.parametrize("kind", ALL_KINDS)
def test_guess_comes_from_word_list(kind, words):
    strat = create_strategy(kind, words, seed=1)
    assert strat.make_guess() in words


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_exhaustion_returns_none(kind):
    strat = create_strategy(kind, ("apple", "about"), seed=1)
    strat.mark_invalid("apple")
    strat.mark_invalid("about")
    assert strat.make_guess() is None


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_invalid_word_never_suggested(kind):
    words = ("apple", "about")
    strat = create_strategy(kind, words, seed=5)
    strat.mark_invalid("apple")
    assert strat.make_guess() == "about"


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_word_list_is_shared_not_copied(kind, words):
    strat = create_strategy(kind, words)
    assert strat.words is words


@pytest.mark.parametrize(
    "kind", [StrategyKind.RANDOM_UPDATES, StrategyKind.HEURISTIC, StrategyKind.ENTROPY]
)
def test_reset_matches_fresh_instance(kind, words):
    strat = create_strategy(kind, words, seed=3)
    strat.update("crane", feedback("slate", "crane"))
    strat.mark_invalid("slate")
    strat.reset()

    fresh = create_strategy(kind, words, seed=3)
    assert strat.candidates() == fresh.candidates() == list(words)
    if kind is not StrategyKind.RANDOM_UPDATES:
        assert strat.make_guess() == fresh.make_guess()


@pytest.mark.parametrize(
    "kind", [StrategyKind.RANDOM_UPDATES, StrategyKind.HEURISTIC, StrategyKind.ENTROPY]
)
def test_filtering_apple_leaves_about(kind, small_words):
    strat = create_strategy(kind, small_words, seed=0)
    strat.update("apple", (C, A, A, A, A))
    assert strat.candidates() == ["about"]
    assert strat.make_guess() == "about"


@pytest.mark.parametrize(
    "kind", [StrategyKind.RANDOM_UPDATES, StrategyKind.HEURISTIC, StrategyKind.ENTROPY]
)
def test_make_guess_does_not_touch_knowledge(kind, words):
    strat = create_strategy(kind, words, seed=0)
    strat.update("crane", feedback("stare", "crane"))
    before = repr(strat.knowledge)
    strat.make_guess()
    assert repr(strat.knowledge) == before


@pytest.mark.parametrize("kind", [StrategyKind.RANDOM_UPDATES, StrategyKind.HEURISTIC])
def test_solves_every_secret_eventually(kind, words):
    for secret in words:
        strat = create_strategy(kind, words, seed=11)
        for _ in range(len(words)):
            guess = strat.make_guess()
            assert guess is not None
            if guess == secret:
                break
            strat.update(guess, feedback(secret, guess))
        else:
            pytest.fail(f"{kind.value} never guessed {secret}")


def test_create_strategy_classes(words):
    assert isinstance(create_strategy(StrategyKind.RANDOM, words), RandomGuesser)
    assert isinstance(create_strategy(StrategyKind.RANDOM_UPDATES, words), RandomWithUpdates)
    assert isinstance(create_strategy(StrategyKind.HEURISTIC, words), HeuristicGuesser)
    assert isinstance(create_strategy(StrategyKind.ENTROPY, words), EntropyGuesser)


def test_strategy_kind_parse():
    assert StrategyKind.parse("Random-Updates") is StrategyKind.RANDOM_UPDATES
    with pytest.raises(ValueError, match="unknown strategy"):
        StrategyKind.parse("genetic")


# ------------------------------------------------------------------
# RandomGuesser
# ------------------------------------------------------------------

def test_random_draws_without_replacement():
    words = ("hello", "world", "tests")
    strat = RandomGuesser(words, seed=42)
    drawn = [strat.make_guess() for _ in range(3)]
    assert sorted(drawn) == sorted(words)
    assert strat.make_guess() is None


def test_random_ignores_feedback():
    words = ("hello", "world", "tests")
    strat = RandomGuesser(words, seed=42)
    first = strat.make_guess()
    strat.update(first, (A,) * 5)
    assert strat.make_guess() is not None


def test_random_reset_refills_pool():
    words = ("hello", "world")
    strat = RandomGuesser(words, seed=42)
    strat.mark_invalid("hello")
    assert strat.make_guess() == "world"
    assert strat.make_guess() is None
    strat.reset()
    assert sorted([strat.make_guess(), strat.make_guess()]) == ["hello", "world"]


def test_random_is_reproducible_with_seed(words):
    a = RandomGuesser(words, seed=9)
    b = RandomGuesser(words, seed=9)
    assert [a.make_guess() for _ in range(10)] == [b.make_guess() for _ in range(10)]


# ------------------------------------------------------------------
# RandomWithUpdates
# ------------------------------------------------------------------

def test_random_updates_draws_from_candidates(words):
    strat = RandomWithUpdates(words, seed=2)
    strat.update("stare", feedback("tears", "stare"))
    allowed = set(strat.candidates())
    assert "tears" in allowed
    for _ in range(20):
        assert strat.make_guess() in allowed


# ------------------------------------------------------------------
# HeuristicGuesser
# ------------------------------------------------------------------

def test_binary_entropy_bounds():
    assert binary_entropy(0.5) == pytest.approx(1.0)
    assert binary_entropy(0.0) == 0.0
    assert binary_entropy(1.0) == 0.0
    assert binary_entropy(0.25) == pytest.approx(binary_entropy(0.75))


def test_letter_frequencies(small_words):
    freqs = HeuristicGuesser.letter_frequencies(small_words)
    assert freqs["a"] == pytest.approx(2 / 3)
    assert freqs["e"] == pytest.approx(2 / 3)
    assert freqs["l"] == pytest.approx(2 / 3)
    # Repeated letters count once per word
    assert freqs["p"] == pytest.approx(1 / 3)
    assert "z" not in freqs


def test_score_word():
    freqs = {"a": 0.5, "b": 0.5, "c": 0.5, "d": 1.0, "e": 1.0}
    assert HeuristicGuesser.score_word("abcde", freqs) == pytest.approx(3.0)


def test_score_word_counts_distinct_letters_once():
    freqs = {"a": 0.5, "p": 0.5, "l": 0.5, "e": 0.5}
    assert HeuristicGuesser.score_word("apple", freqs) == pytest.approx(4.0)


def test_heuristic_ties_go_to_first_candidate():
    # Both words score 2 bits: 'a' is everywhere, the rest split evenly
    assert HeuristicGuesser(("aaabc", "aaaxy")).make_guess() == "aaabc"
    assert HeuristicGuesser(("aaaxy", "aaabc")).make_guess() == "aaaxy"


def test_heuristic_prefers_splitting_letters():
    words = ("aaaaa", "abcde", "bbbbb", "ccccc")
    # abcde contains all the letters the others split on
    assert HeuristicGuesser(words).make_guess() == "abcde"


# ------------------------------------------------------------------
# EntropyGuesser
# ------------------------------------------------------------------

def test_guess_entropy_values():
    candidates = ["aaaaa", "bbbbb", "ccccc", "abcde"]
    assert entropy_strat.guess_entropy("abcde", candidates) == pytest.approx(2.0)
    assert entropy_strat.guess_entropy("aaaaa", candidates) == pytest.approx(1.5)
    assert entropy_strat.guess_entropy("zzzzz", candidates) == pytest.approx(0.0)


def test_entropy_picks_the_best_splitter():
    words = ("aaaaa", "bbbbb", "ccccc", "abcde")
    assert EntropyGuesser(words).make_guess() == "abcde"


def test_entropy_can_guess_a_non_candidate():
    words = ("aaaaa", "bbbbb", "ccccc", "abcxx", "xxxxx")
    strat = EntropyGuesser(words)
    strat.update("xxxxx", (A,) * 5)
    assert strat.candidates() == ["aaaaa", "bbbbb", "ccccc"]
    # abcxx tells all three apart; any candidate only isolates itself
    assert strat.make_guess() == "abcxx"


def test_entropy_narrows_to_the_answer():
    words = ("aaaaa", "bbbbb", "ccccc", "abcde", "zzzzz")
    strat = EntropyGuesser(words)
    strat.update("zzzzz", (A,) * 5)
    strat.update("abcde", feedback("bbbbb", "abcde"))
    assert strat.candidates() == ["bbbbb"]
    assert strat.make_guess() == "bbbbb"


def test_entropy_ties_go_to_first_word():
    words = ("abcde", "edcba", "aaaaa", "bbbbb", "ccccc")
    strat = EntropyGuesser(words)
    scores = [entropy_strat.guess_entropy(w, strat.candidates()) for w in words]
    best = max(scores)
    assert strat.make_guess() == words[scores.index(best)]


@pytest.mark.parametrize("n_candidates", [1, 2])
def test_entropy_short_circuit_skips_scan(monkeypatch, n_candidates):
    words = ("about", "apple", "hello")[:n_candidates] + ("zzzzz",)
    strat = EntropyGuesser(words)
    strat.mark_invalid("zzzzz")

    def _boom(*args, **kwargs):
        raise AssertionError("word list was scanned")

    monkeypatch.setattr(entropy_strat, "guess_entropy", _boom)
    assert strat.make_guess() == "about"


def test_entropy_parallel_matches_sequential(monkeypatch, words):
    monkeypatch.setattr(entropy_strat, "_MIN_CHUNK", 4)
    sequential = EntropyGuesser(words)
    parallel = EntropyGuesser(words, max_workers=2)
    for strat in (sequential, parallel):
        strat.update("lemon", feedback("slate", "lemon"))
    assert parallel.make_guess() == sequential.make_guess()


def test_entropy_zero_workers_means_all_cores(words):
    strat = EntropyGuesser(words, max_workers=0)
    assert strat._max_workers >= 1
