from __future__ import annotations

import io

import pytest

from assistant import Assistant, main, parse_feedback, run
from strategies import HeuristicGuesser, RandomGuesser
from wordle_env import feedback

from conftest import A, C, M


@pytest.mark.parametrize("text", ["cmaaa", "CMAAA", "g y . b x", "gyxxx"])
def test_parse_feedback(text):
    assert parse_feedback(text) == (C, M, A, A, A)


@pytest.mark.parametrize("text", ["cma", "cmaaaa", "cmqaa"])
def test_parse_feedback_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_feedback(text)


def test_assistant_flow(small_words):
    helper = Assistant(HeuristicGuesser(small_words))
    first = helper.recommendation
    assert first in small_words
    assert helper.remaining() == 3

    # Play against 'about' until solved
    while not helper.solved:
        helper.submit(feedback("about", helper.recommendation))
    assert helper.history[-1][0] == "about"
    assert helper.recommendation is None


def test_assistant_apple_feedback(small_words):
    helper = Assistant(HeuristicGuesser(small_words))
    helper.recommendation = "apple"
    assert helper.submit((C, A, A, A, A)) == "about"
    assert helper.remaining() == 1


def test_assistant_reject_and_new_game(small_words):
    helper = Assistant(HeuristicGuesser(small_words))
    rejected = helper.recommendation
    nxt = helper.reject()
    assert nxt != rejected
    assert helper.strategy.is_invalid(rejected)
    assert helper.new_game() == rejected
    assert helper.history == []


def test_assistant_without_knowledge(small_words):
    helper = Assistant(RandomGuesser(small_words, seed=1))
    assert helper.remaining() is None


def test_submit_without_recommendation():
    helper = Assistant(HeuristicGuesser(("apple",)))
    helper.reject()
    assert helper.recommendation is None
    with pytest.raises(RuntimeError):
        helper.submit((C,) * 5)


def test_run_session(small_words, capsys):
    helper = Assistant(HeuristicGuesser(small_words))
    helper.recommendation = "apple"
    run(helper, ["bogus", "caaaa", "ccccc", "q", "never read"])
    captured = capsys.readouterr()
    assert "Try: APPLE" in captured.out
    assert "Try: ABOUT" in captured.out
    assert "Solved in 2 guesses" in captured.out
    assert "error:" in captured.err


def test_main_reads_stdin(tmp_path, monkeypatch, capsys):
    path = tmp_path / "words.txt"
    path.write_text("apple\nabout\nhello\n", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("n\nq\n"))
    main(["--words", str(path), "--ai", "heuristic"])
    out = capsys.readouterr().out
    assert "Heuristic strategy over 3 words" in out
    assert "not in the list" in out
