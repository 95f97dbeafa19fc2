import io
import random

import pytest

from bstrainer.settings import Settings, load_settings
from bstrainer.trainer import (
    Score,
    hard_total_round,
    main,
    pair_splitting_round,
    run_trainer,
    soft_total_round,
)


class _StubRng:
    def __init__(self, values):
        self._values = list(values)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self._values.pop(0)


def _scripted(answers):
    remaining = iter(answers)
    prompts = []

    def ask(prompt):
        prompts.append(prompt)
        return next(remaining)

    ask.prompts = prompts
    return ask


class _Output:
    def __init__(self):
        self.parts = []

    def __call__(self, text):
        self.parts.append(text)

    @property
    def text(self):
        return "".join(self.parts)


def test_score_record_and_accuracy():
    score = Score()
    score.record(True)
    score.record(False)
    assert (score.correct, score.total) == (1, 2)
    assert score.accuracy() == pytest.approx(50.0)


def test_empty_score_accuracy():
    assert Score().accuracy() == 0.0


def test_pair_round_correct_answer():
    rng = _StubRng([2, 1])
    out = _Output()
    score = Score()
    assert pair_splitting_round(score, Settings(), rng, _scripted(["y"]), out) is True
    assert rng.calls == [(1, 10), (1, 10)]
    assert "You have a pair of A's!\n" in out.parts
    assert "Dealer's up card is 2\n" in out.parts
    assert "Correct!\n" in out.parts
    assert (score.correct, score.total) == (1, 1)


def test_pair_round_without_das():
    score = Score()
    out = _Output()
    pair_splitting_round(score, Settings(das=False), _StubRng([2, 2]), _scripted(["Y"]), out)
    assert "Incorrect! Correct answer was N\n" in out.parts
    assert (score.correct, score.total) == (0, 1)


def test_pair_round_quit_leaves_score():
    score = Score()
    assert pair_splitting_round(score, Settings(), _StubRng([5, 5]), _scripted(["q"]), _Output()) is False
    assert score == Score()


def test_soft_round_draws_dealer_card_one_to_nine():
    rng = _StubRng([1, 9])
    out = _Output()
    score = Score()
    soft_total_round(score, Settings(), rng, _scripted(["s"]), out)
    assert rng.calls == [(1, 9), (2, 9)]
    assert "You have A,9\n" in out.parts
    assert "Dealer's up card is A\n" in out.parts
    assert score.correct == 1


def test_soft_round_skips_blank_input():
    ask = _scripted(["", "Q"])
    assert soft_total_round(Score(), Settings(), _StubRng([3, 3]), ask, _Output()) is False
    assert ask.prompts == ["Do you (H)it, (D)ouble, (S)tand, or (Q)uit?: ", ""]


def test_hard_round_surrender_prompt_and_answer():
    ask = _scripted(["h"])
    out = _Output()
    score = Score()
    hard_total_round(score, Settings(h17=True, surrender=True), _StubRng([10, 16]), ask, out)
    assert ask.prompts == ["Do you (H)it, (D)ouble, (S)tand, (R)esign, or (Q)uit?: "]
    assert "You have a total of 16!\n" in out.parts
    assert "Dealer's up card is 10!\n" in out.parts
    assert "Incorrect!, Correct answer was R\n" in out.parts
    assert score.total == 1


def test_hard_round_without_surrender():
    ask = _scripted(["H"])
    score = Score()
    hard_total_round(score, Settings(surrender=False), _StubRng([10, 16]), ask, _Output())
    assert ask.prompts == ["Do you (H)it, (D)ouble, (S)tand, or (Q)uit?: "]
    assert score.correct == 1


def test_run_trainer_reports_after_each_hand():
    out = _Output()
    score = run_trainer(hard_total_round, Settings(), random.Random(7), _scripted(["h", "s", "q"]), out)
    assert score.total == 2
    assert 0 <= score.correct <= 2
    assert out.text.count("--- Results ---") == 2
    assert f"Score: {score.correct} / 2\n" in out.parts


def test_run_trainer_immediate_quit():
    out = _Output()
    score = run_trainer(pair_splitting_round, Settings(), random.Random(1), _scripted(["q"]), out)
    assert score.total == 0
    assert "--- Results ---" not in out.text


def test_main_uses_defaults_and_exits(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main([]) == 0
    output = capsys.readouterr().out
    assert "No settings file found, using defaults." in output
    assert "==Basic==Strategy==Trainer==" in output


def test_main_invalid_option(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("9\n0\n"))
    assert main([]) == 0
    assert "invalid input" in capsys.readouterr().out


def test_main_settings_are_saved(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n1\n0\n0\n"))
    assert main([]) == 0
    assert load_settings(str(tmp_path / "bj_settings.cfg")).h17 is False


def test_main_stops_at_end_of_input(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("1\ny\n"))
    assert main([]) == 0
    assert "--- Results ---" in capsys.readouterr().out