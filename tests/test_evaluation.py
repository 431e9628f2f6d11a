"""
Tests for the bisection agent and evaluation harness.
"""

import json

import pytest

from guessing_game.evaluation.bisect_agent import BisectAgent
from guessing_game.evaluation.run_eval import (
    evaluate_agent,
    evaluate_single_seed,
    load_seed_bank,
    main,
)
from guessing_game.guess_core.config_loader import load_config
from guessing_game.guess_core.game import GuessingGame


@pytest.fixture
def config():
    return load_config()


class GibberishAgent:
    """Never submits a number."""

    def reset(self):
        pass

    def act(self, last=None):
        return "banana"


class TestBisectAgent:
    """Test the binary-search player."""

    def test_first_guess_is_midpoint(self, config):
        assert BisectAgent(config).act() == "50"

    def test_every_secret_within_seven_guesses(self, config):
        agent = BisectAgent(config)

        for secret in range(config.secret.low, config.secret.high + 1):
            game = GuessingGame(config=config, secret_source=_Fixed(secret))
            game.reset()
            agent.reset()

            last = None
            while not game.is_over:
                last = game.submit(agent.act(last))

            assert game.guess_count <= 7

    def test_window_narrows(self, config):
        game = GuessingGame(config=config, secret_source=_Fixed(68))
        game.reset()
        agent = BisectAgent(config)

        last = game.submit(agent.act())
        agent.act(last)

        assert agent.window == (51, 100)


class _Fixed:
    def __init__(self, value):
        self.value = value

    def draw(self):
        return self.value

    def reset(self, seed=None):
        pass


class TestEvaluation:
    """Test the seed-bank harness."""

    def test_seed_bank_loads(self):
        seeds = load_seed_bank()
        assert len(seeds) > 0
        assert all(isinstance(s, int) for s in seeds)

    def test_single_seed_matches_game_secret(self, config):
        result = evaluate_single_seed(BisectAgent(config), 42, config=config)

        game = GuessingGame(config=config, seed=42)
        game.reset()

        assert result.secret == game.secret
        assert not result.truncated
        assert 1 <= result.guesses <= 7

    def test_truncates_runaway_agent(self, config):
        result = evaluate_single_seed(GibberishAgent(), 1, config=config)

        assert result.truncated
        assert result.guesses == 0

    def test_summary_statistics(self, config):
        summary = evaluate_agent(seeds=[1, 2, 3, 4, 5], config=config, verbose=False)
        guesses = [r.guesses for r in summary.results]

        assert len(summary.results) == 5
        assert summary.truncated_count == 0
        assert summary.min_guesses == min(guesses)
        assert summary.max_guesses == max(guesses) <= 7
        assert summary.mean_guesses == pytest.approx(sum(guesses) / 5)

    def test_empty_seed_list_rejected(self, config):
        with pytest.raises(ValueError):
            evaluate_agent(seeds=[], config=config, verbose=False)

    def test_main_with_custom_seed_bank(self, tmp_path, capsys):
        path = tmp_path / "seeds.json"
        path.write_text(json.dumps({"seeds": [10, 20, 30]}))

        assert main(["--seeds", str(path), "--quiet"]) == 0
        assert "over 3 seeds" in capsys.readouterr().out

    def test_main_missing_seed_bank(self, tmp_path, capsys):
        assert main(["--seeds", str(tmp_path / "missing.json")]) == 1
        assert "Error loading seed bank" in capsys.readouterr().out
