"""Tests for the command-line entry point (headless only)."""

import random

import pytest

from wrapsnake.config import Config
from wrapsnake.main import build_parser, main, run_headless


class TestRunHeadless:
    def test_greedy_eats(self):
        session = run_headless(Config(seed=3), "greedy", ticks=200, rng=random.Random(3))
        assert 0 < session.tick_count <= 200
        assert session.state.score >= 1
        assert session.closed

    def test_random_stays_in_budget(self):
        session = run_headless(Config(seed=3), "random", ticks=50, rng=random.Random(3))
        assert session.tick_count <= 50

    def test_unknown_policy(self):
        with pytest.raises(ValueError):
            run_headless(Config(), "psychic", ticks=10)


class TestMain:
    def test_headless_prints_score_and_board(self, capsys):
        assert main(["--headless", "--ticks", "30", "--seed", "1", "--show-board"]) == 0
        out = capsys.readouterr().out
        assert "Score:" in out
        assert "@" in out

    def test_bad_grid_is_a_usage_error(self):
        with pytest.raises(SystemExit) as exc:
            main(["--headless", "--cols", "0"])
        assert exc.value.code == 2

    def test_grid_too_small_for_distinct_food_is_a_usage_error(self):
        with pytest.raises(SystemExit) as exc:
            main(["--headless", "--cols", "2", "--rows", "2"])
        assert exc.value.code == 2

    def test_negative_ticks_is_a_usage_error(self):
        with pytest.raises(SystemExit):
            main(["--headless", "--ticks", "-1"])

    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        assert args.policy == "greedy"
        assert args.ticks == 500
        assert not args.headless
