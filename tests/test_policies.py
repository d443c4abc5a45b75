"""Tests for the autopilot policies."""

import random

from wrapsnake.config import DOWN, RIGHT, Config
from wrapsnake.controls import INTENT_DIRECTIONS, Intent
from wrapsnake.game import GameState, new_game_state
from wrapsnake.policies import POLICIES, policy_greedy, policy_random
from wrapsnake.policies.greedy import torus_delta


class TestTorusDelta:
    def test_short_way_round(self):
        assert torus_delta(1, 18, 20) == -3
        assert torus_delta(18, 1, 20) == 3
        assert torus_delta(5, 9, 20) == 4
        assert torus_delta(7, 7, 20) == 0


class TestGreedy:
    def test_heads_for_food(self):
        assert policy_greedy(new_game_state()) is Intent.RIGHT

    def test_never_reverses(self):
        state = GameState(snake=((1, 10),), direction=RIGHT, food=(18, 10), score=0, speed=100)
        # shortest way is LEFT across the edge, which would be a reversal
        assert policy_greedy(state) is Intent.UP

    def test_avoids_body(self):
        state = GameState(
            snake=((5, 5), (5, 4), (6, 4), (6, 5)),
            direction=DOWN, food=(9, 5), score=3, speed=94,
        )
        assert policy_greedy(state) is Intent.DOWN

    def test_boxed_in_keeps_heading(self):
        cfg = Config(cols=3, rows=3, start=(1, 1), initial_food=(2, 0))
        snake = ((1, 1), (1, 0), (0, 0), (0, 1), (0, 2), (1, 2), (2, 2), (2, 1))
        state = GameState(snake=snake, direction=DOWN, food=(2, 0), score=7, speed=86)
        assert policy_greedy(state, cfg) is Intent.DOWN


class TestRandom:
    def test_only_directions(self):
        rng = random.Random(0)
        picks = {policy_random(new_game_state(), rng=rng) for _ in range(100)}
        assert picks <= set(INTENT_DIRECTIONS)
        assert len(picks) == 4

    def test_registry(self):
        assert set(POLICIES) == {"random", "greedy"}
