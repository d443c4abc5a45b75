# src/wrapsnake/policies/greedy.py
import random
from typing import List, Optional

from wrapsnake.config import CFG, DOWN, LEFT, RIGHT, UP, Config
from wrapsnake.controls import Intent, direction_to_intent
from wrapsnake.game import GameState
from wrapsnake.grid import is_opposite, step


def torus_delta(a: int, b: int, size: int) -> int:
    """Signed shortest offset from a to b on a ring of `size` cells."""
    d = (b - a) % size
    return d - size if d > size // 2 else d


def best_moves_toward_food(state: GameState, cfg: Config = CFG) -> List:
    """
    Preference ordering of directions: those that shrink the wrapped
    Manhattan distance to the food first, the rest after.
    Does NOT check collisions; caller filters unsafe moves.
    """
    hx, hy = state.head
    fx, fy = state.food
    dx = torus_delta(hx, fx, cfg.cols)
    dy = torus_delta(hy, fy, cfg.rows)

    prefs = []
    # larger gap first
    axes = [(abs(dx), RIGHT if dx > 0 else LEFT), (abs(dy), DOWN if dy > 0 else UP)]
    axes.sort(key=lambda a: -a[0])
    for gap, d in axes:
        if gap:
            prefs.append(d)
    for d in (UP, DOWN, LEFT, RIGHT):
        if d not in prefs:
            prefs.append(d)
    return prefs


def policy_greedy(state: GameState, cfg: Config = CFG, rng: Optional[random.Random] = None) -> Intent:
    """
    Greedy on food distance with simple safety:
    - never propose a reversal
    - prefer safe moves that get closer to the food
    - otherwise any safe move
    - if boxed in, keep heading (the game ends either way)
    """
    for d in best_moves_toward_food(state, cfg):
        if is_opposite(d, state.direction):
            continue
        if step(state.head, d, cfg.cols, cfg.rows) not in state.snake:
            return direction_to_intent(d)
    return direction_to_intent(state.direction)
