# src/wrapsnake/policies/random.py
import random
from typing import Optional

from wrapsnake.config import CFG, Config
from wrapsnake.controls import INTENT_DIRECTIONS, Intent
from wrapsnake.game import GameState


def policy_random(state: GameState, cfg: Config = CFG, rng: Optional[random.Random] = None) -> Intent:
    """
    Random policy: pick a uniformly random direction.
    Reversals are allowed through; the game ignores them.
    """
    r = rng if rng is not None else random
    return r.choice(list(INTENT_DIRECTIONS))
