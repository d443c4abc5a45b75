# controls.py
from enum import Enum
import logging
import random
from typing import Optional

from .config import CFG, DOWN, LEFT, RIGHT, UP, Config
from .game import GameState, change_direction, reset, toggle_pause

logger = logging.getLogger(__name__)


class Intent(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAUSE = "pause"
    RESET = "reset"


INTENT_DIRECTIONS = {
    Intent.UP: UP,
    Intent.DOWN: DOWN,
    Intent.LEFT: LEFT,
    Intent.RIGHT: RIGHT,
}


def direction_to_intent(direction) -> Optional[Intent]:
    for intent, d in INTENT_DIRECTIONS.items():
        if d == tuple(direction):
            return intent
    return None


def apply_intent(
    state: GameState,
    intent: Optional[Intent],
    cfg: Config = CFG,
    rng: Optional[random.Random] = None,
) -> GameState:
    """Apply one decoded input signal. Unknown signals leave the state alone."""
    if not isinstance(intent, Intent):
        logger.debug("Ignoring unrecognised input %r", intent)
        return state
    if intent in INTENT_DIRECTIONS:
        return change_direction(state, INTENT_DIRECTIONS[intent])
    if intent is Intent.PAUSE:
        return toggle_pause(state)
    return reset(cfg, rng)
