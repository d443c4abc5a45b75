"""Snake on a wrapping grid: a pure game core plus pygame and headless adapters."""

from .config import CFG, DOWN, LEFT, RIGHT, UP, Config
from .controls import Intent, apply_intent
from .game import GameState, Phase, change_direction, new_game_state, reset, tick, toggle_pause
from .grid import wrap
from .scheduler import FrameLoop, TickScheduler
from .session import Session

__all__ = [
    "CFG", "Config", "UP", "DOWN", "LEFT", "RIGHT",
    "Intent", "apply_intent",
    "GameState", "Phase", "new_game_state", "tick", "change_direction", "toggle_pause", "reset",
    "wrap",
    "FrameLoop", "TickScheduler",
    "Session",
]
