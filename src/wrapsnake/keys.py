# keys.py
from typing import Optional

import pygame  # type: ignore

from .controls import Intent

KEYMAP = {
    pygame.K_UP: Intent.UP,
    pygame.K_DOWN: Intent.DOWN,
    pygame.K_LEFT: Intent.LEFT,
    pygame.K_RIGHT: Intent.RIGHT,
    pygame.K_w: Intent.UP,
    pygame.K_s: Intent.DOWN,
    pygame.K_a: Intent.LEFT,
    pygame.K_d: Intent.RIGHT,
    pygame.K_SPACE: Intent.PAUSE,
    pygame.K_p: Intent.PAUSE,
    pygame.K_r: Intent.RESET,
}


def intent_for_key(key: int) -> Optional[Intent]:
    return KEYMAP.get(key)
