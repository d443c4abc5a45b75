# session.py
from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional

from .config import CFG, Config
from .controls import Intent, apply_intent
from .game import GameState, new_game_state, reset, tick
from .scheduler import TickScheduler

logger = logging.getLogger(__name__)

RenderHook = Callable[[GameState], None]


class Session:
    """
    One game's lifetime: the current GameState, the RNG that feeds food
    placement, and the scheduler that decides when to tick.

    Everything runs on the caller's thread. Input sent between two frames is
    applied straight away, so the next tick always sees it whole.
    """

    def __init__(
        self,
        cfg: Config = CFG,
        rng: Optional[random.Random] = None,
        scheduler: Optional[TickScheduler] = None,
    ):
        self.cfg = cfg
        self.rng = rng if rng is not None else random.Random(cfg.seed)
        self.scheduler = scheduler if scheduler is not None else TickScheduler()
        self.tick_count = 0
        self.closed = False
        self._state = new_game_state(cfg)
        self._render_hooks: List[RenderHook] = []

    @property
    def state(self) -> GameState:
        return self._state

    # ----- hooks -----
    def add_render_hook(self, hook: RenderHook) -> None:
        if hook not in self._render_hooks:
            self._render_hooks.append(hook)

    def remove_render_hook(self, hook: RenderHook) -> None:
        if hook in self._render_hooks:
            self._render_hooks.remove(hook)

    def _notify(self) -> None:
        for hook in list(self._render_hooks):
            hook(self._state)

    # ----- input -----
    def send(self, intent: Optional[Intent]) -> GameState:
        if self.closed:
            return self._state
        before = self._state
        self._state = apply_intent(before, intent, self.cfg, self.rng)
        if intent is Intent.RESET:
            logger.info("Game reset (previous score %d)", before.score)
        elif intent is Intent.PAUSE and self._state is not before:
            logger.info("Game %s", "paused" if self._state.is_paused else "resumed")
        return self._state

    def reset(self) -> GameState:
        if self.closed:
            return self._state
        logger.info("Game reset (previous score %d)", self._state.score)
        self._state = reset(self.cfg, self.rng)
        return self._state

    # ----- frames -----
    def on_frame(self, timestamp: int) -> bool:
        """
        Frame callback. Returns True if this frame advanced the game.

        The scheduler still fires while paused or over, but those ticks change
        nothing and are neither counted nor rendered.
        """
        if self.closed:
            return False
        if not self.scheduler.poll(timestamp, self._state.speed):
            return False

        before = self._state
        self._state = tick(before, self.cfg, self.rng)
        if self._state is before:
            return False
        self.tick_count += 1

        if self._state.is_over and not before.is_over:
            logger.info("Game over: score %d, length %d", self._state.score, self._state.length)
        elif self._state.score > before.score:
            logger.info(
                "Ate food at %s: score %d, speed %d ms",
                self._state.head, self._state.score, self._state.speed,
            )
        else:
            logger.debug("Tick %d at %d ms", self.tick_count, timestamp)

        self._notify()
        return True

    def close(self) -> None:
        """Drop every hook; later input and frames are ignored."""
        self._render_hooks.clear()
        self.closed = True
