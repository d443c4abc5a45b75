# game.py
from dataclasses import dataclass, replace
from enum import Enum
import logging
import random
from typing import Optional

from .body import Snake, advance, collides, grow, initial_snake, move
from .config import CFG, DIRECTIONS, Config
from .food import place_food
from .grid import Direction, Position, is_opposite

logger = logging.getLogger(__name__)


class Phase(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


# ---------- State ----------
@dataclass(frozen=True)
class GameState:
    snake: Snake                 # head at index 0
    direction: Direction
    food: Position
    score: int
    speed: int                   # ms per tick
    is_paused: bool = False
    is_over: bool = False

    @property
    def phase(self) -> Phase:
        if self.is_over:
            return Phase.GAME_OVER
        if self.is_paused:
            return Phase.PAUSED
        return Phase.RUNNING

    @property
    def head(self) -> Position:
        return self.snake[0]

    @property
    def length(self) -> int:
        return len(self.snake)


def new_game_state(cfg: Config = CFG) -> GameState:
    """Initial state for a fresh session; food starts at the configured cell."""
    return GameState(
        snake=initial_snake(cfg.start),
        direction=tuple(cfg.initial_direction),
        food=tuple(cfg.initial_food),
        score=0,
        speed=cfg.initial_speed,
    )


def reset(cfg: Config = CFG, rng: Optional[random.Random] = None) -> GameState:
    """
    Start over from any phase. Same as new_game_state except the food is
    re-drawn at random.
    """
    snake = initial_snake(cfg.start)
    food = place_food(snake, cfg.cols, cfg.rows, rng, cfg.food_avoids_snake)
    return replace(new_game_state(cfg), food=food)


# ---------- Update ----------
def tick(state: GameState, cfg: Config = CFG, rng: Optional[random.Random] = None) -> GameState:
    """
    Advance the game by one cell.

    Paused or finished games come back unchanged. A head landing on the body
    ends the game and leaves the snake as it was.
    """
    if state.is_over or state.is_paused:
        return state

    new_head = advance(state.snake, state.direction, cfg.cols, cfg.rows)

    if collides(state.snake, new_head):
        logger.debug("Self collision at %s", new_head)
        return replace(state, is_over=True)

    if new_head == state.food:
        snake = grow(state.snake, new_head)
        return replace(
            state,
            snake=snake,
            score=state.score + 1,
            food=place_food(snake, cfg.cols, cfg.rows, rng, cfg.food_avoids_snake),
            speed=max(state.speed - cfg.speed_step, cfg.min_speed),
        )

    return replace(state, snake=move(state.snake, new_head))


def change_direction(state: GameState, direction: Direction) -> GameState:
    """Last valid request wins; reversals and non-unit vectors are ignored."""
    if state.is_over or not isinstance(direction, tuple) or direction not in DIRECTIONS:
        return state
    if is_opposite(direction, state.direction):
        logger.debug("Ignoring reversal %s while heading %s", direction, state.direction)
        return state
    if direction == state.direction:
        return state
    return replace(state, direction=direction)


def toggle_pause(state: GameState) -> GameState:
    if state.is_over:
        return state
    return replace(state, is_paused=not state.is_paused)
