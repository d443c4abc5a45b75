# body.py
"""Snake body as an immutable tuple of positions, head at index 0."""
from typing import Tuple

from .grid import Direction, Position, step

Snake = Tuple[Position, ...]


def initial_snake(start: Position) -> Snake:
    return (tuple(start),)


def advance(snake: Snake, direction: Direction, cols: int, rows: int) -> Position:
    """Where the head lands after one step; the snake itself is untouched."""
    return step(snake[0], direction, cols, rows)


def collides(snake: Snake, point: Position) -> bool:
    # Checked against the body as it is now, tail included.
    return point in snake


def grow(snake: Snake, new_head: Position) -> Snake:
    return (new_head,) + snake


def move(snake: Snake, new_head: Position) -> Snake:
    return (new_head,) + snake[:-1]
