# grid.py
"""Torus geometry: leaving one edge of the grid re-enters on the opposite edge."""
from typing import Tuple

Position = Tuple[int, int]
Direction = Tuple[int, int]


def wrap(coord: int, size: int) -> int:
    """Fold a coordinate that stepped one cell off the grid back onto it."""
    if coord < 0:
        return size - 1
    if coord >= size:
        return 0
    return coord


def step(pos: Position, direction: Direction, cols: int, rows: int) -> Position:
    x, y = pos
    dx, dy = direction
    return (wrap(x + dx, cols), wrap(y + dy, rows))


def in_bounds(pos: Position, cols: int, rows: int) -> bool:
    x, y = pos
    return 0 <= x < cols and 0 <= y < rows


def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]
