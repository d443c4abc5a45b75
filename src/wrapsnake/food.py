# food.py
import random
from typing import Collection, Optional

from .grid import Position


def place_food(
    occupied: Collection[Position],
    cols: int,
    rows: int,
    rng: Optional[random.Random] = None,
    avoid_occupied: bool = True,
) -> Position:
    """
    Pick a cell for the next piece of food.

    With avoid_occupied=False any cell may be drawn, including one under the
    snake. Otherwise the draw is uniform over free cells; a completely full
    grid has none, so it falls back to any cell.
    """
    r = rng if rng is not None else random
    if avoid_occupied:
        taken = set(occupied)
        free = [(x, y) for y in range(rows) for x in range(cols) if (x, y) not in taken]
        if free:
            return r.choice(free)
    return (r.randrange(cols), r.randrange(rows))
