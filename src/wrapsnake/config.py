# config.py
from dataclasses import dataclass
from typing import Optional, Tuple

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# ----- Colors -----
BG     = (30, 27, 75)
GRID   = (44, 40, 100)
BLUE   = (59, 130, 246)
HEAD   = (96, 165, 250)
RED    = (239, 68, 68)
TEXT   = (240, 240, 250)


# ----- Tunables -----
@dataclass(frozen=True)
class Config:
    cols: int = 20
    rows: int = 20
    initial_speed: int = 100        # ms per tick
    min_speed: int = 40             # floor for the speed ramp
    speed_step: int = 2             # ms shaved off per food eaten
    start: Tuple[int, int] = (10, 10)
    initial_direction: Tuple[int, int] = RIGHT
    initial_food: Tuple[int, int] = (15, 15)
    food_avoids_snake: bool = True  # False keeps the "food may land on the snake" behaviour
    seed: Optional[int] = None
    cell_size: int = 25             # pixels per grid cell
    fps: int = 60

    def __post_init__(self):
        if self.cols <= 0 or self.rows <= 0:
            raise ValueError(f"grid must be at least 1x1, got {self.cols}x{self.rows}")
        if self.min_speed <= 0:
            raise ValueError(f"min_speed must be positive, got {self.min_speed}")
        if self.initial_speed < self.min_speed:
            raise ValueError(
                f"initial_speed ({self.initial_speed}) is below min_speed ({self.min_speed})"
            )
        if self.speed_step < 0:
            raise ValueError(f"speed_step must be >= 0, got {self.speed_step}")
        for name in ("start", "initial_food"):
            x, y = getattr(self, name)
            if not (0 <= x < self.cols and 0 <= y < self.rows):
                raise ValueError(f"{name} {(x, y)} is outside the {self.cols}x{self.rows} grid")
        if tuple(self.initial_food) == tuple(self.start):
            raise ValueError(f"initial_food {self.initial_food} sits on the starting snake")
        if tuple(self.initial_direction) not in DIRECTIONS:
            raise ValueError(f"initial_direction must be a unit direction, got {self.initial_direction}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")

    @property
    def width_px(self) -> int:
        return self.cols * self.cell_size

    @property
    def height_px(self) -> int:
        return self.rows * self.cell_size


CFG = Config()
