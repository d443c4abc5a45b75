# render.py
import numpy as np  # type: ignore
import pygame       # type: ignore

from .config import BG, BLUE, CFG, GRID, HEAD, RED, TEXT, Config
from .game import GameState

# ----- Cell codes for the occupancy grid -----
EMPTY, BODY, SNAKE_HEAD, FOOD = 0, 1, 2, 3

_GLYPHS = {EMPTY: ".", BODY: "o", SNAKE_HEAD: "@", FOOD: "*"}


# ---------- Headless ----------
def occupancy_grid(state: GameState, cfg: Config = CFG) -> np.ndarray:
    """
    (rows, cols) int8 array indexed [y, x]. Food is painted last, over any snake
    segment under it, matching the pygame frame.
    """
    grid = np.zeros((cfg.rows, cfg.cols), dtype=np.int8)
    for x, y in state.snake[1:]:
        grid[y, x] = BODY
    hx, hy = state.head
    grid[hy, hx] = SNAKE_HEAD
    fx, fy = state.food
    grid[fy, fx] = FOOD
    return grid


def render_text(state: GameState, cfg: Config = CFG) -> str:
    grid = occupancy_grid(state, cfg)
    lines = ["".join(_GLYPHS[int(c)] for c in row) for row in grid]
    status = f"Score: {state.score}"
    if state.is_over:
        status += "  GAME OVER"
    elif state.is_paused:
        status += "  PAUSED"
    lines.append(status)
    return "\n".join(lines)


# ---------- pygame ----------
def draw_cell(screen: pygame.Surface, gx: int, gy: int, color, cell: int) -> None:
    rect = pygame.Rect(gx * cell, gy * cell, cell - 1, cell - 1)
    pygame.draw.rect(screen, color, rect, border_radius=cell // 2)


def draw_game(screen: pygame.Surface, font: pygame.font.Font, state: GameState, cfg: Config = CFG) -> None:
    cell = cfg.cell_size
    screen.fill(BG)
    # grid lines
    for gx in range(cfg.cols + 1):
        pygame.draw.line(screen, GRID, (gx * cell, 0), (gx * cell, cfg.height_px))
    for gy in range(cfg.rows + 1):
        pygame.draw.line(screen, GRID, (0, gy * cell), (cfg.width_px, gy * cell))
    # snake, then food on top
    for i, (x, y) in enumerate(state.snake):
        draw_cell(screen, x, y, HEAD if i == 0 else BLUE, cell)
    draw_cell(screen, state.food[0], state.food[1], RED, cell)
    # score
    txt = font.render(f"Score: {state.score}", True, TEXT)
    screen.blit(txt, (8, 6))


def _draw_overlay(screen: pygame.Surface, font: pygame.font.Font, lines, cfg: Config) -> None:
    overlay = pygame.Surface((cfg.width_px, cfg.height_px), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 128))
    screen.blit(overlay, (0, 0))
    for i, line in enumerate(lines):
        surf = font.render(line, True, TEXT)
        rect = surf.get_rect(center=(cfg.width_px // 2, cfg.height_px // 2 - 16 + i * 30))
        screen.blit(surf, rect)


def draw_paused(screen: pygame.Surface, font: pygame.font.Font, cfg: Config = CFG) -> None:
    _draw_overlay(screen, font, ["PAUSED", "Press space to resume"], cfg)


def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, score: int, cfg: Config = CFG) -> None:
    _draw_overlay(screen, font, ["GAME OVER", "Press R to play again", f"Score: {score}"], cfg)


def draw_frame(screen: pygame.Surface, font: pygame.font.Font, state: GameState, cfg: Config = CFG) -> None:
    """Full frame for the current phase."""
    draw_game(screen, font, state, cfg)
    if state.is_over:
        draw_game_over(screen, font, state.score, cfg)
    elif state.is_paused:
        draw_paused(screen, font, cfg)
