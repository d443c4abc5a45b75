"""Tests for the occupancy grid, text board and pygame drawing."""

from dataclasses import replace

import numpy as np  # type: ignore
import pygame       # type: ignore
import pytest

from wrapsnake.config import Config
from wrapsnake.game import GameState, new_game_state
from wrapsnake.render import (
    BODY,
    EMPTY,
    FOOD,
    SNAKE_HEAD,
    draw_frame,
    occupancy_grid,
    render_text,
)

SMALL = Config(cols=4, rows=3, start=(1, 1), initial_food=(3, 2))


def small_state(**kw):
    base = dict(snake=((1, 1), (0, 1)), direction=(1, 0), food=(3, 2), score=2, speed=96)
    base.update(kw)
    return GameState(**base)


class TestOccupancyGrid:
    def test_shape_and_codes(self):
        grid = occupancy_grid(small_state(), SMALL)
        assert grid.shape == (3, 4)
        assert grid.dtype == np.int8
        assert grid[1, 1] == SNAKE_HEAD
        assert grid[1, 0] == BODY
        assert grid[2, 3] == FOOD
        assert (grid == EMPTY).sum() == 12 - 3

    def test_food_drawn_over_snake(self):
        grid = occupancy_grid(small_state(food=(0, 1)), SMALL)
        assert grid[1, 0] == FOOD
        assert (grid == BODY).sum() == 0
        assert render_text(small_state(food=(0, 1)), SMALL).splitlines()[1] == "*@.."


class TestRenderText:
    def test_board(self):
        text = render_text(small_state(), SMALL)
        assert text.splitlines() == [
            "....",
            "o@..",
            "...*",
            "Score: 2",
        ]

    def test_status_flags(self):
        assert render_text(small_state(is_paused=True), SMALL).endswith("PAUSED")
        assert render_text(small_state(is_over=True, is_paused=True), SMALL).endswith("GAME OVER")


@pytest.fixture
def screen():
    pygame.init()
    cfg = Config(cell_size=10)
    surface = pygame.display.set_mode((cfg.width_px, cfg.height_px))
    font = pygame.font.SysFont(None, 20)
    yield surface, font, cfg
    pygame.quit()


class TestPygameDrawing:
    @pytest.mark.parametrize("flags", [{}, {"is_paused": True}, {"is_over": True}])
    def test_draw_frame_every_phase(self, screen, flags):
        surface, font, cfg = screen
        state = new_game_state(cfg)
        if flags:
            state = replace(state, **flags)
        draw_frame(surface, font, state, cfg)
        assert surface.get_size() == (200, 200)
