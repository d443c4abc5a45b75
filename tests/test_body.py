"""Tests for the snake body operations."""

from wrapsnake.body import advance, collides, grow, initial_snake, move
from wrapsnake.config import LEFT, RIGHT


class TestSnakeBody:
    def test_initial_snake_is_one_segment(self):
        assert initial_snake((10, 10)) == ((10, 10),)

    def test_advance_is_pure(self):
        snake = ((5, 5), (4, 5))
        assert advance(snake, RIGHT, 20, 20) == (6, 5)
        assert snake == ((5, 5), (4, 5))

    def test_advance_wraps(self):
        assert advance(((0, 3),), LEFT, 20, 20) == (19, 3)

    def test_collides_with_any_segment(self):
        snake = ((5, 5), (4, 5), (3, 5))
        assert collides(snake, (4, 5))
        assert collides(snake, (3, 5))
        assert not collides(snake, (2, 5))

    def test_grow_keeps_tail(self):
        assert grow(((5, 5), (4, 5)), (6, 5)) == ((6, 5), (5, 5), (4, 5))

    def test_move_drops_tail(self):
        assert move(((5, 5), (4, 5)), (6, 5)) == ((6, 5), (5, 5))

    def test_move_single_segment(self):
        assert move(((5, 5),), (6, 5)) == ((6, 5),)
