"""Tests for the head/tail tracker."""

from termsnake.game.direction import Direction
from termsnake.game.snake import Snake


class TestSnake:
    def test_length_follows_queue(self):
        snake = Snake((0, 1), (0, 0), [Direction.RIGHT])
        assert snake.length == 2

    def test_move_head_pushes_front(self):
        snake = Snake((0, 1), (0, 0), [Direction.RIGHT])
        snake.move_head((1, 1), Direction.DOWN)
        assert snake.head == (1, 1)
        assert list(snake.head_directions) == [Direction.DOWN, Direction.RIGHT]

    def test_move_tail_replays_oldest_move(self):
        snake = Snake((0, 1), (0, 0), [Direction.RIGHT])
        snake.move_head((1, 1), Direction.DOWN)
        vacated = snake.move_tail()
        assert vacated == (0, 0)
        assert snake.tail == (0, 1)
        assert list(snake.head_directions) == [Direction.DOWN]
        vacated = snake.move_tail()
        assert vacated == (0, 1)
        assert snake.tail == (1, 1)

    def test_copy_has_its_own_queue(self):
        snake = Snake((0, 1), (0, 0), [Direction.RIGHT])
        clone = snake.copy()
        clone.move_head((0, 2), Direction.RIGHT)
        assert len(snake.head_directions) == 1
        assert clone.length == 3
