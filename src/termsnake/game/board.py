
import logging
from enum import IntEnum

import numpy as np

from .direction import Direction, next_position
from .snake import Snake

logger = logging.getLogger(__name__)


class Cell(IntEnum):
    EMPTY = 0
    SNAKE = 1
    FOOD = 2


def in_bounds(grid, row, col):
    nrows, ncols = grid.shape
    return 0 <= row < nrows and 0 <= col < ncols


def scatter_food(grid, max_amount, rng=None):
    """
    Makes up to max_amount random draws and turns each drawn cell into food
    if it is empty. Occupied draws are skipped, not retried, so fewer than
    max_amount cells may receive food. Returns how many cells were filled.
    """
    if rng is None:
        rng = np.random.default_rng()
    nrows, ncols = grid.shape
    placed = 0
    for _ in range(max_amount):
        row = rng.integers(0, nrows)
        col = rng.integers(0, ncols)
        if grid[row, col] == Cell.EMPTY:
            grid[row, col] = Cell.FOOD
            placed += 1
    return placed


class Board:
    INITIAL_DIRECTION = Direction.RIGHT

    def __init__(self, nrows, ncols, timing=1.0):
        if nrows < 1 or ncols < 1:
            raise ValueError(f"grid must have at least one row and column, got {nrows}x{ncols}")
        if ncols < 2:
            raise ValueError("grid needs at least two columns to hold the initial snake")
        self.grid = np.zeros((nrows, ncols), dtype=np.uint8)
        # Seconds to wait between two ticks.
        self.timing = timing
        self.last_direction = self.INITIAL_DIRECTION
        self.snake = Snake(head=(0, 1), tail=(0, 0), directions=[self.INITIAL_DIRECTION])
        self.ticks = 0

        self.grid[self.snake.head] = Cell.SNAKE
        self.grid[self.snake.tail] = Cell.SNAKE

    @property
    def head(self):
        return self.snake.head

    @property
    def tail(self):
        return self.snake.tail

    def add_food(self, max_amount, rng=None):
        placed = scatter_food(self.grid, max_amount, rng)
        logger.debug("placed %d of %d food markers", placed, max_amount)
        return placed

    def advance(self, direction):
        """
        Moves the snake one cell towards direction.

        Returns False, leaving the board untouched, when the head would leave
        the grid. Running over the snake's own body is allowed.
        """
        new_head = next_position(self.snake.head, direction)
        if not in_bounds(self.grid, *new_head):
            logger.info("head would leave the grid at %s after %d ticks", new_head, self.ticks)
            return False

        # Read before the head overwrites the cell.
        ate_food = self.grid[new_head] == Cell.FOOD

        self.grid[new_head] = Cell.SNAKE
        self.snake.move_head(new_head, direction)

        # Keeping the tail in place is what makes the snake grow.
        if ate_food:
            logger.debug("food eaten at %s, length is now %d", new_head, self.snake.length)
        else:
            vacated = self.snake.move_tail()
            self.grid[vacated] = Cell.EMPTY

        self.last_direction = direction
        self.ticks += 1
        return True

    def occupied_count(self):
        return int(np.count_nonzero(self.grid == Cell.SNAKE))

    def food_count(self):
        return int(np.count_nonzero(self.grid == Cell.FOOD))

    def copy(self):
        new_board = Board.__new__(Board)
        new_board.grid = self.grid.copy()
        new_board.timing = self.timing
        new_board.last_direction = self.last_direction
        new_board.snake = self.snake.copy()
        new_board.ticks = self.ticks
        return new_board
