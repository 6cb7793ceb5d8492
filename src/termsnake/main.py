import argparse
import curses
import enum
import itertools
import locale
import logging
import signal
import time

import numpy as np

from . import config
from .game.board import Board
from .game.direction import Direction
from .utils.keys import QUIT
from .visualization.terminal import Terminal

logger = logging.getLogger(__name__)


class Outcome(enum.Enum):
    QUIT = "quit"
    GAME_OVER = "game over"


class GameLoop:
    def __init__(self, board, terminal, sleep=time.sleep, game_over_delay=config.GAME_OVER_DELAY):
        self.board = board
        self.terminal = terminal
        self.sleep = sleep
        self.game_over_delay = game_over_delay
        self.stop_requested = False

    def request_stop(self):
        self.stop_requested = True

    def play(self):
        self.terminal.refresh(config.START_MESSAGE, self.board.grid)

        for tick in itertools.count():
            user_input = self.terminal.poll()
            if user_input == QUIT or self.stop_requested:
                logger.info("quit requested at tick %d", tick)
                return Outcome.QUIT

            # Without a new arrow key the snake keeps its last direction.
            if isinstance(user_input, Direction):
                direction = user_input
            else:
                direction = self.board.last_direction

            if self.board.advance(direction):
                self.terminal.refresh(config.TICK_MESSAGE.format(tick=tick), self.board.grid)
                self.sleep(self.board.timing)
            else:
                self.terminal.refresh(config.GAME_OVER_MESSAGE, self.board.grid)
                self.sleep(self.game_over_delay)
                return Outcome.GAME_OVER


def build_parser():
    parser = argparse.ArgumentParser(prog="termsnake", description="Play snake in the terminal.")
    parser.add_argument("--rows", type=int, default=config.GRID_ROWS, help="Number of grid rows.")
    parser.add_argument("--cols", type=int, default=config.GRID_COLUMNS, help="Number of grid columns.")
    parser.add_argument("--interval", type=float, default=config.TICK_INTERVAL,
                        help="Seconds between two moves of the snake.")
    parser.add_argument("--food", type=int, default=config.MAX_FOOD_AMOUNT,
                        help="Maximum number of food markers scattered at the start.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the food placement.")
    parser.add_argument("--log-file", type=str, default=None, help="Write log records to this file.")
    parser.add_argument("--log-level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Level for --log-file.")
    return parser


def configure_logging(log_file, level):
    # curses owns the screen, so records only go to a file when asked for.
    if log_file:
        logging.basicConfig(filename=log_file, level=level, format=config.LOG_FORMAT)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.interval < 0:
        parser.error("--interval must not be negative")
    if args.food < 0:
        parser.error("--food must not be negative")

    try:
        board = Board(args.rows, args.cols, timing=args.interval)
    except ValueError as e:
        parser.error(str(e))

    configure_logging(args.log_file, args.log_level)
    board.add_food(args.food, np.random.default_rng(args.seed))
    logger.info("starting a %dx%d game with %d food markers", args.rows, args.cols, board.food_count())

    # Needed for the box drawing glyphs.
    locale.setlocale(locale.LC_ALL, "")

    def run(stdscr):
        terminal = Terminal(stdscr)
        loop = GameLoop(board, terminal)

        def signal_handler(sig, frame):
            logger.info("signal %d received, stopping", sig)
            loop.request_stop()

        previous_handlers = {
            signal.SIGINT: signal.signal(signal.SIGINT, signal_handler),    # Ctrl+C
            signal.SIGTERM: signal.signal(signal.SIGTERM, signal_handler),
        }
        terminal.setup()
        try:
            return loop.play()
        finally:
            terminal.restore()
            for sig, handler in previous_handlers.items():
                signal.signal(sig, handler)

    outcome = curses.wrapper(run)
    print(f"{outcome.value.capitalize()} after {board.ticks} moves, snake length {board.snake.length}.")
    return 0
