import curses
import logging

from ..game.board import Cell
from ..utils.keys import read_input

logger = logging.getLogger(__name__)

GLYPHS = {
    Cell.EMPTY: " ",
    Cell.SNAKE: "▮",
    Cell.FOOD: "✸",
}
TOP_BORDER = "⎯"
BOTTOM_BORDER = "⎺"
SIDE_BORDER = "|"


def grid_lines(grid):
    """Text rows of the bordered board, top border first."""
    # Two extra columns for the side borders.
    width = grid.shape[1] + 2
    lines = [TOP_BORDER * width]
    for row in grid:
        cells = "".join(GLYPHS[Cell(cell)] for cell in row)
        lines.append(f"{SIDE_BORDER}{cells}{SIDE_BORDER}")
    lines.append(BOTTOM_BORDER * width)
    return lines


class Terminal:
    """Draws the board in a curses window and polls it for keys without blocking."""

    def __init__(self, stdscr):
        self.stdscr = stdscr

    def setup(self):
        self._set_cursor(0)
        self.stdscr.nodelay(True)
        self.stdscr.keypad(True)

    def restore(self):
        self._set_cursor(1)

    def _set_cursor(self, visibility):
        try:
            curses.curs_set(visibility)
        except curses.error:
            # Some terminals cannot change cursor visibility at all.
            logger.debug("terminal cannot set cursor visibility to %d", visibility)

    def refresh(self, message, grid):
        # The whole screen is redrawn on every tick.
        self.stdscr.erase()
        self.stdscr.addstr(0, 0, message)
        for y, line in enumerate(grid_lines(grid), start=1):
            self.stdscr.addstr(y, 0, line)
        self.stdscr.refresh()

    def pending_keys(self):
        while True:
            key = self.stdscr.getch()
            if key == -1:
                return
            yield key

    def poll(self):
        return read_input(self.pending_keys())
