import curses

from ..game.direction import Direction

QUIT = "quit"

QUIT_KEYS = {ord("q"), ord("Q"), 27}  # 27 is ESC

ARROW_KEYS = {
    curses.KEY_UP: Direction.UP,
    curses.KEY_RIGHT: Direction.RIGHT,
    curses.KEY_DOWN: Direction.DOWN,
    curses.KEY_LEFT: Direction.LEFT,
}


def read_input(keys):
    """
    Reduces the keys pressed since the last tick to a single command.

    Only the last arrow key counts; a quit key wins as soon as it is seen
    and the remaining keys are left unread. Returns QUIT, a Direction or
    None when nothing usable was pressed.
    """
    command = None
    for key in keys:
        if key in QUIT_KEYS:
            return QUIT
        if key in ARROW_KEYS:
            command = ARROW_KEYS[key]
    return command
