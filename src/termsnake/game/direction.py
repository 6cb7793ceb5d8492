from enum import IntEnum


class Direction(IntEnum):
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


DIRECTIONS = {
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
}


def next_position(pos, direction):
    """Cell reached by one step from pos; may lie outside the grid."""
    dr, dc = DIRECTIONS[direction]
    return (int(pos[0]) + dr, int(pos[1]) + dc)
