
import collections

from .direction import next_position


class Snake:
    """
    Tracks the snake through its two ends only.

    The body itself is never stored: every move of the head is queued in
    head_directions (newest at the front) and the tail replays those moves
    from the back, one per tick, so moving costs the same for any length.
    """
    def __init__(self, head, tail, directions):
        self.head = head
        self.tail = tail
        self.head_directions = collections.deque(directions)

    def move_head(self, new_head, direction):
        self.head = new_head
        self.head_directions.appendleft(direction)

    def move_tail(self):
        # The tail follows the oldest head move it has not replayed yet.
        vacated = self.tail
        direction = self.head_directions.pop()
        self.tail = next_position(self.tail, direction)
        return vacated

    @property
    def length(self):
        return len(self.head_directions) + 1

    def copy(self):
        return Snake(self.head, self.tail, self.head_directions)
