class FakeScreen:
    """Stands in for a curses window: replays keys and records drawing calls."""

    def __init__(self, keys=()):
        self.keys = list(keys)
        self.calls = []

    def getch(self):
        if self.keys:
            return self.keys.pop(0)
        return -1

    def nodelay(self, flag):
        self.calls.append(("nodelay", flag))

    def keypad(self, flag):
        self.calls.append(("keypad", flag))

    def erase(self):
        self.calls.append(("erase",))

    def addstr(self, y, x, text):
        self.calls.append(("addstr", y, x, text))

    def refresh(self):
        self.calls.append(("refresh",))
