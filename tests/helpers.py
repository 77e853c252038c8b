from tetris_config import COLS


class ScriptedRandom:
    """Random source that replays fixed values, then repeats the last one."""
    def __init__(self, ints=(0,), doubles=(0.5,)):
        self.ints = list(ints)
        self.doubles = list(doubles)
        self.int_calls = []

    def next_int(self, n):
        v = self.ints.pop(0) if len(self.ints) > 1 else self.ints[0]
        self.int_calls.append(n)
        return v % n

    def next_double(self):
        return self.doubles.pop(0) if len(self.doubles) > 1 else self.doubles[0]

    def next_piece_index(self):
        return self.next_int(7)


def full_row(t):
    return [t] * COLS


def filled_count(board):
    return sum(1 for row in board for v in row if v is not None)
