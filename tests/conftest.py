import pytest

from bintris_piece import COLS, ROWS, EMPTY, ZERO, ONE

CHARS = {".": EMPTY, "0": ZERO, "1": ONE}


def make_board(*rows):
    """Board whose bottom rows are given as strings ('.', '0', '1'), top row first."""
    board = [[EMPTY] * COLS for _ in range(ROWS - len(rows))]
    for r in rows:
        board.append([CHARS[ch] for ch in r.ljust(COLS, ".")])
    return board


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock(1000)
