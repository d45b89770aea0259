"""Cell values, shape catalog, piece model and rotation"""
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

COLS, ROWS = 10, 20

EMPTY, ZERO, ONE = 0, 1, 2

Grid = List[List[int]]

SHAPES = {
    "I": [[1,1,1,1]],
    "J": [[0,1,0],[0,1,0],[1,1,0]],
    "L": [[0,1,0],[0,1,0],[0,1,1]],
    "O": [[1,1],[1,1]],
    "S": [[0,1,1],[1,1,0],[0,0,0]],
    "T": [[0,1,0],[1,1,1],[0,0,0]],
    "Z": [[1,1,0],[0,1,1],[0,0,0]],
}
NAMES = list(SHAPES)

# colour tag per shape; the digit, not the tag, decides how a cell is drawn
TAGS = {"I": "green", "J": "red", "L": "green", "O": "red",
        "S": "green", "T": "red", "Z": "green"}

def rotate_cw(grid: Grid) -> Grid:
    """Quarter turn clockwise: column c, read bottom-up, becomes row c."""
    h, w = len(grid), len(grid[0])
    return [[grid[h-1-r][c] for r in range(h)] for c in range(w)]

def rotate_ccw(grid: Grid) -> Grid:
    h, w = len(grid), len(grid[0])
    return [[grid[r][w-1-c] for r in range(h)] for c in range(w)]

def flip(v: int) -> int:
    if v == ZERO: return ONE
    if v == ONE: return ZERO
    return v

@dataclass
class Piece:
    name: str
    shape: Grid
    x: int
    y: int
    tag: str = ""

    @staticmethod
    def spawn(name: str, bits: Iterable) -> "Piece":
        """Build a piece from catalog entry `name`, one bit per occupied cell.

        Bits are consumed in row-major order: falsy gives ZERO, truthy ONE.
        """
        it = iter(bits)
        shape = [[(ONE if next(it) else ZERO) if v else EMPTY for v in r]
                 for r in SHAPES[name]]
        w = len(shape[0])
        return Piece(name, shape, COLS//2 - w//2, 0, TAGS[name])

    @property
    def width(self) -> int: return len(self.shape[0])

    @property
    def height(self) -> int: return len(self.shape)

    def cells(self) -> Iterator[Tuple[int, int, int]]:
        for y,row in enumerate(self.shape):
            for x,v in enumerate(row):
                if v: yield self.x+x, self.y+y, v

    def rotated(self, direction: int) -> Grid:
        return rotate_cw(self.shape) if direction > 0 else rotate_ccw(self.shape)

    def swap_values(self):
        self.shape = [[flip(v) for v in r] for r in self.shape]

    def copy(self) -> "Piece":
        return Piece(self.name, [r[:] for r in self.shape], self.x, self.y, self.tag)
