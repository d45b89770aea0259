"""Seedable piece factory: shape choice plus one random digit per cell"""
import random
from typing import Optional
from bintris_piece import Piece, NAMES, SHAPES

class BinaryRandom:
    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = random.getrandbits(32)
        self.seed = seed & 0xFFFFFFFF
        self.state = self.seed

    def _lcg_next(self):
        self.state = (self.state * 0x41C64E6D + 0x3039) & 0xFFFFFFFF
        return self.state

    def _rand(self):
        return (self._lcg_next() >> 16) & 0x7FFF

    def next_shape(self) -> str:
        return NAMES[self._rand() % len(NAMES)]

    def next_bit(self) -> int:
        # top bit of the 15-bit draw; the low LCG bits cycle with short periods
        return self._rand() >> 14

    def next_piece(self) -> Piece:
        name = self.next_shape()
        n = sum(v for r in SHAPES[name] for v in r)
        return Piece.spawn(name, [self.next_bit() for _ in range(n)])
