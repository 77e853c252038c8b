"""Seeded random source shared by piece spawning, junk rows and fragments"""
import random
from typing import Optional


class StageRandom:
    PIECES = 7

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = random.getrandbits(32)
        self.state = seed & 0xFFFFFFFF

    def _lcg_next(self) -> int:
        self.state = (self.state * 0x41C64E6D + 0x3039) & 0xFFFFFFFF
        return self.state

    def _rand(self) -> int:
        return (self._lcg_next() >> 16) & 0x7FFF

    def next_int(self, n: int) -> int:
        """Return an integer in [0, n)."""
        return self._rand() % n

    def next_double(self) -> float:
        """Return a float in [0, 1)."""
        return self._rand() / 32768.0

    def next_piece_index(self) -> int:
        return self.next_int(self.PIECES)
