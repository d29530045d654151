"""Uniform piece randomizer"""
import random
from typing import Optional

from tetris_piece import KINDS


class UniformRandom:
    """Independent uniform choice over the seven kinds, one draw per piece.

    Pass a seed (or a ready ``random.Random``) for reproducible sequences;
    with neither, the generator is seeded from the OS.
    """

    PIECES = KINDS

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random(seed)

    def next_piece(self) -> str:
        return self.rng.choice(self.PIECES)
