from __future__ import annotations

from typing import Iterable, List

from tetris import Engine


class FixedSequence:
    """Stands in for the randomizer: hands out kinds in order, then repeats the last."""

    def __init__(self, kinds: Iterable[str]) -> None:
        self.kinds: List[str] = list(kinds)
        self.drawn = 0

    def next_piece(self) -> str:
        kind = self.kinds[min(self.drawn, len(self.kinds) - 1)]
        self.drawn += 1
        return kind


def make_engine(*kinds: str, width: int = 10, height: int = 20) -> Engine:
    return Engine(width, height, rng=FixedSequence(kinds or ("O",)))


def fill_row(engine: Engine, y: int, kind: str = "X", skip=()) -> None:
    engine.board[y] = [None if x in skip else kind for x in range(engine.width)]
