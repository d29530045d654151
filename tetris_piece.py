"""Piece model, kind table, clockwise rotation"""
from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple

# Canonical shapes (minimal bounding box), 1s are blocks. Order matters:
# the default randomizer picks uniformly over this sequence.
SHAPES: Dict[str, Tuple[Tuple[int, ...], ...]] = {
    "I": ((1, 1, 1, 1),),
    "O": ((1, 1),
          (1, 1)),
    "T": ((0, 1, 0),
          (1, 1, 1)),
    "S": ((0, 1, 1),
          (1, 1, 0)),
    "Z": ((1, 1, 0),
          (0, 1, 1)),
    "J": ((1, 0, 0),
          (1, 1, 1)),
    "L": ((0, 0, 1),
          (1, 1, 1)),
}

KINDS: Tuple[str, ...] = tuple(SHAPES)

COLORS: Dict[str, str] = {
    "I": "#00f0f0",
    "O": "#f0f000",
    "T": "#a000f0",
    "S": "#00f000",
    "Z": "#f00000",
    "J": "#0000f0",
    "L": "#f0a000",
}


def rotate_cw(m):
    """Rotate a shape 90° clockwise: rotated[x][rows-1-y] = m[y][x]."""
    return [list(r) for r in zip(*m[::-1])]


@dataclass
class Piece:
    kind: str
    shape: List[List[int]]
    x: int
    y: int

    @staticmethod
    def spawn(kind: str, cols: int) -> "Piece":
        # Fresh mutable copy so rotating an instance never touches SHAPES
        shape = [list(r) for r in SHAPES[kind]]
        return Piece(kind, shape, (cols - len(shape[0])) // 2, 0)

    def moved(self, dx: int, dy: int) -> "Piece":
        return Piece(self.kind, [r[:] for r in self.shape], self.x + dx, self.y + dy)

    def rotated(self) -> "Piece":
        return Piece(self.kind, rotate_cw(self.shape), self.x, self.y)

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Yield absolute (x, y) of every occupied cell, rows above the board included."""
        for dy, row in enumerate(self.shape):
            for dx, v in enumerate(row):
                if v:
                    yield self.x + dx, self.y + dy
