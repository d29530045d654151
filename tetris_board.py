"""Board helpers: collide, merge, sweep, ghost"""
from typing import List, Optional

from tetris_piece import Piece

Board = List[List[Optional[str]]]


def empty_board(cols: int, rows: int) -> Board:
    return [[None] * cols for _ in range(rows)]


def collide(board: Board, piece: Piece) -> bool:
    """Return True if piece hits a wall, the floor or a settled block.

    Cells above row 0 are free: a piece may hang partly above the board.
    """
    rows, cols = len(board), len(board[0])
    for bx, by in piece.cells():
        if bx < 0 or bx >= cols or by >= rows:
            return True
        if by >= 0 and board[by][bx] is not None:
            return True
    return False


def merge(board: Board, piece: Piece) -> int:
    """Write the piece into the board (no collision check); return cells written."""
    written = 0
    for bx, by in piece.cells():
        if 0 <= by < len(board):
            board[by][bx] = piece.kind
            written += 1
    return written


def sweep(board: Board) -> int:
    """Clear full lines bottom-up and return the number of cleared rows."""
    cols = len(board[0])
    c = 0
    y = len(board) - 1
    while y >= 0:
        if all(cell is not None for cell in board[y]):
            del board[y]
            board.insert(0, [None] * cols)
            c += 1
        else:
            y -= 1
    return c


def ghost_y(board: Board, piece: Piece) -> int:
    """Return the y position where the piece would land if hard-dropped."""
    test = piece.moved(0, 0)
    while not collide(board, test.moved(0, 1)):
        test.y += 1
    return test.y
