"""
Falling-block simulation engine
===============================

The Engine owns the board, the falling piece, the look-ahead piece, score,
level and the game-over flag. It is a plain synchronous state machine:

  • advance()    : one tick of gravity (spawn, fall, or lock + clear + spawn)
  • move_left()  / move_right() / soft_drop() : atomic one-cell moves
  • rotate_current() : clockwise rotation, no wall kicks
  • hard_drop()  : fall as far as possible, then lock on the same call

It never schedules time, draws, or reads input. A driver (see main.py) calls
advance() at tick_interval_ms(engine.level) and forwards commands between
ticks, then re-reads state to redraw.

States:

  Idle (current is None)  --advance-->  Running  --spawn blocked-->  GameOver

GameOver is terminal: every command becomes a no-op that returns a
"nothing happened" value.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple

from tetris_board import Board, collide, empty_board, merge, sweep
from tetris_config import CONFIG
from tetris_piece import Piece
from tetris_rng import UniformRandom

# -------------------------------------------------------------
# SCORING & LEVEL PROGRESSION
# -------------------------------------------------------------
LOCK_POINTS = 10                          # Awarded once per locked piece, any shape
LINE_POINTS = (0, 100, 300, 500, 800)     # Indexed by rows cleared in one pass
LEVEL_SCORE_STEP = 300                    # One level per 300 points


class TickOutcome(Enum):
    """What a single advance() did, so the driver knows what to redraw."""
    NOOP = auto()
    SPAWNED = auto()
    FELL = auto()
    LOCKED = auto()
    GAME_OVER = auto()


@dataclass(frozen=True)
class EngineState:
    """Read-only copy of everything a driver may display."""
    board: Tuple[Tuple[Optional[str], ...], ...]
    current: Optional[Piece]
    next: Piece
    score: int
    level: int
    lines: int
    game_over: bool


class Engine:
    def __init__(self, width: int = 10, height: int = 20, rng=None):
        if width <= 0 or height <= 0:
            raise ValueError(f"board must be at least 1x1, got {width}x{height}")
        self.width = width
        self.height = height
        # Anything with next_piece() -> kind letter
        self.rng = rng if rng is not None else UniformRandom(CONFIG["SEED"])

        self.board: Board = empty_board(width, height)
        self.score = 0
        self.level = 1
        self.lines = 0
        self.locks = 0
        self.game_over = False

        self.current: Optional[Piece] = None
        self.next: Piece = self.generate_piece()

    # ---------------------------------------------------------
    # Pieces
    # ---------------------------------------------------------
    def generate_piece(self) -> Piece:
        return Piece.spawn(self.rng.next_piece(), self.width)

    def is_valid_move(self, piece: Piece) -> bool:
        return not collide(self.board, piece)

    def move_piece(self, dx: int, dy: int) -> bool:
        """Translate the current piece by (dx, dy) if the whole move fits."""
        if self.game_over or self.current is None:
            return False
        candidate = self.current.moved(dx, dy)
        if not self.is_valid_move(candidate):
            return False
        self.current = candidate
        return True

    def rotate(self, piece: Piece) -> Piece:
        """Return a clockwise-rotated copy at the same origin, or piece itself if blocked."""
        candidate = piece.rotated()
        return candidate if self.is_valid_move(candidate) else piece

    def rotate_current(self) -> bool:
        if self.game_over or self.current is None:
            return False
        rotated = self.rotate(self.current)
        if rotated is self.current:
            return False
        self.current = rotated
        return True

    def move_left(self) -> bool:
        return self.move_piece(-1, 0)

    def move_right(self) -> bool:
        return self.move_piece(1, 0)

    def soft_drop(self) -> bool:
        return self.move_piece(0, 1)

    # ---------------------------------------------------------
    # Lock, clear, spawn
    # ---------------------------------------------------------
    def merge_piece(self) -> None:
        if self.game_over or self.current is None:
            return
        merge(self.board, self.current)
        self.score += LOCK_POINTS
        self.locks += 1

    def clear_lines(self) -> int:
        if self.game_over:
            return 0
        cleared = sweep(self.board)
        if cleared:
            self.score += LINE_POINTS[min(cleared, len(LINE_POINTS) - 1)]
            self.lines += cleared
            # Single step per clear, even if several thresholds were crossed
            if self.score // LEVEL_SCORE_STEP > self.level - 1:
                self.level += 1
        return cleared

    def spawn_piece(self) -> None:
        if self.game_over:
            return
        self.current = self.next
        self.next = self.generate_piece()
        if not self.is_valid_move(self.current):
            self.game_over = True

    # ---------------------------------------------------------
    # Tick & hard drop
    # ---------------------------------------------------------
    def advance(self) -> TickOutcome:
        if self.game_over:
            return TickOutcome.NOOP
        if self.current is None:
            self.spawn_piece()
            return TickOutcome.GAME_OVER if self.game_over else TickOutcome.SPAWNED
        if self.move_piece(0, 1):
            return TickOutcome.FELL
        self.merge_piece()
        self.clear_lines()
        self.spawn_piece()
        return TickOutcome.GAME_OVER if self.game_over else TickOutcome.LOCKED

    def hard_drop(self) -> int:
        """Drop to the lowest valid row and lock immediately; return rows fallen."""
        if self.game_over:
            return 0
        dropped = 0
        while self.move_piece(0, 1):
            dropped += 1
        self.advance()
        return dropped

    # ---------------------------------------------------------
    # Exposed state
    # ---------------------------------------------------------
    def snapshot(self) -> EngineState:
        current = self.current.moved(0, 0) if self.current is not None else None
        return EngineState(
            board=tuple(tuple(row) for row in self.board),
            current=current,
            next=self.next.moved(0, 0),
            score=self.score,
            level=self.level,
            lines=self.lines,
            game_over=self.game_over,
        )
