"""
Rendering helpers for the pygame driver.

- Pre-render one cell sprite per kind color (solid + ghost outline) and blit them.
- Pre-render the static background (grid + panel frame + preview frame).
- Cache a BOARD SURFACE with the locked blocks; rebuild it only after a lock.
- Cache HUD text surfaces; re-render only when values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from tetris_board import Board, ghost_y
from tetris_layout import Dims
from tetris_piece import COLORS, Piece

BG = (10, 13, 34)
GRID = (40, 50, 90)
TEXT = (200, 210, 240)
DIM_TEXT = (165, 175, 215)


@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    lines: int = -1
    next_kind: str = ""
    legend: Optional[List[Tuple[str, str]]] = None
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    preview: Optional[pygame.Surface] = None
    legend_s: Optional[List[pygame.Surface]] = None


class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self._make_static()
        self.cell_surf = self._make_cells(dims.cell)
        self.pv_surf = self._make_cells(self.pv_cell)
        self.ghost_surf = self._make_ghosts(dims.cell)
        self.hud = HudCache()
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self.board_locks = -1

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BG)
        for x in range(d.cols + 1):
            X = d.board_x + x * d.cell
            pygame.draw.line(self.bg, GRID, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(d.rows + 1):
            Y = d.board_y + y * d.cell
            pygame.draw.line(self.bg, GRID, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21, 25, 53), panel)
        pygame.draw.rect(self.bg, (50, 60, 100), panel, 1)
        # Next preview frame, 4x4 cells
        self.pv_cell = max(14, int(d.cell * 0.75))
        self.pv_x = d.panel_x + 12
        self.pv_y = d.panel_y + 40
        frame = pygame.Rect(self.pv_x - 6, self.pv_y - 6, self.pv_cell * 4 + 12, self.pv_cell * 4 + 12)
        pygame.draw.rect(self.bg, (15, 18, 40), frame)
        pygame.draw.rect(self.bg, (55, 65, 110), frame, 1)

    # ---------- Cell sprites ----------
    @staticmethod
    def _make_cells(size: int) -> Dict[str, pygame.Surface]:
        cells = {}
        for kind, hex_color in COLORS.items():
            s = pygame.Surface((size - 1, size - 1), pygame.SRCALPHA)
            s.fill(pygame.Color(hex_color))
            # Top highlight strip
            s.fill((255, 255, 255, 51), (0, 0, size - 1, size // 4), special_flags=pygame.BLEND_RGBA_ADD)
            cells[kind] = s
        return cells

    @staticmethod
    def _make_ghosts(size: int) -> Dict[str, pygame.Surface]:
        ghosts = {}
        for kind, hex_color in COLORS.items():
            g = pygame.Surface((size - 8, size - 8), pygame.SRCALPHA)
            pygame.draw.rect(g, pygame.Color(hex_color), (0, 0, size - 8, size - 8), 2)
            ghosts[kind] = g
        return ghosts

    # ---------- Board surface cache ----------
    def rebuild_board_surface(self, board: Board):
        """Rebuilds the "locked blocks" surface from board contents."""
        self.board_surface.fill((0, 0, 0, 0))
        c = self.dims.cell
        for y, row in enumerate(board):
            for x, kind in enumerate(row):
                if kind is not None:
                    self.board_surface.blit(self.cell_surf[kind], (x * c + 1, y * c + 1))

    def cell_pos(self, bx: int, by: int, inset: int = 1) -> Tuple[int, int]:
        return (self.dims.board_x + bx * self.dims.cell + inset,
                self.dims.board_y + by * self.dims.cell + inset)

    def draw_piece(self, screen: pygame.Surface, piece: Piece):
        for bx, by in piece.cells():
            if by >= 0:
                screen.blit(self.cell_surf[piece.kind], self.cell_pos(bx, by))

    def draw_ghost(self, screen: pygame.Surface, board: Board, piece: Piece):
        gy = ghost_y(board, piece)
        if gy == piece.y:
            return
        for bx, by in piece.moved(0, gy - piece.y).cells():
            if by >= 0:
                screen.blit(self.ghost_surf[piece.kind], self.cell_pos(bx, by, 4))

    # ---------- HUD / Panel ----------
    def _preview(self, piece: Piece) -> pygame.Surface:
        s = pygame.Surface((self.pv_cell * 4, self.pv_cell * 4), pygame.SRCALPHA)
        offx = (4 - len(piece.shape[0])) * self.pv_cell // 2
        offy = (4 - len(piece.shape)) * self.pv_cell // 2
        for y, row in enumerate(piece.shape):
            for x, v in enumerate(row):
                if v:
                    s.blit(self.pv_surf[piece.kind], (offx + x * self.pv_cell, offy + y * self.pv_cell))
        return s

    def draw_panel_hud(self, screen: pygame.Surface, engine, legend: List[Tuple[str, str]]):
        d = self.dims
        f = self.font
        if engine.score != self.hud.score:
            self.hud.score = engine.score
            self.hud.score_s = f.render(f"Score: {engine.score}", True, TEXT)
        if engine.level != self.hud.level:
            self.hud.level = engine.level
            self.hud.level_s = f.render(f"Level: {engine.level}", True, TEXT)
        if engine.lines != self.hud.lines:
            self.hud.lines = engine.lines
            self.hud.lines_s = f.render(f"Lines: {engine.lines}", True, TEXT)
        if self.hud.preview is None or engine.next.kind != self.hud.next_kind:
            self.hud.next_kind = engine.next.kind
            self.hud.preview = self._preview(engine.next)
        if legend != self.hud.legend:
            self.hud.legend = list(legend)
            self.hud.legend_s = [f.render("Controls", True, TEXT)]
            self.hud.legend_s += [f.render(f"{key} : {label}", True, DIM_TEXT) for key, label in legend]
            self.hud.legend_s.append(f.render("R Restart • P Pause", True, DIM_TEXT))

        screen.blit(f.render("Next Piece", True, TEXT), (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.preview, (self.pv_x, self.pv_y))
        y = self.pv_y + self.pv_cell * 4 + 24
        for surf in (self.hud.score_s, self.hud.level_s, self.hud.lines_s):
            screen.blit(surf, (d.panel_x + 12, y)); y += 24
        y += 16
        for surf in self.hud.legend_s:
            screen.blit(surf, (d.panel_x + 12, y)); y += 22

    def draw_banner(self, screen: pygame.Surface, text: str, sub: str = ""):
        d = self.dims
        shade = pygame.Surface((d.board_w, d.board_h), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 190))
        screen.blit(shade, (d.board_x, d.board_y))
        cx, cy = d.board_x + d.board_w // 2, d.board_y + d.board_h // 2
        msg = self.big_font.render(text, True, (255, 255, 255))
        screen.blit(msg, msg.get_rect(center=(cx, cy)))
        if sub:
            s = self.font.render(sub, True, TEXT)
            screen.blit(s, s.get_rect(center=(cx, cy + 36)))

    # ---------- Full frame ----------
    def draw(self, screen: pygame.Surface, engine, legend: List[Tuple[str, str]]):
        if engine.locks != self.board_locks:
            self.board_locks = engine.locks
            self.rebuild_board_surface(engine.board)
        screen.blit(self.bg, (0, 0))
        screen.blit(self.board_surface, (self.dims.board_x, self.dims.board_y))
        if engine.current is not None and not engine.game_over:
            self.draw_ghost(screen, engine.board, engine.current)
            self.draw_piece(screen, engine.current)
        self.draw_panel_hud(screen, engine, legend)
