"""
Rendering helpers for the Tetris front-end.

- Pre-render one block Surface per color token and blit it.
- Pre-render the static background (grid + panel frame) once per Dims.
- Cache HUD text surfaces; re-render only when values change.
- Cache a BOARD SURFACE with all *locked* blocks; rebuild it only on lock/line clear.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, List, Optional
from tetris_layout import Dims
from tetris_piece import Piece

BG = (10,10,10)
GRID = (40,40,70)
TEXT = (200,210,240)
DIM_TEXT = (165,175,215)

@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    lines: int = -1
    next_key: tuple = ()
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    next_s: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self._make_static()
        self.cell_surf: Dict[str, pygame.Surface] = {}
        self.hud = HudCache()
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BG)
        for x in range(d.cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, GRID, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(d.rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, GRID, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,21,46), panel_rect)
        pygame.draw.rect(self.bg, (60,60,110), panel_rect, 1)
        # Next preview frame
        self.pv_cell = max(12, int(d.cell*0.5))
        self.pv_x = d.panel_x + 12
        self.pv_y = d.panel_y + 150
        frame = pygame.Rect(self.pv_x-6, self.pv_y-6, self.pv_cell*4+12, self.pv_cell*4+12)
        pygame.draw.rect(self.bg, (15,15,35), frame)
        pygame.draw.rect(self.bg, (60,60,110), frame, 1)

    # ---------- Block sprites, lazily per color ----------
    def _block(self, color: str, size: int) -> pygame.Surface:
        key = f"{color}@{size}"
        s = self.cell_surf.get(key)
        if s is None:
            s = pygame.Surface((size, size))
            s.fill(pygame.Color(color))
            pygame.draw.rect(s, (255,255,255), (0,0,size,size), 1)
            self.cell_surf[key] = s
        return s

    def redraw_static(self, screen: pygame.Surface):
        screen.blit(self.bg, (0,0))

    # ---------- Board surface cache ----------
    def rebuild_board_surface(self, board: List[List[Optional[str]]]):
        """Rebuilds the "locked blocks" surface from board contents."""
        self.board_surface.fill((0,0,0,0))
        c = self.dims.cell
        for y, row in enumerate(board):
            for x, color in enumerate(row):
                if color:
                    self.board_surface.blit(self._block(color, c), (x*c, y*c))

    def blit_board_surface(self, screen: pygame.Surface):
        screen.blit(self.board_surface, (self.dims.board_x, self.dims.board_y))

    def draw_piece(self, screen: pygame.Surface, piece: Piece):
        c = self.dims.cell
        block = self._block(piece.color, c)
        for bx, by in piece.cells():
            if by >= 0:
                screen.blit(block, (self.dims.board_x + bx*c, self.dims.board_y + by*c))

    # ---------- HUD / Panel ----------
    def _render_next(self, piece: Piece) -> pygame.Surface:
        s = pygame.Surface((self.pv_cell*4, self.pv_cell*4), pygame.SRCALPHA)
        offx = (4 - piece.width) // 2
        offy = (4 - piece.height) // 2
        block = self._block(piece.color, self.pv_cell)
        for y, row in enumerate(piece.shape):
            for x, v in enumerate(row):
                if v:
                    s.blit(block, ((x + offx) * self.pv_cell, (y + offy) * self.pv_cell))
        return s

    def draw_panel_hud(self, screen: pygame.Surface, score: int, level: int, lines: int, next_piece: Piece):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Neon Tetris", True, (0,255,255))
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = f.render(f"Score: {score}", True, TEXT)
        if level != self.hud.level:
            self.hud.level = level
            self.hud.level_s = f.render(f"Level: {level}", True, TEXT)
        if lines != self.hud.lines:
            self.hud.lines = lines
            self.hud.lines_s = f.render(f"Lines: {lines}", True, TEXT)
        next_key = (next_piece.t, next_piece.color)
        if next_key != self.hud.next_key:
            self.hud.next_key = next_key
            self.hud.next_s = self._render_next(next_piece)
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(self.hud.level_s, (d.panel_x + 12, d.panel_y + 68))
        screen.blit(self.hud.lines_s, (d.panel_x + 12, d.panel_y + 92))
        screen.blit(f.render("Next:", True, TEXT), (d.panel_x + 12, d.panel_y + 126))
        screen.blit(self.hud.next_s, (self.pv_x, self.pv_y))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, TEXT),
                f.render("←/→ A/D Move", True, DIM_TEXT),
                f.render("↓ S Soft drop", True, DIM_TEXT),
                f.render("↑ W R Rotate", True, DIM_TEXT),
                f.render("Space/P Pause", True, DIM_TEXT),
                f.render("Enter Start", True, DIM_TEXT),
                f.render("N Restart", True, DIM_TEXT),
            ]
        y = d.panel_y + 150 + self.pv_cell*4 + 24
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20
