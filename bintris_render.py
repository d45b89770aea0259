"""
Rendering helpers for Binary Tetris.

- Pre-render one cell sprite per digit (coral 0, sky-blue 1) with the digit on it.
- Pre-render the static background (grid + panel frame) once per Dims.
- Cache HUD text surfaces; re-render only when values change.
- Cache a BOARD SURFACE with the locked cells; rebuild it only when the
  game's board_version moves.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Tuple, List, Optional
from bintris_layout import Dims
from bintris_piece import Piece, COLS, ROWS, ZERO, ONE

DIGIT_COLORS: Dict[int, Tuple[int,int,int]] = {
    ZERO: (247,118,142),
    ONE: (125,207,255),
}
TEXT = (200,210,240)
INK = (26,27,38)

@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    lines: int = -1
    best: int = -1
    next_piece: Optional[Piece] = None
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    best_s: Optional[pygame.Surface] = None
    preview: Optional[pygame.Surface] = None
    controls: Optional[list] = None

def digit_sprite(value: int, size: int, font: pygame.font.Font) -> pygame.Surface:
    s = pygame.Surface((size, size), pygame.SRCALPHA)
    pygame.draw.rect(s, DIGIT_COLORS[value], (0,0,size,size), border_radius=4)
    pygame.draw.rect(s, (0,0,0), (0,0,size,size), 1, border_radius=4)
    label = font.render("0" if value == ZERO else "1", True, INK)
    s.blit(label, label.get_rect(center=(size//2, size//2)))
    return s

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self.digit_font = pygame.font.SysFont("monospace", int(dims.cell*0.6), bold=True)
        self._make_static()
        self.cell_surf = {v: digit_sprite(v, dims.cell-1, self.digit_font) for v in DIGIT_COLORS}
        self.hud = HudCache()
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self.board_version = -1

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((26,27,38))
        grid_col = (41,46,66)
        for x in range(COLS+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(ROWS+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (31,35,53), panel_rect)
        pygame.draw.rect(self.bg, (59,66,97), panel_rect, 1)
        self.pv_cell = max(14, int(d.cell*0.7))
        self.pv_x = d.panel_x + 12
        self.pv_y = d.panel_y + 170
        frame = pygame.Rect(self.pv_x-6, self.pv_y-6, self.pv_cell*4+12, self.pv_cell*4+12)
        pygame.draw.rect(self.bg, (22,22,30), frame)
        pygame.draw.rect(self.bg, (59,66,97), frame, 1)
        self.pv_font = pygame.font.SysFont("monospace", int(self.pv_cell*0.6), bold=True)

    # ---------- Board surface cache ----------
    def sync_board(self, board: List[List[int]], version: int):
        """Rebuild the locked-cell surface if the board changed since last frame."""
        if version == self.board_version: return
        self.board_surface.fill((0,0,0,0))
        c = self.dims.cell
        for y in range(ROWS):
            for x in range(COLS):
                v = board[y][x]
                if v:
                    self.board_surface.blit(self.cell_surf[v], (x*c + 1, y*c + 1))
        self.board_version = version

    def draw_piece(self, screen: pygame.Surface, piece: Piece):
        d = self.dims
        for bx, by, v in piece.cells():
            if by >= 0:
                screen.blit(self.cell_surf[v], (d.board_x + bx*d.cell + 1, d.board_y + by*d.cell + 1))

    def draw_frame(self, screen: pygame.Surface, game, best: int):
        screen.blit(self.bg, (0,0))
        self.sync_board(game.board, game.board_version)
        screen.blit(self.board_surface, (self.dims.board_x, self.dims.board_y))
        if game.current is not None:
            self.draw_piece(screen, game.current)
        self.draw_panel_hud(screen, game.session, best, game.next)
        if game.session.game_over:
            self.banner(screen, "GAME OVER", "Enter to play again")
        elif game.session.paused:
            self.banner(screen, "PAUSED", "P to resume")
        elif not game.started:
            self.banner(screen, "BINARY TETRIS", "Enter to start")

    def banner(self, screen: pygame.Surface, title: str, hint: str):
        d = self.dims
        shade = pygame.Surface((d.board_w, d.board_h), pygame.SRCALPHA)
        shade.fill((10,10,20,170))
        screen.blit(shade, (d.board_x, d.board_y))
        cx, cy = d.board_center
        msg = self.big_font.render(title, True, (255,158,100))
        screen.blit(msg, msg.get_rect(center=(cx, cy - 16)))
        sub = self.font.render(hint, True, TEXT)
        screen.blit(sub, sub.get_rect(center=(cx, cy + 18)))

    # ---------- HUD / Panel ----------
    def _render_preview(self, piece: Piece) -> pygame.Surface:
        s = pygame.Surface((self.pv_cell*4, self.pv_cell*4), pygame.SRCALPHA)
        offx = (4 - piece.width) * self.pv_cell // 2
        offy = max(0, (4 - piece.height) * self.pv_cell // 2)
        for y, row in enumerate(piece.shape):
            for x, v in enumerate(row):
                if v:
                    block = digit_sprite(v, self.pv_cell-2, self.pv_font)
                    s.blit(block, (offx + x*self.pv_cell + 1, offy + y*self.pv_cell + 1))
        return s

    def draw_panel_hud(self, screen: pygame.Surface, session, best: int, next_piece: Optional[Piece]):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Binary Tetris", True, (197,202,233))
        if session.score != self.hud.score:
            self.hud.score = session.score
            self.hud.score_s = f.render(f"Score: {session.score:,}", True, TEXT)
        if session.level != self.hud.level:
            self.hud.level = session.level
            self.hud.level_s = f.render(f"Level: {session.level}", True, TEXT)
        if session.lines != self.hud.lines:
            self.hud.lines = session.lines
            self.hud.lines_s = f.render(f"Lines: {session.lines}", True, TEXT)
        if best != self.hud.best:
            self.hud.best = best
            self.hud.best_s = f.render(f"Best: {best:,}", True, TEXT)
        # pieces are mutable (swap), so compare by value
        if next_piece != self.hud.next_piece:
            self.hud.next_piece = next_piece.copy() if next_piece else None
            self.hud.preview = self._render_preview(next_piece) if next_piece else None
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        y = d.panel_y + 44
        for surf in (self.hud.score_s, self.hud.level_s, self.hud.lines_s, self.hud.best_s):
            screen.blit(surf, (d.panel_x + 12, y)); y += 24
        screen.blit(f.render("Next:", True, TEXT), (d.panel_x + 12, d.panel_y + 146))
        if self.hud.preview:
            screen.blit(self.hud.preview, (self.pv_x, self.pv_y))
        if not self.hud.controls:
            self.hud.controls = [f.render(t, True, (165,175,215)) for t in (
                "Controls:", "←/→ Move", "↓ Soft drop", "↑/X Rot CW", "Z Rot CCW",
                "B Swap 0/1", "Space Hard drop", "P Pause", "Enter Start • R Reset")]
        y = self.pv_y + self.pv_cell*4 + 24
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20
