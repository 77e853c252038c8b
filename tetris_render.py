"""
Rendering helpers for the stage game.

Draws a tetris_snapshot.Snapshot onto a WIDTH x HEIGHT surface. Nothing here
feeds back into the simulation.

- Pre-render one bevelled block Surface per piece type and blit it.
- Pre-build every font size the captions cycle through.
- Cache the 64-entry rainbow palette used by the title and clear captions.
"""
from __future__ import annotations
import math
import pygame
from typing import Dict, List, Tuple

from tetris_config import BLOCK, WIDTH, HEIGHT
from tetris_game import GOAL_FRAMES, TITLE_COLORS
from tetris_lines import CAPTIONS
from tetris_piece import CENTERS, SHAPES, PieceType
from tetris_snapshot import Phase, PieceView, Snapshot

# Colors per tetromino type
COLORS: Dict[PieceType, Tuple[int,int,int]] = {
    PieceType.I: (0,255,255),
    PieceType.J: (0,0,255),
    PieceType.L: (255,165,0),
    PieceType.O: (255,255,0),
    PieceType.S: (50,205,50),
    PieceType.T: (128,0,128),
    PieceType.Z: (255,0,0),
}

MENU_LINES = ["LEFT and RIGHT to move.", "UP to rotate.", "DOWN to drop.",
              "Select level (UP/DOWN):", None, "ENTER to start."]
TITLE = "TETЯIS"


def shade(col, delta):
    return tuple(max(0, min(255, c + delta)) for c in col)


def rainbow() -> List[Tuple[int,int,int]]:
    out = []
    step = math.pi / 32.0
    for i in range(TITLE_COLORS):
        a = i * step
        rgb = (0.5 + math.sin(a) / 2.0,
               0.5 + math.sin(2.0 * math.pi / 3.0 + a) / 2.0,
               0.5 + math.sin(4.0 * math.pi / 3.0 + a) / 2.0)
        out.append(tuple(int(255 * c ** 0.25) for c in rgb))
    return out


def goal_font_size(index: int) -> int:
    return int(25 + 5 * math.sin(2.0 * math.pi * index / GOAL_FRAMES))


class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self):
        self._make_cells()
        self.palette = rainbow()
        self.lines_font = pygame.font.SysFont(None, 18, bold=True)
        self.menu_font = pygame.font.SysFont(None, 20, bold=True)
        self.title_font = pygame.font.SysFont(None, 44, bold=True)
        self.game_over_font = pygame.font.SysFont(None, 260, bold=True)
        self.clear_fonts = [pygame.font.SysFont(None, 34 + i * 3, bold=True) for i in range(len(CAPTIONS))]
        self.goal_fonts = [pygame.font.SysFont(None, int(goal_font_size(i) * 1.5), bold=True)
                           for i in range(GOAL_FRAMES)]

    # ---------- Bevelled block sprites ----------
    def _make_cells(self):
        self.cell_surf: Dict[PieceType, pygame.Surface] = {}
        e = BLOCK - 1
        for t, col in COLORS.items():
            s = pygame.Surface((BLOCK, BLOCK), pygame.SRCALPHA)
            light, dark = shade(col, 64), shade(col, -64)
            s.fill(col, (2, 2, BLOCK - 4, BLOCK - 4))
            pygame.draw.line(s, light, (0, 0), (0, e))
            pygame.draw.line(s, light, (1, 1), (1, e - 1))
            pygame.draw.line(s, light, (1, 0), (e - 1, 0))
            pygame.draw.line(s, light, (2, 1), (e - 2, 1))
            pygame.draw.line(s, dark, (e, 0), (e, e))
            pygame.draw.line(s, dark, (e - 1, 1), (e - 1, e - 1))
            pygame.draw.line(s, dark, (1, e), (e - 1, e))
            pygame.draw.line(s, dark, (2, e - 1), (e - 2, e - 1))
            self.cell_surf[t] = s

    # ---------- Frame ----------
    def draw(self, screen: pygame.Surface, snap: Snapshot):
        screen.fill((0, 0, 0))
        if snap.phase is Phase.MENU:
            self.draw_menu(screen, snap)
            return
        self.draw_board(screen, snap.board)
        cap = snap.caption
        if snap.phase is Phase.GAME_OVER:
            self.draw_piece(screen, snap.piece)
            self.blit_centered(screen, self.game_over_font.render(cap.text, True, (255,255,255)))
        elif snap.phase is Phase.STAGE_INTRO:
            self.blit_centered(screen, self.goal_fonts[0].render(cap.text, True, (255,255,255)))
        elif snap.phase is Phase.LEVEL_COMPLETE:
            self.blit_centered(screen, self.goal_fonts[cap.index].render(cap.text, True, (255,255,255)))
        elif snap.phase is Phase.ROW_CLEAR:
            for f in snap.fragments:
                screen.blit(self.cell_surf[f.t], (f.x, f.y))
            txt = self.clear_fonts[cap.index].render(cap.text, True, self.palette[cap.color_index])
            screen.blit(txt, ((WIDTH - txt.get_width()) // 2, cap.y))
        else:
            self.draw_piece(screen, snap.piece)
        remaining = self.lines_font.render(f"Remaining: {snap.lines_remaining}", True, (255,255,255))
        screen.blit(remaining, (5, 5))

    def draw_board(self, screen: pygame.Surface, board):
        for y, row in enumerate(board):
            for x, t in enumerate(row):
                if t is not None:
                    screen.blit(self.cell_surf[t], (x * BLOCK, y * BLOCK))

    def draw_piece(self, screen: pygame.Surface, piece: PieceView):
        if piece is None:
            return
        cells = SHAPES[piece.t][piece.rotation]
        if not piece.rotated:
            for ox, oy in cells:
                screen.blit(self.cell_surf[piece.t], (piece.x + ox + piece.x_lag, piece.y + oy))
            return
        # tilt the whole piece around its pivot
        cx, cy = CENTERS[piece.t]
        local = pygame.Surface((cx * 2, cy * 2), pygame.SRCALPHA)
        for ox, oy in cells:
            local.blit(self.cell_surf[piece.t], (ox + piece.x_lag, oy))
        turned = pygame.transform.rotate(local, -piece.angle)
        screen.blit(turned, turned.get_rect(center=(piece.x + piece.pivot[0], piece.y + piece.pivot[1])))

    def draw_menu(self, screen: pygame.Surface, snap: Snapshot):
        title = self.title_font.render(TITLE, True, self.palette[snap.title_color_index])
        screen.blit(title, ((WIDTH - title.get_width()) // 2, 50))
        y = 150
        for i, line in enumerate(MENU_LINES):
            text = line if line is not None else snap.stage_label
            col = (255,255,0) if line is None else (255,255,255)
            surf = self.menu_font.render(text, True, col)
            screen.blit(surf, ((WIDTH - surf.get_width()) // 2, y))
            y += surf.get_height() + 5
            if i in (2, 4):
                y += 50

    @staticmethod
    def blit_centered(screen: pygame.Surface, surf: pygame.Surface):
        screen.blit(surf, ((WIDTH - surf.get_width()) // 2, (HEIGHT - surf.get_height()) // 2))
