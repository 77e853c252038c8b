"""Piece model, shape tables, kick rotation"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from tetris_config import BLOCK, WIDTH


class PieceType(str, Enum):
    I = "I"
    J = "J"
    L = "L"
    O = "O"
    S = "S"
    T = "T"
    Z = "Z"


PIECE_ORDER = list(PieceType)

Offsets = Tuple[Tuple[int, int], ...]

# cell coordinates per rotation state, scaled to pixels below
_CELLS = {
    PieceType.I: (((2,0),(2,1),(2,2),(2,3)),
                  ((0,2),(1,2),(2,2),(3,2)),
                  ((1,0),(1,1),(1,2),(1,3)),
                  ((0,1),(1,1),(2,1),(3,1))),
    PieceType.J: (((1,0),(1,1),(1,2),(2,0)),
                  ((0,1),(1,1),(2,1),(2,2)),
                  ((1,0),(1,1),(1,2),(0,2)),
                  ((0,1),(1,1),(2,1),(0,0))),
    PieceType.L: (((1,0),(1,1),(1,2),(0,0)),
                  ((0,1),(1,1),(2,1),(2,0)),
                  ((1,0),(1,1),(1,2),(2,2)),
                  ((0,1),(1,1),(2,1),(0,2))),
    PieceType.O: (((0,0),(0,1),(1,0),(1,1)),) * 4,
    PieceType.S: (((1,0),(2,0),(0,1),(1,1)),
                  ((1,0),(1,1),(2,1),(2,2)),
                  ((1,1),(2,1),(0,2),(1,2)),
                  ((0,0),(0,1),(1,1),(1,2))),
    PieceType.T: (((0,1),(1,1),(2,1),(1,2)),
                  ((1,0),(1,1),(1,2),(0,1)),
                  ((0,1),(1,1),(2,1),(1,0)),
                  ((1,0),(1,1),(1,2),(2,1))),
    PieceType.Z: (((0,1),(1,1),(1,2),(2,2)),
                  ((1,0),(0,1),(1,1),(0,2)),
                  ((0,0),(1,0),(1,1),(2,1)),
                  ((2,0),(1,1),(2,1),(1,2))),
}

SHAPES: Dict[PieceType, Tuple[Offsets, ...]] = {
    t: tuple(tuple((x * BLOCK, y * BLOCK) for x, y in rot) for rot in rots)
    for t, rots in _CELLS.items()
}

# rotation pivots for the tilted sprite, relative to the piece origin
CENTERS: Dict[PieceType, Tuple[int, int]] = {
    PieceType.I: (48, 48),
    PieceType.J: (36, 36),
    PieceType.L: (36, 36),
    PieceType.O: (24, 24),
    PieceType.S: (36, 36),
    PieceType.T: (36, 36),
    PieceType.Z: (36, 36),
}

KICKS = (0, -BLOCK, BLOCK)
I_KICKS = KICKS + (-2 * BLOCK, 2 * BLOCK)


@dataclass
class Piece:
    t: PieceType
    rotation: int
    x: int
    y: float

    @property
    def cells(self) -> Offsets:
        return SHAPES[self.t][self.rotation]

    @staticmethod
    def spawn(t: PieceType) -> "Piece":
        """New piece in rotation 0, horizontally centred, just above the board."""
        cells = SHAPES[t][0]
        min_x = min(x for x, _ in cells)
        min_y = min(y for _, y in cells)
        w = max(x for x, _ in cells) + BLOCK - min_x
        h = max(y for _, y in cells) + BLOCK - min_y
        x = round(round((WIDTH - w) / (2 * BLOCK)) * BLOCK - min_x)
        return Piece(t, 0, x, -min_y - h)


# rotation

def try_rotate(board, piece: Piece) -> Optional[Piece]:
    """Rotate one step, trying each horizontal kick in order; None if all collide."""
    from tetris_board import collide
    nxt = (piece.rotation + 1) % 4
    kicks = I_KICKS if piece.t == PieceType.I else KICKS
    for dx in kicks:
        test = Piece(piece.t, nxt, piece.x + dx, piece.y)
        if not collide(board, test):
            return test
    return None
