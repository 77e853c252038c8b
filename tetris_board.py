"""Board helpers: occupancy, collide, lock, junk rows, landing snap"""
import math
from typing import List, Optional

from tetris_config import BLOCK, COLS, ROWS, WIDTH, HEIGHT
from tetris_piece import PIECE_ORDER, Piece, PieceType

Board = List[List[Optional[PieceType]]]

EDGE = BLOCK - 1


def new_board() -> Board:
    return [[None] * COLS for _ in range(ROWS)]


def point_occupied(board: Board, x: int, y: int) -> bool:
    """Walls and floor are solid; anything above the top row is open."""
    if x < 0 or x >= WIDTH or y >= HEIGHT: return True
    if y < 0: return False
    return board[y // BLOCK][x // BLOCK] is not None


def block_occupied(board: Board, x: int, y: int) -> bool:
    return (point_occupied(board, x, y) or point_occupied(board, x, y + EDGE)
            or point_occupied(board, x + EDGE, y) or point_occupied(board, x + EDGE, y + EDGE))


def collide(board: Board, piece: Piece) -> bool:
    px = int(piece.x)
    for ox, oy in piece.cells:
        if block_occupied(board, px + ox, math.ceil(piece.y + oy)):
            return True
    return False


def lock(board: Board, piece: Piece):
    px, py = int(piece.x), int(piece.y)
    for ox, oy in piece.cells:
        board[(py + oy) // BLOCK][(px + ox) // BLOCK] = piece.t


def landed_y(next_y: float) -> int:
    """Row boundary a piece that collided while falling to next_y settles on."""
    n = math.ceil(next_y) + EDGE
    # truncating division, the snap is not symmetric above the board
    return (int(n / BLOCK) - 1) * BLOCK


def fill_junk(board: Board, junk_rows: int, rng):
    """Empty the board, then fill the bottom junk_rows rows with random cells.

    Every row gets two random columns knocked out afterwards, so each junk row
    has at least one hole.
    """
    if not 0 <= junk_rows <= ROWS:
        raise ValueError(f"junk rows must be within 0..{ROWS}, got {junk_rows}")
    first_junk = ROWS - junk_rows
    for y in range(ROWS):
        for x in range(COLS):
            if y < first_junk:
                board[y][x] = None
            else:
                v = rng.next_int(len(PIECE_ORDER) + 1)
                board[y][x] = PIECE_ORDER[v] if v < len(PIECE_ORDER) else None
        board[y][rng.next_int(COLS)] = None
        board[y][rng.next_int(COLS)] = None
