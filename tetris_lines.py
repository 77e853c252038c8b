"""Row clearing and the flying blocks it throws off"""
import logging
from dataclasses import dataclass, field
from typing import List

from tetris_config import BLOCK, COLS, ROWS, WIDTH, HEIGHT
from tetris_piece import PieceType

log = logging.getLogger(__name__)

CAPTIONS = ("SINGLE!", "DOUBLE!!", "TRIPLE!!!", "TETЯIS!!!!")

GRAVITY = 0.2


@dataclass
class FlyingBlock:
    x: float
    y: float
    vx: float
    vy: float
    t: PieceType

    def step(self) -> bool:
        """Advance one tick; False once the block has left the screen."""
        self.vy += GRAVITY
        self.x += self.vx
        self.y += self.vy
        return not (self.x > WIDTH or self.x < -BLOCK or self.y > HEIGHT)


@dataclass
class ClearResult:
    rows: int = 0
    lines_remaining: int = 0
    caption_y: int = 0
    blocks: List[FlyingBlock] = field(default_factory=list)

    @property
    def caption(self) -> str:
        return CAPTIONS[self.rows - 1] if self.rows else ""


def remove_complete_rows(board, lines_remaining: int, rng) -> ClearResult:
    res = ClearResult(lines_remaining=lines_remaining)
    total_y = 0
    y = ROWS - 1
    while y >= 0:
        if any(v is None for v in board[y]):
            y -= 1
            continue
        if res.lines_remaining > 0:
            res.lines_remaining -= 1
        res.rows += 1
        total_y += y * BLOCK
        for x in range(COLS):
            vx = (rng.next_double() - 0.5) * 5
            vy = -10 - 2.0 * rng.next_double()
            res.blocks.append(FlyingBlock(x * BLOCK, y * BLOCK, vx, vy, board[y][x]))
        for k in range(y, 0, -1):
            board[k] = board[k - 1][:]
        board[0] = [None] * COLS
        # same index again, the row above has slid into it
    if res.rows:
        res.caption_y = total_y // res.rows - BLOCK // 2
        log.debug("cleared %d rows, %d lines remaining", res.rows, res.lines_remaining)
    return res


def update_flying(blocks: List[FlyingBlock]):
    """Step every block in place, dropping the ones that left the screen."""
    blocks[:] = [b for b in blocks if b.step()]
