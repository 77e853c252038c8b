"""Active piece: gravity, lock-down, side moves and rotation"""
import logging
from enum import Enum
from typing import Optional

from tetris_board import Board, collide, landed_y, lock
from tetris_config import BLOCK, CONFIG
from tetris_input import InputState, Key
from tetris_piece import Piece, PieceType, try_rotate

log = logging.getLogger(__name__)


class Landing(Enum):
    FALLING = "falling"
    RESTING = "resting"
    LOCKED = "locked"
    TOPPED_OUT = "topped_out"


class PieceController:
    def __init__(self):
        self.piece: Optional[Piece] = None
        self.lock_down_counter = 0
        self.x_lag = 0
        self.show_rotated = False

    def spawn(self, t: PieceType) -> Piece:
        # the lock-down counter carries over; a free fall refills it
        self.piece = Piece.spawn(t)
        return self.piece

    def step(self, board: Board, inputs: InputState, drop_speed: float) -> Landing:
        """Advance the piece one tick.

        LOCKED means the piece has been written into the board; TOPPED_OUT
        means it came to rest before fully entering it. Input is not
        processed on either of those ticks.
        """
        self.x_lag = 0
        p = self.piece
        px, py = int(p.x), int(p.y)
        next_y = p.y + drop_speed
        if collide(board, Piece(p.t, p.rotation, px, next_y)):
            py = landed_y(next_y)
            p.y = py
            if self.lock_down_counter == 0:
                if py < 0:
                    log.debug("%s topped out at y=%d", p.t.value, py)
                    return Landing.TOPPED_OUT
                inputs.key_delay = 0
                lock(board, Piece(p.t, p.rotation, px, py))
                log.debug("%s locked at x=%d y=%d rot=%d", p.t.value, px, py, p.rotation)
                return Landing.LOCKED
            self.lock_down_counter -= 1
            landing = Landing.RESTING
        else:
            self.lock_down_counter = CONFIG["LOCK_DOWN_DELAY"]
            p.y = next_y
            landing = Landing.FALLING

        if inputs.key_delay == 0:
            if inputs.held(Key.UP):
                self._rotate(board, inputs, px, py)
            elif inputs.held(Key.LEFT):
                self._shift(board, inputs, px, py, -1)
            elif inputs.held(Key.RIGHT):
                self._shift(board, inputs, px, py, 1)
        else:
            inputs.key_delay -= 1

        inputs.remember()
        return landing

    def _rotate(self, board, inputs, px, py):
        inputs.key_delay = CONFIG["ROTATE_DELAY"]
        turned = try_rotate(board, Piece(self.piece.t, self.piece.rotation, px, py))
        self.show_rotated = turned is not None
        if turned:
            self.piece.rotation = turned.rotation
            self.piece.x = turned.x

    def _shift(self, board, inputs, px, py, direction):
        inputs.accelerate(direction)
        inputs.key_delay = inputs.side_move_delay
        test = Piece(self.piece.t, self.piece.rotation, px + direction * BLOCK, py)
        if collide(board, test):
            self.piece.x = px
            self.x_lag = 0
        else:
            self.piece.x = test.x
            # drawn half a block behind for one tick
            self.x_lag = -direction * (BLOCK // 2)
