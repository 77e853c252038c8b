"""Read-only view of one simulation tick, handed to the renderer"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from tetris_piece import PieceType

ROTATED_ANGLE = -45


class Phase(Enum):
    MENU = "menu"
    STAGE_INTRO = "stage_intro"
    PLAYING = "playing"
    ROW_CLEAR = "row_clear"
    LEVEL_COMPLETE = "level_complete"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class PieceView:
    t: PieceType
    rotation: int
    x: int
    y: int
    x_lag: int = 0
    rotated: bool = False
    angle: int = 0
    pivot: Tuple[int, int] = (0, 0)


@dataclass(frozen=True)
class FragmentView:
    x: int
    y: int
    t: PieceType


@dataclass(frozen=True)
class Caption:
    text: str
    index: int = 0
    y: Optional[int] = None
    color_index: int = 0


@dataclass(frozen=True)
class Snapshot:
    phase: Phase
    board: Tuple[Tuple[Optional[PieceType], ...], ...]
    piece: Optional[PieceView]
    lines_remaining: int
    fragments: Tuple[FragmentView, ...]
    stage_label: str
    stage_name: str
    caption: Optional[Caption] = None
    title_color_index: int = 0
