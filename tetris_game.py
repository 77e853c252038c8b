"""
Stage sequencing for the falling-block game.

The game is always in exactly one phase, held as a small state object:

  Menu -> StageIntro -> Playing -> RowClear / LevelComplete / GameOver

Game.tick() advances the current phase by one fixed 1/60 s step and swaps in
the next phase object when a countdown runs out or a terminal condition is
reached. Nothing here touches a window or a clock; main.py drives tick() and
draws Game.snapshot().
"""
import logging
from dataclasses import dataclass, field
from typing import ClassVar, List

from tetris_board import new_board, fill_junk
from tetris_config import CONFIG
from tetris_control import Landing, PieceController
from tetris_input import InputState, Key
from tetris_lines import CAPTIONS, FlyingBlock, remove_complete_rows, update_flying
from tetris_piece import CENTERS, PIECE_ORDER
from tetris_rng import StageRandom
from tetris_snapshot import (ROTATED_ANGLE, Caption, FragmentView, Phase,
                             PieceView, Snapshot)

log = logging.getLogger(__name__)

TITLE_COLORS = 64      # rainbow palette size for the menu title and clear captions
GOAL_FRAMES = 30       # length of the pulsing GOAL! animation cycle
CAPTION_RISE = 4       # pixels per tick the clear caption floats up
GOAL_TEXT = "GOAL!"
GAME_OVER_TEXT = ":("


# -------------------------------------------------------------
# STAGE PROGRESS
# -------------------------------------------------------------
@dataclass
class StageProgress:
    stage: int = 0
    sub_stage: int = 0
    lines_remaining: int = 0
    normal_speed: float = 0.25
    fast_speed: float = 16.0

    @property
    def label(self) -> str:
        return f"{self.stage + 1}-{self.sub_stage + 1}"

    @property
    def name(self) -> str:
        return f"Level {self.label}"

    def advance(self):
        """Next sub-stage; five sub-stages per stage, wrapping after the last stage."""
        self.sub_stage += 1
        if self.sub_stage == CONFIG["SUB_STAGES"]:
            self.sub_stage = 0
            self.stage += 1
        if self.stage == CONFIG["STAGES"]:
            self.stage = self.sub_stage = 0

    def retreat(self):
        self.sub_stage -= 1
        if self.sub_stage == -1:
            self.sub_stage = CONFIG["SUB_STAGES"] - 1
            self.stage -= 1
        if self.stage == -1:
            self.stage = CONFIG["STAGES"] - 1
            self.sub_stage = CONFIG["SUB_STAGES"] - 1

    def begin(self):
        self.normal_speed = (self.stage + 1) / 4.0
        self.fast_speed = max(16.0, self.normal_speed)
        self.lines_remaining = CONFIG["LINES_PER_STAGE"]

    @property
    def junk_rows(self) -> int:
        return self.sub_stage * 2


# -------------------------------------------------------------
# PHASES
# -------------------------------------------------------------
@dataclass
class Menu:
    phase: ClassVar[Phase] = Phase.MENU


@dataclass
class StageIntro:
    phase: ClassVar[Phase] = Phase.STAGE_INTRO
    ticks: int
    label: str = ""


@dataclass
class Playing:
    phase: ClassVar[Phase] = Phase.PLAYING


@dataclass
class RowClear:
    phase: ClassVar[Phase] = Phase.ROW_CLEAR
    rows: int
    caption_y: int
    blocks: List[FlyingBlock] = field(default_factory=list)


@dataclass
class LevelComplete:
    phase: ClassVar[Phase] = Phase.LEVEL_COMPLETE
    ticks: int
    index: int = 0


@dataclass
class GameOver:
    phase: ClassVar[Phase] = Phase.GAME_OVER
    ticks: int


# -------------------------------------------------------------
# GAME
# -------------------------------------------------------------
class Game:
    def __init__(self, rng=None, stage: int = 0, sub_stage: int = 0):
        if not 0 <= stage < CONFIG["STAGES"]:
            raise ValueError(f"stage must be within 0..{CONFIG['STAGES'] - 1}, got {stage}")
        if not 0 <= sub_stage < CONFIG["SUB_STAGES"]:
            raise ValueError(f"sub-stage must be within 0..{CONFIG['SUB_STAGES'] - 1}, got {sub_stage}")
        self.rng = rng if rng is not None else StageRandom(CONFIG["SEED"])
        self.board = new_board()
        self.inputs = InputState()
        self.progress = StageProgress(stage, sub_stage)
        self.controller = PieceController()
        self.state = Menu()
        # rainbow positions run on across menu visits and across clears
        self.title_color = 0
        self.caption_color = 0
        self._handlers = {
            Phase.MENU: self._tick_menu,
            Phase.STAGE_INTRO: self._tick_stage_intro,
            Phase.PLAYING: self._tick_playing,
            Phase.ROW_CLEAR: self._tick_row_clear,
            Phase.LEVEL_COMPLETE: self._tick_level_complete,
            Phase.GAME_OVER: self._tick_game_over,
        }

    @property
    def phase(self) -> Phase:
        return self.state.phase

    def press(self, key: Key):
        self.inputs.press(key)

    def release(self, key: Key):
        self.inputs.release(key)

    def tick(self):
        """Advance the simulation by one fixed step."""
        state = self.state
        if state.phase is not Phase.MENU:
            self.controller.show_rotated = False
        nxt = self._handlers[state.phase](state)
        if nxt.phase is not state.phase:
            log.debug("phase %s -> %s", state.phase.value, nxt.phase.value)
        self.state = nxt
        return nxt

    # ---------- transitions ----------
    def start_stage(self) -> StageIntro:
        p = self.progress
        p.begin()
        fill_junk(self.board, p.junk_rows, self.rng)
        log.info("starting %s (%d junk rows, speed %.2f)", p.name, p.junk_rows, p.normal_speed)
        return StageIntro(CONFIG["STAGE_INTRO_TICKS"], p.label)

    def introduce_next_piece(self):
        t = PIECE_ORDER[self.rng.next_piece_index()]
        self.controller.spawn(t)

    def _tick_menu(self, s: Menu):
        self.title_color = (self.title_color + 1) % TITLE_COLORS
        inputs = self.inputs
        # the repeat delay below still runs on the tick that starts the stage
        nxt = self.start_stage() if inputs.held(Key.CONFIRM) else s
        if inputs.key_delay == 0:
            inputs.key_delay = CONFIG["MENU_KEY_DELAY"]
            if inputs.held(Key.UP):
                self.progress.advance()
            elif inputs.held(Key.DOWN):
                self.progress.retreat()
        else:
            inputs.key_delay -= 1
        return nxt

    def _tick_stage_intro(self, s: StageIntro):
        s.ticks -= 1
        if s.ticks == 0:
            self.introduce_next_piece()
            return Playing()
        return s

    def _tick_playing(self, s: Playing):
        p = self.progress
        speed = p.fast_speed if self.inputs.held(Key.DOWN) else p.normal_speed
        landing = self.controller.step(self.board, self.inputs, speed)
        if landing is Landing.TOPPED_OUT:
            log.info("game over on %s", p.name)
            return GameOver(CONFIG["GAME_OVER_TICKS"])
        if landing is not Landing.LOCKED:
            return s
        res = remove_complete_rows(self.board, p.lines_remaining, self.rng)
        p.lines_remaining = res.lines_remaining
        if p.lines_remaining > 0:
            self.introduce_next_piece()
        if res.blocks:
            return RowClear(res.rows, res.caption_y, res.blocks)
        if p.lines_remaining == 0:
            return LevelComplete(CONFIG["LEVEL_COMPLETE_TICKS"])
        return s

    def _tick_row_clear(self, s: RowClear):
        update_flying(s.blocks)
        s.caption_y -= CAPTION_RISE
        self.caption_color = (self.caption_color + 1) % TITLE_COLORS
        if s.blocks:
            return s
        if self.progress.lines_remaining == 0:
            return LevelComplete(CONFIG["LEVEL_COMPLETE_TICKS"])
        return Playing()

    def _tick_level_complete(self, s: LevelComplete):
        s.ticks -= 1
        s.index = (s.index + 1) % GOAL_FRAMES
        if s.ticks == 0:
            self.progress.advance()
            return self.start_stage()
        return s

    def _tick_game_over(self, s: GameOver):
        s.ticks -= 1
        if s.ticks == 0:
            self.inputs.key_delay = 0
            return Menu()
        return s

    # ---------- rendering view ----------
    def snapshot(self) -> Snapshot:
        s = self.state
        p = self.progress
        piece = None
        if s.phase in (Phase.PLAYING, Phase.GAME_OVER) and self.controller.piece:
            piece = self._piece_view()
        fragments = ()
        caption = None
        if isinstance(s, StageIntro):
            caption = Caption(f"Level {s.label}")
        elif isinstance(s, RowClear):
            fragments = tuple(FragmentView(int(b.x), int(b.y), b.t) for b in s.blocks)
            caption = Caption(CAPTIONS[s.rows - 1], s.rows - 1, s.caption_y, self.caption_color)
        elif isinstance(s, LevelComplete):
            caption = Caption(GOAL_TEXT, s.index)
        elif isinstance(s, GameOver):
            caption = Caption(GAME_OVER_TEXT)
        return Snapshot(
            phase=s.phase,
            board=tuple(tuple(row) for row in self.board),
            piece=piece,
            lines_remaining=p.lines_remaining,
            fragments=fragments,
            stage_label=p.label,
            stage_name=p.name,
            caption=caption,
            title_color_index=self.title_color,
        )

    def _piece_view(self) -> PieceView:
        c = self.controller
        pc = c.piece
        if c.show_rotated:
            return PieceView(pc.t, pc.rotation, int(pc.x), int(pc.y), c.x_lag,
                             True, ROTATED_ANGLE, CENTERS[pc.t])
        return PieceView(pc.t, pc.rotation, int(pc.x), int(pc.y), c.x_lag)
