COLS, ROWS = 10, 20
BLOCK = 24
WIDTH, HEIGHT = COLS * BLOCK, ROWS * BLOCK

CONFIG = {
    "FPS": 60,
    "SCALE": 2,
    "SEED": None,
    "LOCK_DOWN_DELAY": 15,
    "ROTATE_DELAY": 15,
    "SIDE_MOVE_DELAY": 6,
    "SIDE_MOVE_FAST_DELAY": 3,
    "MENU_KEY_DELAY": 6,
    "STAGE_INTRO_TICKS": 90,
    "LEVEL_COMPLETE_TICKS": 300,
    "GAME_OVER_TICKS": 300,
    "LINES_PER_STAGE": 25,
    "STAGES": 20,
    "SUB_STAGES": 5,
}
