import argparse
import logging
import sys

import pygame

from tetris_config import CONFIG, WIDTH, HEIGHT
from tetris_game import Game, StageIntro
from tetris_input import Key
from tetris_render import RenderAssets, TITLE

KEYMAP = {
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_RETURN: Key.CONFIRM,
    pygame.K_KP_ENTER: Key.CONFIRM,
}


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Stage-based falling block puzzle")
    ap.add_argument("--seed", type=int, default=CONFIG["SEED"], help="random seed for pieces and junk rows")
    ap.add_argument("--scale", type=int, default=CONFIG["SCALE"], help="window scale factor")
    ap.add_argument("--stage", default="1-1", help="initially selected level, e.g. 3-2")
    ap.add_argument("-v", "--verbose", action="store_true", help="log phase transitions")
    return ap.parse_args(argv)


def parse_stage(text):
    try:
        stage, sub = (int(v) - 1 for v in text.split("-"))
    except ValueError:
        raise SystemExit(f"bad --stage {text!r}, expected STAGE-SUB like 3-2")
    return stage, sub


def create_window(scale):
    flags = pygame.SCALED if scale > 1 else 0
    try:
        return pygame.display.set_mode((WIDTH, HEIGHT), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((WIDTH * scale, HEIGHT * scale))


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")
    CONFIG["SEED"] = args.seed
    CONFIG["SCALE"] = args.scale
    stage, sub = parse_stage(args.stage)
    try:
        game = Game(stage=stage, sub_stage=sub)
    except ValueError as e:
        raise SystemExit(f"bad --stage: {e}")

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP])
    window = create_window(args.scale)
    # the game draws at native resolution; scale up only if SCALED was refused
    screen = window if window.get_size() == (WIDTH, HEIGHT) else pygame.Surface((WIDTH, HEIGHT))
    clock = pygame.time.Clock()

    render = RenderAssets()
    pygame.display.set_caption(TITLE)
    intro = None

    # Fixed timestep accumulator
    acc = 0.0
    dt_ms = 1000.0 / CONFIG["FPS"]

    while True:
        acc += clock.tick(CONFIG["FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN and e.key in KEYMAP:
                game.press(KEYMAP[e.key])
            elif e.type == pygame.KEYUP and e.key in KEYMAP:
                game.release(KEYMAP[e.key])

        # catch up on every tick wall time says we owe, then draw once
        while acc >= dt_ms:
            acc -= dt_ms
            state = game.tick()
            # window title names the stage that just started
            if isinstance(state, StageIntro) and state is not intro:
                intro = state
                pygame.display.set_caption(f"{TITLE} {state.label}")

        render.draw(screen, game.snapshot())
        if screen is not window:
            pygame.transform.scale(screen, window.get_size(), window)
        pygame.display.flip()


if __name__ == "__main__":
    main()
