"""Logical input flags and the key repeat counters"""
from enum import Enum

from tetris_config import CONFIG


class Key(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    CONFIRM = "confirm"


class InputState:
    """
    Current pressed/released state of the five logical keys.

    key_delay throttles rotation, side moves and menu selection; it is shared
    because only one of those can act per tick. side_move_delay shrinks while
    a direction is held so sliding speeds up.
    """
    def __init__(self):
        self.pressed = {k: False for k in Key}
        self.last_left = False
        self.last_right = False
        self.key_delay = 0
        self.side_move_delay = CONFIG["SIDE_MOVE_DELAY"]

    def held(self, key: Key) -> bool:
        return self.pressed[key]

    def press(self, key: Key):
        self.pressed[key] = True

    def release(self, key: Key):
        self.pressed[key] = False
        if key in (Key.LEFT, Key.RIGHT):
            self.side_move_delay = CONFIG["SIDE_MOVE_DELAY"]
            self.key_delay = 0
        elif key in (Key.UP, Key.DOWN):
            self.key_delay = 0

    def accelerate(self, direction: int):
        """Shorten the side move delay if the same direction was held last tick."""
        held_before = self.last_left if direction < 0 else self.last_right
        if held_before and self.side_move_delay > 1:
            if self.side_move_delay == CONFIG["SIDE_MOVE_DELAY"]:
                self.side_move_delay = CONFIG["SIDE_MOVE_FAST_DELAY"]
            else:
                self.side_move_delay -= 1

    def remember(self):
        self.last_left = self.pressed[Key.LEFT]
        self.last_right = self.pressed[Key.RIGHT]
