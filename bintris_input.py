"""Key bindings and DAS/ARR controller"""
from typing import Optional

import pygame
from bintris_config import CONFIG

# key -> (Game method name, args)
KEYMAP = {
    pygame.K_DOWN: ("soft_drop", ()),
    pygame.K_UP: ("rotate", (1,)),
    pygame.K_x: ("rotate", (1,)),
    pygame.K_z: ("rotate", (-1,)),
    pygame.K_LCTRL: ("rotate", (-1,)),
    pygame.K_RCTRL: ("rotate", (-1,)),
    pygame.K_b: ("swap_values", ()),
    pygame.K_SPACE: ("hard_drop", ()),
    pygame.K_p: ("toggle_pause", ()),
    pygame.K_ESCAPE: ("toggle_pause", ()),
    pygame.K_RETURN: ("new_game", ()),
    pygame.K_r: ("reset", ()),
}

def dispatch(game, key) -> bool:
    """Run the action bound to `key`; returns False for unbound keys."""
    action = KEYMAP.get(key)
    if action is None: return False
    name, args = action
    getattr(game, name)(*args)
    return True

class ShiftRepeat:
    """Turns held left/right keys into column steps: one step on press,
    then one every `arr` ms once the key has been held for `das` ms.
    """
    def __init__(self, das: Optional[int] = None, arr: Optional[int] = None):
        self.das = CONFIG["DAS_MS"] if das is None else das
        self.arr = CONFIG["ARR_MS"] if arr is None else arr
        self._hold(0)

    def _hold(self, direction: int):
        self.dir = direction
        self.held_ms = 0
        self.since_step = 0
        self.pending_first = direction != 0

    def update(self, dt: int, left: bool, right: bool) -> int:
        direction = int(right) - int(left)
        if direction != self.dir:
            self._hold(direction)
        if not self.dir: return 0
        if self.pending_first:
            self.pending_first = False
            return self.dir
        self.held_ms += dt
        if self.held_ms < self.das: return 0
        if self.arr <= 0: return self.dir
        self.since_step += dt
        if self.since_step < self.arr: return 0
        self.since_step = 0
        return self.dir
