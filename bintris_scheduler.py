"""Auto-drop loop driven by a per-frame tick"""
from typing import Callable, Optional
import pygame

class DropScheduler:
    """Fires `on_drop` once more than `interval_ms` has passed since the
    last drop. Only ticks while armed; cancelling stops the clock so a paused
    game never gets a backlog of drops.
    """
    def __init__(self, on_drop: Callable[[], object], interval_ms: int = 1000,
                 clock: Callable[[], int] = pygame.time.get_ticks):
        self.on_drop = on_drop
        self.interval_ms = interval_ms
        self.clock = clock
        self.active = False
        self.baseline = 0

    def _now(self, now: Optional[int]) -> int:
        return self.clock() if now is None else now

    def arm(self, now: Optional[int] = None):
        self.active = True
        self.baseline = self._now(now)

    def cancel(self):
        self.active = False

    def rebase(self, now: Optional[int] = None):
        self.baseline = self._now(now)

    def tick(self, now: Optional[int] = None) -> bool:
        if not self.active: return False
        now = self._now(now)
        if now - self.baseline > self.interval_ms:
            self.on_drop()
            self.baseline = now
            return True
        return False
