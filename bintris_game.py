"""Game controller: session state, piece lifecycle, scoring"""
import logging
from dataclasses import dataclass
from typing import Callable, Optional

import pygame

from bintris_board import Board, new_board, collide, merge, settle, block_count
from bintris_piece import Piece
from bintris_rng import BinaryRandom
from bintris_scheduler import DropScheduler
from bintris_score import BestScore

log = logging.getLogger(__name__)

POINTS_PER_BLOCK = 50
POINTS_PER_LEVEL = 500
POINTS_PER_LINE = 100

MOVED, LOCKED = "moved", "locked"

IDLE, RUNNING, PAUSED, OVER = "idle", "running", "paused", "over"


def drop_interval(level: int) -> int:
    return max(100, 1000 - level * 50)


@dataclass
class Session:
    score: int = 0
    level: int = 1
    lines: int = 0
    paused: bool = False
    game_over: bool = False
    drop_interval_ms: int = 1000

    def add_points(self, points: int) -> bool:
        """Add points and refresh level/lines; returns True on level up."""
        self.score = max(0, int(self.score + points))
        self.lines = self.score // POINTS_PER_LINE
        level = self.score // POINTS_PER_LEVEL + 1
        if level > self.level:
            self.level = level
            self.drop_interval_ms = drop_interval(level)
            return True
        return False


class Game:
    """Owns the board, the current/next pieces and the session.

    Input handlers call the action methods; anything called while the game
    is idle, paused or over does nothing and returns a falsy value.
    """

    def __init__(self, rng: Optional[BinaryRandom] = None,
                 best: Optional[BestScore] = None,
                 clock: Callable[[], int] = pygame.time.get_ticks):
        self.rng = rng if rng is not None else BinaryRandom()
        self.best = best
        self.board: Board = new_board()
        self.session = Session()
        self.current: Optional[Piece] = None
        self.next: Optional[Piece] = None
        self.started = False
        self.board_version = 0
        self.scheduler = DropScheduler(self.soft_drop, self.session.drop_interval_ms, clock)

    # ---------- state ----------
    @property
    def state(self) -> str:
        if not self.started: return IDLE
        if self.session.game_over: return OVER
        if self.session.paused: return PAUSED
        return RUNNING

    @property
    def running(self) -> bool:
        return self.state == RUNNING

    def _clear(self):
        self.scheduler.cancel()
        self.board = new_board()
        self.board_version += 1
        self.session = Session()
        self.scheduler.interval_ms = self.session.drop_interval_ms
        self.current = None
        self.next = None

    def start(self):
        self._clear()
        self.started = True
        self.next = self.rng.next_piece()
        self.spawn_next()
        if not self.session.game_over:
            self.scheduler.arm()
        log.info("game started (seed %s)", getattr(self.rng, "seed", None))

    def new_game(self) -> bool:
        """Start from idle or after game over; a session in progress is kept."""
        if self.state not in (IDLE, OVER): return False
        self.start()
        return True

    def reset(self):
        self._clear()
        self.started = False

    def spawn_next(self):
        self.current = self.next
        self.next = self.rng.next_piece()
        if collide(self.board, self.current):
            self._end()

    def _end(self):
        self.session.game_over = True
        self.scheduler.cancel()
        log.info("game over: score %d, level %d", self.session.score, self.session.level)
        if self.best is not None:
            self.best.submit(self.session.score)

    # ---------- actions ----------
    def move(self, direction: int) -> bool:
        if not self.running: return False
        if collide(self.board, self.current, direction, 0): return False
        self.current.x += direction
        return True

    def rotate(self, direction: int) -> bool:
        if not self.running: return False
        shape = self.current.rotated(direction)
        if collide(self.board, self.current, shape=shape): return False
        self.current.shape = shape
        return True

    def soft_drop(self) -> Optional[str]:
        if not self.running: return None
        if not collide(self.board, self.current, 0, 1):
            self.current.y += 1
            return MOVED
        self._lock()
        return LOCKED

    def hard_drop(self) -> int:
        rows = 0
        while True:
            r = self.soft_drop()
            if r != MOVED: break
            rows += 1
        return rows

    def swap_values(self) -> bool:
        if self.current is None or not self.running: return False
        self.current.swap_values()
        return True

    def toggle_pause(self) -> bool:
        if self.state not in (RUNNING, PAUSED): return False
        self.session.paused = not self.session.paused
        if self.session.paused:
            self.scheduler.cancel()
        else:
            self.scheduler.arm()
        return True

    def _lock(self):
        merge(self.board, self.current)
        blocks = settle(self.board)
        self.board_version += 1
        log.debug("locked %s at (%d,%d); %d blocks cleared, %d cells left",
                  self.current.name, self.current.x, self.current.y,
                  blocks, block_count(self.board))
        if blocks and self.session.add_points(blocks * POINTS_PER_BLOCK):
            self.scheduler.interval_ms = self.session.drop_interval_ms
            log.info("level %d, drop every %d ms", self.session.level, self.session.drop_interval_ms)
        self.spawn_next()
        self.scheduler.rebase()

    def update(self, now: Optional[int] = None) -> bool:
        """Per-frame hook; returns True when the auto drop fired."""
        return self.scheduler.tick(now)
