"""Game state and rules, independent of any display."""

from __future__ import annotations

import random as _random

from .block import Block
from .grid import Grid

NORMAL_INTERVAL = 0.5
SOFT_DROP_INTERVAL = 0.05
LEVEL3_INTERVAL = 0.2
LEVEL2_SCORE = 100
LEVEL3_SCORE = 200
POINTS_PER_LINE = 100
BANNER_SECONDS = 3.0


class Game:
    """One game: the field, the falling piece, the next piece and the score."""

    def __init__(self, rng: _random.Random | None = None) -> None:
        self._rng = rng or _random.Random()
        self.grid = Grid()
        self.current = Block.random(self._rng)
        self.next = Block.random(self._rng)
        self.score = 0
        self.lines_cleared = 0
        self.game_over = False
        self.soft_drop = False
        self._fall_timer = 0.0
        self._clock = 0.0
        self._banner_start: dict[int, float] = {}

    def _shift(self, dx: int) -> bool:
        if self.game_over:
            return False
        self.current.move(dx, 0)
        if self.grid.collides(self.current):
            self.current.move(-dx, 0)
            return False
        return True

    def move_left(self) -> bool:
        return self._shift(-1)

    def move_right(self) -> bool:
        return self._shift(1)

    def rotate(self) -> bool:
        """Turn the piece a quarter turn, undoing it if it would collide."""
        if self.game_over:
            return False
        self.current.rotate()
        if self.grid.collides(self.current):
            for _ in range(3):
                self.current.rotate()
            return False
        return True

    def set_soft_drop(self, pressed: bool) -> None:
        self.soft_drop = bool(pressed)

    def fall_interval(self) -> float:
        """Seconds between one-row drops of the current piece."""
        if self.soft_drop:
            return SOFT_DROP_INTERVAL
        if self.score >= LEVEL3_SCORE:
            return LEVEL3_INTERVAL
        return NORMAL_INTERVAL

    def level(self) -> int:
        if self.score >= LEVEL3_SCORE:
            return 3
        if self.score >= LEVEL2_SCORE:
            return 2
        return 1

    def _lock(self) -> None:
        self.grid.place(self.current)
        cleared = self.grid.clear_lines()
        self.score += cleared * POINTS_PER_LINE
        self.lines_cleared += cleared
        self.current = self.next.copy()
        self.next = Block.random(self._rng)
        if self.grid.collides(self.current):
            self.game_over = True

    def update(self, dt: float) -> None:
        """Advance the game by ``dt`` seconds."""
        if self.game_over:
            return
        self._clock += dt
        self._fall_timer += dt
        if self._fall_timer >= self.fall_interval():
            self.current.move(0, 1)
            if self.grid.collides(self.current):
                self.current.move(0, -1)
                self._lock()
            self._fall_timer = 0.0
        for level, threshold in ((2, LEVEL2_SCORE), (3, LEVEL3_SCORE)):
            if self.score >= threshold and level not in self._banner_start:
                self._banner_start[level] = self._clock

    def visible_banner(self) -> str | None:
        """The level banner on show, if any; a later level is drawn on top."""
        for level in (3, 2):
            start = self._banner_start.get(level)
            if start is not None and self._clock - start <= BANNER_SECONDS:
                return f"LEVEL {level}"
        return None