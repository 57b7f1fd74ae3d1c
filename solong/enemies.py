"""Enemies that shoot balls, and frame counters for animated tiles."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from solong.validate import ENEMY, WALL

MAX_ENEMIES = 5
BALL_PERIOD = 14

COIN_FRAME_COUNT = 6
COIN_PERIOD = 7
DOOR_FRAME_COUNT = 5
DOOR_PERIOD = 5


@dataclass
class Enemy:
    """An enemy at tile ``(x, y)`` firing a ball along its row."""

    x: int
    y: int
    ball_x: int
    ball_y: int
    ball_dir: int = -1
    ball_timer: int = 0

    def step(self, grid: Sequence[str], player_tile: tuple[int, int]) -> bool:
        """Advance the ball by one frame; return True if it hits the player.

        Every ``BALL_PERIOD`` frames the ball moves one tile. On reaching a
        wall it goes back to the enemy.
        """
        self.ball_timer += 1
        if self.ball_timer < BALL_PERIOD:
            return False
        self.ball_x += self.ball_dir
        if grid[self.ball_y][self.ball_x] == WALL:
            self.ball_x = self.x
            self.ball_timer = 0
            return False
        if (self.ball_x, self.ball_y) == player_tile:
            return True
        self.ball_timer = 0
        return False


def find_enemies(grid: Sequence[str]) -> list[Enemy]:
    """Return the enemies of the grid in row-major order."""
    enemies = [
        Enemy(x=x, y=y, ball_x=x, ball_y=y)
        for y, row in enumerate(grid)
        for x, tile in enumerate(row)
        if tile == ENEMY
    ]
    if len(enemies) > MAX_ENEMIES:
        raise ValueError(f"a map may hold at most {MAX_ENEMIES} enemies")
    return enemies


@dataclass
class FrameCounter:
    """Cycles through ``frame_count`` frames, advancing every ``period`` ticks."""

    frame_count: int
    period: int
    frame: int = 0
    _timer: int = 0

    def tick(self) -> int:
        """Count one tick and return the current frame."""
        self._timer += 1
        if self._timer >= self.period:
            self.frame += 1
            if self.frame >= self.frame_count:
                self.frame = 0
            self._timer = 0
        return self.frame