"""Game state: the player, coins, exit and enemies, driven one frame at a time."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TextIO

from solong.console import loss_messages, moves_message, report, win_message
from solong.enemies import (
    COIN_FRAME_COUNT,
    COIN_PERIOD,
    DOOR_FRAME_COUNT,
    DOOR_PERIOD,
    Enemy,
    FrameCounter,
    find_enemies,
)
from solong.validate import COIN, ENEMY, EXIT, FLOOR, PLAYER, WALL, count_tiles, find_tile

TILE_SIZE = 32


class Direction(enum.Enum):
    """The way the player is facing."""

    RIGHT = enum.auto()
    LEFT = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()


class Key(enum.Enum):
    """Keys the game reacts to."""

    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    ESCAPE = enum.auto()


_MOVES = (
    (Key.UP, Direction.UP, 0, -1),
    (Key.DOWN, Direction.DOWN, 0, 1),
    (Key.LEFT, Direction.LEFT, -1, 0),
    (Key.RIGHT, Direction.RIGHT, 1, 0),
)


class GameEnded(Exception):
    """Raised when the game is over, whether won, lost or quit."""

    def __init__(self, moves: int, collected: int, total: int) -> None:
        super().__init__(f"game ended after {moves} moves")
        self.moves = moves
        self.collected = collected
        self.total = total

    @property
    def all_collected(self) -> bool:
        """True if every coin had been collected when the game ended."""
        return self.collected == self.total


@dataclass
class Player:
    """The player, placed in pixel coordinates."""

    x: int
    y: int
    direction: Direction = Direction.RIGHT
    held: set[Key] = field(default_factory=set)
    moves: int = 0

    @property
    def tile(self) -> tuple[int, int]:
        """The ``(x, y)`` tile the player stands on."""
        return self.x // TILE_SIZE, self.y // TILE_SIZE


class Game:
    """A running level. Call ``tick`` once per frame."""

    def __init__(
        self, grid: Iterable[str], bonus: bool = False, out: TextIO | None = None
    ) -> None:
        self.grid: list[str] = list(grid)
        self.bonus = bonus
        self.out = out
        self.height = len(self.grid)
        self.width = max((len(row) for row in self.grid), default=0)
        start = find_tile(self.grid, PLAYER)
        if start is None:
            raise ValueError("map has no player")
        self.player = Player(x=start[0] * TILE_SIZE, y=start[1] * TILE_SIZE)
        self.total_coins = count_tiles(self.grid, COIN)
        self.coins_collected = 0
        self.door_open = False
        self.coin_frames = FrameCounter(COIN_FRAME_COUNT, COIN_PERIOD)
        self.door_frames = FrameCounter(DOOR_FRAME_COUNT, DOOR_PERIOD)
        self.enemies: list[Enemy] = find_enemies(self.grid) if bonus else []

    def press(self, key: Key) -> None:
        """Handle a key going down; Escape ends the game."""
        if key is Key.ESCAPE:
            self.close()
        self.player.held.add(key)

    def release(self, key: Key) -> None:
        """Handle a key coming up."""
        self.player.held.discard(key)

    def _target(self) -> tuple[int, int]:
        player = self.player
        new_x, new_y = player.x, player.y
        for key, direction, dx, dy in _MOVES:
            if key in player.held:
                if dx:
                    new_x = player.x + dx * TILE_SIZE
                if dy:
                    new_y = player.y + dy * TILE_SIZE
                player.direction = direction
                player.held.discard(key)
        return new_x, new_y

    def _enter(self, new_x: int, new_y: int) -> bool:
        tx, ty = new_x // TILE_SIZE, new_y // TILE_SIZE
        tile = self.grid[ty][tx]
        if tile == WALL or (self.bonus and tile == ENEMY):
            return False
        if tile == COIN:
            row = self.grid[ty]
            self.grid[ty] = row[:tx] + FLOOR + row[tx + 1 :]
            self.coins_collected += 1
            tile = FLOOR
        if tile == EXIT and self.coins_collected == self.total_coins:
            report(win_message(self.player.moves), self.out)
            self.close()
        return True

    def update_player(self) -> None:
        """Apply the held movement keys, collecting coins and reaching the exit."""
        if self.total_coins == self.coins_collected:
            self.door_open = True
        new_x, new_y = self._target()
        if not self._enter(new_x, new_y):
            return
        player = self.player
        if (new_x, new_y) != (player.x, player.y):
            player.x, player.y = new_x, new_y
            player.moves += 1
            report(moves_message(player.moves), self.out)

    def update_balls(self) -> None:
        """Move every enemy's ball; a ball reaching the player ends the game."""
        for enemy in self.enemies:
            if enemy.step(self.grid, self.player.tile):
                self.close()

    def tick(self) -> None:
        """Advance the game by one frame."""
        self.update_player()
        if self.bonus:
            self.coin_frames.tick()
            self.door_frames.tick()
            self.update_balls()

    def close(self) -> None:
        """End the game, reporting a loss if coins remain, and raise GameEnded."""
        if self.coins_collected != self.total_coins:
            report(
                loss_messages(self.player.moves, self.coins_collected, self.total_coins),
                self.out,
            )
        raise GameEnded(self.player.moves, self.coins_collected, self.total_coins)