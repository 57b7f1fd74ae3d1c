"""Checks that a map grid describes a playable level."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

WALL = "1"
FLOOR = "0"
COIN = "C"
EXIT = "E"
PLAYER = "P"
ENEMY = "X"

MANDATORY_TILES = frozenset({FLOOR, WALL, COIN, EXIT, PLAYER})
BONUS_TILES = MANDATORY_TILES | {ENEMY}

MAX_ROWS = 44
MAX_COLS = 80


class InvalidMapError(ValueError):
    """Raised when a map grid fails validation."""


def check_chars(grid: Sequence[str], allowed: Iterable[str] = MANDATORY_TILES) -> bool:
    """Return True if every character of every row is an allowed tile."""
    allowed_set = frozenset(allowed)
    return all(tile in allowed_set for row in grid for tile in row)


def check_rectangle(grid: Sequence[str], cols: int) -> bool:
    """Return True if every row is exactly ``cols`` characters long."""
    return all(len(row) == cols for row in grid)


def check_components(grid: Sequence[str]) -> bool:
    """Return True for one player, one exit and at least one coin."""
    return (
        count_tiles(grid, PLAYER) == 1
        and count_tiles(grid, EXIT) == 1
        and count_tiles(grid, COIN) > 0
    )


def check_closed(grid: Sequence[str], cols: int) -> bool:
    """Return True if the map is surrounded by walls."""
    if not grid or cols <= 0:
        return False
    full_wall = WALL * cols
    if grid[0][:cols] != full_wall or grid[-1][:cols] != full_wall:
        return False
    return all(
        len(row) >= cols and row[0] == WALL and row[cols - 1] == WALL for row in grid
    )


def check_dims(rows: int, cols: int) -> bool:
    """Return True if the map fits in the largest window allowed."""
    return rows <= MAX_ROWS and cols <= MAX_COLS


def find_tile(grid: Sequence[str], tile: str) -> tuple[int, int] | None:
    """Return ``(x, y)`` of the first ``tile`` in row-major order, or None."""
    for y, row in enumerate(grid):
        x = row.find(tile)
        if x != -1:
            return x, y
    return None


def count_tiles(grid: Sequence[str], tile: str) -> int:
    """Return how many times ``tile`` appears in the grid."""
    return sum(row.count(tile) for row in grid)


def flood_fill(grid: Sequence[str]) -> bool:
    """Return True if every coin and the exit can be reached from the player.

    Only walls block the way. The grid itself is left unchanged.
    """
    cells = [list(row) for row in grid]
    start = find_tile(grid, PLAYER)
    if start is not None:
        stack = [start]
        while stack:
            x, y = stack.pop()
            if y < 0 or y >= len(cells) or x < 0 or x >= len(cells[y]):
                continue
            if cells[y][x] == WALL:
                continue
            cells[y][x] = WALL
            stack.extend(((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)))
    return not any(tile in (COIN, EXIT) for row in cells for tile in row)


def validate_map(
    grid: Sequence[str], cols: int, allowed: Iterable[str] = MANDATORY_TILES
) -> None:
    """Raise InvalidMapError with the first rule the grid breaks."""
    rows = len(grid)
    if not check_chars(grid, allowed):
        raise InvalidMapError("map contains an unknown tile")
    if not check_rectangle(grid, cols):
        raise InvalidMapError("map is not rectangular")
    if not check_components(grid):
        raise InvalidMapError("map needs one player, one exit and at least one coin")
    if not check_closed(grid, cols):
        raise InvalidMapError("map is not enclosed by walls")
    if not flood_fill(grid):
        raise InvalidMapError("not every coin and exit can be reached")
    if not check_dims(rows, cols):
        raise InvalidMapError("map is too large")