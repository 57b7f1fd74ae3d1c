"""Command-line entry points: load a map file and play it in a window."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from os import PathLike
from pathlib import Path
from typing import TextIO

import pygame

from solong.console import error_message, report
from solong.game import Game
from solong.mapfile import MapFileError, has_map_extension, read_map
from solong.render import AssetError, run
from solong.validate import BONUS_TILES, MANDATORY_TILES, InvalidMapError, validate_map

ASSETS_DIR = Path("assets")


def load_game(
    path: str | PathLike[str], bonus: bool = False, out: TextIO | None = None
) -> Game:
    """Read and validate the map at ``path`` and return a game ready to play.

    Raises MapFileError if the file is not a readable ``.ber`` file and
    InvalidMapError if its contents do not describe a playable level.
    """
    if not has_map_extension(path):
        raise MapFileError(f"not a .ber map file: {path!s}")
    grid, cols = read_map(path)
    validate_map(grid, cols, BONUS_TILES if bonus else MANDATORY_TILES)
    try:
        return Game(grid, bonus=bonus, out=out)
    except ValueError as exc:
        raise InvalidMapError(str(exc)) from exc


def _start(argv: Sequence[str] | None, bonus: bool) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        report(error_message("map file is missing!"))
        return 1
    try:
        game = load_game(args[0], bonus)
    except MapFileError:
        report(error_message("Invalid map file!"))
        return 1
    except InvalidMapError:
        report(error_message("Invalid map!"))
        return 1
    try:
        run(game, ASSETS_DIR)
    except AssetError as exc:
        report(error_message(str(exc)))
        return 1
    except pygame.error:
        report(error_message("Failed to create window"))
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Play the map named by the single argument; return the exit status."""
    return _start(argv, bonus=False)


def main_bonus(argv: Sequence[str] | None = None) -> int:
    """Play the map with enemies, animations and the on-screen counters."""
    return _start(argv, bonus=True)


if __name__ == "__main__":
    sys.exit(main())