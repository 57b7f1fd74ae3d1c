"""Reading ``.ber`` map files from disk."""

from __future__ import annotations

from collections.abc import Iterable
from os import PathLike

MAP_EXTENSION = ".ber"


class MapFileError(Exception):
    """Raised when a map file cannot be opened or read."""


def has_map_extension(filename: str | PathLike[str]) -> bool:
    """Return True if ``filename`` ends in ``.ber`` and has a name before it."""
    name = str(filename)
    return len(name) > len(MAP_EXTENSION) and name.endswith(MAP_EXTENSION)


def read_lines(path: str | PathLike[str]) -> list[str]:
    """Return the lines of ``path`` with their newline characters kept."""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            content = handle.read()
    except OSError as exc:
        raise MapFileError(f"cannot read map file {path!s}: {exc}") from exc
    return content.splitlines(keepends=True) if "\r" not in content else _split_on_newline(content)


def _split_on_newline(content: str) -> list[str]:
    """Split on ``\\n`` only, keeping it, so carriage returns stay in the line."""
    lines = content.split("\n")
    result = [line + "\n" for line in lines[:-1]]
    if lines[-1]:
        result.append(lines[-1])
    return result


def map_dimensions(lines: Iterable[str]) -> tuple[int, int]:
    """Return ``(rows, cols)``: the line count and the longest line without its newline."""
    rows = 0
    cols = 0
    for line in lines:
        rows += 1
        cols = max(cols, len(line.removesuffix("\n")))
    return rows, cols


def read_map(path: str | PathLike[str]) -> tuple[list[str], int]:
    """Read the map at ``path`` and return its rows and its width.

    Every row is cut to the width of the widest line. A row shorter than that
    keeps its newline, so that validation rejects it as malformed.
    """
    lines = read_lines(path)
    _, cols = map_dimensions(lines)
    return [line[:cols] for line in lines], cols