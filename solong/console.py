"""Coloured terminal messages printed while the game runs."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

RESET = "\x1b[0m"
BOLD = "\x1b[1m"
UNDERLINE = "\x1b[4m"
RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
BLUE = "\x1b[34m"
MAGENTA = "\x1b[35m"
CYAN = "\x1b[36m"
WHITE = "\x1b[37m"


def error_message(message: str) -> str:
    """Return the coloured error line for ``message``."""
    return f"{BOLD}{RED}ERROR: {RESET}{YELLOW}{message}\n{RESET}"


def moves_message(moves: int) -> str:
    """Return the line announcing the current move count."""
    return f"{BOLD}{CYAN}Moves: {RESET}{BOLD}{GREEN}{moves:d}\n{RESET}"


def win_message(moves: int) -> str:
    """Return the line printed when the player reaches the open exit."""
    return (
        f"{BOLD}{GREEN}Congratulations! {RESET}{BOLD}{CYAN}You won in "
        f"{BOLD}{YELLOW}{moves:d}{RESET}{BOLD}{CYAN} moves!\n{RESET}"
    )


def loss_messages(moves: int, collected: int, total: int) -> list[str]:
    """Return the lines printed when the game ends before every coin is taken."""
    return [
        f"{BOLD}{RED}GAME OVER! {RESET}{BOLD}{CYAN}You lost in "
        f"{BOLD}{YELLOW}{moves:d}{RESET}{BOLD}{CYAN} moves.\n{RESET}",
        f"{BOLD}{CYAN}You collected {BOLD}{YELLOW}{collected:d}{RESET}"
        f"{BOLD}{CYAN} coins out of {BOLD}{YELLOW}{total:d}\n{RESET}",
        f"{UNDERLINE}{MAGENTA}BETTER LUCK NEXT TIME!\n{RESET}",
    ]


def report(text: str | Iterable[str], stream: TextIO | None = None) -> int:
    """Write ``text`` (a string or several) to ``stream`` and return the characters written."""
    out = sys.stdout if stream is None else stream
    pieces = [text] if isinstance(text, str) else list(text)
    written = 0
    for piece in pieces:
        out.write(piece)
        written += len(piece)
    out.flush()
    return written