"""A tile-based game: collect every coin, then reach the exit."""

__version__ = "1.0.0"

__all__ = ["cli", "console", "enemies", "game", "mapfile", "render", "validate"]