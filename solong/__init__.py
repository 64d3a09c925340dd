"""Tile-based puzzle game: map loading, game rules, a pygame window and a command."""

__version__ = "0.1.0"
__all__ = ["__version__"]