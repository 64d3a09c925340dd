"""Error kinds reported by the game and the exception that carries them."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Every failure the game can end with, numbered as it reports them."""

    NBR_ARGS = (1, "Error: Invalid number of arguments")
    INVALID_EXTENSION = (2, "Error: Invalid file extension")
    MALLOC = (3, "Error: Memory allocation failed")
    FD = (4, "Error: Invalid fd")
    MLX_INIT = (5, "Error: MLX initialization failure")
    MAP_PROCESSING = (6, "Error processing map")
    MAP_RECT = (7, "Error: Map is not rectangular")
    MAP_INVALID = (8, "Error: Invalid map")
    MAP_PATH = (9, "Error: Path is invalid")
    GAME_OVER = (10, "Game Over! You hit an enemy.")

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message

    @classmethod
    def from_code(cls, code: int) -> ErrorKind:
        """Return the kind with the given number."""
        for kind in cls:
            if kind.code == code:
                return kind
        raise ValueError(f"unknown error code: {code}")


class SoLongError(Exception):
    """Raised when the game cannot start or must stop with a failure."""

    exit_status = 1

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind.message)
        self.kind = kind

    @property
    def message(self) -> str:
        return self.kind.message