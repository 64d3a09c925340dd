"""Checks on the command-line arguments."""

from __future__ import annotations

from collections.abc import Sequence

from .errors import ErrorKind, SoLongError

MAP_EXTENSION = ".ber"


def validate_arguments(argv: Sequence[str]) -> str:
    """Check the arguments given after the program name and return the map path.

    Exactly one argument is accepted, and it must end in ``.ber``.
    """
    if len(argv) != 1:
        raise SoLongError(ErrorKind.NBR_ARGS)
    path = argv[0]
    if len(path) < len(MAP_EXTENSION) or not path.endswith(MAP_EXTENSION):
        raise SoLongError(ErrorKind.INVALID_EXTENSION)
    return path