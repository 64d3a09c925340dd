"""Command-line entry point."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

from .errors import SoLongError
from .game import Game
from .render import PygameRenderer
from .validation import validate_arguments
from .world import load_map

BONUS_FLAG = "--bonus"
TEXTURE_ROOT = Path("textures")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the map named on the command line.

    A leading ``--bonus`` plays the bonus game with enemies and walking
    sprites. Returns the exit status.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    bonus = bool(args) and args[0] == BONUS_FLAG
    if bonus:
        args = args[1:]
    try:
        path = validate_arguments(args)
        world = load_map(path, allow_enemies=bonus)
        PygameRenderer(Game(world, bonus), TEXTURE_ROOT).run()
    except SoLongError as exc:
        print(f"{exc.message}\n")
        return exc.exit_status
    return 0


if __name__ == "__main__":
    sys.exit(main())