"""Reading, checking and holding the game map."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from os import PathLike

from .errors import ErrorKind, SoLongError

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"
ENEMY = "V"
FILLED = "F"


@dataclass(frozen=True)
class Position:
    """A cell of the map, ``x`` counting columns and ``y`` rows."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> Position:
        """Return the position ``dx`` columns and ``dy`` rows away."""
        return Position(self.x + dx, self.y + dy)


@dataclass
class WorldMap:
    """A checked map: its cells and what was found on them."""

    layout: list[list[str]]
    hero_position: Position
    escape_hatch: Position
    treasures: int = 0
    enemies: int = 0
    _width: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._width = len(self.layout[0]) if self.layout else 0

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return len(self.layout)

    @property
    def rows(self) -> list[str]:
        """The map as one string per row."""
        return ["".join(row) for row in self.layout]

    def tile(self, pos: Position) -> str:
        """Return the character at ``pos``."""
        return self.layout[pos.y][pos.x]

    def set_tile(self, pos: Position, tile: str) -> None:
        """Replace the character at ``pos``."""
        if len(tile) != 1:
            raise ValueError(f"a tile is one character, got {tile!r}")
        self.layout[pos.y][pos.x] = tile


def read_layout(path: str | PathLike[str]) -> list[str]:
    """Read a map file and return its rows without their line breaks."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise SoLongError(ErrorKind.FD) from exc
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def _interior(rows: list[str]) -> Iterable[tuple[Position, str]]:
    for y, row in enumerate(rows[1:], start=1):
        for x, char in enumerate(row[1:], start=1):
            yield Position(x, y), char


def _borders_closed(rows: list[str]) -> bool:
    if any(char != WALL for char in rows[0]) or any(char != WALL for char in rows[-1]):
        return False
    return all(row[0] == WALL and row[-1] == WALL for row in rows)


def flood_fill(grid: list[list[str]], start: Position, treasures: int) -> int:
    """Fill every cell reachable from ``start`` with ``F``.

    Walls stop the fill. An exit is filled but not crossed while fewer than
    ``treasures`` collectibles have been gathered on the way. Returns the
    number of collectibles reached.
    """
    height = len(grid)
    width = len(grid[0]) if grid else 0
    gathered = 0
    stack = [start]
    while stack:
        pos = stack.pop()
        if not (0 <= pos.x < width and 0 <= pos.y < height):
            continue
        cell = grid[pos.y][pos.x]
        if cell in (FILLED, WALL):
            continue
        if cell == COLLECTIBLE:
            gathered += 1
        grid[pos.y][pos.x] = FILLED
        if cell == EXIT and gathered != treasures:
            continue
        # Pushed in reverse so that right, left, down, up are visited in that order.
        stack.extend(
            (pos.offset(0, -1), pos.offset(0, 1), pos.offset(-1, 0), pos.offset(1, 0))
        )
    return gathered


def parse_layout(rows: Iterable[str], allow_enemies: bool = False) -> WorldMap:
    """Check the rows of a map and build the map they describe."""
    rows = list(rows)
    height = len(rows)
    width = len(rows[0]) if rows else 0
    if any(len(row) != width for row in rows[1:]):
        raise SoLongError(ErrorKind.MAP_RECT)
    if rows and width == height:
        raise SoLongError(ErrorKind.MAP_RECT)
    if width == 0 or height == 0:
        raise SoLongError(ErrorKind.MAP_PROCESSING)
    if not _borders_closed(rows):
        raise SoLongError(ErrorKind.MAP_INVALID)

    cells = list(_interior(rows))
    exits = sum(1 for _, char in cells if char == EXIT)
    players = sum(1 for _, char in cells if char == PLAYER)
    if exits != 1 or players != 1:
        raise SoLongError(ErrorKind.MAP_INVALID)

    treasures = enemies = 0
    hero = hatch = Position(0, 0)
    for pos, char in cells:
        if char == EXIT:
            hatch = pos
        elif char == PLAYER:
            hero = pos
        elif char == COLLECTIBLE:
            treasures += 1
        elif char == ENEMY and allow_enemies:
            enemies += 1
        elif char not in (FLOOR, WALL):
            raise SoLongError(ErrorKind.MAP_INVALID)

    grid = [list(row) for row in rows]
    flood_fill(grid, hero, treasures)
    if any(char in (COLLECTIBLE, EXIT) for row in grid for char in row):
        # An unreachable collectible or exit is reported under code 3.
        raise SoLongError(ErrorKind.MALLOC)

    return WorldMap(
        layout=[list(row) for row in rows],
        hero_position=hero,
        escape_hatch=hatch,
        treasures=treasures,
        enemies=enemies,
    )


def load_map(path: str | PathLike[str], allow_enemies: bool = False) -> WorldMap:
    """Read and check the map file at ``path``."""
    return parse_layout(read_layout(path), allow_enemies)