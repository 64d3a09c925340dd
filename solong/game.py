"""Game state and the rules for moving the hero around the map."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import ErrorKind, SoLongError
from .world import COLLECTIBLE, ENEMY, EXIT, FLOOR, WALL, Position, WorldMap

TILE_SIZE = 64

GRASS = "Floor/GRASS.xpm"
HERO_FRONT = "Character/FRONT.xpm"
EXIT_OPEN = "Exit/EXIT.xpm"

VICTORY_MESSAGE = "Victory!"


class Direction(Enum):
    """A step of one cell in one of the four directions."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def __init__(self, dx: int, dy: int) -> None:
        self.dx = dx
        self.dy = dy


# Sprites used in the bonus game: the first on an even step count, the second on odd.
_WALK_SPRITES: dict[Direction, tuple[str, str]] = {
    Direction.UP: ("Character/BACK_LEFT.xpm", "Character/BACK_RIGHT.xpm"),
    Direction.DOWN: ("Character/FRONT_LEFT.xpm", "Character/FRONT_RIGHT.xpm"),
    Direction.LEFT: ("Character/LEFT_LEFT.xpm", "Character/LEFT_RIGHT.xpm"),
    Direction.RIGHT: ("Character/RIGHT_LEFT.xpm", "Character/RIGHT_RIGHT.xpm"),
}

KEY_BINDINGS: dict[str, Direction] = {
    "w": Direction.UP,
    "up": Direction.UP,
    "s": Direction.DOWN,
    "down": Direction.DOWN,
    "a": Direction.LEFT,
    "left": Direction.LEFT,
    "d": Direction.RIGHT,
    "right": Direction.RIGHT,
}

QUIT_KEY = "escape"


class Outcome(Enum):
    """What a key press or a move led to."""

    BLOCKED = "blocked"
    MOVED = "moved"
    VICTORY = "victory"
    QUIT = "quit"


@dataclass(frozen=True)
class TileDraw:
    """A texture to draw with its top-left corner at pixel ``(x, y)``."""

    texture: str
    x: int
    y: int


@dataclass(frozen=True)
class MoveResult:
    """The effect of one action: its outcome, what to redraw and what to print."""

    outcome: Outcome
    draws: tuple[TileDraw, ...] = ()
    footsteps: int = 0
    messages: tuple[str, ...] = ()


def _at_cell(texture: str, pos: Position) -> TileDraw:
    return TileDraw(texture, pos.x * TILE_SIZE, pos.y * TILE_SIZE)


class Game:
    """A game in progress on a checked map.

    With ``bonus`` set, enemies end the game, the hero's sprite follows the
    direction of travel and the exit is drawn open once every collectible is
    gathered; otherwise each step reports the step count as a message.
    """

    def __init__(self, world: WorldMap, bonus: bool = False) -> None:
        self.world = world
        self.bonus = bonus
        self.gathered_loot = 0
        self.footsteps = 0

    @property
    def hero(self) -> Position:
        return self.world.hero_position

    @property
    def all_gathered(self) -> bool:
        return self.gathered_loot == self.world.treasures

    def move(self, direction: Direction) -> MoveResult:
        """Try to move the hero one cell in ``direction``.

        Walls, and the exit while collectibles remain, block the move. In the
        bonus game stepping onto an enemy raises ``SoLongError`` (game over).
        """
        start = self.hero
        target = start.offset(direction.dx, direction.dy)
        tile = self.world.tile(target)
        if tile == WALL or (tile == EXIT and not self.all_gathered):
            return MoveResult(Outcome.BLOCKED, footsteps=self.footsteps)
        if self.bonus and tile == ENEMY:
            raise SoLongError(ErrorKind.GAME_OVER)

        draws = [_at_cell(GRASS, start), _at_cell(self._hero_sprite(direction), target)]
        self.world.hero_position = target
        self.footsteps += 1
        messages = [] if self.bonus else [f"Footsteps: {self.footsteps}"]

        outcome = self._settle(draws)
        if outcome is Outcome.VICTORY:
            messages.append(VICTORY_MESSAGE)
        return MoveResult(outcome, tuple(draws), self.footsteps, tuple(messages))

    def handle_key(self, key: str) -> MoveResult | None:
        """Act on a key name such as ``"w"``, ``"left"`` or ``"escape"``.

        Returns ``None`` for keys that do nothing.
        """
        name = key.lower()
        if name == QUIT_KEY:
            return MoveResult(Outcome.QUIT, footsteps=self.footsteps)
        direction = KEY_BINDINGS.get(name)
        if direction is None:
            return None
        return self.move(direction)

    def _hero_sprite(self, direction: Direction) -> str:
        if not self.bonus:
            return HERO_FRONT
        even, odd = _WALK_SPRITES[direction]
        return even if self.footsteps % 2 == 0 else odd

    def _settle(self, draws: list[TileDraw]) -> Outcome:
        """Pick up what lies under the hero and check for a win."""
        here = self.hero
        if self.world.tile(here) == COLLECTIBLE:
            self.gathered_loot += 1
            self.world.set_tile(here, FLOOR)
        if self.bonus and self.all_gathered:
            draws.append(_at_cell(EXIT_OPEN, self.world.escape_hatch))
        if self.world.tile(here) == EXIT and self.all_gathered:
            return Outcome.VICTORY
        return Outcome.MOVED