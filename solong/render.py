"""Drawing the map and running the game window."""

from __future__ import annotations

from os import PathLike
from pathlib import Path

import pygame

from .errors import ErrorKind, SoLongError
from .game import EXIT_OPEN, GRASS, HERO_FRONT, TILE_SIZE, Game, Outcome, TileDraw
from .world import COLLECTIBLE, ENEMY, EXIT, FLOOR, PLAYER, WALL, WorldMap

WINDOW_TITLE = "so_long"

CORNER_LEFT_UP = "Borders/GRASS_CORNER_LEFT_UP.xpm"
CORNER_RIGHT_UP = "Borders/GRASS_CORNER_RIGHT_UP.xpm"
CORNER_LEFT_DOWN = "Borders/GRASS_CORNER_LEFT_DOWN.xpm"
CORNER_RIGHT_DOWN = "Borders/GRASS_CORNER_RIGHT_DOWN.xpm"
BORDER_TOP = "Borders/GRASS_BORDER_TOP.xpm"
BORDER_LEFT = "Borders/GRASS_BORDER_LEFT.xpm"
BORDER_RIGHT = "Borders/GRASS_BORDER_RIGHT.xpm"
BORDER_BOTTOM = "Borders/GRASS_BORDER_BOTTOM.xpm"
LOG = "Floor/log.xpm"
WATER = "Floor/WATER.xpm"
EGG_NEST = "Collectibles/EGG_NEST.xpm"
EXIT_BLOCKED = "Exit/BLOCKED_EXIT.xpm"
ENEMY_SPRITE = "Character/Enemy.xpm"

FOOTSTEP_LABEL = "Footsteps:"
FOOTSTEP_COLOUR = (0xCC, 0x00, 0x00)
_FONT_SIZE = 20


def _corner(world: WorldMap, x: int, y: int) -> str | None:
    last_x, last_y = world.width - 1, world.height - 1
    if y == 0 and x == 0:
        return CORNER_LEFT_UP
    if y == 0 and x == last_x:
        return CORNER_RIGHT_UP
    if y == last_y and x == 0:
        return CORNER_LEFT_DOWN
    if y == last_y and x == last_x:
        return CORNER_RIGHT_DOWN
    return None


def _border(world: WorldMap, x: int, y: int) -> str | None:
    last_x, last_y = world.width - 1, world.height - 1
    inner_x = 0 < x < last_x
    inner_y = 0 < y < last_y
    if y == 0 and inner_x:
        return BORDER_TOP
    if inner_y and x == 0:
        return BORDER_LEFT
    if inner_y and x == last_x:
        return BORDER_RIGHT
    if y == last_y and inner_x:
        return BORDER_BOTTOM
    return None


def _content(world: WorldMap, x: int, y: int, bonus: bool) -> str | None:
    tile = world.layout[y][x]
    interior = 0 < y < world.height - 1 and 0 < x < world.width - 1
    if tile == WALL and interior:
        return LOG
    if tile == FLOOR:
        return GRASS
    if tile == PLAYER:
        return HERO_FRONT
    if tile == EXIT:
        return EXIT_BLOCKED if bonus else EXIT_OPEN
    if tile == COLLECTIBLE:
        return EGG_NEST
    if tile == ENEMY and bonus:
        return ENEMY_SPRITE
    return None


def tile_textures(world: WorldMap, x: int, y: int, bonus: bool = False) -> list[str]:
    """Return the textures drawn on cell ``(x, y)`` at start, in drawing order."""
    candidates = (
        _corner(world, x, y),
        _border(world, x, y),
        _content(world, x, y, bonus),
    )
    return [texture for texture in candidates if texture is not None]


def footstep_label_position(world: WorldMap) -> tuple[int, int]:
    """Return the pixel where the bonus game writes its step counter."""
    x = (world.width // 2) * TILE_SIZE + 50
    y = world.height * TILE_SIZE - 10
    return x, y


class PygameRenderer:
    """Shows a game in a window and feeds it the keys that are pressed."""

    def __init__(self, game: Game, texture_root: str | PathLike[str] = "textures") -> None:
        self.game = game
        self.texture_root = Path(texture_root)
        self._textures: dict[str, pygame.Surface] = {}
        self._screen: pygame.Surface | None = None
        self._font: pygame.font.Font | None = None

    def run(self) -> Outcome:
        """Open the window and play until victory or until the player quits.

        Raises ``SoLongError`` when the window or a texture cannot be set up,
        and when the hero walks into an enemy.
        """
        try:
            self._open_window()
            self._draw_world()
            pygame.display.flip()
            return self._loop()
        finally:
            self._textures.clear()
            pygame.quit()

    def _open_window(self) -> None:
        world = self.game.world
        try:
            pygame.display.init()
            pygame.font.init()
            self._screen = pygame.display.set_mode(
                (world.width * TILE_SIZE, world.height * TILE_SIZE)
            )
            pygame.display.set_caption(WINDOW_TITLE)
        except pygame.error as exc:
            raise SoLongError(ErrorKind.MLX_INIT) from exc

    def _texture(self, name: str) -> pygame.Surface:
        surface = self._textures.get(name)
        if surface is None:
            try:
                surface = pygame.image.load(str(self.texture_root / name)).convert_alpha()
            except (pygame.error, OSError) as exc:
                raise SoLongError(ErrorKind.MLX_INIT) from exc
            self._textures[name] = surface
        return surface

    def _put(self, draw: TileDraw) -> None:
        assert self._screen is not None
        self._screen.blit(self._texture(draw.texture), (draw.x, draw.y))

    def _draw_world(self) -> None:
        world = self.game.world
        for y in range(world.height):
            for x in range(world.width):
                for texture in tile_textures(world, x, y, self.game.bonus):
                    self._put(TileDraw(texture, x * TILE_SIZE, y * TILE_SIZE))
        if self.game.bonus:
            self._draw_footsteps()

    def _draw_footsteps(self) -> None:
        assert self._screen is not None
        x, y = footstep_label_position(self.game.world)
        self._put(TileDraw(WATER, x, y - 20))
        self._put(TileDraw(WATER, x + TILE_SIZE, y - 20))
        if self._font is None:
            self._font = pygame.font.Font(None, _FONT_SIZE)
        label = self._font.render(FOOTSTEP_LABEL, True, FOOTSTEP_COLOUR)
        count = self._font.render(str(self.game.footsteps), True, FOOTSTEP_COLOUR)
        self._screen.blit(label, (x, y - label.get_height()))
        self._screen.blit(count, (x + TILE_SIZE + 1, y - count.get_height()))

    def _loop(self) -> Outcome:
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return Outcome.QUIT
            if event.type != pygame.KEYDOWN:
                continue
            result = self.game.handle_key(pygame.key.name(event.key))
            if result is None:
                continue
            for message in result.messages:
                print(message)
            if result.outcome in (Outcome.QUIT, Outcome.VICTORY):
                return result.outcome
            if result.outcome is Outcome.BLOCKED:
                continue
            for draw in result.draws:
                self._put(draw)
            if self.game.bonus:
                self._draw_footsteps()
            pygame.display.flip()