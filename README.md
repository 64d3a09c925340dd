# solong

A small top-down puzzle game. You walk a character around a walled map,
pick up every collectible, and then step onto the exit. Every step is
counted.

## Installing

```
pip install .
```

The game window is drawn with pygame.

## Playing

```
solong maps/level.ber
solong --bonus maps/level.ber
```

After an optional leading `--bonus`, the program takes exactly one
argument: the path to a map file whose name ends in `.ber`. Anything else
stops it with an error message and exit status 1.

Controls:

| Key                 | Action     |
|---------------------|------------|
| `W` / Up arrow      | move up    |
| `S` / Down arrow    | move down  |
| `A` / Left arrow    | move left  |
| `D` / Right arrow   | move right |
| `Escape`            | quit       |

Closing the window quits as well. Walls cannot be entered, and neither can
the exit while collectibles remain. Reaching the exit after gathering every
collectible prints `Victory!` and ends the game.

In the normal game each step prints `Footsteps: <n>` on the terminal.

### Bonus game

With `--bonus`:

- enemies (`V`) may be placed on the map; walking into one ends the game
  with `Game Over! You hit an enemy.` and exit status 1;
- the hero's sprite follows the direction of travel, alternating between
  two frames;
- the exit is drawn closed at first and drawn open once every collectible
  has been gathered;
- the step counter is drawn in the window instead of printed.

## Textures

The package does not ship any images. The game loads its textures from a
`textures` directory in the current working directory, and stops with
`Error: MLX initialization failure` if one cannot be loaded. It expects
these files under `textures/`:

```
Borders/GRASS_CORNER_LEFT_UP.xpm     Borders/GRASS_BORDER_TOP.xpm
Borders/GRASS_CORNER_RIGHT_UP.xpm    Borders/GRASS_BORDER_LEFT.xpm
Borders/GRASS_CORNER_LEFT_DOWN.xpm   Borders/GRASS_BORDER_RIGHT.xpm
Borders/GRASS_CORNER_RIGHT_DOWN.xpm  Borders/GRASS_BORDER_BOTTOM.xpm
Floor/GRASS.xpm                      Floor/log.xpm
Collectibles/EGG_NEST.xpm            Exit/EXIT.xpm
Character/FRONT.xpm
```

and, for the bonus game, also:

```
Floor/WATER.xpm                      Exit/BLOCKED_EXIT.xpm
Character/Enemy.xpm
Character/BACK_LEFT.xpm              Character/BACK_RIGHT.xpm
Character/FRONT_LEFT.xpm             Character/FRONT_RIGHT.xpm
Character/LEFT_LEFT.xpm              Character/LEFT_RIGHT.xpm
Character/RIGHT_LEFT.xpm             Character/RIGHT_RIGHT.xpm
```

Any image format pygame can load will do, as long as the file names match.

## Map format

A map is a plain text file, one row per line, every row the same length.

| Character | Meaning                         |
|-----------|---------------------------------|
| `1`       | wall                            |
| `0`       | floor                           |
| `P`       | player start (exactly one)      |
| `E`       | exit (exactly one)              |
| `C`       | collectible (any number)        |
| `V`       | enemy (bonus game only)         |

A map is accepted only when:

- it is rectangular and not square (`Error: Map is not rectangular`);
- it is not empty (`Error processing map`);
- it is fully surrounded by walls, holds exactly one `P` and one `E`, and
  no other characters than the ones above (`Error: Invalid map`);
- every collectible and the exit can be reached from the start; a map that
  fails this is reported as `Error: Memory allocation failed`.

A file that cannot be opened is reported as `Error: Invalid fd`.

Example:

```
1111111111
1P0C00C0E1
1111111111
```

## Using it as a library

The map loader and the game rules work without a window:

```python
from solong.world import load_map
from solong.game import Game, Direction

world = load_map("maps/level.ber", allow_enemies=False)
game = Game(world, bonus=False)
result = game.move(Direction.RIGHT)
print(result.outcome, result.footsteps, result.messages)
```

- `solong.world.parse_layout(rows, allow_enemies)` checks a list of row
  strings and returns a `WorldMap`; `read_layout(path)` reads those rows
  from a file, and `load_map` does both.
- `solong.world.flood_fill(grid, start, treasures)` fills the reachable
  cells of a grid with `F` and returns the number of collectibles reached.
- `Game.move(direction)` returns a `MoveResult` holding an `Outcome`
  (`BLOCKED`, `MOVED` or `VICTORY`), the tiles to redraw as `TileDraw`
  items, the step count and any messages. `Game.handle_key(name)` takes a
  key name such as `"w"`, `"left"` or `"escape"` and returns `None` for
  keys that do nothing.
- `solong.render.tile_textures(world, x, y, bonus)` lists the textures
  drawn on a cell at start, and `PygameRenderer(game, texture_root).run()`
  opens the window and plays until victory or quit.

Errors in arguments, maps, window set-up, and hitting an enemy are raised
as `solong.errors.SoLongError`, whose `kind` is a
`solong.errors.ErrorKind` carrying a `code` and a `message`.