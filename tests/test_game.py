import pytest

from solong.errors import ErrorKind, SoLongError
from solong.game import (
    EXIT_OPEN,
    GRASS,
    HERO_FRONT,
    TILE_SIZE,
    Direction,
    Game,
    Outcome,
    TileDraw,
)
from solong.world import Position, parse_layout


def _game(rows, bonus=False):
    return Game(parse_layout(rows, allow_enemies=bonus), bonus)


def _cell(texture, x, y):
    return TileDraw(texture, x * TILE_SIZE, y * TILE_SIZE)


SIMPLE = ["111111", "1PCE01", "111111"]
EXIT_BEHIND = ["1111111", "1EP0C01", "1111111"]


def test_wall_blocks_move():
    game = _game(SIMPLE)
    result = game.move(Direction.LEFT)
    assert result.outcome is Outcome.BLOCKED
    assert result.draws == ()
    assert game.footsteps == 0
    assert game.hero == Position(1, 1)


def test_collect_and_draws():
    game = _game(SIMPLE)
    result = game.move(Direction.RIGHT)
    assert result.outcome is Outcome.MOVED
    assert game.gathered_loot == 1
    assert game.world.tile(Position(2, 1)) == "0"
    assert result.footsteps == 1
    assert result.messages == ("Footsteps: 1",)
    assert result.draws == (_cell(GRASS, 1, 1), _cell(HERO_FRONT, 2, 1))


def test_victory_after_collecting():
    game = _game(SIMPLE)
    game.move(Direction.RIGHT)
    result = game.move(Direction.RIGHT)
    assert result.outcome is Outcome.VICTORY
    assert result.messages[-1] == "Victory!"
    assert game.hero == game.world.escape_hatch


def test_exit_blocked_until_all_collected():
    game = _game(EXIT_BEHIND)
    assert game.move(Direction.LEFT).outcome is Outcome.BLOCKED
    assert game.footsteps == 0
    game.move(Direction.RIGHT)
    game.move(Direction.RIGHT)
    assert game.gathered_loot == game.world.treasures
    game.move(Direction.LEFT)
    game.move(Direction.LEFT)
    assert game.move(Direction.LEFT).outcome is Outcome.VICTORY
    assert game.footsteps == 5


def test_up_and_down_blocked_by_walls():
    game = _game(SIMPLE)
    assert game.move(Direction.UP).outcome is Outcome.BLOCKED
    assert game.move(Direction.DOWN).outcome is Outcome.BLOCKED
    assert game.hero == Position(1, 1)


def test_bonus_enemy_ends_game():
    game = _game(["1111111", "1PVCE01", "1111111"], bonus=True)
    with pytest.raises(SoLongError) as info:
        game.move(Direction.RIGHT)
    assert info.value.kind is ErrorKind.GAME_OVER
    assert game.hero == Position(1, 1)


def test_plain_game_ignores_enemy_rule():
    world = parse_layout(["1111111", "1PVCE01", "1111111"], allow_enemies=True)
    game = Game(world, bonus=False)
    assert game.move(Direction.RIGHT).outcome is Outcome.MOVED
    assert game.hero == Position(2, 1)


def test_bonus_sprites_alternate():
    game = _game(["11111111", "1P000CE1", "11111111"], bonus=True)
    first = game.move(Direction.RIGHT)
    second = game.move(Direction.RIGHT)
    assert first.draws[1] == _cell("Character/RIGHT_LEFT.xpm", 2, 1)
    assert second.draws[1] == _cell("Character/RIGHT_RIGHT.xpm", 3, 1)
    assert first.messages == ()


def test_bonus_draws_open_exit_once_collected():
    game = _game(["11111111", "1P0C0E01", "11111111"], bonus=True)
    before = game.move(Direction.RIGHT)
    assert all(draw.texture != EXIT_OPEN for draw in before.draws)
    after = game.move(Direction.RIGHT)
    hatch = game.world.escape_hatch
    assert after.draws[-1] == _cell(EXIT_OPEN, hatch.x, hatch.y)


def test_handle_key_bindings():
    game = _game(SIMPLE)
    assert game.handle_key("Escape").outcome is Outcome.QUIT
    assert game.handle_key("q") is None
    assert game.handle_key("a").outcome is Outcome.BLOCKED
    result = game.handle_key("D")
    assert result.outcome is Outcome.MOVED
    assert game.hero == Position(2, 1)


@pytest.mark.parametrize(
    "key, expected",
    [("up", Position(2, 1)), ("w", Position(2, 1)), ("down", Position(2, 3)), ("s", Position(2, 3)),
     ("left", Position(1, 2)), ("right", Position(3, 2))],
)
def test_keys_move_in_their_direction(key, expected):
    game = _game(["11111", "10001", "10P01", "1C0E1", "11111", "11111"][:5] + [], bonus=False) \
        if False else Game(parse_layout(["11111", "10001", "10P01", "1C0E1", "10001", "11111"]))
    game.handle_key(key)
    assert game.hero == expected