import io

import pytest

from solong.cli import load_game, main, main_bonus
from solong.console import error_message, moves_message
from solong.game import TILE_SIZE, Key
from solong.mapfile import MapFileError
from solong.validate import InvalidMapError

VALID = "1111111\n1P0C0E1\n1111111\n"
WITH_ENEMY = "11111111\n1P0C0XE1\n11111111\n"
UNREACHABLE = "1111111\n1P01C01\n1111E11\n1111111\n"
SIX_ENEMIES = "11111111111\n1PCEXXXXXX1\n11111111111\n"
RAGGED = "1111111\n1P0C0E1\n11111\n"


def write_map(tmp_path, text, name="level.ber"):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_load_game_reads_valid_map(tmp_path):
    game = load_game(write_map(tmp_path, VALID))
    assert game.width == 7
    assert game.height == 3
    assert game.total_coins == 1
    assert game.coins_collected == 0
    assert (game.player.x, game.player.y) == (TILE_SIZE, TILE_SIZE)
    assert game.enemies == []


def test_load_game_bonus_finds_enemies(tmp_path):
    game = load_game(write_map(tmp_path, WITH_ENEMY), bonus=True)
    assert [(e.x, e.y) for e in game.enemies] == [(5, 1)]
    assert game.bonus is True


def test_load_game_rejects_enemy_outside_bonus(tmp_path):
    with pytest.raises(InvalidMapError):
        load_game(write_map(tmp_path, WITH_ENEMY))


def test_load_game_rejects_too_many_enemies(tmp_path):
    with pytest.raises(InvalidMapError):
        load_game(write_map(tmp_path, SIX_ENEMIES), bonus=True)


@pytest.mark.parametrize("text", [UNREACHABLE, RAGGED, "", "1111\n1PE1\n1111\n"])
def test_load_game_rejects_invalid_maps(tmp_path, text):
    with pytest.raises(InvalidMapError):
        load_game(write_map(tmp_path, text))


def test_load_game_rejects_wrong_extension(tmp_path):
    with pytest.raises(MapFileError):
        load_game(write_map(tmp_path, VALID, name="level.txt"))


def test_load_game_rejects_missing_file(tmp_path):
    with pytest.raises(MapFileError):
        load_game(tmp_path / "absent.ber")


def test_loaded_game_reports_moves_to_stream(tmp_path):
    out = io.StringIO()
    game = load_game(write_map(tmp_path, VALID), out=out)
    game.press(Key.RIGHT)
    game.tick()
    assert game.player.moves == 1
    assert game.player.x == 2 * TILE_SIZE
    assert out.getvalue() == moves_message(1)


@pytest.mark.parametrize("argv", [[], ["a.ber", "b.ber"]])
def test_main_requires_one_argument(capsys, argv):
    assert main(argv) == 1
    assert capsys.readouterr().out == error_message("map file is missing!")


def test_main_bonus_requires_one_argument(capsys):
    assert main_bonus([]) == 1
    assert capsys.readouterr().out == error_message("map file is missing!")


def test_main_rejects_bad_file(tmp_path, capsys):
    path = write_map(tmp_path, VALID, name="level.txt")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == error_message("Invalid map file!")


def test_main_rejects_invalid_map(tmp_path, capsys):
    path = write_map(tmp_path, UNREACHABLE)
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == error_message("Invalid map!")


def test_main_bonus_rejects_invalid_map(tmp_path, capsys):
    path = write_map(tmp_path, SIX_ENEMIES)
    assert main_bonus([str(path)]) == 1
    assert capsys.readouterr().out == error_message("Invalid map!")