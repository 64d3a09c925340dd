import pytest

from solong.cli import main


def _write_map(directory, rows, name="level.ber"):
    path = directory / name
    path.write_text("\n".join(rows) + "\n")
    return path


ENEMY_ROWS = ["1111111", "1PVC0E1", "1000001", "1111111"]


def test_no_arguments(capsys):
    assert main([]) == 1
    out = capsys.readouterr().out
    assert "Error: Invalid number of arguments" in out
    assert out.endswith("\n\n")


def test_too_many_arguments(capsys):
    assert main(["a.ber", "b.ber"]) == 1
    assert "Error: Invalid number of arguments" in capsys.readouterr().out


def test_wrong_extension(capsys):
    assert main(["level.txt"]) == 1
    assert "Error: Invalid file extension" in capsys.readouterr().out


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.ber")]) == 1
    assert "Error: Invalid fd" in capsys.readouterr().out


def test_square_map_rejected(tmp_path, capsys):
    path = _write_map(tmp_path, ["111", "1P1", "111"])
    assert main([str(path)]) == 1
    assert "Error: Map is not rectangular" in capsys.readouterr().out


def test_enemy_rejected_without_bonus(tmp_path, capsys):
    path = _write_map(tmp_path, ENEMY_ROWS)
    assert main([str(path)]) == 1
    assert "Error: Invalid map" in capsys.readouterr().out


@pytest.mark.parametrize("args", [["--bonus"], ["--bonus", "a.ber", "b.ber"]])
def test_bonus_flag_still_needs_one_map(args, capsys):
    assert main(args) == 1
    assert "Error: Invalid number of arguments" in capsys.readouterr().out


def test_bonus_accepts_enemies_then_needs_textures(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.chdir(tmp_path)
    path = _write_map(tmp_path, ENEMY_ROWS)
    assert main(["--bonus", str(path)]) == 1
    out = capsys.readouterr().out
    assert "Error: MLX initialization failure" in out
    assert "Invalid map" not in out