import pytest

from solong.mapfile import (
    MapFileError,
    has_map_extension,
    map_dimensions,
    read_lines,
    read_map,
)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("map.ber", True),
        ("maps/level1.ber", True),
        ("a.ber", True),
        (".ber", False),
        ("map.txt", False),
        ("map.ber.txt", False),
        ("map.BER", False),
        ("", False),
    ],
)
def test_has_map_extension(name, expected):
    assert has_map_extension(name) is expected


def test_has_map_extension_accepts_paths(tmp_path):
    assert has_map_extension(tmp_path / "level.ber") is True


def test_read_lines_keeps_newlines(tmp_path):
    path = tmp_path / "m.ber"
    path.write_text("111\n1P1\n111")
    assert read_lines(path) == ["111\n", "1P1\n", "111"]


def test_read_lines_keeps_carriage_returns(tmp_path):
    path = tmp_path / "m.ber"
    path.write_bytes(b"11\r\n11\r\n")
    assert read_lines(path) == ["11\r\n", "11\r\n"]


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(MapFileError):
        read_lines(tmp_path / "absent.ber")


def test_map_dimensions_uses_longest_line():
    lines = ["111\n", "10\n", "1111"]
    assert map_dimensions(lines) == (3, 4)


def test_map_dimensions_empty():
    assert map_dimensions([]) == (0, 0)


def test_map_dimensions_ignores_only_the_newline():
    lines = ["1111\n", "1111\n"]
    rows, cols = map_dimensions(lines)
    assert rows == len(lines)
    assert cols == len("1111")


def test_read_map_round_trip(tmp_path):
    rows = ["11111", "1PCE1", "11111"]
    path = tmp_path / "m.ber"
    path.write_text("\n".join(rows) + "\n")
    grid, cols = read_map(path)
    assert grid == rows
    assert cols == len(rows[0])


def test_read_map_without_trailing_newline(tmp_path):
    rows = ["111", "1P1", "111"]
    path = tmp_path / "m.ber"
    path.write_text("\n".join(rows))
    grid, cols = read_map(path)
    assert grid == rows
    assert cols == 3


def test_read_map_short_row_keeps_newline(tmp_path):
    path = tmp_path / "m.ber"
    path.write_text("111\n11\n111\n")
    grid, cols = read_map(path)
    assert cols == 3
    assert grid == ["111", "11\n", "111"]


def test_read_map_trailing_blank_line_is_a_row(tmp_path):
    path = tmp_path / "m.ber"
    path.write_text("111\n111\n\n")
    grid, _ = read_map(path)
    assert grid == ["111", "111", "\n"]


def test_read_map_empty_file(tmp_path):
    path = tmp_path / "m.ber"
    path.write_text("")
    assert read_map(path) == ([], 0)


def test_read_map_missing_file(tmp_path):
    with pytest.raises(MapFileError):
        read_map(tmp_path / "absent.ber")


def test_read_map_rows_never_exceed_width(tmp_path):
    path = tmp_path / "m.ber"
    path.write_text("1\n111111\n11\n1111\n")
    grid, cols = read_map(path)
    assert all(len(row) <= cols for row in grid)
    assert len(grid) == 4