import pytest

from gridsnatch.components import COL, ROW
from gridsnatch.tilemap import MapError, load_map, parse_map


def _grid():
    return [[(i + j) % 10 for j in range(COL)] for i in range(ROW)]


def _text(grid, newline="\n"):
    return newline.join("".join(str(cell) for cell in row) for row in grid) + newline


def test_round_trip():
    grid = _grid()
    assert parse_map(_text(grid)) == grid


def test_shape():
    parsed = parse_map(_text(_grid()))
    assert len(parsed) == ROW
    assert all(len(row) == COL for row in parsed)


def test_crlf_lines_are_accepted():
    grid = _grid()
    assert parse_map(_text(grid, "\r\n")) == grid


def test_extra_rows_and_columns_ignored():
    grid = _grid()
    text = "\n".join("".join(str(c) for c in row) + "99" for row in grid) + "\n5555\n"
    assert parse_map(text) == grid


def test_first_row_values():
    text = "012345678901\n" + "000000000000\n" * (ROW - 1)
    assert parse_map(text)[0] == [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 0, 1]


def test_too_few_rows():
    text = _text(_grid()[: ROW - 1])
    with pytest.raises(MapError):
        parse_map(text)


def test_short_row():
    lines = _text(_grid()).splitlines()
    lines[3] = lines[3][: COL - 1]
    with pytest.raises(MapError):
        parse_map("\n".join(lines))


def test_non_digit_tile():
    lines = _text(_grid()).splitlines()
    lines[5] = "x" + lines[5][1:]
    with pytest.raises(MapError):
        parse_map("\n".join(lines))


def test_load_map_from_file(tmp_path):
    grid = _grid()
    path = tmp_path / "map.txt"
    path.write_text(_text(grid))
    assert load_map(path) == grid


def test_load_missing_file(tmp_path):
    with pytest.raises(MapError):
        load_map(tmp_path / "missing.txt")