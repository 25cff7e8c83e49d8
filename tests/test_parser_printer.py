from __future__ import annotations

import pytest

from grid import EMPTY, ParseGridError, load_grid, parse_grid, render_boxed, render_plain

SAMPLE = "...9..57.\n..7...1.8\n2......6.\n...36...5\n..1.824..\n46...18..\n.1......3\n5.9...7..\n..2..9...\n"


def test_parse_sample() -> None:
    grid = parse_grid(SAMPLE)
    assert grid.get(0, 0) == EMPTY
    assert grid.get(0, 3) == 9
    assert grid.get(8, 5) == 9
    assert grid.to_string().replace(".", "") == "957" "718" "26" "365" "1824" "4618" "13" "597" "29"


def test_parse_ignores_blank_lines_and_padding() -> None:
    text = "\n\n" + "\n".join(f"  {line}  " for line in SAMPLE.splitlines()) + "\n\n"
    assert parse_grid(text) == parse_grid(SAMPLE)


def test_wrong_row_count() -> None:
    with pytest.raises(ParseGridError) as excinfo:
        parse_grid("\n".join(SAMPLE.splitlines()[:8]))
    assert excinfo.value.code == "invalid-size"


def test_wrong_row_length() -> None:
    lines = SAMPLE.splitlines()
    lines[3] = lines[3] + "."
    with pytest.raises(ParseGridError) as excinfo:
        parse_grid("\n".join(lines))
    assert excinfo.value.code == "invalid-size"
    assert "row 3" in str(excinfo.value)


@pytest.mark.parametrize("bad", ["0", "x", "-"])
def test_invalid_character(bad: str) -> None:
    lines = SAMPLE.splitlines()
    lines[2] = bad + lines[2][1:]
    with pytest.raises(ParseGridError) as excinfo:
        parse_grid("\n".join(lines))
    assert excinfo.value.code == "invalid-char"
    assert isinstance(excinfo.value, ValueError)


def test_load_grid_reads_file(tmp_path) -> None:
    path = tmp_path / "puzzle.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    assert load_grid(path) == parse_grid(SAMPLE)


def test_render_plain_round_trips() -> None:
    grid = parse_grid(SAMPLE)
    assert render_plain(grid) == SAMPLE


def test_render_boxed_layout() -> None:
    lines = render_boxed(parse_grid(SAMPLE)).splitlines()
    assert len(lines) == 13
    assert lines[0] == "+-------+-------+-------+"
    assert lines[1] == "| . . . | 9 . . | 5 7 . |"
    assert lines[4] == lines[0]
    assert lines[-1] == lines[0]
