import io

import pytest

from solong.reader import DEFAULT_BUFFER_SIZE, read_lines, read_map_lines

MAP_TEXT = "1111111\n1P0C0E1\n1111111"


def test_lines_keep_newlines_and_last_line_is_bare():
    lines = list(read_lines(io.StringIO(MAP_TEXT)))
    assert lines == ["1111111\n", "1P0C0E1\n", "1111111"]


@pytest.mark.parametrize("size", [1, 2, 3, 7, 8, 100, DEFAULT_BUFFER_SIZE])
def test_any_buffer_size_gives_same_lines(size):
    lines = list(read_lines(io.StringIO(MAP_TEXT), size))
    assert lines == MAP_TEXT.splitlines(keepends=True)
    assert "".join(lines) == MAP_TEXT


def test_trailing_newline_produces_no_empty_line():
    lines = list(read_lines(io.StringIO("ab\ncd\n"), 3))
    assert lines == ["ab\n", "cd\n"]


def test_empty_lines_are_kept():
    lines = list(read_lines(io.StringIO("a\n\nb"), 1))
    assert lines == ["a\n", "\n", "b"]


def test_empty_stream_yields_nothing():
    assert list(read_lines(io.StringIO(""))) == []


def test_binary_stream():
    lines = list(read_lines(io.BytesIO(b"10\n01"), 2))
    assert lines == [b"10\n", b"01"]


@pytest.mark.parametrize("size", [0, -1])
def test_non_positive_buffer_size_is_rejected(size):
    with pytest.raises(ValueError):
        read_lines(io.StringIO(MAP_TEXT), size)


def test_read_map_lines_from_file(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text(MAP_TEXT, encoding="utf-8")
    assert read_map_lines(path) == MAP_TEXT.splitlines(keepends=True)


def test_read_map_lines_empty_file(tmp_path):
    path = tmp_path / "empty.ber"
    path.write_text("", encoding="utf-8")
    assert read_map_lines(path) == []


def test_read_map_lines_keeps_carriage_returns(tmp_path):
    path = tmp_path / "crlf.ber"
    path.write_bytes(b"11\r\n11")
    assert read_map_lines(path) == ["11\r\n", "11"]


def test_read_map_lines_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_map_lines(tmp_path / "missing.ber")