import pytest

from yuletide.errors import InputFileNotFoundError
from yuletide.input import Input


def test_read_line_keeps_newline_and_ends_with_none():
    data = Input.from_text("abc\ndef")
    assert data.read_line() == "abc\n"
    assert data.read_line() == "def"
    assert data.read_line() is None


def test_read_all_returns_remainder():
    data = Input.from_text("first\nsecond\nthird\n")
    data.read_line()
    assert data.read_all() == "second\nthird\n"
    assert data.read_all() == ""


def test_read_line_bytes():
    data = Input.from_text("ab\n")
    assert data.read_line_bytes() == b"ab\n"
    assert data.read_line_bytes() is None


def test_lines_strip_line_endings():
    data = Input.from_text("one\r\ntwo\nthree")
    assert list(data.lines()) == ["one", "two", "three"]


def test_lines_after_partial_read():
    data = Input.from_text("header\n\nx\ny\n")
    assert data.read_line() == "header\n"
    assert data.read_line() == "\n"
    assert list(data.lines()) == ["x", "y"]


def test_from_file_reads_content(tmp_path):
    path = tmp_path / "puzzle.dat"
    path.write_text("1 2\n3 4\n")
    data = Input.from_file(str(path))
    assert list(data.lines()) == ["1 2", "3 4"]


def test_from_file_missing_raises(tmp_path):
    missing = tmp_path / "absent.dat"
    with pytest.raises(InputFileNotFoundError) as info:
        Input.from_file(str(missing))
    assert info.value.filename == str(missing)