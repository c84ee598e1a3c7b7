import pytest

from mensura.parsing.cursor import Cursor, char_index_for_byte, char_slice


@pytest.mark.parametrize(
    "text, start, end, expected",
    [
        ("12345", 0, 1, "1"),
        ("⅑45", 0, 2, "⅑4"),
        ("⅑45", 1, 1, ""),
        ("⅑45", 1, 2, "4"),
        ("456⅐⅙⅑45", 4, 5, "⅙"),
        ("1⁄945", 1, 4, "⁄94"),
        ("1234", 0, 0, ""),
        ("⅑45", 0, 3, "⅑45"),
        ("", 0, 1, None),
        ("⅑45", 2, 4, None),
        ("", 5, 5, ""),
    ],
)
def test_char_slice(text: str, start: int, end: int, expected) -> None:
    assert char_slice(text, start, end) == expected


@pytest.mark.parametrize(
    "byte_offset, expected",
    [(0, 0), (1, 1), (4, 4), (5, 4), (6, 4), (7, 5), (10, 6), (100, 8)],
)
def test_char_index_for_byte(byte_offset: int, expected: int) -> None:
    assert char_index_for_byte("456⅐⅙⅑45", byte_offset) == expected


def test_char_index_for_byte_edges() -> None:
    assert char_index_for_byte("", 10) == 0
    assert char_index_for_byte("1", 10) == 1
    assert char_index_for_byte("½2", 2) == 1
    assert char_index_for_byte("½2", 3) == 2


@pytest.mark.parametrize(
    "text, char_index, expected",
    [
        ("½2", 0, (0, 2)),
        ("12", 0, (0, 2)),
        ("½½", 0, (0, 2)),
        ("1½1", 0, (0, 3)),
        ("1½1", 1, (1, 4)),
        ("1½1", 2, (2, 5)),
    ],
)
def test_cursor_range(text: str, char_index: int, expected) -> None:
    assert Cursor(text, char_index).range() == expected


def test_cursor_positions_stay_document_relative() -> None:
    cursor = Cursor("½ cup sugar", 10)

    assert cursor.char_index_at(0) == 10
    assert cursor.char_index_at(1) == 11
    assert cursor.char_index_at(2) == 11
    assert cursor.char_index_at(3) == 12

    rest = cursor.advance(2)
    assert rest.text == "cup sugar"
    assert rest.char_index == 12
    assert cursor.until(rest) == Cursor("½ ", 10)

    assert cursor.advance_bytes(2) == Cursor(" cup sugar", 11)
    assert cursor.take(1) == Cursor("½", 10)


def test_cursor_slice() -> None:
    cursor = Cursor("⅑45", 3)

    assert cursor.slice(0, 2) == Cursor("⅑4", 3)
    assert cursor.slice(1, 1).text == ""
    assert cursor.slice(1, 9) is None


def test_cursor_advance_is_clamped() -> None:
    cursor = Cursor("ab", 0)
    assert cursor.advance(5) == Cursor("", 2)
    assert len(cursor) == 2
    assert Cursor.of("x") == Cursor("x", 0)
    assert Cursor.of(cursor) is cursor
