import string

import pytest

from st7567gk.font7x8 import FONT_7X8, GLYPH_WIDTH, glyph_columns, glyph_index


@pytest.mark.parametrize(
    "char, index",
    [("0", 0), ("9", 9), ("a", 10), ("z", 35), ("A", 36), ("Z", 61),
     ("!", 62), ("~", 86), (" ", 87), (".", 88), ("]", 94)],
)
def test_indices_from_table_comments(char, index):
    assert glyph_index(char) == index


def test_printable_ascii_covers_whole_table():
    printable = [c for c in string.printable if c not in "\t\n\r\x0b\x0c"]
    indices = [glyph_index(c) for c in printable]
    assert sorted(indices) == list(range(len(FONT_7X8)))


def test_columns_of_zero():
    assert glyph_columns("0") == bytes([0x00, 0x3E, 0x51, 0x49, 0x45, 0x3E, 0x00])


def test_space_is_blank():
    assert glyph_columns(" ") == bytes(GLYPH_WIDTH)


def test_every_glyph_has_seven_columns():
    printable = [c for c in string.printable if c not in "\t\n\r\x0b\x0c"]
    for char in printable:
        columns = glyph_columns(char)
        assert len(columns) == GLYPH_WIDTH
        assert columns == bytes(FONT_7X8[glyph_index(char)])


def test_int_and_str_agree():
    assert glyph_columns(ord("Q")) == glyph_columns("Q")


def test_unmapped_low_code_indexes_directly():
    assert glyph_index("\x05") == 5


def test_unmapped_high_code_raises():
    with pytest.raises(ValueError):
        glyph_index("\u00e9")


def test_multichar_rejected():
    with pytest.raises(ValueError):
        glyph_columns("ab")