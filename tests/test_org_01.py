import pytest

from st7567gk.fonts.org_01 import ORG_01
from st7567gk.gfxfont import Glyph


def test_font_range():
    assert ORG_01.glyph_index(" ") == 0
    assert ORG_01.glyph_index("~") == len(ORG_01) - 1
    assert ORG_01.first == 0x20
    assert ORG_01.last == 0x7E
    assert len(ORG_01) == ORG_01.last - ORG_01.first + 1


def test_glyph_of_capital_a_matches_table():
    glyph = ORG_01.glyphs[ORG_01.glyph_index("A")]
    assert glyph == Glyph(87, 5, 5, 6, 0, -4)


def test_exclamation_bitmap():
    assert ORG_01.glyph_bitmap(ORG_01.glyph_index("!")) == bytes([0xE8])


def test_space_has_no_pixels():
    index = ORG_01.glyph_index(" ")
    assert index == 0
    assert ORG_01.glyphs[index].bit_count == 0
    assert ORG_01.glyph_bitmap(index) == b""


def test_integer_and_string_lookup_agree():
    for char in "Hello, 123!":
        assert ORG_01.glyph_index(char) == ORG_01.glyph_index(ord(char))


def test_offsets_never_decrease():
    offsets = [
        ORG_01.glyphs[ORG_01.glyph_index(chr(code))].bitmap_offset
        for code in range(0x20, 0x7F)
    ]
    assert offsets == sorted(offsets)


@pytest.mark.parametrize("index", range(95))
def test_bitmap_holds_all_glyph_bits(index):
    glyph = ORG_01.glyphs[index]
    assert len(ORG_01.glyph_bitmap(index)) * 8 >= glyph.bit_count


def test_advance_covers_glyph():
    for code in range(0x20, 0x7F):
        glyph = ORG_01.glyphs[ORG_01.glyph_index(chr(code))]
        assert glyph.x_advance >= glyph.width + glyph.x_offset


def test_all_glyphs_fit_within_line_height():
    for code in range(0x20, 0x7F):
        glyph = ORG_01.glyphs[ORG_01.glyph_index(chr(code))]
        assert glyph.height <= ORG_01.y_advance


def test_characters_outside_range_rejected():
    assert "~" in ORG_01
    assert "\x7f" not in ORG_01
    with pytest.raises(ValueError):
        ORG_01.glyph_index("\x7f")


def test_glyph_bitmap_negative_index_rejected():
    with pytest.raises(IndexError):
        ORG_01.glyph_bitmap(-1)