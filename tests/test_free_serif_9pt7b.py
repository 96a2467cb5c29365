import pytest

from st7567gk.fonts.free_serif_9pt7b import FREE_SERIF_9PT7B as FONT
from st7567gk.gfxfont import Glyph


def _bits(data: bytes, count: int) -> list[int]:
    return [(data[i // 8] >> (7 - i % 8)) & 1 for i in range(count)]


def test_font_range_and_advance():
    assert FONT.glyph_index(" ") == 0
    assert FONT.glyph_index("~") == len(FONT) - 1
    assert FONT.first == 0x20
    assert FONT.last == 0x7E
    assert FONT.y_advance == 22
    assert len(FONT) == FONT.last - FONT.first + 1


def test_glyph_for_capital_w():
    assert FONT.glyphs[FONT.glyph_index("W")] == Glyph(675, 17, 12, 17, 0, -11)


def test_exclamation_bitmap():
    assert FONT.glyph_bitmap(FONT.glyph_index("!")) == bytes((0xFF, 0xEA, 0x03))


def test_proportional_advances_differ():
    advance_i = FONT.glyphs[FONT.glyph_index("i")].x_advance
    advance_m = FONT.glyphs[FONT.glyph_index("m")].x_advance
    assert advance_i < advance_m


def test_offsets_are_byte_padded_and_contiguous():
    for index, glyph in enumerate(FONT.glyphs):
        assert len(FONT.glyph_bitmap(index)) == (glyph.bit_count + 7) // 8


def test_bitmap_ends_with_last_glyph():
    index = FONT.glyph_index("~")
    last = FONT.glyphs[index]
    tail = FONT.glyph_bitmap(index)
    assert FONT.bitmap.endswith(tail)
    assert len(FONT.bitmap) == last.bitmap_offset + len(tail)
    assert len(tail) == (last.bit_count + 7) // 8


def test_vertical_bar_is_solid():
    index = FONT.glyph_index("|")
    glyph = FONT.glyphs[index]
    assert sum(_bits(FONT.glyph_bitmap(index), glyph.bit_count)) == glyph.height


def test_glyphs_fit_their_advance_or_overhang_little():
    for code in range(0x20, 0x7F):
        glyph = FONT.glyphs[FONT.glyph_index(chr(code))]
        assert glyph.x_offset >= 0
        assert glyph.height >= 0 and glyph.width >= 0


@pytest.mark.parametrize("char", ["\t", "\x7f", 0x1F, 0x80])
def test_characters_outside_range(char):
    assert char not in FONT
    with pytest.raises(ValueError):
        FONT.glyph_index(char)


def test_glyph_bitmap_index_out_of_range():
    with pytest.raises(IndexError):
        FONT.glyph_bitmap(len(FONT))