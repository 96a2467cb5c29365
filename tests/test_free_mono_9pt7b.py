import pytest

from st7567gk.fonts.free_mono_9pt7b import FREE_MONO_9PT7B as FONT
from st7567gk.gfxfont import Glyph


def _bits(data: bytes, count: int) -> list[int]:
    return [(data[i // 8] >> (7 - i % 8)) & 1 for i in range(count)]


def test_font_range_and_advance():
    assert FONT.glyph_index(" ") == 0
    assert FONT.glyph_index("~") == len(FONT) - 1
    assert FONT.first == 0x20
    assert FONT.last == 0x7E
    assert FONT.y_advance == 18
    assert len(FONT) == FONT.last - FONT.first + 1


def test_glyph_for_capital_a():
    assert FONT.glyphs[FONT.glyph_index("A")] == Glyph(237, 11, 10, 11, 0, -9)


def test_exclamation_bitmap():
    assert FONT.glyph_bitmap(FONT.glyph_index("!")) == bytes((0xAA, 0xA8, 0x0C))


def test_monospaced_advance():
    advances = {
        FONT.glyphs[FONT.glyph_index(chr(code))].x_advance for code in range(0x20, 0x7F)
    }
    assert advances == {11}


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


def test_space_has_no_pixels():
    index = FONT.glyph_index(" ")
    assert FONT.glyph_bitmap(index) == b""


@pytest.mark.parametrize("char", ["\n", "\x7f", "\x1f"])
def test_characters_outside_range(char):
    assert char not in FONT
    with pytest.raises(ValueError):
        FONT.glyph_index(char)


def test_printable_characters_are_covered():
    for code in range(FONT.first, FONT.last + 1):
        assert chr(code) in FONT
        assert FONT.glyphs[FONT.glyph_index(code)] is FONT.glyphs[FONT.glyph_index(chr(code))]