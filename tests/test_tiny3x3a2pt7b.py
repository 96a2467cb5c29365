from st7567gk.fonts.tiny3x3a2pt7b import TINY3X3A2PT7B
from st7567gk.gfxfont import Glyph


def test_font_range_and_advance():
    assert TINY3X3A2PT7B.glyph_index(chr(0x20)) == 0
    assert TINY3X3A2PT7B.glyph_index(chr(0x7E)) == 0x7E - 0x20
    assert (TINY3X3A2PT7B.first, TINY3X3A2PT7B.last) == (0x20, 0x7E)
    assert TINY3X3A2PT7B.y_advance == 4


def test_glyph_count_matches_range():
    last_index = TINY3X3A2PT7B.glyph_index("~")
    assert len(TINY3X3A2PT7B.glyphs) == last_index + 1


def test_tilde_glyph():
    index = TINY3X3A2PT7B.glyph_index("~")
    assert TINY3X3A2PT7B.glyphs[index] == Glyph(141, 3, 2, 4, 0, -2)


def test_space_has_no_bitmap():
    assert TINY3X3A2PT7B.glyph_bitmap(TINY3X3A2PT7B.glyph_index(" ")) == b""


def test_offsets_non_decreasing():
    offsets = [
        TINY3X3A2PT7B.glyphs[TINY3X3A2PT7B.glyph_index(chr(code))].bitmap_offset
        for code in range(0x20, 0x7F)
    ]
    assert offsets == sorted(offsets)


def test_each_bitmap_holds_its_bits():
    for index, glyph in enumerate(TINY3X3A2PT7B.glyphs):
        assert len(TINY3X3A2PT7B.glyph_bitmap(index)) * 8 >= glyph.bit_count


def test_bitmaps_cover_whole_table():
    total = sum(
        len(TINY3X3A2PT7B.glyph_bitmap(i)) for i in range(len(TINY3X3A2PT7B.glyphs))
    )
    assert total == len(TINY3X3A2PT7B.bitmap)


def test_exclamation_bitmap():
    assert TINY3X3A2PT7B.glyph_bitmap(TINY3X3A2PT7B.glyph_index("!")) == bytes([0xC0])