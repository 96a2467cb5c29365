import pytest

from st7567gk.gfxfont import GFXFont, Glyph


@pytest.fixture
def font():
    glyphs = (
        Glyph(0, 2, 2, 3, 0, -1),
        Glyph(1, 3, 3, 4, 0, -2),
        Glyph(3, 4, 4, 5, 0, -3),
    )
    return GFXFont(bytes([0xF0, 0xAA, 0x80, 0x12, 0x34]), glyphs, 0x41, 0x43, 5)


def test_glyph_index_of_first_char(font):
    assert font.glyph_index("A") == 0


def test_glyph_index_accepts_int(font):
    assert font.glyph_index(0x43) == font.glyph_index("C")


def test_glyph_index_out_of_range(font):
    with pytest.raises(ValueError):
        font.glyph_index("D")
    with pytest.raises(ValueError):
        font.glyph_index("@")


def test_glyph_index_rejects_multichar(font):
    with pytest.raises(ValueError):
        font.glyph_index("AB")


def test_glyph_index_rejects_other_types(font):
    with pytest.raises(TypeError):
        font.glyph_index(1.5)


def test_glyph_bitmap_slices_to_next_offset(font):
    assert font.glyph_bitmap(0) == bytes([0xF0])
    assert font.glyph_bitmap(1) == bytes([0xAA, 0x80])


def test_last_glyph_bitmap_uses_bit_count(font):
    assert font.glyph_bitmap(2) == bytes([0x12, 0x34])


def test_glyph_bitmap_index_error(font):
    with pytest.raises(IndexError):
        font.glyph_bitmap(3)
    with pytest.raises(IndexError):
        font.glyph_bitmap(-1)


def test_glyph_count_must_match_range():
    with pytest.raises(ValueError):
        GFXFont(b"", (Glyph(0, 0, 0, 1, 0, 0),), 0x20, 0x21, 1)


def test_contains_and_len(font):
    assert "B" in font
    assert "Z" not in font
    assert len(font) == 3


def test_glyphs_become_tuple():
    f = GFXFont(bytearray(b"\x01"), [Glyph(0, 1, 1, 1, 0, 0)], 0x20, 0x20, 1)
    assert isinstance(f.glyphs, tuple)
    assert f.bitmap == b"\x01"