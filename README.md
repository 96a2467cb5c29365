# st7567gk

Bitmap font data for small monochrome LCDs such as those driven by an
ST7567S controller (128 x 64 pixels). The package holds:

- `st7567gk.font7x8`: a fixed 7x8 pixel font stored as column bytes;
- `st7567gk.gfxfont`: the `Glyph` and `GFXFont` structures for proportional
  bitmap fonts;
- `st7567gk.fonts`: ready-made proportional fonts built on those structures.

## Installing

```
pip install .
```

The package has no runtime dependencies. The tests need pytest:

```
pip install .[test]
pytest
```

## The fixed 7x8 font

Each glyph is seven bytes, one per column, with bit 0 at the top of the
column. `GLYPH_WIDTH` is 7 and `GLYPH_HEIGHT` is 8; the whole table is
`FONT_7X8`, a tuple of 95 `bytes` objects.

```python
from st7567gk import font7x8

font7x8.glyph_index("0")      # 0  (digits come first)
font7x8.glyph_index("a")      # 10 (then lower case)
font7x8.glyph_index("A")      # 36 (then upper case, then punctuation)
font7x8.glyph_columns("1")    # b'\x00\x00B\x7f@\x00\x00'
```

Both functions accept a one-character string or an integer character code.
A character without a mapping whose code is below 95 indexes the table
directly; any other unmapped character raises `ValueError`. A string longer
than one character raises `ValueError`, and a value that is neither `str`
nor `int` raises `TypeError`.

## Proportional fonts

A `GFXFont` holds the concatenated glyph bitmaps (`bitmap`), one `Glyph` per
character (`glyphs`), the first and last character codes it covers (`first`,
`last`) and the line height (`y_advance`). Creating a font whose glyph count
does not match `last - first + 1` raises `ValueError`.

A `Glyph` gives `bitmap_offset`, `width`, `height`, `x_advance`, `x_offset`
and `y_offset`; its `bit_count` is `width * height`. Glyph bitmaps are stored
row by row, most significant bit first, without padding between rows.

```python
from st7567gk.fonts.free_mono_9pt7b import FREE_MONO_9PT7B as font

"A" in font                       # True
len(font)                         # 95 (0x20 to 0x7E)
index = font.glyph_index("A")     # 33
glyph = font.glyphs[index]
data = font.glyph_bitmap(index)

rows = []
for row in range(glyph.height):
    line = ""
    for col in range(glyph.width):
        bit = row * glyph.width + col
        line += "#" if data[bit // 8] & (0x80 >> (bit % 8)) else "."
    rows.append(line)
print("\n".join(rows))
```

`glyph_index` raises `ValueError` for a character outside the font's range;
`glyph_bitmap` raises `IndexError` for an index outside the glyph table. A
glyph's bytes run up to the next glyph's offset; the last glyph takes as many
bytes as its bits need.

The fonts available, each covering 0x20 to 0x7E:

| Module                                 | Font object         | Line height |
|----------------------------------------|---------------------|-------------|
| `st7567gk.fonts.free_mono_9pt7b`       | `FREE_MONO_9PT7B`   | 18          |
| `st7567gk.fonts.free_serif_9pt7b`      | `FREE_SERIF_9PT7B`  | 22          |
| `st7567gk.fonts.org_01`                | `ORG_01`            | 7           |
| `st7567gk.fonts.picopixel`             | `PICOPIXEL`         | 7           |
| `st7567gk.fonts.tiny3x3a2pt7b`         | `TINY3X3A2PT7B`     | 4           |

## What this package does not do

It does not talk to a display. There is no controller driver, no I2C
communication, no pixel, line or circle drawing and no rendering of text onto
a screen; the package only supplies font data and the lookups above. Turning
glyphs into pixels on a device is left to the caller.