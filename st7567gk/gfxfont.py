"""Glyph and font structures for proportional bitmap fonts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

CharLike = Union[str, int]


def _char_code(char: CharLike) -> int:
    """Return the character code of a one-character string or an integer."""
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return ord(char)
    if isinstance(char, int):
        return char
    raise TypeError(f"expected str or int, got {type(char).__name__}")


@dataclass(frozen=True)
class Glyph:
    """Placement and size of one glyph inside a font bitmap."""

    bitmap_offset: int
    width: int
    height: int
    x_advance: int
    x_offset: int
    y_offset: int

    @property
    def bit_count(self) -> int:
        """Number of bits the glyph occupies in the bitmap."""
        return self.width * self.height


@dataclass(frozen=True)
class GFXFont:
    """A font: concatenated glyph bitmaps plus one glyph per character."""

    bitmap: bytes
    glyphs: tuple[Glyph, ...]
    first: int
    last: int
    y_advance: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "bitmap", bytes(self.bitmap))
        glyphs: Iterable[Glyph] = self.glyphs
        object.__setattr__(self, "glyphs", tuple(glyphs))
        expected = self.last - self.first + 1
        if expected < 0 or len(self.glyphs) != expected:
            raise ValueError(
                f"font covers {expected} characters but has {len(self.glyphs)} glyphs"
            )

    def __len__(self) -> int:
        return len(self.glyphs)

    def __contains__(self, char: object) -> bool:
        try:
            code = _char_code(char)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return False
        return self.first <= code <= self.last

    def glyph_index(self, char: CharLike) -> int:
        """Return the index into ``glyphs`` for a character."""
        code = _char_code(char)
        if not self.first <= code <= self.last:
            raise ValueError(
                f"character code {code:#x} outside font range "
                f"{self.first:#x}..{self.last:#x}"
            )
        return code - self.first

    def glyph_bitmap(self, index: int) -> bytes:
        """Return the bitmap bytes of the glyph at ``index``.

        A glyph's bytes run up to the next glyph's offset; the last glyph
        takes as many bytes as its bits need.
        """
        if not 0 <= index < len(self.glyphs):
            raise IndexError(f"glyph index {index} out of range")
        glyph = self.glyphs[index]
        start = glyph.bitmap_offset
        if index + 1 < len(self.glyphs):
            end = self.glyphs[index + 1].bitmap_offset
        else:
            end = start + (glyph.bit_count + 7) // 8
        return self.bitmap[start:end]