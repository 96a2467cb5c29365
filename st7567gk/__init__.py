"""Bitmap font data for 128x64 monochrome LCDs: a fixed 7x8 font and GFX-style fonts."""

__version__ = "0.4.5"
__all__ = ["font7x8", "gfxfont", "fonts"]