"""Proportional bitmap fonts built on GFXFont."""

__all__ = [
    "free_mono_9pt7b",
    "free_serif_9pt7b",
    "org_01",
    "picopixel",
    "tiny3x3a2pt7b",
]