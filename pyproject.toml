[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "st7567gk"
version = "0.4.5"
description = "Bitmap font data for 128x64 monochrome LCDs: a fixed 7x8 font and proportional GFX-style fonts"
requires-python = ">=3.10"
dependencies = []
keywords = ["st7567", "lcd", "monochrome", "bitmap font", "gfx", "fonts", "embedded"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Text Processing :: Fonts",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["st7567gk"]

[tool.pytest.ini_options]
addopts = "-ra"
