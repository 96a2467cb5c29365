"""Tiny3x3a 2pt font: glyphs within a 3x3 pixel cell."""

from st7567gk.gfxfont import GFXFont, Glyph

_BITMAP = bytes((
    0xC0, 0xB4, 0xBF, 0x80, 0x6B, 0x00, 0xDD, 0x80, 0x59, 0x80, 0x80, 0x64,
    0x98, 0xF0, 0x5D, 0x00, 0xC0, 0xE0, 0x80, 0x2A, 0x00, 0x55, 0x00, 0x94,
    0xC9, 0x80, 0xEF, 0x80, 0xBC, 0x80, 0x6B, 0x00, 0x9F, 0x80, 0xE4, 0x80,
    0x7F, 0x00, 0xFC, 0x80, 0xA0, 0x58, 0x64, 0xE3, 0x80, 0x98, 0xD8, 0xD8,
    0x80, 0x5E, 0x80, 0xDF, 0x80, 0x71, 0x80, 0xD7, 0x00, 0xFB, 0x80, 0xFA,
    0x00, 0xD7, 0x80, 0xBE, 0x80, 0xE0, 0x27, 0x00, 0xBA, 0x80, 0x93, 0x80,
    0xFE, 0x80, 0xF6, 0x80, 0xF7, 0x80, 0xFE, 0x00, 0xF7, 0x00, 0xDE, 0x80,
    0x6B, 0x00, 0xE9, 0x00, 0xB7, 0x80, 0xB5, 0x00, 0xBF, 0x80, 0xAA, 0x80,
    0xA9, 0x00, 0xEB, 0x80, 0xEC, 0x88, 0x80, 0xDC, 0x54, 0xE0, 0x90, 0x70,
    0xBC, 0xF0, 0x7C, 0xB0, 0x68, 0xFC, 0xBC, 0xC0, 0x58, 0x9A, 0x80, 0xA4,
    0xDC, 0xD4, 0xF0, 0xF8, 0xF4, 0xE0, 0x60, 0x59, 0x80, 0xBC, 0xA8, 0xEC,
    0xF0, 0xAC, 0x80, 0x90, 0x79, 0x80, 0xF0, 0xCF, 0x00, 0x78,
))

_GLYPHS = (
    (0, 0, 0, 4, 0, 1),     # ' '
    (0, 1, 2, 3, 1, -2),    # '!'
    (1, 3, 2, 4, 0, -2),    # '"'
    (2, 3, 3, 4, 0, -2),    # '#'
    (4, 3, 3, 4, 0, -2),    # '$'
    (6, 3, 3, 4, 0, -2),    # '%'
    (8, 3, 3, 4, 0, -2),    # '&'
    (10, 1, 1, 3, 1, -2),   # "'"
    (11, 2, 3, 3, 0, -2),   # '('
    (12, 2, 3, 4, 1, -2),   # ')'
    (13, 2, 2, 4, 1, -2),   # '*'
    (14, 3, 3, 4, 0, -2),   # '+'
    (16, 1, 2, 2, 0, 0),    # ','
    (17, 3, 1, 4, 0, -1),   # '-'
    (18, 1, 1, 2, 0, 0),    # '.'
    (19, 3, 3, 4, 0, -2),   # '/'
    (21, 3, 3, 4, 0, -2),   # '0'
    (23, 2, 3, 3, 0, -2),   # '1'
    (24, 3, 3, 4, 0, -2),   # '2'
    (26, 3, 3, 4, 0, -2),   # '3'
    (28, 3, 3, 4, 0, -2),   # '4'
    (30, 3, 3, 4, 0, -2),   # '5'
    (32, 3, 3, 4, 0, -2),   # '6'
    (34, 3, 3, 4, 0, -2),   # '7'
    (36, 3, 3, 4, 0, -2),   # '8'
    (38, 3, 3, 4, 0, -2),   # '9'
    (40, 1, 3, 3, 1, -2),   # ':'
    (41, 2, 3, 3, 0, -1),   # ';'
    (42, 2, 3, 3, 0, -2),   # '<'
    (43, 3, 3, 4, 0, -2),   # '='
    (45, 2, 3, 4, 1, -2),   # '>'
    (46, 2, 3, 4, 1, -2),   # '?'
    (47, 3, 3, 4, 0, -2),   # '@'
    (49, 3, 3, 4, 0, -2),   # 'A'
    (51, 3, 3, 4, 0, -2),   # 'B'
    (53, 3, 3, 4, 0, -2),   # 'C'
    (55, 3, 3, 4, 0, -2),   # 'D'
    (57, 3, 3, 4, 0, -2),   # 'E'
    (59, 3, 3, 4, 0, -2),   # 'F'
    (61, 3, 3, 4, 0, -2),   # 'G'
    (63, 3, 3, 4, 0, -2),   # 'H'
    (65, 1, 3, 3, 1, -2),   # 'I'
    (66, 3, 3, 4, 0, -2),   # 'J'
    (68, 3, 3, 4, 0, -2),   # 'K'
    (70, 3, 3, 4, 0, -2),   # 'L'
    (72, 3, 3, 4, 0, -2),   # 'M'
    (74, 3, 3, 4, 0, -2),   # 'N'
    (76, 3, 3, 4, 0, -2),   # 'O'
    (78, 3, 3, 4, 0, -2),   # 'P'
    (80, 3, 3, 4, 0, -2),   # 'Q'
    (82, 3, 3, 4, 0, -2),   # 'R'
    (84, 3, 3, 4, 0, -2),   # 'S'
    (86, 3, 3, 4, 0, -2),   # 'T'
    (88, 3, 3, 4, 0, -2),   # 'U'
    (90, 3, 3, 4, 0, -2),   # 'V'
    (92, 3, 3, 4, 0, -2),   # 'W'
    (94, 3, 3, 4, 0, -2),   # 'X'
    (96, 3, 3, 4, 0, -2),   # 'Y'
    (98, 3, 3, 4, 0, -2),   # 'Z'
    (100, 2, 3, 3, 0, -2),  # '['
    (101, 3, 3, 4, 0, -2),  # '\\'
    (103, 2, 3, 4, 1, -2),  # ']'
    (104, 3, 2, 4, 0, -2),  # '^'
    (105, 3, 1, 4, 0, 0),   # '_'
    (106, 2, 2, 3, 0, -2),  # '`'
    (107, 2, 2, 3, 0, -1),  # 'a'
    (108, 2, 3, 3, 0, -2),  # 'b'
    (109, 2, 2, 3, 0, -1),  # 'c'
    (110, 2, 3, 3, 0, -2),  # 'd'
    (111, 2, 2, 3, 0, -1),  # 'e'
    (112, 2, 3, 3, 0, -2),  # 'f'
    (113, 2, 3, 3, 0, -1),  # 'g'
    (114, 2, 3, 3, 0, -2),  # 'h'
    (115, 1, 2, 2, 0, -1),  # 'i'
    (116, 2, 3, 3, 0, -1),  # 'j'
    (117, 3, 3, 4, 0, -2),  # 'k'
    (119, 2, 3, 3, 0, -2),  # 'l'
    (120, 3, 2, 4, 0, -1),  # 'm'
    (121, 3, 2, 4, 0, -1),  # 'n'
    (122, 2, 2, 3, 0, -1),  # 'o'
    (123, 2, 3, 3, 0, -1),  # 'p'
    (124, 2, 3, 3, 0, -1),  # 'q'
    (125, 2, 2, 3, 0, -1),  # 'r'
    (126, 2, 2, 3, 0, -1),  # 's'
    (127, 3, 3, 4, 0, -2),  # 't'
    (129, 3, 2, 4, 0, -1),  # 'u'
    (130, 3, 2, 4, 0, -1),  # 'v'
    (131, 3, 2, 4, 0, -1),  # 'w'
    (132, 2, 2, 3, 0, -1),  # 'x'
    (133, 3, 3, 4, 0, -1),  # 'y'
    (135, 2, 2, 3, 0, -1),  # 'z'
    (136, 3, 3, 4, 0, -2),  # '{'
    (138, 1, 4, 3, 1, -2),  # '|'
    (139, 3, 3, 4, 0, -2),  # '}'
    (141, 3, 2, 4, 0, -2),  # '~'
)

TINY3X3A2PT7B = GFXFont(
    bitmap=_BITMAP,
    glyphs=tuple(Glyph(*fields) for fields in _GLYPHS),
    first=0x20,
    last=0x7E,
    y_advance=4,
)