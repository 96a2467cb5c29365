"""Fixed 7x8 pixel font: seven column bytes per glyph, bit 0 at the top."""

from __future__ import annotations

from typing import Union

GLYPH_WIDTH = 7
GLYPH_HEIGHT = 8

FONT_7X8: tuple[bytes, ...] = tuple(
    bytes.fromhex(row)
    for row in (
        "003E5149453E00",  # '0'
        "0000427F400000",  # '1'
        "00625149494600",  # '2'
        "002141494D3300",  # '3'
        "001814127F1000",  # '4'
        "00274545453900",  # '5'
        "003C4A49493100",  # '6'
        "00017109050300",  # '7'
        "00364949493600",  # '8'
        "00464949291E00",  # '9'
        "00245454384000",  # 'a'
        "007F2844443800",  # 'b'
        "00384444440800",  # 'c'
        "00384444287F00",  # 'd'
        "00385454540800",  # 'e'
        "00087E09090200",  # 'f'
        "0098A4A4A47800",  # 'g'
        "007F0804047800",  # 'h'
        "00000079000000",  # 'i'
        "00008088790000",  # 'j'
        "007F1028444000",  # 'k'
        "0000417F400000",  # 'l'
        "00780478047800",  # 'm'
        "00047804047800",  # 'n'
        "00384444443800",  # 'o'
        "00FC2424241800",  # 'p'
        "0018242424FC00",  # 'q'
        "00047804040800",  # 'r'
        "00485454542400",  # 's'
        "00043F44442400",  # 't'
        "003C40403C4000",  # 'u'
        "001C2040201C00",  # 'v'
        "003C403C403C00",  # 'w'
        "00442810284400",  # 'x'
        "009CA0A0907C00",  # 'y'
        "004464544C4400",  # 'z'
        "007C1211127C00",  # 'A'
        "007F4949493600",  # 'B'
        "003E4141412200",  # 'C'
        "007F4141413E00",  # 'D'
        "007F4949494100",  # 'E'
        "007F0909090100",  # 'F'
        "003E4151517200",  # 'G'
        "007F0808087F00",  # 'H'
        "0000417F410000",  # 'I'
        "002040413F0100",  # 'J'
        "007F0814224100",  # 'K'
        "007F4040404000",  # 'L'
        "007F020C027F00",  # 'M'
        "007F0408107F00",  # 'N'
        "003E4141413E00",  # 'O'
        "007F0909090600",  # 'P'
        "003E4151215E00",  # 'Q'
        "007F0919294600",  # 'R'
        "00264949493200",  # 'S'
        "0001017F010100",  # 'T'
        "003F4040403F00",  # 'U'
        "001F2040201F00",  # 'V'
        "007F2018207F00",  # 'W'
        "00631408146300",  # 'X'
        "00030478040300",  # 'Y'
        "00615149454300",  # 'Z'
        "0000005F000000",  # '!'
        "00000700070000",  # '"'
        "00147F147F1400",  # '#'
        "00242E7B2A1200",  # '$'
        "00231308646200",  # '%'
        "00364956205000",  # '&'
        "00000403010000",  # "'"
        "00001C22410000",  # '('
        "000041221C0000",  # ')'
        "0022147F142200",  # '*'
        "0008087F080800",  # '+'
        "00403010000000",  # ','
        "00080808080800",  # '-'
        "00201008040200",  # '/'
        "00003636000000",  # ':'
        "00403636000000",  # ';'
        "00081422410000",  # '<'
        "00141414141400",  # '='
        "00004122140800",  # '>'
        "00020159050200",  # '?'
        "003E415D555E00",  # '@'
        "00083641000000",  # '{'
        "00000077000000",  # '|'
        "00000041360800",  # '}'
        "00080408100800",  # '~'
        "00000000000000",  # ' '
        "00006060000000",  # '.'
        "0004027F020400",  # '^'
        "00081C2A080800",  # '_'
        "00000001020400",  # '`'
        "007F7F41410000",  # '['
        "00020408102000",  # '\\'
        "000041417F7F00",  # ']'
    )
)

_PUNCTUATION_START = 62
_PUNCTUATION = "!\"#$%&'()*+,-/:;<=>?@{|}~ .^_`[\\]"
_PUNCTUATION_INDEX = {
    char: _PUNCTUATION_START + offset for offset, char in enumerate(_PUNCTUATION)
}


def _char_code(char: Union[str, int]) -> int:
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return ord(char)
    if isinstance(char, int):
        return char
    raise TypeError(f"expected str or int, got {type(char).__name__}")


def glyph_index(char: Union[str, int]) -> int:
    """Return the table index of a character.

    Characters without a mapping whose code is below the table size index
    the table directly; any other unmapped character raises ValueError.
    """
    code = _char_code(char)
    if ord("0") <= code <= ord("9"):
        return code - ord("0")
    if ord("a") <= code <= ord("z"):
        return code - ord("a") + 10
    if ord("A") <= code <= ord("Z"):
        return code - ord("A") + 36
    if 0 <= code < 0x110000:
        mapped = _PUNCTUATION_INDEX.get(chr(code))
        if mapped is not None:
            return mapped
    if 0 <= code < len(FONT_7X8):
        return code
    raise ValueError(f"character code {code:#x} has no glyph")


def glyph_columns(char: Union[str, int]) -> bytes:
    """Return the seven column bytes of a character's glyph."""
    return FONT_7X8[glyph_index(char)]