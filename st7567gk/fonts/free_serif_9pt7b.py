"""FreeSerif 9pt font: a proportional serif font."""

from st7567gk.gfxfont import GFXFont, Glyph

_BITMAP = bytes.fromhex(
    "ffea03def720110904824ff91089ff2412090c80107cd6d2"
    "d0f0381e179393d67c1038433c39218a0c506539cb20b905"
    "884c446421c00e00c806403201a0077831878846863430c1"
    "c717cf00fe0888846318c6108208208208210c6318c42222"
    "00639adc72b608080402010ff84020100800d8f0f0088422"
    "108c4231001c3198d83c1e0f0783c1e0d8c461c0138c6318"
    "c6318c67803c4e860606040c08102041fe3cc606041c3e07"
    "03030306f804187164c9a346fe1830600f10203c0e070303"
    "030204f8071c306060dce6c3c3c343663c7f820202040404"
    "08080810103c8f1e3e4f0636c78f1b33c03c66c2c3c3c3c3"
    "633f06060c3860f00fd800032801870e1c0c0380700e0080"
    "ff8000000ff8801c01c01c01c0e0e0e0c000791a18306083"
    "0410204003000f838c602602c79cc9d89d99d926ec600304"
    "0f8002001001c016009804c04303f8206103181de1f0ff86"
    "1cc198330c7e0c318330660cc37fc01f261d81e01c018030"
    "0600c00c00c18fc0ff031c30630730330330330330330630"
    "cff0ff98260180611fc611806018160ffeffb0580c0613f9"
    "84c06030181e001f230e602600c00c0fc06c06c066063060"
    "f8f1ec198330660cff98330660cc198378f0f6666666666f"
    "3c6186186186186dbcf3e6086106206407806c0660630618"
    "60cf3ff01806018060180601806018160bfef00e7038e071"
    "e162c2c5c989931326238c4718843388f0e0ee09c12c25c4"
    "9c91921a41c8190370201f063183202c0780f01e03c06809"
    "8318c1f0fe31986c361b19f8c06030181e001f063183202c"
    "0780f01e03c068198318c0e00e00e007fe0c618630c618c6"
    "1f8370670c718778701d31984c0780e01c0701a0d8cbc0ff"
    "f8ce188300600c0180300600c0180780f0ec0981302604c0"
    "981302604c08c20f80f877023023041841840c80c8070070"
    "020020fbe7b0c08c208618418c40cb2065901a700e38031c"
    "0104008200fcf98306101900d003001c013011c1860819e3"
    "f0f8f6063041881d00d00600600600600600f03fcc110601"
    "80700c0300e0380605c17fe0fb6db6db6db8821082108610"
    "8610edb6db6db6f8181c34266242c1ff808420799830e6d9"
    "b33f2070180c060371ccc361b0d86c63e03ccf060c18189e"
    "010380c06031d99d86c361b0cc63f03c46fec0c0e1623c1e"
    "4183061e183060c1830f003c19f6318c1e080401fc40b02e"
    "11f82070180c060371ccc6633198cc6f786002e66666f018"
    "00338c6318c6318b802070180c06033d88d87836198c6f78"
    "2e6666666666f0ee71ce663198c663198c6631bdefee3998"
    "cc6633198def3e31b0783c1e0d8c7cee39986c361b0d8cfc"
    "6030181e003d31b0d86c361b8cfe030180c0f06dc6186186"
    "3c7638583e38fe2798c6318c38e73198cc6633198c7ff361"
    "2232141c0808ef366162223235419c188108f7120e0301c1"
    "2109cff361623234141c08080810e0fd1860830c70fe198c"
    "6318c4618c6318c3fff0c318c631843318c631987024c1c0"
)

# Width, height, x advance, x offset and y offset of each glyph from 0x20
# upwards, eight glyphs to a line.
_METRICS = """
    0 0 5 0 1      2 12 6 2 -11    5 4 7 1 -11     9 12 9 0 -11
    8 14 9 1 -12   13 12 15 1 -11  13 13 14 1 -12  2 4 4 1 -11
    5 15 6 1 -11   5 15 6 0 -11    6 8 9 3 -11     9 9 10 0 -8
    2 3 4 2 0      4 1 6 1 -3      2 2 5 1 -1      5 12 5 0 -11
    9 13 9 0 -12   5 13 9 2 -12    8 12 9 1 -11    8 12 9 0 -11
    7 12 9 1 -11   8 12 9 0 -11    8 13 9 1 -12    8 12 9 0 -11
    7 13 9 1 -12   8 14 9 1 -12    2 8 5 1 -7      3 10 5 1 -7
    9 9 10 1 -8    9 5 10 1 -6     10 9 10 0 -8    7 13 8 1 -12
    12 13 16 2 -12 13 12 13 0 -11  11 12 11 0 -11  11 12 12 1 -11
    12 12 13 0 -11 10 12 11 1 -11  9 12 10 1 -11   12 12 13 1 -11
    11 12 13 1 -11 4 12 6 1 -11    6 12 7 0 -11    12 12 13 1 -11
    10 12 11 1 -11 15 12 16 0 -11  11 12 13 1 -11  11 13 13 1 -12
    9 12 10 1 -11  11 16 13 1 -12  11 12 12 1 -11  9 12 10 0 -11
    11 12 11 0 -11 11 12 13 1 -11  12 12 13 0 -11  17 12 17 0 -11
    13 12 13 0 -11 12 12 13 0 -11  11 12 11 0 -11  3 15 6 2 -11
    5 12 5 0 -11   3 15 6 1 -11    8 7 8 0 -11     9 1 9 0 2
    4 3 5 0 -11    7 8 8 1 -7      9 13 9 0 -12    7 8 8 0 -7
    9 13 9 0 -12   8 8 8 0 -7      7 13 7 1 -12    10 12 8 0 -7
    9 13 9 0 -12   4 11 5 1 -10    5 15 6 0 -10    9 13 9 1 -12
    4 13 5 1 -12   14 8 14 0 -7    9 8 9 0 -7      9 8 9 0 -7
    9 12 9 0 -7    9 12 9 0 -7     6 8 6 0 -7      6 8 7 1 -7
    5 9 5 0 -8     9 8 9 0 -7      8 8 8 0 -7      12 8 12 0 -7
    9 8 9 0 -7     8 12 8 0 -7     7 8 7 1 -7      5 16 9 1 -12
    1 12 4 1 -11   5 16 9 3 -11    9 3 9 0 -5
"""


def _build_glyphs(metrics: str) -> tuple[Glyph, ...]:
    values = [int(value) for value in metrics.split()]
    glyphs = []
    offset = 0
    for width, height, x_advance, x_offset, y_offset in zip(*[iter(values)] * 5):
        glyphs.append(Glyph(offset, width, height, x_advance, x_offset, y_offset))
        offset += (width * height + 7) // 8
    return tuple(glyphs)


FREE_SERIF_9PT7B = GFXFont(
    bitmap=_BITMAP,
    glyphs=_build_glyphs(_METRICS),
    first=0x20,
    last=0x7E,
    y_advance=22,
)