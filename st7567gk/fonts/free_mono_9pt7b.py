"""FreeMono 9pt font: a monospaced font with an 11 pixel advance."""

from st7567gk.gfxfont import GFXFont, Glyph

_ADVANCE = 11

_BITMAP = bytes.fromhex(
    "aaa80ced2492482448912fe4897f28512240083e6240300e"
    "0181c3be08087112238023b80e224470388102061a6546c8"
    "ece9245aaaa940a9555a8010224be3051100102047f10204"
    "006b48ff00f0020810608104082041020800388a0c183060"
    "c18288e02728421084213e388a08102082086103f87c0602"
    "021c06010101423c18a2928a28bf0821c07c8103e4404081"
    "0388e01e41040b98b0c1c288e0fe04082040820408204038"
    "8a0c14471141838ce0388a1c1868ce810413c0f00f6c00d2"
    "d2000304186060180403ff80001ff040180300602060c080"
    "3d840830c2000000303c46828eb2a2a29f8080403c3c0140"
    "28090110420fc104409e3cfe21904867e209028141ff803e"
    "b0f0300804020080608f80fe219068140a050283437f00ff"
    "20900887c221008140ffc0ffa0500887c22100804078001e"
    "986c0a008020f80b026087c0e3a0904827f20904824171c0"
    "f90842108427c01f02020202028282c678e3a11109058321"
    "08844170c0e04040404040414141ffe0ec194528a4a49491"
    "1202405c1cc3b0944a249249148a4370801e319050180c06"
    "0282630f00fe434141427c404040f01c319050180c060282"
    "631f04079230fe2190482423e110844170c03acd0a030180"
    "c1c778ffc462210080402010081f00e3a090482412090482"
    "220e00f1e81082104210220480500c0080f1e809112544a8"
    "550ca18c318430e3a088828080c090444171c0e3a0888281"
    "40402010081f00fd0a208104102183fceaaaaac080810302"
    "0404080810102020d55555c01051222820ffe088807e0080"
    "47ec140a0cfbc020100bc61205028140b0b7803a8e0c0810"
    "109e03008047a4340a050281218f603c4381ff8080613e3d"
    "043e410410410f803da1a0502814090c7a01018780c02010"
    "0bc6320904824120b8e01001c08102040811fc103e108421"
    "08423f00c040404f445870484442c7702040810204081023"
    "f8b7646231188c4623915e31904824120905c73e31a03018"
    "0c058c7cde309028140a0584bc402038003da1a050281409"
    "0c7a010080e0cea1820408107c3a8d0b80f070de4040fc40"
    "40404040413ec34141414141433de3a090844220a05010e3"
    "c0924b2592a99844e331050101411105c7e3a090844240a0"
    "601010083e00fd0820820810bf2924a24926fff889248a49"
    "2c612430"
)

# Width, height, x offset and y offset of each glyph from 0x20 upwards,
# eight glyphs to a line.
_METRICS = """
    0 0 0 1    2 11 4 -10   6 5 2 -10    7 12 2 -10
    8 12 1 -10  7 11 2 -10  7 10 2 -9    3 5 4 -10
    2 13 5 -10  2 13 4 -10  7 7 2 -10    7 7 2 -8
    3 5 2 -1    9 1 1 -5    2 2 4 -1     7 13 2 -11
    7 11 2 -10  5 11 3 -10  7 11 2 -10   8 11 1 -10
    6 11 3 -10  7 11 2 -10  7 11 2 -10   7 11 2 -10
    7 11 2 -10  7 11 2 -10  2 8 4 -7     3 11 3 -7
    8 8 1 -8    9 4 1 -6    9 8 1 -8     7 10 2 -9
    8 12 2 -10  11 10 0 -9  9 10 1 -9    9 10 1 -9
    9 10 1 -9   9 10 1 -9   9 10 1 -9    10 10 1 -9
    9 10 1 -9   5 10 3 -9   8 10 2 -9    9 10 1 -9
    8 10 2 -9   11 10 0 -9  9 10 1 -9    9 10 1 -9
    8 10 1 -9   9 13 1 -9   9 10 1 -9    7 10 2 -9
    9 10 1 -9   9 10 1 -9   11 10 0 -9   11 10 0 -9
    9 10 1 -9   9 10 1 -9   7 10 2 -9    2 13 5 -10
    7 13 2 -11  2 13 4 -10  7 5 2 -10    11 1 0 2
    3 3 3 -11   9 8 1 -7    9 11 1 -10   7 8 2 -7
    9 11 1 -10  8 8 1 -7    6 11 3 -10   9 11 1 -7
    9 11 1 -10  7 10 2 -9   5 13 3 -9    8 11 2 -10
    7 11 2 -10  9 8 1 -7    9 8 1 -7     9 8 1 -7
    9 11 1 -7   9 11 1 -7   7 8 3 -7     7 8 2 -7
    8 10 2 -9   8 8 1 -7    9 8 1 -7     9 8 1 -7
    9 8 1 -7    9 11 1 -7   7 8 2 -7     3 13 4 -10
    1 13 5 -10  3 13 4 -10  7 3 2 -6
"""


def _build_glyphs(metrics: str) -> tuple[Glyph, ...]:
    values = [int(value) for value in metrics.split()]
    glyphs = []
    offset = 0
    for width, height, x_offset, y_offset in zip(*[iter(values)] * 4):
        glyphs.append(Glyph(offset, width, height, _ADVANCE, x_offset, y_offset))
        offset += (width * height + 7) // 8
    return tuple(glyphs)


FREE_MONO_9PT7B = GFXFont(
    bitmap=_BITMAP,
    glyphs=_build_glyphs(_METRICS),
    first=0x20,
    last=0x7E,
    y_advance=18,
)