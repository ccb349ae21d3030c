"""
Deterministic pseudo-localization rules.

This file exists to make the fixed tables and thresholds explicit and enforceable.
"""

from types import MappingProxyType

# Latin letter -> accented look-alike. Some letters map to themselves; keep them listed.
CHAR_MAP = MappingProxyType({
    "A": "Å", "B": "ß", "C": "C", "D": "Đ", "E": "Ē", "F": "F", "G": "Ğ",
    "H": "Ħ", "I": "Ĩ", "J": "Ĵ", "K": "Ķ", "L": "Ŀ", "M": "M", "N": "Ń",
    "O": "Ø", "P": "P", "Q": "Q", "R": "Ŗ", "S": "Ŝ", "T": "Ŧ", "U": "Ů",
    "V": "V", "W": "Ŵ", "X": "X", "Y": "Ÿ", "Z": "Ż",
    "a": "ä", "b": "þ", "c": "č", "d": "đ", "e": "ę", "f": "ƒ", "g": "ģ",
    "h": "ĥ", "i": "į", "j": "ĵ", "k": "ĸ", "l": "ľ", "m": "m", "n": "ŉ",
    "o": "ő", "p": "p", "q": "q", "r": "ř", "s": "ş", "t": "ŧ", "u": "ū",
    "v": "v", "w": "ŵ", "x": "χ", "y": "y", "z": "ž",
})

# Strings containing these are links and are never transformed
LINK_MARKERS = ("http://", "https://")

# "Developing International Software": < 10 chars grow by 400%, otherwise by 30%
SHORT_TEXT_LIMIT = 10
SHORT_GROWTH_FACTOR = 5
LONG_GROWTH_NUMERATOR = 13
LONG_GROWTH_DENOMINATOR = 10

PAD_TOKEN = " !!!"
MIN_PAD_COUNT = 2
OPEN_MARK = "["
CLOSE_MARK = "]"

# Placeholder regions copied verbatim
BRACE_OPEN, BRACE_CLOSE = "{", "}"
ANGLE_OPEN, ANGLE_CLOSE = "<", ">"

# Keys with these prefixes are resx metadata, not display text
RESERVED_KEY_PREFIXES = (">>", "$")
# Windows Forms title; always wanted even though it starts with "$"
FORM_TITLE_KEY = "$this.Text"

SKIP_NON_STRING = "non_string_value"
SKIP_RESERVED_KEY = "reserved_key"
SKIP_BLANK = "blank_value"

RESX_EXTENSION = ".resx"
RESX_ENCODING = "utf-8"
RESX_MIMETYPE = "text/microsoft-resx"
RESX_HEADERS = (
    ("resmimetype", RESX_MIMETYPE),
    ("version", "2.0"),
    (
        "reader",
        "System.Resources.ResXResourceReader, System.Windows.Forms, Version=4.0.0.0, "
        "Culture=neutral, PublicKeyToken=b77a5c561934e089",
    ),
    (
        "writer",
        "System.Resources.ResXResourceWriter, System.Windows.Forms, Version=4.0.0.0, "
        "Culture=neutral, PublicKeyToken=b77a5c561934e089",
    ),
)
STRING_TYPE_NAME = "System.String"

# ISO 639-1 codes; a "name.<code>[-subtags].resx" file is already localized
KNOWN_LANGUAGES = frozenset("""
aa ab ae af ak am an ar as av ay az ba be bg bh bi bm bn bo br bs ca ce ch co cr
cs cu cv cy da de dv dz ee el en eo es et eu fa ff fi fj fo fr fy ga gd gl gn gu
gv ha he hi ho hr ht hu hy hz ia id ie ig ii ik io is it iu ja jv ka kg ki kj kk
kl km kn ko kr ks ku kv kw ky la lb lg li ln lo lt lu lv mg mh mi mk ml mn mr ms
mt my na nb nd ne ng nl nn no nr nv ny oc oj om or os pa pi pl ps pt qu rm rn ro
ru rw sa sc sd se sg si sk sl sm sn so sq sr ss st su sv sw ta te tg th ti tk tl
tn to tr ts tt tw ty ug uk ur uz ve vi vo wa wo xh yi yo za zh zu
""".split())

# Three-letter primary subtags used by .NET specific cultures (fil-PH, haw-US, quz-PE...)
KNOWN_LANGUAGES_3 = frozenset("""
agq arn asa ast bas bem bez bin brx byn ceb cgg chr ckb dav dje dsb dua dyo ebu
ewo fil fur gsw guz haw hsb ibb jgo jmc kab kam kde kea khq kkj kln kok ksb ksf
ksh lag lkt lrc luo luy mas mer mfe mgh mgo mni moh mua mzn naq nds nmg nnh nso
nus nyn prs quc qut quz rof rwk sah saq sat sbp seh ses shi sma smj smn sms ssy
syr teo twq tzm vai vun wae xog yav yue zgh
""".split())
