from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# https://web.archive.org/web/20220206093806/http://aozora.gr.jp/accent_separation.html
ACCENT_MAP: Mapping[str, str] = MappingProxyType(
    {
        "A&": "Å",
        "A'": "Á",
        "A:": "Ä",
        "AE&": "Æ",
        "A^": "Â",
        "A_": "Ā",
        "A`": "À",
        "A~": "Ã",
        "C'": "Ć",
        "C,": "Ç",
        "C^": "Ĉ",
        "D/": "Đ",
        "E'": "É",
        "E:": "Ë",
        "E^": "Ê",
        "E_": "Ē",
        "E`": "È",
        "E~": "Ẽ",
        "G^": "Ĝ",
        "H^": "Ĥ",
        "I'": "Í",
        "I:": "Ï",
        "I^": "Î",
        "I_": "Ī",
        "I`": "Ì",
        "I~": "Ĩ",
        "J^": "Ĵ",
        "L'": "Ĺ",
        "L/": "Ł",
        "M'": "Ḿ",
        "N'": "Ń",
        "N`": "Ǹ",
        "N~": "Ñ",
        "O'": "Ó",
        "O/": "Ø",
        "O:": "Ö",
        "OE&": "Œ",
        "O^": "Ô",
        "O_": "Ō",
        "O`": "Ò",
        "O~": "Õ",
        "R'": "Ŕ",
        "S'": "Ś",
        "S,": "Ş",
        "S^": "Ŝ",
        "T,": "Ţ",
        "U&": "Ů",
        "U'": "Ú",
        "U:": "Ü",
        "U^": "Û",
        "U_": "Ū",
        "U`": "Ù",
        "U~": "Ũ",
        "Y'": "Ý",
        "Z'": "Ź",
        "a&": "å",
        "a'": "á",
        "a:": "ä",
        "a^": "â",
        "a_": "ā",
        "a`": "à",
        "ae&": "æ",
        "a~": "ã",
        "c'": "ć",
        "c,": "ç",
        "c^": "ĉ",
        "d/": "đ",
        "e'": "é",
        "e:": "ë",
        "e^": "ê",
        "e_": "ē",
        "e`": "è",
        "e~": "ẽ",
        "g^": "ĝ",
        "h/": "ħ",
        "h^": "ĥ",
        "i'": "í",
        "i/": "ɨ",
        "i:": "ï",
        "i^": "î",
        "i_": "ī",
        "i`": "ì",
        "i~": "ĩ",
        "j^": "ĵ",
        "l'": "ĺ",
        "l/": "ł",
        "m'": "ḿ",
        "n'": "ń",
        "n`": "ǹ",
        "n~": "ñ",
        "o'": "ó",
        "o/": "ø",
        "o:": "ö",
        "o^": "ô",
        "o_": "ō",
        "o`": "ò",
        "oe&": "œ",
        "o~": "õ",
        "r'": "ŕ",
        "s&": "ß",
        "s'": "ś",
        "s,": "ş",
        "s^": "ŝ",
        "t,": "ţ",
        "u&": "ů",
        "u'": "ú",
        "u:": "ü",
        "u^": "û",
        "u_": "ū",
        "u`": "ù",
        "u~": "ũ",
        "y'": "ý",
        "y:": "ÿ",
        "z'": "ź",
    }
)

# Keys are the JIS X 0213 locator digits concatenated: level, plane, row, cell.
# "第3水準1-14-76" -> 311476.
# https://kanji.jitenon.jp/
# http://www13.plala.or.jp/bigdata/index_kanji.html
JIS_MAP: Mapping[int, str] = MappingProxyType(
    {
        311476: "匇",
        311524: "噱",
        311589: "媧",
        318428: "彘",
        318431: "彽",
        318445: "怳",
        318454: "惝",
        318455: "惸",
        318459: "愷",
        318466: "戢",
        318477: "挘",
        318615: "橛",
        318662: "泫",
        318740: "炷",
        318764: "燄",
        318771: "犍",
        318822: "璆",
        318881: "眶",
        318885: "睜",
        319155: "蛼",
        319239: "蹰",
        319278: "鄢",
        319413: "騃",
        319484: "鼹",
        421283: "戕",
        428874: "譃",
        429267: "餼",
        429268: "饀",
        429271: "饍",
        429337: "魳",
    }
)

__all__ = ["ACCENT_MAP", "JIS_MAP"]
