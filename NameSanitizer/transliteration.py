# Author: huhongwei 306463233@qq.com
# MIT License
"""Accent removal for schema names.

Fixed lookup table (Latin-1 Supplement, Latin Extended-A and the few
Latin Extended-B letters that show up in vendor schemas). No Unicode
normalization and no locale: characters missing from the table are kept.
"""

from types import MappingProxyType

# 目标 ASCII -> 需要替换成它的字符
_REPLACEMENTS = {
    "A": "ÀÁÂÃÄÅĀĂĄǍǺ",
    "a": "àáâãäåāăąǎǻ",
    "AE": "ÆǼ",
    "ae": "æǽ",
    "C": "ÇĆĈĊČ",
    "c": "çćĉċč",
    "D": "ÐĎĐ",
    "d": "ðďđ",
    "E": "ÈÉÊËĒĔĖĘĚ",
    "e": "èéêëēĕėęě",
    "f": "ƒ",
    "G": "ĜĞĠĢ",
    "g": "ĝğġģ",
    "H": "ĤĦ",
    "h": "ĥħ",
    "I": "ÌÍÎÏĨĪĬĮİǏ",
    "i": "ìíîïĩīĭįıǐ",
    "IJ": "Ĳ",
    "ij": "ĳ",
    "J": "Ĵ",
    "j": "ĵ",
    "K": "Ķ",
    "k": "ķ",
    "L": "ĹĻĽĿŁ",
    "l": "ĺļľŀł",
    "N": "ÑŃŅŇ",
    "n": "ñńņňŉ",
    "O": "ÒÓÔÕÖØŌŎŐƠǑǾ",
    "o": "òóôõöøōŏőơǒǿ",
    "OE": "Œ",
    "oe": "œ",
    "R": "ŔŖŘ",
    "r": "ŕŗř",
    "S": "ŚŜŞŠ",
    "s": "ßśŝşšſ",
    "T": "ŢŤŦ",
    "t": "ţťŧ",
    "TH": "Þ",
    "th": "þ",
    "U": "ÙÚÛÜŨŪŬŮŰŲƯǓǕǗǙǛ",
    "u": "ùúûüũūŭůűųưǔǖǘǚǜ",
    "W": "Ŵ",
    "w": "ŵ",
    "Y": "ÝŶŸ",
    "y": "ýÿŷ",
    "Z": "ŹŻŽ",
    "z": "źżž",
}

_accents = {
    char: ascii_text
    for ascii_text, chars in _REPLACEMENTS.items()
    for char in chars
}

_TRANSLATION = str.maketrans(_accents)
ACCENT_TABLE = MappingProxyType(_accents)


def remove_accents(text: str) -> str:
    """Replace accented Latin letters with their plain ASCII form ("École" -> "Ecole")."""
    return text.translate(_TRANSLATION)
