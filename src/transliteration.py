import re
from typing import Dict


# ==========================================================
# SCRIPT CLASSIFIER
# ==========================================================

SCRIPT_DEVANAGARI = "devanagari"
SCRIPT_ROMAN = "roman"

_devanagari_char = re.compile(r"[\u0900-\u097F]")


def is_devanagari(text: str) -> bool:
    # a single Devanagari code point is enough, mixed spans count as Devanagari
    return bool(text) and _devanagari_char.search(text) is not None


def classify_script(text: str) -> str:
    return SCRIPT_DEVANAGARI if is_devanagari(text) else SCRIPT_ROMAN


# ==========================================================
# CHAR MAPS
# ==========================================================

# independently authored, not inverses: "v" and "w" both give "व", "व" gives "v"
ROMAN_TO_DEVANAGARI: Dict[str, str] = {
    # vowels
    "a": "अ", "aa": "आ", "i": "इ", "ee": "ई", "u": "उ", "oo": "ऊ",
    "e": "ए", "ai": "ऐ", "o": "ओ", "au": "औ",
    # consonants
    "k": "क", "kh": "ख", "g": "ग", "gh": "घ", "ch": "च", "chh": "छ",
    "j": "ज", "jh": "झ", "t": "ट", "th": "ठ", "d": "ड", "dh": "ढ",
    "n": "न", "p": "प", "ph": "फ", "b": "ब", "bh": "भ", "m": "म",
    "y": "य", "r": "र", "l": "ल", "v": "व", "w": "व", "sh": "श",
    "s": "स", "h": "ह", "z": "ज", "f": "फ",
}

DEVANAGARI_TO_ROMAN: Dict[str, str] = {
    # independent vowels
    "अ": "a", "आ": "aa", "इ": "i", "ई": "ee", "उ": "u", "ऊ": "oo",
    "ए": "e", "ऐ": "ai", "ओ": "o", "औ": "au",
    # consonants
    "क": "k", "ख": "kh", "ग": "g", "घ": "gh", "च": "ch", "छ": "chh",
    "ज": "j", "झ": "jh", "ट": "t", "ठ": "th", "ड": "d", "ढ": "dh",
    "ण": "n", "त": "t", "थ": "th", "द": "d", "ध": "dh", "न": "n",
    "प": "p", "फ": "ph", "ब": "b", "भ": "bh", "म": "m",
    "य": "y", "र": "r", "ल": "l", "व": "v", "श": "sh", "ष": "sh",
    "स": "s", "ह": "h",
    # vowel signs (matra)
    "ा": "a", "ि": "i", "ी": "ee", "ु": "u", "ू": "oo",
    "े": "e", "ै": "ai", "ो": "o", "ौ": "au",
    # virama
    "्": "",
}

MAX_ROMAN_KEY = max(len(k) for k in ROMAN_TO_DEVANAGARI)


# ==========================================================
# TRANSLITERATORS
# ==========================================================

def roman_to_devanagari(text: str) -> str:
    """Greedy longest-match scan (3, 2, then 1 letters); unknown chars pass through."""
    if not text:
        return ""
    src = text.lower()
    out = []
    i = 0
    while i < len(src):
        for size in range(MAX_ROMAN_KEY, 0, -1):
            chunk = src[i:i + size]
            if len(chunk) == size and chunk in ROMAN_TO_DEVANAGARI:
                out.append(ROMAN_TO_DEVANAGARI[chunk])
                i += size
                break
        else:
            out.append(src[i])
            i += 1
    return "".join(out)


def devanagari_to_roman(text: str) -> str:
    if not text:
        return ""
    return "".join(DEVANAGARI_TO_ROMAN.get(ch, ch) for ch in text)
