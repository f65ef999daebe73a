import re
from typing import List, Tuple


# =========================
# PHONETIC SUBSTITUTIONS
# =========================

# confusable spellings, 5 symmetric pairs; order decides variant order
PHONETIC_RULES: List[Tuple[str, str]] = [
    ("k", "c"),
    ("c", "k"),
    ("ph", "f"),
    ("f", "ph"),
    ("v", "w"),
    ("w", "v"),
    ("z", "j"),
    ("j", "z"),
    ("s", "sh"),
    ("sh", "s"),
]


def phonetic_variants(text: str) -> List[str]:
    """
    Return ``text`` followed by one variant per rule whose pattern occurs in it.

    Each rule replaces every occurrence of its pattern and rules are never
    chained, so at most len(PHONETIC_RULES) variants are added. Matching is
    case-sensitive.
    """
    variants = [text]
    for pattern, replacement in PHONETIC_RULES:
        if pattern in text:
            variants.append(text.replace(pattern, replacement))
    return variants


# =========================
# DELIMITERS / CASE
# =========================

_hyphen_underscore = re.compile(r"[-_]")
_whitespace_run = re.compile(r"\s+")


def delimiter_variants(text: str) -> List[str]:
    variants = [text]
    if "-" in text or "_" in text:
        variants.append(_hyphen_underscore.sub(" ", text))
        variants.append(_hyphen_underscore.sub("", text))
    if " " in text:
        variants.append(_whitespace_run.sub("-", text))
        variants.append(_whitespace_run.sub("_", text))
        variants.append(_whitespace_run.sub("", text))
    return variants


def title_case(text: str) -> str:
    # split on single spaces only; str.title() would also capitalise after "-"
    return " ".join(w[:1].upper() + w[1:].lower() for w in text.split(" "))


def case_variants(text: str) -> List[str]:
    return [text, text.lower(), text.upper(), title_case(text)]


# =========================
# TOKENIZER
# =========================

_token_split = re.compile(r"[\s\-_]+")


def tokenize(text: str) -> List[str]:
    if not text:
        return []
    return [w for w in _token_split.split(text.lower()) if w]


# =========================
# KEYWORD FILTER
# =========================

_letter = re.compile(r"[a-zA-Z\u0900-\u097F]")


def is_meaningful_keyword(keyword: str) -> bool:
    """At least 2 chars after trimming and one Latin or Devanagari letter."""
    if not isinstance(keyword, str):
        return False
    return len(keyword.strip()) >= 2 and _letter.search(keyword) is not None
