from typing import Iterable, Iterator, List, Optional

from catalog_log import get_logger
from Normalizer import (
    case_variants,
    delimiter_variants,
    is_meaningful_keyword,
    phonetic_variants,
    tokenize,
)
from transliteration import devanagari_to_roman, is_devanagari, roman_to_devanagari

logger = get_logger(__name__)


# ==========================================================
# KEYWORD SET
# ==========================================================

MAX_KEYWORDS = 30


class KeywordSet:
    """
    Insertion-ordered set of keywords with case-insensitive membership.

    Two keywords are the same entry when their trimmed, lowercased forms are
    equal; the first spelling added is the one kept. Once ``limit`` entries
    are stored further additions are ignored.
    """

    def __init__(self, limit: Optional[int] = None):
        self.limit = limit
        self._items: List[str] = []
        self._keys = set()

    @staticmethod
    def key(keyword: str) -> str:
        return keyword.strip().lower()

    @property
    def full(self) -> bool:
        return self.limit is not None and len(self._items) >= self.limit

    def add(self, keyword: str) -> bool:
        if self.full:
            return False
        k = self.key(keyword)
        if k in self._keys:
            return False
        self._keys.add(k)
        self._items.append(keyword)
        return True

    def update(self, keywords: Iterable[str]) -> None:
        for kw in keywords:
            if self.full:
                break
            self.add(kw)

    def __contains__(self, keyword: object) -> bool:
        return isinstance(keyword, str) and self.key(keyword) in self._keys

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def to_list(self) -> List[str]:
        return list(self._items)

    def __repr__(self):
        return f"KeywordSet({self._items!r}, limit={self.limit})"


# ==========================================================
# AGGREGATOR
# ==========================================================

def _candidate_keywords(name: str, words: List[str]) -> Iterator[str]:
    """Yield every variant of ``name`` in generation order (may repeat)."""
    # 1) case forms
    yield from case_variants(name)

    # 2) delimiter forms of the whole name
    for variant in delimiter_variants(name):
        yield variant
        yield variant.lower()

    # 3) single words
    for word in words:
        yield word
        yield word.lower()

    # 4) cross-script and phonetic forms, for the name and each word
    for text in [name] + words:
        if is_devanagari(text):
            romanized = devanagari_to_roman(text)
            yield romanized
            yield romanized.lower()
            for variant in phonetic_variants(romanized):
                yield variant.lower()
        else:
            yield roman_to_devanagari(text)
            for variant in phonetic_variants(text):
                yield variant.lower()
                yield roman_to_devanagari(variant)


def generate_search_keywords(product_name: Optional[str]) -> List[str]:
    """
    Build the prioritised keyword list for a product name.

    Priority order is: the name as entered, its lowercase form, each word,
    then the remaining variants in generation order. Entries that are shorter
    than 2 characters or contain no Latin/Devanagari letter are dropped, and
    generation stops as soon as ``MAX_KEYWORDS`` entries are collected.
    Never raises; a blank name gives an empty list.
    """
    name = product_name if isinstance(product_name, str) else ""
    words = tokenize(name)

    keywords = KeywordSet(limit=MAX_KEYWORDS)
    keywords.update(kw for kw in [name, name.lower()] + words if is_meaningful_keyword(kw))
    keywords.update(kw for kw in _candidate_keywords(name, words) if is_meaningful_keyword(kw))

    logger.debug(
        f"generated keywords for {name!r}",
        extra={"keyword_count": len(keywords)},
    )
    return keywords.to_list()
