from typing import Any, Iterable, List, Mapping, Optional

from config import COL_CATEGORY, COL_DESCRIPTION, COL_KEYWORDS, COL_NAME


# ==========================================================
# QUERY MATCHER
# ==========================================================
# boolean only, no ranking

def _lower(value: Any) -> str:
    if value is None:
        return ""
    return str(value).lower()


def is_blank_query(query: Optional[str]) -> bool:
    return not query or not query.strip()


def matches_query(query: str, product: Mapping[str, Any]) -> bool:
    """
    True if ``query`` is contained in the product's name, description or
    category, or if any stored keyword contains the query or is contained in
    it (bidirectional containment).

    Callers must not pass a blank query: every keyword is contained in the
    query when it is empty. Use ``filter_products`` which treats a blank
    query as "no filter".
    """
    q = query.lower()

    if q in _lower(product.get(COL_NAME)):
        return True
    if q in _lower(product.get(COL_DESCRIPTION)):
        return True
    if q in _lower(product.get(COL_CATEGORY)):
        return True

    for keyword in product.get(COL_KEYWORDS) or []:
        kw = _lower(keyword)
        if not kw:
            continue
        if q in kw or kw in q:
            return True
    return False


def filter_products(
    query: Optional[str],
    products: Iterable[Mapping[str, Any]],
    category: Optional[str] = None,
) -> List[Mapping[str, Any]]:
    """
    Products matching ``query``, keeping input order.

    With a ``category`` only products of that category are considered.
    A blank query applies no text filter at all.
    """
    candidates = list(products)
    if category:
        candidates = [p for p in candidates if p.get(COL_CATEGORY) == category]

    if is_blank_query(query):
        return candidates

    return [p for p in candidates if matches_query(query, p)]
