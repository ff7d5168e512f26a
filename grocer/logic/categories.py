"""Keyword-based category guess for ingredients added from a saved recipe."""
from grocer.utilities.constants import CATEGORY_KEYWORDS, FALLBACK_CATEGORY

__all__ = ["infer_category"]


def infer_category(name: str) -> str:
    """Return the first category whose keyword occurs in ``name``, else ``Pantry``.

    Matching is a plain case-sensitive substring test against a short fixed list,
    so "Whole Milk" falls through to the default while "milk powder" is Dairy.
    """
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in name for keyword in keywords):
            return category
    return FALLBACK_CATEGORY
