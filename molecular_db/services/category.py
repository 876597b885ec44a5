"""Mapping of free-text catalog categories onto canonical category keys."""

from typing import List, Tuple

OTHER = "other"

# Evaluated in order; the first keyword contained in the label wins.
CATEGORY_RULES: List[Tuple[str, str]] = [
    ("genomic", "genomic"),
    ("protein", "protein"),
    ("pathogenicity", "pathogenicity"),
    ("resistance", "resistance"),
    ("immunology", "immunology"),
    ("regulatory", "regulatory"),
]

CANONICAL_CATEGORIES = frozenset(key for _, key in CATEGORY_RULES) | {OTHER}

def normalize_category(label: str) -> str:
    """Return the canonical key for a category label, falling back to 'other'."""
    lower = (label or "").lower()
    for keyword, key in CATEGORY_RULES:
        if keyword in lower:
            return key
    return OTHER
