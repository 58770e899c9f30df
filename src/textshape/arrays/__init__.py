# src/textshape/arrays/__init__.py
"""
arrays.

Does: Facade for collection helpers: natural-order sorting, best-match
scoring, and bulk matching between two collections.

Returns: Public API for sort, find_max_digit_sequence, matching_score,
find_best_match, match and their result types.
Used by: The package root and the command line front end.
Functions here never mutate their inputs; they return new lists/mappings.
"""

from __future__ import annotations

# ── Best match ───────────────────────────────────────────────────────────────
from .best_match import (
    BestMatch,
    find_best_match,
    matching_score,
)

# ── Bulk matching ────────────────────────────────────────────────────────────
from .match import (
    MatchMapping,
    match,
)

# ── Sorting ──────────────────────────────────────────────────────────────────
from .sort import (
    find_max_digit_sequence,
    sort,
)

__all__ = [
    # Sorting
    "sort",
    "find_max_digit_sequence",
    # Best match
    "BestMatch",
    "matching_score",
    "find_best_match",
    # Bulk matching
    "MatchMapping",
    "match",
]

__docformat__ = "google"
