"""
textshape
=========

Does: Root package for small data-shaping helpers: natural-order sorting,
      approximate "best match" lookup, bulk matching, and substring overlap.
Returns: Re-exports the public functions of `arrays`, `numbers` and `strings`.
Used by: Library callers (`from textshape import sort, match`) and the `textshape` CLI.
"""

from .arrays import (
    BestMatch,
    MatchMapping,
    find_best_match,
    find_max_digit_sequence,
    match,
    matching_score,
    sort,
)
from .numbers import to_padded
from .strings import (
    match_chars,
    match_chars_unique,
    match_substrings,
    stringify_all,
)
from .types import Keyed

__all__: list[str] = [
    "BestMatch",
    "Keyed",
    "MatchMapping",
    "find_best_match",
    "find_max_digit_sequence",
    "match",
    "match_chars",
    "match_chars_unique",
    "match_substrings",
    "matching_score",
    "sort",
    "stringify_all",
    "to_padded",
]
__version__ = "0.1.0"
__docformat__ = "google"
