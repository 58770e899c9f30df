# src/textshape/strings/substrings.py
from __future__ import annotations

"""
substrings.py

Does: Character- and substring-level overlap between two strings: shared
      characters (all or unique) and a greedy left-to-right covering of the
      first string by runs also present in the second.
Returns: Lists of characters or substrings in discovery order.
Used by: Quick overlap checks and the `textshape substrings` command.
"""

import string
from typing import List

__all__ = [
    "match_chars",
    "match_chars_unique",
    "match_substrings",
]

__docformat__ = "google"

DEFAULT_DELIMITERS = string.whitespace


# ─────────────────────────────────────────────────────────────────────────────
# 1) Character overlap
# ─────────────────────────────────────────────────────────────────────────────

def match_chars(first: str, second: str) -> List[str]:
    """
    Does: Keep every character of `first` that occurs in `second` (duplicates kept).
    Returns: List of characters, e.g. ("aabbccddee", "fbgdhbid") -> ["b", "b", "d", "d"].
    """
    return [char for char in first if char in second]


def match_chars_unique(first: str, second: str) -> List[str]:
    """
    Does: Intersect the character sets of both strings, ordered by first occurrence in `first`.
    Returns: List of distinct characters.
    """
    return list(dict.fromkeys(match_chars(first, second)))


# ─────────────────────────────────────────────────────────────────────────────
# 2) Greedy substring covering
# ─────────────────────────────────────────────────────────────────────────────

def match_substrings(
    first: str,
    second: str,
    *,
    delimiters: str = DEFAULT_DELIMITERS,
) -> List[str]:
    """
    Does: Scan `first` once, growing a run while it stays a substring of `second`.
          When the run breaks it is emitted (if longer than 1 char) and the window
          slides by one char when that keeps it inside `second`. Characters missing
          from `second`, or listed in `delimiters`, close the current run.
    Returns: Runs in discovery order; the run still open at the last char of
             `first` is always emitted, even a single char.

    Heuristic covering, not a maximal common-substring search: it never
    revisits an earlier split.
    """
    found: List[str] = []
    run = ""
    last = len(first) - 1

    for index, char in enumerate(first):
        if char in second and char not in delimiters:
            extended = run + char
            if extended in second:
                run = extended
            else:
                if len(run) > 1:
                    found.append(run)
                slid = run[1:] + char
                run = slid if slid in second else char
        else:
            if len(run) > 1:
                found.append(run)
            run = ""

        if index == last and run:
            found.append(run)

    return found
