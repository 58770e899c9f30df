# src/textshape/arrays/best_match.py
from __future__ import annotations

"""
best_match.py

Does: Score how much of one string is covered by occurrences of another
      (or of a compiled pattern), and pick the best-scoring candidate of a collection.
Returns: matching_score(text, matcher) -> int; find_best_match(...) -> BestMatch.
Used by: Bulk matching between collections and the `textshape best-match` command.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Optional, TypeVar

from textshape.strings.stringify import stringify_all
from textshape.types import Matcher

__all__ = [
    "BestMatch",
    "matching_score",
    "find_best_match",
]

__docformat__ = "google"

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

C = TypeVar("C")


@dataclass(frozen=True)
class BestMatch(Generic[C]):
    """Winning candidate and its score; match is None when nothing scored."""

    match: Optional[C] = None
    score: int = 0


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

def _default_matcher(candidate: Any) -> Matcher:
    if isinstance(candidate, (str, re.Pattern)):
        return candidate
    return stringify_all(candidate)


def _resolve_matcher(candidate: Any, key: Optional[Callable[[Any], Any]]) -> Matcher:
    """
    Does: Project a candidate to a str or compiled pattern.
    Returns: key(candidate) when it gives something, else the default projection.
    """
    if key is not None:
        derived = key(candidate)
        if derived is not None:
            return _default_matcher(derived)
    return _default_matcher(candidate)


# ─────────────────────────────────────────────────────────────────────────────
# 1) Scoring
# ─────────────────────────────────────────────────────────────────────────────

def matching_score(text: str, matcher: Matcher) -> int:
    """
    Does: Search the shorter string inside the longer one (a pattern always
          searches `text`) and add up the length of every non-overlapping match.
    Returns: Total matched characters, 0 when nothing matches.

    String needles are matched literally.
    """
    if isinstance(matcher, str) and len(matcher) > len(text):
        haystack, needle = matcher, text
    else:
        haystack, needle = text, matcher

    if isinstance(needle, re.Pattern):
        pattern = needle
    else:
        if not needle:
            return 0
        pattern = re.compile(re.escape(needle))

    return sum(len(m.group(0)) for m in pattern.finditer(haystack))


# ─────────────────────────────────────────────────────────────────────────────
# 2) Best match over a collection
# ─────────────────────────────────────────────────────────────────────────────

def find_best_match(
    text: str,
    candidates: Iterable[C],
    key: Optional[Callable[[C], Any]] = None,
    *,
    debug: bool = False,
) -> BestMatch[C]:
    """
    Does: Score every candidate against `text`; a later candidate only wins
          with a strictly higher score, so ties keep the earliest one.
    Returns: BestMatch(match, score); BestMatch(None, 0) when no candidate scores.

    Args:
        text: The string to find a match for.
        candidates: Strings, compiled patterns, or any values.
        key: Optional projection of a candidate to a str or compiled pattern.
            Other values are serialized with stringify_all.
        debug: Log every candidate score at DEBUG level.
    """
    best: BestMatch[C] = BestMatch()
    for candidate in candidates:
        score = matching_score(text, _resolve_matcher(candidate, key))
        if debug:
            log.debug("[SCORE] %r vs %r = %d", text, candidate, score)
        if score > best.score:
            best = BestMatch(candidate, score)

    if debug:
        log.debug("[BEST] %r → %r (score=%d)", text, best.match, best.score)
    return best
