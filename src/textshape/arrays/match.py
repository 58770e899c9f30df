# src/textshape/arrays/match.py
from __future__ import annotations

"""
match.py

Does: Map every element of one collection to its best-matching element of
      another, keeping the original input elements (dicts and lists included) as keys.
Returns: match(inputs, candidates) -> MatchMapping (insertion ordered, read-only).
Used by: Pairing labels/records across two lists, the `textshape match` command.
"""

import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar, Union

from textshape.arrays.best_match import find_best_match
from textshape.strings.stringify import stringify_all
from textshape.types import Keyed

__all__ = [
    "MatchMapping",
    "match",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

In = TypeVar("In")
C = TypeVar("C")


class MatchMapping(Mapping, Generic[In, C]):
    """
    Insertion-ordered mapping from input elements to their best candidate.

    Hashable keys are unique by equality like a dict; unhashable keys (dicts,
    lists) are unique by identity, so every input element can be a key.
    """

    def __init__(self) -> None:
        self._index: Dict[Tuple[str, Any], int] = {}
        self._items: List[Tuple[In, Optional[C]]] = []

    @staticmethod
    def _slot(key: Any) -> Tuple[str, Any]:
        try:
            hash(key)
        except TypeError:
            return ("id", id(key))
        return ("eq", key)

    def _set(self, key: In, value: Optional[C]) -> None:
        slot = self._slot(key)
        if slot in self._index:
            self._items[self._index[slot]] = (key, value)
        else:
            self._index[slot] = len(self._items)
            self._items.append((key, value))

    def __getitem__(self, key: Any) -> Optional[C]:
        try:
            return self._items[self._index[self._slot(key)]][1]
        except KeyError:
            raise KeyError(key) from None

    def __iter__(self) -> Iterator[In]:
        return (k for k, _ in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MatchMapping):
            return self._items == other._items
        if isinstance(other, Mapping):
            if len(self) != len(other):
                return False
            try:
                return all(k in other and other[k] == v for k, v in self._items)
            except TypeError:  # unhashable key against a plain dict
                return False
        return NotImplemented

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self._items)
        return f"{type(self).__name__}({{{body}}})"


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

def _unpack(
    source: Union[Keyed[Any], Iterable[Any]],
    key: Optional[Callable[[Any], Any]],
    side: str,
) -> Tuple[List[Any], Optional[Callable[[Any], Any]]]:
    """
    Does: Materialize a plain iterable or a Keyed holder, merging its key with the keyword one.
    Returns: (elements, key).
    """
    if isinstance(source, Keyed):
        if source.key is not None and key is not None:
            raise ValueError(f"{side} key given both in Keyed and as {side}_key")
        return list(source.items), source.key or key
    return list(source), key


def _project_input(element: Any, key: Optional[Callable[[Any], Any]]) -> str:
    if key is not None:
        derived = key(element)
        return derived if isinstance(derived, str) else stringify_all(derived)
    if isinstance(element, str):
        return element
    return stringify_all(element)


# ─────────────────────────────────────────────────────────────────────────────
# Public API
# ─────────────────────────────────────────────────────────────────────────────

def match(
    inputs: Union[Keyed[In], Iterable[In]],
    candidates: Union[Keyed[C], Iterable[C]],
    *,
    input_key: Optional[Callable[[In], Any]] = None,
    candidate_key: Optional[Callable[[C], Any]] = None,
) -> MatchMapping[In, C]:
    """
    Does: Run find_best_match once per input against all candidates.
    Returns: MatchMapping input -> best candidate (None when nothing scored).

    Args:
        inputs: Elements to match, or Keyed(items, key).
        candidates: Elements to match against, or Keyed(items, key).
        input_key: Projection of an input to its text (default: the string
            itself, else stringify_all).
        candidate_key: Projection of a candidate to a str or compiled pattern.

    Raises:
        ValueError: if one side carries a key in both Keyed and keyword form.
    """
    input_list, input_key = _unpack(inputs, input_key, "input")
    candidate_list, candidate_key = _unpack(candidates, candidate_key, "candidate")

    mapping: MatchMapping[In, C] = MatchMapping()
    for element in input_list:
        text = _project_input(element, input_key)
        mapping._set(element, find_best_match(text, candidate_list, candidate_key).match)

    log.debug("Matched %d inputs against %d candidates", len(mapping), len(candidate_list))
    return mapping
