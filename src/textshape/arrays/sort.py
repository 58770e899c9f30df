# src/textshape/arrays/sort.py
from __future__ import annotations

"""
sort.py

Does: Natural-order sorting. Each element gets a key text (user key or
      stringify_all), every digit run is zero-padded to the longest run found in
      the whole batch, and the padded texts are compared as plain strings.
Returns: sort(items, key) -> new list; find_max_digit_sequence(strings) -> str | None.
Used by: Anything that lists file names, labels, or ids with embedded numbers.
"""

import logging
from typing import Any, Callable, Iterable, List, Optional, TypeVar

from textshape.numbers.padding import DIGIT_RUN_RE, int_text, to_padded
from textshape.strings.stringify import stringify_all

__all__ = [
    "find_max_digit_sequence",
    "sort",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

T = TypeVar("T")


def find_max_digit_sequence(strings: Iterable[str]) -> Optional[str]:
    """
    Does: Collect every digit run across `strings` and keep the longest
          (the first one wins on equal length).
    Returns: The run, or None when no string holds a digit.
    """
    longest: Optional[str] = None
    for text in strings:
        for run in DIGIT_RUN_RE.findall(text):
            if longest is None or len(run) > len(longest):
                longest = run
    return longest


def _key_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return stringify_all(value)
    if isinstance(value, int):
        return int_text(value)
    if isinstance(value, float):
        return str(value)
    return stringify_all(value)


def sort(
    items: Iterable[T],
    key: Optional[Callable[[T], Any]] = None,
) -> List[T]:
    """
    Does: Order `items` naturally, so "file2" comes before "file10".
    Returns: A new list; `items` is not modified.

    Args:
        items: Any finite iterable; consumed once.
        key: Optional projection to a str or number. Without it, or when it
            returns None, the element itself is serialized with stringify_all.

    Elements whose padded keys are equal keep their input order.
    """
    elements = list(items)
    if key is None:
        texts = [stringify_all(e) for e in elements]
    else:
        texts = []
        for e in elements:
            derived = key(e)
            texts.append(stringify_all(e) if derived is None else _key_text(derived))

    longest = find_max_digit_sequence(texts)
    width = len(longest) if longest else 0
    padded = [to_padded(t, width) for t in texts]
    log.debug("Natural sort of %d elements (digit width=%d)", len(elements), width)

    order = sorted(range(len(elements)), key=padded.__getitem__)
    return [elements[i] for i in order]
