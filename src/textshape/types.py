# textshape/types.py
from __future__ import annotations

"""
types.py.

Does: Define the key-strategy aliases and the Keyed holder shared by
sorting and matching.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Optional, TypeVar, Union

T = TypeVar("T")

# A key may derive a string, a number, or (for candidates) a compiled pattern.
Matcher = Union[str, re.Pattern[str]]
KeyFunc = Callable[[Any], Any]


@dataclass(frozen=True)
class Keyed(Generic[T]):
    """A sequence bundled with the key strategy used to project its elements.

    Without a key the elements are projected by their default text form.
    """

    items: Iterable[T]
    key: Optional[Callable[[T], Any]] = None


__all__ = ["Keyed", "KeyFunc", "Matcher"]

__docformat__ = "google"
