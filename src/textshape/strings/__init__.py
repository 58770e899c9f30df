# src/textshape/strings/__init__.py
"""
strings.

Does: Facade for string utilities: total value stringification and
character/substring overlap between two strings.

Returns: Public API for stringify_all, match_chars, match_chars_unique,
and match_substrings.
Used by: Sorting and matching defaults, CLI.
"""

from __future__ import annotations

from .stringify import stringify_all
from .substrings import (
    match_chars,
    match_chars_unique,
    match_substrings,
)

__all__ = [
    "stringify_all",
    "match_chars",
    "match_chars_unique",
    "match_substrings",
]

__docformat__ = "google"
