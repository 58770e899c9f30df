"""
numbers.
=======

Does: Utilities for numbers and digit characters inside strings.
Exports: int_text, to_padded
"""

from .padding import int_text, to_padded

__all__ = ["int_text", "to_padded"]
