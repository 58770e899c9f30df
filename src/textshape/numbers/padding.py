# src/textshape/numbers/padding.py
from __future__ import annotations

"""
padding.py

Does: Left-pad every run of digits in a number or string with zeros up to a
      target width, so digit runs compare by magnitude under plain string order.
Returns: to_padded(value, width) -> str; int_text(value) -> str
Used by: Natural-order sorting and the value serializer.
"""

import re
from typing import Union

__all__ = ["DIGIT_RUN_RE", "int_text", "to_padded"]

__docformat__ = "google"

# ASCII only: str.isdigit-style Unicode digits would not pad consistently
DIGIT_RUN_RE = re.compile(r"[0-9]+")

# log10(2), scaled to stay in integer arithmetic
_LOG10_2_NUM, _LOG10_2_DEN = 30103, 100000


def int_text(value: int) -> str:
    """
    Does: Render an integer in base 10, however many digits it has.
    Returns: Same text as str(value).

    str() refuses integers above the interpreter's digit limit
    (sys.get_int_max_str_digits). Those are split with divmod by a power of
    ten and the halves rendered separately, the low half zero-padded.

    Example:
        >>> int_text(-42)
        '-42'
        >>> len(int_text(10**5000))
        5001
    """
    try:
        return str(value)
    except ValueError:
        pass
    if value < 0:
        return "-" + int_text(-value)
    # upper bound on the digit count; the high half stays non-zero
    digits = value.bit_length() * _LOG10_2_NUM // _LOG10_2_DEN + 1
    half = digits // 2
    high, low = divmod(value, 10**half)
    return int_text(high) + int_text(low).rjust(half, "0")


def to_padded(value: Union[int, float, str], width: int = 0) -> str:
    """
    Does: Pad each digit run of str(value) with leading "0" until it is `width` long.
    Returns: New string; runs already at least `width` long are unchanged.

    Example:
        >>> to_padded(2, 2)
        '02'
        >>> to_padded("index 2 - title", 3)
        'index 002 - title'
    """
    if isinstance(value, int) and not isinstance(value, bool):
        text = int_text(value)
    else:
        text = str(value)
    return DIGIT_RUN_RE.sub(lambda m: m.group(0).rjust(width, "0"), text)
