# src/textshape/strings/stringify.py
from __future__ import annotations

"""
stringify.py

Does: Convert any Python value into a stable JSON text where containers keep
      their shape and every leaf is rendered as a string by a per-kind formatter.
Returns: stringify_all(value) -> str
Used by: Default sort keys and default match projections.
"""

import dataclasses
import enum
import json
import types
from collections.abc import Mapping
from functools import partial, singledispatch
from typing import Any

from textshape.numbers.padding import int_text

__all__ = ["stringify_all"]

__docformat__ = "google"


# ─────────────────────────────────────────────────────────────────────────────
# Per-kind formatter
# ─────────────────────────────────────────────────────────────────────────────

@singledispatch
def _to_plain(value: Any) -> Any:
    """
    Does: Map a value onto JSON-ready containers of strings.
    Returns: str | list | dict.
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: _to_plain(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Mapping):
        return _mapping(value)
    return repr(value)


@_to_plain.register(str)
def _(value: str) -> Any:
    return value


@_to_plain.register(bool)
@_to_plain.register(float)
def _(value: Any) -> Any:
    return str(value)


@_to_plain.register(int)
def _(value: int) -> Any:
    return int_text(value)


@_to_plain.register(type(None))
def _(value: None) -> Any:
    return "None"


@_to_plain.register(enum.Enum)
def _(value: enum.Enum) -> Any:
    return f"{type(value).__name__}.{value.name}"


@_to_plain.register(dict)
def _mapping(value: Mapping) -> Any:
    return {_key_text(k): _to_plain(v) for k, v in value.items()}


@_to_plain.register(list)
@_to_plain.register(tuple)
def _(value: Any) -> Any:
    return [_to_plain(v) for v in value]


@_to_plain.register(set)
@_to_plain.register(frozenset)
def _(value: Any) -> Any:
    # sets have no stable iteration order; sort by serialized item
    return sorted((_to_plain(v) for v in value), key=_dumps)


@_to_plain.register(types.FunctionType)
@_to_plain.register(types.BuiltinFunctionType)
@_to_plain.register(types.MethodType)
def _(value: Any) -> Any:
    return f"function {value.__qualname__}"


@_to_plain.register(partial)
def _(value: partial) -> Any:
    return f"function {getattr(value.func, '__qualname__', repr(value.func))}"


@_to_plain.register(type)
def _(value: type) -> Any:
    return f"class {value.__qualname__}"


def _key_text(key: Any) -> str:
    plain = _to_plain(key)
    return plain if isinstance(plain, str) else _dumps(plain)


def _dumps(plain: Any) -> str:
    return json.dumps(plain, separators=(",", ":"), ensure_ascii=False)


# ─────────────────────────────────────────────────────────────────────────────
# Public API
# ─────────────────────────────────────────────────────────────────────────────

def stringify_all(value: Any) -> str:
    """
    Does: Serialize any value (big ints, callables, None, enums, containers) to JSON text.
    Returns: Deterministic string, e.g. 10 -> '"10"', {"id": 4} -> '{"id":"4"}'.
    """
    return _dumps(_to_plain(value))
