# src/textshape/utils/log.py
"""
log.py.

Does: Topic-gated debug lines for the CLI. Topics come from
      $TEXTSHAPE_DEBUG_TOPICS (comma-separated, or 'all') and can be switched on
      for a block of code with enabled_topics(), leaving the environment alone.
Returns: debug() writes "[time] [topic][LEVEL] message" lines to stderr.
Used by: cli.py and tests.
"""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from datetime import datetime
from typing import Iterable, Iterator, TextIO

__all__ = ["debug", "enabled_topics", "reload_topics", "topic_enabled"]

ENV_VAR = "TEXTSHAPE_DEBUG_TOPICS"
ALL_TOPICS = "all"


def _normalize(topic: str) -> str:
    return topic.strip().lower()


def _parse_topics(raw: str | Iterable[str]) -> frozenset[str]:
    parts = raw.split(",") if isinstance(raw, str) else raw
    return frozenset(_normalize(p) for p in parts if p.strip())


_active: frozenset[str] = _parse_topics(os.getenv(ENV_VAR, ""))


def reload_topics() -> None:
    """Re-read the active topics from $TEXTSHAPE_DEBUG_TOPICS."""
    global _active
    _active = _parse_topics(os.getenv(ENV_VAR, ""))


def topic_enabled(topic: str) -> bool:
    return ALL_TOPICS in _active or _normalize(topic) in _active


@contextmanager
def enabled_topics(*topics: str) -> Iterator[frozenset[str]]:
    """
    Does: Switch `topics` on, in addition to the configured ones, for the
          duration of the block.
    Returns: The active topic set inside the block; the previous set is
             restored on exit, even if the block raises.
    """
    global _active
    previous = _active
    _active = previous | _parse_topics(topics)
    try:
        yield _active
    finally:
        _active = previous


def debug(
    msg: str,
    topic: str = "textshape",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Write one timestamped line for `msg` when `topic` is enabled."""
    if not topic_enabled(topic):
        return
    stamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    line = f"[{stamp}] [{_normalize(topic)}][{level.upper()}] {msg}"
    print(line, file=stream or sys.stderr)
