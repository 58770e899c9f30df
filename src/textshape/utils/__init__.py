# textshape/utils/__init__.py
"""

Does: Provide config loading and lightweight debug logging utilities for textshape.
Returns: Public API via load_config/clear_config_cache and debug/enabled_topics/reload_topics.
Used by: The command line front end and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
    temp_data_dir,
)
from .log import (
    debug,
    enabled_topics,
    reload_topics,
    topic_enabled,
)

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "enabled_topics",
    "reload_topics",
    "topic_enabled",
]
