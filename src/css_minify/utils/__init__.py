# css_minify/utils/__init__.py
"""

Does: Provide settings loading and lightweight debug logging utilities for the adapter and CLI.
Returns: Public API via load_config/clear_config_cache and debug/reload_topics.
Used by: css_minify.adapter, css_minify.cli, tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    Settings,
    clear_config_cache,
    load_config,
    temp_config,
)
from .log import (
    debug,
    enable_all_topics,
    reload_topics,
    topic_enabled,
)

__all__ = [
    # Config loading
    "Settings",
    "load_config",
    "clear_config_cache",
    "temp_config",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "enable_all_topics",
    "reload_topics",
    "topic_enabled",
]
