# colormap_builder/utils/__init__.py
"""

Does: Provide settings resolution and lightweight debug tracing for the builder.
Returns: Public API via load_settings/clear_config_cache and debug/reload_topics.
Used by: loader, table, pipeline, the CLI and tests.
"""

from __future__ import annotations

from .load_config import (
    DEFAULT_INPUT,
    DEFAULT_OUTPUT,
    MALFORMED_POLICIES,
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    Settings,
    clear_config_cache,
    load_settings,
    read_config_file,
)
from .log import (
    Trace,
    debug,
    enable_topics,
    enabled,
    reload_topics,
    tracer,
)

__all__ = [
    # Settings
    "DEFAULT_INPUT",
    "DEFAULT_OUTPUT",
    "MALFORMED_POLICIES",
    "Settings",
    "load_settings",
    "read_config_file",
    "clear_config_cache",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "Trace",
    "debug",
    "enable_topics",
    "enabled",
    "reload_topics",
    "tracer",
]
