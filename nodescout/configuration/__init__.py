"""Public interface for the nodescout configuration system."""

from __future__ import annotations

from .errors import ConfigurationError
from .loader import (
    clear_config_cache,
    get_config,
    load_config,
    locate_config_file,
    merge_configs,
    reload_config,
)
from .schema import CLIConfig, NodescoutConfig, SearchConfig

__all__ = [
    "CLIConfig",
    "ConfigurationError",
    "NodescoutConfig",
    "SearchConfig",
    "clear_config_cache",
    "get_config",
    "load_config",
    "locate_config_file",
    "merge_configs",
    "reload_config",
]
