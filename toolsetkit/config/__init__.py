"""Configuration loading for ToolsetKit."""

from toolsetkit.config.parser import (
    DiscoveryConfig,
    ToolsetKitConfig,
    load_config,
    parse_config,
)
from toolsetkit.core.exceptions import ConfigError

__all__ = [
    "ConfigError",
    "DiscoveryConfig",
    "ToolsetKitConfig",
    "load_config",
    "parse_config",
]
