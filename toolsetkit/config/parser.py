"""YAML configuration parser for ToolsetKit.

This module provides parsing and validation for toolsetkit.yaml configuration files.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from toolsetkit.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "toolsetkit.yaml"


@dataclass
class DiscoveryConfig:
    """Toolset discovery settings."""

    program_files_x86: Optional[Path] = None  # overrides ProgramFiles(x86)
    halt_on_legacy_exclusion: bool = True


@dataclass
class ToolsetKitConfig:
    """Complete ToolsetKit configuration."""

    version: int = 1
    discovery: DiscoveryConfig = field(default_factory=DiscoveryConfig)


def parse_config(config_path: Path) -> ToolsetKitConfig:
    """
    Parse toolsetkit.yaml configuration file.

    Args:
        config_path: Path to toolsetkit.yaml

    Returns:
        Parsed and validated configuration

    Raises:
        ConfigError: If configuration is invalid
    """
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}")

    if data is None:
        raise ConfigError("Configuration file is empty")

    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a mapping")

    return _parse_and_validate(data)


def load_config(config_path: Optional[Path] = None) -> ToolsetKitConfig:
    """
    Load configuration, falling back to defaults.

    Args:
        config_path: Explicit configuration file; when None, ./toolsetkit.yaml
            is used if it exists

    Returns:
        Parsed configuration, or defaults when no file is present

    Raises:
        ConfigError: If an explicit file is missing or any file is invalid
    """
    if config_path is None:
        default = Path.cwd() / DEFAULT_CONFIG_NAME
        if not default.exists():
            logger.debug("No config file found, using defaults")
            return ToolsetKitConfig()
        config_path = default

    logger.debug(f"Loading configuration from {config_path}")
    return parse_config(Path(config_path))


def _parse_and_validate(data: dict) -> ToolsetKitConfig:
    """Parse and validate configuration data."""
    if "version" not in data:
        raise ConfigError("Missing required field: version")

    if data["version"] != 1:
        raise ConfigError(f"Unsupported version: {data['version']} (expected 1)")

    discovery = _parse_discovery_config(data.get("discovery") or {})

    return ToolsetKitConfig(version=data["version"], discovery=discovery)


def _parse_discovery_config(data) -> DiscoveryConfig:
    """Parse discovery configuration."""
    if not isinstance(data, dict):
        raise ConfigError("discovery must be a dictionary")

    program_files_x86 = data.get("program_files_x86")
    if program_files_x86 is not None and not isinstance(program_files_x86, str):
        raise ConfigError("discovery.program_files_x86 must be a string")

    halt = data.get("halt_on_legacy_exclusion", True)
    if not isinstance(halt, bool):
        raise ConfigError("discovery.halt_on_legacy_exclusion must be true or false")

    return DiscoveryConfig(
        program_files_x86=Path(program_files_x86) if program_files_x86 else None,
        halt_on_legacy_exclusion=halt,
    )
