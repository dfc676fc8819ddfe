"""
Shared utilities for CLI commands.

Provides common functionality used across CLI commands to ensure
consistent behavior.
"""

import json
import logging
from typing import Any

from toolsetkit.config.parser import ToolsetKitConfig, load_config

logger = logging.getLogger(__name__)


# ============================================================================
# Configuration Management
# ============================================================================


def load_cli_config(args) -> ToolsetKitConfig:
    """
    Load configuration selected by the global --config option.

    Args:
        args: Parsed arguments with an optional config field

    Returns:
        Parsed configuration, or defaults
    """
    return load_config(getattr(args, "config", None))


# ============================================================================
# User Interface / Output Formatting
# ============================================================================


def safe_print(message: str, file=None):
    """
    Print message with safe encoding handling for Windows console.

    Falls back to replacing characters the console cannot encode.

    Args:
        message: Message to print
        file: Output file (default: stdout)
    """
    try:
        print(message, file=file)
    except UnicodeEncodeError:
        print(message.encode("ascii", "replace").decode("ascii"), file=file)


def print_json(data: Any):
    """Print data as indented JSON."""
    print(json.dumps(data, indent=2))
