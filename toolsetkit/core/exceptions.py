"""
Centralized exception hierarchy for ToolsetKit.

This module defines all custom exceptions used across the codebase
to provide clear exception semantics for the discovery pipeline.
"""

from pathlib import Path
from typing import Iterable, List


# ============================================================================
# Base Exceptions
# ============================================================================


class ToolsetKitError(Exception):
    """Base exception for all ToolsetKit errors."""

    pass


class InternalConsistencyError(ToolsetKitError):
    """
    Raised when a value falls outside its closed set.

    This signals a programming-contract failure rather than a user error.
    Library code never catches it; the CLI reports it as an internal error.
    """

    pass


# ============================================================================
# Discovery Exceptions
# ============================================================================


class DiscoveryError(ToolsetKitError):
    """Base exception for toolset discovery errors."""

    pass


class VswhereError(DiscoveryError):
    """Raised when vswhere.exe exits with a non-zero status."""

    def __init__(self, exit_code: int, output: str):
        self.exit_code = exit_code
        self.output = output
        super().__init__(
            f"Running vswhere.exe failed with exit code {exit_code}:\n{output}"
        )


class VswhereOutputError(DiscoveryError):
    """Raised when a vswhere record is missing a required tag or repeats one."""

    pass


class NoToolsetFoundError(DiscoveryError):
    """Raised when no complete toolset could be located."""

    def __init__(self, paths_examined: Iterable[Path]):
        self.paths_examined: List[Path] = list(paths_examined)
        super().__init__(
            "Could not locate a complete toolset "
            f"({len(self.paths_examined)} paths examined)"
        )


# ============================================================================
# Environment Exceptions
# ============================================================================


class PlatformError(ToolsetKitError):
    """Raised when a required platform location cannot be determined."""

    pass


class ConfigError(ToolsetKitError):
    """Configuration parsing or validation error."""

    pass
