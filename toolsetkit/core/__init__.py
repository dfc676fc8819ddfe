"""
Core functionality for ToolsetKit.

This package contains the foundational modules that other components depend on.
"""

from .exceptions import (
    ToolsetKitError,
    InternalConsistencyError,
    DiscoveryError,
    VswhereError,
    VswhereOutputError,
    NoToolsetFoundError,
    PlatformError,
    ConfigError,
)

from .interfaces import (
    Filesystem,
    ProcessRunner,
    CommandResult,
    LocalFilesystem,
    SubprocessRunner,
)

from .platform import get_program_files_32_bit

__all__ = [
    "ToolsetKitError",
    "InternalConsistencyError",
    "DiscoveryError",
    "VswhereError",
    "VswhereOutputError",
    "NoToolsetFoundError",
    "PlatformError",
    "ConfigError",
    "Filesystem",
    "ProcessRunner",
    "CommandResult",
    "LocalFilesystem",
    "SubprocessRunner",
    "get_program_files_32_bit",
]
