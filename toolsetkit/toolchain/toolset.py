"""
Resolved toolset descriptors handed to build drivers.

A Toolset names the files a build driver needs to set up an MSVC
environment. The environment-setup script is an opaque descriptor: nothing
in ToolsetKit runs or reads it.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Tuple

V120 = "v120"
V140 = "v140"
V141 = "v141"


class CPUArchitecture(Enum):
    """Host or target CPU architecture."""

    X86 = "x86"
    X64 = "x64"
    ARM = "arm"
    ARM64 = "arm64"


@dataclass(frozen=True)
class ToolsetArchOption:
    """
    One host/target pair offered by a vcvars sub-script.

    Attributes:
        name: vcvarsall architecture argument (e.g., 'x86_amd64')
        host_arch: Architecture the compiler runs on
        target_arch: Architecture the compiler emits code for
    """

    name: str
    host_arch: CPUArchitecture
    target_arch: CPUArchitecture

    def to_dict(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "host": self.host_arch.value,
            "target": self.target_arch.value,
        }


@dataclass(frozen=True)
class Toolset:
    """
    A validated, ready-to-use MSVC environment descriptor.

    Attributes:
        visual_studio_root_path: Installation root of the owning instance
        dumpbin: Path to dumpbin.exe
        vcvarsall: Path to vcvarsall.bat
        vcvarsall_options: Extra vcvarsall arguments (e.g., '-vcvars_ver=14.0')
        version: Platform toolset tag ('v120', 'v140', 'v141')
        supported_architectures: Host/target pairs available through vcvarsall
    """

    visual_studio_root_path: Path
    dumpbin: Path
    vcvarsall: Path
    vcvarsall_options: Tuple[str, ...]
    version: str
    supported_architectures: Tuple[ToolsetArchOption, ...]

    def __str__(self) -> str:
        return f"{self.version} at {self.visual_studio_root_path}"

    def supports(self, host: CPUArchitecture, target: CPUArchitecture) -> bool:
        """Check whether vcvarsall offers a host/target pair."""
        return any(
            option.host_arch == host and option.target_arch == target
            for option in self.supported_architectures
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for serialization.

        Returns:
            Dictionary representation suitable for JSON output
        """
        return {
            "version": self.version,
            "visual_studio_root_path": str(self.visual_studio_root_path),
            "dumpbin": str(self.dumpbin),
            "vcvarsall": str(self.vcvarsall),
            "vcvarsall_options": list(self.vcvarsall_options),
            "supported_architectures": [
                option.to_dict() for option in self.supported_architectures
            ],
        }
