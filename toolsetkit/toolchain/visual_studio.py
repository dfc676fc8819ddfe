"""
Visual Studio toolset discovery.

Runs the full pipeline: enumerate instances, rank them, resolve toolsets
and report the outcome.

Usage:
    from toolsetkit.toolchain.visual_studio import find_toolset_instances_preferred_first

    for toolset in find_toolset_instances_preferred_first():
        print(toolset.version, toolset.vcvarsall)
"""

import logging
import os
from pathlib import Path
from typing import List, Mapping, Optional

from toolsetkit.core.interfaces import (
    Filesystem,
    LocalFilesystem,
    ProcessRunner,
    SubprocessRunner,
)
from toolsetkit.core.platform import get_program_files_32_bit
from toolsetkit.toolchain.instances import VisualStudioInstance, enumerate_instances
from toolsetkit.toolchain.ranking import rank_instances
from toolsetkit.toolchain.reporter import report
from toolsetkit.toolchain.resolver import ToolsetResolver
from toolsetkit.toolchain.toolset import Toolset

logger = logging.getLogger(__name__)


def get_visual_studio_instances(
    filesystem: Optional[Filesystem] = None,
    runner: Optional[ProcessRunner] = None,
    environ: Optional[Mapping[str, str]] = None,
    program_files_x86: Optional[Path] = None,
) -> List[VisualStudioInstance]:
    """
    Discover Visual Studio instances, preferred-first.

    Args:
        filesystem: Filesystem probes (default: LocalFilesystem)
        runner: Process execution (default: SubprocessRunner)
        environ: Environment mapping (default: os.environ)
        program_files_x86: 32-bit Program Files directory (default: resolved
            from environ)

    Returns:
        Ranked instances

    Raises:
        VswhereError: If vswhere exits with a non-zero status
        PlatformError: If Program Files (x86) cannot be resolved
    """
    filesystem = filesystem or LocalFilesystem()
    runner = runner or SubprocessRunner()
    if environ is None:
        environ = os.environ
    if program_files_x86 is None:
        program_files_x86 = get_program_files_32_bit(environ)

    instances = enumerate_instances(filesystem, runner, environ, program_files_x86)
    return rank_instances(instances)


def find_toolset_instances_preferred_first(
    filesystem: Optional[Filesystem] = None,
    runner: Optional[ProcessRunner] = None,
    environ: Optional[Mapping[str, str]] = None,
    program_files_x86: Optional[Path] = None,
    halt_on_legacy_exclusion: bool = True,
) -> List[Toolset]:
    """
    Find every complete MSVC toolset, preferred-first.

    Args:
        filesystem: Filesystem probes (default: LocalFilesystem)
        runner: Process execution (default: SubprocessRunner)
        environ: Environment mapping (default: os.environ)
        program_files_x86: 32-bit Program Files directory (default: resolved
            from environ)
        halt_on_legacy_exclusion: See ToolsetResolver

    Returns:
        Non-empty list of toolsets

    Raises:
        VswhereError: If vswhere exits with a non-zero status
        NoToolsetFoundError: If no complete toolset exists
        InternalConsistencyError: If vswhere reports an unexpected prerelease flag
    """
    filesystem = filesystem or LocalFilesystem()

    instances = get_visual_studio_instances(
        filesystem, runner, environ, program_files_x86
    )
    logger.debug(f"Ranked instances: {[str(instance) for instance in instances]}")

    resolver = ToolsetResolver(
        filesystem, halt_on_legacy_exclusion=halt_on_legacy_exclusion
    )
    return report(resolver.resolve(instances))
