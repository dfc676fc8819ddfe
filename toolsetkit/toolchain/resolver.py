"""
toolsetkit/toolchain/resolver.py

Toolset resolution - turns ranked instances into validated toolsets.

Each Visual Studio generation lays out its files differently:
- VS 2017 (15): VC/Auxiliary/Build/vcvarsall.bat plus side-by-side MSVC
  toolchains under VC/Tools/MSVC/<version>
- VS 2015 (14) and VS 2013 (12): VC/vcvarsall.bat and a single toolchain
  under VC/bin

A toolset is complete when vcvarsall.bat, dumpbin.exe and the English
language pack (the 1033 folder beside dumpbin.exe) all exist. Toolsets
missing only the language pack are reported as excluded.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from toolsetkit.core.interfaces import Filesystem
from toolsetkit.toolchain.instances import Generation, VisualStudioInstance
from toolsetkit.toolchain.toolset import (
    V120,
    V140,
    V141,
    CPUArchitecture,
    Toolset,
    ToolsetArchOption,
)

logger = logging.getLogger(__name__)

CPU = CPUArchitecture

ENGLISH_LANGUAGE_PACK = "1033"
VCVARS_VER_140 = "-vcvars_ver=14.0"

# (sub-script relative to VC/Auxiliary/Build, option)
MODERN_ARCHITECTURES: Sequence[Tuple[Path, ToolsetArchOption]] = (
    (Path("vcvars32.bat"), ToolsetArchOption("x86", CPU.X86, CPU.X86)),
    (Path("vcvars64.bat"), ToolsetArchOption("amd64", CPU.X64, CPU.X64)),
    (Path("vcvarsx86_amd64.bat"), ToolsetArchOption("x86_amd64", CPU.X86, CPU.X64)),
    (Path("vcvarsx86_arm.bat"), ToolsetArchOption("x86_arm", CPU.X86, CPU.ARM)),
    (Path("vcvarsx86_arm64.bat"), ToolsetArchOption("x86_arm64", CPU.X86, CPU.ARM64)),
    (Path("vcvarsamd64_x86.bat"), ToolsetArchOption("amd64_x86", CPU.X64, CPU.X86)),
    (Path("vcvarsamd64_arm.bat"), ToolsetArchOption("amd64_arm", CPU.X64, CPU.ARM)),
    (
        Path("vcvarsamd64_arm64.bat"),
        ToolsetArchOption("amd64_arm64", CPU.X64, CPU.ARM64),
    ),
)

# (sub-script relative to VC/bin, option)
LEGACY_ARCHITECTURES: Sequence[Tuple[Path, ToolsetArchOption]] = (
    (Path("vcvars32.bat"), ToolsetArchOption("x86", CPU.X86, CPU.X86)),
    (Path("amd64", "vcvars64.bat"), ToolsetArchOption("x64", CPU.X64, CPU.X64)),
    (
        Path("x86_amd64", "vcvarsx86_amd64.bat"),
        ToolsetArchOption("x86_amd64", CPU.X86, CPU.X64),
    ),
    (
        Path("x86_arm", "vcvarsx86_arm.bat"),
        ToolsetArchOption("x86_arm", CPU.X86, CPU.ARM),
    ),
    (
        Path("amd64_x86", "vcvarsamd64_x86.bat"),
        ToolsetArchOption("amd64_x86", CPU.X64, CPU.X86),
    ),
    (
        Path("amd64_arm", "vcvarsamd64_arm.bat"),
        ToolsetArchOption("amd64_arm", CPU.X64, CPU.ARM),
    ),
)


class ExclusionAction(Enum):
    """What the resolver does after excluding a toolset."""

    SKIP_INSTANCE = "skip_instance"  # move on to the next instance
    STOP_SCAN = "stop_scan"  # examine no further instances


@dataclass
class ResolutionOutcome:
    """
    Result of resolving a ranked instance list.

    Attributes:
        found: Complete toolsets, preferred-first
        excluded: Toolsets rejected for a missing English language pack
        paths_examined: Every vcvarsall.bat and dumpbin.exe path probed
        stopped_early: True if a legacy exclusion ended the scan
    """

    found: List[Toolset] = field(default_factory=list)
    excluded: List[Toolset] = field(default_factory=list)
    paths_examined: List[Path] = field(default_factory=list)
    stopped_early: bool = False


class ToolsetResolver:
    """
    Validates ranked instances and materializes their toolsets.

    Instances are visited in order. A VS 2017 instance may yield a v141
    toolset and, when a VS 2015 instance is also installed, a v140 toolset
    that reuses the VS 2017 files through '-vcvars_ver=14.0'.
    """

    def __init__(self, filesystem: Filesystem, halt_on_legacy_exclusion: bool = True):
        """
        Initialize resolver.

        Args:
            filesystem: Filesystem probes
            halt_on_legacy_exclusion: Stop the whole scan when a VS 2015/2013
                toolset is excluded (the historical behavior). When False,
                legacy exclusions only skip their own instance.
        """
        self.filesystem = filesystem
        self.halt_on_legacy_exclusion = halt_on_legacy_exclusion

    def exclusion_action(self, generation: Generation) -> ExclusionAction:
        """
        Decide how an exclusion in the given generation affects the scan.

        VS 2017 exclusions skip the instance. VS 2015/2013 exclusions stop
        the scan unless halt_on_legacy_exclusion is off.
        """
        if generation is Generation.MODERN or not self.halt_on_legacy_exclusion:
            return ExclusionAction.SKIP_INSTANCE
        return ExclusionAction.STOP_SCAN

    def resolve(self, instances: Iterable[VisualStudioInstance]) -> ResolutionOutcome:
        """
        Resolve toolsets for instances already ranked preferred-first.

        Args:
            instances: Ranked instances

        Returns:
            ResolutionOutcome with found and excluded toolsets and probed paths
        """
        instances = list(instances)
        outcome = ResolutionOutcome()

        v140_available = any(
            instance.generation is Generation.LEGACY_MID for instance in instances
        )

        for instance in instances:
            if instance.generation is Generation.MODERN:
                action = self._resolve_modern(instance, v140_available, outcome)
            elif instance.generation in (Generation.LEGACY_MID, Generation.LEGACY_OLD):
                action = self._resolve_legacy(instance, outcome)
            else:
                logger.debug(f"Ignoring instance of unknown generation: {instance}")
                continue

            if action is ExclusionAction.STOP_SCAN:
                logger.debug(
                    f"Stopping toolset scan after excluding {instance.root_path}"
                )
                outcome.stopped_early = True
                break

        logger.info(
            f"Resolved {len(outcome.found)} toolset(s), "
            f"excluded {len(outcome.excluded)}"
        )
        return outcome

    def _probe(self, path: Path, outcome: ResolutionOutcome) -> bool:
        outcome.paths_examined.append(path)
        found = self.filesystem.exists(path)
        logger.debug(f"{'Found' if found else 'Missing'}: {path}")
        return found

    def _supported_architectures(
        self, base_dir: Path, menu: Sequence[Tuple[Path, ToolsetArchOption]]
    ) -> Tuple[ToolsetArchOption, ...]:
        return tuple(
            option
            for script, option in menu
            if self.filesystem.exists(base_dir / script)
        )

    def _has_language_pack(self, dumpbin: Path) -> bool:
        return self.filesystem.exists(dumpbin.parent / ENGLISH_LANGUAGE_PACK)

    def _msvc_toolchain_dirs(self, msvc_dir: Path) -> List[Path]:
        """List VC/Tools/MSVC/<version> directories, highest name first."""
        subdirs = [
            path
            for path in self.filesystem.list_children(msvc_dir)
            if self.filesystem.is_directory(path)
        ]
        # Names compare as text, like instance versions.
        return sorted(subdirs, key=lambda path: path.name, reverse=True)

    def _resolve_modern(
        self,
        instance: VisualStudioInstance,
        v140_available: bool,
        outcome: ResolutionOutcome,
    ) -> Optional[ExclusionAction]:
        vc_dir = instance.root_path / "VC"

        vcvarsall_dir = vc_dir / "Auxiliary" / "Build"
        vcvarsall_bat = vcvarsall_dir / "vcvarsall.bat"
        if not self._probe(vcvarsall_bat, outcome):
            return None

        architectures = self._supported_architectures(
            vcvarsall_dir, MODERN_ARCHITECTURES
        )

        for subdir in self._msvc_toolchain_dirs(vc_dir / "Tools" / "MSVC"):
            dumpbin = subdir / "bin" / "HostX86" / "x86" / "dumpbin.exe"
            if not self._probe(dumpbin, outcome):
                continue

            v141_toolset = Toolset(
                instance.root_path, dumpbin, vcvarsall_bat, (), V141, architectures
            )

            # Only the newest toolchain carrying dumpbin is considered.
            if not self._has_language_pack(dumpbin):
                outcome.excluded.append(v141_toolset)
                return self.exclusion_action(instance.generation)

            outcome.found.append(v141_toolset)
            logger.info(f"Found toolset {v141_toolset}")

            if v140_available:
                v140_toolset = Toolset(
                    instance.root_path,
                    dumpbin,
                    vcvarsall_bat,
                    (VCVARS_VER_140,),
                    V140,
                    architectures,
                )
                outcome.found.append(v140_toolset)
                logger.info(f"Found toolset {v140_toolset} (via {VCVARS_VER_140})")

            return None

        logger.debug(f"No MSVC toolchain with dumpbin.exe in {instance.root_path}")
        return None

    def _resolve_legacy(
        self, instance: VisualStudioInstance, outcome: ResolutionOutcome
    ) -> Optional[ExclusionAction]:
        vc_dir = instance.root_path / "VC"

        vcvarsall_bat = vc_dir / "vcvarsall.bat"
        if not self._probe(vcvarsall_bat, outcome):
            return None

        dumpbin = vc_dir / "bin" / "dumpbin.exe"
        has_dumpbin = self._probe(dumpbin, outcome)

        architectures = self._supported_architectures(
            vc_dir / "bin", LEGACY_ARCHITECTURES
        )

        if not has_dumpbin:
            return None

        version = V140 if instance.generation is Generation.LEGACY_MID else V120
        toolset = Toolset(
            instance.root_path, dumpbin, vcvarsall_bat, (), version, architectures
        )

        if not self._has_language_pack(dumpbin):
            outcome.excluded.append(toolset)
            return self.exclusion_action(instance.generation)

        outcome.found.append(toolset)
        logger.info(f"Found toolset {toolset}")
        return None
