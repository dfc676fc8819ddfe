"""
toolsetkit/toolchain/instances.py

Visual Studio instance enumeration - discovers installation candidates.

Candidates come from two sources:
- vswhere.exe, which reports every instance the VS installer knows about
  (VS 2017 and later, plus legacy suites when asked)
- VS 2015 probes: the VS140COMNTOOLS environment variable and the default
  install directory under Program Files (x86)

Nothing is validated beyond the existence gate on VS 2015 roots; see
toolsetkit.toolchain.resolver for the completeness rules.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Mapping, Optional

from toolsetkit.core.exceptions import InternalConsistencyError, VswhereError
from toolsetkit.core.interfaces import Filesystem, ProcessRunner
from toolsetkit.core.text import (
    find_all_enclosed,
    find_at_most_one_enclosed,
    find_exactly_one_enclosed,
)

logger = logging.getLogger(__name__)

VSWHERE_RELATIVE_PATH = Path("Microsoft Visual Studio") / "Installer" / "vswhere.exe"
VSWHERE_ARGUMENTS = ["-prerelease", "-legacy", "-products", "*", "-format", "xml"]

VS140_COMNTOOLS_VARIABLE = "VS140COMNTOOLS"
VS140_DEFAULT_DIRECTORY = "Microsoft Visual Studio 14.0"
VS140_VERSION = "14.0"


class ReleaseType(Enum):
    """Release channel of an instance; primary ranking key."""

    STABLE = "stable"
    PRERELEASE = "prerelease"
    LEGACY = "legacy"

    @property
    def weight(self) -> int:
        """Preference weight, higher is preferred."""
        return _RELEASE_WEIGHTS[self]


_RELEASE_WEIGHTS = {
    ReleaseType.STABLE: 3,
    ReleaseType.PRERELEASE: 2,
    ReleaseType.LEGACY: 1,
}


class Generation(Enum):
    """Directory layout family of an instance."""

    MODERN = "15"  # VS 2017: VC/Tools/MSVC/<version> side-by-side toolchains
    LEGACY_MID = "14"  # VS 2015
    LEGACY_OLD = "12"  # VS 2013
    UNKNOWN = ""

    @classmethod
    def from_version(cls, version: str) -> "Generation":
        """
        Classify a version string by its first two characters.

        This is a naming convention, not a parsed version number: "15.9.4"
        and "150" both classify as MODERN, "9.0" as UNKNOWN.

        Args:
            version: Installation version text (e.g., "15.9.28307.1321")

        Returns:
            Matching Generation, or UNKNOWN
        """
        major = version[:2]
        for generation in cls:
            if generation is not cls.UNKNOWN and generation.value == major:
                return generation
        return cls.UNKNOWN


@dataclass(frozen=True)
class VisualStudioInstance:
    """
    A discovered Visual Studio installation, not yet validated.

    Attributes:
        root_path: Installation root directory
        version: Installation version text as reported (e.g., "15.9.28307.1321")
        release_type: Stable, prerelease or legacy channel
        generation: Layout family, derived from version once at construction
    """

    root_path: Path
    version: str
    release_type: ReleaseType
    generation: Generation = field(init=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "root_path", Path(self.root_path))
        object.__setattr__(self, "generation", Generation.from_version(self.version))

    @property
    def major_version(self) -> str:
        """First two characters of the version text."""
        return self.version[:2]

    def __str__(self) -> str:
        return f"Visual Studio {self.version} ({self.release_type.value}) at {self.root_path}"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "root_path": str(self.root_path),
            "version": self.version,
            "release_type": self.release_type.value,
            "generation": self.generation.name.lower(),
        }


def parse_release_type(is_prerelease: Optional[str]) -> ReleaseType:
    """
    Map vswhere's optional isPrerelease flag to a release type.

    Args:
        is_prerelease: Flag text, or None when the tag is absent

    Returns:
        LEGACY when absent, STABLE for "0", PRERELEASE for "1"

    Raises:
        InternalConsistencyError: For any other flag value
    """
    if is_prerelease is None:
        return ReleaseType.LEGACY
    if is_prerelease == "0":
        return ReleaseType.STABLE
    if is_prerelease == "1":
        return ReleaseType.PRERELEASE
    raise InternalConsistencyError(
        f"Unexpected isPrerelease value from vswhere: {is_prerelease!r}"
    )


def parse_vswhere_output(output: str) -> List[VisualStudioInstance]:
    """
    Extract instances from vswhere's XML output.

    Args:
        output: Captured output of vswhere -format xml

    Returns:
        One instance per <instance> record, in output order

    Raises:
        VswhereOutputError: If a record lacks installationPath or installationVersion
        InternalConsistencyError: If isPrerelease holds an unexpected value
    """
    instances = []

    for record in find_all_enclosed(output, "<instance>", "</instance>"):
        release_type = parse_release_type(
            find_at_most_one_enclosed(record, "<isPrerelease>", "</isPrerelease>")
        )
        root_path = find_exactly_one_enclosed(
            record, "<installationPath>", "</installationPath>"
        )
        version = find_exactly_one_enclosed(
            record, "<installationVersion>", "</installationVersion>"
        )

        instance = VisualStudioInstance(Path(root_path), version, release_type)
        logger.debug(f"vswhere reported {instance}")
        instances.append(instance)

    return instances


class InstanceEnumerator:
    """
    Collects Visual Studio installation candidates.

    Orchestrates the vswhere query and the VS 2015 probes. The result is
    unordered; see toolsetkit.toolchain.ranking for preference order.
    """

    def __init__(
        self,
        filesystem: Filesystem,
        runner: ProcessRunner,
        environ: Mapping[str, str],
        program_files_x86: Path,
    ):
        """
        Initialize enumerator.

        Args:
            filesystem: Filesystem probes
            runner: Process execution for vswhere
            environ: Environment variable lookup
            program_files_x86: 32-bit Program Files directory
        """
        self.filesystem = filesystem
        self.runner = runner
        self.environ = environ
        self.program_files_x86 = Path(program_files_x86)

    def enumerate(self) -> List[VisualStudioInstance]:
        """
        Enumerate all candidates.

        Returns:
            Instances in discovery order (vswhere, VS140COMNTOOLS, default path)

        Raises:
            VswhereError: If vswhere exits with a non-zero status
        """
        instances = self._from_vswhere()

        comntools = self.environ.get(VS140_COMNTOOLS_VARIABLE)
        if comntools:
            # The root is two or three levels up, depending on whether the
            # value ends with a separator. Try both.
            common7_tools = Path(comntools)
            self._append_if_has_cl(instances, common7_tools.parent.parent)
            self._append_if_has_cl(instances, common7_tools.parent.parent.parent)

        self._append_if_has_cl(
            instances, self.program_files_x86 / VS140_DEFAULT_DIRECTORY
        )

        logger.info(f"Found {len(instances)} Visual Studio instance(s)")
        return instances

    def _from_vswhere(self) -> List[VisualStudioInstance]:
        vswhere_exe = self.program_files_x86 / VSWHERE_RELATIVE_PATH
        if not self.filesystem.exists(vswhere_exe):
            logger.debug(f"vswhere not found at {vswhere_exe}")
            return []

        result = self.runner.run([str(vswhere_exe)] + VSWHERE_ARGUMENTS)
        if result.exit_code != 0:
            raise VswhereError(result.exit_code, result.output)

        return parse_vswhere_output(result.output)

    def _append_if_has_cl(self, instances: List[VisualStudioInstance], root: Path):
        cl_exe = root / "VC" / "bin" / "cl.exe"
        vcvarsall_bat = root / "VC" / "vcvarsall.bat"

        if self.filesystem.exists(cl_exe) and self.filesystem.exists(vcvarsall_bat):
            instance = VisualStudioInstance(root, VS140_VERSION, ReleaseType.LEGACY)
            logger.debug(f"Found VS 2015 candidate: {instance}")
            instances.append(instance)
        else:
            logger.debug(f"No VS 2015 compiler under {root}")


def enumerate_instances(
    filesystem: Filesystem,
    runner: ProcessRunner,
    environ: Mapping[str, str],
    program_files_x86: Path,
) -> List[VisualStudioInstance]:
    """
    Enumerate Visual Studio installation candidates.

    Convenience wrapper around InstanceEnumerator.

    Returns:
        Unordered list of instances
    """
    return InstanceEnumerator(filesystem, runner, environ, program_files_x86).enumerate()
