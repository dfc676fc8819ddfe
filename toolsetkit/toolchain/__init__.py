"""
Toolset discovery module for ToolsetKit.

This module provides functionality for:
- Visual Studio instance enumeration (vswhere, VS 2015 probes)
- Preference ranking of instances
- Toolset resolution and validation
- Reporting of excluded and missing toolsets
"""

from toolsetkit.toolchain.instances import (
    Generation,
    InstanceEnumerator,
    ReleaseType,
    VisualStudioInstance,
    enumerate_instances,
    parse_vswhere_output,
)
from toolsetkit.toolchain.ranking import is_preferred, rank_instances
from toolsetkit.toolchain.reporter import report
from toolsetkit.toolchain.resolver import (
    ExclusionAction,
    ResolutionOutcome,
    ToolsetResolver,
)
from toolsetkit.toolchain.toolset import (
    V120,
    V140,
    V141,
    CPUArchitecture,
    Toolset,
    ToolsetArchOption,
)
from toolsetkit.toolchain.visual_studio import (
    find_toolset_instances_preferred_first,
    get_visual_studio_instances,
)

__all__ = [
    # Instances
    "Generation",
    "InstanceEnumerator",
    "ReleaseType",
    "VisualStudioInstance",
    "enumerate_instances",
    "parse_vswhere_output",
    # Ranking
    "is_preferred",
    "rank_instances",
    # Resolution
    "ExclusionAction",
    "ResolutionOutcome",
    "ToolsetResolver",
    "report",
    # Toolsets
    "V120",
    "V140",
    "V141",
    "CPUArchitecture",
    "Toolset",
    "ToolsetArchOption",
    # Discovery
    "find_toolset_instances_preferred_first",
    "get_visual_studio_instances",
]
