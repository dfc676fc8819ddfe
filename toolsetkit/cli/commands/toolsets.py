"""
List command implementation.

Discovers MSVC toolsets and prints them preferred-first.
"""

import logging

from toolsetkit.cli.utils import load_cli_config, print_json, safe_print
from toolsetkit.toolchain.visual_studio import find_toolset_instances_preferred_first

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the list command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    config = load_cli_config(args)

    toolsets = find_toolset_instances_preferred_first(
        program_files_x86=config.discovery.program_files_x86,
        halt_on_legacy_exclusion=config.discovery.halt_on_legacy_exclusion,
    )

    if args.json:
        print_json([toolset.to_dict() for toolset in toolsets])
        return 0

    for toolset in toolsets:
        safe_print(f"{toolset.version}  {toolset.visual_studio_root_path}")
        options = " ".join(toolset.vcvarsall_options)
        safe_print(f"    vcvarsall: {toolset.vcvarsall} {options}".rstrip())
        safe_print(f"    dumpbin:   {toolset.dumpbin}")
        architectures = ", ".join(
            option.name for option in toolset.supported_architectures
        )
        safe_print(f"    architectures: {architectures or '(none)'}")

    return 0
