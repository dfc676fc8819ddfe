"""
Instances command implementation.

Prints discovered Visual Studio instances preferred-first, without
validating their toolsets.
"""

import logging

from toolsetkit.cli.utils import load_cli_config, print_json, safe_print
from toolsetkit.toolchain.visual_studio import get_visual_studio_instances

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the instances command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 if no instance was found)
    """
    config = load_cli_config(args)

    instances = get_visual_studio_instances(
        program_files_x86=config.discovery.program_files_x86
    )

    if args.json:
        print_json([instance.to_dict() for instance in instances])
        return 0

    if not instances:
        logger.error("No Visual Studio instances found")
        return 1

    for instance in instances:
        safe_print(str(instance))

    return 0
