"""
Reporting of resolution results.

Excluded toolsets are surfaced as a warning. An empty result is fatal and
lists every path that was examined so the user can see what is missing.
"""

import logging
from typing import List

from toolsetkit.core.exceptions import NoToolsetFoundError
from toolsetkit.toolchain.resolver import ResolutionOutcome
from toolsetkit.toolchain.toolset import Toolset

logger = logging.getLogger(__name__)


def report(outcome: ResolutionOutcome) -> List[Toolset]:
    """
    Report a resolution outcome and return its toolsets.

    Args:
        outcome: Result of ToolsetResolver.resolve

    Returns:
        Found toolsets, preferred-first

    Raises:
        NoToolsetFoundError: If no complete toolset was found
    """
    if outcome.excluded:
        lines = [
            "The following VS instances are excluded because the English "
            "language pack is unavailable."
        ]
        lines.extend(
            f"    {toolset.visual_studio_root_path}" for toolset in outcome.excluded
        )
        lines.append("Please install the English language pack.")
        logger.warning("\n".join(lines))

    if not outcome.found:
        lines = ["Could not locate a complete toolset."]
        lines.append("The following paths were examined:")
        lines.extend(f"    {path}" for path in outcome.paths_examined)
        logger.error("\n".join(lines))
        raise NoToolsetFoundError(outcome.paths_examined)

    return list(outcome.found)
