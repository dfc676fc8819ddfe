"""
Platform locations for ToolsetKit.

Visual Studio installs its installer and legacy suites under the 32-bit
Program Files directory. This module resolves that directory from the
process environment.

Usage:
    from toolsetkit.core.platform import get_program_files_32_bit

    program_files_x86 = get_program_files_32_bit()
    print(program_files_x86 / "Microsoft Visual Studio")
"""

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from toolsetkit.core.exceptions import PlatformError

logger = logging.getLogger(__name__)

# 64-bit Windows sets ProgramFiles(x86); 32-bit Windows only has ProgramFiles.
PROGRAM_FILES_VARIABLES = ("ProgramFiles(x86)", "ProgramFiles")


def get_program_files_32_bit(environ: Optional[Mapping[str, str]] = None) -> Path:
    """
    Resolve the 32-bit Program Files directory.

    Args:
        environ: Environment mapping (default: os.environ)

    Returns:
        Path to the 32-bit Program Files directory

    Raises:
        PlatformError: If no Program Files variable is set
    """
    if environ is None:
        environ = os.environ

    for name in PROGRAM_FILES_VARIABLES:
        value = environ.get(name)
        if value:
            logger.debug(f"Program Files (x86) from {name}: {value}")
            return Path(value)

    raise PlatformError(
        "Could not determine the 32-bit Program Files directory "
        f"(none of {', '.join(PROGRAM_FILES_VARIABLES)} is set)"
    )
