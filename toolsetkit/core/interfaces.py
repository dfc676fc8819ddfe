"""
Core interfaces for ToolsetKit.

This module defines the narrow capabilities the discovery pipeline depends on:
filesystem probes and process execution. The pipeline only talks to these
interfaces, so tests and embedders can supply their own implementations.
"""

import logging
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence

logger = logging.getLogger(__name__)


class Filesystem(ABC):
    """Read-only filesystem probes."""

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """
        Check whether a file or directory exists.

        Args:
            path: Path to check

        Returns:
            True if the path exists
        """
        pass

    @abstractmethod
    def is_directory(self, path: Path) -> bool:
        """
        Check whether a path is an existing directory.

        Args:
            path: Path to check

        Returns:
            True if the path is a directory
        """
        pass

    @abstractmethod
    def list_children(self, path: Path) -> List[Path]:
        """
        List the immediate children of a directory.

        Args:
            path: Directory to list

        Returns:
            Child paths, or an empty list if the directory does not exist
        """
        pass


@dataclass(frozen=True)
class CommandResult:
    """Exit code and combined output of a finished process."""

    exit_code: int
    output: str


class ProcessRunner(ABC):
    """Runs an external process to completion and captures its output."""

    @abstractmethod
    def run(self, args: Sequence[str]) -> CommandResult:
        """
        Run a command and wait for it to finish.

        Args:
            args: Program path followed by its arguments

        Returns:
            CommandResult with exit code and captured output
        """
        pass


class LocalFilesystem(Filesystem):
    """Filesystem probes backed by pathlib."""

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def is_directory(self, path: Path) -> bool:
        return Path(path).is_dir()

    def list_children(self, path: Path) -> List[Path]:
        path = Path(path)
        if not path.is_dir():
            logger.debug(f"Cannot list missing directory: {path}")
            return []
        return list(path.iterdir())


class SubprocessRunner(ProcessRunner):
    """
    Process execution backed by subprocess.run.

    stdout and stderr are merged into a single output string. No timeout is
    applied; the call blocks until the process exits.
    """

    def run(self, args: Sequence[str]) -> CommandResult:
        command = [str(arg) for arg in args]
        logger.debug(f"Running: {' '.join(command)}")

        result = subprocess.run(
            command,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            check=False,
        )

        logger.debug(f"{command[0]} exited with {result.returncode}")
        return CommandResult(exit_code=result.returncode, output=result.stdout or "")


__all__ = [
    "Filesystem",
    "ProcessRunner",
    "CommandResult",
    "LocalFilesystem",
    "SubprocessRunner",
]
