"""
Pytest configuration and shared fixtures for ToolsetKit tests.
"""

import logging

import pytest
from pathlib import Path

# Import test fixtures to make them available to all tests
# These imports register the fixtures with pytest's fixture discovery system
# ruff: noqa: F401
from tests.fixtures.visual_studio import (
    program_files,
    filesystem,
    vs2017_root,
    vs2015_root,
)


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests against the real Visual Studio installation",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --integration flag is provided."""
    if not config.getoption("--integration"):
        skip_integration = pytest.mark.skip(reason="need --integration option to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo logging.basicConfig(force=True) calls made by the CLI."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def clean_environ() -> dict:
    """Environment mapping with no Visual Studio variables set."""
    return {}


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    """Create sample toolsetkit.yaml configuration."""
    config_file = tmp_path / "toolsetkit.yaml"
    config_file.write_text(
        """version: 1
discovery:
  program_files_x86: "D:/Program Files (x86)"
  halt_on_legacy_exclusion: false
"""
    )
    return config_file
