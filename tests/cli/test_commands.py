"""
Tests for CLI command implementations, run end to end against a fake layout.
"""

import json

import pytest

from toolsetkit.cli.parser import CLI
from tests.fixtures.visual_studio import make_legacy


@pytest.fixture
def installed(tmp_path, monkeypatch):
    """Program Files (x86) with VS 2015 in its default location."""
    program_files = tmp_path / "Program Files (x86)"
    root = make_legacy(
        program_files / "Microsoft Visual Studio 14.0",
        architectures=["vcvars32.bat", "amd64/vcvars64.bat"],
    )
    monkeypatch.setenv("ProgramFiles(x86)", str(program_files))
    monkeypatch.delenv("VS140COMNTOOLS", raising=False)
    monkeypatch.chdir(tmp_path)
    return root


def test_list(installed, capsys):
    result = CLI().run(["list"])

    assert result == 0
    out = capsys.readouterr().out
    assert "v140" in out
    assert str(installed) in out
    assert "x86, x64" in out


def test_list_json(installed, capsys):
    result = CLI().run(["-q", "list", "--json"])

    assert result == 0
    data = json.loads(capsys.readouterr().out)
    assert len(data) == 1
    assert data[0]["version"] == "v140"
    assert data[0]["visual_studio_root_path"] == str(installed)


def test_list_nothing_found(tmp_path, monkeypatch):
    monkeypatch.setenv("ProgramFiles(x86)", str(tmp_path))
    monkeypatch.delenv("VS140COMNTOOLS", raising=False)
    monkeypatch.chdir(tmp_path)

    assert CLI().run(["list"]) == 1


def test_list_uses_config(tmp_path, monkeypatch, capsys):
    program_files = tmp_path / "custom"
    make_legacy(program_files / "Microsoft Visual Studio 14.0")
    config_file = tmp_path / "tsk.yaml"
    config_file.write_text(f"version: 1\ndiscovery:\n  program_files_x86: '{program_files}'\n")
    monkeypatch.delenv("ProgramFiles(x86)", raising=False)
    monkeypatch.delenv("ProgramFiles", raising=False)
    monkeypatch.delenv("VS140COMNTOOLS", raising=False)

    result = CLI().run(["--config", str(config_file), "list", "--json"])

    assert result == 0
    assert json.loads(capsys.readouterr().out)[0]["version"] == "v140"


def test_invalid_config(tmp_path, monkeypatch):
    config_file = tmp_path / "toolsetkit.yaml"
    config_file.write_text("version: 3\n")
    monkeypatch.chdir(tmp_path)

    assert CLI().run(["list"]) == 1


def test_instances(installed, capsys):
    result = CLI().run(["instances"])

    assert result == 0
    assert "14.0" in capsys.readouterr().out


def test_instances_json(installed, capsys):
    result = CLI().run(["-q", "instances", "--json"])

    assert result == 0
    data = json.loads(capsys.readouterr().out)
    assert data == [
        {
            "root_path": str(installed),
            "version": "14.0",
            "release_type": "legacy",
            "generation": "legacy_mid",
        }
    ]


def test_instances_none_found(tmp_path, monkeypatch):
    monkeypatch.setenv("ProgramFiles(x86)", str(tmp_path))
    monkeypatch.delenv("VS140COMNTOOLS", raising=False)
    monkeypatch.chdir(tmp_path)

    assert CLI().run(["instances"]) == 1
