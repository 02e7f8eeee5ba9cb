"""Pytest configuration for gotype-finder tests."""

from pathlib import Path
from textwrap import dedent

import pytest

from gotype_finder.settings import FinderSettings


@pytest.fixture
def isolated_env(tmp_path: Path, monkeypatch):
    """Strip Go variables from the environment and point HOME into tmp_path."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.delenv("GOHOME", raising=False)
    monkeypatch.delenv("GOROOT", raising=False)
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def offline_settings(tmp_path: Path) -> FinderSettings:
    """Settings whose system root does not exist and whose probe is disabled."""
    return FinderSettings(system_root=tmp_path / "no-system-go" / "src", probe_command=[])


@pytest.fixture
def write_go_mod():
    """Write a go.mod file into a directory, creating it if needed."""

    def _write(directory: Path, content: str) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / "go.mod"
        path.write_text(dedent(content).lstrip(), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_package():
    """Create a package directory holding the given file names."""

    def _make(directory: Path, *names: str) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        for name in names:
            (directory / name).write_text("package x\n", encoding="utf-8")
        return directory

    return _make
