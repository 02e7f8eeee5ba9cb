"""Tests for toolchain probing."""

import sys
from pathlib import Path

import pytest

from gotype_finder.resolution.probe import make_command_probe
from gotype_finder.resolution.probe import parse_probe_output
from gotype_finder.resolution.probe import probe_installed_toolchain


@pytest.mark.parametrize(
    ("output", "expected"),
    [
        ("/usr/local/go/bin/go\n", Path("/usr/local/go")),
        ("go: /usr/lib/go/bin/go /usr/share/man/man1/go.1.gz\n", Path("/usr/lib/go")),
        ("  /opt/go/bin/go  \nsecond line\n", Path("/opt/go")),
        ("go:\n", None),
        ("", None),
    ],
)
def test_parse_probe_output(output, expected):
    assert parse_probe_output(output) == expected


def test_probe_runs_command():
    command = [sys.executable, "-c", "print('/opt/toolchains/go/bin/go')"]

    assert probe_installed_toolchain(command) == Path("/opt/toolchains/go")


def test_probe_nonzero_exit_returns_none():
    command = [sys.executable, "-c", "import sys; print('/opt/go/bin/go'); sys.exit(3)"]

    assert probe_installed_toolchain(command) is None


def test_probe_missing_executable_returns_none(tmp_path: Path):
    assert probe_installed_toolchain([str(tmp_path / "no-such-binary")]) is None


def test_empty_command_disables_probe():
    assert probe_installed_toolchain([]) is None
    assert make_command_probe([])() is None
