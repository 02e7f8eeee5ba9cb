"""Tests for the gotype-finder CLI."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from gotype_finder.main import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def project(tmp_path: Path, isolated_env, monkeypatch, write_go_mod, make_package):
    """A module with one dependency in a GOHOME cache and an offline toolchain."""
    repo = tmp_path / "repo"
    write_go_mod(
        repo,
        """
        module example.com/app

        go 1.22

        require (
            example.com/lib v1.2.0
            example.com/tool v0.3.0 // indirect
        )
        """,
    )
    make_package(repo / "internal" / "x", "b.go", "a.go")

    cache = tmp_path / "cache"
    make_package(cache / "pkg" / "mod" / "example.com" / "lib@v1.2.0" / "sub", "sub.go")
    monkeypatch.setenv("GOHOME", str(cache))

    settings = tmp_path / "settings.yaml"
    settings.write_text(f"finder:\n  system_root: {tmp_path / 'no-system-go'}\n  probe_command: []\n")

    return {"repo": repo, "cache": cache, "settings": settings}


def invoke(runner, project, *args):
    return runner.invoke(cli, ["--settings", str(project["settings"]), "-C", str(project["repo"]), *args])


def test_resolve_single_path(runner, project):
    result = invoke(runner, project, "resolve", "example.com/app/internal/x")

    assert result.exit_code == 0, result.output
    assert result.output.strip() == str(project["repo"] / "internal" / "x")


def test_resolve_multiple_paths(runner, project):
    result = invoke(runner, project, "resolve", "example.com/app/internal/x", "example.com/lib/sub")

    assert result.exit_code == 0, result.output
    lines = result.output.strip().splitlines()
    assert lines[0] == f"example.com/app/internal/x\t{project['repo'] / 'internal' / 'x'}"
    assert lines[1].startswith("example.com/lib/sub\t")
    assert lines[1].endswith(str(Path("example.com") / "lib@v1.2.0" / "sub"))


def test_resolve_unresolvable_exits_nonzero(runner, project):
    result = invoke(runner, project, "resolve", "unrelated.org/pkg")

    assert result.exit_code == 1
    assert "unrelated.org/pkg" in result.output


def test_files_sorted(runner, project):
    result = invoke(runner, project, "files", "--sort", "example.com/app/internal/x")

    assert result.exit_code == 0, result.output
    names = [Path(line).name for line in result.output.strip().splitlines()]
    assert names == ["a.go", "b.go"]


def test_files_missing_directory(runner, project):
    result = invoke(runner, project, "files", "example.com/app/missing")

    assert result.exit_code == 1
    assert "Error" in result.output


def test_manifest_command(runner, project):
    result = invoke(runner, project, "manifest")

    assert result.exit_code == 0, result.output
    assert "example.com/app" in result.output
    assert "1.22" in result.output
    assert "example.com/lib" in result.output
    assert "v0.3.0" in result.output


def test_manifest_not_found(runner, project, tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()

    result = runner.invoke(cli, ["--settings", str(project["settings"]), "-C", str(empty), "manifest"])

    assert result.exit_code == 1
    assert "go.mod" in result.output


def test_roots_uses_manifest_version(runner, project):
    result = invoke(runner, project, "roots", "example.com/lib")

    assert result.exit_code == 0, result.output
    assert "example.com/lib@v1.2.0" in result.output
    assert "selected" in result.output


def test_roots_for_unrequired_module(runner, project):
    result = invoke(runner, project, "roots", "example.com/unknown")

    assert result.exit_code == 1
    assert "not required" in result.output


def test_roots_standard_library_none_exist(runner, project):
    result = invoke(runner, project, "roots")

    assert result.exit_code == 0, result.output
    assert "standard library" in result.output
    assert "No candidate root exists" in result.output


def test_invalid_settings_file(runner, project, tmp_path):
    bad = tmp_path / "bad.yaml"
    bad.write_text("finder:\n  max_manifest_depth: -1\n")

    result = runner.invoke(cli, ["--settings", str(bad), "resolve", "x"])

    assert result.exit_code == 1
    assert "invalid settings" in result.output


def test_log_file_receives_debug_records(runner, project, tmp_path):
    import logging

    log_file = tmp_path / "logs" / "finder.jsonl"
    try:
        result = invoke(runner, project, "--log-file", str(log_file), "--log-level", "debug", "resolve", "example.com/lib/sub")
    finally:
        root = logging.getLogger()
        for handler in list(root.handlers):
            if handler.__class__.__name__ == "JsonlHandler":
                root.removeHandler(handler)
                handler.close()
        root.setLevel(logging.WARNING)

    assert result.exit_code == 0, result.output
    assert "[resolve] example.com/lib/sub" in log_file.read_text()


def test_project_settings_follow_chdir(runner, project, make_package):
    make_package(project["repo"] / "internal" / "x", "notes.gox")
    project_settings = project["repo"] / ".gotype-finder" / "settings.yaml"
    project_settings.parent.mkdir()
    project_settings.write_text("finder:\n  source_extension: .gox\n")

    result = invoke(runner, project, "files", "example.com/app/internal/x")

    assert result.exit_code == 0, result.output
    names = [Path(line).name for line in result.output.strip().splitlines()]
    assert names == ["notes.gox"]
