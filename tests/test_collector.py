"""Tests for source file collection."""

from pathlib import Path

import pytest

from gotype_finder.errors import DirectoryTraversalError
from gotype_finder.resolution.collector import collect_source_files


def test_does_not_descend_into_subdirectories(tmp_path: Path, make_package):
    pkg = make_package(tmp_path / "pkg", "a.go", "b.go")
    make_package(pkg / "sub", "c.go")

    files = collect_source_files(pkg)

    assert sorted(f.name for f in files) == ["a.go", "b.go"]


def test_filters_by_extension(tmp_path: Path, make_package):
    pkg = make_package(tmp_path / "pkg", "a.go", "a_test.go", "README.md", "doc.go.txt")

    files = collect_source_files(pkg)

    assert sorted(f.name for f in files) == ["a.go", "a_test.go"]


def test_directory_with_source_extension_is_skipped(tmp_path: Path, make_package):
    pkg = make_package(tmp_path / "pkg", "a.go")
    (pkg / "vendor.go").mkdir()

    assert [f.name for f in collect_source_files(pkg)] == ["a.go"]


def test_custom_extension(tmp_path: Path, make_package):
    pkg = make_package(tmp_path / "pkg", "a.go", "b.gox")

    assert [f.name for f in collect_source_files(pkg, ".gox")] == ["b.gox"]


def test_returns_absolute_paths(tmp_path: Path, make_package, monkeypatch):
    make_package(tmp_path / "pkg", "a.go")
    monkeypatch.chdir(tmp_path)

    files = collect_source_files(Path("pkg"))

    assert len(files) == 1
    assert files[0].is_absolute()
    assert files[0].samefile(tmp_path / "pkg" / "a.go")


def test_empty_directory(tmp_path: Path):
    (tmp_path / "empty").mkdir()

    assert collect_source_files(tmp_path / "empty") == []


def test_missing_directory_raises(tmp_path: Path):
    with pytest.raises(DirectoryTraversalError) as exc_info:
        collect_source_files(tmp_path / "missing")

    assert exc_info.value.directory == tmp_path / "missing"
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_file_instead_of_directory_raises(tmp_path: Path):
    (tmp_path / "file.go").write_text("package x\n")

    with pytest.raises(DirectoryTraversalError):
        collect_source_files(tmp_path / "file.go")
