"""Source file collection for a single package directory."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

from ..errors import DirectoryTraversalError

SourceCollector = Callable[[Path, str], list[Path]]


def collect_source_files(directory: Path, extension: str = ".go") -> list[Path]:
    """List source files directly inside directory.

    Subdirectories are distinct packages and are never descended into.
    Results follow filesystem enumeration order; sort if you need determinism.

    Args:
        directory: Package directory
        extension: Source file extension, including the dot

    Returns:
        Absolute paths of matching files

    Raises:
        DirectoryTraversalError: Directory missing or unreadable
    """
    directory = Path(directory).absolute()
    sources: list[Path] = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if entry.is_dir():
                    continue
                if entry.name.endswith(extension):
                    sources.append(directory / entry.name)
    except OSError as e:
        raise DirectoryTraversalError(directory, e.strerror or str(e)) from e
    return sources
