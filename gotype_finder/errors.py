"""Error taxonomy for source resolution.

Every failure raised by the finder derives from SourceFinderError and carries
the context needed to diagnose it (the failing path, the attempted operation).
"""

from __future__ import annotations

from pathlib import Path


class SourceFinderError(Exception):
    """Base class for all source resolution errors."""


class ManifestNotFoundError(SourceFinderError):
    """Raised when no module manifest exists above the start directory."""

    def __init__(self, start_dir: Path, max_depth: int, filename: str = "go.mod", inspected: int | None = None):
        self.start_dir = start_dir
        self.max_depth = max_depth
        self.filename = filename
        self.inspected = inspected if inspected is not None else max_depth
        super().__init__(
            f"no {filename} file found in {start_dir} or the {self.inspected - 1} directories above it "
            f"(search limit {max_depth})"
        )


class ManifestParseError(SourceFinderError):
    """Raised when a manifest cannot be read or parsed."""

    def __init__(self, source: str | Path, reason: str, line: int | None = None):
        self.source = str(source)
        self.reason = reason
        self.line = line
        location = f"{self.source}:{line}" if line is not None else self.source
        super().__init__(f"cannot parse {location}: {reason}")


class PackageNotResolvableError(SourceFinderError):
    """Raised when an import path maps to no existing directory."""

    def __init__(self, import_path: str, module_path: str, detail: str | None = None):
        self.import_path = import_path
        self.module_path = module_path
        self.detail = detail
        message = f"package {import_path!r} cannot be found from module {module_path!r}"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class DirectoryTraversalError(SourceFinderError):
    """Raised when a package directory cannot be listed."""

    def __init__(self, directory: Path, reason: str | None = None):
        self.directory = directory
        message = f"error while listing {directory}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class EnvironmentLookupError(SourceFinderError):
    """Raised when the process environment cannot answer a required question."""

    def __init__(self, what: str, reason: str | None = None):
        self.what = what
        message = f"cannot determine {what}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ConfigurationError(SourceFinderError):
    """Raised when a settings file is unreadable or holds invalid values."""

    def __init__(self, source: str | Path, reason: str):
        self.source = str(source)
        self.reason = reason
        super().__init__(f"invalid settings in {self.source}: {reason}")
