"""SourceFinder - memoized import path to source file lookup.

The finder owns the manifest and the resolution cache, so each instance is an
isolated resolution context. The manifest is read lazily on the first request
and kept once it loads; a failed load is retried on the next request.
Successful resolutions are cached for the lifetime of the finder; failures are
not, so a request can succeed after the environment is fixed.

Not thread-safe: callers sharing one finder across threads must serialize
access themselves.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from collections.abc import Mapping
from pathlib import Path

from ..settings import FinderSettings
from .collector import SourceCollector
from .collector import collect_source_files
from .manifest import read_manifest
from .models import ManifestFile
from .probe import ToolchainProbe
from .resolver import PathResolver
from .roots import CandidateRootEnumerator

logger = logging.getLogger(__name__)


class SourceFinder:
    """Resolves import paths to source files, caching successful lookups."""

    def __init__(
        self,
        settings: FinderSettings | None = None,
        *,
        start_dir: Path | None = None,
        environ: Mapping[str, str] | None = None,
        home: Callable[[], Path] | None = None,
        probe: ToolchainProbe | None = None,
        collector: SourceCollector = collect_source_files,
    ):
        """Initialize finder.

        Args:
            settings: Finder settings (defaults when omitted)
            start_dir: Directory the manifest search starts from (default: cwd at first use)
            environ: Environment mapping for root enumeration
            home: Home directory lookup for root enumeration
            probe: Toolchain probe for root enumeration
            collector: Lists source files of a resolved directory
        """
        self.settings = settings or FinderSettings()
        self.start_dir = start_dir
        self.enumerator = CandidateRootEnumerator(self.settings, environ=environ, home=home, probe=probe)
        self.collector = collector
        self._manifest_file: ManifestFile | None = None
        self._resolver: PathResolver | None = None
        self._cache: dict[str, list[Path]] = {}

    @property
    def manifest_file(self) -> ManifestFile:
        """The parsed manifest, read on first access."""
        if self._manifest_file is None:
            self._manifest_file = read_manifest(
                self.start_dir,
                filename=self.settings.manifest_filename,
                max_depth=self.settings.max_manifest_depth,
            )
        return self._manifest_file

    @property
    def resolver(self) -> PathResolver:
        if self._resolver is None:
            self._resolver = PathResolver(
                self.manifest_file,
                self.enumerator,
                segment_boundary=self.settings.segment_boundary_match,
            )
        return self._resolver

    def resolve_directory(self, import_path: str) -> Path:
        """Resolve import_path to its package directory (uncached)."""
        return self.resolver.resolve_directory(import_path)

    def get_package_source_files(self, import_path: str) -> list[Path]:
        """Return the source files implementing import_path.

        Raises:
            SourceFinderError: Any resolution failure; nothing is cached
        """
        if import_path in self._cache:
            logger.debug(f"[cache] hit {import_path}")
            return list(self._cache[import_path])

        directory = self.resolve_directory(import_path)
        sources = self.collector(directory, self.settings.source_extension)
        self._cache[import_path] = sources
        logger.debug(f"[cache] stored {import_path} ({len(sources)} file(s))")
        return list(sources)

    def cached_paths(self) -> list[str]:
        """Import paths resolved so far, in resolution order."""
        return list(self._cache)

    def __repr__(self) -> str:
        return f"SourceFinder(cached={len(self._cache)})"
