"""Import path to directory resolution.

Resolution order (first match wins):
1. Current module (manifest directory)
2. Required modules, in manifest declaration order
3. Standard library
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..errors import PackageNotResolvableError
from .models import ManifestFile
from .roots import CandidateRootEnumerator

logger = logging.getLogger(__name__)


class PathResolver:
    """Maps import paths onto directories using a parsed manifest."""

    def __init__(
        self,
        manifest_file: ManifestFile,
        enumerator: CandidateRootEnumerator,
        *,
        segment_boundary: bool = False,
    ):
        """Initialize resolver.

        Args:
            manifest_file: Parsed manifest and its location
            enumerator: Source of candidate roots for required modules
            segment_boundary: Only match module paths on '/' boundaries.
                Off by default: plain prefix matching lets 'example.com/apple'
                match module 'example.com/app'.
        """
        self.manifest_file = manifest_file
        self.enumerator = enumerator
        self.segment_boundary = segment_boundary

    @property
    def module_path(self) -> str:
        return self.manifest_file.manifest.module_path

    def strip_prefix(self, import_path: str, module_path: str) -> str | None:
        """Return import_path without module_path, or None if it does not match."""
        if not import_path.startswith(module_path):
            return None
        rest = import_path[len(module_path) :]
        if self.segment_boundary and rest and not rest.startswith("/"):
            return None
        return rest

    @staticmethod
    def _join(base: Path, rest: str) -> Path:
        rest = rest.strip("/")
        return base / rest if rest else base

    def resolve_directory(self, import_path: str) -> Path:
        """Resolve import_path to the directory holding its sources.

        The returned directory is not checked for existence; only the
        module root it lives under is.

        Raises:
            PackageNotResolvableError: No rule matched, or the matching module
                is not installed in any candidate root
            EnvironmentLookupError: Home directory needed but unavailable
        """
        if not import_path:
            raise PackageNotResolvableError(import_path, self.module_path, "empty import path")

        # Current module
        rest = self.strip_prefix(import_path, self.module_path)
        if rest is not None:
            directory = self._join(self.manifest_file.directory, rest)
            logger.debug(f"[resolve] {import_path} -> current module ({directory})")
            return directory

        # Required modules
        for requirement in self.manifest_file.manifest.requires:
            rest = self.strip_prefix(import_path, requirement.path)
            if rest is None:
                continue
            root = self.enumerator.find_root(requirement)
            if root is None:
                raise PackageNotResolvableError(
                    import_path,
                    self.module_path,
                    f"module {requirement} is not present in any candidate root",
                )
            directory = self._join(root, rest)
            logger.debug(f"[resolve] {import_path} -> {requirement} ({directory})")
            return directory

        # Standard library
        root = self.enumerator.find_root(None)
        if root is not None:
            directory = self._join(root, import_path)
            logger.debug(f"[resolve] {import_path} -> standard library ({directory})")
            return directory

        raise PackageNotResolvableError(import_path, self.module_path)
