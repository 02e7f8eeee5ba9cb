"""Candidate root enumeration for module sources.

Resolution order for a module identity (first existing directory wins):
1. $GOHOME/pkg/mod/<path>@<version>
2. ~/go/pkg/mod/<path>@<version>
3. $GOROOT/src
4. Probed toolchain installation (<root>/src)
5. System installation (/usr/local/go/src)
6. $GOHOME/src/mod/<path>@<version>

The standard library is requested with identity None; version-qualified
candidates (1, 2 and 6) are skipped for it.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from collections.abc import Iterator
from collections.abc import Mapping
from pathlib import Path

from ..errors import EnvironmentLookupError
from ..settings import FinderSettings
from .models import ModuleVersion
from .probe import ToolchainProbe
from .probe import make_command_probe

logger = logging.getLogger(__name__)


def escape_module_path(path: str) -> str:
    """Escape a module path the way the module cache stores it on disk.

    Upper-case letters become '!' followed by the lower-case letter, so
    'github.com/BurntSushi/toml' is stored as 'github.com/!burnt!sushi/toml'.
    """
    return "".join(f"!{ch.lower()}" if "A" <= ch <= "Z" else ch for ch in path)


def module_cache_segment(identity: ModuleVersion) -> str:
    """Version-qualified directory segment for a module ('path@version')."""
    return f"{escape_module_path(identity.path)}@{identity.version}"


class CandidateRootEnumerator:
    """Enumerates directories that may hold a module's extracted source tree."""

    def __init__(
        self,
        settings: FinderSettings | None = None,
        *,
        environ: Mapping[str, str] | None = None,
        home: Callable[[], Path] | None = None,
        probe: ToolchainProbe | None = None,
    ):
        """Initialize enumerator.

        Args:
            settings: Finder settings (variable names, system path, probe command)
            environ: Environment mapping (default: os.environ)
            home: Callable returning the user's home directory (default: Path.home)
            probe: Toolchain probe (default: runs settings.probe_command)
        """
        self.settings = settings or FinderSettings()
        self.environ = environ if environ is not None else os.environ
        self._home = home or Path.home
        self.probe = probe or make_command_probe(self.settings.probe_command)

    def _home_dir(self) -> Path:
        try:
            return self._home()
        except (RuntimeError, KeyError, OSError) as e:
            raise EnvironmentLookupError("user home directory", str(e)) from e

    def iter_roots(self, identity: ModuleVersion | None) -> Iterator[Path]:
        """Yield candidate roots in priority order.

        Lazy: the home directory lookup and the toolchain probe only run when
        the caller asks for the candidates that need them.

        Raises:
            EnvironmentLookupError: Home directory cannot be determined
        """
        segment = module_cache_segment(identity) if identity is not None else None
        gohome = self.environ.get(self.settings.gohome_env)
        goroot = self.environ.get(self.settings.goroot_env)

        if segment is not None:
            if gohome:
                yield Path(gohome, "pkg", "mod", segment)
            yield self._home_dir() / "go" / "pkg" / "mod" / segment

        if goroot:
            yield Path(goroot, "src")

        if (installed := self.probe()) is not None:
            yield installed / "src"

        yield self.settings.system_root

        if segment is not None and gohome:
            yield Path(gohome, "src", "mod", segment)

    def enumerate_roots(self, identity: ModuleVersion | None) -> list[Path]:
        """Return every candidate root in priority order."""
        return list(self.iter_roots(identity))

    def find_root(self, identity: ModuleVersion | None) -> Path | None:
        """Return the first candidate root that exists as a directory."""
        label = str(identity) if identity is not None else "standard library"
        for candidate in self.iter_roots(identity):
            if candidate.is_dir():
                logger.debug(f"[roots] {label} -> {candidate}")
                return candidate
            logger.debug(f"[roots] {label}: {candidate} not found")
        return None
