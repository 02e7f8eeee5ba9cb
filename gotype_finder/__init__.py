"""gotype-finder - locate the Go sources behind an import path."""

from .errors import ConfigurationError
from .errors import DirectoryTraversalError
from .errors import EnvironmentLookupError
from .errors import ManifestNotFoundError
from .errors import ManifestParseError
from .errors import PackageNotResolvableError
from .errors import SourceFinderError
from .resolution import PackageSourceFinder
from .resolution import SourceFinder
from .settings import FinderSettings
from .settings import load_settings

__all__ = [
    "ConfigurationError",
    "DirectoryTraversalError",
    "EnvironmentLookupError",
    "FinderSettings",
    "ManifestNotFoundError",
    "ManifestParseError",
    "PackageNotResolvableError",
    "PackageSourceFinder",
    "SourceFinder",
    "SourceFinderError",
    "load_settings",
]
