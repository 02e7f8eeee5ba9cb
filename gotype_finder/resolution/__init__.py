"""Go package source resolution.

Maps import paths onto the directories and files that implement them, using
the module manifest, the module cache and the toolchain installation.
"""

from .collector import collect_source_files
from .finder import SourceFinder
from .manifest import find_manifest
from .manifest import parse_manifest
from .manifest import read_manifest
from .models import Manifest
from .models import ManifestFile
from .models import ModuleVersion
from .probe import probe_installed_toolchain
from .protocols import PackageSourceFinder
from .resolver import PathResolver
from .roots import CandidateRootEnumerator

__all__ = [
    "CandidateRootEnumerator",
    "Manifest",
    "ManifestFile",
    "ModuleVersion",
    "PackageSourceFinder",
    "PathResolver",
    "SourceFinder",
    "collect_source_files",
    "find_manifest",
    "parse_manifest",
    "probe_installed_toolchain",
    "read_manifest",
]
