"""Protocol consumed by the type generator."""

from pathlib import Path
from typing import Protocol
from typing import runtime_checkable


@runtime_checkable
class PackageSourceFinder(Protocol):
    """Maps an import path to the source files implementing it.

    Files come back in filesystem enumeration order. An error is final for
    that import path; implementations do not retry internally.
    """

    def get_package_source_files(self, import_path: str) -> list[Path]: ...
