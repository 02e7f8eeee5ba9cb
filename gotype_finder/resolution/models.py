"""Pydantic models describing a parsed module manifest."""

from pathlib import Path

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class ModuleVersion(BaseModel):
    """A required module pinned to a version."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., min_length=1, description="Slash-separated module path")
    version: str = Field(..., min_length=1, description="Pinned version (e.g. 'v1.2.0')")
    indirect: bool = Field(default=False, description="Marked '// indirect' in the manifest")

    def __str__(self) -> str:
        return f"{self.path}@{self.version}"


class Manifest(BaseModel):
    """Module identity plus its requirements, in declaration order."""

    model_config = ConfigDict(frozen=True)

    module_path: str = Field(..., min_length=1, description="Path of the current module")
    go_version: str | None = Field(None, description="Language version from the 'go' directive")
    requires: tuple[ModuleVersion, ...] = Field(default=(), description="Required modules in declaration order")


class ManifestFile(BaseModel):
    """A manifest together with the file it was read from."""

    model_config = ConfigDict(frozen=True)

    manifest: Manifest
    path: Path

    @property
    def directory(self) -> Path:
        """Root directory of the current module."""
        return self.path.parent
