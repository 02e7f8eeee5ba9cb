"""Settings for gotype-finder.

Settings live in the ``finder`` section of scope-aware YAML files.

Scope priority (most specific wins):
1. explicit file passed by the caller (e.g. ``--settings``)
2. project (.gotype-finder/settings.yaml)
3. global (~/.gotype-finder/settings.yaml)

Every key is optional; defaults mirror the standard Go toolchain layout.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import ValidationError

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

SETTINGS_SECTION = "finder"


class FinderSettings(BaseModel):
    """Resolution knobs for the source finder."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    manifest_filename: str = Field(default="go.mod", min_length=1, description="Module manifest file name")
    max_manifest_depth: int = Field(default=15, ge=1, description="Directories inspected while searching upward")
    source_extension: str = Field(default=".go", min_length=1, description="Extension of collected source files")
    gohome_env: str = Field(default="GOHOME", description="Variable naming the module cache base directory")
    goroot_env: str = Field(default="GOROOT", description="Variable naming the toolchain root directory")
    system_root: Path = Field(default=Path("/usr/local/go/src"), description="Well-known toolchain source path")
    probe_command: list[str] = Field(
        default_factory=lambda: ["whereis", "go"], description="Command printing the toolchain binary location"
    )
    segment_boundary_match: bool = Field(
        default=False, description="Match module prefixes only on path-segment boundaries"
    )


@dataclass
class SettingsPaths:
    """Standard paths for settings files."""

    global_settings: Path | None
    project_settings: Path | None

    @classmethod
    def default(cls, project_dir: Path | None = None) -> SettingsPaths:
        """Create default paths for the standard layout.

        Args:
            project_dir: Directory holding the project scope (default: cwd)

        The global scope is dropped when the home directory cannot be determined.
        """
        try:
            global_settings: Path | None = Path.home() / ".gotype-finder" / "settings.yaml"
        except RuntimeError:
            global_settings = None
        return cls(
            global_settings=global_settings,
            project_settings=(project_dir or Path.cwd()) / ".gotype-finder" / "settings.yaml",
        )

    def in_priority_order(self) -> list[Path]:
        """Least specific first, so later files override earlier ones."""
        return [p for p in (self.global_settings, self.project_settings) if p is not None]


def _read_section(path: Path) -> dict[str, Any]:
    """Read the finder section from one YAML file."""
    try:
        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigurationError(path, f"cannot read file ({e})") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(path, f"malformed YAML ({e})") from e

    if not isinstance(content, dict):
        raise ConfigurationError(path, "top level must be a mapping")

    section = content.get(SETTINGS_SECTION) or {}
    if not isinstance(section, dict):
        raise ConfigurationError(path, f"'{SETTINGS_SECTION}' must be a mapping")
    return section


def load_settings(paths: SettingsPaths | None = None, extra: Path | None = None) -> FinderSettings:
    """Load and merge settings from all scopes.

    Args:
        paths: Scope paths (defaults to SettingsPaths.default())
        extra: Optional file layered on top of every scope

    Returns:
        Validated FinderSettings

    Raises:
        ConfigurationError: A file is unreadable, malformed, or holds invalid values
    """
    paths = paths or SettingsPaths.default()
    candidates = paths.in_priority_order()
    if extra is not None:
        if not extra.exists():
            raise ConfigurationError(extra, "file does not exist")
        candidates.append(extra)

    merged: dict[str, Any] = {}
    for path in candidates:
        if not path.exists():
            continue
        section = _read_section(path)
        # Every key has a default, so each file validates on its own
        try:
            FinderSettings(**section)
        except ValidationError as e:
            raise ConfigurationError(path, str(e)) from e
        merged.update(section)
        logger.debug(f"[settings] loaded {path}")

    return FinderSettings(**merged)
