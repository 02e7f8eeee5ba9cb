"""Best-effort discovery of an installed Go toolchain.

A probe is any callable returning the toolchain installation root, or None
when it cannot tell. The default runs ``whereis go`` and walks two
directories up from the reported binary (``<root>/bin/go`` -> ``<root>``).
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)

ToolchainProbe = Callable[[], Path | None]

DEFAULT_PROBE_COMMAND = ("whereis", "go")


def parse_probe_output(output: str) -> Path | None:
    """Extract the installation root from probe output.

    Accepts both a bare binary path (``which``) and the labelled form
    printed by ``whereis`` (``go: /usr/local/go/bin/go /usr/share/...``).
    """
    lines = output.splitlines()
    if not lines:
        return None
    line = lines[0].strip()

    label, sep, rest = line.partition(":")
    if sep and " " not in label and "/" not in label:
        line = rest.strip()

    parts = line.split()
    if not parts:
        return None
    return Path(parts[0]).parent.parent


def probe_installed_toolchain(command: Sequence[str] = DEFAULT_PROBE_COMMAND) -> Path | None:
    """Ask the operating system where the toolchain binary lives.

    Never raises; any failure yields None. An empty command disables probing.
    """
    if not command:
        return None
    try:
        result = subprocess.run(list(command), capture_output=True, text=True)
    except OSError as e:
        logger.debug(f"[probe] {' '.join(command)} failed to start: {e}")
        return None

    if result.returncode != 0:
        logger.debug(f"[probe] {' '.join(command)} exited with {result.returncode}")
        return None

    root = parse_probe_output(result.stdout)
    if root is None:
        logger.debug(f"[probe] {' '.join(command)} reported no toolchain")
    return root


def make_command_probe(command: Sequence[str]) -> ToolchainProbe:
    """Bind a probe command into a ToolchainProbe."""
    bound = tuple(command)

    def probe() -> Path | None:
        return probe_installed_toolchain(bound)

    return probe
