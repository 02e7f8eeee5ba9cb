"""Module manifest (go.mod) discovery and parsing.

The manifest is located by walking upward from the working directory, then
parsed into a Manifest. Only the directives that influence source resolution
are kept (module, go, require); the remaining known directives are accepted
and ignored so real-world manifests parse cleanly.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..errors import EnvironmentLookupError
from ..errors import ManifestNotFoundError
from ..errors import ManifestParseError
from .models import Manifest
from .models import ManifestFile
from .models import ModuleVersion

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST_FILENAME = "go.mod"
DEFAULT_MAX_DEPTH = 15

IGNORED_DIRECTIVES = frozenset({"toolchain", "godebug", "exclude", "replace", "retract", "tool", "ignore"})
BLOCK_DIRECTIVES = frozenset({"require", "godebug", "exclude", "replace", "retract", "tool", "ignore"})
KNOWN_DIRECTIVES = frozenset({"module", "go", "require"}) | IGNORED_DIRECTIVES


def find_manifest(
    start_dir: Path | None = None,
    *,
    filename: str = DEFAULT_MANIFEST_FILENAME,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Path:
    """Find the nearest manifest at or above start_dir.

    Args:
        start_dir: Directory to start from (default: working directory)
        filename: Manifest file name
        max_depth: Number of directories inspected, start_dir included

    Returns:
        Absolute path of the manifest file

    Raises:
        ManifestNotFoundError: Filesystem root or depth bound reached first
        EnvironmentLookupError: Working directory cannot be determined
    """
    if start_dir is None:
        try:
            start_dir = Path(os.getcwd())
        except OSError as e:
            raise EnvironmentLookupError("current working directory", str(e)) from e

    start_dir = start_dir.absolute()
    current = start_dir
    inspected = 0
    for _ in range(max_depth):
        inspected += 1
        candidate = current / filename
        if candidate.is_file():
            logger.debug(f"[manifest] found {candidate}")
            return candidate
        if current.parent == current:
            break
        current = current.parent

    raise ManifestNotFoundError(start_dir, max_depth, filename, inspected=inspected)


def _unquote(token: str, source: str, lineno: int) -> str:
    """Strip quoting from a double-quoted or back-quoted token."""
    if token[0] == "`":
        return token[1:-1]
    body = token[1:-1]
    out = []
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == "\\":
            if i + 1 >= len(body):
                raise ManifestParseError(source, "invalid escape in quoted string", lineno)
            out.append(body[i + 1])
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def _tokenize(line: str, source: str, lineno: int) -> tuple[list[str], str]:
    """Split one manifest line into tokens and its trailing comment."""
    tokens: list[str] = []
    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        if ch.isspace():
            i += 1
            continue
        if line.startswith("//", i):
            return tokens, line[i + 2 :].strip()
        if ch in "()":
            tokens.append(ch)
            i += 1
            continue
        if ch in "\"`":
            end = i + 1
            while end < n and line[end] != ch:
                end += 2 if ch == '"' and line[end] == "\\" else 1
            if end >= n:
                raise ManifestParseError(source, "unterminated quoted string", lineno)
            tokens.append(_unquote(line[i : end + 1], source, lineno))
            i = end + 1
            continue
        end = i
        while end < n and not line[end].isspace() and line[end] not in "()" and not line.startswith("//", end):
            end += 1
        tokens.append(line[i:end])
        i = end
    return tokens, ""


def _is_indirect(comment: str) -> bool:
    return comment == "indirect" or comment.startswith("indirect;")


def parse_manifest(text: str, *, source: str = DEFAULT_MANIFEST_FILENAME) -> Manifest:
    """Parse manifest text.

    Args:
        text: Manifest contents
        source: Name used in error messages

    Returns:
        Parsed Manifest with requirements in declaration order

    Raises:
        ManifestParseError: Syntax error, unknown directive, or missing module
    """
    module_path: str | None = None
    go_version: str | None = None
    requires: list[ModuleVersion] = []
    block: str | None = None
    block_line = 0

    def handle(verb: str, args: list[str], comment: str, lineno: int) -> None:
        nonlocal module_path, go_version
        if verb == "module":
            if module_path is not None:
                raise ManifestParseError(source, "repeated module directive", lineno)
            if len(args) != 1 or not args[0]:
                raise ManifestParseError(source, "usage: module module/path", lineno)
            module_path = args[0]
        elif verb == "go":
            if len(args) != 1:
                raise ManifestParseError(source, "usage: go 1.23", lineno)
            go_version = args[0]
        elif verb == "require":
            if len(args) != 2 or not args[0] or not args[1]:
                raise ManifestParseError(source, "usage: require module/path v1.2.3", lineno)
            requires.append(ModuleVersion(path=args[0], version=args[1], indirect=_is_indirect(comment)))

    for lineno, line in enumerate(text.splitlines(), start=1):
        tokens, comment = _tokenize(line, source, lineno)
        if not tokens:
            continue

        if block is not None:
            if tokens == [")"]:
                block = None
                continue
            if "(" in tokens or ")" in tokens:
                raise ManifestParseError(source, f"unexpected parenthesis in {block} block", lineno)
            handle(block, tokens, comment, lineno)
            continue

        verb, args = tokens[0], tokens[1:]
        if verb not in KNOWN_DIRECTIVES:
            raise ManifestParseError(source, f"unknown directive: {verb}", lineno)
        if args and args[0] == "(":
            if verb not in BLOCK_DIRECTIVES:
                raise ManifestParseError(source, f"{verb} does not accept a block", lineno)
            if args == ["(", ")"]:
                continue
            if args != ["("]:
                raise ManifestParseError(source, f"unexpected tokens after {verb} (", lineno)
            block = verb
            block_line = lineno
            continue
        if "(" in args or ")" in args:
            raise ManifestParseError(source, f"unexpected parenthesis in {verb} directive", lineno)
        handle(verb, args, comment, lineno)

    if block is not None:
        raise ManifestParseError(source, f"unterminated {block} block", block_line)
    if module_path is None:
        raise ManifestParseError(source, "no module directive found")

    return Manifest(module_path=module_path, go_version=go_version, requires=tuple(requires))


def read_manifest(
    start_dir: Path | None = None,
    *,
    filename: str = DEFAULT_MANIFEST_FILENAME,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> ManifestFile:
    """Locate, read and parse the nearest manifest.

    Raises:
        ManifestNotFoundError: No manifest within the search bound
        ManifestParseError: Manifest unreadable or invalid
        EnvironmentLookupError: Working directory cannot be determined
    """
    path = find_manifest(start_dir, filename=filename, max_depth=max_depth)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestParseError(path, f"cannot read file ({e})") from e

    manifest = parse_manifest(text, source=str(path))
    logger.debug(f"[manifest] {manifest.module_path} with {len(manifest.requires)} requirement(s) from {path}")
    return ManifestFile(manifest=manifest, path=path)
