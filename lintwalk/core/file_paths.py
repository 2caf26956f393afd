"""Project-root resolution, path normalization and exclusion matching."""

from __future__ import annotations

import fnmatch
import os
from pathlib import Path

from lintwalk.core.runtime_state import current_runtime_context

_DEFAULT_PROJECT_ROOT = Path(os.environ.get("LINTWALK_ROOT", Path.cwd())).resolve()


def get_project_root() -> Path:
    """Return the active project root, checking RuntimeContext first.

    Tests set ``RuntimeContext.project_root`` to point at a tmp directory.
    Production code uses the process-level default from $LINTWALK_ROOT / cwd.
    """
    override = current_runtime_context().project_root
    if override is not None:
        return override
    return _DEFAULT_PROJECT_ROOT


def matches_exclusion(rel_path: str, exclusion: str) -> bool:
    """Check if a relative path matches an exclusion pattern (path-component aware).

    Matches if exclusion is a path component (e.g. "test" matches "test/foo.js"
    or "src/test/bar.js") or a directory path (e.g. "src/test" matches
    "src/test" itself and "src/test/bar.js"). Does NOT do substring matching: "test" will NOT match
    "testimony.js".

    Glob-style ``*`` is supported: ``*.min.js`` matches any component ending
    with ``.min.js``, and ``vendor/**`` matches everything below ``vendor``.
    """
    parts = Path(rel_path).parts
    if exclusion in parts:
        return True
    if "*" in exclusion:
        if any(fnmatch.fnmatch(part, exclusion) for part in parts):
            return True
        if "/" in exclusion or os.sep in exclusion:
            normalized_path = rel_path.lstrip("./")
            if fnmatch.fnmatch(normalized_path, exclusion):
                return True
    if "/" in exclusion or os.sep in exclusion:
        normalized = exclusion.rstrip("/").rstrip(os.sep)
        return (
            rel_path == normalized
            or rel_path.startswith(normalized + "/")
            or rel_path.startswith(normalized + os.sep)
        )
    return False


def normalize_path_separators(path: str) -> str:
    return path.replace("\\", "/")


def join_relative(parent: str, name: str) -> str:
    """Join a child name onto a walk-relative parent ("" is the walk root)."""
    if not parent:
        return name
    return f"{parent}/{name}"


def safe_relpath(path: str | Path, start: str | Path) -> str:
    try:
        return os.path.relpath(str(path), str(start))
    except ValueError:
        return str(Path(path).resolve())


def rel(path: str | Path, *, root: str | Path | None = None) -> str:
    """Return *path* relative to *root* (default: project root), "/"-separated."""
    base = Path(root).resolve() if root is not None else get_project_root()
    resolved = Path(path).resolve()
    try:
        return normalize_path_separators(str(resolved.relative_to(base)))
    except ValueError:
        return normalize_path_separators(safe_relpath(resolved, base))


__all__ = [
    "get_project_root",
    "join_relative",
    "matches_exclusion",
    "normalize_path_separators",
    "rel",
    "safe_relpath",
]
