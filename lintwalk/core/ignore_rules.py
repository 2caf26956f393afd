"""Ignore oracles built from exclusion patterns."""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path

from lintwalk.core.file_paths import get_project_root, matches_exclusion, rel
from lintwalk.core.runtime_state import get_exclusions

# Directories that are never useful to lint; always pruned while use_defaults is set.
DEFAULT_EXCLUSIONS = frozenset(
    {
        "node_modules",
        "bower_components",
        ".git",
        "__pycache__",
        ".venv",
        ".venv*",
        "venv",
        ".env",
        "dist",
        "build",
        "coverage",
        ".next",
        ".nuxt",
        ".output",
        ".cache",
        ".tox",
        ".mypy_cache",
        ".pytest_cache",
        ".ruff_cache",
        ".eggs",
        "*.egg-info",
        ".svn",
        ".hg",
    }
)


_VIRTUALENV_DIR_RE = re.compile(r"^(?:\.venv.*|venv(?:[-.].*)?)$")


def is_default_excluded_dir(name: str) -> bool:
    in_default_exclusions = name in DEFAULT_EXCLUSIONS or name.endswith(".egg-info")
    is_virtualenv_dir = _VIRTUALENV_DIR_RE.match(name) is not None
    return in_default_exclusions or is_virtualenv_dir


def matches_any_exclusion(rel_path: str, exclusions: Iterable[str]) -> bool:
    name = rel_path.rsplit("/", 1)[-1]
    return any(
        matches_exclusion(rel_path, exclusion)
        or exclusion == name
        or exclusion == name + "/**"
        or exclusion == name + "/*"
        for exclusion in exclusions
    )


class NullIgnoreOracle:
    """Oracle that ignores nothing."""

    def is_directory_ignored(self, path: str) -> bool:
        return False

    def is_file_ignored(self, path: str) -> bool:
        return False


class ExclusionIgnoreOracle:
    """Ignore oracle driven by default exclusions plus extra patterns.

    Extra patterns are matched against the path relative to *project_root*
    (default: the active project root). Passing ``exclusions=None`` reads the
    runtime exclusions at query time, so ``set_exclusions`` takes effect on an
    oracle that already exists.
    """

    def __init__(
        self,
        exclusions: Iterable[str] | None = None,
        *,
        project_root: str | Path | None = None,
        use_defaults: bool = True,
    ) -> None:
        self._exclusions = tuple(exclusions) if exclusions is not None else None
        self._project_root = Path(project_root) if project_root is not None else None
        self.use_defaults = use_defaults

    @property
    def exclusions(self) -> tuple[str, ...]:
        if self._exclusions is None:
            return get_exclusions()
        return self._exclusions

    def _rel(self, path: str) -> str:
        return rel(path, root=self._project_root or get_project_root())

    def is_directory_ignored(self, path: str) -> bool:
        if self.use_defaults and is_default_excluded_dir(Path(path).name):
            return True
        return matches_any_exclusion(self._rel(path), self.exclusions)

    def is_file_ignored(self, path: str) -> bool:
        extra = self.exclusions
        if not extra:
            return False
        return matches_any_exclusion(self._rel(path), extra)


__all__ = [
    "DEFAULT_EXCLUSIONS",
    "ExclusionIgnoreOracle",
    "NullIgnoreOracle",
    "is_default_excluded_dir",
    "matches_any_exclusion",
]
