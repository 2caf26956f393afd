"""Session-driven source file listing on top of the directory walk."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from typing import Protocol

from lintwalk.core.walk import Entry, walk


class IgnoreOracle(Protocol):
    """Host-side ignore policy; both predicates take absolute paths."""

    def is_directory_ignored(self, path: str) -> bool: ...

    def is_file_ignored(self, path: str) -> bool: ...


def _has_extension(rel_path: str, extensions: Iterable[str]) -> bool:
    return any(rel_path.endswith(extension) for extension in extensions)


def list_files(
    src_paths: Sequence[str | os.PathLike],
    extensions: Iterable[str],
    session: IgnoreOracle,
) -> list[str]:
    """List files under each source root that the session does not ignore.

    Returned paths are relative to the root they were found under, root by
    root in *src_paths* order. A file reachable from two roots is listed once
    per root.
    """
    extensions = tuple(extensions)
    files: list[str] = []

    for src in src_paths:
        src_dir = os.fspath(src)

        def _absolute(entry: Entry, _src: str = src_dir) -> str:
            return os.path.abspath(os.path.join(_src, entry.path))

        def _deep_filter(entry: Entry) -> bool:
            return not session.is_directory_ignored(_absolute(entry))

        def _entry_filter(entry: Entry) -> bool:
            return not session.is_file_ignored(_absolute(entry)) and _has_extension(
                entry.path, extensions
            )

        entries = walk(src_dir, deep_filter=_deep_filter, entry_filter=_entry_filter)
        # Directories are only recorded to drive descent.
        files.extend(entry.path for entry in entries if not entry.is_dir)

    return files


__all__ = ["IgnoreOracle", "list_files"]
