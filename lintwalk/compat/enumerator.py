"""Built-in record-yielding file enumerator (last enumerator fallback)."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from lintwalk.core.file_paths import get_project_root
from lintwalk.core.ignore_rules import ExclusionIgnoreOracle
from lintwalk.core.walk import walk

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileRecord:
    file_path: str
    ignored: bool


class FileEnumerator:
    """Enumerate lintable files for a list of file/directory patterns.

    Files found while walking a directory are only reported when they carry a
    configured extension and are not excluded. A file named directly by a
    pattern is always reported, flagged ``ignored`` when it is excluded.
    """

    def __init__(
        self,
        *,
        extensions: Iterable[str],
        exclusions: Iterable[str] | None = None,
        cwd: str | Path | None = None,
    ) -> None:
        self.extensions = tuple(extensions)
        self.cwd = Path(cwd) if cwd is not None else get_project_root()
        self._oracle = ExclusionIgnoreOracle(exclusions, project_root=self.cwd)

    def _resolve(self, pattern: str | os.PathLike) -> Path:
        path = Path(pattern)
        if not path.is_absolute():
            path = self.cwd / path
        return path.resolve()

    def _iterate_directory(self, directory: Path) -> Iterator[FileRecord]:
        def _deep_filter(entry) -> bool:
            return not self._oracle.is_directory_ignored(str(directory / entry.path))

        def _entry_filter(entry) -> bool:
            if not entry.path.endswith(self.extensions):
                return False
            return not self._oracle.is_file_ignored(str(directory / entry.path))

        entries = walk(directory, deep_filter=_deep_filter, entry_filter=_entry_filter)
        for entry in entries:
            if entry.is_file:
                yield FileRecord(file_path=str(directory / entry.path), ignored=False)

    def iterate_files(
        self, patterns: str | os.PathLike | Iterable[str | os.PathLike]
    ) -> Iterator[FileRecord]:
        if isinstance(patterns, (str, os.PathLike)):
            patterns = [patterns]
        patterns = list(patterns)
        seen: set[str] = set()
        for pattern in patterns:
            target = self._resolve(pattern)
            if target.is_dir():
                records = self._iterate_directory(target)
            elif target.is_file():
                ignored = self._oracle.is_file_ignored(str(target))
                records = iter([FileRecord(file_path=str(target), ignored=ignored)])
            else:
                raise FileNotFoundError(f"No files matching '{pattern}' were found.")
            for record in records:
                if record.file_path in seen:
                    continue
                seen.add(record.file_path)
                yield record
        logger.debug("Enumerated %d file(s) from %d pattern(s)", len(seen), len(patterns))


__all__ = ["FileEnumerator", "FileRecord"]
