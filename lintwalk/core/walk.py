"""Depth-first directory walk with deep/entry filter hooks."""

from __future__ import annotations

import enum
import logging
import os
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from lintwalk.core.file_paths import join_relative

logger = logging.getLogger(__name__)


class EntryKind(enum.Enum):
    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class Entry:
    """One visited file-system node; ``path`` is relative to the walk root."""

    name: str
    path: str
    kind: EntryKind

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE


EntryFilter = Callable[[Entry], bool]


def _always(_entry: Entry) -> bool:
    return True


def _entry_kind(dirent: os.DirEntry) -> EntryKind | None:
    # Symlinks report neither kind when not followed, so they drop out here.
    if dirent.is_dir(follow_symlinks=False):
        return EntryKind.DIRECTORY
    if dirent.is_file(follow_symlinks=False):
        return EntryKind.FILE
    return None


def _read_dir(root: str, rel_dir: str) -> list[Entry]:
    """Read one directory's children in file-system order.

    The handle is closed before returning; OSError propagates to the caller.
    """
    full_path = os.path.join(root, rel_dir) if rel_dir else root
    children: list[Entry] = []
    with os.scandir(full_path) as it:
        for dirent in it:
            kind = _entry_kind(dirent)
            if kind is None:
                continue
            children.append(
                Entry(
                    name=dirent.name,
                    path=join_relative(rel_dir, dirent.name),
                    kind=kind,
                )
            )
    return children


def walk(
    root: str | os.PathLike,
    *,
    deep_filter: EntryFilter | None = None,
    entry_filter: EntryFilter | None = None,
) -> list[Entry]:
    """Collect every entry reachable from *root*, in pre-order.

    A directory passing ``deep_filter`` is recorded and then descended into
    before its later siblings are visited; a directory failing it is skipped
    along with everything below it. Regular files are recorded when they pass
    ``entry_filter``. Both filters default to accepting everything.

    A failed directory read aborts the whole walk with the original OSError.
    """
    accept_dir = deep_filter or _always
    accept_file = entry_filter or _always
    root_path = os.fspath(root)

    entries: list[Entry] = []
    pending: list[Iterator[Entry]] = [iter(_read_dir(root_path, ""))]
    while pending:
        entry = next(pending[-1], None)
        if entry is None:
            pending.pop()
            continue
        if entry.is_dir:
            if accept_dir(entry):
                entries.append(entry)
                pending.append(iter(_read_dir(root_path, entry.path)))
        elif accept_file(entry):
            entries.append(entry)

    logger.debug("Walked %s: %d entries", root_path, len(entries))
    return entries


__all__ = ["Entry", "EntryFilter", "EntryKind", "walk"]
