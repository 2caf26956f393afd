"""Directory walking and source file listing for lint plugins."""

from __future__ import annotations

from lintwalk.core.file_lister import IgnoreOracle, list_files
from lintwalk.core.walk import Entry, EntryKind, walk
from lintwalk.file_discovery import find_source_files

__all__ = [
    "Entry",
    "EntryKind",
    "IgnoreOracle",
    "find_source_files",
    "list_files",
    "walk",
]
