"""Source file discovery: pick the session-driven lister or the enumerator fallback."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence

from lintwalk.compat.providers import (
    candidates_from_config,
    get_enumerator,
    list_files_with_enumerator,
)
from lintwalk.config import load_config
from lintwalk.core.file_lister import IgnoreOracle, list_files
from lintwalk.core.runtime_state import get_exclusions, set_exclusions


def _normalize_src_paths(
    src_paths: str | os.PathLike | Sequence[str | os.PathLike],
) -> list[str | os.PathLike]:
    if isinstance(src_paths, (str, os.PathLike)):
        return [src_paths]
    return list(src_paths)


def find_source_files(
    src_paths: str | os.PathLike | Sequence[str | os.PathLike],
    extensions: Iterable[str] | None = None,
    *,
    session: IgnoreOracle | None = None,
    config: dict | None = None,
) -> list[str]:
    """List lintable files under *src_paths*.

    With a host *session* the files come from the directory walk filtered by
    the session's ignore predicates (paths relative to each root). Without
    one, the first available file enumerator is used and its non-ignored
    records are returned as reported.
    """
    cfg = config if config is not None else load_config()
    roots = _normalize_src_paths(src_paths)
    exts = list(extensions) if extensions is not None else list(cfg["extensions"])

    if session is not None:
        return list_files(roots, exts, session)

    enumerator_cls = get_enumerator(candidates_from_config(cfg))
    previous = get_exclusions()
    persisted = [e for e in cfg.get("exclude", []) if e not in previous]
    set_exclusions(list(previous) + persisted)
    try:
        return list_files_with_enumerator(enumerator_cls, roots, exts)
    finally:
        set_exclusions(previous)


__all__ = ["find_source_files"]
