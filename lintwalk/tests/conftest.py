"""Shared fixtures for lintwalk tests."""

from __future__ import annotations

import os
from contextlib import contextmanager
from pathlib import Path

import pytest

import lintwalk.core.walk as walk_mod
from lintwalk.core import runtime_state


@pytest.fixture(autouse=True)
def isolated_runtime(tmp_path: Path):
    """Give every test its own exclusions, project root and enumerator choice."""
    with runtime_state.runtime_scope(
        runtime_state.make_runtime_context(project_root=tmp_path)
    ) as runtime:
        yield runtime


@pytest.fixture()
def make_tree(tmp_path: Path):
    """Return a helper that creates files (and parent dirs) under a root.

    Paths ending in "/" create empty directories.
    """

    def _make(paths: list[str], root: Path | None = None) -> Path:
        base = root or tmp_path / "project"
        base.mkdir(parents=True, exist_ok=True)
        for rel_path in paths:
            target = base / rel_path
            if rel_path.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(f"// {rel_path}\n")
        return base

    return _make


@pytest.fixture()
def scandir_order(monkeypatch):
    """Force directory reads in the walker to report children by name.

    Call with ``reverse=True`` to get descending order instead.
    """
    real_scandir = os.scandir

    def _install(*, reverse: bool = False) -> None:
        @contextmanager
        def _ordered(path):
            with real_scandir(path) as it:
                yield sorted(it, key=lambda dirent: dirent.name, reverse=reverse)

        monkeypatch.setattr(walk_mod.os, "scandir", _ordered)

    return _install
