"""Tests for the public find_source_files entry point."""

from __future__ import annotations

import json

import pytest

import lintwalk.file_discovery as discovery_mod
from lintwalk import find_source_files
from lintwalk.compat.enumerator import FileEnumerator
from lintwalk.compat.providers import EnumeratorNotFoundError
from lintwalk.config import default_config
from lintwalk.core.ignore_rules import NullIgnoreOracle
from lintwalk.core.runtime_state import current_runtime_context, get_exclusions


class _DirIgnoringSession(NullIgnoreOracle):
    def __init__(self, ignored: str) -> None:
        self.ignored = ignored

    def is_directory_ignored(self, path: str) -> bool:
        return path == self.ignored


def test_session_path_matches_documented_example(make_tree, scandir_order):
    scandir_order()
    root = make_tree(["a.js", "b.txt", "sub/c.js"])

    assert find_source_files(
        [root], [".js"], session=NullIgnoreOracle(), config=default_config()
    ) == ["a.js", "sub/c.js"]
    assert find_source_files(
        [root],
        [".js"],
        session=_DirIgnoringSession(str(root / "sub")),
        config=default_config(),
    ) == ["a.js"]


def test_single_root_string_accepted(make_tree):
    root = make_tree(["a.js"])

    assert find_source_files(
        str(root), [".js"], session=NullIgnoreOracle(), config=default_config()
    ) == ["a.js"]


def test_extensions_default_from_config(make_tree):
    root = make_tree(["a.js", "b.ts", "c.jsx"])
    cfg = default_config()
    cfg["extensions"] = [".ts"]

    assert find_source_files([root], session=NullIgnoreOracle(), config=cfg) == ["b.ts"]


def test_config_loaded_from_project_root_when_not_given(make_tree, tmp_path):
    root = make_tree(["a.js", "b.ts"])
    (tmp_path / ".lintwalk").mkdir()
    (tmp_path / ".lintwalk" / "config.json").write_text(
        json.dumps({"extensions": [".ts"]})
    )

    assert find_source_files([root], session=NullIgnoreOracle()) == ["b.ts"]


def test_non_string_enumerator_in_config_falls_back_to_builtin(make_tree, tmp_path):
    root = make_tree(["a.js"])
    (tmp_path / ".lintwalk").mkdir()
    (tmp_path / ".lintwalk" / "config.json").write_text(
        json.dumps({"enumerators": [1]})
    )

    assert find_source_files([root], [".js"]) == [str(root / "a.js")]
    assert current_runtime_context().enumerator is FileEnumerator


def test_non_string_extension_in_config_falls_back_to_defaults(make_tree, tmp_path):
    root = make_tree(["a.js", "b.ts"])
    (tmp_path / ".lintwalk").mkdir()
    (tmp_path / ".lintwalk" / "config.json").write_text(
        json.dumps({"extensions": [1]})
    )

    assert find_source_files([root], session=NullIgnoreOracle()) == ["a.js"]


def test_without_session_uses_builtin_enumerator(make_tree):
    root = make_tree(["a.js", "node_modules/x/y.js", "sub/b.js", "c.txt"])

    files = find_source_files([root], [".js"], config=default_config())

    assert sorted(files) == [str(root / "a.js"), str(root / "sub" / "b.js")]
    assert current_runtime_context().enumerator is FileEnumerator


def test_without_session_applies_config_exclusions_temporarily(make_tree):
    root = make_tree(["a.js", "gen/b.js"])
    cfg = default_config()
    cfg["exclude"] = ["gen"]

    files = find_source_files([root], [".js"], config=cfg)

    assert files == [str(root / "a.js")]
    assert get_exclusions() == ()


def test_without_session_uses_configured_enumerator_first(make_tree, tmp_path, monkeypatch):
    plugins = tmp_path / "plugins"
    plugins.mkdir()
    (plugins / "host_enum_plugin.py").write_text(
        "from types import SimpleNamespace\n"
        "\n"
        "class Lister:\n"
        "    def __init__(self, *, extensions):\n"
        "        self.extensions = extensions\n"
        "\n"
        "    def iterate_files(self, patterns):\n"
        "        for pattern in patterns:\n"
        "            yield SimpleNamespace(file_path=f'{pattern}/from-host.js', ignored=False)\n"
    )
    monkeypatch.syspath_prepend(str(plugins))
    cfg = default_config()
    cfg["enumerators"] = ["host_enum_plugin:Lister"]

    assert find_source_files(["src"], config=cfg) == ["src/from-host.js"]


def test_without_session_no_enumerator_raises(monkeypatch):
    def _select(_candidates):
        raise EnumeratorNotFoundError(_candidates)

    monkeypatch.setattr(discovery_mod, "get_enumerator", _select)

    with pytest.raises(EnumeratorNotFoundError):
        find_source_files(["src"], [".js"], config=default_config())


def test_walk_failure_propagates_through_session_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        find_source_files(
            [tmp_path / "missing"],
            [".js"],
            session=NullIgnoreOracle(),
            config=default_config(),
        )
