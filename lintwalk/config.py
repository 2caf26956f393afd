"""Project configuration (.lintwalk/config.json)."""

from __future__ import annotations

import copy
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from lintwalk.core.file_paths import get_project_root

CONFIG_DIRNAME = ".lintwalk"
CONFIG_FILENAME = "config.json"
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfigKey:
    type: type
    default: object
    description: str
    item_type: type | None = None


CONFIG_SCHEMA: dict[str, ConfigKey] = {
    "extensions": ConfigKey(
        list, [".js", ".mjs", ".cjs", ".jsx"], "File suffixes to list", str
    ),
    "exclude": ConfigKey(list, [], "Path patterns to exclude from listing", str),
    "enumerators": ConfigKey(
        list,
        [],
        "Extra 'module:attribute' file enumerators tried before the built-in one",
        str,
    ),
}


def config_path() -> Path:
    return get_project_root() / CONFIG_DIRNAME / CONFIG_FILENAME


def default_config() -> dict[str, Any]:
    """Return a config dict with all keys set to their defaults."""
    return {k: copy.deepcopy(v.default) for k, v in CONFIG_SCHEMA.items()}


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load config from disk, filling missing keys with defaults.

    A missing file yields the defaults. An unreadable file, invalid JSON or a
    non-object payload is logged and also yields the defaults. A key whose
    value is not a list of strings is logged and reset to its default.
    """
    p = path or config_path()
    config: dict[str, Any] = {}
    if p.exists():
        try:
            payload = json.loads(p.read_text())
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as exc:
            logger.warning("Ignoring unreadable config %s: %s", p, exc)
            payload = {}
        if isinstance(payload, dict):
            config = payload
        else:
            logger.warning("Ignoring config %s: expected a JSON object", p)

    for key, schema in CONFIG_SCHEMA.items():
        if key not in config:
            config[key] = copy.deepcopy(schema.default)
            continue
        problem = _value_problem(config[key], schema)
        if problem is not None:
            logger.warning(
                "Config key %s in %s %s; using default", key, p, problem
            )
            config[key] = copy.deepcopy(schema.default)

    return config


def _value_problem(value: object, schema: ConfigKey) -> str | None:
    if not isinstance(value, schema.type):
        return f"has type {type(value).__name__}, expected {schema.type.__name__}"
    if schema.item_type is not None:
        for item in value:
            if not isinstance(item, schema.item_type):
                return (
                    f"has {type(item).__name__} item {item!r}, "
                    f"expected {schema.item_type.__name__} items"
                )
    return None


__all__ = [
    "CONFIG_SCHEMA",
    "ConfigKey",
    "config_path",
    "default_config",
    "load_config",
]
