"""Enumerator provider selection for hosts without an ignore-oracle session.

Candidates are tried in order with an explicit availability check. A
candidate that is simply absent (module not installed, attribute not defined)
is skipped; a candidate whose module exists but fails to import aborts the
selection with the original error. The first available enumerator is
remembered on the runtime context, so selection happens once per context.
"""

from __future__ import annotations

import importlib
import importlib.util
import logging
import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from lintwalk.core.runtime_state import current_runtime_context

logger = logging.getLogger(__name__)


class EnumeratorNotFoundError(LookupError):
    """No enumerator candidate could be located."""

    def __init__(self, candidates: Sequence[EnumeratorCandidate]) -> None:
        tried = ", ".join(candidate.label for candidate in candidates) or "<none>"
        super().__init__(f"No file enumerator found (tried: {tried})")
        self.candidates = tuple(candidates)


@dataclass(frozen=True)
class EnumeratorCandidate:
    module: str
    attribute: str = "FileEnumerator"

    @property
    def label(self) -> str:
        return f"{self.module}:{self.attribute}"

    @classmethod
    def parse(cls, raw: str) -> EnumeratorCandidate:
        """Parse ``"pkg.module:Attr"`` (attribute defaults to FileEnumerator)."""
        module, sep, attribute = raw.strip().partition(":")
        if not module or (sep and not attribute):
            raise ValueError(f"Expected 'module' or 'module:attribute', got: {raw!r}")
        return cls(module=module, attribute=attribute or "FileEnumerator")


DEFAULT_ENUMERATOR_CANDIDATES: tuple[EnumeratorCandidate, ...] = (
    EnumeratorCandidate("lintwalk.compat.enumerator"),
)


def _missing_module_matches(exc: ModuleNotFoundError, module: str) -> bool:
    """True when *exc* is about *module* itself or one of its parent packages."""
    missing = exc.name or ""
    return bool(missing) and (module == missing or module.startswith(missing + "."))


def _module_available(module: str) -> bool:
    try:
        return importlib.util.find_spec(module) is not None
    except ModuleNotFoundError as exc:
        if not _missing_module_matches(exc, module):
            raise
        return False


def load_candidate(candidate: EnumeratorCandidate) -> type | None:
    """Return the candidate's enumerator class, or None when it is not present."""
    if not _module_available(candidate.module):
        logger.debug("Enumerator module %s not found", candidate.module)
        return None
    module = importlib.import_module(candidate.module)
    enumerator = getattr(module, candidate.attribute, None)
    if enumerator is None:
        logger.debug("Enumerator %s not found", candidate.label)
    return enumerator


def select_enumerator(
    candidates: Sequence[EnumeratorCandidate] = DEFAULT_ENUMERATOR_CANDIDATES,
) -> type:
    """Return the first available enumerator class among *candidates*."""
    for candidate in candidates:
        enumerator = load_candidate(candidate)
        if enumerator is not None:
            logger.debug("Selected file enumerator %s", candidate.label)
            return enumerator
    raise EnumeratorNotFoundError(candidates)


def candidates_from_config(config: dict) -> tuple[EnumeratorCandidate, ...]:
    """Configured candidates first, then the built-in defaults."""
    configured = tuple(
        EnumeratorCandidate.parse(raw) for raw in config.get("enumerators", []) or []
    )
    return configured + tuple(
        candidate
        for candidate in DEFAULT_ENUMERATOR_CANDIDATES
        if candidate not in configured
    )


def get_enumerator(candidates: Sequence[EnumeratorCandidate] | None = None) -> type:
    """Return the enumerator selected for the active runtime context.

    Selection runs on first use only; later calls return the remembered class
    regardless of *candidates* (logged at DEBUG; see ``reset_enumerator``).
    """
    runtime = current_runtime_context()
    if runtime.enumerator is None:
        runtime.enumerator = select_enumerator(
            DEFAULT_ENUMERATOR_CANDIDATES if candidates is None else candidates
        )
    elif candidates is not None:
        logger.debug(
            "Enumerator %s already selected; ignoring candidates %s",
            getattr(runtime.enumerator, "__name__", runtime.enumerator),
            ", ".join(candidate.label for candidate in candidates),
        )
    return runtime.enumerator


def reset_enumerator() -> None:
    """Forget the selected enumerator so the next lookup selects again."""
    current_runtime_context().enumerator = None


def list_files_with_enumerator(
    enumerator_cls: type,
    src_paths: Sequence[str | os.PathLike],
    extensions: Iterable[str],
) -> list[str]:
    """Run a record-yielding enumerator and keep the non-ignored file paths."""
    enumerator = enumerator_cls(extensions=list(extensions))
    return [
        record.file_path
        for record in enumerator.iterate_files(list(src_paths))
        if not record.ignored
    ]


__all__ = [
    "DEFAULT_ENUMERATOR_CANDIDATES",
    "EnumeratorCandidate",
    "EnumeratorNotFoundError",
    "candidates_from_config",
    "get_enumerator",
    "list_files_with_enumerator",
    "load_candidate",
    "reset_enumerator",
    "select_enumerator",
]
