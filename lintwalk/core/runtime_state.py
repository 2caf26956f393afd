"""Runtime state model for exclusions, project-root override and provider choice."""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from pathlib import Path


@dataclass
class RuntimeContext:
    """Mutable runtime container for exclusions and the selected enumerator."""

    exclusions: tuple[str, ...] = ()
    project_root: Path | None = None
    # Enumerator class picked by compat.providers; None until first selection.
    enumerator: type | None = None


_PROCESS_RUNTIME_CONTEXT = RuntimeContext()
_RUNTIME_CONTEXT: ContextVar[RuntimeContext | None] = ContextVar(
    "lintwalk_runtime_context",
    default=None,
)


def make_runtime_context(*, project_root: Path | str | None = None) -> RuntimeContext:
    """Create an isolated runtime context."""
    root = Path(project_root).resolve() if project_root is not None else None
    return RuntimeContext(project_root=root)


def current_runtime_context() -> RuntimeContext:
    """Return the active runtime context (or process fallback)."""
    runtime = _RUNTIME_CONTEXT.get()
    if runtime is not None:
        return runtime
    return _PROCESS_RUNTIME_CONTEXT


@contextmanager
def runtime_scope(runtime: RuntimeContext | None = None):
    """Run code with an isolated runtime context."""
    active = runtime or make_runtime_context()
    token = _RUNTIME_CONTEXT.set(active)
    try:
        yield active
    finally:
        _RUNTIME_CONTEXT.reset(token)


def set_exclusions(patterns: list[str] | tuple[str, ...]) -> None:
    """Set extra exclusion patterns for the active runtime context."""
    current_runtime_context().exclusions = tuple(patterns)


def get_exclusions() -> tuple[str, ...]:
    """Return current extra exclusion patterns."""
    return current_runtime_context().exclusions


__all__ = [
    "RuntimeContext",
    "current_runtime_context",
    "get_exclusions",
    "make_runtime_context",
    "runtime_scope",
    "set_exclusions",
]
