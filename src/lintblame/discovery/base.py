# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Abstractions for supplying the tracked file set."""

from __future__ import annotations

from collections.abc import Collection, Iterable
from pathlib import Path
from typing import Protocol, runtime_checkable


class PathSourceError(RuntimeError):
    """Raised when the initial or refreshed path set cannot be resolved."""


@runtime_checkable
class PathSource(Protocol):
    """Supply the absolute paths the watcher should track.

    Implementations are called once at startup and again on every full
    refresh, so they must be cheap to re-run and free of side effects.
    """

    @property
    def working_dir(self) -> Path:
        """Return the directory relative paths and external tools resolve against."""
        ...

    def initial_paths(self) -> list[str]:
        """Return the current set of absolute, extension-filtered paths."""
        ...


def filter_paths(
    paths: Iterable[str],
    working_dir: Path,
    extensions: Collection[str],
) -> list[str]:
    """Keep recognised files and make them absolute relative to ``working_dir``.

    Args:
        paths: Raw path strings, possibly relative or blank.
        working_dir: Directory used to resolve relative entries.
        extensions: Accepted suffixes including the leading dot.

    Returns:
        list[str]: De-duplicated absolute paths in first-seen order.
    """

    accepted: list[str] = []
    seen: set[str] = set()
    for raw in paths:
        candidate = raw.strip()
        if not candidate:
            continue
        path = Path(candidate)
        if path.suffix not in extensions:
            continue
        if not path.is_absolute():
            path = working_dir / path
        resolved = str(path)
        if resolved in seen:
            continue
        seen.add(resolved)
        accepted.append(resolved)
    return accepted


__all__ = ["PathSource", "PathSourceError", "filter_paths"]
