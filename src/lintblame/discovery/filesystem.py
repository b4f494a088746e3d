# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filesystem-backed path sources."""

from __future__ import annotations

from collections.abc import Collection
from pathlib import Path

from .base import PathSourceError, filter_paths


class FilePathSource:
    """Track a single file; tools and blame run from its directory."""

    def __init__(self, path: Path, extensions: Collection[str]) -> None:
        self._path = path.absolute()
        self._extensions = frozenset(extensions)

    @property
    def working_dir(self) -> Path:
        return self._path.parent

    def initial_paths(self) -> list[str]:
        return filter_paths([str(self._path)], self.working_dir, self._extensions)


class DirectoryPathSource:
    """Track the recognised files directly inside a directory (non-recursive)."""

    def __init__(self, directory: Path, extensions: Collection[str]) -> None:
        self._directory = directory.absolute()
        self._extensions = frozenset(extensions)

    @property
    def working_dir(self) -> Path:
        return self._directory

    def initial_paths(self) -> list[str]:
        """Return recognised files in the directory, sorted by name.

        Raises:
            PathSourceError: If the directory cannot be listed.
        """

        try:
            entries = sorted(entry for entry in self._directory.iterdir() if entry.is_file())
        except OSError as exc:
            raise PathSourceError(f"Could not read directory {self._directory}: {exc}") from exc
        return filter_paths((str(entry) for entry in entries), self._directory, self._extensions)


__all__ = ["DirectoryPathSource", "FilePathSource"]
