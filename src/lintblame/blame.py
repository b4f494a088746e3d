# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Per-line authorship lookup backed by ``git blame``."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from pathlib import Path
from typing import Final, Protocol, runtime_checkable

from .core.runtime.process import CommandOptions, CommandRunner, default_runner

LOGGER = logging.getLogger(__name__)

UNKNOWN_AUTHOR: Final[str] = "unknown"

# ``git blame`` prints ``<sha> (<author> <yyyy>-<mm>-<dd> ...)``; the author is
# everything between the parenthesis and the year token.
BLAME_NAME_PATTERN: Final[re.Pattern[str]] = re.compile(r"\(([\w\s]+)\d{4}")


@runtime_checkable
class BlameProvider(Protocol):
    """Supply raw attribution text for a file, one entry per content line."""

    def blame_lines(self, path: str) -> list[str]:
        """Return attribution lines for ``path`` or an empty list on failure."""
        ...


class GitBlameProvider:
    """Read attribution lines from ``git blame`` executed in ``cwd``."""

    def __init__(
        self,
        cwd: Path,
        *,
        timeout: float | None = None,
        runner: CommandRunner | None = None,
    ) -> None:
        """Create a provider bound to a working directory.

        Args:
            cwd: Directory ``git blame`` runs from.
            timeout: Optional limit in seconds for each blame invocation.
            runner: Command runner override, primarily for tests.
        """

        self._cwd = cwd
        self._timeout = timeout
        self._runner: CommandRunner = runner or default_runner

    def blame_lines(self, path: str) -> list[str]:
        options = CommandOptions(cwd=self._cwd, timeout=self._timeout)
        try:
            completed = self._runner(["git", "blame", path], options)
        except OSError as exc:
            LOGGER.debug("git blame unavailable for %s: %s", path, exc)
            return []
        if completed.returncode != 0:
            LOGGER.debug("git blame failed for %s (exit %s)", path, completed.returncode)
            return []
        return (completed.stdout or "").split("\n")


def author_from_blame_line(text: str) -> str:
    """Extract the author's display name from one line of blame output.

    Args:
        text: Raw ``git blame`` line.

    Returns:
        str: Author name, or :data:`UNKNOWN_AUTHOR` when the pattern does not match.
    """

    match = BLAME_NAME_PATTERN.search(text)
    if match is None:
        return UNKNOWN_AUTHOR
    name = match.group(1).strip()
    return name or UNKNOWN_AUTHOR


def author_for_line(blame_lines: Sequence[str], line: int) -> str:
    """Return the author of 1-based ``line`` given pre-fetched ``blame_lines``."""

    if not blame_lines or line < 1 or line > len(blame_lines):
        return UNKNOWN_AUTHOR
    return author_from_blame_line(blame_lines[line - 1])


class BlameAttribution:
    """Map line numbers in a file to author names without ever failing."""

    def __init__(self, provider: BlameProvider) -> None:
        self._provider = provider

    def lines_for(self, path: str) -> tuple[str, ...]:
        """Return raw attribution lines for ``path``.

        Args:
            path: File to attribute.

        Returns:
            tuple[str, ...]: Attribution text per content line; empty when unavailable.
            Never raises; provider failures are logged.
        """

        try:
            return tuple(self._provider.blame_lines(path))
        except Exception:  # blame failures never fail the file
            LOGGER.warning("Blame attribution failed for %s", path, exc_info=True)
            return ()

    def attribute(self, path: str, line: int) -> str:
        """Return the author of ``line`` in ``path``, or :data:`UNKNOWN_AUTHOR`."""

        return author_for_line(self.lines_for(path), line)


__all__ = [
    "BLAME_NAME_PATTERN",
    "BlameAttribution",
    "BlameProvider",
    "GitBlameProvider",
    "UNKNOWN_AUTHOR",
    "author_for_line",
    "author_from_blame_line",
]
