# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Process-wide run context with lazily computed git facts."""

from __future__ import annotations

import logging
from functools import cached_property
from pathlib import Path

from .core.runtime.process import CommandOptions, CommandRunner, completed_lines, default_runner
from .discovery.base import PathSourceError

LOGGER = logging.getLogger(__name__)


class RunContext:
    """Hold the working directory and git identity for one watcher process.

    Built once at startup and passed to the components that need it. Every
    git-derived attribute is computed on first access and cached for the
    lifetime of the instance.
    """

    def __init__(self, working_dir: Path, *, runner: CommandRunner | None = None) -> None:
        self.working_dir = working_dir
        self._runner: CommandRunner = runner or default_runner

    def _git(self, *args: str) -> list[str]:
        try:
            completed = self._runner(["git", *args], CommandOptions(cwd=self.working_dir))
        except OSError as exc:
            LOGGER.debug("git %s unavailable: %s", " ".join(args), exc)
            return []
        return completed_lines(completed)

    @cached_property
    def git_root(self) -> Path:
        """Return the repository top-level directory.

        Raises:
            PathSourceError: If ``working_dir`` is not inside a git work tree.
        """

        lines = self._git("rev-parse", "--show-toplevel")
        if not lines or not lines[0].strip():
            raise PathSourceError(f"Failed to find git parent path of {self.working_dir}")
        return Path(lines[0].strip())

    @cached_property
    def git_user_name(self) -> str | None:
        """Return ``git config user.name`` or ``None`` when unset."""

        lines = self._git("config", "user.name")
        name = lines[0].strip() if lines else ""
        return name or None

    @cached_property
    def current_branch(self) -> str | None:
        """Return the checked-out branch name or ``None`` outside a repository."""

        lines = self._git("rev-parse", "--abbrev-ref", "HEAD")
        branch = lines[0].strip() if lines else ""
        return branch or None


__all__ = ["RunContext"]
