# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Git-based path source tracking the files touched on the current branch."""

from __future__ import annotations

from collections.abc import Collection, Sequence
from pathlib import Path

from ..core.runtime.process import CommandOptions, CommandRunner, default_runner
from .base import PathSourceError, filter_paths


class GitBranchPathSource:
    """Collect dirty files plus files changed between ``base_branch`` and ``HEAD``."""

    def __init__(
        self,
        root: Path,
        extensions: Collection[str],
        *,
        base_branch: str = "master",
        runner: CommandRunner | None = None,
    ) -> None:
        """Create a git branch source.

        Args:
            root: Repository top-level directory.
            extensions: Accepted file suffixes.
            base_branch: Branch the current ``HEAD`` is compared against.
            runner: Optional command runner, replaceable for tests.
        """

        self._root = root
        self._extensions = frozenset(extensions)
        self._base_branch = base_branch
        self._runner: CommandRunner = runner or default_runner

    @property
    def working_dir(self) -> Path:
        return self._root

    @property
    def base_branch(self) -> str:
        return self._base_branch

    def initial_paths(self) -> list[str]:
        """Return dirty and branch-changed files that still exist.

        Returns:
            list[str]: Absolute, filtered paths; dirty files first.

        Raises:
            PathSourceError: If either ``git diff`` invocation fails.
        """

        dirty = self._diff_names(["git", "diff", "--name-only"], "dirty files")
        branch = self._diff_names(
            ["git", "diff", "--name-only", f"{self._base_branch}..HEAD"],
            "branch files",
        )
        candidates = filter_paths([*dirty, *branch], self._root, self._extensions)
        # Files deleted on the branch still show up in the diff.
        return [path for path in candidates if Path(path).exists()]

    def _diff_names(self, cmd: Sequence[str], label: str) -> list[str]:
        try:
            completed = self._runner(cmd, CommandOptions(cwd=self._root))
        except OSError as exc:
            raise PathSourceError(f"Failed to list {label}: {exc}") from exc
        if completed.returncode != 0:
            detail = (completed.stderr or "").strip() or f"exit status {completed.returncode}"
            raise PathSourceError(f"Failed to list {label}: {detail}")
        return (completed.stdout or "").splitlines()


__all__ = ["GitBranchPathSource"]
