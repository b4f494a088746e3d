# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Select the path source matching the command-line target."""

from __future__ import annotations

from collections.abc import Collection
from pathlib import Path
from typing import TYPE_CHECKING

from ..core.runtime.process import CommandRunner
from .base import PathSource, PathSourceError
from .filesystem import DirectoryPathSource, FilePathSource
from .git import GitBranchPathSource

if TYPE_CHECKING:
    from ..context import RunContext


def resolve_path_source(
    target: Path | None,
    *,
    branch: bool,
    extensions: Collection[str],
    context: RunContext,
    base_branch: str = "master",
    runner: CommandRunner | None = None,
) -> PathSource:
    """Return the :class:`PathSource` for ``target`` or the current git branch.

    Args:
        target: File or directory given on the command line.
        branch: Track the current branch's changed files instead of ``target``.
        extensions: Accepted file suffixes.
        context: Run context used to locate the git root in branch mode.
        base_branch: Branch compared against ``HEAD`` in branch mode.
        runner: Optional command runner for git invocations.

    Returns:
        PathSource: Source supplying the initial and refreshed path sets.

    Raises:
        PathSourceError: If the target is missing or inaccessible, or no git
            root can be found in branch mode.
    """

    if branch:
        return GitBranchPathSource(
            context.git_root,
            extensions,
            base_branch=base_branch,
            runner=runner,
        )
    if target is None:
        raise PathSourceError("Provide a file or directory to watch, or pass --branch")
    try:
        is_dir = target.is_dir()
        exists = is_dir or target.exists()
    except OSError as exc:
        raise PathSourceError(f"Unable to process argument: {target} ({exc})") from exc
    if not exists:
        raise PathSourceError(f"Unable to process argument: {target}")
    absolute = target.absolute()
    if is_dir:
        return DirectoryPathSource(absolute, extensions)
    return FilePathSource(absolute, extensions)


__all__ = ["resolve_path_source"]
