# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for path sources and target resolution."""

from collections.abc import Sequence
from pathlib import Path
from subprocess import CompletedProcess

import pytest

from lintblame.context import RunContext
from lintblame.core.runtime.process import CommandOptions
from lintblame.discovery import (
    DirectoryPathSource,
    FilePathSource,
    GitBranchPathSource,
    PathSourceError,
    filter_paths,
    resolve_path_source,
)

EXTENSIONS = frozenset({".py", ".go"})


class GitStub:
    """Runner answering git subcommands from a ``args -> (code, stdout)`` table."""

    def __init__(self, answers: dict[tuple[str, ...], tuple[int, str]]) -> None:
        self.answers = answers
        self.calls: list[list[str]] = []

    def __call__(self, cmd: Sequence[str], options: CommandOptions) -> CompletedProcess[str]:
        self.calls.append(list(cmd))
        code, stdout = self.answers.get(tuple(cmd[1:]), (1, ""))
        return CompletedProcess(list(cmd), code, stdout=stdout, stderr="fatal: bad revision" if code else "")


def test_filter_paths_keeps_known_extensions_absolute_and_unique(tmp_path: Path) -> None:
    raw = ["a.py", "b.txt", "", "  ", "sub/c.go", "a.py", "/abs/d.py", "Makefile"]

    assert filter_paths(raw, tmp_path, EXTENSIONS) == [
        str(tmp_path / "a.py"),
        str(tmp_path / "sub/c.go"),
        "/abs/d.py",
    ]


def test_directory_source_is_non_recursive_and_sorted(tmp_path: Path) -> None:
    for name in ("b.py", "a.go", "notes.md"):
        (tmp_path / name).write_text("", encoding="utf-8")
    (tmp_path / "pkg").mkdir()
    (tmp_path / "pkg" / "nested.py").write_text("", encoding="utf-8")

    source = DirectoryPathSource(tmp_path, EXTENSIONS)

    assert source.working_dir == tmp_path
    assert source.initial_paths() == [str(tmp_path / "a.go"), str(tmp_path / "b.py")]


def test_directory_source_failure(tmp_path: Path) -> None:
    source = DirectoryPathSource(tmp_path / "vanished", EXTENSIONS)

    with pytest.raises(PathSourceError, match="Could not read directory"):
        source.initial_paths()


def test_file_source(tmp_path: Path) -> None:
    path = tmp_path / "main.go"
    path.write_text("package main\n", encoding="utf-8")

    source = FilePathSource(path, EXTENSIONS)

    assert source.working_dir == tmp_path
    assert source.initial_paths() == [str(path)]
    assert FilePathSource(tmp_path / "README.md", EXTENSIONS).initial_paths() == []


def test_git_branch_source_merges_dirty_and_branch_files(tmp_path: Path) -> None:
    for name in ("dirty.py", "branch.go", "shared.py"):
        (tmp_path / name).write_text("", encoding="utf-8")
    runner = GitStub(
        {
            ("diff", "--name-only"): (0, "dirty.py\nshared.py\nREADME.md\n"),
            ("diff", "--name-only", "main..HEAD"): (0, "branch.go\nshared.py\ndeleted.py\n"),
        },
    )

    source = GitBranchPathSource(tmp_path, EXTENSIONS, base_branch="main", runner=runner)

    assert source.initial_paths() == [
        str(tmp_path / "dirty.py"),
        str(tmp_path / "shared.py"),
        str(tmp_path / "branch.go"),
    ]
    assert source.working_dir == tmp_path


def test_git_branch_source_failure_is_fatal(tmp_path: Path) -> None:
    runner = GitStub({("diff", "--name-only"): (0, "")})

    with pytest.raises(PathSourceError, match="branch files"):
        GitBranchPathSource(tmp_path, EXTENSIONS, runner=runner).initial_paths()


def test_resolve_directory_and_file(tmp_path: Path) -> None:
    path = tmp_path / "app.py"
    path.write_text("", encoding="utf-8")
    context = RunContext(tmp_path)

    directory_source = resolve_path_source(tmp_path, branch=False, extensions=EXTENSIONS, context=context)
    file_source = resolve_path_source(path, branch=False, extensions=EXTENSIONS, context=context)

    assert isinstance(directory_source, DirectoryPathSource)
    assert isinstance(file_source, FilePathSource)
    assert file_source.initial_paths() == [str(path)]


def test_resolve_missing_target(tmp_path: Path) -> None:
    with pytest.raises(PathSourceError, match="Unable to process argument"):
        resolve_path_source(tmp_path / "nope.py", branch=False, extensions=EXTENSIONS, context=RunContext(tmp_path))


def test_resolve_requires_target_without_branch(tmp_path: Path) -> None:
    with pytest.raises(PathSourceError):
        resolve_path_source(None, branch=False, extensions=EXTENSIONS, context=RunContext(tmp_path))


def test_resolve_branch_uses_git_root(tmp_path: Path) -> None:
    runner = GitStub({("rev-parse", "--show-toplevel"): (0, f"{tmp_path}\n")})
    context = RunContext(tmp_path / "sub", runner=runner)

    source = resolve_path_source(
        None,
        branch=True,
        extensions=EXTENSIONS,
        context=context,
        base_branch="develop",
        runner=runner,
    )

    assert isinstance(source, GitBranchPathSource)
    assert source.working_dir == tmp_path
    assert source.base_branch == "develop"


def test_resolve_branch_outside_repository(tmp_path: Path) -> None:
    context = RunContext(tmp_path, runner=GitStub({}))

    with pytest.raises(PathSourceError, match="Failed to find git parent path"):
        resolve_path_source(None, branch=True, extensions=EXTENSIONS, context=context)
