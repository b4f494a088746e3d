# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for git blame attribution."""

from collections.abc import Sequence
from pathlib import Path
from subprocess import CompletedProcess

import pytest

from lintblame.blame import (
    UNKNOWN_AUTHOR,
    BlameAttribution,
    GitBlameProvider,
    author_for_line,
    author_from_blame_line,
)
from lintblame.core.runtime.process import CommandOptions

BLAME_OUTPUT = (
    "^a1b2c3d (Grace Hopper 2019-05-04 12:00:00 +0000 1) package main\n"
    "e4f5a6b7 (Not Committed Yet 2026-10-18 08:30:00 +0200 2) \n"
    "e4f5a6b7 (Linus 2020-01-01 00:00:00 +0000 3) func main() {}"
)


def _runner(stdout: str, returncode: int = 0):
    calls: list[tuple[list[str], CommandOptions]] = []

    def run(cmd: Sequence[str], options: CommandOptions) -> CompletedProcess[str]:
        calls.append((list(cmd), options))
        return CompletedProcess(list(cmd), returncode, stdout=stdout, stderr="")

    run.calls = calls  # type: ignore[attr-defined]
    return run


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("^a1b2c3d (Grace Hopper 2019-05-04 12:00:00 +0000 1) package main", "Grace Hopper"),
        ("e4f5a6b7 (Linus 2020-01-01 00:00:00 +0000 3) x", "Linus"),
        ("garbage without parenthesis", UNKNOWN_AUTHOR),
        ("", UNKNOWN_AUTHOR),
    ],
)
def test_author_from_blame_line(text: str, expected: str) -> None:
    assert author_from_blame_line(text) == expected


def test_author_for_line_bounds() -> None:
    lines = BLAME_OUTPUT.split("\n")

    assert author_for_line(lines, 1) == "Grace Hopper"
    assert author_for_line(lines, 2) == "Not Committed Yet"
    assert author_for_line(lines, 0) == UNKNOWN_AUTHOR
    assert author_for_line(lines, 4) == UNKNOWN_AUTHOR
    assert author_for_line([], 1) == UNKNOWN_AUTHOR


def test_git_blame_provider_runs_in_working_dir() -> None:
    runner = _runner(BLAME_OUTPUT)
    provider = GitBlameProvider(Path("/repo"), timeout=5.0, runner=runner)

    lines = provider.blame_lines("/repo/main.go")

    assert len(lines) == 3
    cmd, options = runner.calls[0]
    assert cmd == ["git", "blame", "/repo/main.go"]
    assert options.cwd == Path("/repo")
    assert options.timeout == 5.0


def test_git_blame_provider_failure_is_empty() -> None:
    provider = GitBlameProvider(Path("/repo"), runner=_runner("fatal: not a git repository", returncode=128))

    assert provider.blame_lines("/repo/main.go") == []


def test_git_blame_provider_missing_git_is_empty() -> None:
    def missing(cmd: Sequence[str], options: CommandOptions) -> CompletedProcess[str]:
        raise FileNotFoundError("Executable 'git' was not found on PATH")

    assert GitBlameProvider(Path("/repo"), runner=missing).blame_lines("/repo/main.go") == []


@pytest.mark.parametrize("error", [PermissionError("denied"), RuntimeError("provider bug"), ValueError("bad output")])
def test_attribution_never_raises(error: Exception, caplog: pytest.LogCaptureFixture) -> None:
    class BrokenProvider:
        def blame_lines(self, path: str) -> list[str]:
            raise error

    attribution = BlameAttribution(BrokenProvider())

    assert attribution.lines_for("/repo/main.go") == ()
    assert attribution.attribute("/repo/main.go", 1) == UNKNOWN_AUTHOR
    assert "Blame attribution failed" in caplog.text


def test_attribution_resolves_author() -> None:
    attribution = BlameAttribution(GitBlameProvider(Path("/repo"), runner=_runner(BLAME_OUTPUT)))

    assert attribution.attribute("/repo/main.go", 3) == "Linus"
