# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Analyzer adapter abstractions wrapping external tools."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final, Protocol, runtime_checkable

from ..core.models import Diagnostic
from ..core.runtime.process import CommandOptions, CommandRunner, default_runner, is_timed_out
from ..parsers.base import PatternParser

LOGGER = logging.getLogger(__name__)

PATH_PLACEHOLDER: Final[str] = "{path}"
NAME_PLACEHOLDER: Final[str] = "{name}"
TIMEOUT_CODE: Final[str] = "timeout"

ToolRunner = CommandRunner


@runtime_checkable
class AnalyzerAdapter(Protocol):
    """Capability turning one external tool's output into diagnostics."""

    @property
    def name(self) -> str:
        """Return the reporter name attached to produced diagnostics."""
        ...

    def applies_to(self, path: str) -> bool:
        """Return ``True`` when the adapter handles files like ``path``."""
        ...

    def analyze(self, path: str, *, cwd: Path | None, timeout: float | None) -> list[Diagnostic]:
        """Run the tool against ``path`` and return extracted diagnostics."""
        ...


@dataclass(slots=True, frozen=True)
class ToolRun:
    """Raw output captured from a single tool invocation."""

    output: str
    returncode: int
    timed_out: bool = False


@dataclass(slots=True, frozen=True)
class Tool:
    """External analyzer bound to a file extension set and an output parser.

    Attributes:
        name: Tool identifier, also the reporter name on its diagnostics.
        extensions: File suffixes (including the dot) the tool applies to.
        command: Argument template; ``{path}`` and ``{name}`` are substituted
            with the absolute path and the file name respectively.
        parser: Pattern parser extracting diagnostics from the output.
        merge_stderr: Parse stderr together with stdout.
        run_in_file_dir: Launch from the file's directory instead of ``cwd``.
        runner: Command runner, replaceable for tests.
    """

    name: str
    extensions: frozenset[str]
    command: tuple[str, ...]
    parser: PatternParser
    merge_stderr: bool = False
    run_in_file_dir: bool = False
    runner: ToolRunner = field(default=default_runner, compare=False, repr=False)

    def applies_to(self, path: str) -> bool:
        return Path(path).suffix in self.extensions

    def build_command(self, path: str) -> list[str]:
        """Return the command line for ``path`` with placeholders substituted."""

        target = Path(path)
        return [
            part.replace(PATH_PLACEHOLDER, str(target)).replace(NAME_PLACEHOLDER, target.name) for part in self.command
        ]

    def run(self, path: str, *, cwd: Path | None = None, timeout: float | None = None) -> ToolRun:
        """Execute the tool for ``path`` and capture its output.

        Args:
            path: Absolute path of the file to analyse.
            cwd: Working directory used unless ``run_in_file_dir`` is set.
            timeout: Optional limit in seconds for the invocation.

        Returns:
            ToolRun: Captured output, exit status and timeout flag.

        Raises:
            OSError: If the executable cannot be launched.
        """

        workdir = Path(path).parent if self.run_in_file_dir else cwd
        options = CommandOptions(cwd=workdir, merge_stderr=self.merge_stderr, timeout=timeout)
        completed = self.runner(self.build_command(path), options)
        return ToolRun(
            output=completed.stdout or "",
            returncode=completed.returncode,
            timed_out=is_timed_out(completed),
        )

    def analyze(self, path: str, *, cwd: Path | None = None, timeout: float | None = None) -> list[Diagnostic]:
        """Run the tool and extract diagnostics, degrading on launch failure.

        A non-zero exit status is expected from linters that found issues, so
        output is parsed regardless. A run that exceeds ``timeout`` yields a
        single ``timeout`` diagnostic on line 1.

        Args:
            path: Absolute path of the file to analyse.
            cwd: Working directory for the invocation.
            timeout: Optional limit in seconds for the invocation.

        Returns:
            list[Diagnostic]: Extracted diagnostics in output order.

        Raises:
            DiagnosticParseError: If the output violates the parser's field contract.
        """

        try:
            run = self.run(path, cwd=cwd, timeout=timeout)
        except OSError as exc:
            LOGGER.warning("%s could not be launched for %s: %s", self.name, path, exc)
            return []
        if run.timed_out:
            LOGGER.warning("%s timed out after %ss on %s", self.name, timeout, path)
            return [
                Diagnostic(
                    reporter=self.name,
                    line=1,
                    code=TIMEOUT_CODE,
                    message=f"analysis timed out after {timeout:g}s",
                ),
            ]
        diagnostics = self.parser.parse(run.output)
        LOGGER.debug("%s exited %s with %d diagnostic(s) for %s", self.name, run.returncode, len(diagnostics), path)
        return diagnostics


__all__ = [
    "AnalyzerAdapter",
    "NAME_PLACEHOLDER",
    "PATH_PLACEHOLDER",
    "TIMEOUT_CODE",
    "Tool",
    "ToolRun",
    "ToolRunner",
]
