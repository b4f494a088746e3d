# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the lintblame package."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..blame import author_for_line

DEFAULT_COLUMN = 0
DEFAULT_CODE = "-"


class Diagnostic(BaseModel):
    """A single issue reported by an analyzer for one line of a file."""

    model_config = ConfigDict(frozen=True)

    reporter: str = Field(min_length=1)
    line: int = Field(ge=1)
    column: int = Field(default=DEFAULT_COLUMN, ge=0)
    code: str = Field(default=DEFAULT_CODE, min_length=1)
    message: str

    def __str__(self) -> str:
        return f"{self.line}: [{self.reporter} {self.code}] {self.message}"


class TrackedPath(BaseModel):
    """A path under polling surveillance and its last-seen modification time."""

    model_config = ConfigDict(frozen=True)

    path: str
    mtime_ns: int


class AnalysisResult(BaseModel):
    """Outcome of analysing one file during a single pass.

    Instances are immutable; every pass produces a fresh result that supersedes
    the previous one for the same path. ``diagnostics`` maps 1-based line
    numbers to the diagnostics reported for that line, in adapter invocation
    order. Lines without diagnostics are absent from the mapping.
    """

    model_config = ConfigDict(frozen=True)

    path: str
    content_lines: tuple[str, ...] = ()
    blame_lines: tuple[str, ...] = ()
    diagnostics: Mapping[int, tuple[Diagnostic, ...]] = Field(default_factory=dict)
    error: str | None = None

    @model_validator(mode="after")
    def _check_line_bounds(self) -> AnalysisResult:
        """Reject diagnostics keyed outside the file's content lines.

        Returns:
            AnalysisResult: The validated instance.

        Raises:
            ValueError: If a key is below 1 or beyond the content-line count.
        """

        limit = len(self.content_lines)
        for line in self.diagnostics:
            if line < 1 or line > limit:
                raise ValueError(f"diagnostic line {line} outside 1..{limit} for {self.path}")
        return self

    @classmethod
    def build(
        cls,
        path: str,
        content_lines: Sequence[str],
        blame_lines: Sequence[str],
        diagnostics: Iterable[Diagnostic],
    ) -> AnalysisResult:
        """Group ``diagnostics`` by line and return a new result.

        Diagnostics reported past the end of the file (for example a
        trailing-newline warning) are attached to the last line.

        Args:
            path: Absolute path of the analysed file.
            content_lines: File content split on newlines.
            blame_lines: Attribution text per content line, possibly empty.
            diagnostics: Diagnostics in the order the adapters produced them.

        Returns:
            AnalysisResult: Immutable result for ``path``.
        """

        lines = tuple(content_lines) or ("",)
        last_line = len(lines)
        index: dict[int, list[Diagnostic]] = {}
        for diagnostic in diagnostics:
            if diagnostic.line > last_line:
                diagnostic = diagnostic.model_copy(update={"line": last_line})
            index.setdefault(diagnostic.line, []).append(diagnostic)
        return cls(
            path=path,
            content_lines=lines,
            blame_lines=tuple(blame_lines),
            diagnostics={line: tuple(entries) for line, entries in index.items()},
        )

    @classmethod
    def degraded(cls, path: str, error: str) -> AnalysisResult:
        """Return an empty result for ``path`` carrying ``error``."""

        return cls(path=path, error=error)

    def diagnostics_for(self, line: int) -> tuple[Diagnostic, ...]:
        """Return diagnostics reported for ``line`` (empty when none)."""

        return tuple(self.diagnostics.get(line, ()))

    def lines_with_diagnostics(self) -> list[int]:
        """Return line numbers carrying diagnostics in ascending order."""

        return sorted(self.diagnostics)

    @property
    def diagnostic_count(self) -> int:
        """Return the total number of diagnostics across all lines."""

        return sum(len(entries) for entries in self.diagnostics.values())

    @property
    def is_clean(self) -> bool:
        """Return ``True`` when no analyzer reported anything for the file."""

        return not self.diagnostics

    def author(self, line: int) -> str:
        """Return the blamed author of ``line`` or ``"unknown"``."""

        return author_for_line(self.blame_lines, line)

    def source_line(self, line: int) -> str:
        """Return the stripped source text of ``line`` or an empty string."""

        if 1 <= line <= len(self.content_lines):
            return self.content_lines[line - 1].strip()
        return ""


__all__ = [
    "AnalysisResult",
    "DEFAULT_CODE",
    "DEFAULT_COLUMN",
    "Diagnostic",
    "TrackedPath",
]
