# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared parser infrastructure for text-emitting analyzers."""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Final

from ..config import ConfigError
from ..core.models import DEFAULT_CODE, DEFAULT_COLUMN, Diagnostic

LINE_GROUP: Final[str] = "line"
COLUMN_GROUP: Final[str] = "column"
CODE_GROUP: Final[str] = "code"
MESSAGE_GROUP: Final[str] = "message"

_REQUIRED_GROUPS: Final[frozenset[str]] = frozenset({LINE_GROUP, MESSAGE_GROUP})
_DEFAULTS: Final[Mapping[str, str]] = {
    COLUMN_GROUP: str(DEFAULT_COLUMN),
    CODE_GROUP: DEFAULT_CODE,
}


class DiagnosticParseError(ConfigError):
    """Raised when analyzer output matches a pattern but a field cannot be coerced.

    This signals that the tool's output contract changed; it is never raised
    merely because a tool reported nothing.
    """

    def __init__(self, reporter: str, field_name: str, value: str, source_line: str) -> None:
        super().__init__(
            f"{reporter}: cannot parse {field_name} {value!r} from output line {source_line!r}",
        )
        self.reporter = reporter
        self.field_name = field_name
        self.value = value
        self.source_line = source_line


def _coerce_int(reporter: str, field_name: str, value: str, match: re.Match[str]) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise DiagnosticParseError(reporter, field_name, value, match.group(0)) from exc


@dataclass(slots=True, frozen=True)
class PatternParser:
    """Extract diagnostics from raw text using a tool-specific regex.

    The pattern must define ``line`` and ``message`` named groups and may
    define ``column`` and ``code``. Missing or unmatched optional groups fall
    back to ``defaults`` (column ``0`` and code ``-`` unless overridden), so
    each tool expresses its own field order purely through the regex.

    Attributes:
        reporter: Name stamped onto every produced diagnostic.
        pattern: Compiled pattern applied to the whole output in multiline mode.
        defaults: Fallback values for optional groups.
    """

    reporter: str
    pattern: re.Pattern[str]
    defaults: Mapping[str, str] = field(default_factory=lambda: dict(_DEFAULTS))

    def __post_init__(self) -> None:
        missing = _REQUIRED_GROUPS.difference(self.pattern.groupindex)
        if missing:
            raise ConfigError(f"{self.reporter}: pattern lacks group(s) {', '.join(sorted(missing))}")

    def iter_matches(self, text: str) -> Iterator[re.Match[str]]:
        """Yield every match of the pattern within ``text``."""

        yield from self.pattern.finditer(text)

    def _group(self, match: re.Match[str], name: str) -> str:
        value = match.groupdict().get(name)
        if value is None:
            return self.defaults.get(name, _DEFAULTS.get(name, ""))
        return value

    def parse(self, text: str) -> list[Diagnostic]:
        """Return diagnostics extracted from ``text``.

        Args:
            text: Raw analyzer output.

        Returns:
            list[Diagnostic]: Diagnostics in output order.

        Raises:
            DiagnosticParseError: If a numeric field fails to coerce.
        """

        diagnostics: list[Diagnostic] = []
        for match in self.iter_matches(text):
            line = _coerce_int(self.reporter, LINE_GROUP, self._group(match, LINE_GROUP), match)
            column = _coerce_int(self.reporter, COLUMN_GROUP, self._group(match, COLUMN_GROUP), match)
            code = self._group(match, CODE_GROUP).strip() or DEFAULT_CODE
            # File-level findings are reported on line 0 by some tools.
            diagnostics.append(
                Diagnostic(
                    reporter=self.reporter,
                    line=max(line, 1),
                    column=max(column, 0),
                    code=code,
                    message=self._group(match, MESSAGE_GROUP).strip(),
                ),
            )
        return diagnostics


__all__ = [
    "CODE_GROUP",
    "COLUMN_GROUP",
    "DiagnosticParseError",
    "LINE_GROUP",
    "MESSAGE_GROUP",
    "PatternParser",
]
