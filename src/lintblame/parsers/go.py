# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parsers for Go toolchain output."""

from __future__ import annotations

import re
from typing import Final

from .base import PatternParser

GO_BUILD_REPORTER: Final[str] = "go-build"

# ``./main.go:7: undefined: foo`` or ``./main.go:7:2: undefined: foo``; the
# ``# package`` banner lines never match. No issue code is emitted.
GO_BUILD_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^[^:\s]+\.go:(?P<line>\d+)(?::(?P<column>\d+))?:\s(?P<message>.+)$",
    re.MULTILINE,
)


def go_build_parser() -> PatternParser:
    """Return the parser for ``go build`` compiler errors."""

    return PatternParser(reporter=GO_BUILD_REPORTER, pattern=GO_BUILD_PATTERN)


__all__ = ["GO_BUILD_PATTERN", "GO_BUILD_REPORTER", "go_build_parser"]
