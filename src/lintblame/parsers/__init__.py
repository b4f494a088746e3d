# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parsers turning analyzer output into diagnostics."""

from .base import DiagnosticParseError, PatternParser
from .go import GO_BUILD_PATTERN, GO_BUILD_REPORTER, go_build_parser
from .python import (
    PYCODESTYLE_PATTERN,
    PYCODESTYLE_REPORTER,
    PYLINT_MSG_TEMPLATE,
    PYLINT_PATTERN,
    PYLINT_REPORTER,
    pycodestyle_parser,
    pylint_parser,
)

__all__ = [
    "DiagnosticParseError",
    "GO_BUILD_PATTERN",
    "GO_BUILD_REPORTER",
    "PYCODESTYLE_PATTERN",
    "PYCODESTYLE_REPORTER",
    "PYLINT_MSG_TEMPLATE",
    "PYLINT_PATTERN",
    "PYLINT_REPORTER",
    "PatternParser",
    "go_build_parser",
    "pycodestyle_parser",
    "pylint_parser",
]
