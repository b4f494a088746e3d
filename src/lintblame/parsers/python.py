# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parsers for Python-related tooling output."""

from __future__ import annotations

import re
from typing import Final

from .base import PatternParser

PYCODESTYLE_REPORTER: Final[str] = "pycodestyle"
PYLINT_REPORTER: Final[str] = "pylint"

# ``path/to/module.py:12:80: E501 line too long (88 > 79 characters)``
PYCODESTYLE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^.*?:(?P<line>\d+):(?P<column>\d+):\s(?P<code>\w+)\s(?P<message>.+)$",
    re.MULTILINE,
)

# Produced by ``PYLINT_MSG_TEMPLATE``: ``W:  12, 4: unused import`` or
# ``W: 1234, 4: ...`` once the line number outgrows its padding.
# The severity letter comes first, unlike pycodestyle.
PYLINT_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?P<code>\w):\s*(?P<line>\d+),\s*(?P<column>\d+):\s(?P<message>.+)$",
    re.MULTILINE,
)
PYLINT_MSG_TEMPLATE: Final[str] = "{C}: {line:3d},{column:2d}: {msg}"


def pycodestyle_parser() -> PatternParser:
    """Return the parser for pycodestyle (formerly pep8) text output."""

    return PatternParser(reporter=PYCODESTYLE_REPORTER, pattern=PYCODESTYLE_PATTERN)


def pylint_parser() -> PatternParser:
    """Return the parser for pylint's templated text output."""

    return PatternParser(reporter=PYLINT_REPORTER, pattern=PYLINT_PATTERN)


__all__ = [
    "PYCODESTYLE_PATTERN",
    "PYCODESTYLE_REPORTER",
    "PYLINT_MSG_TEMPLATE",
    "PYLINT_PATTERN",
    "PYLINT_REPORTER",
    "pycodestyle_parser",
    "pylint_parser",
]
