# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the diagnostic and analysis result models."""

import pytest
from pydantic import ValidationError

from lintblame.core.models import AnalysisResult, Diagnostic


def _diag(reporter: str, line: int, code: str = "X1") -> Diagnostic:
    return Diagnostic(reporter=reporter, line=line, column=0, code=code, message=f"{reporter} says hi")


def test_diagnostic_defaults_and_rendering() -> None:
    diag = Diagnostic(reporter="go-build", line=7, message="undefined: foo")

    assert diag.column == 0
    assert diag.code == "-"
    assert str(diag) == "7: [go-build -] undefined: foo"


@pytest.mark.parametrize(
    "fields",
    [
        {"reporter": "pylint", "line": 0, "message": "m"},
        {"reporter": "pylint", "line": 1, "column": -1, "message": "m"},
        {"reporter": "", "line": 1, "message": "m"},
        {"reporter": "pylint", "line": 1, "code": "", "message": "m"},
    ],
)
def test_diagnostic_rejects_invalid_fields(fields: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        Diagnostic(**fields)


def test_diagnostic_is_immutable() -> None:
    diag = _diag("pylint", 3)

    with pytest.raises(ValidationError):
        diag.line = 4  # type: ignore[misc]


def test_build_groups_by_line_in_invocation_order() -> None:
    first = _diag("pycodestyle", 2, "E501")
    second = _diag("pylint", 2, "W")
    third = _diag("pylint", 1, "C")

    result = AnalysisResult.build("/tmp/a.py", ["import os", "x = 1", ""], [], [first, second, third])

    assert result.diagnostics_for(2) == (first, second)
    assert result.diagnostics_for(1) == (third,)
    assert result.diagnostics_for(3) == ()
    assert result.lines_with_diagnostics() == [1, 2]
    assert result.diagnostic_count == 3
    assert not result.is_clean


def test_build_without_diagnostics_is_clean() -> None:
    result = AnalysisResult.build("/tmp/a.py", ["pass", ""], [], [])

    assert result.is_clean
    assert dict(result.diagnostics) == {}
    assert result.error is None


def test_build_clamps_lines_past_end_of_file() -> None:
    result = AnalysisResult.build("/tmp/a.py", ["pass"], [], [_diag("pycodestyle", 5, "W391")])

    assert result.lines_with_diagnostics() == [1]
    assert result.diagnostics_for(1)[0].code == "W391"


def test_result_rejects_out_of_bounds_keys() -> None:
    with pytest.raises(ValidationError):
        AnalysisResult(path="/tmp/a.py", content_lines=("pass",), diagnostics={2: (_diag("pylint", 2),)})


def test_author_and_source_line_lookup() -> None:
    blame = [
        "^1a2b3c4 (Ada Lovelace 2015-03-01 10:00:00 +0000 1) import os",
        "5d6e7f80 (Not Committed Yet 2026-10-18 09:00:00 +0000 2)     x = 1",
    ]
    result = AnalysisResult.build("/tmp/a.py", ["import os", "    x = 1"], blame, [])

    assert result.author(1) == "Ada Lovelace"
    assert result.author(2) == "Not Committed Yet"
    assert result.author(3) == "unknown"
    assert result.source_line(2) == "x = 1"
    assert result.source_line(9) == ""


def test_degraded_result_carries_error() -> None:
    result = AnalysisResult.degraded("/tmp/gone.py", "unable to read file")

    assert result.content_lines == ()
    assert result.blame_lines == ()
    assert result.is_clean
    assert result.error == "unable to read file"
