# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Smoke tests for the lintblame command line."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from lintblame.cli.app import app, build_controller
from lintblame.config import WatchConfig
from lintblame.reporting import ConsoleReporter

runner = CliRunner()


def test_once_renders_single_pass(python_file: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, [str(python_file), "--once", "--no-color", "--timeout", "30"])

    assert result.exit_code == 0, result.output
    assert "--- LintBlame ---" in result.output
    assert str(python_file) in result.output
    assert "Analysed 1 file(s)" in result.output


def test_missing_target_exits_with_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, [str(tmp_path / "nope.py"), "--once", "--no-color"])

    assert result.exit_code == 1
    assert "Unable to process argument" in result.output


def test_no_target_and_no_branch_is_usage_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, [])

    assert result.exit_code == 2


def test_invalid_pyproject_config_exits_with_error(
    python_file: Path,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.lintblame]\npoll_interval = -1\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, [str(python_file), "--once", "--no-color"])

    assert result.exit_code == 1
    assert "poll_interval" in result.output


def test_invalid_option_value_exits_with_error(
    python_file: Path,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, [str(python_file), "--once", "--no-color", "--jobs", "0"])

    assert result.exit_code == 1


def test_build_controller_wires_directory_source(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "a.py").write_text("", encoding="utf-8")
    (tmp_path / "b.txt").write_text("", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    controller = build_controller(tmp_path, branch=False, config=WatchConfig(jobs=2, color=False), once=True)

    assert controller.scans == 0
    assert isinstance(controller._presenter, ConsoleReporter)  # noqa: SLF001
    assert controller._source.initial_paths() == [str(tmp_path / "a.py")]  # noqa: SLF001


def test_once_without_matching_files_warns(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "notes.txt").write_text("hello\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, [str(tmp_path), "--once", "--no-color"])

    assert result.exit_code == 0, result.output
    assert "No matching files to analyse" in result.output
