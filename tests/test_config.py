# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for watcher configuration loading."""

from pathlib import Path
from textwrap import dedent

import pytest

from lintblame.config import ConfigError, WatchConfig, default_parallel_jobs, load_config


def test_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config == WatchConfig()
    assert config.poll_interval == 1.0
    assert config.refresh_every == 5
    assert config.base_branch == "master"
    assert config.jobs == default_parallel_jobs() >= 1


def test_pyproject_section_with_dashed_keys(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        dedent(
            """
            [tool.lintblame]
            poll-interval = 0.25
            refresh_every = 10
            base-branch = "main"
            """,
        ),
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.poll_interval == 0.25
    assert config.refresh_every == 10
    assert config.base_branch == "main"


def test_overrides_win_and_none_falls_through(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.lintblame]\njobs = 3\ntimeout = 5\n", encoding="utf-8")

    config = load_config(tmp_path, {"jobs": 7, "timeout": None, "color": False})

    assert config.jobs == 7
    assert config.timeout == 5.0
    assert config.color is False


def test_pyproject_without_section(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[project]\nname = 'demo'\n", encoding="utf-8")

    assert load_config(tmp_path) == WatchConfig()


@pytest.mark.parametrize(
    "body",
    [
        "[tool.lintblame]\npoll_interval = 0\n",
        "[tool.lintblame]\nunknown = 1\n",
        "[tool]\nlintblame = 3\n",
        "[tool.lintblame\n",
    ],
)
def test_invalid_configuration_raises(tmp_path: Path, body: str) -> None:
    (tmp_path / "pyproject.toml").write_text(body, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_invalid_override_raises() -> None:
    with pytest.raises(ConfigError):
        load_config(None, {"jobs": 0})
