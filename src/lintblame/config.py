# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loaders for the lintblame watcher."""

from __future__ import annotations

import math
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "lintblame"


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


def default_parallel_jobs() -> int:
    """Return 75% of available CPU cores (minimum of 1)."""
    cores = os.cpu_count() or 1
    return max(1, math.floor(cores * 0.75))


class WatchConfig(BaseModel):
    """Tunables for the polling loop and the analysis fan-out."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    poll_interval: float = Field(default=1.0, gt=0)
    refresh_every: int = Field(default=5, ge=1)
    jobs: int = Field(default_factory=default_parallel_jobs, ge=1)
    timeout: float = Field(default=60.0, gt=0)
    base_branch: str = Field(default="master", min_length=1)
    color: bool = True


def _read_pyproject_section(path: Path) -> dict[str, Any]:
    """Return the ``[tool.lintblame]`` table from ``path`` when present.

    Args:
        path: Location of a ``pyproject.toml`` file.

    Returns:
        dict[str, Any]: Raw configuration values, empty when absent.

    Raises:
        ConfigError: If the file cannot be parsed or the section is not a table.
    """

    if not path.is_file():
        return {}
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Unable to read {path}: {exc}") from exc
    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ConfigError(f"[{PYPROJECT_TOOL_KEY}.{PYPROJECT_SECTION_KEY}] in {path} must be a table")
    return {str(key).replace("-", "_"): value for key, value in section.items()}


def load_config(
    working_dir: Path | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> WatchConfig:
    """Build a :class:`WatchConfig` from defaults, ``pyproject.toml`` and overrides.

    Later layers win: built-in defaults, then ``[tool.lintblame]`` in
    ``working_dir/pyproject.toml``, then ``overrides``. Override values of
    ``None`` are ignored so unset CLI options fall through.

    Args:
        working_dir: Directory searched for ``pyproject.toml``.
        overrides: Explicit values, typically from the command line.

    Returns:
        WatchConfig: Validated configuration.

    Raises:
        ConfigError: If any layer supplies an invalid value.
    """

    payload: dict[str, Any] = {}
    if working_dir is not None:
        payload.update(_read_pyproject_section(working_dir / PYPROJECT_FILENAME))
    for key, value in (overrides or {}).items():
        if value is not None:
            payload[key] = value
    try:
        return WatchConfig(**payload)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


__all__ = [
    "ConfigError",
    "WatchConfig",
    "default_parallel_jobs",
    "load_config",
]
