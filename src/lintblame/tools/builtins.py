# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Built-in analyzer definitions."""

from __future__ import annotations

import os
from dataclasses import replace
from typing import Final

from ..parsers.go import GO_BUILD_REPORTER, go_build_parser
from ..parsers.python import (
    PYCODESTYLE_REPORTER,
    PYLINT_MSG_TEMPLATE,
    PYLINT_REPORTER,
    pycodestyle_parser,
    pylint_parser,
)
from .base import NAME_PLACEHOLDER, PATH_PLACEHOLDER, Tool, ToolRunner
from .registry import ToolRegistry

PYTHON_EXTENSIONS: Final[frozenset[str]] = frozenset({".py"})
GO_EXTENSIONS: Final[frozenset[str]] = frozenset({".go"})


def pycodestyle_tool(runner: ToolRunner | None = None) -> Tool:
    """Return the pycodestyle adapter."""

    tool = Tool(
        name=PYCODESTYLE_REPORTER,
        extensions=PYTHON_EXTENSIONS,
        command=("pycodestyle", PATH_PLACEHOLDER),
        parser=pycodestyle_parser(),
    )
    return _with_runner(tool, runner)


def pylint_tool(runner: ToolRunner | None = None) -> Tool:
    """Return the pylint adapter emitting ``L: line, col: message`` lines."""

    tool = Tool(
        name=PYLINT_REPORTER,
        extensions=PYTHON_EXTENSIONS,
        command=(
            "pylint",
            "--output-format=text",
            "--reports=n",
            "--score=n",
            f"--msg-template={PYLINT_MSG_TEMPLATE}",
            PATH_PLACEHOLDER,
        ),
        parser=pylint_parser(),
    )
    return _with_runner(tool, runner)


def go_build_tool(runner: ToolRunner | None = None) -> Tool:
    """Return the ``go build`` adapter.

    The compiler reports on stderr and resolves the file relative to its own
    directory, so the tool runs there and discards the produced binary.
    """

    tool = Tool(
        name=GO_BUILD_REPORTER,
        extensions=GO_EXTENSIONS,
        command=("go", "build", "-o", os.devnull, NAME_PLACEHOLDER),
        parser=go_build_parser(),
        merge_stderr=True,
        run_in_file_dir=True,
    )
    return _with_runner(tool, runner)


def _with_runner(tool: Tool, runner: ToolRunner | None) -> Tool:
    if runner is None:
        return tool
    return replace(tool, runner=runner)


def default_registry(runner: ToolRunner | None = None) -> ToolRegistry:
    """Return a registry holding the built-in tools in invocation order.

    Args:
        runner: Optional command runner shared by every tool.

    Returns:
        ToolRegistry: Registry with pycodestyle, pylint and go-build.
    """

    registry = ToolRegistry()
    for factory in (pycodestyle_tool, pylint_tool, go_build_tool):
        registry.register(factory(runner))
    return registry


__all__ = [
    "GO_EXTENSIONS",
    "PYTHON_EXTENSIONS",
    "default_registry",
    "go_build_tool",
    "pycodestyle_tool",
    "pylint_tool",
]
