# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Analyzer adapters and their registry."""

from .base import TIMEOUT_CODE, AnalyzerAdapter, Tool, ToolRun, ToolRunner
from .builtins import default_registry, go_build_tool, pycodestyle_tool, pylint_tool
from .registry import ToolRegistry

__all__ = [
    "AnalyzerAdapter",
    "TIMEOUT_CODE",
    "Tool",
    "ToolRegistry",
    "ToolRun",
    "ToolRunner",
    "default_registry",
    "go_build_tool",
    "pycodestyle_tool",
    "pylint_tool",
]
