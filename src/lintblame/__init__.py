# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Watch source files and re-run linters, annotating diagnostics with git blame."""

from __future__ import annotations

from .blame import UNKNOWN_AUTHOR, BlameAttribution, GitBlameProvider
from .config import ConfigError, WatchConfig, load_config
from .core.models import AnalysisResult, Diagnostic, TrackedPath
from .orchestration import AnalysisDispatcher, CycleController, CycleState, ResultOrder
from .parsers import DiagnosticParseError
from .tracking import ChangeTracker

__version__ = "0.1.0"

__all__ = [
    "AnalysisDispatcher",
    "AnalysisResult",
    "BlameAttribution",
    "ChangeTracker",
    "ConfigError",
    "CycleController",
    "CycleState",
    "Diagnostic",
    "DiagnosticParseError",
    "GitBlameProvider",
    "ResultOrder",
    "TrackedPath",
    "UNKNOWN_AUTHOR",
    "WatchConfig",
    "__version__",
    "load_config",
]
