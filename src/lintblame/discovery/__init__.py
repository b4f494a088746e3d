# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Path sources feeding the change tracker."""

from .base import PathSource, PathSourceError, filter_paths
from .filesystem import DirectoryPathSource, FilePathSource
from .git import GitBranchPathSource
from .planners import resolve_path_source

__all__ = [
    "DirectoryPathSource",
    "FilePathSource",
    "GitBranchPathSource",
    "PathSource",
    "PathSourceError",
    "filter_paths",
    "resolve_path_source",
]
