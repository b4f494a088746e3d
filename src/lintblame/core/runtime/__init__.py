# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Runtime helpers for launching external commands."""

from .process import (
    TIMEOUT_RETURNCODE,
    CommandOptions,
    CommandRunner,
    SubprocessExecutionError,
    TimedOutProcess,
    completed_lines,
    default_runner,
    is_timed_out,
    run_command,
)

__all__ = [
    "CommandOptions",
    "CommandRunner",
    "SubprocessExecutionError",
    "TIMEOUT_RETURNCODE",
    "TimedOutProcess",
    "completed_lines",
    "default_runner",
    "is_timed_out",
    "run_command",
]
