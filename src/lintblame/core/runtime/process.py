# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution."""

from __future__ import annotations

import shutil

# Bandit: subprocess usage is intentional; analyzers and git are launched from
# fixed argument lists without shell expansion.
import subprocess  # nosec B404
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from subprocess import CompletedProcess
from typing import Final

TIMEOUT_RETURNCODE: Final[int] = 124


class TimedOutProcess(CompletedProcess[str]):
    """Completed process standing in for a command killed by its timeout."""


def is_timed_out(completed: CompletedProcess[str]) -> bool:
    """Return ``True`` when ``completed`` was produced by a timeout, not by the command."""

    return isinstance(completed, TimedOutProcess)


@dataclass(slots=True, frozen=True)
class CommandOptions:
    """Immutable command execution options."""

    cwd: Path | None = None
    env: Mapping[str, str] | None = None
    check: bool = False
    capture_output: bool = True
    merge_stderr: bool = False
    timeout: float | None = None


class SubprocessExecutionError(RuntimeError):
    """Raised when a subprocess exits with a non-zero status while ``check`` is true."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int,
        stdout: str | None,
        stderr: str | None,
    ) -> None:
        """Initialise the error with captured subprocess metadata.

        Args:
            command: Normalised command that was executed.
            returncode: Exit status reported by the process.
            stdout: Captured standard output, when available.
            stderr: Captured standard error, when available.
        """

        super().__init__(
            f"Command '{command[0]}' exited with status {returncode}. stderr: {stderr or '<none>'}",
        )
        self.command = tuple(command)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


def _normalize_args(args: Sequence[str]) -> list[str]:
    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    resolved = shutil.which(head)
    if resolved is None:
        msg = f"Executable '{head}' was not found on PATH"
        raise FileNotFoundError(msg)
    return [resolved, *rest]


def _ensure_text(value: str | bytes | None) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return value.decode(errors="ignore")


def run_command(
    args: Sequence[str],
    *,
    options: CommandOptions | None = None,
) -> CompletedProcess[str]:
    """Execute ``args`` after normalising the executable path.

    Timeouts never raise: a :class:`TimedOutProcess` exiting with
    :data:`TIMEOUT_RETURNCODE` is returned and a note is appended to stderr.

    Args:
        args: Command arguments where the first item is the executable.
        options: Execution options; defaults capture output without checking.

    Returns:
        CompletedProcess[str]: Completed process with text outputs.

    Raises:
        FileNotFoundError: If the executable cannot be located on ``PATH``.
        SubprocessExecutionError: If ``options.check`` is set and the command fails.
    """

    resolved = options or CommandOptions()
    normalized = _normalize_args(args)
    stdout_target = subprocess.PIPE if resolved.capture_output else None
    if resolved.capture_output:
        stderr_target = subprocess.STDOUT if resolved.merge_stderr else subprocess.PIPE
    else:
        stderr_target = None

    try:
        # Bandit: argument lists come from fixed tool definitions.
        completed: CompletedProcess[str] = subprocess.run(  # nosec B603
            normalized,
            cwd=str(resolved.cwd) if resolved.cwd is not None else None,
            env=dict(resolved.env) if resolved.env is not None else None,
            check=False,
            stdout=stdout_target,
            stderr=stderr_target,
            text=True,
            errors="replace",
            timeout=resolved.timeout,
            stdin=subprocess.DEVNULL,
        )
    except subprocess.TimeoutExpired as exc:
        stdout = _ensure_text(exc.stdout) or ""
        stderr = _ensure_text(exc.stderr)
        timeout_msg = (
            f"Command timed out after {resolved.timeout:.1f}s" if resolved.timeout is not None else "Command timed out"
        )
        completed = TimedOutProcess(
            args=normalized,
            returncode=TIMEOUT_RETURNCODE,
            stdout=stdout,
            stderr=f"{stderr}\n{timeout_msg}" if stderr else timeout_msg,
        )

    if resolved.check and completed.returncode != 0:
        raise SubprocessExecutionError(
            normalized,
            completed.returncode,
            completed.stdout if isinstance(completed.stdout, str) else None,
            completed.stderr if isinstance(completed.stderr, str) else None,
        )

    return completed


CommandRunner = Callable[[Sequence[str], CommandOptions], CompletedProcess[str]]


def default_runner(cmd: Sequence[str], options: CommandOptions) -> CompletedProcess[str]:
    """Run ``cmd`` through :func:`run_command`; the default :data:`CommandRunner`."""

    return run_command(cmd, options=options)


def completed_lines(completed: CompletedProcess[str]) -> list[str]:
    """Return stdout lines of ``completed``, or an empty list on failure.

    Args:
        completed: Process result produced by :func:`run_command`.

    Returns:
        list[str]: Stdout split into lines when the command succeeded.
    """

    if completed.returncode != 0:
        return []
    return (completed.stdout or "").splitlines()


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
