# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers plus module logger configuration."""

from __future__ import annotations

import logging
import sys
from typing import Final

from rich.text import Text

from ..console import detect_tty, get_console_manager

PACKAGE_LOGGER_NAME: Final[str] = "lintblame"


class PackageLogHandler(logging.StreamHandler):
    """Stderr handler installed on the package logger by :func:`configure_logging`."""

    def __init__(self) -> None:
        super().__init__(stream=sys.stderr)
        self.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))


def emoji(symbol: str, enable: bool) -> str:
    """Return ``symbol`` when emoji output is enabled, otherwise an empty string."""

    return symbol if enable else ""


def _print_line(
    msg: str,
    *,
    style: str | None,
    use_emoji: bool,
    use_color: bool | None = None,
) -> None:
    """Render ``msg`` to the console using shared styling helpers.

    Args:
        msg: Message text to print to the console.
        style: Rich style name to apply when colour output is active.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    color_enabled = detect_tty() if use_color is None else use_color
    console = get_console_manager().get(color=color_enabled, emoji=use_emoji)
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    console.print(text)


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an informational message."""

    prefix = emoji("ℹ️ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="cyan", use_emoji=use_emoji, use_color=use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a success message."""

    prefix = emoji("✅ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="green", use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a warning message."""

    prefix = emoji("⚠️ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="yellow", use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an error message."""

    prefix = emoji("❌ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="red", use_emoji=use_emoji, use_color=use_color)


def configure_logging(*, verbose: bool) -> logging.Logger:
    """Attach a stderr handler to the package logger exactly once.

    Args:
        verbose: When ``True`` debug records are emitted, otherwise only warnings.

    Returns:
        logging.Logger: The configured package logger.
    """

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if not any(isinstance(handler, PackageLogHandler) for handler in logger.handlers):
        logger.addHandler(PackageLogHandler())
        logger.propagate = False
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger


__all__ = [
    "PACKAGE_LOGGER_NAME",
    "PackageLogHandler",
    "configure_logging",
    "emoji",
    "fail",
    "info",
    "ok",
    "warn",
]
