# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from lintblame.core.logging import PACKAGE_LOGGER_NAME, PackageLogHandler


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo handlers installed by ``configure_logging`` so ``caplog`` keeps working."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, PackageLogHandler):
            logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def python_file(tmp_path: Path) -> Path:
    """Return a small Python module on disk."""
    path = tmp_path / "app.py"
    path.write_text("import os\n\n\ndef main():\n    return 1\n", encoding="utf-8")
    return path
