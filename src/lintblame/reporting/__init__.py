# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Result presentation."""

from .console import CLEAN_MESSAGE, HEADER_TITLE, ConsoleReporter

__all__ = ["CLEAN_MESSAGE", "ConsoleReporter", "HEADER_TITLE"]
