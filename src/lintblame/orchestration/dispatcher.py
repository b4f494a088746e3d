# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Concurrent per-file analysis with bounded fan-out and isolated failures."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from enum import Enum
from pathlib import Path

from ..blame import BlameAttribution
from ..core.models import AnalysisResult, Diagnostic
from ..parsers.base import DiagnosticParseError
from ..tools.base import AnalyzerAdapter

LOGGER = logging.getLogger(__name__)

ResultCallback = Callable[[AnalysisResult], None]
FileReader = Callable[[str], str]


class ResultOrder(str, Enum):
    """Order in which :meth:`AnalysisDispatcher.dispatch` returns results."""

    INPUT = "input"
    COMPLETION = "completion"


def read_source(path: str) -> str:
    """Return the text of ``path``; undecodable bytes are replaced."""

    return Path(path).read_text(encoding="utf-8", errors="replace")


class AnalysisDispatcher:
    """Fan out one analysis task per file and fan the results back in.

    Each task reads the file, fetches blame attribution and runs every
    applicable adapter in order. Tasks run on a pool capped at ``jobs``
    workers. Every external call carries ``timeout``, so a pass is bounded
    even when a tool hangs.
    """

    def __init__(
        self,
        adapters: Sequence[AnalyzerAdapter],
        attribution: BlameAttribution,
        *,
        jobs: int = 1,
        timeout: float | None = None,
        cwd: Path | None = None,
        reader: FileReader = read_source,
    ) -> None:
        """Create a dispatcher.

        Args:
            adapters: Analyzer adapters in invocation order.
            attribution: Blame attribution used for every file.
            jobs: Maximum number of files analysed concurrently.
            timeout: Per-call limit in seconds for external tools.
            cwd: Working directory handed to adapters.
            reader: Function returning a file's text content.

        Raises:
            ValueError: If ``jobs`` is lower than one.
        """

        if jobs < 1:
            raise ValueError("jobs must be at least 1")
        self._adapters = tuple(adapters)
        self._attribution = attribution
        self._jobs = jobs
        self._timeout = timeout
        self._cwd = cwd
        self._reader = reader

    @property
    def jobs(self) -> int:
        return self._jobs

    def analyze(self, path: str) -> AnalysisResult:
        """Analyse one file and return a fresh :class:`AnalysisResult`.

        Args:
            path: Absolute path of the file to analyse.

        Returns:
            AnalysisResult: Result for ``path``; degraded when the file is unreadable.

        Raises:
            DiagnosticParseError: If an adapter's output violates its field contract.
        """

        try:
            content = self._reader(path)
        except OSError as exc:
            LOGGER.warning("Unable to read file %s: %s", path, exc)
            return AnalysisResult.degraded(path, f"unable to read file: {exc}")
        blame_lines = self._attribution.lines_for(path)
        diagnostics: list[Diagnostic] = []
        for adapter in self._adapters:
            if adapter.applies_to(path):
                diagnostics.extend(adapter.analyze(path, cwd=self._cwd, timeout=self._timeout))
        return AnalysisResult.build(path, content.split("\n"), blame_lines, diagnostics)

    def dispatch(
        self,
        paths: Sequence[str],
        *,
        on_result: ResultCallback | None = None,
        order: ResultOrder = ResultOrder.INPUT,
    ) -> list[AnalysisResult]:
        """Analyse ``paths`` concurrently and collect the results.

        A failure while analysing one file degrades that file's result and
        never prevents the others from completing. A
        :class:`DiagnosticParseError` is re-raised once every task finished.

        Args:
            paths: Files to analyse, in presentation order.
            on_result: Optional callback invoked in completion order.
            order: Whether to return results in input or completion order.

        Returns:
            list[AnalysisResult]: One result per entry in ``paths``.

        Raises:
            DiagnosticParseError: If any adapter reported a contract violation.
        """

        if not paths:
            return []
        by_index: dict[int, AnalysisResult] = {}
        completion: list[AnalysisResult] = []
        fatal: DiagnosticParseError | None = None
        with ThreadPoolExecutor(max_workers=min(self._jobs, len(paths))) as executor:
            future_map = {executor.submit(self.analyze, path): index for index, path in enumerate(paths)}
            for future in as_completed(future_map):
                index = future_map[future]
                path = paths[index]
                try:
                    result = future.result()
                except DiagnosticParseError as exc:
                    fatal = fatal or exc
                    result = AnalysisResult.degraded(path, str(exc))
                except Exception as exc:  # one broken file must not sink the pass
                    LOGGER.exception("Analysis of %s failed", path)
                    result = AnalysisResult.degraded(path, f"analysis failed: {exc}")
                by_index[index] = result
                completion.append(result)
                if on_result is not None:
                    on_result(result)
        if fatal is not None:
            raise fatal
        if order is ResultOrder.COMPLETION:
            return completion
        return [by_index[index] for index in range(len(paths))]


__all__ = ["AnalysisDispatcher", "ResultCallback", "ResultOrder", "read_source"]
