# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Polling loop driving change detection, refreshes and re-analysis."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from enum import Enum

from ..core.models import AnalysisResult
from ..discovery.base import PathSource, PathSourceError
from ..tracking import ChangeTracker
from .dispatcher import AnalysisDispatcher

LOGGER = logging.getLogger(__name__)

Presenter = Callable[[Sequence[AnalysisResult]], None]
SleepFn = Callable[[float], None]


class CycleState(str, Enum):
    """States of the polling loop."""

    IDLE = "idle"
    SCANNING = "scanning"


class CycleController:
    """Poll the tracked files and re-run the analysis pass when anything changed.

    Each tick observes every tracked path; any change triggers a scan of the
    whole tracked set in recency order. Every ``refresh_every`` ticks the path
    source is consulted again and a change in the tracked count also triggers
    a scan. A scan always runs to completion before the next tick.
    """

    def __init__(
        self,
        source: PathSource,
        tracker: ChangeTracker,
        dispatcher: AnalysisDispatcher,
        presenter: Presenter,
        *,
        poll_interval: float = 1.0,
        refresh_every: int = 5,
        sleep: SleepFn = time.sleep,
    ) -> None:
        """Create a controller.

        Args:
            source: Supplier of the tracked path set.
            tracker: Change tracker owned by this controller.
            dispatcher: Dispatcher running the analysis pass.
            presenter: Callback receiving ordered results after every scan.
            poll_interval: Seconds slept between ticks.
            refresh_every: Number of ticks between full refreshes.
            sleep: Sleep function, replaceable for tests.

        Raises:
            ValueError: If ``poll_interval`` is not positive or ``refresh_every`` is below one.
        """

        if poll_interval <= 0:
            raise ValueError("poll_interval must be positive")
        if refresh_every < 1:
            raise ValueError("refresh_every must be at least 1")
        self._source = source
        self._tracker = tracker
        self._dispatcher = dispatcher
        self._presenter = presenter
        self._poll_interval = poll_interval
        self._refresh_every = refresh_every
        self._sleep = sleep
        self._state = CycleState.IDLE
        self._ticks = 0
        self._scans = 0
        self._last_results: tuple[AnalysisResult, ...] = ()

    @property
    def state(self) -> CycleState:
        return self._state

    @property
    def ticks(self) -> int:
        return self._ticks

    @property
    def scans(self) -> int:
        return self._scans

    @property
    def last_results(self) -> tuple[AnalysisResult, ...]:
        return self._last_results

    def start(self) -> list[AnalysisResult]:
        """Load the initial path set and run the first scan.

        Returns:
            list[AnalysisResult]: Results of the initial scan.

        Raises:
            PathSourceError: If the initial path set cannot be resolved.
        """

        self._tracker.refresh(self._source.initial_paths())
        LOGGER.debug("Tracking %d path(s)", self._tracker.count())
        return self.scan()

    def scan(self) -> list[AnalysisResult]:
        """Analyse every tracked path in recency order and present the results."""

        self._state = CycleState.SCANNING
        try:
            results = self._dispatcher.dispatch(self._tracker.recency_order())
            self._scans += 1
            self._last_results = tuple(results)
            self._presenter(results)
            return results
        finally:
            self._state = CycleState.IDLE

    def tick(self) -> bool:
        """Run one poll cycle.

        Returns:
            bool: ``True`` when the tick triggered a scan.
        """

        self._ticks += 1
        changed = [path for path in self._tracker.paths() if self._tracker.observe(path)]
        needs_scan = bool(changed)
        if changed:
            LOGGER.debug("Changed: %s", ", ".join(changed))
        if self._ticks % self._refresh_every == 0 and self._refresh():
            needs_scan = True
        if needs_scan:
            self.scan()
        return needs_scan

    def _refresh(self) -> bool:
        try:
            paths = self._source.initial_paths()
        except PathSourceError as exc:
            LOGGER.warning("Refresh skipped, keeping %d tracked path(s): %s", self._tracker.count(), exc)
            return False
        return self._tracker.refresh(paths)

    def run(self, max_ticks: int | None = None) -> None:
        """Start, then tick every ``poll_interval`` seconds.

        Args:
            max_ticks: Stop after this many ticks; ``None`` polls forever.
        """

        self.start()
        while max_ticks is None or self._ticks < max_ticks:
            self._sleep(self._poll_interval)
            self.tick()


__all__ = ["CycleController", "CycleState", "Presenter"]
