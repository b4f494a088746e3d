# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Polling-based modification tracking for the watched file set."""

from __future__ import annotations

import logging
import os
from collections import deque
from collections.abc import Callable, Iterable

from .core.models import TrackedPath

LOGGER = logging.getLogger(__name__)

StatFn = Callable[[str], os.stat_result]


class ChangeTracker:
    """Keep the last observed modification time for every tracked path.

    The snapshot is owned by the controller thread and must not be mutated
    while an analysis pass is in flight. Insertion order of the snapshot is
    the traversal order used by :meth:`recency_order`.
    """

    def __init__(self, *, stat: StatFn = os.stat) -> None:
        """Create an empty tracker.

        Args:
            stat: Function returning ``os.stat_result`` for a path.
        """

        self._stat = stat
        self._snapshot: dict[str, int] = {}

    def observe(self, path: str) -> bool:
        """Record the modification time of ``path`` and report whether it changed.

        Args:
            path: Absolute path to stat.

        Returns:
            bool: ``True`` when ``path`` is new or its timestamp differs from
            the stored one; ``False`` when unchanged or unreadable. Unreadable
            paths keep their previous entry.
        """

        try:
            mtime_ns = self._stat(path).st_mtime_ns
        except OSError as exc:
            LOGGER.warning("Couldn't access %s (%s). Skipping it.", path, exc)
            return False
        if self._snapshot.get(path) == mtime_ns:
            return False
        self._snapshot[path] = mtime_ns
        return True

    def recency_order(self) -> list[str]:
        """Return tracked paths with more recently modified files towards the end.

        Entries are walked in snapshot order with a running maximum timestamp:
        an entry strictly newer than the maximum is appended and becomes the new
        maximum, any other entry is prepended. This is deliberately not a full
        sort; only the path holding the running maximum is guaranteed to land
        after the entries processed before it.

        Returns:
            list[str]: Paths in presentation order.
        """

        ordered: deque[str] = deque()
        latest: int | None = None
        for path, mtime_ns in self._snapshot.items():
            if latest is None or mtime_ns > latest:
                ordered.append(path)
                latest = mtime_ns
            else:
                ordered.appendleft(path)
        return list(ordered)

    def most_recent(self) -> str | None:
        """Return the path with the newest timestamp, or ``None`` when empty."""

        if not self._snapshot:
            return None
        return max(self._snapshot.items(), key=lambda item: item[1])[0]

    def refresh(self, paths: Iterable[str]) -> bool:
        """Discard every entry and re-observe ``paths``.

        Args:
            paths: Freshly supplied path set.

        Returns:
            bool: ``True`` when the number of tracked paths changed.
        """

        before = len(self._snapshot)
        self._snapshot = {}
        for path in paths:
            self.observe(path)
        after = len(self._snapshot)
        if after != before:
            LOGGER.debug("Tracked path count changed from %d to %d", before, after)
        return after != before

    def count(self) -> int:
        """Return the number of tracked paths."""

        return len(self._snapshot)

    def paths(self) -> list[str]:
        """Return tracked paths in snapshot order."""

        return list(self._snapshot)

    def snapshot(self) -> tuple[TrackedPath, ...]:
        """Return an immutable copy of the tracked entries."""

        return tuple(TrackedPath(path=path, mtime_ns=mtime) for path, mtime in self._snapshot.items())

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, path: object) -> bool:
        return path in self._snapshot


__all__ = ["ChangeTracker", "StatFn"]
