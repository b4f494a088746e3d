# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tool registry providing lookup by name or file extension."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from .base import Tool


class ToolRegistry(Mapping[str, Tool]):
    """Ordered, read-only mapping of tool names to :class:`Tool` definitions.

    Registration order is significant: it is the order in which adapters run
    for a file, and therefore the order of diagnostics sharing a line.
    """

    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        """Register ``tool`` enforcing uniqueness by name.

        Args:
            tool: Tool definition to append to the registry.

        Raises:
            ValueError: If a tool with the same name is already registered.
        """

        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' already registered")
        self._tools[tool.name] = tool

    def tools(self) -> tuple[Tool, ...]:
        """Return all registered tools in registration order."""

        return tuple(self._tools.values())

    def tools_for(self, path: str) -> tuple[Tool, ...]:
        """Return tools that apply to ``path`` in registration order."""

        return tuple(tool for tool in self._tools.values() if tool.applies_to(path))

    def extensions(self) -> frozenset[str]:
        """Return every file extension handled by at least one tool."""

        return frozenset(ext for tool in self._tools.values() for ext in tool.extensions)

    def __getitem__(self, key: str) -> Tool:
        return self._tools[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._tools)

    def __len__(self) -> int:
        return len(self._tools)


__all__ = ["ToolRegistry"]
