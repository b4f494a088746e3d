# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Terminal rendering of analysis results annotated with blame."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from rich.console import Console
from rich.rule import Rule
from rich.text import Text

from ..core.models import AnalysisResult

HEADER_TITLE: Final[str] = "LintBlame"
CLEAN_MESSAGE: Final[str] = "- All clean!"
SELF_STYLE: Final[str] = "yellow"
OTHER_STYLE: Final[str] = "blue"


class ConsoleReporter:
    """Redraw the terminal with every file's diagnostics after each scan."""

    def __init__(
        self,
        console: Console,
        *,
        user_name: str | None = None,
        use_color: bool = True,
        clear: bool = True,
    ) -> None:
        """Create a reporter.

        Args:
            console: Rich console receiving the output.
            user_name: Current git user; their lines are highlighted.
            use_color: Apply styles to the rendered text.
            clear: Clear the screen before every redraw.
        """

        self._console = console
        self._user_name = user_name
        self._use_color = use_color
        self._clear = clear

    def _style(self, style: str) -> str:
        return style if self._use_color else ""

    def begin(self) -> None:
        """Clear the screen and print the header."""

        if self._clear:
            self._console.clear()
        if self._use_color:
            self._console.print(Rule(HEADER_TITLE, style="magenta"))
        else:
            self._console.print(f"--- {HEADER_TITLE} ---")

    def render(self, result: AnalysisResult) -> None:
        """Print the diagnostics of one file followed by a blank line."""

        console = self._console
        console.print(Text(result.path, style=self._style("green")))
        if result.error:
            console.print(Text(f"- {result.error}", style=self._style("red")))
        elif result.is_clean:
            console.print(Text(CLEAN_MESSAGE, style=self._style("bold")))
        for line in result.lines_with_diagnostics():
            author = result.author(line)
            name_style = SELF_STYLE if self._user_name is not None and author == self._user_name else OTHER_STYLE
            console.print(
                Text.assemble(
                    (str(line), self._style("bold")),
                    ": (",
                    (author, self._style(name_style)),
                    ") ",
                    result.source_line(line),
                ),
            )
            for diagnostic in result.diagnostics_for(line):
                console.print(
                    Text.assemble(
                        f"    [{diagnostic.reporter} {diagnostic.code}] ",
                        (diagnostic.message, self._style("bold")),
                    ),
                )
        console.print()

    def present(self, results: Sequence[AnalysisResult]) -> None:
        """Redraw the screen with ``results`` in the given order."""

        self.begin()
        for result in results:
            self.render(result)

    def __call__(self, results: Sequence[AnalysisResult]) -> None:
        self.present(results)


__all__ = ["CLEAN_MESSAGE", "ConsoleReporter", "HEADER_TITLE"]
