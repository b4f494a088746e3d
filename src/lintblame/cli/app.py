# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring the watcher components together."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ..blame import BlameAttribution, GitBlameProvider
from ..config import ConfigError, WatchConfig, load_config
from ..console import get_console_manager
from ..context import RunContext
from ..core.logging import configure_logging
from ..discovery import PathSourceError, resolve_path_source
from ..orchestration import AnalysisDispatcher, CycleController
from ..reporting import ConsoleReporter
from ..tools import default_registry
from ..tracking import ChangeTracker
from .shared import CLIError, CLILogger, build_cli_logger

app = typer.Typer(
    name="lintblame",
    help="Watch source files and re-run linters, annotating issues with git blame.",
    add_completion=False,
)


def build_controller(
    target: Path | None,
    *,
    branch: bool,
    config: WatchConfig,
    once: bool,
    logger: CLILogger | None = None,
) -> CycleController:
    """Assemble the watcher for ``target`` (or the current branch).

    Args:
        target: File or directory to watch.
        branch: Watch files changed on the current git branch instead.
        config: Validated watcher configuration.
        once: Render a single pass without clearing the screen.
        logger: Optional CLI logger announcing the branch being compared.

    Returns:
        CycleController: Controller ready to ``start`` or ``run``.

    Raises:
        CLIError: If the path source cannot be resolved.
    """

    registry = default_registry()
    try:
        source = resolve_path_source(
            target,
            branch=branch,
            extensions=registry.extensions(),
            context=RunContext(Path.cwd()),
            base_branch=config.base_branch,
        )
    except PathSourceError as exc:
        raise CLIError(str(exc)) from exc
    context = RunContext(source.working_dir)
    if branch and logger is not None:
        current = context.current_branch or "HEAD"
        logger.info(f"Watching files changed on {current} since {config.base_branch}")
    dispatcher = AnalysisDispatcher(
        registry.tools(),
        BlameAttribution(GitBlameProvider(context.working_dir, timeout=config.timeout)),
        jobs=config.jobs,
        timeout=config.timeout,
        cwd=context.working_dir,
    )
    reporter = ConsoleReporter(
        get_console_manager().get(color=config.color, emoji=False),
        user_name=context.git_user_name,
        use_color=config.color,
        clear=not once,
    )
    return CycleController(
        source,
        ChangeTracker(),
        dispatcher,
        reporter,
        poll_interval=config.poll_interval,
        refresh_every=config.refresh_every,
    )


def _run(controller: CycleController, *, once: bool, logger: CLILogger) -> None:
    try:
        if once:
            controller.start()
        else:
            controller.run()
    except (PathSourceError, ConfigError) as exc:
        raise CLIError(str(exc)) from exc
    if not once:
        return
    if controller.last_results:
        logger.ok(f"Analysed {len(controller.last_results)} file(s)")
    else:
        logger.warn("No matching files to analyse")


@app.command()
def watch(
    target: Annotated[
        Path | None,
        typer.Argument(help="File or directory to watch.", show_default=False),
    ] = None,
    branch: Annotated[
        bool,
        typer.Option("--branch", "-b", help="Watch the files changed on the current git branch."),
    ] = False,
    base_branch: Annotated[
        str | None,
        typer.Option("--base-branch", help="Branch compared against HEAD in --branch mode."),
    ] = None,
    interval: Annotated[
        float | None,
        typer.Option("--interval", help="Seconds between polls."),
    ] = None,
    refresh_every: Annotated[
        int | None,
        typer.Option("--refresh-every", help="Polls between full refreshes of the file set."),
    ] = None,
    jobs: Annotated[
        int | None,
        typer.Option("--jobs", "-j", help="Maximum files analysed concurrently."),
    ] = None,
    timeout: Annotated[
        float | None,
        typer.Option("--timeout", help="Seconds before an external tool is abandoned."),
    ] = None,
    once: Annotated[
        bool,
        typer.Option("--once", help="Analyse once and exit instead of polling."),
    ] = False,
    no_color: Annotated[
        bool,
        typer.Option("--no-color", help="Disable coloured output."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug details to stderr."),
    ] = False,
) -> None:
    """Watch TARGET (or the current branch) and redraw lint results on change."""

    configure_logging(verbose=verbose)
    logger = build_cli_logger(emoji=False, no_color=no_color)
    if target is None and not branch:
        raise typer.BadParameter("provide a file or directory to watch, or pass --branch", param_hint="TARGET")
    try:
        config = load_config(
            Path.cwd(),
            {
                "poll_interval": interval,
                "refresh_every": refresh_every,
                "jobs": jobs,
                "timeout": timeout,
                "base_branch": base_branch,
                "color": False if no_color else None,
            },
        )
        controller = build_controller(target, branch=branch, config=config, once=once, logger=logger)
        _run(controller, once=once, logger=logger)
    except ConfigError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    except KeyboardInterrupt:
        raise typer.Exit(code=0) from None


def main() -> None:
    """Console-script entry point."""

    app()


__all__ = ["app", "build_controller", "main", "watch"]
