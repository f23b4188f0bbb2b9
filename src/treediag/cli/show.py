# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command printing a file tree annotated with diagnostic severities."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ..logging import configure_verbose_logging
from ..orchestration import DiagnosticsOrchestrator
from ..presentation import MarkerTable, render_tree
from ..runtime.console import get_console_manager
from ..scheduling import DebounceState
from .services import SourceKind, build_cli_sources, build_view, load_show_config, run_once
from .shared import CLIError, build_cli_logger


def show_command(
    root: Annotated[
        Path,
        typer.Argument(exists=True, file_okay=False, dir_okay=True, help="Tree root."),
    ],
    diagnostics: Annotated[
        Path,
        typer.Option("--diagnostics", "-d", dir_okay=False, help="JSON diagnostic document."),
    ],
    source: Annotated[
        SourceKind,
        typer.Option("--source", case_sensitive=False, help="Format of the diagnostic document."),
    ] = SourceKind.ALTERNATE,
    open_paths: Annotated[
        list[Path] | None,
        typer.Option("--open", help="Directory to expand; may be repeated."),
    ] = None,
    expand_all: Annotated[bool, typer.Option("--expand-all", help="Expand every directory.")] = False,
    show_on_dirs: Annotated[
        bool | None,
        typer.Option("--show-on-dirs/--no-show-on-dirs", help="Roll severities up to directories."),
    ] = None,
    show_on_open_dirs: Annotated[
        bool | None,
        typer.Option("--show-on-open-dirs/--no-show-on-open-dirs", help="Also mark expanded directories."),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", dir_okay=False, help="Explicit configuration file."),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log each diagnostics step.")] = False,
    emoji: Annotated[bool, typer.Option("--emoji/--no-emoji", help="Use emoji in messages.")] = True,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colour output.")] = False,
) -> None:
    """Print ROOT as a tree with the worst diagnostic severity on each line."""

    logger = build_cli_logger(emoji=emoji, debug=verbose, no_color=no_color)
    if verbose:
        configure_verbose_logging()
    try:
        config = load_show_config(
            root,
            config_path=config_path,
            overrides={"show_on_dirs": show_on_dirs, "show_on_open_dirs": show_on_open_dirs},
        )
        view = build_view(root, expand_all=expand_all, open_paths=open_paths or [], logger=logger)
        sources = build_cli_sources(source, diagnostics, root=root, logger=logger)
        markers = MarkerTable()
        state = DebounceState()
        orchestrator = DiagnosticsOrchestrator(
            config,
            sources=sources,
            view=view,
            sink=markers,
            debounce_state=state,
        )
        orchestrator.setup()
        run_once(orchestrator, state)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc

    console = get_console_manager().get(color=not no_color, emoji=emoji)
    render_tree(view, markers, console=console)
    logger.debug(f"annotated={len(orchestrator.statuses)}")


__all__ = ["show_command"]
