# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI commands for inspecting the diagnostics configuration."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer

from ..config import ConfigError, ConfigLoader
from .shared import build_cli_logger

config_app = typer.Typer(help="Inspect the resolved diagnostics configuration.", no_args_is_help=True)


@config_app.command("show")
def config_show(
    root: Annotated[
        Path,
        typer.Argument(exists=True, file_okay=False, dir_okay=True, resolve_path=True, help="Project root."),
    ] = Path(),
    config_path: Annotated[
        Path | None,
        typer.Option("--config", dir_okay=False, help="Explicit configuration file."),
    ] = None,
    trace: Annotated[bool, typer.Option("--trace/--no-trace", help="List contributing sources.")] = True,
) -> None:
    """Print the resolved configuration as JSON."""

    logger = build_cli_logger(emoji=False)
    try:
        result = ConfigLoader.for_root(root, config_path=config_path).load_with_trace()
    except ConfigError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc

    logger.echo(json.dumps(result.config.to_dict(), indent=2, sort_keys=True))
    if trace:
        logger.echo("\n# Sources")
        for source in result.sources:
            logger.echo(f"- {source}")


__all__ = ["config_app"]
