# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared services."""

from __future__ import annotations

import typer

from .config_cmd import config_app
from .show import show_command

app = typer.Typer(help="Overlay diagnostic severities on a file tree.", no_args_is_help=True)
app.command("show")(show_command)
app.add_typer(config_app, name="config")

__all__ = ["app"]
