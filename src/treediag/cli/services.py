# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helper services wiring CLI options to sources, trees and the orchestrator."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from enum import Enum
from pathlib import Path
from typing import Final

from ..config import ConfigError, DiagnosticsConfig, load_config
from ..exceptions import MalformedSourceDataError
from ..filesystem import display_relative_path
from ..interfaces.sources import DiagnosticSource
from ..orchestration import DiagnosticsOrchestrator
from ..scheduling import DebounceState
from ..sources import JsonDiagnosticService, PublishedDiagnosticsHost, build_sources
from ..tree import FileTreeView, build_file_tree
from .shared import CLIError, CLILogger

CYCLE_TIMEOUT_SECONDS: Final[float] = 30.0


class SourceKind(str, Enum):
    """Diagnostic document formats accepted by ``treediag show``."""

    ALTERNATE = "alternate"
    NATIVE = "native"


def load_show_config(
    root: Path,
    *,
    config_path: Path | None,
    overrides: Mapping[str, object],
) -> DiagnosticsConfig:
    """Return the resolved configuration with CLI overrides applied.

    Args:
        root: Project root used to discover configuration files.
        config_path: Optional explicit configuration file.
        overrides: Field values supplied on the command line.

    Returns:
        DiagnosticsConfig: Configuration with ``enable`` forced on.

    Raises:
        CLIError: If the configuration cannot be loaded.
    """

    try:
        config = load_config(root, config_path=config_path)
    except ConfigError as exc:
        raise CLIError(str(exc)) from exc
    config.enable = True
    for field, value in overrides.items():
        if value is not None:
            setattr(config, field, value)
    return config


def build_view(root: Path, *, expand_all: bool, open_paths: Sequence[Path], logger: CLILogger) -> FileTreeView:
    """Scan ``root`` and apply the requested expansion state.

    Args:
        root: Directory to scan.
        expand_all: Open every directory.
        open_paths: Directories to open, relative to ``root`` or absolute.
        logger: Logger used to report unknown directories.

    Returns:
        FileTreeView: Loaded view over the scanned tree.
    """

    view = FileTreeView(build_file_tree(root))
    if expand_all:
        view.expand_all()
    for path in open_paths:
        target = path if path.is_absolute() else root / path
        if not view.open(str(target)):
            logger.warn(f"Not a directory in the tree: {display_relative_path(target, root)}")
    return view


def build_cli_sources(
    kind: SourceKind,
    diagnostics: Path,
    *,
    root: Path,
    logger: CLILogger,
) -> list[DiagnosticSource]:
    """Return the diagnostic sources for the chosen document format.

    Args:
        kind: Document format of ``diagnostics``.
        diagnostics: Diagnostic document path.
        root: Tree root anchoring relative diagnostic paths.
        logger: Logger used to report skipped payloads.

    Returns:
        list[DiagnosticSource]: Sources in priority order.

    Raises:
        CLIError: If a native payload file cannot be read.
    """

    if kind is SourceKind.ALTERNATE:
        return build_sources(service=JsonDiagnosticService(diagnostics), base_dir=root)
    host = PublishedDiagnosticsHost()
    for params in _read_publish_payloads(diagnostics):
        try:
            host.handle_publish(params)
        except MalformedSourceDataError as exc:
            logger.warn(f"Skipping publishDiagnostics payload: {exc}")
    return build_sources(host=host, base_dir=root)


def _read_publish_payloads(path: Path) -> list[Mapping[str, object]]:
    """Return the ``publishDiagnostics`` parameter objects stored at ``path``.

    Args:
        path: JSON document holding one payload or a list of payloads.

    Returns:
        list[Mapping[str, object]]: Payload mappings.

    Raises:
        CLIError: If the document cannot be read or decoded.
    """

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise CLIError(f"Cannot read diagnostics from {path}: {exc}") from exc
    if isinstance(payload, Mapping):
        return [payload]
    if isinstance(payload, list):
        return [entry for entry in payload if isinstance(entry, Mapping)]
    raise CLIError(f"Unsupported diagnostics document in {path}")


def run_once(orchestrator: DiagnosticsOrchestrator, state: DebounceState) -> None:
    """Trigger a debounced cycle and wait for it to finish.

    Args:
        orchestrator: Orchestrator to trigger.
        state: Debounce registry the orchestrator schedules on.

    Raises:
        CLIError: If the cycle does not complete in time.
    """

    orchestrator.update()
    if not state.wait_idle(orchestrator.debounce_key, timeout=CYCLE_TIMEOUT_SECONDS):
        raise CLIError("Timed out waiting for the diagnostics cycle")


__all__ = [
    "SourceKind",
    "build_cli_sources",
    "build_view",
    "load_show_config",
    "run_once",
]
