# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Build :class:`FileTreeNode` hierarchies from the filesystem."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Final

from treediag.filesystem.paths import canonical_path

from .model import FileTreeNode

LOGGER = logging.getLogger(__name__)

_HIDDEN_PREFIX: Final[str] = "."


def build_file_tree(root: Path, *, show_hidden: bool = False) -> FileTreeNode:
    """Return the directory tree rooted at ``root``.

    Children are listed directories first, then by case-insensitive name.
    Symlinked directories below the root are listed but not descended into. A
    symlinked root keeps its own path so node paths match diagnostics reported
    through the link.

    Args:
        root: Directory to scan.
        show_hidden: Include entries whose name starts with a dot.

    Returns:
        FileTreeNode: Open root node with its scanned descendants.

    Raises:
        NotADirectoryError: If ``root`` is not a directory.
    """

    absolute = Path(os.path.abspath(root))
    if not absolute.is_dir():
        raise NotADirectoryError(str(root))
    node = FileTreeNode(
        absolute_path=canonical_path(absolute),
        name=absolute.name or str(absolute),
        is_directory=True,
        is_open=True,
    )
    node.children = _scan_children(absolute, show_hidden=show_hidden)
    return node


def _scan_children(directory: Path, *, show_hidden: bool) -> list[FileTreeNode]:
    """Return the sorted child nodes of ``directory``.

    Args:
        directory: Directory to list.
        show_hidden: Include dot-prefixed entries.

    Returns:
        list[FileTreeNode]: Child nodes, empty when the directory is unreadable.
    """

    try:
        with os.scandir(directory) as iterator:
            entries = [entry for entry in iterator if show_hidden or not entry.name.startswith(_HIDDEN_PREFIX)]
    except OSError as exc:
        LOGGER.debug("cannot list %s: %s", directory, exc)
        return []

    children: list[FileTreeNode] = []
    for entry in sorted(entries, key=_sort_key):
        is_directory = _is_directory(entry)
        child = FileTreeNode(
            absolute_path=canonical_path(entry.path),
            name=entry.name,
            is_directory=is_directory,
        )
        if is_directory and not entry.is_symlink():
            child.children = _scan_children(Path(entry.path), show_hidden=show_hidden)
        children.append(child)
    return children


def _is_directory(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


def _sort_key(entry: os.DirEntry[str]) -> tuple[bool, str]:
    return (not _is_directory(entry), entry.name.casefold())


__all__ = ["build_file_tree"]
