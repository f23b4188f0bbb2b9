# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Render an annotated tree view as Rich text."""

from __future__ import annotations

from typing import Final

from rich.console import Console
from rich.text import Text

from treediag.tree.view import FileTreeView

from .markers import MarkerTable

_INDENT: Final[str] = "  "
_SIGN_WIDTH: Final[int] = 2
_OPEN_GLYPH: Final[str] = "▾ "
_CLOSED_GLYPH: Final[str] = "▸ "
_FILE_GLYPH: Final[str] = "  "
_DIRECTORY_SUFFIX: Final[str] = "/"


def render_lines(view: FileTreeView, markers: MarkerTable) -> list[Text]:
    """Return one Rich line per visible row, headed by the root label.

    Args:
        view: Tree view whose visible rows are rendered.
        markers: Sink populated by the latest diagnostics cycle.

    Returns:
        list[Text]: Header followed by the rendered rows.
    """

    rendered: list[Text] = []
    root = view.root
    if root is not None:
        rendered.append(Text(f"{' ' * _SIGN_WIDTH}{root.absolute_path}", style="bold"))
    for row in view.lines():
        text = Text()
        sign = markers.sign_for(row.line)
        if sign is None:
            text.append(" " * _SIGN_WIDTH)
        else:
            text.append(sign.text.ljust(_SIGN_WIDTH)[:_SIGN_WIDTH], style=sign.style or None)
        node = row.node
        if node.is_directory:
            glyph = _OPEN_GLYPH if node.is_open else _CLOSED_GLYPH
            label = f"{node.name}{_DIRECTORY_SUFFIX}"
        else:
            glyph = _FILE_GLYPH
            label = node.name
        text.append(f"{_INDENT * row.depth}{glyph}")
        text.append(label, style=markers.style_for(row.line))
        rendered.append(text)
    return rendered


def render_tree(view: FileTreeView, markers: MarkerTable, *, console: Console) -> None:
    """Print the annotated tree to ``console``.

    Args:
        view: Tree view whose visible rows are rendered.
        markers: Sink populated by the latest diagnostics cycle.
        console: Rich console receiving the output.
    """

    for line in render_lines(view, markers):
        console.print(line)


__all__ = ["render_lines", "render_tree"]
