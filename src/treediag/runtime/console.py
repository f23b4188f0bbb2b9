# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich consoles used to print annotated trees."""

from __future__ import annotations

import sys
from functools import lru_cache
from typing import Literal

from rich.console import Console

ColorSystem = Literal["auto", "standard", "256", "truecolor", "windows"]


def detect_tty() -> bool:
    """Return ``True`` when stdout appears to be backed by a terminal.

    Returns:
        bool: ``True`` when ``sys.stdout`` reports TTY support, ``False`` otherwise.
    """

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


class RichConsoleManager:
    """Hand out tree output consoles, one per colour/emoji/terminal combination."""

    def __init__(self) -> None:
        self._consoles: dict[tuple[bool, bool, bool], Console] = {}

    def get(self, *, color: bool, emoji: bool) -> Console:
        """Return the console for ``color`` and ``emoji`` on the current stdout.

        Colour is only enabled when stdout is a terminal, so piped tree output
        stays plain.

        Args:
            color: Whether severity highlights may be coloured.
            emoji: Whether emoji sign glyphs should be rendered.

        Returns:
            Console: Console shared by every caller asking for the same settings.
        """

        tty = detect_tty()
        key = (color, emoji, tty)
        console = self._consoles.get(key)
        if console is None:
            console = self._consoles[key] = _tree_console(colored=color and tty, emoji=emoji, tty=tty)
        return console


def _tree_console(*, colored: bool, emoji: bool, tty: bool) -> Console:
    color_system: ColorSystem | None = "auto" if colored else None
    return Console(
        color_system=color_system,
        force_terminal=tty,
        no_color=not colored,
        emoji=emoji,
        soft_wrap=True,
        highlight=False,
    )


@lru_cache(maxsize=1)
def get_console_manager() -> RichConsoleManager:
    """Return the process-wide :class:`RichConsoleManager`."""

    return RichConsoleManager()


__all__ = ["RichConsoleManager", "detect_tty", "get_console_manager"]
