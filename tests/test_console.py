# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the tree output console manager."""

from __future__ import annotations

import pytest

from treediag.runtime import console as console_module
from treediag.runtime import get_console_manager


def test_console_manager_is_process_wide() -> None:
    assert get_console_manager() is get_console_manager()


def test_console_manager_reuses_console_per_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(console_module, "detect_tty", lambda: False)
    manager = console_module.RichConsoleManager()

    plain = manager.get(color=False, emoji=False)

    assert manager.get(color=False, emoji=False) is plain
    assert manager.get(color=False, emoji=True) is not plain
    assert plain.no_color
    assert plain.color_system is None


def test_console_manager_drops_colour_off_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(console_module, "detect_tty", lambda: False)

    console = console_module.RichConsoleManager().get(color=True, emoji=True)

    assert console.no_color
    assert console.color_system is None
