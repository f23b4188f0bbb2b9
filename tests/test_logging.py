# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the user-facing logging helpers."""

from __future__ import annotations

import logging

import pytest

from treediag.logging import PACKAGE_LOGGER_NAME, configure_verbose_logging, emoji, fail, warn


def test_emoji_respects_preference() -> None:
    assert emoji("✅", True) == "✅"
    assert emoji("✅", False) == ""


def test_plain_messages_omit_emoji(capsys: pytest.CaptureFixture[str]) -> None:
    warn("careful", use_emoji=False, use_color=False)
    fail("broken", use_emoji=False, use_color=False)

    assert capsys.readouterr().out.splitlines() == ["careful", "broken"]


def test_configure_verbose_logging_is_idempotent() -> None:
    logger = configure_verbose_logging()
    handlers = list(logger.handlers)

    assert configure_verbose_logging() is logger
    assert logger.handlers == handlers
    assert logger.level == logging.DEBUG
    assert logger.name == PACKAGE_LOGGER_NAME
