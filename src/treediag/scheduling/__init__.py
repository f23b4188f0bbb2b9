# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Debounced scheduling of recomputation cycles."""

from __future__ import annotations

from .debounce import (
    DebouncePhase,
    DebounceState,
    TimerFactory,
    TimerHandle,
    debounce,
    get_debounce_state,
    thread_timer,
)

__all__ = [
    "DebouncePhase",
    "DebounceState",
    "TimerFactory",
    "TimerHandle",
    "debounce",
    "get_debounce_state",
    "thread_timer",
]
