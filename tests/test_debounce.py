# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for keyed debouncing."""

from __future__ import annotations

import threading

import pytest

from treediag.scheduling import DebouncePhase, DebounceState, get_debounce_state


def test_burst_of_triggers_runs_newest_callback_once(clock) -> None:
    state = DebounceState(timer_factory=clock)
    calls: list[int] = []

    for value in range(5):
        state.schedule("tree", 50, lambda value=value: calls.append(value))

    assert len(clock.pending()) == 1
    assert state.phase("tree") is DebouncePhase.PENDING
    assert clock.fire_all() == 1
    assert calls == [4]
    assert state.phase("tree") is DebouncePhase.IDLE


def test_delay_is_converted_to_seconds(clock) -> None:
    state = DebounceState(timer_factory=clock)

    state.schedule("tree", 250, lambda: None)

    assert clock.timers[0].interval == pytest.approx(0.25)


def test_non_positive_delay_still_coalesces(clock) -> None:
    state = DebounceState(timer_factory=clock)
    calls: list[str] = []

    state.schedule("tree", 0, lambda: calls.append("first"))
    state.schedule("tree", -10, lambda: calls.append("second"))

    assert [timer.interval for timer in clock.pending()] == [0.0]
    clock.fire_all()
    assert calls == ["second"]


def test_trigger_while_running_queues_single_rerun(clock) -> None:
    state = DebounceState(timer_factory=clock)
    calls: list[str] = []

    def first() -> None:
        calls.append("first")
        assert state.phase("tree") is DebouncePhase.RUNNING
        state.schedule("tree", 50, lambda: calls.append("rerun-a"))
        state.schedule("tree", 50, lambda: calls.append("rerun-b"))

    state.schedule("tree", 50, first)
    clock.fire_all()

    assert calls == ["first", "rerun-b"]
    assert state.phase("tree") is DebouncePhase.IDLE


def test_keys_are_independent(clock) -> None:
    state = DebounceState(timer_factory=clock)
    calls: list[str] = []

    state.schedule("left", 50, lambda: calls.append("left"))
    state.schedule("right", 50, lambda: calls.append("right"))

    assert clock.fire_all() == 2
    assert sorted(calls) == ["left", "right"]


def test_stale_timer_callbacks_are_ignored(clock) -> None:
    state = DebounceState(timer_factory=clock)
    calls: list[int] = []

    state.schedule("tree", 50, lambda: calls.append(1))
    stale = clock.timers[0]
    state.schedule("tree", 50, lambda: calls.append(2))

    stale.callback()
    assert calls == []
    clock.fire_all()
    assert calls == [2]


def test_cancel_drops_pending_execution(clock) -> None:
    state = DebounceState(timer_factory=clock)
    calls: list[int] = []

    state.schedule("tree", 50, lambda: calls.append(1))

    assert state.cancel("tree")
    assert not state.cancel("tree")
    assert not state.cancel("unknown")
    assert clock.fire_all() == 0
    assert calls == []
    assert state.phase("tree") is DebouncePhase.IDLE


def test_failed_callback_returns_to_idle_and_propagates(clock) -> None:
    state = DebounceState(timer_factory=clock)

    def boom() -> None:
        raise RuntimeError("cycle failed")

    state.schedule("tree", 50, boom)

    with pytest.raises(RuntimeError, match="cycle failed"):
        clock.fire_next()
    assert state.phase("tree") is DebouncePhase.IDLE


def test_failed_callback_still_runs_queued_rerun(clock) -> None:
    state = DebounceState(timer_factory=clock)
    calls: list[str] = []

    def boom() -> None:
        state.schedule("tree", 50, lambda: calls.append("rerun"))
        raise RuntimeError("cycle failed")

    state.schedule("tree", 50, boom)
    with pytest.raises(RuntimeError):
        clock.fire_next()

    assert state.phase("tree") is DebouncePhase.PENDING
    clock.fire_all()
    assert calls == ["rerun"]


def test_wait_idle_with_thread_timers() -> None:
    state = DebounceState()
    calls: list[int] = []
    lock = threading.Lock()

    def record(value: int) -> None:
        with lock:
            calls.append(value)

    for value in range(5):
        state.schedule("tree", 200, lambda value=value: record(value))

    assert state.wait_idle("tree", timeout=5.0)
    assert calls == [4]


def test_wait_idle_returns_immediately_for_unknown_key() -> None:
    assert DebounceState().wait_idle("missing", timeout=0.01)


def test_process_wide_state_is_shared() -> None:
    assert get_debounce_state() is get_debounce_state()
