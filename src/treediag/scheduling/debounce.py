# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Keyed debouncing that coalesces bursts of triggers into one execution.

Each key moves through ``IDLE -> PENDING -> RUNNING -> IDLE``. A trigger while
``PENDING`` restarts the quiet period; a trigger while ``RUNNING`` is recorded
and causes exactly one more run as soon as the current one finishes. Runs for a
key never overlap.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache, partial
from threading import Condition, Timer
from typing import Final, Protocol

LOGGER = logging.getLogger(__name__)

_MS_PER_SECOND: Final[float] = 1000.0

Callback = Callable[[], object]


class TimerHandle(Protocol):
    """Minimal timer surface used by the scheduler."""

    def start(self) -> None:
        """Arm the timer."""

    def cancel(self) -> None:
        """Disarm the timer if it has not fired yet."""


TimerFactory = Callable[[float, Callable[[], None]], TimerHandle]


def thread_timer(interval: float, callback: Callable[[], None]) -> TimerHandle:
    """Return a daemon :class:`threading.Timer` firing ``callback``.

    Args:
        interval: Delay in seconds.
        callback: Function executed on the timer thread.

    Returns:
        TimerHandle: Unstarted timer.
    """

    timer = Timer(interval, callback)
    timer.daemon = True
    return timer


class DebouncePhase(str, Enum):
    """Lifecycle phase of a debounced key."""

    IDLE = "idle"
    PENDING = "pending"
    RUNNING = "running"


@dataclass(slots=True)
class _Slot:
    """Scheduling record for one key."""

    callback: Callback
    phase: DebouncePhase = DebouncePhase.IDLE
    timer: TimerHandle | None = None
    generation: int = 0
    rerun: bool = False


class DebounceState:
    """Process-wide registry of pending debounced executions."""

    def __init__(self, *, timer_factory: TimerFactory = thread_timer) -> None:
        """Initialise an empty registry.

        Args:
            timer_factory: Factory creating unstarted timers; tests substitute a
                manually driven clock.
        """

        self._timer_factory = timer_factory
        self._condition = Condition()
        self._slots: dict[str, _Slot] = {}

    def schedule(self, key: str, delay_ms: int, fn: Callback) -> None:
        """Run ``fn`` once ``delay_ms`` passes without another call for ``key``.

        A pending timer for ``key`` is cancelled and restarted. While ``key`` is
        running the trigger is recorded and ``fn`` runs again right after the
        current run. A non-positive delay fires as soon as possible while still
        coalescing calls that arrive before the timer thread runs.

        Args:
            key: Logical identifier; at most one timer is pending per key.
            delay_ms: Quiet period in milliseconds.
            fn: Callable executed after the quiet period; the newest one wins.
        """

        with self._condition:
            slot = self._slots.get(key)
            if slot is None:
                slot = _Slot(callback=fn)
                self._slots[key] = slot
            slot.callback = fn
            if slot.phase is DebouncePhase.RUNNING:
                LOGGER.debug("debounce '%s' triggered while running; rerun queued", key)
                slot.rerun = True
                return
            if slot.timer is not None:
                slot.timer.cancel()
            self._arm(key, slot, delay_ms)

    def cancel(self, key: str) -> bool:
        """Drop the pending timer for ``key``.

        Args:
            key: Logical identifier.

        Returns:
            bool: ``True`` when a pending execution was cancelled. Running
            executions are never interrupted.
        """

        with self._condition:
            slot = self._slots.get(key)
            if slot is None or slot.phase is not DebouncePhase.PENDING:
                return False
            if slot.timer is not None:
                slot.timer.cancel()
            slot.timer = None
            slot.generation += 1
            slot.phase = DebouncePhase.IDLE
            self._condition.notify_all()
            return True

    def phase(self, key: str) -> DebouncePhase:
        """Return the current phase of ``key``."""

        with self._condition:
            slot = self._slots.get(key)
            return DebouncePhase.IDLE if slot is None else slot.phase

    def wait_idle(self, key: str, timeout: float | None = None) -> bool:
        """Block until ``key`` has no pending or running execution.

        Args:
            key: Logical identifier.
            timeout: Maximum number of seconds to wait, ``None`` for no limit.

        Returns:
            bool: ``True`` when the key became idle before the timeout.
        """

        with self._condition:
            return self._condition.wait_for(partial(self._is_idle, key), timeout=timeout)

    def _is_idle(self, key: str) -> bool:
        slot = self._slots.get(key)
        return slot is None or slot.phase is DebouncePhase.IDLE

    def _arm(self, key: str, slot: _Slot, delay_ms: int) -> None:
        """Start a fresh timer for ``slot``; caller holds the condition."""

        slot.generation += 1
        slot.phase = DebouncePhase.PENDING
        slot.timer = self._timer_factory(max(delay_ms, 0) / _MS_PER_SECOND, partial(self._fire, key, slot.generation))
        slot.timer.start()

    def _fire(self, key: str, generation: int) -> None:
        """Timer callback running the newest callback, then any queued rerun.

        Args:
            key: Logical identifier.
            generation: Arm counter captured when the timer was created.
        """

        with self._condition:
            slot = self._slots.get(key)
            if slot is None or slot.generation != generation or slot.phase is not DebouncePhase.PENDING:
                return
            slot.timer = None
            slot.phase = DebouncePhase.RUNNING
            callback = slot.callback

        while True:
            try:
                callback()
            except BaseException:
                with self._condition:
                    slot.phase = DebouncePhase.IDLE
                    if slot.rerun:
                        slot.rerun = False
                        self._arm(key, slot, 0)
                    self._condition.notify_all()
                raise
            with self._condition:
                if slot.rerun:
                    slot.rerun = False
                    callback = slot.callback
                    continue
                slot.phase = DebouncePhase.IDLE
                self._condition.notify_all()
                return


@lru_cache(maxsize=1)
def get_debounce_state() -> DebounceState:
    """Return the process-wide :class:`DebounceState`.

    Returns:
        DebounceState: Registry shared by every caller in the process.
    """

    return DebounceState()


def debounce(key: str, delay_ms: int, fn: Callback) -> None:
    """Schedule ``fn`` on the process-wide registry.

    Args:
        key: Logical identifier.
        delay_ms: Quiet period in milliseconds.
        fn: Callable executed once the burst settles.
    """

    get_debounce_state().schedule(key, delay_ms, fn)


__all__ = [
    "DebouncePhase",
    "DebounceState",
    "TimerFactory",
    "TimerHandle",
    "debounce",
    "get_debounce_state",
    "thread_timer",
]
