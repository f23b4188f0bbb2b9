# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping
from dataclasses import dataclass, field
from typing import Any

import pytest

from treediag.core.severity import SeverityLevel
from treediag.exceptions import StaleViewError


@dataclass
class ManualTimer:
    interval: float
    callback: Callable[[], None]
    started: bool = False
    cancelled: bool = False
    fired: bool = False

    def start(self) -> None:
        self.started = True

    def cancel(self) -> None:
        self.cancelled = True


@dataclass
class ManualClock:
    """Timer factory whose timers only fire when the test says so."""

    timers: list[ManualTimer] = field(default_factory=list)

    def __call__(self, interval: float, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(interval=interval, callback=callback)
        self.timers.append(timer)
        return timer

    def pending(self) -> list[ManualTimer]:
        return [timer for timer in self.timers if timer.started and not timer.cancelled and not timer.fired]

    def fire_next(self) -> None:
        timer = self.pending()[0]
        timer.fired = True
        timer.callback()

    def fire_all(self) -> int:
        fired = 0
        while self.pending():
            self.fire_next()
            fired += 1
        return fired


@dataclass
class Node:
    absolute_path: str
    is_directory: bool = False
    is_open: bool = False
    id: Hashable = None

    def __post_init__(self) -> None:
        if self.id is None:
            self.id = self.absolute_path


@dataclass
class StaticView:
    nodes: dict[int, Node] = field(default_factory=dict)
    valid: bool = True
    stale_on_read: bool = False

    def is_valid(self) -> bool:
        return self.valid

    def nodes_by_line(self) -> dict[int, Node]:
        if self.stale_on_read:
            raise StaleViewError("buffer unloaded")
        return dict(self.nodes)


@dataclass
class RecordingSink:
    calls: list[tuple[Any, ...]] = field(default_factory=list)
    signs: dict[SeverityLevel, str] = field(default_factory=dict)

    def define_signs(self, icons: Mapping[SeverityLevel, str], colors: Mapping[SeverityLevel, str]) -> None:
        self.signs = dict(icons)
        self.calls.append(("define", dict(icons), dict(colors)))

    def clear_all_markers(self) -> None:
        self.calls.append(("clear",))

    def place_marker(self, line: int, severity: SeverityLevel) -> None:
        self.calls.append(("marker", line, severity))

    def apply_highlight(self, line: int, severity: SeverityLevel) -> None:
        self.calls.append(("highlight", line, severity))

    def count(self, kind: str) -> int:
        return sum(1 for call in self.calls if call[0] == kind)

    def annotations(self) -> list[tuple[Any, ...]]:
        return [call for call in self.calls if call[0] in {"marker", "highlight"}]


@dataclass
class FakeService:
    initialized: bool = True
    payload: object = field(default_factory=list)
    error: Exception | None = None
    queries: int = 0

    def is_initialized(self) -> bool:
        return self.initialized

    def diagnostic_list(self) -> object:
        self.queries += 1
        if self.error is not None:
            raise self.error
        return self.payload


@dataclass
class FakeHost:
    entries: Any = field(default_factory=list)
    buffers: dict[Hashable, Any] = field(default_factory=dict)
    error: Exception | None = None

    def diagnostics(self) -> Any:
        if self.error is not None:
            raise self.error
        return list(self.entries) if isinstance(self.entries, list) else self.entries

    def buffer_path(self, buffer: Hashable) -> Any:
        return self.buffers.get(buffer)


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def service() -> FakeService:
    return FakeService()


@pytest.fixture
def host() -> FakeHost:
    return FakeHost()


@pytest.fixture
def make_node() -> Callable[..., Node]:
    return Node


@pytest.fixture
def make_view() -> Callable[..., StaticView]:
    def _make_view(nodes: dict[int, Node] | None = None, **kwargs: Any) -> StaticView:
        return StaticView(nodes=nodes or {}, **kwargs)

    return _make_view
