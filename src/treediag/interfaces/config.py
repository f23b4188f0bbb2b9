# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration loading interfaces."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ConfigSource(Protocol):
    """Provide one layer of raw configuration data."""

    name: str

    @abstractmethod
    def load(self) -> Mapping[str, Any]:
        """Return the raw configuration fragment contributed by this source.

        Returns:
            Mapping[str, Any]: Diagnostics table contents, empty when absent.
        """
        raise NotImplementedError

    @abstractmethod
    def describe(self) -> str:
        """Return a human-readable description of the source."""
        raise NotImplementedError


__all__ = ["ConfigSource"]
