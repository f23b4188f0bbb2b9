# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Final

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class SeverityLevel(IntEnum):
    """Diagnostic severity levels where a lower value is more severe."""

    ERROR = 1
    WARNING = 2
    INFORMATION = 3
    HINT = 4


class Comparison(str, Enum):
    """Outcome of comparing two severities from the first operand's view."""

    WORSE = "worse"
    SAME = "same"
    BETTER = "better"


_SEVERITY_NAMES: Final[dict[str, SeverityLevel]] = {
    "error": SeverityLevel.ERROR,
    "warning": SeverityLevel.WARNING,
    "warn": SeverityLevel.WARNING,
    "information": SeverityLevel.INFORMATION,
    "info": SeverityLevel.INFORMATION,
    "hint": SeverityLevel.HINT,
}


def severity_from_name(value: SeverityLevel | str | int) -> SeverityLevel:
    """Return the :class:`SeverityLevel` described by ``value``.

    Args:
        value: Severity enum, service vocabulary name (``"Error"``,
            ``"Warning"``, ``"Information"``, ``"Hint"``) or numeric rank.

    Returns:
        SeverityLevel: Parsed severity level.

    Raises:
        ValueError: If ``value`` does not name a known severity.
    """
    if isinstance(value, SeverityLevel):
        return value
    if isinstance(value, bool):
        raise ValueError(f"invalid severity {value!r}")
    if isinstance(value, int):
        return SeverityLevel(value)
    if isinstance(value, str):
        token = value.strip().lower()
        if token.isdigit():
            return SeverityLevel(int(token))
        try:
            return _SEVERITY_NAMES[token]
        except KeyError:
            raise ValueError(f"invalid severity {value!r}") from None
    raise ValueError(f"invalid severity {value!r}")


class SeverityRange(BaseModel):
    """Inclusive window of accepted severities.

    Attributes:
        min: Least severe level that is still accepted.
        max: Most severe level that is accepted.
    """

    model_config = ConfigDict(frozen=True)

    min: SeverityLevel = SeverityLevel.HINT
    max: SeverityLevel = SeverityLevel.ERROR

    @field_validator("min", "max", mode="before")
    @classmethod
    def _parse_level(cls, value: SeverityLevel | str | int) -> SeverityLevel:
        """Accept severity names as well as numeric ranks.

        Args:
            value: Raw configuration value.

        Returns:
            SeverityLevel: Parsed severity level.
        """
        return severity_from_name(value)

    @model_validator(mode="after")
    def _check_order(self) -> SeverityRange:
        """Reject windows whose most severe bound is less severe than the other.

        Returns:
            SeverityRange: The validated range.

        Raises:
            ValueError: If ``max`` is less severe than ``min``.
        """
        if self.max > self.min:
            raise ValueError(f"severity max ({self.max.name}) must not be less severe than min ({self.min.name})")
        return self


def compare(lhs: SeverityLevel, rhs: SeverityLevel) -> Comparison:
    """Compare ``lhs`` against ``rhs``; smaller values are worse.

    Args:
        lhs: Severity being judged.
        rhs: Reference severity.

    Returns:
        Comparison: ``WORSE`` when ``lhs`` is more severe than ``rhs``.
    """
    if lhs < rhs:
        return Comparison.WORSE
    if lhs > rhs:
        return Comparison.BETTER
    return Comparison.SAME


def in_range(severity: SeverityLevel, window: SeverityRange) -> bool:
    """Return ``True`` when ``severity`` falls inside ``window`` (inclusive).

    Args:
        severity: Severity to test.
        window: Accepted severity window.

    Returns:
        bool: ``True`` when ``window.max <= severity <= window.min``.
    """
    return window.max <= severity <= window.min


def worst_of(lhs: SeverityLevel, rhs: SeverityLevel) -> SeverityLevel:
    """Return the more severe of ``lhs`` and ``rhs``."""
    return lhs if lhs <= rhs else rhs


__all__ = [
    "Comparison",
    "SeverityLevel",
    "SeverityRange",
    "compare",
    "in_range",
    "severity_from_name",
    "worst_of",
]
