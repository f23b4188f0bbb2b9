# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Filesystem helpers shared by diagnostic sources and the tree matcher."""

from __future__ import annotations

from .paths import canonical_path, display_relative_path, is_strict_descendant, strict_ancestors

__all__ = [
    "canonical_path",
    "display_relative_path",
    "is_strict_descendant",
    "strict_ancestors",
]
