# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Presentation sink and Rich rendering for annotated trees."""

from __future__ import annotations

from .markers import MarkerTable, SignDefinition
from .render import render_lines, render_tree

__all__ = ["MarkerTable", "SignDefinition", "render_lines", "render_tree"]
