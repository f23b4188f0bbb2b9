# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tree path matching with directory roll-up."""

from __future__ import annotations

from .matcher import MatchPolicy, SeverityIndex, match_node, match_nodes

__all__ = ["MatchPolicy", "SeverityIndex", "match_node", "match_nodes"]
