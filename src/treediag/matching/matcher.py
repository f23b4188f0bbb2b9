# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Reconcile per-file severities with the visible lines of a tree."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from treediag.core.models import LineNodeView, TreeNodeLike
from treediag.core.severity import SeverityLevel, worst_of
from treediag.filesystem.paths import canonical_path, strict_ancestors

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MatchPolicy:
    """Visibility rules for directory roll-up.

    Attributes:
        show_on_dirs: Annotate directories containing diagnosed files.
        show_on_open_dirs: Also annotate directories that are expanded.
    """

    show_on_dirs: bool = False
    show_on_open_dirs: bool = True

    def allows(self, node: TreeNodeLike) -> bool:
        """Return ``True`` when ``node`` may receive a rolled-up severity.

        Args:
            node: Directory node under evaluation.

        Returns:
            bool: Whether the roll-up rules permit annotating ``node``.
        """

        return self.show_on_dirs and (not node.is_open or self.show_on_open_dirs)


@dataclass(frozen=True, slots=True)
class SeverityIndex:
    """Canonicalised lookup tables built once per cycle.

    Attributes:
        files: Canonical file path to worst severity.
        directories: Canonical directory path to worst severity of any
            strictly descendant file.
    """

    files: dict[str, SeverityLevel]
    directories: dict[str, SeverityLevel]

    @classmethod
    def build(cls, severity_map: Mapping[str, SeverityLevel]) -> SeverityIndex:
        """Canonicalise ``severity_map`` and roll severities up to ancestors.

        Args:
            severity_map: File path to worst severity.

        Returns:
            SeverityIndex: Lookup tables for files and directories.
        """

        files: dict[str, SeverityLevel] = {}
        for raw_path, severity in severity_map.items():
            path = canonical_path(raw_path)
            current = files.get(path)
            files[path] = severity if current is None else worst_of(current, severity)

        directories: dict[str, SeverityLevel] = {}
        for path, severity in files.items():
            for ancestor in strict_ancestors(path):
                current = directories.get(ancestor)
                directories[ancestor] = severity if current is None else worst_of(current, severity)
        return cls(files=files, directories=directories)


def match_nodes(
    severity_map: Mapping[str, SeverityLevel],
    nodes_by_line: LineNodeView,
    policy: MatchPolicy,
) -> dict[int, SeverityLevel]:
    """Return the severity to display for each visible line.

    Files match on canonical path equality. Directories take the worst
    severity of their strict descendants when ``policy`` allows it. Lines
    matching neither rule are absent from the result.

    Args:
        severity_map: File path to worst severity for the current cycle.
        nodes_by_line: Visible display line to node.
        policy: Directory roll-up visibility rules.

    Returns:
        dict[int, SeverityLevel]: Severity per annotated line.
    """

    index = SeverityIndex.build(severity_map)
    assignments: dict[int, SeverityLevel] = {}
    if not index.files:
        return assignments
    for line, node in nodes_by_line.items():
        severity = match_node(node, index, policy)
        if severity is not None:
            assignments[line] = severity
    return assignments


def match_node(node: TreeNodeLike, index: SeverityIndex, policy: MatchPolicy) -> SeverityLevel | None:
    """Return the severity for a single node, or ``None``.

    Args:
        node: Visible node to evaluate.
        index: Canonicalised lookup tables for the cycle.
        policy: Directory roll-up visibility rules.

    Returns:
        SeverityLevel | None: Severity to display, ``None`` when unmatched.
    """

    path = canonical_path(node.absolute_path)
    if node.is_directory:
        if not policy.allows(node):
            return None
        severity = index.directories.get(path)
        if severity is not None:
            LOGGER.debug("matched folder node '%s'", node.absolute_path)
        return severity
    severity = index.files.get(path)
    if severity is not None:
        LOGGER.debug("matched file node '%s'", node.absolute_path)
    return severity


__all__ = ["MatchPolicy", "SeverityIndex", "match_node", "match_nodes"]
