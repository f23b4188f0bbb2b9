# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Reference file tree and its line layout."""

from __future__ import annotations

from .filesystem import build_file_tree
from .model import FileTreeNode
from .view import FileTreeView, TreeLine

__all__ = ["FileTreeNode", "FileTreeView", "TreeLine", "build_file_tree"]
