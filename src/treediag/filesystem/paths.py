# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for reasoning about filesystem paths."""

from __future__ import annotations

import os
import posixpath
from collections.abc import Iterator
from functools import lru_cache
from os import PathLike
from pathlib import Path
from typing import Final

_Pathish = str | PathLike[str] | Path
_DEFAULT_CACHE_SIZE: Final[int] = 4096
_SEPARATOR: Final[str] = "/"
_WINDOWS_SEPARATOR: Final[str] = "\\"
_DRIVE_SUFFIX: Final[str] = ":"


@lru_cache(maxsize=_DEFAULT_CACHE_SIZE)
def _canonical_text(raw: str, base: str) -> str:
    """Return the canonical form of ``raw`` anchored at ``base``.

    Args:
        raw: Path text with any separator style.
        base: Canonical directory used to anchor relative paths.

    Returns:
        str: Absolute, ``/``-separated, normalised path text.
    """

    text = raw.replace(_WINDOWS_SEPARATOR, _SEPARATOR)
    if not _is_absolute(text):
        text = f"{base.rstrip(_SEPARATOR)}{_SEPARATOR}{text}"
    text = posixpath.normpath(text)
    if _has_drive(text):
        text = text[0].upper() + text[1:]
    return text


def _is_absolute(text: str) -> bool:
    """Return ``True`` when ``text`` is rooted or carries a drive letter.

    Args:
        text: Path text already using ``/`` separators.

    Returns:
        bool: ``True`` for POSIX-rooted, UNC or drive-qualified paths.
    """

    return text.startswith(_SEPARATOR) or _has_drive(text)


def _has_drive(text: str) -> bool:
    """Return ``True`` when ``text`` starts with a Windows drive letter."""

    return len(text) >= 2 and text[0].isalpha() and text[1] == _DRIVE_SUFFIX


def canonical_path(path: _Pathish, *, base_dir: _Pathish | None = None) -> str:
    """Return the canonical comparison key for ``path``.

    Backslashes become ``/``, redundant separators and ``.``/``..`` segments
    collapse, relative paths are anchored at ``base_dir`` and drive letters are
    upper-cased. Letter case is otherwise preserved and the filesystem is never
    consulted, so the function is safe for paths that no longer exist.

    Args:
        path: Filesystem path supplied by the caller.
        base_dir: Directory anchoring relative paths. Defaults to
            ``Path.cwd()`` when omitted.

    Returns:
        str: Canonical absolute path text.

    Raises:
        ValueError: If ``path`` is ``None`` or empty.
    """

    if path is None:
        raise ValueError("path must not be None")
    raw = os.fspath(path)
    if not raw:
        raise ValueError("path must not be empty")
    base = os.fspath(Path.cwd() if base_dir is None else base_dir).replace(_WINDOWS_SEPARATOR, _SEPARATOR)
    if not _is_absolute(base):
        base = os.fspath(Path(base).absolute()).replace(_WINDOWS_SEPARATOR, _SEPARATOR)
    return _canonical_text(raw, base)


def strict_ancestors(canonical: str) -> Iterator[str]:
    """Yield every proper ancestor directory of a canonical path.

    Args:
        canonical: Path previously produced by :func:`canonical_path`.

    Yields:
        str: Ancestor paths from the immediate parent up to the root.
    """

    current = canonical
    while True:
        parent = posixpath.dirname(current)
        if not parent or parent == current:
            return
        yield parent
        current = parent


def is_strict_descendant(candidate: str, directory: str) -> bool:
    """Return ``True`` when ``candidate`` lies strictly below ``directory``.

    Args:
        candidate: Canonical path under test.
        directory: Canonical directory path.

    Returns:
        bool: ``True`` when ``candidate`` starts with ``directory + "/"``.
    """

    prefix = directory if directory.endswith(_SEPARATOR) else f"{directory}{_SEPARATOR}"
    return candidate != directory and candidate.startswith(prefix)


def display_relative_path(path: _Pathish, root: _Pathish) -> str:
    """Return a display-friendly representation of ``path`` relative to ``root``.

    Args:
        path: Path to present to the user.
        root: Base directory used for relativisation.

    Returns:
        str: Relative POSIX path when ``path`` lies under ``root``, otherwise the
        canonical absolute representation.
    """

    candidate = canonical_path(path)
    anchor = canonical_path(root)
    if candidate == anchor:
        return "."
    if is_strict_descendant(candidate, anchor):
        return posixpath.relpath(candidate, anchor)
    return candidate


__all__ = [
    "canonical_path",
    "display_relative_path",
    "is_strict_descendant",
    "strict_ancestors",
]
