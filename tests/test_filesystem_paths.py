# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for canonical path handling."""

from __future__ import annotations

from pathlib import Path

import pytest

from treediag.filesystem import canonical_path, display_relative_path, is_strict_descendant, strict_ancestors


def test_backslash_and_slash_forms_are_equal() -> None:
    assert canonical_path("a\\b\\c.txt", base_dir="/work") == canonical_path("a/b/c.txt", base_dir="/work")
    assert canonical_path("a/b/c.txt", base_dir="/work") == "/work/a/b/c.txt"


def test_redundant_segments_collapse() -> None:
    assert canonical_path("/proj//src/./pkg/../main.py") == "/proj/src/main.py"
    assert canonical_path("/proj/src/") == "/proj/src"


def test_relative_path_is_anchored_at_cwd(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)

    assert canonical_path("pkg/mod.py") == f"{Path.cwd().as_posix()}/pkg/mod.py"


def test_drive_letter_is_upper_cased_and_case_otherwise_kept() -> None:
    assert canonical_path("c:\\Proj\\Main.LUA") == "C:/Proj/Main.LUA"
    assert canonical_path("C:/Proj/Main.LUA") == canonical_path("c:\\Proj\\Main.LUA")


def test_case_is_significant() -> None:
    assert canonical_path("/proj/Readme.md") != canonical_path("/proj/README.md")


def test_canonical_path_rejects_empty_input() -> None:
    with pytest.raises(ValueError):
        canonical_path("")
    with pytest.raises(ValueError):
        canonical_path(None)  # type: ignore[arg-type]


def test_strict_ancestors_walks_to_root() -> None:
    assert list(strict_ancestors("/proj/src/main.py")) == ["/proj/src", "/proj", "/"]
    assert list(strict_ancestors("/")) == []


def test_strict_ancestors_stop_at_drive_root() -> None:
    assert list(strict_ancestors("C:/proj/a.txt")) == ["C:/proj", "C:"]


def test_is_strict_descendant_respects_segment_boundaries() -> None:
    assert is_strict_descendant("/proj/a.txt", "/proj")
    assert is_strict_descendant("/proj/sub/a.txt", "/proj")
    assert not is_strict_descendant("/proj", "/proj")
    assert not is_strict_descendant("/project/a.txt", "/proj")
    assert is_strict_descendant("/proj", "/")


def test_display_relative_path(tmp_path: Path) -> None:
    target = tmp_path / "src" / "main.py"

    assert display_relative_path(target, tmp_path) == "src/main.py"
    assert display_relative_path(tmp_path, tmp_path) == "."
    assert display_relative_path("/elsewhere/x.py", tmp_path) == "/elsewhere/x.py"
