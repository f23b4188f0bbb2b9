# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for matching per-file severities onto visible tree lines."""

from __future__ import annotations

from treediag.core.severity import SeverityLevel
from treediag.matching import MatchPolicy, SeverityIndex, match_nodes

E = SeverityLevel.ERROR
W = SeverityLevel.WARNING
H = SeverityLevel.HINT

ROLL_UP = MatchPolicy(show_on_dirs=True, show_on_open_dirs=True)


def test_files_match_on_exact_path(make_node) -> None:
    nodes = {1: make_node("/proj/a.txt"), 2: make_node("/proj/b.txt")}

    assert match_nodes({"/proj/a.txt": W}, nodes, MatchPolicy()) == {1: W}


def test_closed_directory_takes_worst_descendant(make_node) -> None:
    nodes = {1: make_node("/proj", is_directory=True, is_open=False)}
    severity_map = {"/proj/a.txt": E, "/proj/sub/b.txt": H}

    assert match_nodes(severity_map, nodes, ROLL_UP) == {1: E}


def test_open_directory_hidden_when_open_dirs_disabled(make_node) -> None:
    nodes = {
        1: make_node("/proj", is_directory=True, is_open=True),
        2: make_node("/proj/a.txt"),
    }
    policy = MatchPolicy(show_on_dirs=True, show_on_open_dirs=False)

    assert match_nodes({"/proj/a.txt": E}, nodes, policy) == {2: E}


def test_open_directory_annotated_when_open_dirs_enabled(make_node) -> None:
    nodes = {1: make_node("/proj", is_directory=True, is_open=True)}

    assert match_nodes({"/proj/a.txt": E}, nodes, ROLL_UP) == {1: E}


def test_directories_unannotated_without_show_on_dirs(make_node) -> None:
    nodes = {
        1: make_node("/proj", is_directory=True),
        2: make_node("/proj/a.txt"),
    }

    assert match_nodes({"/proj/a.txt": W}, nodes, MatchPolicy(show_on_dirs=False)) == {2: W}


def test_separator_styles_match_each_other(make_node) -> None:
    nodes = {1: make_node("C:\\proj\\b\\c.txt"), 2: make_node("/proj/b/d.txt")}
    severity_map = {"C:/proj/b/c.txt": W, "\\proj\\b\\d.txt": H}

    assert match_nodes(severity_map, nodes, MatchPolicy()) == {1: W, 2: H}


def test_sibling_with_common_prefix_does_not_roll_up(make_node) -> None:
    nodes = {1: make_node("/proj", is_directory=True)}

    assert match_nodes({"/proj-extra/a.txt": E, "/project/b.txt": E}, nodes, ROLL_UP) == {}


def test_diagnostic_on_directory_path_does_not_mark_directory(make_node) -> None:
    nodes = {1: make_node("/proj/sub", is_directory=True)}

    assert match_nodes({"/proj/sub": E}, nodes, ROLL_UP) == {}


def test_file_node_ignores_descendant_roll_up(make_node) -> None:
    nodes = {1: make_node("/proj/a")}

    assert match_nodes({"/proj/a/inner.txt": E}, nodes, ROLL_UP) == {}


def test_empty_severity_map_matches_nothing(make_node) -> None:
    nodes = {1: make_node("/proj", is_directory=True), 2: make_node("/proj/a.txt")}

    assert match_nodes({}, nodes, ROLL_UP) == {}


def test_nested_directories_each_roll_up(make_node) -> None:
    nodes = {
        1: make_node("/proj", is_directory=True),
        2: make_node("/proj/src", is_directory=True),
        3: make_node("/proj/docs", is_directory=True),
    }
    severity_map = {"/proj/src/main.py": W, "/proj/docs/index.md": H}

    assert match_nodes(severity_map, nodes, ROLL_UP) == {1: W, 2: W, 3: H}


def test_severity_index_merges_equivalent_keys() -> None:
    index = SeverityIndex.build({"/proj/a.txt": H, "/proj//a.txt": E})

    assert index.files == {"/proj/a.txt": E}
    assert index.directories["/proj"] == E
    assert index.directories["/"] == E


def test_match_policy_allows() -> None:
    class _Dir:
        is_open = True

    assert MatchPolicy(show_on_dirs=True, show_on_open_dirs=True).allows(_Dir())
    assert not MatchPolicy(show_on_dirs=True, show_on_open_dirs=False).allows(_Dir())
    assert not MatchPolicy(show_on_dirs=False, show_on_open_dirs=True).allows(_Dir())
