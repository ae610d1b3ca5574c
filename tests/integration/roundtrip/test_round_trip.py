from __future__ import annotations

"""
Integration tests for the round trip between both directions.

Rendering a directory and feeding the text back into the creation path
must rebuild a structure with the same names and the same kinds.
"""

import os
from pathlib import Path
from typing import Set, Tuple

from foldertree.core.analysis.scanner import scan_directory
from foldertree.core.analysis.tree_renderer import render_tree_text
from foldertree.core.filtering.ignore_rules import IgnoreMatcher
from foldertree.core.grammar.validator import validate_structure
from foldertree.core.services.structure_service import FolderStructureManager


def _snapshot(root: Path) -> Set[Tuple[str, bool]]:
    """All relative paths under root with their directory flag."""
    seen: Set[Tuple[str, bool]] = set()
    for dirpath, dirnames, filenames in os.walk(root):
        rel_dir = os.path.relpath(dirpath, root)
        for name in dirnames:
            seen.add((os.path.normpath(os.path.join(rel_dir, name)), True))
        for name in filenames:
            seen.add((os.path.normpath(os.path.join(rel_dir, name)), False))
    return seen


def test_generate_then_create_is_isomorphic(tmp_path: Path, make_tree) -> None:
    source = tmp_path / "source"
    make_tree(source, {
        "src": {
            "components": {"Button.js": None, "Input.js": None},
            "utils": {"helpers.js": None},
            "index.js": None,
        },
        "docs": {},
        "tests": {"unit": {"button.test.js": None}},
        "package.json": None,
        "README.md": None,
    })

    text = render_tree_text(scan_directory(str(source), IgnoreMatcher(include_hidden=True)))
    assert validate_structure(text) is True

    target = tmp_path / "target"
    FolderStructureManager().create_from_string(text, str(target))

    assert _snapshot(target) == _snapshot(source)


def test_created_structure_renders_back_to_same_names(tmp_path: Path, nested_tree_text) -> None:
    target = tmp_path / "built"
    FolderStructureManager().create_from_string(nested_tree_text, str(target))

    lines = render_tree_text(scan_directory(str(target))).splitlines()
    names = sorted(line.rsplit(" ", 1)[-1] for line in lines)
    expected = sorted(line.rsplit(" ", 1)[-1] for line in nested_tree_text.splitlines())

    assert names == expected


def test_round_trip_of_filtered_tree_drops_ignored(tmp_path: Path, make_tree) -> None:
    source = tmp_path / "source"
    make_tree(source, {
        ".git": {"HEAD": None},
        "node_modules": {"lib": {"index.js": None}},
        "app": {"main.py": None, "__pycache__": {"main.cpython.pyc": None}},
        ".env": None,
    })

    manager = FolderStructureManager()
    text = manager.generate_text(str(source)).text
    target = tmp_path / "target"
    manager.create_from_string(text, str(target))

    assert _snapshot(target) == {("app", True), (os.path.join("app", "main.py"), False)}
