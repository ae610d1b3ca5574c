from __future__ import annotations

"""
Unit tests for the Tree-Text Parser.

Verifies path reconstruction from indentation, directory detection by the
trailing slash and skipping of blank and separator lines.
"""

from foldertree.core.builder.parser import parse_tree_text
from foldertree.domain.tree_models import TreeEntry


def _pairs(entries):
    return [(e.relative_path, e.is_dir) for e in entries]


def test_parse_basic_structure(basic_tree_text):
    entries = parse_tree_text(basic_tree_text)

    assert _pairs(entries) == [
        ("folder1", True),
        ("folder1/file1.txt", False),
        ("folder1/file2.txt", False),
        ("folder2", True),
        ("folder2/subfolder", True),
        ("folder2/subfolder/file3.txt", False),
    ]


def test_parse_records_levels_and_line_numbers(basic_tree_text):
    entries = parse_tree_text(basic_tree_text)

    assert entries[0] == TreeEntry("folder1", True, level=0, line_number=1)
    # '│   ' holds three spaces, '    ' holds four
    assert entries[1].level == 1
    assert entries[4].level == 2
    assert entries[5].level == 4
    assert entries[5].line_number == 6


def test_parse_nested_structure(nested_tree_text):
    paths = [e.relative_path for e in parse_tree_text(nested_tree_text)]

    assert paths == [
        "api",
        "api/Dockerfile",
        "api/requirements.txt",
        "api/app",
        "api/app/__init__.py",
        "api/app/models",
        "api/app/models/__init__.py",
        "api/app/models/user.py",
        "api/app/routes",
        "api/app/routes/__init__.py",
        "api/app/routes/auth.py",
    ]


def test_parse_skips_blank_and_separator_lines():
    document = "├── folder1/\n│\n│   ├── file1.txt\n\n│   │\n└── folder2/"
    assert _pairs(parse_tree_text(document)) == [
        ("folder1", True),
        ("folder1/file1.txt", False),
        ("folder2", True),
    ]


def test_parse_siblings_after_deep_subtree():
    document = (
        "├── a/\n"
        "│   ├── b/\n"
        "│   │   └── c/\n"
        "│   │       └── d.txt\n"
        "│   └── e.txt\n"
        "└── f.txt\n"
    )
    assert [e.relative_path for e in parse_tree_text(document)] == [
        "a", "a/b", "a/b/c", "a/b/c/d.txt", "a/e.txt", "f.txt",
    ]


def test_parse_empty_document():
    assert parse_tree_text("") == []
