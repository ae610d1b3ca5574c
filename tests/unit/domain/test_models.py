from __future__ import annotations

"""
Unit tests for domain models, result factories and error types.
"""

from foldertree.domain.errors import (
    EmptyInputError,
    FormatErrorKind,
    NotFoundError,
    StructureValidationError,
    ValidationIssue,
)
from foldertree.domain.pipeline_models import (
    MaterializeFailure,
    create_creation_error,
    create_creation_success,
    create_generation_error,
    create_generation_success,
)
from foldertree.domain.tree_models import FileNode, TreeEntry, is_directory_node

# -----------------------------------------------------------------------------
# TREE MODELS
# -----------------------------------------------------------------------------

def test_is_directory_node() -> None:
    assert is_directory_node({}) is True
    assert is_directory_node({"a": FileNode("a")}) is True
    assert is_directory_node(FileNode("/x/a")) is False

# -----------------------------------------------------------------------------
# RESULT FACTORIES
# -----------------------------------------------------------------------------

def test_creation_success_summary() -> None:
    entries = [
        TreeEntry("a", True),
        TreeEntry("a/b.txt", False, level=1),
        TreeEntry("c.txt", False),
    ]
    result = create_creation_success(
        input_path="in.txt",
        target_dir="/out",
        entries=entries,
        created=["/out/a", "/out/a/b.txt"],
        existing=["/out/c.txt"],
        failures=[],
    )

    assert result.ok is True
    assert result.summary == {
        "entries": 3, "directories": 1, "files": 2,
        "created": 2, "existing": 1, "errors": 0,
    }


def test_creation_success_counts_failures() -> None:
    result = create_creation_success(
        input_path="",
        target_dir="/out",
        entries=[TreeEntry("a", True)],
        created=[],
        existing=[],
        failures=[MaterializeFailure(path="/out/a", error="denied")],
    )
    assert result.summary["errors"] == 1


def test_creation_error() -> None:
    result = create_creation_error("boom", "in.txt", "/out")
    assert result.ok is False
    assert result.error == "boom"
    assert result.entries == []


def test_generation_success_text_and_summary() -> None:
    lines = ["├── src/", "│   └── main.py", "└── README.md"]
    result = create_generation_success(
        source_dir="/proj",
        tree_lines=lines,
        output_path="",
        include_hidden=False,
        ignore_sources=["<defaults>"],
    )

    assert result.ok is True
    assert result.text == "├── src/\n│   └── main.py\n└── README.md\n"
    assert result.summary == {"lines": 3, "directories": 1, "files": 2}


def test_generation_error_has_no_text() -> None:
    result = create_generation_error("missing", "/proj", "", False)
    assert result.ok is False
    assert result.text == ""

# -----------------------------------------------------------------------------
# ERRORS
# -----------------------------------------------------------------------------

def test_validation_issue_str() -> None:
    issue = ValidationIssue(3, FormatErrorKind.INVALID_LINE_FORMAT, "Invalid line format")
    assert str(issue) == "Line 3: Invalid line format"


def test_structure_validation_error_aggregates_lines() -> None:
    error = StructureValidationError([
        ValidationIssue(1, FormatErrorKind.INVALID_CHARACTERS, "bad chars"),
        ValidationIssue(4, FormatErrorKind.INCONSISTENT_INDENTATION, "bad indent"),
    ])

    assert str(error) == "Line 1: bad chars\nLine 4: bad indent"
    assert error.kinds == [
        FormatErrorKind.INVALID_CHARACTERS,
        FormatErrorKind.INCONSISTENT_INDENTATION,
    ]


def test_empty_input_error_message() -> None:
    error = EmptyInputError()
    assert str(error) == "Input file is empty"
    assert error.kinds == [FormatErrorKind.EMPTY_INPUT]


def test_not_found_error_message() -> None:
    error = NotFoundError("/nope", "directory")
    assert error.path == "/nope"
    assert str(error) == "No such directory: '/nope'"
