from __future__ import annotations

"""
Domain Error Hierarchy.

Typed failures raised by the grammar validator, the structure builder and
the directory scanner. Validation failures carry every offending line so
callers can report them together.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence


class FormatErrorKind(str, Enum):
    """Classification of a tree-text grammar violation."""
    EMPTY_INPUT = "EmptyInput"
    INVALID_LINE_FORMAT = "InvalidLineFormat"
    INVALID_CHARACTERS = "InvalidCharacters"
    INCONSISTENT_INDENTATION = "InconsistentIndentation"


ERROR_MESSAGES = {
    FormatErrorKind.EMPTY_INPUT: "Input file is empty",
    FormatErrorKind.INVALID_LINE_FORMAT: "Invalid line format",
    FormatErrorKind.INVALID_CHARACTERS: "Invalid characters between separator and tree symbol",
    FormatErrorKind.INCONSISTENT_INDENTATION: "Inconsistent indentation level",
}


@dataclass(frozen=True)
class ValidationIssue:
    """
    A single grammar violation.

    Attributes:
        line_number: 1-based physical line number (0 for document-level issues).
        kind: Violation category.
        message: Human readable description.
    """
    line_number: int
    kind: FormatErrorKind
    message: str

    def __str__(self) -> str:
        if self.line_number <= 0:
            return self.message
        return f"Line {self.line_number}: {self.message}"


class FolderTreeError(Exception):
    """Base class for all domain failures."""


class NotFoundError(FolderTreeError):
    """Raised when an input file or source directory does not exist."""

    def __init__(self, path: str, what: str = "file or directory"):
        self.path = path
        super().__init__(f"No such {what}: '{path}'")


class StructureValidationError(FolderTreeError):
    """Raised when a tree-text document violates the line grammar."""

    def __init__(self, issues: Sequence[ValidationIssue]):
        self.issues: List[ValidationIssue] = list(issues)
        super().__init__("\n".join(str(issue) for issue in self.issues))

    @property
    def kinds(self) -> List[FormatErrorKind]:
        return [issue.kind for issue in self.issues]


class EmptyInputError(StructureValidationError):
    """Raised when a document holds no entry lines."""

    def __init__(self) -> None:
        super().__init__([
            ValidationIssue(
                line_number=0,
                kind=FormatErrorKind.EMPTY_INPUT,
                message=ERROR_MESSAGES[FormatErrorKind.EMPTY_INPUT],
            )
        ])


class FolderTreeIOError(FolderTreeError):
    """Wraps a filesystem or decoding failure that aborts an operation."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        self.cause = cause
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
