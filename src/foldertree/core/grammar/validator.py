from __future__ import annotations

"""
Tree-Text Grammar Validator.

Acts as the gatekeeper in front of the structure builder: a document is
checked line by line and every violation is collected, so the caller gets
one aggregated report and nothing is written to disk for a bad input.
"""

import logging
from typing import List

from foldertree.core.grammar.lines import (
    ENTRY_LINE_RX,
    split_lines,
    starts_with_connector,
    validator_indent_level,
)
from foldertree.domain.errors import (
    ERROR_MESSAGES,
    EmptyInputError,
    FormatErrorKind,
    StructureValidationError,
    ValidationIssue,
)
from foldertree.domain.tree_models import LineKind
from foldertree.infra.fs import DEFAULT_ENCODING, read_text_file

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def collect_issues(document: str) -> List[ValidationIssue]:
    """
    Check a tree-text document and return every grammar violation.

    Rules, in order, for each non-blank, non-separator line:
    1. The filler prefix must be followed by a connector (InvalidCharacters).
    2. Exactly one whitespace then a name from [A-Za-z0-9_.-/] (InvalidLineFormat).
    3. The indent level may grow by at most one (InconsistentIndentation).

    Args:
        document: Full document text.

    Returns:
        List[ValidationIssue]: Violations in line order; empty when valid.
    """
    tree_lines = split_lines(document)
    entry_lines = [tl for tl in tree_lines if tl.kind is LineKind.ENTRY]
    if not entry_lines:
        return [EmptyInputError().issues[0]]

    issues: List[ValidationIssue] = []
    previous_level = 0

    for tl in entry_lines:
        if not starts_with_connector(tl):
            issues.append(_issue(tl.line_number, FormatErrorKind.INVALID_CHARACTERS))
            continue

        current_level = validator_indent_level(tl.filler)
        if not ENTRY_LINE_RX.match(tl.raw):
            issues.append(_issue(tl.line_number, FormatErrorKind.INVALID_LINE_FORMAT))
        elif current_level > previous_level + 1:
            issues.append(_issue(tl.line_number, FormatErrorKind.INCONSISTENT_INDENTATION))

        previous_level = current_level

    return issues


def validate_structure(document: str) -> bool:
    """
    Validate a tree-text document.

    Raises:
        EmptyInputError: If the document has no entry lines.
        StructureValidationError: With every offending line aggregated.

    Returns:
        bool: True when the document is well formed.
    """
    issues = collect_issues(document)
    if not issues:
        return True

    if issues[0].kind is FormatErrorKind.EMPTY_INPUT:
        logger.error(issues[0].message)
        raise EmptyInputError()

    error = StructureValidationError(issues)
    logger.error(f"Structure validation failed with {len(issues)} issue(s):\n{error}")
    raise error


def validate_structure_file(file_path: str, encoding: str = DEFAULT_ENCODING) -> bool:
    """
    Read and validate a tree-text file.

    Raises:
        NotFoundError: If the file does not exist.
        FolderTreeIOError: If the file cannot be read or decoded.
        StructureValidationError: If the content is malformed.
    """
    return validate_structure(read_text_file(file_path, encoding))

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _issue(line_number: int, kind: FormatErrorKind) -> ValidationIssue:
    return ValidationIssue(line_number=line_number, kind=kind, message=ERROR_MESSAGES[kind])
