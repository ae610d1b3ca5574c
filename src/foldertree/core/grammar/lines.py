from __future__ import annotations

"""
Tree-Text Line Classification.

Splits a tree-text document into classified lines and provides the two
indent-level formulas used downstream. The validator measures the whole
filler run in units of four characters; the parser counts only the
literal spaces in the filler and halves them. Both formulas are kept
side by side because they accept different sets of non-canonical inputs.
"""

import re
from typing import List

from foldertree.domain.constants import CONNECTORS, FILLER_CHARS, INDENT_UNIT
from foldertree.domain.tree_models import LineKind, TreeLine

# -----------------------------------------------------------------------------
# REGEX CONSTANTS
# -----------------------------------------------------------------------------

_FILLER_CLASS = "[" + re.escape(FILLER_CHARS) + "]"
_CONNECTOR_ALT = "(?:" + "|".join(re.escape(c) for c in CONNECTORS) + ")"

FILLER_RX = re.compile(f"^{_FILLER_CLASS}*")
SEPARATOR_RX = re.compile(f"^{_FILLER_CLASS}*$")
ENTRY_LINE_RX = re.compile(f"^{_FILLER_CLASS}*{_CONNECTOR_ALT}\\s[A-Za-z0-9_.\\-/]+$")
CONNECTOR_PREFIX_RX = re.compile(f"^{_FILLER_CLASS}*{_CONNECTOR_ALT}\\s*")

BYTE_ORDER_MARK = "\ufeff"

# -----------------------------------------------------------------------------
# CLASSIFICATION
# -----------------------------------------------------------------------------

def classify_line(line: str, line_number: int) -> TreeLine:
    """
    Classify a raw document line.

    Trailing whitespace is discarded first. Lines made of nothing but
    spaces and vertical bars are separators; everything else is treated
    as an entry candidate, well-formed or not.

    Args:
        line: Raw line without its terminator.
        line_number: 1-based physical line number.

    Returns:
        TreeLine: The classified line.
    """
    trimmed = line.rstrip()
    if not trimmed:
        return TreeLine(line_number=line_number, raw=trimmed, kind=LineKind.EMPTY)
    if SEPARATOR_RX.match(trimmed):
        return TreeLine(line_number=line_number, raw=trimmed, kind=LineKind.SEPARATOR)

    filler = FILLER_RX.match(trimmed).group(0)
    return TreeLine(
        line_number=line_number,
        raw=trimmed,
        kind=LineKind.ENTRY,
        filler=filler,
        body=trimmed[len(filler):],
    )


def split_lines(document: str) -> List[TreeLine]:
    """Classify every physical line of a document, ignoring a leading BOM."""
    if document.startswith(BYTE_ORDER_MARK):
        document = document[len(BYTE_ORDER_MARK):]
    return [classify_line(line, i) for i, line in enumerate(document.splitlines(), start=1)]


def starts_with_connector(tree_line: TreeLine) -> bool:
    return tree_line.body.startswith(CONNECTORS)

# -----------------------------------------------------------------------------
# INDENT LEVELS
# -----------------------------------------------------------------------------

def validator_indent_level(filler: str) -> int:
    """Indent level as seen by the validator: every filler char counts."""
    return len(filler) // INDENT_UNIT


def parser_indent_level(filler: str) -> int:
    """Indent level as seen by the parser: only literal spaces count."""
    return filler.count(" ") // 2


def entry_name(tree_line: TreeLine) -> str:
    """
    Extract the raw entry name following the connector.

    The trailing '/' of directory names is preserved.
    """
    return CONNECTOR_PREFIX_RX.sub("", tree_line.raw, count=1).strip()
