from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the recursive tree type produced by the directory scanner, the
classified line model consumed by the grammar validator and parser, and
the flat entry list replayed by the materializer.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union

# -----------------------------------------------------------------------------
# SCANNED TREE
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileNode:
    """
    Represents a leaf entry (file) in the directory tree.

    Attributes:
        path: Absolute filesystem path to the file.
    """
    path: str

# Directory children keep insertion (listing) order; a nested dict is a
# directory, a FileNode is a leaf.
Tree = Dict[str, Union["Tree", FileNode]]


def is_directory_node(node: Union[Tree, FileNode]) -> bool:
    return isinstance(node, dict)

# -----------------------------------------------------------------------------
# TREE-TEXT LINES
# -----------------------------------------------------------------------------

class LineKind(str, Enum):
    EMPTY = "empty"
    SEPARATOR = "separator"
    ENTRY = "entry"


@dataclass(frozen=True)
class TreeLine:
    """
    One classified line of a tree-text document.

    Attributes:
        line_number: 1-based physical line number.
        raw: Line content with trailing whitespace removed.
        kind: Line classification.
        filler: Leading run of spaces and vertical bars.
        body: Remainder of the line after the filler.
    """
    line_number: int
    raw: str
    kind: LineKind
    filler: str = ""
    body: str = ""

# -----------------------------------------------------------------------------
# PARSED ENTRIES
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PathFrame:
    """Stack frame used while rebuilding paths from indentation."""
    name: str
    level: int


@dataclass(frozen=True)
class TreeEntry:
    """
    A file or directory to create, relative to the target root.

    Attributes:
        relative_path: Forward-slash separated path without trailing slash.
        is_dir: True for directory entries (name ended with '/').
        level: Indent level computed by the parser.
        line_number: Source line in the tree-text document.
    """
    relative_path: str
    is_dir: bool
    level: int = 0
    line_number: int = 0
