from __future__ import annotations

"""
Tree-Text Parser.

Rebuilds the nested path hierarchy encoded by indentation. A LIFO stack of
(name, level) frames tracks the current ancestry: an incoming entry pops
every frame at its own level or deeper, pushes itself, and its path is the
join of all names left on the stack.
"""

import logging
from typing import List

from foldertree.core.grammar.lines import entry_name, parser_indent_level, split_lines
from foldertree.domain.constants import DIRECTORY_SUFFIX
from foldertree.domain.tree_models import LineKind, PathFrame, TreeEntry

logger = logging.getLogger(__name__)


def parse_tree_text(document: str) -> List[TreeEntry]:
    """
    Convert a validated tree-text document into ordered entries.

    Blank and separator-only lines are skipped. The indent level of each
    entry is half the number of literal spaces in its filler.

    Args:
        document: Tree-text content that already passed validation.

    Returns:
        List[TreeEntry]: Entries in document order, parents before children.
    """
    entries: List[TreeEntry] = []
    stack: List[PathFrame] = []

    for tl in split_lines(document):
        if tl.kind is not LineKind.ENTRY:
            continue

        name = entry_name(tl)
        is_dir = name.endswith(DIRECTORY_SUFFIX)
        clean_name = name.rstrip(DIRECTORY_SUFFIX) if is_dir else name
        if not clean_name:
            logger.warning(f"Line {tl.line_number}: entry without a name skipped.")
            continue

        level = parser_indent_level(tl.filler)

        while stack and stack[-1].level >= level:
            stack.pop()
        stack.append(PathFrame(name=clean_name, level=level))

        relative_path = "/".join(frame.name for frame in stack)
        entries.append(TreeEntry(
            relative_path=relative_path,
            is_dir=is_dir,
            level=level,
            line_number=tl.line_number,
        ))

    logger.debug(f"Parsed {len(entries)} entries from tree text.")
    return entries
