from __future__ import annotations

"""
Tree Renderer.

Converts the recursive Tree model into canonical tree text. Children are
emitted in their stored order; the last sibling takes the '└──' connector
and every nesting level adds exactly four filler characters, which is the
unit the grammar validator expects.
"""

from typing import List

from foldertree.domain.constants import (
    BRANCH_CONNECTOR,
    BRANCH_PREFIX,
    DIRECTORY_SUFFIX,
    LAST_CONNECTOR,
    LAST_PREFIX,
)
from foldertree.domain.tree_models import Tree, is_directory_node

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree_structure(tree_structure: Tree, lines: List[str], prefix: str = "") -> None:
    """
    Recursively transform the Tree model into a list of strings.

    Args:
        tree_structure: Current Tree node to process.
        lines: Accumulator list for output strings.
        prefix: Filler prefix for the current recursion level.
    """
    entries = list(tree_structure.items())
    total = len(entries)

    for i, (name, node) in enumerate(entries):
        is_last = (i == total - 1)
        connector = LAST_CONNECTOR if is_last else BRANCH_CONNECTOR

        if is_directory_node(node):
            lines.append(f"{prefix}{connector} {name}{DIRECTORY_SUFFIX}")
            new_prefix = prefix + (LAST_PREFIX if is_last else BRANCH_PREFIX)
            render_tree_structure(node, lines, prefix=new_prefix)
            continue

        lines.append(f"{prefix}{connector} {name}")


def render_tree_text(tree_structure: Tree) -> str:
    """
    Render a Tree as a document, one newline-terminated line per entry.

    An empty tree renders to an empty string.
    """
    lines: List[str] = []
    render_tree_structure(tree_structure, lines)
    return "".join(f"{line}\n" for line in lines)
