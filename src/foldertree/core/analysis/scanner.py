from __future__ import annotations

"""
Directory Scanner.

Walks a source root depth-first and builds the ordered Tree model. Every
child is checked against the ignore matcher using its path relative to
the scan root; ignored entries and their subtrees are dropped, and so are
directories left empty by that filtering.
"""

import logging
import os
from typing import Optional

from foldertree.core.filtering.ignore_rules import IgnoreMatcher
from foldertree.domain.errors import FolderTreeIOError, NotFoundError
from foldertree.domain.tree_models import FileNode, Tree
from foldertree.infra.fs import list_children

logger = logging.getLogger(__name__)


def scan_directory(root: str, matcher: Optional[IgnoreMatcher] = None) -> Tree:
    """
    Build the filtered Tree for a directory.

    Children keep the order in which the filesystem lists them. The root
    itself is always returned, even when nothing survives filtering.

    Args:
        root: Directory to scan.
        matcher: Ignore rules; defaults to a matcher with the built-in table.

    Raises:
        NotFoundError: If root does not exist or is not a directory.
        FolderTreeIOError: If a directory cannot be listed.

    Returns:
        Tree: Nested ordered mapping of names to subtrees or FileNode leaves.
    """
    root_abs = os.path.abspath(root)
    if not os.path.isdir(root_abs):
        raise NotFoundError(root_abs, "directory")

    matcher = matcher if matcher is not None else IgnoreMatcher()
    logger.debug(f"Scanning directory: {root_abs}")
    return _scan(root_abs, "", matcher)


def _scan(directory: str, rel_dir: str, matcher: IgnoreMatcher) -> Tree:
    structure: Tree = {}

    try:
        children = list_children(directory)
    except OSError as e:
        raise FolderTreeIOError(f"Cannot list directory '{directory}'", e) from e

    for name, is_dir in children:
        rel_path = f"{rel_dir}/{name}" if rel_dir else name
        if matcher.ignores(rel_path, is_dir=is_dir):
            logger.debug(f"Ignored: {rel_path}{'/' if is_dir else ''}")
            continue

        full_path = os.path.join(directory, name)
        if not is_dir:
            structure[name] = FileNode(path=full_path)
            continue

        subtree = _scan(full_path, rel_path, matcher)
        if not subtree and _had_children(full_path):
            # Emptied purely by filtering
            logger.debug(f"Pruned empty directory: {rel_path}/")
            continue
        structure[name] = subtree

    return structure


def _had_children(directory: str) -> bool:
    try:
        return bool(list_children(directory))
    except OSError as e:
        raise FolderTreeIOError(f"Cannot list directory '{directory}'", e) from e
